"""Connection contexts handed to operations.

An operation never knows whether it owns its transaction. It asks the context
for one with ``with context.transaction() as session:`` and the context decides:

* :class:`PooledCheckout` checks a session out of the shared pool, opens a
  transaction per ``transaction()`` block (commit on success, rollback on any
  error) and returns the connection to the pool when the checkout ends.
* :class:`ExistingTransaction` wraps a session whose transaction an enclosing
  caller opened. Its ``transaction()`` block reuses that transaction and never
  commits or rolls it back; only the opener finalizes it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import AbstractContextManager, contextmanager
from types import TracebackType

from sqlalchemy.orm import Session, sessionmaker

from fanout_api.infrastructure.database import SessionLocal


class ConnectionContext(ABC):
    """Query-execution capability shared by both connection variants."""

    @abstractmethod
    def transaction(self) -> AbstractContextManager[Session]:
        """Return a context manager yielding a session inside a transaction."""


class PooledCheckout(ConnectionContext):
    """A session checked out from the pool for the lifetime of a ``with`` block."""

    def __init__(self, session_factory: sessionmaker | None = None) -> None:
        self._session_factory = session_factory or SessionLocal
        self._session: Session | None = None

    def __enter__(self) -> "PooledCheckout":
        if self._session is not None:
            raise RuntimeError("Connection is already checked out")
        self._session = self._session_factory()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        session, self._session = self._session, None
        if session is not None:
            # Rolls back anything still pending and returns the connection.
            session.close()

    @property
    def checked_out(self) -> bool:
        return self._session is not None

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        if self._session is None:
            raise RuntimeError("Connection must be checked out before use")
        with self._session.begin():
            yield self._session


class ExistingTransaction(ConnectionContext):
    """A transaction opened by a caller and borrowed by nested operations."""

    def __init__(self, session: Session) -> None:
        if not session.in_transaction():
            raise ValueError("ExistingTransaction requires an open transaction")
        self._session = session

    @contextmanager
    def transaction(self) -> Iterator[Session]:
        yield self._session


@contextmanager
def checkout(session_factory: sessionmaker | None = None) -> Iterator[PooledCheckout]:
    """Yield a :class:`PooledCheckout` that is always returned to the pool."""

    with PooledCheckout(session_factory) as context:
        yield context


__all__ = ["ConnectionContext", "ExistingTransaction", "PooledCheckout", "checkout"]
