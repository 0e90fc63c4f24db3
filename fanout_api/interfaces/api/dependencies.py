"""FastAPI dependency utilities."""

from collections.abc import Generator

from fanout_api.infrastructure.connection import ConnectionContext, PooledCheckout


def get_connection_context() -> Generator[ConnectionContext, None, None]:
    """Check a connection out of the pool for one request and return it afterwards."""

    with PooledCheckout() as context:
        yield context
