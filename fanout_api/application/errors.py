"""Classified failures raised by operations."""

from __future__ import annotations

from fanout_api.domain.errors import EventError, MissingUser


class OperationError(Exception):
    """Base class of the three failure kinds an operation may report."""


class BadRequest(OperationError):
    """The caller violated a precondition; ``reason`` is safe to show."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"BadRequest: {reason}")
        self.reason = reason


class NotFoundError(OperationError):
    """The requested resource does not exist."""

    def __init__(self) -> None:
        super().__init__("Requested value could not be found.")


class InternalServerError(OperationError):
    """Unexpected failure; ``error`` is logged but never sent to the caller."""

    def __init__(self, error: BaseException) -> None:
        super().__init__(f"InternalServerError: {error!r}")
        self.error = error


def from_event_error(error: EventError) -> OperationError:
    """Reclassify a failure of the event layer."""

    if isinstance(error, MissingUser):
        return BadRequest("acting user does not exist")
    return InternalServerError(error)


__all__ = [
    "BadRequest",
    "InternalServerError",
    "NotFoundError",
    "OperationError",
    "from_event_error",
]
