"""Errors raised while recording events."""

from __future__ import annotations


class EventError(Exception):
    """Base class for failures of the event layer."""


class MissingUser(EventError):
    """The acting user of an event does not exist."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"User with id {user_id} not found")
        self.user_id = user_id


class MissingObject(EventError):
    """The object an event is about does not exist."""

    def __init__(self, object_id: int) -> None:
        super().__init__(f"Object with id {object_id} not found")
        self.object_id = object_id


__all__ = ["EventError", "MissingObject", "MissingUser"]
