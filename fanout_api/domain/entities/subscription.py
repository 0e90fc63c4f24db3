"""Domain entities for object subscriptions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Subscription:
    """``user_id`` wants to hear about changes to ``object_id``."""

    object_id: int
    user_id: int
    send_email: bool


@dataclass(frozen=True)
class Subscriber:
    """A user interested in an event, collapsed across subscriptions."""

    user_id: int
    send_email: bool


__all__ = ["Subscriber", "Subscription"]
