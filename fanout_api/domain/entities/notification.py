"""Domain entities representing user notifications."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Notification:
    """A notification about a single event delivered to ``user_id``."""

    id: int | None
    user_id: int
    event_id: int
    date: datetime | None = None
    seen: bool = False
    email: bool = False
    email_sent: bool = False

    @property
    def unread(self) -> bool:
        return not self.seen


@dataclass
class NotificationList:
    """Notifications visible to ``user_id``, newest first."""

    user_id: int
    notifications: list[Notification] = field(default_factory=list)


__all__ = ["Notification", "NotificationList"]
