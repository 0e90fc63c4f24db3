"""Notification fan-out, listing and state changes."""

from .fan_out import collect_subscribers, fan_out
from .list_notifications import list_notifications
from .set_notification_state import set_notification_state

__all__ = [
    "collect_subscribers",
    "fan_out",
    "list_notifications",
    "set_notification_state",
]
