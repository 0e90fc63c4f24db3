"""Repository implementations for infrastructure layer."""

from .event_repository import EventRepository
from .notification_repository import NotificationRepository, collapse_adjacent_duplicates
from .subscription_repository import SubscriptionRepository
from .uuid_repository import UuidRepository

__all__ = [
    "EventRepository",
    "NotificationRepository",
    "SubscriptionRepository",
    "UuidRepository",
    "collapse_adjacent_duplicates",
]
