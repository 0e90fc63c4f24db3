"""ORM models used by the application infrastructure."""

from .event_log import (
    EventLogModel,
    EventParameterModel,
    EventParameterStringModel,
    EventParameterUuidModel,
)
from .notification import NotificationEventModel, NotificationModel
from .subscription import SubscriptionModel
from .user import UserModel
from .uuid_object import EntityModel, UuidModel

__all__ = [
    "EntityModel",
    "EventLogModel",
    "EventParameterModel",
    "EventParameterStringModel",
    "EventParameterUuidModel",
    "NotificationEventModel",
    "NotificationModel",
    "SubscriptionModel",
    "UserModel",
    "UuidModel",
]
