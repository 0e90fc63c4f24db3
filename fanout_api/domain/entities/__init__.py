"""Domain entities exposed by the application."""

from .event import (
    EVENT_CREATE_COMMENT,
    EVENT_SET_TAXONOMY_PARENT,
    EVENT_SET_UUID_STATE_RESTORE,
    EVENT_SET_UUID_STATE_TRASH,
    EventRecord,
    SetTaxonomyParentEvent,
    SetUuidStateEvent,
    describe_event,
)
from .notification import Notification, NotificationList
from .subscription import Subscriber, Subscription
from .uuid_object import UuidObject

__all__ = [
    "EVENT_CREATE_COMMENT",
    "EVENT_SET_TAXONOMY_PARENT",
    "EVENT_SET_UUID_STATE_RESTORE",
    "EVENT_SET_UUID_STATE_TRASH",
    "EventRecord",
    "SetTaxonomyParentEvent",
    "SetUuidStateEvent",
    "describe_event",
    "Notification",
    "NotificationList",
    "Subscriber",
    "Subscription",
    "UuidObject",
]
