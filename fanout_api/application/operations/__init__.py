"""Operations reachable through the message envelope."""

from .events import EventQuery
from .notifications import NotificationSetStateMutation, NotificationsQuery
from .subscriptions import SubscriptionSetMutation, SubscriptionsQuery
from .uuids import UuidSetStateMutation

__all__ = [
    "EventQuery",
    "NotificationSetStateMutation",
    "NotificationsQuery",
    "SubscriptionSetMutation",
    "SubscriptionsQuery",
    "UuidSetStateMutation",
]
