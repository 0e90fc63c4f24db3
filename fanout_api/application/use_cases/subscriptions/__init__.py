"""Subscription registry use cases."""

from .list_subscriptions import list_subscriptions
from .set_subscriptions import set_subscriptions

__all__ = ["list_subscriptions", "set_subscriptions"]
