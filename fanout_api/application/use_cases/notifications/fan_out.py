"""Turn one recorded event into notifications for everyone interested."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from fanout_api.domain.entities import EventRecord, Notification, Subscriber
from fanout_api.infrastructure.repositories import (
    NotificationRepository,
    SubscriptionRepository,
)

logger = logging.getLogger(__name__)


def collect_subscribers(session: Session, event: EventRecord) -> list[Subscriber]:
    """Return the users subscribed to any object of ``event``, actor excluded.

    Users are collapsed by id in the order they are first met, walking the
    primary object before the related ones. When a user has several
    subscriptions with different email preferences the first one wins.
    """

    repository = SubscriptionRepository(session)
    subscribers: dict[int, Subscriber] = {}
    for object_id in event.object_ids:
        for subscription in repository.fetch_by_object(object_id):
            if subscription.user_id == event.actor_id:
                continue
            subscribers.setdefault(
                subscription.user_id,
                Subscriber(
                    user_id=subscription.user_id, send_email=subscription.send_email
                ),
            )
    return list(subscribers.values())


def fan_out(session: Session, event: EventRecord) -> list[Notification]:
    """Create one notification per subscriber of ``event``.

    ``session`` must be inside the transaction that wrote ``event``. Nothing is
    committed here; if any insert fails the error propagates and the owner of
    the transaction rolls back the event together with every notification.
    """

    repository = NotificationRepository(session)
    notifications = [
        repository.create_for_event(
            event_id=event.id,
            user_id=subscriber.user_id,
            send_email=subscriber.send_email,
        )
        for subscriber in collect_subscribers(session, event)
    ]
    logger.debug(
        "Event %s (%s) fanned out to %d subscribers",
        event.id,
        event.event_type,
        len(notifications),
    )
    return notifications


__all__ = ["collect_subscribers", "fan_out"]
