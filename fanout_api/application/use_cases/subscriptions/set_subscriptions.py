"""Use case for subscribing to or unsubscribing from objects."""

from collections.abc import Iterable

from sqlalchemy.orm import Session

from fanout_api.domain.entities import Subscription
from fanout_api.infrastructure.repositories import SubscriptionRepository


def set_subscriptions(
    session: Session,
    object_ids: Iterable[int],
    *,
    user_id: int,
    subscribe: bool,
    send_email: bool,
) -> None:
    """Follow (or stop following) every object in ``object_ids``."""

    repository = SubscriptionRepository(session)
    for object_id in object_ids:
        if subscribe:
            repository.save(
                Subscription(object_id=object_id, user_id=user_id, send_email=send_email)
            )
        else:
            repository.delete(object_id=object_id, user_id=user_id)
