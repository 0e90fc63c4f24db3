"""Use case for listing what a user is subscribed to."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from fanout_api.domain.entities import Subscription
from fanout_api.infrastructure.repositories import SubscriptionRepository


def list_subscriptions(session: Session, user_id: int) -> Sequence[Subscription]:
    return SubscriptionRepository(session).fetch_by_user(user_id)
