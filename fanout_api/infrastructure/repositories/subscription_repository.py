"""Persistence helpers for subscriptions."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from fanout_api.domain.entities import Subscription
from fanout_api.infrastructure.models import SubscriptionModel


class SubscriptionRepository:
    """Look up who is interested in an object."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def fetch_by_object(self, object_id: int) -> Sequence[Subscription]:
        query = (
            select(SubscriptionModel)
            .where(SubscriptionModel.uuid_id == object_id)
            .order_by(SubscriptionModel.id)
        )
        return [self._to_entity(model) for model in self.session.scalars(query)]

    def fetch_by_user(self, user_id: int) -> Sequence[Subscription]:
        query = (
            select(SubscriptionModel)
            .where(SubscriptionModel.user_id == user_id)
            .order_by(SubscriptionModel.id)
        )
        return [self._to_entity(model) for model in self.session.scalars(query)]

    def save(self, subscription: Subscription) -> None:
        """Insert ``subscription`` or update the email flag of existing rows."""

        result = self.session.execute(
            update(SubscriptionModel)
            .where(
                SubscriptionModel.uuid_id == subscription.object_id,
                SubscriptionModel.user_id == subscription.user_id,
            )
            .values(notify_mailman=subscription.send_email)
        )
        if result.rowcount:
            return
        self.session.add(
            SubscriptionModel(
                uuid_id=subscription.object_id,
                user_id=subscription.user_id,
                notify_mailman=subscription.send_email,
            )
        )
        self.session.flush()

    def delete(self, *, object_id: int, user_id: int) -> None:
        self.session.execute(
            delete(SubscriptionModel)
            .where(
                SubscriptionModel.uuid_id == object_id,
                SubscriptionModel.user_id == user_id,
            )
        )

    @staticmethod
    def _to_entity(model: SubscriptionModel) -> Subscription:
        return Subscription(
            object_id=model.uuid_id,
            user_id=model.user_id,
            send_email=bool(model.notify_mailman),
        )


__all__ = ["SubscriptionRepository"]
