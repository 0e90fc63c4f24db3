"""Operations over the subscription registry."""

from __future__ import annotations

from fanout_api.application.operation import MessageModel, Operation, SuccessOutput
from fanout_api.application.use_cases.subscriptions import (
    list_subscriptions,
    set_subscriptions,
)
from fanout_api.infrastructure.connection import ConnectionContext


class SubscriptionOutput(MessageModel):
    object_id: int
    send_email: bool


class SubscriptionsOutput(MessageModel):
    user_id: int
    subscriptions: list[SubscriptionOutput]


class SubscriptionsQuery(Operation):
    user_id: int

    def execute(self, context: ConnectionContext) -> SubscriptionsOutput:
        with context.transaction() as session:
            subscriptions = list_subscriptions(session, self.user_id)
        return SubscriptionsOutput(
            user_id=self.user_id,
            subscriptions=[
                SubscriptionOutput(
                    object_id=subscription.object_id,
                    send_email=subscription.send_email,
                )
                for subscription in subscriptions
            ],
        )


class SubscriptionSetMutation(Operation):
    ids: list[int]
    user_id: int
    subscribe: bool
    send_email: bool = False

    def execute(self, context: ConnectionContext) -> SuccessOutput:
        with context.transaction() as session:
            set_subscriptions(
                session,
                self.ids,
                user_id=self.user_id,
                subscribe=self.subscribe,
                send_email=self.send_email,
            )
        return SuccessOutput(success=True)


__all__ = [
    "SubscriptionOutput",
    "SubscriptionSetMutation",
    "SubscriptionsOutput",
    "SubscriptionsQuery",
]
