"""Operations over the notifications of a user."""

from __future__ import annotations

from fanout_api.application.operation import MessageModel, Operation, SuccessOutput
from fanout_api.application.use_cases.notifications import (
    list_notifications,
    set_notification_state,
)
from fanout_api.domain.entities import NotificationList
from fanout_api.infrastructure.connection import ConnectionContext


class NotificationOutput(MessageModel):
    id: int
    unread: bool
    email_sent: bool
    email: bool
    event_id: int


class NotificationsOutput(MessageModel):
    user_id: int
    notifications: list[NotificationOutput]

    @classmethod
    def from_entity(cls, notification_list: NotificationList) -> "NotificationsOutput":
        return cls(
            user_id=notification_list.user_id,
            notifications=[
                NotificationOutput(
                    id=notification.id,
                    unread=notification.unread,
                    email_sent=notification.email_sent,
                    email=notification.email,
                    event_id=notification.event_id,
                )
                for notification in notification_list.notifications
            ],
        )


class NotificationsQuery(Operation):
    user_id: int

    def execute(self, context: ConnectionContext) -> NotificationsOutput:
        with context.transaction() as session:
            notification_list = list_notifications(session, self.user_id)
        return NotificationsOutput.from_entity(notification_list)


class NotificationSetStateMutation(Operation):
    ids: list[int]
    user_id: int
    unread: bool

    def execute(self, context: ConnectionContext) -> SuccessOutput:
        with context.transaction() as session:
            set_notification_state(session, self.ids, unread=self.unread)
        return SuccessOutput(success=True)


__all__ = [
    "NotificationOutput",
    "NotificationSetStateMutation",
    "NotificationsOutput",
    "NotificationsQuery",
]
