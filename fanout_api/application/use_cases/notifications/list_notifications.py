"""Use case for listing the notifications of a user."""

from sqlalchemy.orm import Session

from fanout_api.config import get_settings
from fanout_api.domain.entities import NotificationList
from fanout_api.infrastructure.repositories import NotificationRepository


def list_notifications(session: Session, user_id: int) -> NotificationList:
    """Return the visible notifications of ``user_id``, newest first."""

    settings = get_settings()
    notifications = NotificationRepository(session).list_for_user(
        user_id,
        excluded_discriminators=settings.notification_excluded_discriminators,
        entity_type_ids=settings.notification_entity_type_ids,
    )
    return NotificationList(user_id=user_id, notifications=list(notifications))
