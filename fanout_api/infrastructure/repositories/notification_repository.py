"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Collection, Iterable, Sequence
from itertools import groupby

from sqlalchemy import and_, or_, select, update
from sqlalchemy.orm import Session, aliased

from fanout_api.domain.entities import Notification
from fanout_api.infrastructure.models import (
    EntityModel,
    EventLogModel,
    EventParameterModel,
    EventParameterStringModel,
    EventParameterUuidModel,
    NotificationEventModel,
    NotificationModel,
    UuidModel,
)
from fanout_api.utils import ensure_app_timezone, now_in_app_naive_datetime


class NotificationRepository:
    """Provide query and state operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_for_user(
        self,
        user_id: int,
        *,
        excluded_discriminators: Collection[str],
        entity_type_ids: Collection[int],
    ) -> Sequence[Notification]:
        """Return the notifications of ``user_id`` newest first.

        A notification is hidden when the object of its event, or any object
        referenced by the event's parameters, is of an excluded kind or an
        entity of a type outside ``entity_type_ids``. Events carrying a string
        parameter are hidden as well.
        """

        excluded_discriminators = list(excluded_discriminators)
        entity_type_ids = list(entity_type_ids)
        primary = aliased(UuidModel)
        primary_entity = aliased(EntityModel)
        related = aliased(UuidModel)
        related_entity = aliased(EntityModel)

        excluded_related = (
            select(EventParameterModel.id)
            .join(
                EventParameterUuidModel,
                EventParameterUuidModel.event_parameter_id == EventParameterModel.id,
            )
            .join(related, related.id == EventParameterUuidModel.uuid_id)
            .outerjoin(related_entity, related_entity.id == related.id)
            .where(EventParameterModel.log_id == EventLogModel.id)
            .where(
                or_(
                    related.discriminator.in_(excluded_discriminators),
                    and_(
                        related_entity.type_id.is_not(None),
                        related_entity.type_id.not_in(entity_type_ids),
                    ),
                )
            )
            .correlate(EventLogModel)
        )
        string_parameter = (
            select(EventParameterModel.id)
            .join(
                EventParameterStringModel,
                EventParameterStringModel.event_parameter_id == EventParameterModel.id,
            )
            .where(EventParameterModel.log_id == EventLogModel.id)
            .correlate(EventLogModel)
        )

        query = (
            select(
                NotificationModel.id,
                NotificationModel.user_id,
                NotificationModel.date,
                NotificationModel.seen,
                NotificationModel.email,
                NotificationModel.email_sent,
                NotificationEventModel.event_log_id,
            )
            .join(
                NotificationEventModel,
                NotificationEventModel.notification_id == NotificationModel.id,
            )
            .join(EventLogModel, EventLogModel.id == NotificationEventModel.event_log_id)
            .join(primary, primary.id == EventLogModel.uuid_id)
            .outerjoin(primary_entity, primary_entity.id == EventLogModel.uuid_id)
            .where(NotificationModel.user_id == user_id)
            .where(primary.discriminator.not_in(excluded_discriminators))
            .where(
                or_(
                    primary_entity.type_id.is_(None),
                    primary_entity.type_id.in_(entity_type_ids),
                )
            )
            .where(~excluded_related.exists())
            .where(~string_parameter.exists())
            .order_by(NotificationModel.date.desc(), NotificationModel.id.desc())
        )

        rows = self.session.execute(query).all()
        return collapse_adjacent_duplicates(self._row_to_entity(row) for row in rows)

    def get(self, notification_id: int) -> Notification | None:
        row = self.session.execute(
            select(
                NotificationModel.id,
                NotificationModel.user_id,
                NotificationModel.date,
                NotificationModel.seen,
                NotificationModel.email,
                NotificationModel.email_sent,
                NotificationEventModel.event_log_id,
            )
            .join(
                NotificationEventModel,
                NotificationEventModel.notification_id == NotificationModel.id,
            )
            .where(NotificationModel.id == notification_id)
            .order_by(NotificationEventModel.id)
            .limit(1)
        ).first()
        return self._row_to_entity(row) if row else None

    def create_for_event(
        self, *, event_id: int, user_id: int, send_email: bool
    ) -> Notification:
        model = NotificationModel(
            user_id=user_id,
            date=now_in_app_naive_datetime(),
            seen=False,
            email=send_email,
            email_sent=False,
        )
        self.session.add(model)
        self.session.flush()
        self.session.add(
            NotificationEventModel(notification_id=model.id, event_log_id=event_id)
        )
        self.session.flush()
        return Notification(
            id=model.id,
            user_id=model.user_id,
            event_id=event_id,
            date=ensure_app_timezone(model.date),
            seen=False,
            email=send_email,
            email_sent=False,
        )

    def set_seen(self, notification_ids: Iterable[int], *, seen: bool) -> int:
        """Flip ``seen`` on every listed notification whose flag differs.

        Unknown ids match no row and are ignored. Returns the number of rows
        changed.
        """

        changed = 0
        for notification_id in notification_ids:
            result = self.session.execute(
                update(NotificationModel)
                .where(NotificationModel.id == notification_id)
                .where(NotificationModel.seen != seen)
                .values(seen=seen)
            )
            changed += result.rowcount or 0
        return changed

    @staticmethod
    def _row_to_entity(row) -> Notification:
        return Notification(
            id=row.id,
            user_id=row.user_id,
            event_id=row.event_log_id,
            date=ensure_app_timezone(row.date),
            seen=bool(row.seen),
            email=bool(row.email),
            email_sent=bool(row.email_sent),
        )


def collapse_adjacent_duplicates(
    notifications: Iterable[Notification],
) -> list[Notification]:
    """Keep the first of each run of notifications sharing an id.

    Only runs are collapsed, so callers must sort by a key that groups equal
    ids together (the ``date DESC, id DESC`` order of :meth:`list_for_user`).
    """

    return [next(group) for _, group in groupby(notifications, key=lambda n: n.id)]


__all__ = ["NotificationRepository", "collapse_adjacent_duplicates"]
