"""Shared fixtures: an in-memory database and helpers to seed it."""

from __future__ import annotations

import os
import sys
from datetime import datetime
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_TIMEZONE", "UTC")

from sqlalchemy import create_engine, func, select  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from fanout_api.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from fanout_api.infrastructure.database import initialize_database  # noqa: E402
from fanout_api.infrastructure.models import (  # noqa: E402
    EntityModel,
    EventLogModel,
    EventParameterModel,
    EventParameterStringModel,
    EventParameterUuidModel,
    NotificationEventModel,
    NotificationModel,
    SubscriptionModel,
    UserModel,
    UuidModel,
)


class Seeder:
    """Write fixture rows, each call in its own committed transaction."""

    def __init__(self, session_factory: sessionmaker) -> None:
        self.session_factory = session_factory
        self._users = 0

    def object(
        self,
        discriminator: str = "comment",
        *,
        type_id: int | None = None,
        trashed: bool = False,
    ) -> int:
        with self.session_factory.begin() as session:
            uuid = UuidModel(discriminator=discriminator, trashed=trashed)
            session.add(uuid)
            session.flush()
            if type_id is not None:
                session.add(EntityModel(id=uuid.id, type_id=type_id))
            return uuid.id

    def user(self) -> int:
        self._users += 1
        with self.session_factory.begin() as session:
            uuid = UuidModel(discriminator="user")
            session.add(uuid)
            session.flush()
            session.add(
                UserModel(
                    id=uuid.id,
                    username=f"user{self._users}",
                    email=f"user{self._users}@example.org",
                )
            )
            return uuid.id

    def subscribe(self, object_id: int, user_id: int, *, send_email: bool = False) -> None:
        with self.session_factory.begin() as session:
            session.add(
                SubscriptionModel(
                    uuid_id=object_id, user_id=user_id, notify_mailman=send_email
                )
            )

    def event(
        self,
        object_id: int,
        actor_id: int,
        *,
        event_type: str = "uuid/trash",
        uuid_parameters: dict[str, int] | None = None,
        string_parameters: dict[str, str] | None = None,
    ) -> int:
        with self.session_factory.begin() as session:
            event = EventLogModel(event_type=event_type, actor_id=actor_id, uuid_id=object_id)
            session.add(event)
            session.flush()
            for name, uuid_id in (uuid_parameters or {}).items():
                parameter = EventParameterModel(log_id=event.id, name=name)
                session.add(parameter)
                session.flush()
                session.add(
                    EventParameterUuidModel(event_parameter_id=parameter.id, uuid_id=uuid_id)
                )
            for name, value in (string_parameters or {}).items():
                parameter = EventParameterModel(log_id=event.id, name=name)
                session.add(parameter)
                session.flush()
                session.add(
                    EventParameterStringModel(event_parameter_id=parameter.id, value=value)
                )
            return event.id

    def notification(
        self,
        user_id: int,
        event_ids: int | list[int],
        *,
        id: int | None = None,
        seen: bool = False,
        date: datetime | None = None,
    ) -> int:
        if isinstance(event_ids, int):
            event_ids = [event_ids]
        with self.session_factory.begin() as session:
            notification = NotificationModel(
                id=id,
                user_id=user_id,
                seen=seen,
                email=False,
                date=date or datetime(2024, 1, 1, 12, 0),
            )
            session.add(notification)
            session.flush()
            for event_id in event_ids:
                session.add(
                    NotificationEventModel(
                        notification_id=notification.id, event_log_id=event_id
                    )
                )
            return notification.id

    def seen(self, notification_id: int) -> bool:
        with self.session_factory() as session:
            return session.scalar(
                select(NotificationModel.seen).where(NotificationModel.id == notification_id)
            )

    def notifications_for_event(self, event_id: int) -> list[tuple[int, bool]]:
        """Return ``(user_id, email)`` of every notification linked to ``event_id``."""

        with self.session_factory() as session:
            rows = session.execute(
                select(NotificationModel.user_id, NotificationModel.email)
                .join(
                    NotificationEventModel,
                    NotificationEventModel.notification_id == NotificationModel.id,
                )
                .where(NotificationEventModel.event_log_id == event_id)
                .order_by(NotificationModel.id)
            ).all()
            return [(row.user_id, bool(row.email)) for row in rows]

    def count(self, model) -> int:
        with self.session_factory() as session:
            return session.scalar(select(func.count()).select_from(model))


@pytest.fixture()
def engine():
    """Fresh in-memory database shared by every session of a test."""

    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    initialize_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine) -> sessionmaker:
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture()
def seed(session_factory) -> Seeder:
    return Seeder(session_factory)
