"""SQLAlchemy models for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer
from sqlalchemy.sql import expression

from fanout_api.infrastructure.database import Base
from fanout_api.utils import now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation for user notifications."""

    __tablename__ = "notification"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    date = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    seen = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    email = Column(Boolean, nullable=False, default=False)
    email_sent = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )


class NotificationEventModel(Base):
    """Links a notification to the event it reports."""

    __tablename__ = "notification_event"

    id = Column(Integer, primary_key=True)
    notification_id = Column(
        Integer, ForeignKey("notification.id"), nullable=False, index=True
    )
    event_log_id = Column(
        Integer, ForeignKey("event_log.id"), nullable=False, index=True
    )


__all__ = ["NotificationEventModel", "NotificationModel"]
