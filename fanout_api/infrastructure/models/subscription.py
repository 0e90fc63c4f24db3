"""SQLAlchemy model for object subscriptions."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer

from fanout_api.infrastructure.database import Base
from fanout_api.utils import now_in_app_naive_datetime


class SubscriptionModel(Base):
    """A user following an object; (uuid_id, user_id) is not unique."""

    __tablename__ = "subscription"

    id = Column(Integer, primary_key=True, index=True)
    uuid_id = Column(Integer, ForeignKey("uuid.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    notify_mailman = Column(Boolean, nullable=False, default=False)
    date = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["SubscriptionModel"]
