"""SQLAlchemy model for the user table."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String

from fanout_api.infrastructure.database import Base
from fanout_api.utils import now_in_app_naive_datetime


class UserModel(Base):
    """Database representation of a user; users are addressable objects too."""

    __tablename__ = "user"

    id = Column(Integer, ForeignKey("uuid.id"), primary_key=True)
    username = Column(String(32), nullable=False, unique=True)
    email = Column(String(254), nullable=False)
    date = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["UserModel"]
