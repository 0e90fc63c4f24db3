"""SQLAlchemy models for addressable objects."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.sql import expression

from fanout_api.infrastructure.database import Base
from fanout_api.utils import now_in_app_naive_datetime


class UuidModel(Base):
    """Every addressable object shares an id from this table."""

    __tablename__ = "uuid"

    id = Column(Integer, primary_key=True, index=True)
    trashed = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    discriminator = Column(String(45), nullable=False, index=True)


class EntityModel(Base):
    """Content entity, typed by ``type_id``."""

    __tablename__ = "entity"

    id = Column(Integer, ForeignKey("uuid.id"), primary_key=True)
    type_id = Column(Integer, nullable=False, index=True)
    date = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)


__all__ = ["EntityModel", "UuidModel"]
