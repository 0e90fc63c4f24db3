"""SQLAlchemy models for the append-only event log."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from fanout_api.infrastructure.database import Base
from fanout_api.utils import now_in_app_naive_datetime


class EventLogModel(Base):
    """One row per recorded event."""

    __tablename__ = "event_log"

    id = Column(Integer, primary_key=True, index=True)
    event_type = Column(String(100), nullable=False, index=True)
    actor_id = Column(Integer, ForeignKey("user.id"), nullable=False, index=True)
    uuid_id = Column(Integer, ForeignKey("uuid.id"), nullable=False, index=True)
    date = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)

    parameters = relationship(
        "EventParameterModel",
        back_populates="event",
        order_by="EventParameterModel.id",
        lazy="selectin",
    )


class EventParameterModel(Base):
    """Named parameter slot of an event; holds a uuid or a string value."""

    __tablename__ = "event_parameter"

    id = Column(Integer, primary_key=True, index=True)
    log_id = Column(Integer, ForeignKey("event_log.id"), nullable=False, index=True)
    name = Column(String(255), nullable=False)

    event = relationship("EventLogModel", back_populates="parameters")
    uuid_value = relationship(
        "EventParameterUuidModel", uselist=False, lazy="joined"
    )
    string_value = relationship(
        "EventParameterStringModel", uselist=False, lazy="joined"
    )


class EventParameterUuidModel(Base):
    __tablename__ = "event_parameter_uuid"

    id = Column(Integer, primary_key=True)
    event_parameter_id = Column(
        Integer, ForeignKey("event_parameter.id"), nullable=False, index=True
    )
    uuid_id = Column(Integer, ForeignKey("uuid.id"), nullable=False, index=True)


class EventParameterStringModel(Base):
    __tablename__ = "event_parameter_string"

    id = Column(Integer, primary_key=True)
    event_parameter_id = Column(
        Integer, ForeignKey("event_parameter.id"), nullable=False, index=True
    )
    value = Column(Text, nullable=False)


__all__ = [
    "EventLogModel",
    "EventParameterModel",
    "EventParameterStringModel",
    "EventParameterUuidModel",
]
