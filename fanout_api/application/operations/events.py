"""Operations exposing the event log."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from fanout_api.application.errors import NotFoundError
from fanout_api.application.operation import MessageModel, Operation
from fanout_api.application.use_cases.events import get_event
from fanout_api.domain.entities import EventRecord, describe_event
from fanout_api.infrastructure.connection import ConnectionContext


class EventOutput(MessageModel):
    id: int
    type: str
    actor_id: int
    object_id: int
    date: datetime
    uuid_parameters: dict[str, int]
    string_parameters: dict[str, str]
    details: dict[str, Any]

    @classmethod
    def from_entity(cls, event: EventRecord) -> "EventOutput":
        return cls(
            id=event.id,
            type=event.event_type,
            actor_id=event.actor_id,
            object_id=event.object_id,
            date=event.date,
            uuid_parameters=dict(event.uuid_parameters),
            string_parameters=dict(event.string_parameters),
            details=describe_event(event),
        )


class EventQuery(Operation):
    id: int

    def execute(self, context: ConnectionContext) -> EventOutput:
        with context.transaction() as session:
            event = get_event(session, self.id)
        if event is None:
            raise NotFoundError()
        return EventOutput.from_entity(event)


__all__ = ["EventOutput", "EventQuery"]
