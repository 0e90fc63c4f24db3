"""Use case for retrieving a single event."""

from sqlalchemy.orm import Session

from fanout_api.domain.entities import EventRecord
from fanout_api.infrastructure.repositories import EventRepository


def get_event(session: Session, event_id: int) -> EventRecord | None:
    return EventRepository(session).get(event_id)
