"""Use case for recording an event and notifying its subscribers."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from fanout_api.application.use_cases.notifications import fan_out
from fanout_api.domain.entities import EventRecord
from fanout_api.domain.errors import MissingObject, MissingUser
from fanout_api.infrastructure.repositories import EventRepository, UuidRepository

from .payloads import EventPayload

logger = logging.getLogger(__name__)


def record_event(session: Session, payload: EventPayload) -> EventRecord:
    """Append ``payload`` to the event log and fan it out.

    Runs inside the caller's transaction so the event and its notifications
    become visible together, or not at all.
    """

    uuids = UuidRepository(session)
    if not uuids.user_exists(payload.actor_id):
        raise MissingUser(payload.actor_id)
    if uuids.get(payload.object_id) is None:
        raise MissingObject(payload.object_id)

    event = EventRepository(session).create(
        event_type=payload.event_type,
        actor_id=payload.actor_id,
        object_id=payload.object_id,
        uuid_parameters=payload.uuid_parameters,
        string_parameters=payload.string_parameters,
    )
    logger.info(
        "Recorded event %s (%s) by user %s on object %s",
        event.id,
        event.event_type,
        event.actor_id,
        event.object_id,
    )
    fan_out(session, event)
    return event


__all__ = ["record_event"]
