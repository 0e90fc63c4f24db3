"""Use case for trashing and restoring objects."""

from collections.abc import Iterable

from sqlalchemy.orm import Session

from fanout_api.application.errors import BadRequest
from fanout_api.application.use_cases.events import record_event, set_uuid_state_event
from fanout_api.infrastructure.repositories import UuidRepository


def set_uuid_state(
    session: Session, object_ids: Iterable[int], *, user_id: int, trashed: bool
) -> None:
    """Set the trashed flag of every object, recording an event per change.

    Raises :class:`BadRequest` when an id does not exist. Objects
    already in the requested state are skipped without an event.
    """

    repository = UuidRepository(session)
    for object_id in object_ids:
        uuid_object = repository.get(object_id)
        if uuid_object is None:
            raise BadRequest("UUID not found")
        if uuid_object.trashed == trashed:
            continue
        repository.set_trashed(object_id, trashed=trashed)
        record_event(
            session,
            set_uuid_state_event(trashed=trashed, actor_id=user_id, object_id=object_id),
        )
