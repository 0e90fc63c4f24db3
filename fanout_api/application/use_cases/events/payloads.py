"""Builders for the events recorded by domain mutations."""

from __future__ import annotations

from dataclasses import dataclass, field

from fanout_api.domain.entities import (
    EVENT_CREATE_COMMENT,
    EVENT_SET_TAXONOMY_PARENT,
    EVENT_SET_UUID_STATE_RESTORE,
    EVENT_SET_UUID_STATE_TRASH,
)


@dataclass(frozen=True)
class EventPayload:
    """Everything needed to record an event except its id and date."""

    event_type: str
    actor_id: int
    object_id: int
    uuid_parameters: dict[str, int] = field(default_factory=dict)
    string_parameters: dict[str, str] = field(default_factory=dict)


def set_uuid_state_event(*, trashed: bool, actor_id: int, object_id: int) -> EventPayload:
    return EventPayload(
        event_type=EVENT_SET_UUID_STATE_TRASH if trashed else EVENT_SET_UUID_STATE_RESTORE,
        actor_id=actor_id,
        object_id=object_id,
    )


def set_taxonomy_parent_event(
    *,
    actor_id: int,
    child_id: int,
    previous_parent_id: int | None,
    parent_id: int | None,
) -> EventPayload:
    """Reparenting of ``child_id``; both parents are notified via ``from``/``to``."""

    uuid_parameters: dict[str, int] = {}
    if previous_parent_id is not None:
        uuid_parameters["from"] = previous_parent_id
    if parent_id is not None:
        uuid_parameters["to"] = parent_id
    return EventPayload(
        event_type=EVENT_SET_TAXONOMY_PARENT,
        actor_id=actor_id,
        object_id=child_id,
        uuid_parameters=uuid_parameters,
    )


def create_comment_event(*, actor_id: int, thread_id: int, comment_id: int) -> EventPayload:
    return EventPayload(
        event_type=EVENT_CREATE_COMMENT,
        actor_id=actor_id,
        object_id=comment_id,
        uuid_parameters={"discussion": thread_id},
    )


__all__ = [
    "EventPayload",
    "create_comment_event",
    "set_taxonomy_parent_event",
    "set_uuid_state_event",
]
