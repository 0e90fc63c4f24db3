"""Domain entities describing recorded events."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

EVENT_SET_UUID_STATE_TRASH = "uuid/trash"
EVENT_SET_UUID_STATE_RESTORE = "uuid/restore"
EVENT_SET_TAXONOMY_PARENT = "taxonomy/term/parent/change"
EVENT_CREATE_COMMENT = "discussion/comment/create"


@dataclass(frozen=True)
class EventRecord:
    """Immutable fact describing what ``actor_id`` did to ``object_id``.

    ``uuid_parameters`` maps named slots (``from``, ``to``, ...) to the ids of
    related objects. Several slots may point at the same object.
    """

    id: int
    event_type: str
    actor_id: int
    object_id: int
    date: datetime
    uuid_parameters: dict[str, int] = field(default_factory=dict)
    string_parameters: dict[str, str] = field(default_factory=dict)

    @property
    def related_object_ids(self) -> list[int]:
        return list(self.uuid_parameters.values())

    @property
    def object_ids(self) -> list[int]:
        """Primary object followed by every related object."""

        return [self.object_id, *self.related_object_ids]


@dataclass(frozen=True)
class SetTaxonomyParentEvent:
    """A taxonomy term moved from ``previous_parent_id`` to ``parent_id``."""

    child_id: int
    previous_parent_id: int | None
    parent_id: int | None

    @classmethod
    def from_record(cls, record: EventRecord) -> "SetTaxonomyParentEvent":
        return cls(
            child_id=record.object_id,
            previous_parent_id=record.uuid_parameters.get("from"),
            parent_id=record.uuid_parameters.get("to"),
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "childId": self.child_id,
            "previousParentId": self.previous_parent_id,
            "parentId": self.parent_id,
        }


@dataclass(frozen=True)
class SetUuidStateEvent:
    object_id: int
    trashed: bool

    @classmethod
    def from_record(cls, record: EventRecord) -> "SetUuidStateEvent":
        return cls(
            object_id=record.object_id,
            trashed=record.event_type == EVENT_SET_UUID_STATE_TRASH,
        )

    def as_dict(self) -> dict[str, Any]:
        return {"objectId": self.object_id, "trashed": self.trashed}


_EVENT_VIEWS = {
    EVENT_SET_TAXONOMY_PARENT: SetTaxonomyParentEvent,
    EVENT_SET_UUID_STATE_TRASH: SetUuidStateEvent,
    EVENT_SET_UUID_STATE_RESTORE: SetUuidStateEvent,
}


def describe_event(record: EventRecord) -> dict[str, Any]:
    """Return the type specific fields of ``record`` (empty for generic events)."""

    view = _EVENT_VIEWS.get(record.event_type)
    if view is None:
        return {}
    return view.from_record(record).as_dict()


__all__ = [
    "EVENT_CREATE_COMMENT",
    "EVENT_SET_TAXONOMY_PARENT",
    "EVENT_SET_UUID_STATE_RESTORE",
    "EVENT_SET_UUID_STATE_TRASH",
    "EventRecord",
    "SetTaxonomyParentEvent",
    "SetUuidStateEvent",
    "describe_event",
]
