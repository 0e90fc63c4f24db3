"""Event recording helpers."""

from .get_event import get_event
from .payloads import (
    EventPayload,
    create_comment_event,
    set_taxonomy_parent_event,
    set_uuid_state_event,
)
from .record_event import record_event

__all__ = [
    "EventPayload",
    "create_comment_event",
    "get_event",
    "record_event",
    "set_taxonomy_parent_event",
    "set_uuid_state_event",
]
