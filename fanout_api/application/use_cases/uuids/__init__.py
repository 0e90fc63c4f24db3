"""Use cases acting on addressable objects."""

from .set_uuid_state import set_uuid_state

__all__ = ["set_uuid_state"]
