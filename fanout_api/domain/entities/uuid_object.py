"""Domain entity for addressable objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class UuidObject:
    """Anything notifications can be about: comments, entities, users, ..."""

    id: int
    discriminator: str
    trashed: bool = False


__all__ = ["UuidObject"]
