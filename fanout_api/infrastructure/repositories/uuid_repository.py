"""Persistence helpers for addressable objects and users."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from fanout_api.domain.entities import UuidObject
from fanout_api.infrastructure.models import UserModel, UuidModel


class UuidRepository:
    """Read and flag :class:`UuidObject` rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, object_id: int) -> UuidObject | None:
        model = self.session.get(UuidModel, object_id)
        return self._to_entity(model) if model else None

    def set_trashed(self, object_id: int, *, trashed: bool) -> None:
        model = self.session.get(UuidModel, object_id)
        if model is None:
            msg = f"Object with id {object_id} not found"
            raise ValueError(msg)
        model.trashed = trashed
        self.session.flush()

    def user_exists(self, user_id: int) -> bool:
        query = select(UserModel.id).where(UserModel.id == user_id)
        return self.session.execute(query).first() is not None

    @staticmethod
    def _to_entity(model: UuidModel) -> UuidObject:
        return UuidObject(
            id=model.id,
            discriminator=model.discriminator,
            trashed=bool(model.trashed),
        )


__all__ = ["UuidRepository"]
