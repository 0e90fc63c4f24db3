"""Persistence helpers for event records."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime

from sqlalchemy.orm import Session

from fanout_api.domain.entities import EventRecord
from fanout_api.infrastructure.models import (
    EventLogModel,
    EventParameterModel,
    EventParameterStringModel,
    EventParameterUuidModel,
)
from fanout_api.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_naive_datetime,
)


class EventRepository:
    """Append and read :class:`EventRecord` objects.

    The repository only flushes; committing belongs to whoever opened the
    surrounding transaction.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(
        self,
        *,
        event_type: str,
        actor_id: int,
        object_id: int,
        uuid_parameters: Mapping[str, int] | None = None,
        string_parameters: Mapping[str, str] | None = None,
        date: datetime | None = None,
    ) -> EventRecord:
        uuid_parameters = dict(uuid_parameters or {})
        string_parameters = dict(string_parameters or {})

        model = EventLogModel(
            event_type=event_type,
            actor_id=actor_id,
            uuid_id=object_id,
            date=ensure_app_naive_datetime(date) or now_in_app_naive_datetime(),
        )
        self.session.add(model)
        self.session.flush()

        for name, uuid_id in uuid_parameters.items():
            parameter = self._add_parameter(model.id, name)
            self.session.add(
                EventParameterUuidModel(event_parameter_id=parameter.id, uuid_id=uuid_id)
            )
        for name, value in string_parameters.items():
            parameter = self._add_parameter(model.id, name)
            self.session.add(
                EventParameterStringModel(event_parameter_id=parameter.id, value=value)
            )
        self.session.flush()

        return EventRecord(
            id=model.id,
            event_type=model.event_type,
            actor_id=model.actor_id,
            object_id=model.uuid_id,
            date=ensure_app_timezone(model.date),
            uuid_parameters=uuid_parameters,
            string_parameters=string_parameters,
        )

    def get(self, event_id: int) -> EventRecord | None:
        model = self.session.get(EventLogModel, event_id)
        return self._to_entity(model) if model else None

    def _add_parameter(self, log_id: int, name: str) -> EventParameterModel:
        parameter = EventParameterModel(log_id=log_id, name=name)
        self.session.add(parameter)
        self.session.flush()
        return parameter

    @staticmethod
    def _to_entity(model: EventLogModel) -> EventRecord:
        uuid_parameters: dict[str, int] = {}
        string_parameters: dict[str, str] = {}
        for parameter in model.parameters:
            if parameter.uuid_value is not None:
                uuid_parameters.setdefault(parameter.name, parameter.uuid_value.uuid_id)
            elif parameter.string_value is not None:
                string_parameters.setdefault(parameter.name, parameter.string_value.value)
        return EventRecord(
            id=model.id,
            event_type=model.event_type,
            actor_id=model.actor_id,
            object_id=model.uuid_id,
            date=ensure_app_timezone(model.date),
            uuid_parameters=uuid_parameters,
            string_parameters=string_parameters,
        )


__all__ = ["EventRepository"]
