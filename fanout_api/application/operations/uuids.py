"""Operations acting on addressable objects."""

from __future__ import annotations

from fanout_api.application.errors import from_event_error
from fanout_api.application.operation import Operation, SuccessOutput
from fanout_api.application.use_cases.uuids import set_uuid_state
from fanout_api.domain.errors import EventError
from fanout_api.infrastructure.connection import ConnectionContext


class UuidSetStateMutation(Operation):
    """Trash or restore objects; every change is recorded as an event."""

    ids: list[int]
    user_id: int
    trashed: bool

    def execute(self, context: ConnectionContext) -> SuccessOutput:
        try:
            with context.transaction() as session:
                set_uuid_state(
                    session, self.ids, user_id=self.user_id, trashed=self.trashed
                )
        except EventError as exc:
            raise from_event_error(exc) from exc
        return SuccessOutput(success=True)


__all__ = ["UuidSetStateMutation"]
