"""Decoding of the ``{"type": ..., "payload": ...}`` message envelope."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from fanout_api.application.errors import BadRequest
from fanout_api.application.operation import Operation
from fanout_api.application.operations import (
    EventQuery,
    NotificationSetStateMutation,
    NotificationsQuery,
    SubscriptionSetMutation,
    SubscriptionsQuery,
    UuidSetStateMutation,
)

OPERATIONS: dict[str, type[Operation]] = {
    "EventQuery": EventQuery,
    "NotificationsQuery": NotificationsQuery,
    "NotificationSetStateMutation": NotificationSetStateMutation,
    "SubscriptionsQuery": SubscriptionsQuery,
    "SubscriptionSetMutation": SubscriptionSetMutation,
    "UuidSetStateMutation": UuidSetStateMutation,
}


@dataclass(frozen=True)
class Message:
    type: str
    payload: Operation


def decode_message(data: Any) -> Message:
    """Resolve the operation named by ``data["type"]`` and validate its payload."""

    if not isinstance(data, dict):
        raise BadRequest("message must be a JSON object")

    operation_type = data.get("type")
    if not isinstance(operation_type, str):
        raise BadRequest("message type is missing")
    operation = OPERATIONS.get(operation_type)
    if operation is None:
        raise BadRequest(f"unknown message type {operation_type!r}")

    try:
        payload = operation.model_validate(data.get("payload", {}))
    except ValidationError as exc:
        raise BadRequest(_describe_validation_error(exc)) from exc
    return Message(type=operation_type, payload=payload)


def _describe_validation_error(error: ValidationError) -> str:
    details = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "payload"
        details.append(f"{location}: {item['msg']}")
    return "invalid payload (" + "; ".join(details) + ")"


__all__ = ["Message", "OPERATIONS", "decode_message"]
