"""Single endpoint dispatching enveloped operation messages."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Request, Response
from fastapi.exceptions import RequestValidationError

from fanout_api.application.errors import BadRequest
from fanout_api.application.operation import render_error
from fanout_api.infrastructure.connection import ConnectionContext
from fanout_api.interfaces.api.dependencies import get_connection_context
from fanout_api.interfaces.api.messages import decode_message

router = APIRouter(tags=["messages"])
logger = logging.getLogger(__name__)


@router.post("/")
def handle_message(
    envelope: Any = Body(...),
    context: ConnectionContext = Depends(get_connection_context),
) -> Response:
    """Decode the envelope and run the operation it names."""

    try:
        message = decode_message(envelope)
    except BadRequest as exc:
        logger.info("Rejected message: %s", exc.reason)
        return render_error("message", exc)
    return message.payload.handle(message.type, context)


def reject_undecodable_message(
    request: Request, exc: RequestValidationError
) -> Response:
    """Answer a missing or non-JSON body like any other malformed envelope.

    The parser's own error text stays in the log.
    """

    logger.info("Rejected message body: %s", exc.errors())
    return render_error("message", BadRequest("message must be a JSON object"))
