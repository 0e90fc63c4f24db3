"""The operation contract shared by every query and mutation.

An operation is a decoded message payload. ``execute`` does the work against a
:class:`~fanout_api.infrastructure.connection.ConnectionContext` and either
returns an output model or raises an :class:`OperationError`. ``handle`` turns
that outcome into the HTTP response:

=====================  ======  =====================================
outcome                status  body
=====================  ======  =====================================
output                 200     output as camelCase JSON
NotFoundError          404     ``null``
BadRequest             400     ``{"success": false, "reason": ...}``
anything else          500     empty, the cause is only logged
=====================  ======  =====================================
"""

from __future__ import annotations

import logging

from fastapi import Response, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from fanout_api.application.errors import (
    BadRequest,
    InternalServerError,
    NotFoundError,
    OperationError,
)
from fanout_api.infrastructure.connection import ConnectionContext

logger = logging.getLogger(__name__)


class MessageModel(BaseModel):
    """Base for payloads and outputs exchanged as camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SuccessOutput(MessageModel):
    success: bool = True


class Operation(MessageModel):
    """A payload that knows how to execute itself."""

    def execute(self, context: ConnectionContext) -> BaseModel:
        """Run the operation and return its output; every operation overrides this.

        Classified failures are raised as :class:`OperationError` subclasses.
        """

        raise NotImplementedError

    def handle(self, operation_type: str, context: ConnectionContext) -> Response:
        try:
            output = self.execute(context)
            body = output.model_dump(mode="json", by_alias=True)
        except OperationError as error:
            return render_error(operation_type, error)
        except Exception as error:
            return render_error(operation_type, InternalServerError(error))
        return JSONResponse(content=body, status_code=status.HTTP_200_OK)


def render_error(operation_type: str, error: OperationError) -> Response:
    """Map a classified failure onto its response shape."""

    if isinstance(error, NotFoundError):
        return JSONResponse(content=None, status_code=status.HTTP_404_NOT_FOUND)
    if isinstance(error, BadRequest):
        return JSONResponse(
            content={"success": False, "reason": error.reason},
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    cause = error.error if isinstance(error, InternalServerError) else error
    logger.error("%s: %s", operation_type, error, exc_info=cause)
    return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


__all__ = ["MessageModel", "Operation", "SuccessOutput", "render_error"]
