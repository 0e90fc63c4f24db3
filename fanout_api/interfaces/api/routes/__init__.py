from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from .messages import reject_undecodable_message
from .messages import router as messages_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(messages_router)
    app.add_exception_handler(RequestValidationError, reject_undecodable_message)
