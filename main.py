import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from fanout_api.config import get_settings
from fanout_api.infrastructure.database import engine, initialize_database
from fanout_api.interfaces.api.routes import register_routes


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables on startup and release pooled connections on shutdown."""

    initialize_database()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    logging.basicConfig(level=get_settings().log_level.upper())

    app = FastAPI(lifespan=lifespan)
    register_routes(app)
    return app


app = create_app()
