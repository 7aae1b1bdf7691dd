"""
Application lifecycle event handlers.

Manages startup and shutdown of logging, the database engine and the
listening room.
"""

from typing import Callable

import structlog
from fastapi import FastAPI

from core.config import settings
from core.logging import configure_logging
from db.session import close_db, get_session_factory, init_db
from services.room_service import RoomService

logger = structlog.get_logger(__name__)


def create_start_app_handler(app: FastAPI) -> Callable:
    """Create startup event handler."""

    async def start_app() -> None:
        configure_logging()
        logger.info(f"Starting {settings.APP_NAME} API...", env=settings.APP_ENV)

        await init_db()

        # Tests may install their own room before startup
        if getattr(app.state, "room", None) is None:
            app.state.room = RoomService.from_settings(get_session_factory())

        logger.info(
            "Listening room ready",
            vote_window_minutes=settings.VOTE_WINDOW_MINUTES,
            fairness_lookback=settings.FAIRNESS_LOOKBACK,
            unseen_distance=settings.FAIRNESS_UNSEEN_DISTANCE,
        )

    return start_app


def create_stop_app_handler(app: FastAPI) -> Callable:
    """Create shutdown event handler."""

    async def stop_app() -> None:
        logger.info(f"Shutting down {settings.APP_NAME} API...")

        await close_db()
        app.state.room = None

        logger.info("Shutdown complete")

    return stop_app
