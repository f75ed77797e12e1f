"""
FastAPI application.

Run with: uvicorn src.api.app:app
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.api.routes import router
from src.core.config import get_settings
from src.core.exceptions import (
    GameError,
    GameStateError,
    IllegalMoveError,
    InvalidPositionError,
    InvalidRequestError,
    NotYourTurnError,
    RepositoryError,
)
from src.db.database import init_db

logger = logging.getLogger(__name__)

# Expected errors and how they are reported. Anything else deriving from GameError (InvalidCoordinateError,
# NoLegalMovesError) means the server itself misbehaved --> 500
ERROR_STATUS_CODES: dict[type[GameError], int] = {
    IllegalMoveError: status.HTTP_400_BAD_REQUEST,
    NotYourTurnError: status.HTTP_409_CONFLICT,
    GameStateError: status.HTTP_409_CONFLICT,
    RepositoryError: status.HTTP_404_NOT_FOUND,
    InvalidRequestError: status.HTTP_422_UNPROCESSABLE_CONTENT,
    InvalidPositionError: status.HTTP_422_UNPROCESSABLE_CONTENT,
}


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    init_db()
    yield


async def handle_game_error(_: Request, exc: Exception) -> JSONResponse:
    status_code = next(
        (
            code
            for error_type, code in ERROR_STATUS_CODES.items()
            if isinstance(exc, error_type)
        ),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error("Internal game error: %s", exc, exc_info=exc)
    else:
        logger.debug("Rejected request (%d): %s", status_code, exc)
    return JSONResponse(
        status_code=status_code,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title="Othello Game Backend",
        description="Rules engine and automated opponent for Othello / Reversi",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.add_exception_handler(GameError, handle_game_error)
    app.include_router(router)
    return app


app = create_app()
