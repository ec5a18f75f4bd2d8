"""FastAPI application entry point."""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.api.routes import router
from src.core.config import Settings, get_settings
from src.core.exceptions import (
    GameError,
    GameNotFoundError,
    InvalidBoardError,
    InvalidStartingBoardError,
    MoveRejectedError,
)
from src.core.logging_config import configure_logging
from src.services.tictactoe_service import TicTacToeService
from src.store.memory_repository import InMemoryGameRepository
from src.store.sign_registry import SignRegistry
from src.tictactoe.opponent import RandomSource

logger = logging.getLogger(__name__)

# Caller mistakes. Anything else deriving from GameError is a broken invariant --> 500.
CLIENT_ERRORS: dict[type[GameError], int] = {
    InvalidBoardError: status.HTTP_400_BAD_REQUEST,
    InvalidStartingBoardError: status.HTTP_400_BAD_REQUEST,
    MoveRejectedError: status.HTTP_400_BAD_REQUEST,
    GameNotFoundError: status.HTTP_404_NOT_FOUND,
}


def create_app(
    settings: Optional[Settings] = None, rng: Optional[RandomSource] = None
) -> FastAPI:
    """Every app gets its own store and sign registry."""
    settings = settings if settings is not None else get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Tic-tac-toe API", debug=settings.debug)
    app.state.settings = settings
    app.state.service = TicTacToeService(
        repository=InMemoryGameRepository(),
        signs=SignRegistry(),
        rng=rng,
    )
    app.include_router(router)
    app.add_exception_handler(GameError, game_error_handler)
    return app


async def game_error_handler(request: Request, exc: Exception) -> JSONResponse:
    status_code = next(
        (
            code
            for error_type, code in CLIENT_ERRORS.items()
            if isinstance(exc, error_type)
        ),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(
            f"Unhandled game error on {request.method} {request.url.path}: {exc}",
            exc_info=exc,
        )
        return JSONResponse(status_code=status_code, content={"detail": "Internal error"})

    logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


def main() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
