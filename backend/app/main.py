import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import get_allowed_origins, get_next_question_delay
from app.models import ErrorResponse
from routes import game_ws, leaderboard, players, submissions
from services import InMemoryPersistenceGateway, PersistenceGateway, SessionController
from services.errors import BadRequestError, GameError

logger = logging.getLogger(__name__)


def create_app(
    gateway: PersistenceGateway | None = None,
    *,
    next_question_delay: float | None = None,
) -> FastAPI:
    """Build the API with its own controller; tests pass a gateway and a short delay."""
    gateway = gateway or InMemoryPersistenceGateway()
    if next_question_delay is None:
        next_question_delay = get_next_question_delay()
    controller = SessionController(gateway, next_question_delay=next_question_delay)

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        yield
        await controller.shutdown()

    app = FastAPI(title="Distance Game API", version="0.1.0", lifespan=lifespan)
    app.state.gateway = gateway
    app.state.controller = controller
    app.add_middleware(
        CORSMiddleware,
        allow_origins=get_allowed_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(GameError)
    async def game_error_handler(_request: Request, exc: GameError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error("[api] %s: %s", exc.reason, exc.message)
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=exc.message, reason=exc.reason).model_dump(),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        fields = sorted({str(err["loc"][-1]) for err in exc.errors() if err.get("loc")})
        message = f"Invalid or missing fields: {', '.join(fields)}" if fields else "Malformed request body."
        return await game_error_handler(request, BadRequestError(message))

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(players.router, prefix="/api")
    app.include_router(submissions.router, prefix="/api")
    app.include_router(leaderboard.router, prefix="/api")
    app.include_router(game_ws.router)
    return app


app = create_app()
