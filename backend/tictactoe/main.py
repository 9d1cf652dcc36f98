"""Tic-Tac-Toe API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TicTacToeError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner shutdown
    - REST and GraphQL mounted on the same app and share GameService via Depends
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tictactoe.api.dependencies import get_game_service
from tictactoe.api.error_handlers import register_error_handlers
from tictactoe.api.routes import game, graphql_endpoint, health, root
from tictactoe.config import get_settings
from tictactoe.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"{settings.app_name} {settings.app_version} started")
    yield
    logger.info(
        f"{settings.app_name} shutting down "
        f"({get_game_service().store.count()} games discarded)",
    )


settings = get_settings()
app = FastAPI(
    title="Tic-Tac-Toe API", version=settings.app_version, lifespan=lifespan,
)

# CORS: configured from settings, not hardcoded
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes: explicit registration
app.include_router(root.router)
app.include_router(health.router)
app.include_router(game.router)
app.include_router(graphql_endpoint.router)

register_error_handlers(app)
