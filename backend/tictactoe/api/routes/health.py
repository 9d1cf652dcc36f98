"""Health & Readiness Checks — liveness and readiness endpoints.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 200 with the number of stored games

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness gates traffic
    - The in-memory store cannot be unreachable, so readiness only reports its size
"""

import logging
from fastapi import APIRouter, Depends, status

from tictactoe.api.dependencies import get_game_service
from tictactoe.config import get_settings
from tictactoe.services.game_service import GameService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
    }


@router.get("/ready")
async def readiness_check(service: GameService = Depends(get_game_service)):
    """Readiness check: reports the store size."""
    return {
        "status": "ready",
        "checks": {"store": {"games": service.store.count()}},
    }
