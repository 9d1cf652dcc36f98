"""FastAPI Dependencies — the shared GameService instance.

Invariants:
    - get_game_service() returns the same service (and store) for the process
    - Tests replace it through app.dependency_overrides, never by mutating it

Design Decisions:
    - lru_cache over a module-level global: lazily built, same pattern as get_settings()
"""

from functools import lru_cache

from tictactoe.infrastructure.memory_store import InMemoryGameStore
from tictactoe.services.game_service import GameService


@lru_cache
def get_game_service() -> GameService:
    return GameService(InMemoryGameStore())
