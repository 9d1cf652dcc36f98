"""In-Memory Game Store — dict-backed GameStore guarded by a lock.

Invariants:
    - One dict per store instance; nothing is shared between instances
    - Every read and write happens under self._lock
    - list_all() returns a snapshot in insertion order; later writes do not leak in
    - update() reads, transforms and writes back in one critical section, so a
      concurrent delete can never be undone by a late write

Design Decisions:
    - threading.Lock over asyncio.Lock: FastAPI may run handlers in its thread pool
    - Records are frozen dataclasses, so returning them without copying is safe
"""

import threading
from typing import Callable

from tictactoe.core.domain_types import GameId
from tictactoe.core.game_record import Game


class InMemoryGameStore:
    """Process-memory GameStore implementation."""

    def __init__(self) -> None:
        self._games: dict[GameId, Game] = {}
        self._lock = threading.Lock()

    def get(self, game_id: GameId) -> Game | None:
        with self._lock:
            return self._games.get(game_id)

    def list_all(self) -> list[Game]:
        with self._lock:
            return list(self._games.values())

    def save(self, game: Game) -> None:
        with self._lock:
            self._games[game.id] = game

    def update(
        self, game_id: GameId, transform: Callable[[Game], Game],
    ) -> Game | None:
        """Replace a game with transform(game); None if absent."""
        with self._lock:
            existing = self._games.get(game_id)
            if existing is None:
                return None
            updated = transform(existing)
            self._games[game_id] = updated
            return updated

    def delete(self, game_id: GameId) -> Game | None:
        with self._lock:
            return self._games.pop(game_id, None)

    def count(self) -> int:
        with self._lock:
            return len(self._games)
