"""Boundary Protocols — contract between the game service and its store.

Invariants:
    - Core NEVER imports from infrastructure; dependency arrows point inward only
    - get/update/delete return None for unknown ids; they never raise for a miss
    - update() is atomic: transform runs on the stored record and its result is
      written back with no other write in between
    - Implementations provided by the shell via constructor injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - Synchronous methods: the only implementation is an in-memory mapping
"""

from typing import Callable, Protocol

from tictactoe.core.domain_types import GameId
from tictactoe.core.game_record import Game


class GameStore(Protocol):
    """Contract for game storage, implemented by infrastructure."""
    def get(self, game_id: GameId) -> Game | None: ...
    def list_all(self) -> list[Game]: ...
    def save(self, game: Game) -> None: ...
    def update(
        self, game_id: GameId, transform: Callable[[Game], Game],
    ) -> Game | None: ...
    def delete(self, game_id: GameId) -> Game | None: ...
    def count(self) -> int: ...
