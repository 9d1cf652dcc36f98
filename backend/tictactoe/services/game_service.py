"""Game Service — create/list/get/update/delete over a GameStore.

Invariants:
    - create() always succeeds and stores the new game before returning it
    - find_one/update/remove return None for unknown ids (the not-found sentinel)
    - update() shallow-merges; fields not provided keep their stored value
    - update() merges inside store.update, so it never resurrects a removed game
    - update() checks existence before field rules: an unknown id is always "not found"
    - remove() returns the record as it was just before deletion

Design Decisions:
    - Store and id factory injected through the constructor: tests get a fresh
      store per test, production gets one store per process
    - uuid4 ids: collision probability negligible over the process lifetime
"""

import logging
import uuid
from typing import Any, Callable

from tictactoe.core.domain_types import GameId
from tictactoe.core.game_record import Game, new_game, merge_game
from tictactoe.core.repository_protocols import GameStore

logger = logging.getLogger(__name__)


def _uuid4_id() -> GameId:
    return GameId(str(uuid.uuid4()))


class GameService:
    """Pass-through game operations over the injected store."""

    def __init__(
        self,
        store: GameStore,
        id_factory: Callable[[], GameId] = _uuid4_id,
    ):
        self._store = store
        self._id_factory = id_factory

    @property
    def store(self) -> GameStore:
        return self._store

    def create(
        self,
        human_symbol: str | None = None,
        ai_symbol: str | None = None,
        label: str | None = None,
    ) -> Game:
        game = new_game(
            self._id_factory(),
            human_symbol=human_symbol, ai_symbol=ai_symbol, label=label,
        )
        self._store.save(game)
        logger.info(
            "Game created",
            extra={"game_id": game.id, "operation": "create"},
        )
        return game

    def find_all(self) -> list[Game]:
        return self._store.list_all()

    def find_one(self, game_id: str) -> Game | None:
        game = self._store.get(GameId(game_id))
        if game is None:
            _log_miss(game_id, "find_one")
        return game

    def update(self, game_id: str, changes: dict[str, Any]) -> Game | None:
        merged = self._store.update(
            GameId(game_id), lambda existing: merge_game(existing, changes),
        )
        if merged is None:
            _log_miss(game_id, "update")
            return None
        logger.info(
            f"Game updated ({', '.join(sorted(changes)) or 'no fields'})",
            extra={"game_id": game_id, "operation": "update"},
        )
        return merged

    def remove(self, game_id: str) -> Game | None:
        removed = self._store.delete(GameId(game_id))
        if removed is None:
            _log_miss(game_id, "remove")
            return None
        logger.info(
            "Game removed",
            extra={"game_id": game_id, "operation": "remove"},
        )
        return removed


def _log_miss(game_id: str, operation: str) -> None:
    logger.info(
        "Game not found",
        extra={"game_id": game_id, "operation": operation},
    )
