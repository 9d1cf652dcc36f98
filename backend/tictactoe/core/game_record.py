"""Game Record — the immutable tic-tac-toe game entity and its pure transforms.

Invariants:
    - new_game() always yields status IN_PROGRESS, move_number 0, next_turn == human_symbol
    - Missing symbols fall back to DEFAULT_HUMAN_SYMBOL / DEFAULT_AI_SYMBOL
    - merge_game() never touches id, status, next_turn, move_number or winner
    - merge_game() returns a new record; the original is left untouched
    - merge_game() rejects a null human_symbol / ai_symbol with ValidationFailedError

Design Decisions:
    - frozen dataclass: a stored record can only change by being replaced
    - Pure functions (no id generation, no store access): the service injects ids
"""

from dataclasses import dataclass, replace
from typing import Any

from tictactoe.core.errors import ValidationFailedError
from tictactoe.core.domain_types import (
    GameId, GameStatus, DEFAULT_HUMAN_SYMBOL, DEFAULT_AI_SYMBOL,
)

# Fields a client is allowed to overwrite after creation
MERGEABLE_FIELDS = frozenset({"human_symbol", "ai_symbol", "label"})
SYMBOL_FIELDS = ("human_symbol", "ai_symbol")


@dataclass(frozen=True)
class Game:
    """Static metadata of a single tic-tac-toe session."""
    id: GameId
    status: GameStatus
    human_symbol: str
    ai_symbol: str
    next_turn: str
    move_number: int = 0
    winner: str | None = None
    label: str | None = None


def new_game(
    game_id: GameId,
    human_symbol: str | None = None,
    ai_symbol: str | None = None,
    label: str | None = None,
) -> Game:
    """Build a fresh game with defaults applied."""
    human = human_symbol if human_symbol is not None else DEFAULT_HUMAN_SYMBOL
    ai = ai_symbol if ai_symbol is not None else DEFAULT_AI_SYMBOL
    return Game(
        id=game_id,
        status=GameStatus.IN_PROGRESS,
        human_symbol=human,
        ai_symbol=ai,
        next_turn=human,
        move_number=0,
        label=label,
    )


def merge_game(game: Game, changes: dict[str, Any]) -> Game:
    """Shallow-merge the given fields over an existing game.

    Keys outside MERGEABLE_FIELDS are dropped silently, mirroring how
    unknown JSON keys are ignored at the API boundary.
    """
    applicable = {k: v for k, v in changes.items() if k in MERGEABLE_FIELDS}
    nulled = [f for f in SYMBOL_FIELDS if f in applicable and applicable[f] is None]
    if nulled:
        raise ValidationFailedError(
            "Game symbols cannot be null",
            details=[
                {"field": f, "message": "cannot be null", "type": "null_symbol"}
                for f in nulled
            ],
        )
    if not applicable:
        return game
    return replace(game, **applicable)
