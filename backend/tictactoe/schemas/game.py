"""Game Schemas — request and response models for /game and GraphQL inputs.

Invariants:
    - GameCreate: every field optional; defaults are applied by the core, not here
    - GameUpdate: partial form of GameCreate; explicit nulls are passed through and
      judged by core.merge_game (null label clears, null symbol is rejected)
    - Unknown keys are ignored on both inputs
    - GameResponse mirrors core.game_record.Game one-to-one

Design Decisions:
    - alias_generator=to_camel + populate_by_name: accepts camelCase from JSON and
      snake_case from GraphQL input containers with a single model
    - changes() uses exclude_unset so "omitted" and "explicit null" stay distinct
"""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from tictactoe.core.domain_types import GameStatus
from tictactoe.core.game_record import Game


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore",
    )


class GameCreate(_CamelModel):
    """Game creation: optional symbols and label."""
    human_symbol: str | None = None
    ai_symbol: str | None = None
    label: str | None = None

class GameUpdate(_CamelModel):
    """Game update: any subset of the creation fields."""
    human_symbol: str | None = None
    ai_symbol: str | None = None
    label: str | None = None

    def changes(self) -> dict[str, Any]:
        """Fields explicitly provided by the client, snake_case keys."""
        return self.model_dump(exclude_unset=True)


class GameResponse(_CamelModel):
    """Game response: public-facing game data."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: str
    status: GameStatus
    human_symbol: str
    ai_symbol: str
    next_turn: str
    move_number: int
    winner: str | None = None
    label: str | None = None

    @classmethod
    def from_game(cls, game: Game) -> "GameResponse":
        return cls.model_validate(game)
