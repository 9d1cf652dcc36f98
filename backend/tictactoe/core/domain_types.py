"""Domain Types — identity type, game status and symbol defaults.

Invariants:
    - GameId wraps the string form of a UUID4, opaque to every caller
    - GameStatus is the closed set of outcomes; only IN_PROGRESS is ever assigned
    - DEFAULT_HUMAN_SYMBOL / DEFAULT_AI_SYMBOL apply only at creation

Design Decisions:
    - NewType over dataclass wrapper: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON and GraphQL without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

GameId = NewType("GameId", str)


# ─── Defaults ────────────────────────────────────────────────────

DEFAULT_HUMAN_SYMBOL = "X"
DEFAULT_AI_SYMBOL = "O"


# ─── Enums ───────────────────────────────────────────────────────

class GameStatus(str, Enum):
    """Game outcome states. No operation transitions them yet."""
    IN_PROGRESS = "IN_PROGRESS"
    WON_HUMAN = "WON_HUMAN"
    WON_AI = "WON_AI"
    DRAW = "DRAW"
