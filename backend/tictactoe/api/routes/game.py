"""Game Routes — REST CRUD for /game.

Invariants:
    - POST /game → 201 with the created game
    - GET /game → 200 with every stored game
    - GET/PATCH/DELETE /game/{id} → 200 with the game, or 404 "Game not found"
    - An unknown id is 404 whatever the PATCH body holds, including no body at all
    - Optional fields that are null are omitted from responses

Design Decisions:
    - Misses raise GameNotFoundError; the global handler renders the 404 envelope
    - The service comes from get_game_service so tests can swap the store
"""

from fastapi import APIRouter, Depends, status

from tictactoe.api.dependencies import get_game_service
from tictactoe.core.errors import GameNotFoundError
from tictactoe.core.game_record import Game
from tictactoe.schemas.game import GameCreate, GameUpdate, GameResponse
from tictactoe.services.game_service import GameService

router = APIRouter(prefix="/game", tags=["game"])


def _found_or_404(game: Game | None, game_id: str, operation: str) -> GameResponse:
    if game is None:
        raise GameNotFoundError(game_id, operation)
    return GameResponse.from_game(game)


@router.post(
    "", response_model=GameResponse,
    status_code=status.HTTP_201_CREATED,
    response_model_exclude_none=True,
)
async def create_game(
    body: GameCreate | None = None,
    service: GameService = Depends(get_game_service),
):
    """Create a new game. Missing symbols default to X (human) and O (AI)."""
    body = body or GameCreate()
    game = service.create(
        human_symbol=body.human_symbol,
        ai_symbol=body.ai_symbol,
        label=body.label,
    )
    return GameResponse.from_game(game)


@router.get(
    "", response_model=list[GameResponse],
    response_model_exclude_none=True,
)
async def list_games(service: GameService = Depends(get_game_service)):
    """List every stored game."""
    return [GameResponse.from_game(g) for g in service.find_all()]


@router.get(
    "/{game_id}", response_model=GameResponse,
    response_model_exclude_none=True,
)
async def get_game(
    game_id: str, service: GameService = Depends(get_game_service),
):
    return _found_or_404(service.find_one(game_id), game_id, "find_one")


@router.patch(
    "/{game_id}", response_model=GameResponse,
    response_model_exclude_none=True,
)
async def update_game(
    game_id: str,
    body: GameUpdate | None = None,
    service: GameService = Depends(get_game_service),
):
    """Merge the provided fields over the stored game. No body changes nothing."""
    body = body or GameUpdate()
    game = service.update(game_id, body.changes())
    return _found_or_404(game, game_id, "update")


@router.delete(
    "/{game_id}", response_model=GameResponse,
    response_model_exclude_none=True,
)
async def delete_game(
    game_id: str, service: GameService = Depends(get_game_service),
):
    """Delete a game and return it as it was before deletion."""
    return _found_or_404(service.remove(game_id), game_id, "remove")
