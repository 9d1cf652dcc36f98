"""GraphQL Schema — graphene types, queries and mutations over GameService.

Exposed operations:
    * ``hello`` → static greeting
    * ``games`` → ``[Game!]!``
    * ``game(id: String!)`` → ``Game``
    * ``createGame(input: CreateGameDto!)`` → ``Game!``
    * ``updateGame(id: String!, input: UpdateGameDto!)`` → ``Game``
    * ``removeGame(id: String!)`` → ``Game``

Invariants:
    - game, updateGame and removeGame on an unknown id resolve to null AND
      report a "Game not found" error (extensions.code = GAME_NOT_FOUND)
    - updateGame with a null symbol on an existing game reports
      "Game symbols cannot be null" (extensions.code = VALIDATION_ERROR)
    - Resolvers read the service from info.context["service"]; no global state
    - Input containers are validated through the same pydantic schemas as REST

Design Decisions:
    - Code-first graphene schema: field names auto-camelCased from snake_case
    - Input type names kept as CreateGameDto / UpdateGameDto for client compatibility
"""

from functools import lru_cache

import graphene

from tictactoe.core.domain_types import GameStatus
from tictactoe.core.errors import GameNotFoundError
from tictactoe.schemas.game import GameCreate, GameUpdate
from tictactoe.services.game_service import GameService

GameStatusEnum = graphene.Enum.from_enum(GameStatus)


class GameType(graphene.ObjectType):
    class Meta:
        name = "Game"

    id = graphene.ID(required=True)
    status = graphene.Field(GameStatusEnum, required=True)
    human_symbol = graphene.String(required=True)
    ai_symbol = graphene.String(required=True)
    next_turn = graphene.String(required=True)
    move_number = graphene.Int(required=True)
    winner = graphene.String()
    label = graphene.String()


class CreateGameInput(graphene.InputObjectType):
    class Meta:
        name = "CreateGameDto"

    human_symbol = graphene.String()
    ai_symbol = graphene.String()
    label = graphene.String()


class UpdateGameInput(graphene.InputObjectType):
    class Meta:
        name = "UpdateGameDto"

    human_symbol = graphene.String()
    ai_symbol = graphene.String()
    label = graphene.String()


def _service(info) -> GameService:
    return info.context["service"]


class Query(graphene.ObjectType):
    hello = graphene.String(required=True)
    games = graphene.List(
        graphene.NonNull(GameType), required=True,
        description="Every stored game",
    )
    game = graphene.Field(
        GameType, game_id=graphene.String(required=True, name="id"),
        description="A single game by id",
    )

    def resolve_hello(root, info):
        return "Hello World from GraphQL!"

    def resolve_games(root, info):
        return _service(info).find_all()

    def resolve_game(root, info, game_id):
        game = _service(info).find_one(game_id)
        if game is None:
            raise GameNotFoundError(game_id, "game")
        return game


class Mutation(graphene.ObjectType):
    create_game = graphene.Field(
        graphene.NonNull(GameType),
        game_input=CreateGameInput(required=True, name="input"),
    )
    update_game = graphene.Field(
        GameType,
        game_id=graphene.String(required=True, name="id"),
        game_input=UpdateGameInput(required=True, name="input"),
    )
    remove_game = graphene.Field(
        GameType, game_id=graphene.String(required=True, name="id"),
    )

    def resolve_create_game(root, info, game_input):
        # Container is a dict of the fields the client actually sent
        body = GameCreate.model_validate(dict(game_input))
        return _service(info).create(
            human_symbol=body.human_symbol,
            ai_symbol=body.ai_symbol,
            label=body.label,
        )

    def resolve_update_game(root, info, game_id, game_input):
        body = GameUpdate.model_validate(dict(game_input))
        game = _service(info).update(game_id, body.changes())
        if game is None:
            raise GameNotFoundError(game_id, "updateGame")
        return game

    def resolve_remove_game(root, info, game_id):
        game = _service(info).remove(game_id)
        if game is None:
            raise GameNotFoundError(game_id, "removeGame")
        return game


@lru_cache
def get_graphql_schema() -> graphene.Schema:
    return graphene.Schema(query=Query, mutation=Mutation)
