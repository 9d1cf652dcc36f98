"""GraphQL Route — POST /graphql executes a query against the game schema.

Request JSON::

    {"query": "...", "variables": {...}, "operationName": "..."}

Invariants:
    - Missing/empty query → 400 {"errors": [{"message": "query is required"}]}
    - Document that fails to parse or validate (no data) → 400 with errors
    - Otherwise 200 with {"data": ...} plus "errors" when any resolver failed
    - Resolver failures other than domain errors are logged with traceback

Design Decisions:
    - Same GameService dependency as the REST routes: one store, two surfaces
    - Synchronous graphene execution: resolvers do no IO
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from tictactoe.api.dependencies import get_game_service
from tictactoe.api.graphql_schema import get_graphql_schema
from tictactoe.core.errors import TicTacToeError
from tictactoe.services.game_service import GameService

logger = logging.getLogger(__name__)
router = APIRouter(tags=["graphql"])


class GraphQLRequest(BaseModel):
    """GraphQL-over-HTTP request body."""
    query: str | None = None
    variables: dict[str, Any] | None = None
    operation_name: str | None = Field(None, alias="operationName")


@router.post("/graphql")
async def execute_graphql(
    body: GraphQLRequest, service: GameService = Depends(get_game_service),
):
    """Execute a GraphQL operation against the game schema."""
    if not body.query:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errors": [{"message": "query is required"}]},
        )

    result = get_graphql_schema().execute(
        body.query,
        variable_values=body.variables or {},
        context_value={"service": service},
        operation_name=body.operation_name,
    )

    payload: dict[str, Any] = {"data": result.data}
    if result.errors:
        for err in result.errors:
            original = err.original_error
            if original is not None and not isinstance(original, TicTacToeError):
                logger.error(
                    f"GraphQL resolver failed at {err.path}: {original}",
                    exc_info=original,
                    extra={"path": "/graphql"},
                )
        payload["errors"] = [err.formatted for err in result.errors]

    status_code = (
        status.HTTP_400_BAD_REQUEST if result.data is None
        else status.HTTP_200_OK
    )
    return JSONResponse(status_code=status_code, content=payload)
