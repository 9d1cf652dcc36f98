"""GraphQL — queries and mutations over the shared game service.

Invariants:
    - hello/games/game/createGame/updateGame/removeGame behave like their REST twins
    - Unknown ids on game/updateGame/removeGame → null field + "Game not found" error
    - updateGame with a null symbol → "Game not found" for unknown ids, otherwise rejected
    - Missing query → 400; unparseable document → 400
"""

GAME_FIELDS = "id status humanSymbol aiSymbol nextTurn moveNumber winner label"

CREATE = (
    "mutation CreateGame($input: CreateGameDto!) "
    f"{{ createGame(input: $input) {{ {GAME_FIELDS} }} }}"
)
UPDATE = (
    "mutation UpdateGame($id: String!, $input: UpdateGameDto!) "
    "{ updateGame(id: $id, input: $input) { id label humanSymbol aiSymbol } }"
)
REMOVE = "mutation RemoveGame($id: String!) { removeGame(id: $id) { id label } }"
GET = "query Game($id: String!) { game(id: $id) { id label } }"


async def _create(gql, **fields):
    status, body = await gql(CREATE, {"input": fields})
    assert status == 200
    assert "errors" not in body
    return body["data"]["createGame"]


async def test_hello_query(gql):
    status, body = await gql("{ hello }")
    assert status == 200
    assert body["data"]["hello"] == "Hello World from GraphQL!"


async def test_create_game_mutation(gql):
    game = await _create(gql, humanSymbol="X", aiSymbol="O", label="gql-game")
    assert game["label"] == "gql-game"
    assert game["status"] == "IN_PROGRESS"
    assert game["nextTurn"] == "X"
    assert game["moveNumber"] == 0
    assert game["winner"] is None
    assert game["id"]


async def test_create_game_mutation_defaults(gql):
    game = await _create(gql)
    assert game["humanSymbol"] == "X"
    assert game["aiSymbol"] == "O"
    assert game["label"] is None


async def test_games_query(gql):
    first = await _create(gql, label="a")
    second = await _create(gql, label="b")
    status, body = await gql("{ games { id label } }")
    assert status == 200
    assert "errors" not in body
    assert {g["id"] for g in body["data"]["games"]} == {first["id"], second["id"]}


async def test_game_query(gql):
    created = await _create(gql, label="find-me")
    status, body = await gql(GET, {"id": created["id"]})
    assert status == 200
    assert "errors" not in body
    assert body["data"]["game"] == {"id": created["id"], "label": "find-me"}


async def test_update_game_mutation(gql):
    created = await _create(gql, humanSymbol="X", aiSymbol="O", label="old")
    status, body = await gql(UPDATE, {"id": created["id"], "input": {"label": "gql-updated"}})
    assert status == 200
    assert "errors" not in body
    assert body["data"]["updateGame"] == {
        "id": created["id"], "label": "gql-updated",
        "humanSymbol": "X", "aiSymbol": "O",
    }


async def test_remove_game_mutation(gql):
    created = await _create(gql, label="bye")
    status, body = await gql(REMOVE, {"id": created["id"]})
    assert status == 200
    assert "errors" not in body
    assert body["data"]["removeGame"] == {"id": created["id"], "label": "bye"}

    _, after = await gql(GET, {"id": created["id"]})
    assert after["data"]["game"] is None


async def test_game_query_unknown_id(gql):
    status, body = await gql(GET, {"id": "missing"})
    assert status == 200
    assert body["data"]["game"] is None
    assert body["errors"][0]["message"] == "Game not found"


async def test_update_game_unknown_id(gql):
    status, body = await gql(UPDATE, {"id": "missing", "input": {"label": "none"}})
    assert status == 200
    assert body["data"]["updateGame"] is None
    assert body["errors"][0]["message"] == "Game not found"


async def test_update_game_unknown_id_with_null_symbol(gql):
    status, body = await gql(UPDATE, {"id": "missing", "input": {"humanSymbol": None}})
    assert status == 200
    assert body["data"]["updateGame"] is None
    assert body["errors"][0]["message"] == "Game not found"
    assert body["errors"][0]["extensions"]["code"] == "GAME_NOT_FOUND"


async def test_update_game_null_symbol_is_rejected(gql):
    created = await _create(gql, label="keep")
    status, body = await gql(UPDATE, {"id": created["id"], "input": {"aiSymbol": None}})
    assert status == 200
    assert body["data"]["updateGame"] is None
    assert body["errors"][0]["message"] == "Game symbols cannot be null"
    assert body["errors"][0]["extensions"]["code"] == "VALIDATION_ERROR"

    _, after = await gql(GET, {"id": created["id"]})
    assert after["data"]["game"] == {"id": created["id"], "label": "keep"}


async def test_update_game_null_label_clears_it(gql):
    created = await _create(gql, label="temp")
    status, body = await gql(UPDATE, {"id": created["id"], "input": {"label": None}})
    assert status == 200
    assert "errors" not in body
    assert body["data"]["updateGame"]["label"] is None
    assert body["data"]["updateGame"]["humanSymbol"] == "X"


async def test_remove_game_unknown_id(gql):
    status, body = await gql(REMOVE, {"id": "missing"})
    assert status == 200
    assert body["data"]["removeGame"] is None
    assert body["errors"][0]["message"] == "Game not found"


async def test_graphql_and_rest_share_store(client, gql):
    res = await client.post("/game", json={"label": "rest"})
    status, body = await gql(GET, {"id": res.json()["id"]})
    assert body["data"]["game"]["label"] == "rest"


async def test_missing_query_returns_400(client):
    res = await client.post("/graphql", json={})
    assert res.status_code == 400
    assert res.json()["errors"][0]["message"] == "query is required"


async def test_invalid_document_returns_400(gql):
    status, body = await gql("{ nonExistentField }")
    assert status == 400
    assert body["data"] is None
    assert body["errors"]
