"""Error Hierarchy — GameNotFoundError shape and REST/GraphQL envelopes."""

from tictactoe.core.errors import (
    GameNotFoundError, ResourceNotFoundError, TicTacToeError,
    ValidationFailedError, InternalError, ErrorCategory, ErrorSeverity,
)


def test_game_not_found_is_resource_not_found():
    err = GameNotFoundError("abc")
    assert isinstance(err, ResourceNotFoundError)
    assert isinstance(err, TicTacToeError)


def test_game_not_found_message_and_status():
    err = GameNotFoundError("abc", "update")
    assert err.message == "Game not found"
    assert str(err) == "Game not found"
    assert err.http_status == 404
    assert err.code == "GAME_NOT_FOUND"
    assert err.category == ErrorCategory.RESOURCE_NOT_FOUND
    assert err.severity == ErrorSeverity.WARNING


def test_game_not_found_records_context():
    err = GameNotFoundError("abc", "remove")
    assert err.context.game_id == "abc"
    assert err.context.operation == "remove"
    assert err.resource_id == "abc"


def test_to_response_has_top_level_message():
    body = GameNotFoundError("abc", "find_one").to_response()
    assert body["message"] == "Game not found"
    assert body["error"]["code"] == "GAME_NOT_FOUND"
    assert body["error"]["category"] == "resource_not_found"
    assert body["error"]["context"] == {"game_id": "abc", "operation": "find_one"}


def test_extensions_carry_code():
    assert GameNotFoundError("abc").extensions == {
        "code": "GAME_NOT_FOUND", "category": "resource_not_found",
    }


def test_validation_failed_envelope_carries_details():
    details = [{"field": "body.count", "message": "bad", "type": "int_parsing"}]
    body = ValidationFailedError(details=details).to_response()
    assert body["message"] == "Invalid request data"
    assert body["error"]["code"] == "VALIDATION_ERROR"
    assert body["error"]["category"] == "validation"
    assert body["error"]["details"] == details


def test_validation_failed_defaults_to_no_details():
    err = ValidationFailedError("Game symbols cannot be null")
    assert err.http_status == 400
    assert err.to_response()["error"]["details"] == []


def test_internal_error_is_critical_and_generic():
    err = InternalError()
    assert err.http_status == 500
    assert err.severity == ErrorSeverity.CRITICAL
    assert err.category == ErrorCategory.INTERNAL
    assert err.to_response()["message"] == "An unexpected error occurred"
