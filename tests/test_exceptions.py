import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from taskboard.core.exceptions import (
    DatabaseException,
    ResourceNotFoundException,
    ValidationException,
    error_envelope,
    setup_exception_handlers,
)
from taskboard.core.status_codes import ErrorCode, get_http_status
from taskboard.schemas.base import ActionResult


@pytest.fixture()
def raising_client():
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/invalid")
    def invalid():
        raise ValidationException()

    @app.get("/missing")
    def missing():
        raise ResourceNotFoundException("Project", 5)

    @app.get("/storage")
    def storage():
        raise DatabaseException("database is locked")

    @app.get("/boom")
    def boom():
        raise RuntimeError("unexpected")

    return TestClient(app, raise_server_exceptions=False)


def test_business_exceptions_become_envelopes(raising_client):
    invalid = raising_client.get("/invalid")
    assert invalid.status_code == 422
    assert invalid.json()["error"] == "Please fill in all required fields."

    missing = raising_client.get("/missing")
    assert missing.status_code == 404
    assert missing.json()["errorCode"] == "NOT_FOUND"
    assert missing.json()["details"] == {"resource_type": "Project", "resource_id": 5}

    storage = raising_client.get("/storage")
    assert storage.status_code == 500
    assert storage.json() == {"success": False, "error": "database is locked", "errorCode": "DATABASE_ERROR"}


def test_unhandled_exception_is_internal_error(raising_client):
    response = raising_client.get("/boom")

    assert response.status_code == 500
    assert response.json()["errorCode"] == "INTERNAL_SERVER_ERROR"


def test_error_envelope_omits_empty_details():
    assert error_envelope(ErrorCode.BAD_REQUEST, "Bad request") == {
        "success": False,
        "error": "Bad request",
        "errorCode": "BAD_REQUEST",
    }


def test_unknown_error_code_maps_to_500():
    assert get_http_status("SOMETHING_ELSE") == 500
    assert get_http_status(None) == 500


def test_business_exceptions_become_failure_results():
    required = ActionResult.from_exception(ValidationException())
    assert (required.error, required.error_code) == ("Please fill in all required fields.", "VALIDATION_ERROR")

    storage = ActionResult.from_exception(DatabaseException("FOREIGN KEY constraint failed"))
    assert (storage.error, storage.error_code) == ("FOREIGN KEY constraint failed", "DATABASE_ERROR")

    missing = ActionResult.from_exception(ResourceNotFoundException("Task", 3, message="Task not found"))
    assert missing.is_not_found
