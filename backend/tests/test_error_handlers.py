import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from exceptions import ApplicationError, NotFoundError, StorageError, ValidationError
from utils.error_handlers import (
    format_validation_errors,
    handle_api_errors,
    register_exception_handlers,
)


@pytest.fixture
def error_client():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/validation")
    @handle_api_errors("Validation probe")
    def validation():
        raise ValidationError("name must not be empty")

    @app.get("/missing")
    @handle_api_errors("Missing probe")
    async def missing():
        raise NotFoundError("user", 5)

    @app.get("/storage")
    @handle_api_errors("Storage probe")
    def storage():
        raise StorageError("update", "password=hunter2 connection refused")

    @app.get("/application")
    @handle_api_errors("Application probe")
    def application():
        raise ApplicationError("something odd")

    @app.get("/unexpected")
    @handle_api_errors("Unexpected probe")
    async def unexpected():
        raise RuntimeError("kaboom")

    return TestClient(app)


def test_validation_maps_to_400(error_client):
    response = error_client.get("/validation")
    assert response.status_code == 400
    assert response.json() == {"error": "name must not be empty"}


def test_not_found_maps_to_404(error_client):
    response = error_client.get("/missing")
    assert response.status_code == 404
    assert response.json() == {"error": "User not found"}


@pytest.mark.parametrize("path", ["/storage", "/application", "/unexpected"])
def test_failures_map_to_opaque_500(error_client, path):
    response = error_client.get(path)
    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error"}


def test_storage_error_logged_once_with_traceback(error_client, caplog):
    with caplog.at_level(logging.ERROR, logger="utils.error_handlers"):
        error_client.get("/storage")
    records = [r for r in caplog.records if r.name == "utils.error_handlers"]
    assert len(records) == 1
    assert records[0].exc_info is not None
    assert "update" in records[0].getMessage()


def test_format_invalid_json():
    errors = [{"type": "json_invalid", "loc": ("body", 12), "msg": "JSON decode error"}]
    assert format_validation_errors(errors) == "Invalid JSON"


def test_format_field_errors():
    errors = [
        {"type": "missing", "loc": ("body", "name"), "msg": "Field required"},
        {"type": "value_error", "loc": ("body", "dob"), "msg": "Value error, bad date"},
    ]
    assert format_validation_errors(errors) == "name: Field required; dob: Value error, bad date"


def test_format_whole_body_error():
    errors = [{"type": "model_attributes_type", "loc": ("body",), "msg": "Input should be a valid dictionary"}]
    assert format_validation_errors(errors) == "Invalid JSON"
