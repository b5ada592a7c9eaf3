"""Tests for the error taxonomy and its HTTP mapping."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.exceptions import error_response, register_exception_handlers
from domains.core import (
    ApplicationError,
    AuthenticationError,
    CandyNotFoundError,
    ClientInputError,
    ConfigurationError,
    EmptyStoreError,
    InternalError,
    UnsupportedMediaTypeError,
    ValidationError,
)


@pytest.mark.parametrize(
    "exc, status",
    [
        (ValidationError("bad json"), 400),
        (AuthenticationError(), 401),
        (CandyNotFoundError("x"), 404),
        (EmptyStoreError(), 404),
        (UnsupportedMediaTypeError("text/plain"), 415),
        (InternalError("boom"), 500),
        (ConfigurationError("ADMIN_PASSWORD", "missing"), 500),
    ],
)
def test_status_mapping(exc, status):
    assert exc.http_status_code == status
    assert error_response(exc).status_code == status


def test_client_input_errors_share_a_base():
    assert isinstance(ValidationError("x"), ClientInputError)
    assert isinstance(UnsupportedMediaTypeError("x"), ClientInputError)


def test_not_found_response_has_empty_body():
    assert error_response(CandyNotFoundError("x")).body == b""


def test_str_includes_code():
    assert str(InternalError("boom")) == "[INTERNAL_ERROR] boom"


def test_handlers_render_plain_text():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/boom")
    async def boom():
        raise InternalError("read failed")

    @app.get("/crash")
    async def crash():
        raise RuntimeError("serialization failed")

    client = TestClient(app, raise_server_exceptions=False)

    resp = client.get("/boom")
    assert resp.status_code == 500
    assert resp.text == "read failed"

    resp = client.get("/crash")
    assert resp.status_code == 500
    assert resp.text == "serialization failed"

    resp = client.get("/nowhere")
    assert resp.status_code == 404
    assert resp.text == "Not Found"


def test_application_error_is_exception():
    with pytest.raises(ApplicationError):
        raise EmptyStoreError()


def test_client_error_response_is_plain_message():
    resp = error_response(UnsupportedMediaTypeError("text/plain"))
    assert resp.status_code == 415
    assert resp.media_type == "text/plain"
    assert resp.body == b"Need content-type 'application/json', but got 'text/plain'"
