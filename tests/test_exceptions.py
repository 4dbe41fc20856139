import pytest

from curseforge import (
    BadRequestError,
    CurseForgeError,
    DataValidationError,
    ForbiddenError,
    InvalidResponseError,
    NotFoundError,
    RateLimitError,
    ServerError,
    UnauthorizedError,
    map_http_status,
)


@pytest.mark.parametrize(
    "status, exc_type",
    [
        (400, BadRequestError),
        (401, UnauthorizedError),
        (403, ForbiddenError),
        (404, NotFoundError),
        (429, RateLimitError),
        (500, ServerError),
        (599, ServerError),
    ],
)
def test_map_http_status(status, exc_type):
    err = map_http_status(status, "details")
    assert type(err) is exc_type
    assert err.code == status
    assert err.message == "details"


def test_map_http_status_fallback():
    err = map_http_status(409)
    assert type(err) is CurseForgeError
    assert err.message == "HTTP 409"


def test_default_messages():
    assert map_http_status(404).message == "Not Found"
    assert map_http_status(429).message == "Rate Limited"


def test_str_and_repr():
    err = NotFoundError("File 1 not found", 404)
    assert str(err) == "[CurseForgeError] File 1 not found (code=404)"
    assert repr(err) == "<NotFoundError code=404 message='File 1 not found'>"
    assert str(CurseForgeError("plain")) == "[CurseForgeError] plain"


def test_validation_error_location():
    err = DataValidationError("expected int, got str", ["fileStatus"])
    err = err.with_prefix(0).with_prefix("latestFiles").with_prefix("data")
    assert err.path == ["data", "latestFiles", 0, "fileStatus"]
    assert err.location == "data.latestFiles[0].fileStatus"
    assert str(err) == "[CurseForgeError] expected int, got str at 'data.latestFiles[0].fileStatus'"


def test_validation_error_hierarchy():
    err = DataValidationError("bad", body=b"{}")
    assert isinstance(err, InvalidResponseError)
    assert isinstance(err, CurseForgeError)
    assert err.body == b"{}"
    assert err.location == ""
