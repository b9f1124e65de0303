"""Tests for gateguard.http: Headers and Request built from ASGI scopes."""

import pytest

from gateguard.http.headers import Headers
from gateguard.http.request import Request


def _scope(**overrides) -> dict:
    scope = {
        "type": "http",
        "method": "GET",
        "path": "/orders/42",
        "query_string": b"",
        "headers": [(b"authorization", b"Bearer tok"), (b"x-trace", b"a")],
        "client": ("127.0.0.1", 5000),
    }
    scope.update(overrides)
    return scope


class TestHeaders:
    def test_case_insensitive_lookup(self) -> None:
        headers = Headers(((b"Authorization", b"Bearer x"),))
        assert headers["authorization"] == "Bearer x"
        assert headers["AUTHORIZATION"] == "Bearer x"

    def test_contains(self) -> None:
        headers = Headers(((b"x-trace", b"1"),))
        assert "X-Trace" in headers
        assert "authorization" not in headers

    def test_missing_key(self) -> None:
        with pytest.raises(KeyError):
            Headers()["x"]

    def test_get_default(self) -> None:
        assert Headers().get("x") is None
        assert Headers().get("x", "d") == "d"

    def test_first_value_wins(self) -> None:
        headers = Headers(((b"x-a", b"1"), (b"X-A", b"2")))
        assert headers["x-a"] == "1"
        assert len(headers) == 1
        assert list(headers) == ["x-a"]

    def test_non_string_key(self) -> None:
        headers = Headers(((b"x-a", b"1"),))
        assert 1 not in headers

    def test_has_credentials(self) -> None:
        headers = Headers(((b"authorization", b"Bearer tok"), (b"x-api-key", b"  ")))
        assert headers.has_credentials("Authorization") is True
        assert headers.has_credentials("X-API-Key") is False
        assert headers.has_credentials("X-Missing") is False

    def test_non_latin1_lookup_is_missing(self) -> None:
        assert "X-Tok\u00e9n\u20ac" not in Headers(((b"authorization", b"x"),))


class TestRequestFromScope:
    def test_fields(self) -> None:
        request = Request.from_scope(_scope())
        assert request.method == "GET"
        assert request.path == "/orders/42"
        assert request.headers["authorization"] == "Bearer tok"
        assert request.client == ("127.0.0.1", 5000)

    def test_missing_path_is_none(self) -> None:
        scope = _scope()
        del scope["path"]
        assert Request.from_scope(scope).path is None

    def test_url_with_query(self) -> None:
        request = Request.from_scope(_scope(query_string=b"page=2"))
        assert request.url == "/orders/42?page=2"

    def test_url_without_query(self) -> None:
        assert Request.from_scope(_scope()).url == "/orders/42"

    def test_frozen(self) -> None:
        request = Request.from_scope(_scope())
        with pytest.raises(AttributeError):
            request.path = "/auth"  # type: ignore[misc]
