"""Tests for RealHttpTransport error handling, with urlopen replaced."""

import http.client
import io
import ssl
import urllib.error
import urllib.request
from email.message import Message

import pytest

from plans_client.errors import TransportError
from plans_client.http.real import RealHttpTransport


class _TruncatedResponse:
    """Response whose body read fails part way."""

    status = 200
    headers = Message()

    def __enter__(self) -> "_TruncatedResponse":
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None

    def read(self) -> bytes:
        raise http.client.IncompleteRead(b"{", 10)


def _transport() -> RealHttpTransport:
    return RealHttpTransport(timeout_seconds=1.0)


def _request(transport: RealHttpTransport) -> object:
    return transport.request("GET", "https://plans.example.com/v1/p/bob", body=None, headers={})


@pytest.mark.parametrize(
    "error",
    [
        urllib.error.URLError("connection refused"),
        TimeoutError("timed out"),
        ssl.SSLError("bad record mac"),
        http.client.RemoteDisconnected("closed"),
    ],
)
def test_connection_failures_become_transport_errors(
    monkeypatch: pytest.MonkeyPatch, error: Exception
) -> None:
    def failing_urlopen(*args: object, **kwargs: object) -> object:
        raise error

    monkeypatch.setattr(urllib.request, "urlopen", failing_urlopen)

    with pytest.raises(TransportError, match="GET https://plans.example.com/v1/p/bob failed"):
        _request(_transport())


def test_incomplete_body_becomes_transport_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(urllib.request, "urlopen", lambda *args, **kwargs: _TruncatedResponse())

    with pytest.raises(TransportError) as exc_info:
        _request(_transport())

    assert isinstance(exc_info.value.__cause__, http.client.IncompleteRead)


def test_error_status_is_returned_as_response(monkeypatch: pytest.MonkeyPatch) -> None:
    headers = Message()
    headers["X-Request-ID"] = "req-1"
    error = urllib.error.HTTPError(
        "https://plans.example.com/v1/p/bob",
        404,
        "Not Found",
        headers,
        io.BytesIO(b'{"code": "not found", "message": "no plans"}'),
    )

    def failing_urlopen(*args: object, **kwargs: object) -> object:
        raise error

    monkeypatch.setattr(urllib.request, "urlopen", failing_urlopen)

    response = _transport().request(
        "GET", "https://plans.example.com/v1/p/bob", body=None, headers={}
    )

    assert response.status_code == 404
    assert response.body == b'{"code": "not found", "message": "no plans"}'
    assert response.request_id == "req-1"
