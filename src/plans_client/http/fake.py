"""Fake HTTP transport for testing."""

from dataclasses import dataclass

from plans_client.errors import TransportError
from plans_client.http.abc import HttpTransport
from plans_client.http.types import HttpMethod, HttpResponse


@dataclass(frozen=True)
class RecordedRequest:
    """A request captured by FakeHttpTransport."""

    method: HttpMethod
    url: str
    body: bytes | None
    headers: dict[str, str]


class FakeHttpTransport(HttpTransport):
    """In-memory transport that answers every request with canned responses.

    All state is provided via constructor. Responses are served in order;
    the last one is repeated once the queue is exhausted.
    """

    def __init__(
        self,
        *,
        responses: list[HttpResponse] | None = None,
        error: TransportError | None = None,
    ) -> None:
        """Create FakeHttpTransport with pre-configured responses.

        Args:
            responses: Responses to return in order (default: one empty 200)
            error: If set, every request raises this error instead
        """
        self._responses = responses or [HttpResponse(status_code=200, body=b"")]
        self._error = error
        self._requests: list[RecordedRequest] = []

    @property
    def requests(self) -> list[RecordedRequest]:
        """Read-only access to requests sent, for test assertions."""
        return self._requests

    def request(
        self,
        method: HttpMethod,
        url: str,
        *,
        body: bytes | None,
        headers: dict[str, str],
    ) -> HttpResponse:
        self._requests.append(RecordedRequest(method=method, url=url, body=body, headers=headers))
        if self._error is not None:
            raise self._error
        index = min(len(self._requests), len(self._responses)) - 1
        return self._responses[index]
