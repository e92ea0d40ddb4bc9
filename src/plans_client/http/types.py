"""Types for the HTTP transport gateway."""

from dataclasses import dataclass, field
from typing import Literal

HttpMethod = Literal["GET", "POST"]

REQUEST_ID_HEADER = "X-Request-ID"


@dataclass(frozen=True)
class HttpResponse:
    """A completed HTTP exchange.

    The body is always fully read and the underlying connection already
    released by the transport.

    Attributes:
        status_code: HTTP status code
        body: Entire response body
        headers: Response headers with lower-cased names
    """

    status_code: int
    body: bytes
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def request_id(self) -> str | None:
        return self.headers.get(REQUEST_ID_HEADER.lower())
