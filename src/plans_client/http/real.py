"""Production HTTP transport using urllib."""

import http.client
import logging
import urllib.error
import urllib.request

from plans_client.errors import TransportError
from plans_client.http.abc import HttpTransport
from plans_client.http.types import HttpMethod, HttpResponse

logger = logging.getLogger(__name__)


class RealHttpTransport(HttpTransport):
    """HTTP transport backed by urllib.request.

    Error statuses are returned as responses rather than raised, so that the
    client can classify them. Every response body is read in full inside a
    context manager, which releases the connection on all paths.
    """

    def __init__(self, *, timeout_seconds: float) -> None:
        self._timeout_seconds = timeout_seconds

    def request(
        self,
        method: HttpMethod,
        url: str,
        *,
        body: bytes | None,
        headers: dict[str, str],
    ) -> HttpResponse:
        request = urllib.request.Request(url, data=body, headers=headers, method=method)
        logger.debug("%s %s", method, url)
        try:
            result = self._exchange(request)
        except (http.client.HTTPException, OSError) as e:
            # URLError and ssl.SSLError are OSError subclasses
            msg = f"{method} {url} failed: {e}"
            raise TransportError(msg) from e
        logger.debug("%s %s -> %d", method, url, result.status_code)
        return result

    def _exchange(self, request: urllib.request.Request) -> HttpResponse:
        try:
            with urllib.request.urlopen(request, timeout=self._timeout_seconds) as response:
                return HttpResponse(
                    status_code=response.status,
                    body=response.read(),
                    headers={k.lower(): v for k, v in response.headers.items()},
                )
        except urllib.error.HTTPError as e:
            with e:
                return HttpResponse(
                    status_code=e.code,
                    body=e.read(),
                    headers={k.lower(): v for k, v in e.headers.items()} if e.headers else {},
                )
