"""Abstract base class for the HTTP transport."""

from abc import ABC, abstractmethod

from plans_client.http.types import HttpMethod, HttpResponse


class HttpTransport(ABC):
    """Performs HTTP requests on behalf of the plan client.

    All implementations (real and fake) must implement this interface.
    Implementations own the response lifecycle: the body is drained and the
    connection closed exactly once on every path, and callers only ever see
    the fully read HttpResponse.
    """

    @abstractmethod
    def request(
        self,
        method: HttpMethod,
        url: str,
        *,
        body: bytes | None,
        headers: dict[str, str],
    ) -> HttpResponse:
        """Send a request and return the complete response.

        Non-2xx statuses are returned, not raised.

        Args:
            method: HTTP method
            url: Absolute URL including any query string
            body: Request body, or None for no body
            headers: Request headers

        Returns:
            HttpResponse with the whole body read

        Raises:
            TransportError: If no response could be obtained
        """
        ...
