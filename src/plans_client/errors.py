"""Error types raised by the plans client.

Identifier and decode errors are local failures raised before or after a
network call. PlanApiError carries the classification of a failed response
from the plans service.
"""

import json
from enum import Enum


def quoted(value: str) -> str:
    """Render a value double-quoted with escapes, as used in error messages."""
    return json.dumps(value, ensure_ascii=False)


class NotValidError(ValueError):
    """An identifier component does not match its grammar.

    Attributes:
        what: The component that failed (e.g. "plan owner", "plan url")
        value: The offending input string
        context: Identifier being validated when the component failed, if any
    """

    def __init__(self, *, what: str, value: str, context: str | None = None) -> None:
        message = f"{what} {quoted(value)} not valid"
        if context is not None:
            message = f"{context}: {message}"
        super().__init__(message)
        self.what = what
        self.value = value
        self.context = context


class RevisionError(ValueError):
    """A plan revision is malformed or not addressable."""


class WireDecodeError(ValueError):
    """A service payload could not be decoded into a wire record."""


class TransportError(RuntimeError):
    """The HTTP request itself failed (connection refused, timeout, ...)."""


class ErrorKind(Enum):
    """Classification of a failed plans service response."""

    NOT_FOUND = "not-found"
    BAD_REQUEST = "bad-request"
    NOT_IMPLEMENTED = "not-implemented"
    UNAUTHORIZED = "unauthorized"
    ALREADY_EXISTS = "already-exists"
    UNCLASSIFIED = "unclassified"


class PlanApiError(Exception):
    """A plans service call returned a non-200 response.

    Attributes:
        kind: ErrorKind selected from the status code
        action: What the client was trying to do (e.g. "release the plan")
        status_code: HTTP status code of the response
        message: Message supplied by the service, or the raw body when unparseable
        code: Error code supplied by the service, empty when unavailable
        request_id: Correlation ID from the X-Request-ID header, if any
    """

    def __init__(
        self,
        *,
        kind: ErrorKind,
        action: str,
        status_code: int,
        message: str,
        code: str,
        request_id: str | None,
        rendered: str,
    ) -> None:
        super().__init__(rendered)
        self.kind = kind
        self.action = action
        self.status_code = status_code
        self.message = message
        self.code = code
        self.request_id = request_id

    @property
    def is_not_found(self) -> bool:
        return self.kind == ErrorKind.NOT_FOUND
