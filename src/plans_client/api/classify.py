"""Classification of failed plans service responses.

Every client call hands its fully read response to classify_response. The
status-code table is fixed; the same rendering is used for every action.
"""

import json

from plans_client.errors import ErrorKind, PlanApiError

_KIND_BY_STATUS: dict[int, ErrorKind] = {
    404: ErrorKind.NOT_FOUND,
    400: ErrorKind.BAD_REQUEST,
    501: ErrorKind.NOT_IMPLEMENTED,
    401: ErrorKind.UNAUTHORIZED,
    409: ErrorKind.ALREADY_EXISTS,
}


def _parse_error_body(body: bytes) -> tuple[str, str] | None:
    """Parse a {"code": ..., "message": ...} body; None when it is not one."""
    try:
        payload = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if not isinstance(payload, dict):
        return None
    code = payload.get("code", "")
    message = payload.get("message", "")
    if code is None:
        code = ""
    if message is None:
        message = ""
    if not isinstance(code, str) or not isinstance(message, str):
        return None
    return code, message


def _decode_body_text(body: bytes | None) -> str | None:
    if not body:
        return None
    try:
        return body.decode("utf-8").strip() or None
    except UnicodeDecodeError:
        return None


def _with_request_id(rendered: str, request_id: str | None) -> str:
    if request_id:
        return f"{rendered} (request id: {request_id})"
    return rendered


def classify_response(
    *,
    action: str,
    status_code: int,
    body: bytes | None,
    request_id: str | None,
) -> PlanApiError | None:
    """Turn a response into a typed error, or None on success.

    Args:
        action: What was being attempted, e.g. "release the plan"
        status_code: HTTP status code
        body: Fully read response body
        request_id: Correlation ID from the X-Request-ID header, if any

    Returns:
        None for status 200, otherwise a PlanApiError. Parseable error bodies
        with status 404, 400, 501, 401 or 409 get the matching ErrorKind and
        render as "failed to <action>: <message>". Other statuses are
        UNCLASSIFIED and render as "failed to <action>: <message> [<code>]".
        Unparseable bodies are UNCLASSIFIED and render the raw status and
        body text.
    """
    if status_code == 200:
        return None

    parsed = _parse_error_body(body) if body else None
    if parsed is None:
        text = _decode_body_text(body)
        if text is None:
            rendered = f"failed to {action}: status {status_code}"
            message = ""
        else:
            rendered = f"failed to {action}: {status_code} {text}"
            message = text
        return PlanApiError(
            kind=ErrorKind.UNCLASSIFIED,
            action=action,
            status_code=status_code,
            message=message,
            code="",
            request_id=request_id,
            rendered=_with_request_id(rendered, request_id),
        )

    code, message = parsed
    kind = _KIND_BY_STATUS.get(status_code, ErrorKind.UNCLASSIFIED)
    if kind == ErrorKind.UNCLASSIFIED:
        rendered = f"failed to {action}: {message} [{code}]"
    else:
        rendered = f"failed to {action}: {message}"
    return PlanApiError(
        kind=kind,
        action=action,
        status_code=status_code,
        message=message,
        code=code,
        request_id=request_id,
        rendered=_with_request_id(rendered, request_id),
    )
