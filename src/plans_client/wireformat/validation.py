"""Explicit validation of decoded wire records.

Decoding never validates content; callers that need a well-formed record
call these functions before using it.
"""

import re

from plans_client.identifiers import parse_plan_url
from plans_client.wireformat.types import AuthorizationRequest, Plan

_VALID_UUID = re.compile(
    r"^[a-f0-9]{8}-[a-f0-9]{4}-[1-5][a-f0-9]{3}-[89ab][a-f0-9]{3}-[a-f0-9]{12}$",
    re.IGNORECASE,
)
_VALID_APPLICATION = re.compile(r"^[a-z][a-z0-9]*(-[a-z0-9]*[a-z][a-z0-9]*)*$")
_VALID_CHARM_URL = re.compile(
    r"^(?:(?:cs|local):)?"  # schema
    r"(?:~[a-zA-Z0-9][a-zA-Z0-9.+-]*/)?"  # owner
    r"(?:[a-z][a-z0-9-]*/)?"  # series
    r"[a-z][a-z0-9]*(?:-[a-z0-9]*[a-z][a-z0-9]*)*"  # name
    r"(?:-[0-9]+)?$"  # revision
)


def is_valid_uuid(value: str) -> bool:
    return _VALID_UUID.fullmatch(value) is not None


def is_valid_application_name(value: str) -> bool:
    return _VALID_APPLICATION.fullmatch(value) is not None


def is_valid_charm_url(value: str) -> bool:
    """Check a charm URL such as "cs:~owner/xenial/app-3" or "cs:app"."""
    return _VALID_CHARM_URL.fullmatch(value) is not None


def validate_plan(plan: Plan) -> None:
    """Check that a plan record is complete.

    Raises:
        ValueError: If the URL is empty or missing a name, or the definition
            is empty
        NotValidError: If the URL does not parse as owner/name
    """
    if plan.url == "":
        raise ValueError("empty plan url")
    parse_plan_url(plan.url)
    if plan.definition == "":
        raise ValueError("missing plan definition")


def validate_authorization_request(request: AuthorizationRequest) -> None:
    """Check an authorization request before it is sent.

    Raises:
        ValueError: Describing the first invalid field
    """
    if not is_valid_uuid(request.environment_uuid):
        msg = f"invalid environment UUID: {request.environment_uuid!r}"
        raise ValueError(msg)
    if request.service_name == "":
        raise ValueError("undefined service name")
    if not is_valid_application_name(request.service_name):
        msg = f"invalid service name: {request.service_name!r}"
        raise ValueError(msg)
    if request.charm_url == "":
        raise ValueError("undefined charm url")
    if not is_valid_charm_url(request.charm_url):
        msg = f"invalid charm url: {request.charm_url!r}"
        raise ValueError(msg)
    if request.plan_url == "":
        raise ValueError("undefined plan url")
    if request.budget == "" and request.limit != "":
        raise ValueError("unspecified budget")
    if request.limit == "" and request.budget != "":
        raise ValueError("unspecified limit")
