"""Plan identifier grammar.

A plan is addressed either by its URL (owner/name), which names the logical
plan, or by its ID (owner/name/revision), which names one released revision.
Both are pure value types built only by the parse functions below; all
validation happens at construction.

Canonical string forms:
    PlanURL:  owner/name
    PlanID:   owner/name/revision

Revision 0 means "unspecified" and is only produced by
parse_plan_id_with_optional_revision.
"""

import re
from dataclasses import dataclass

from plans_client.errors import NotValidError, RevisionError, quoted

# Username grammar of the identity service: local part, optional @domain
_OWNER_LOCAL = r"[a-zA-Z0-9](?:[a-zA-Z0-9.+-]*[a-zA-Z0-9])?"
_OWNER_DOMAIN = r"[a-zA-Z0-9](?:[a-zA-Z0-9.-]*[a-zA-Z0-9])?"
_VALID_OWNER = re.compile(rf"^{_OWNER_LOCAL}(?:@{_OWNER_DOMAIN})?$")

# Lowercase start, single hyphens between alphanumeric runs. The two-character
# minimum is checked in is_valid_plan_name.
_VALID_PLAN_NAME = re.compile(r"^[a-z][a-z0-9]*(?:-[a-z0-9]+)*$")

# strconv.Atoi-compatible: optional sign, ASCII digits only, 64-bit range
_REVISION_FORMAT = re.compile(r"^([+-]?)([0-9]+)$")
_REVISION_MAX_DIGITS = 19
_REVISION_MIN = -(2**63)
_REVISION_MAX = 2**63 - 1


def is_valid_owner_name(owner: str) -> bool:
    """Check whether a string is a valid plan owner (user or group name)."""
    return _VALID_OWNER.fullmatch(owner) is not None


def is_valid_plan_name(name: str) -> bool:
    """Check whether a string is a valid plan name.

    Examples:
        >>> is_valid_plan_name("default")
        True
        >>> is_valid_plan_name("landscape-default")
        True
        >>> is_valid_plan_name("Default")
        False
        >>> is_valid_plan_name("a--b")
        False
    """
    return len(name) >= 2 and _VALID_PLAN_NAME.fullmatch(name) is not None


@dataclass(frozen=True)
class PlanURL:
    """Owner and name of a plan, without a revision."""

    owner: str
    name: str

    def __str__(self) -> str:
        return f"{self.owner}/{self.name}"

    def validate(self) -> None:
        """Re-check the grammar of both components.

        Raises:
            NotValidError: If the owner or the name is not valid
        """
        if not is_valid_owner_name(self.owner):
            raise NotValidError(what="plan owner", value=self.owner)
        if not is_valid_plan_name(self.name):
            raise NotValidError(what="plan name", value=self.name)

    def with_revision(self, revision: int) -> "PlanID":
        return PlanID(url=self, revision=revision)


@dataclass(frozen=True)
class PlanID:
    """A single revision of a plan."""

    url: PlanURL
    revision: int

    @property
    def owner(self) -> str:
        return self.url.owner

    @property
    def name(self) -> str:
        return self.url.name

    def __str__(self) -> str:
        return f"{self.url}/{self.revision}"

    def validate(self) -> None:
        """Re-check that the revision is addressable and the URL is valid.

        Raises:
            RevisionError: If the revision is not greater than 0
            NotValidError: If the owner or the name is not valid, annotated
                with "invalid plan id"
        """
        if self.revision <= 0:
            raise RevisionError("revision must be greater than 0")
        try:
            self.url.validate()
        except NotValidError as e:
            raise NotValidError(what=e.what, value=e.value, context="invalid plan id") from e


def parse_plan_url(url: str) -> PlanURL:
    """Parse a plan URL in canonical owner/name form.

    Args:
        url: Plan URL string, e.g. "canonical/landscape-default"

    Returns:
        Validated PlanURL

    Raises:
        NotValidError: If the string does not have exactly two segments
            ("plan url"), or if the owner ("plan owner") or the name
            ("plan name") does not match its grammar
    """
    parts = url.split("/")
    if len(parts) != 2:
        raise NotValidError(what="plan url", value=url)
    plan_url = PlanURL(owner=parts[0], name=parts[1])
    plan_url.validate()
    return plan_url


def parse_plan_owner(owner: str) -> str:
    """Validate a bare owner name, as used when listing an owner's plans.

    Raises:
        NotValidError: If the owner does not match the owner grammar
    """
    if not is_valid_owner_name(owner):
        raise NotValidError(what="plan owner", value=owner)
    return owner


def _parse_revision(segment: str) -> int:
    match = _REVISION_FORMAT.fullmatch(segment)
    if match is None:
        msg = f"invalid revision format: {quoted(segment)} is not an integer"
        raise RevisionError(msg)
    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    if len(digits) > _REVISION_MAX_DIGITS:
        raise _revision_out_of_range(segment)
    revision = int(sign + digits)
    if not _REVISION_MIN <= revision <= _REVISION_MAX:
        raise _revision_out_of_range(segment)
    return revision


def _revision_out_of_range(segment: str) -> RevisionError:
    return RevisionError(f"invalid revision format: {quoted(segment)} is out of range")


def _parse_id_url(owner: str, name: str, plan_id: str) -> PlanURL:
    try:
        return parse_plan_url(f"{owner}/{name}")
    except NotValidError as e:
        raise NotValidError(what="plan id", value=plan_id) from e


def parse_plan_id(plan_id: str) -> PlanID:
    """Parse a plan ID in canonical owner/name/revision form.

    The revision format is checked before the owner and name, so a
    non-numeric last segment is reported as a revision error even when the
    other segments are also bad.

    Args:
        plan_id: Plan ID string, e.g. "canonical/landscape-default/3"

    Returns:
        Validated PlanID with revision > 0

    Raises:
        NotValidError: If the string does not have exactly three segments or
            the owner/name pair is not valid ("plan id")
        RevisionError: If the revision is not an integer, or is not greater
            than 0
    """
    parts = plan_id.split("/")
    if len(parts) != 3:
        raise NotValidError(what="plan id", value=plan_id)
    revision = _parse_revision(parts[2])
    parsed = PlanID(url=_parse_id_url(parts[0], parts[1], plan_id), revision=revision)
    parsed.validate()
    return parsed


def parse_plan_id_with_optional_revision(plan_id: str) -> PlanID:
    """Parse owner/name or owner/name/revision.

    Used by read paths that may or may not pin a revision. Without a
    revision segment the result has revision 0 ("unspecified"); with one,
    the same rules as parse_plan_id apply.

    Raises:
        NotValidError: If the segment count is wrong or owner/name is not valid
        RevisionError: If a revision segment is present but malformed or <= 0
    """
    parts = plan_id.split("/")
    if len(parts) == 3:
        return parse_plan_id(plan_id)
    if len(parts) == 2:
        return PlanID(url=_parse_id_url(parts[0], parts[1], plan_id), revision=0)
    raise NotValidError(what="plan id", value=plan_id)
