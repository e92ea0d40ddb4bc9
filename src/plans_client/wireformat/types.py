"""Wire records exchanged with the plans service.

These are the canonical in-memory shapes. Field naming on the wire differs
between service generations for some records; see compat.py.
"""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Plan:
    """A rating plan revision as returned by the plans service.

    Attributes:
        id: Full plan ID including revision (owner/name/revision)
        url: Plan URL without revision (owner/name)
        definition: YAML plan definition (wire name "plan")
        created_on: RFC3339 creation timestamp, kept as the service sent it
        description: Human readable description
        price: Human readable price description
        released: Whether this revision has been released
        effective_time: When the released revision takes effect, if known
    """

    id: str = ""
    url: str = ""
    definition: str = ""
    created_on: str = ""
    description: str = ""
    price: str = ""
    released: bool = False
    effective_time: datetime | None = None


@dataclass(frozen=True)
class PlanActive:
    """A plan together with whether it is active for the requesting charm.

    On the wire the plan fields and "active" share one object.
    """

    plan: Plan = field(default_factory=Plan)
    active: bool = False


@dataclass(frozen=True)
class Event:
    """A lifecycle event recorded by the service."""

    user: str = ""  # user who triggered the event
    type: str = ""  # "create", "release", "suspend", ...
    time: datetime | None = None


@dataclass(frozen=True)
class CharmPlanDetail:
    """Attachment of a plan to a charm."""

    charm_url: str = ""
    attached: Event = field(default_factory=Event)
    effective_since: datetime | None = None
    default: bool = False
    events: tuple[Event, ...] = ()


@dataclass(frozen=True)
class PlanDetails:
    """A plan together with its lifecycle history."""

    plan: Plan = field(default_factory=Plan)
    created: Event = field(default_factory=Event)
    released: Event | None = None
    charms: tuple[CharmPlanDetail, ...] = ()


@dataclass(frozen=True)
class AuthorizationRequest:
    """Request for a plan authorization.

    environment_uuid and service_name were renamed on the wire to
    "model-uuid" and "application"; both spellings decode to these fields.
    """

    environment_uuid: str = ""
    charm_url: str = ""
    service_name: str = ""
    plan_url: str = ""
    budget: str = ""
    limit: str = ""


@dataclass(frozen=True)
class Authorization:
    """An issued plan authorization."""

    authorization_id: str = ""
    user: str = ""
    plan_url: str = ""
    environment_uuid: str = ""
    charm_url: str = ""
    service_name: str = ""
    created_on: datetime | None = None
    credentials_id: str = ""


@dataclass(frozen=True)
class AuthorizationQuery:
    """Filter used to query authorization records."""

    authorization_id: str = ""
    user: str = ""
    plan_url: str = ""
    environment_uuid: str = ""
    charm_url: str = ""
    service_name: str = ""


@dataclass(frozen=True)
class ResellerAuthorizationRequest:
    """Authorization request placed by a reseller on behalf of a user."""

    reseller: str = ""
    environment_uuid: str = ""
    charm_url: str = ""
    service_name: str = ""
    plan_url: str = ""
    budget: str = ""
    limit: str = ""


@dataclass(frozen=True)
class ResellerAuthorizationQuery:
    """Filter used to query authorizations issued through a reseller."""

    reseller: str = ""
    authorization_id: str = ""
    user: str = ""
    plan_url: str = ""
    environment_uuid: str = ""
    charm_url: str = ""
    service_name: str = ""


@dataclass(frozen=True)
class UUIDResponse:
    """A response carrying only a generated UUID."""

    uuid: str = ""


@dataclass(frozen=True)
class ServicePlanResponse:
    """The plan in use by an application and the plans it could switch to.

    Attributes:
        current_plan: Plan URL currently in use
        available_plans: Plan URL -> plan
    """

    current_plan: str = ""
    available_plans: dict[str, Plan] = field(default_factory=dict)
