"""In-memory fake implementation of the plan management API."""

from dataclasses import dataclass

from plans_client.api.abc import PlanClient
from plans_client.identifiers import (
    parse_plan_id,
    parse_plan_id_with_optional_revision,
    parse_plan_owner,
    parse_plan_url,
)
from plans_client.wireformat.types import Plan, PlanDetails


@dataclass(frozen=True)
class PlanClientCall:
    """A call recorded by FakePlanClient."""

    method: str
    args: tuple[object, ...]


class FakePlanClient(PlanClient):
    """In-memory fake implementation for testing.

    This class has NO public setup methods. All state is provided via
    constructor. Identifiers are parsed exactly as the real client parses
    them, so invalid input fails the same way.
    """

    def __init__(
        self,
        *,
        plans: dict[str, list[Plan]] | None = None,
        plan_details: dict[str, PlanDetails] | None = None,
        plan_revisions: dict[str, list[Plan]] | None = None,
        charm_plans: dict[str, list[Plan]] | None = None,
        error: Exception | None = None,
    ) -> None:
        """Create FakePlanClient with pre-configured state.

        Args:
            plans: Plan URL or owner -> plans returned by get() and get_plans()
            plan_details: Plan string (as passed in) -> details
            plan_revisions: Plan URL -> revisions
            charm_plans: Charm URL -> plans; the first is the default plan
            error: If set, raised by every call after it is recorded
        """
        self._plans = plans or {}
        self._plan_details = plan_details or {}
        self._plan_revisions = plan_revisions or {}
        self._charm_plans = charm_plans or {}
        self._error = error
        self._calls: list[PlanClientCall] = []

    @property
    def calls(self) -> list[PlanClientCall]:
        """Read-only access to recorded calls for test assertions."""
        return self._calls

    def _record(self, method: str, *args: object) -> None:
        self._calls.append(PlanClientCall(method=method, args=args))
        if self._error is not None:
            raise self._error

    def save(self, plan_url: str, definition: str) -> Plan:
        parse_plan_url(plan_url)
        self._record("save", plan_url, definition)
        revision = len(self._plan_revisions.get(plan_url, [])) + 1
        return Plan(id=f"{plan_url}/{revision}", url=plan_url, definition=definition)

    def add_charm(self, plan_url: str, charm_url: str, *, is_default: bool) -> None:
        parse_plan_url(plan_url)
        self._record("add_charm", plan_url, charm_url, is_default)

    def get(self, plan_url: str) -> list[Plan]:
        parse_plan_url(plan_url)
        self._record("get", plan_url)
        return list(self._plans.get(plan_url, []))

    def get_plans(self, owner: str) -> list[Plan]:
        parse_plan_owner(owner)
        self._record("get_plans", owner)
        return list(self._plans.get(owner, []))

    def get_plan_details(self, plan: str) -> PlanDetails:
        parse_plan_id_with_optional_revision(plan)
        self._record("get_plan_details", plan)
        if plan not in self._plan_details:
            msg = f"Plan details for '{plan}' not configured in FakePlanClient"
            raise KeyError(msg)
        return self._plan_details[plan]

    def get_plan_revisions(self, plan_url: str) -> list[Plan]:
        parse_plan_url(plan_url)
        self._record("get_plan_revisions", plan_url)
        return list(self._plan_revisions.get(plan_url, []))

    def get_default_plan(self, charm_url: str) -> Plan:
        self._record("get_default_plan", charm_url)
        return self._charm_plans[charm_url][0]

    def get_plans_for_charm(self, charm_url: str) -> list[Plan]:
        self._record("get_plans_for_charm", charm_url)
        return list(self._charm_plans.get(charm_url, []))

    def suspend(self, plan_url: str, *, all_charms: bool, charm_urls: list[str]) -> None:
        parse_plan_url(plan_url)
        self._record("suspend", plan_url, all_charms, list(charm_urls))

    def resume(self, plan_url: str, *, all_charms: bool, charm_urls: list[str]) -> None:
        parse_plan_url(plan_url)
        self._record("resume", plan_url, all_charms, list(charm_urls))

    def release(self, plan_id: str) -> Plan:
        parsed = parse_plan_id(plan_id)
        self._record("release", plan_id)
        return Plan(id=plan_id, url=str(parsed.url), released=True)
