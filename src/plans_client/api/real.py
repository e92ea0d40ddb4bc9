"""Production implementation of the plan management API."""

import json
import logging
import urllib.parse

from plans_client.api.abc import PlanClient
from plans_client.api.classify import classify_response
from plans_client.errors import TransportError
from plans_client.http.abc import HttpTransport
from plans_client.http.types import HttpMethod, HttpResponse
from plans_client.identifiers import (
    parse_plan_id,
    parse_plan_id_with_optional_revision,
    parse_plan_owner,
    parse_plan_url,
)
from plans_client.wireformat.codec import (
    decode_plan,
    decode_plan_details,
    decode_plans,
    to_wire,
)
from plans_client.wireformat.types import Plan, PlanDetails

logger = logging.getLogger(__name__)


class RealPlanClient(PlanClient):
    """Plan client that talks to the plans service over HTTP.

    Identifiers are parsed locally first, so malformed input never reaches
    the network. Every non-200 response is classified into a PlanApiError.
    """

    def __init__(self, *, service_url: str, transport: HttpTransport) -> None:
        """Create a client for one plans service.

        Args:
            service_url: Base URL of the service, e.g. "https://plans.example.com/v1"
            transport: HTTP transport used for every request
        """
        self._service_url = service_url.rstrip("/")
        self._transport = transport

    def _call(
        self,
        method: HttpMethod,
        path: str,
        *,
        action: str,
        payload: object | None = None,
        query: dict[str, str] | None = None,
    ) -> HttpResponse:
        url = f"{self._service_url}{path}"
        if query:
            url = f"{url}?{urllib.parse.urlencode(query)}"

        headers = {"Accept": "application/json"}
        body = None
        if payload is not None:
            body = json.dumps(payload).encode("utf-8")
            headers["Content-Type"] = "application/json"

        try:
            response = self._transport.request(method, url, body=body, headers=headers)
        except TransportError as e:
            msg = f"failed to {action}: {e}"
            raise TransportError(msg) from e

        error = classify_response(
            action=action,
            status_code=response.status_code,
            body=response.body,
            request_id=response.request_id,
        )
        if error is not None:
            logger.debug(
                "%s %s failed: kind=%s status=%d request_id=%s",
                method,
                url,
                error.kind.value,
                error.status_code,
                error.request_id,
            )
            raise error
        return response

    def save(self, plan_url: str, definition: str) -> Plan:
        parse_plan_url(plan_url)
        plan = Plan(url=plan_url, definition=definition)
        response = self._call("POST", "/p", action="store the plan", payload=to_wire(plan))
        return decode_plan(response.body)

    def add_charm(self, plan_url: str, charm_url: str, *, is_default: bool) -> None:
        parse_plan_url(plan_url)
        payload = {"plan-url": plan_url, "charm-url": charm_url, "default": is_default}
        self._call("POST", "/charm", action="update the plan", payload=payload)

    def get(self, plan_url: str) -> list[Plan]:
        url = parse_plan_url(plan_url)
        response = self._call("GET", f"/p/{url}", action="retrieve matching plans")
        return decode_plans(response.body)

    def get_plans(self, owner: str) -> list[Plan]:
        parse_plan_owner(owner)
        response = self._call("GET", f"/p/{owner}", action="retrieve plans")
        return decode_plans(response.body)

    def get_plan_details(self, plan: str) -> PlanDetails:
        plan_id = parse_plan_id_with_optional_revision(plan)
        query = None
        if plan_id.revision > 0:
            query = {"revision": str(plan_id.revision)}
        response = self._call(
            "GET", f"/p/{plan_id.url}/details", action="retrieve plan details", query=query
        )
        return decode_plan_details(response.body)

    def get_plan_revisions(self, plan_url: str) -> list[Plan]:
        url = parse_plan_url(plan_url)
        response = self._call("GET", f"/p/{url}/revisions", action="retrieve plan revisions")
        return decode_plans(response.body)

    def get_default_plan(self, charm_url: str) -> Plan:
        response = self._call(
            "GET",
            "/charm/default",
            action="retrieve default plan",
            query={"charm-url": charm_url},
        )
        return decode_plan(response.body)

    def get_plans_for_charm(self, charm_url: str) -> list[Plan]:
        response = self._call(
            "GET",
            "/charm",
            action="retrieve associated plans",
            query={"charm-url": charm_url},
        )
        return decode_plans(response.body)

    def suspend(self, plan_url: str, *, all_charms: bool, charm_urls: list[str]) -> None:
        self._suspend_resume("suspend", plan_url, all_charms=all_charms, charm_urls=charm_urls)

    def resume(self, plan_url: str, *, all_charms: bool, charm_urls: list[str]) -> None:
        self._suspend_resume("resume", plan_url, all_charms=all_charms, charm_urls=charm_urls)

    def _suspend_resume(
        self, operation: str, plan_url: str, *, all_charms: bool, charm_urls: list[str]
    ) -> None:
        url = parse_plan_url(plan_url)
        payload = {"all": all_charms, "charms": list(charm_urls)}
        self._call("POST", f"/p/{url}/{operation}", action=f"{operation} the plan", payload=payload)

    def release(self, plan_id: str) -> Plan:
        parsed = parse_plan_id(plan_id)
        response = self._call("POST", f"/p/{parsed}/release", action="release the plan")
        return decode_plan(response.body)
