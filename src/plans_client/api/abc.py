"""Abstract base class for plans service operations."""

from abc import ABC, abstractmethod

from plans_client.wireformat.types import Plan, PlanDetails


class PlanClient(ABC):
    """Abstract interface for the plan management API.

    All implementations (real and fake) must implement this interface.
    Plan identifiers are passed in canonical string form and parsed by the
    implementation before any request is made.
    """

    @abstractmethod
    def save(self, plan_url: str, definition: str) -> Plan:
        """Upload a new plan revision.

        Args:
            plan_url: Plan URL (owner/name)
            definition: YAML plan definition

        Returns:
            The stored plan, including its new ID
        """
        ...

    @abstractmethod
    def add_charm(self, plan_url: str, charm_url: str, *, is_default: bool) -> None:
        """Associate a charm with a plan."""
        ...

    @abstractmethod
    def get(self, plan_url: str) -> list[Plan]:
        """Return the plans matching a plan URL."""
        ...

    @abstractmethod
    def get_plans(self, owner: str) -> list[Plan]:
        """Return all plans owned by a user or group."""
        ...

    @abstractmethod
    def get_plan_details(self, plan: str) -> PlanDetails:
        """Return a plan with its lifecycle history.

        Args:
            plan: owner/name for the latest revision, or owner/name/revision
        """
        ...

    @abstractmethod
    def get_plan_revisions(self, plan_url: str) -> list[Plan]:
        """Return every revision of a plan."""
        ...

    @abstractmethod
    def get_default_plan(self, charm_url: str) -> Plan:
        """Return the default plan of a charm."""
        ...

    @abstractmethod
    def get_plans_for_charm(self, charm_url: str) -> list[Plan]:
        """Return the plans associated with a charm."""
        ...

    @abstractmethod
    def suspend(self, plan_url: str, *, all_charms: bool, charm_urls: list[str]) -> None:
        """Suspend a plan for the given charms, or for all charms."""
        ...

    @abstractmethod
    def resume(self, plan_url: str, *, all_charms: bool, charm_urls: list[str]) -> None:
        """Resume a plan for the given charms, or for all charms."""
        ...

    @abstractmethod
    def release(self, plan_id: str) -> Plan:
        """Release a plan revision.

        Args:
            plan_id: Plan ID (owner/name/revision)

        Returns:
            The released plan
        """
        ...
