"""Application context with dependency injection."""

import os
from collections.abc import Callable
from dataclasses import dataclass

from plans_client.api.abc import PlanClient
from plans_client.api.real import RealPlanClient
from plans_client.cli.config import (
    ClientConfig,
    default_config_path,
    load_client_config,
)
from plans_client.http.real import RealHttpTransport

PlanClientFactory = Callable[[ClientConfig], PlanClient]


@dataclass(frozen=True)
class PlansContext:
    """Immutable context holding the dependencies of CLI commands.

    Created at the CLI entry point and passed to every command. Tests build
    one with for_test() around a fake client.
    """

    config: ClientConfig
    plan_client_factory: PlanClientFactory

    def plan_client(self, *, url: str | None) -> PlanClient:
        """Build a plan client, honouring a per-command --url override."""
        return self.plan_client_factory(self.config.with_service_url(url))

    @staticmethod
    def for_test(
        plan_client: PlanClient,
        *,
        config: ClientConfig | None = None,
    ) -> "PlansContext":
        """Create a context that always returns the given client.

        Args:
            plan_client: Client returned for every command (usually a fake)
            config: Configuration (default: local service, 30s timeout)
        """
        if config is None:
            config = ClientConfig(service_url="http://localhost:9080/v1", timeout_seconds=30.0)
        return PlansContext(config=config, plan_client_factory=lambda _config: plan_client)


def _real_plan_client(config: ClientConfig) -> PlanClient:
    transport = RealHttpTransport(timeout_seconds=config.timeout_seconds)
    return RealPlanClient(service_url=config.service_url, transport=transport)


def create_context() -> PlansContext:
    """Create the production context from the config file and environment."""
    config = load_client_config(config_path=default_config_path(), environ=os.environ)
    return PlansContext(config=config, plan_client_factory=_real_plan_client)
