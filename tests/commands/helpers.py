"""Shared helpers for CLI command tests."""

from click.testing import CliRunner, Result

from plans_client.api.abc import PlanClient
from plans_client.api.classify import classify_response
from plans_client.cli.cli import cli
from plans_client.cli.context import PlansContext
from plans_client.errors import PlanApiError


def invoke(plan_client: PlanClient, args: list[str]) -> Result:
    """Run the plans CLI with a test context around plan_client."""
    runner = CliRunner()
    return runner.invoke(cli, args, obj=PlansContext.for_test(plan_client))


def api_error(action: str, status_code: int = 404, message: str = "silly error") -> PlanApiError:
    body = f'{{"code": "not found", "message": "{message}"}}'.encode()
    error = classify_response(action=action, status_code=status_code, body=body, request_id=None)
    assert error is not None
    return error
