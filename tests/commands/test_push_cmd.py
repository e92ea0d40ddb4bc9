"""Tests for the push-plan command."""

from pathlib import Path

from plans_client.api.fake import FakePlanClient, PlanClientCall
from tests.commands.helpers import api_error, invoke
from tests.test_utils.plans import PLAN_DEFINITION


def test_push_plan(tmp_path: Path) -> None:
    plan_file = tmp_path / "plan.yaml"
    plan_file.write_text(PLAN_DEFINITION, encoding="utf-8")
    client = FakePlanClient()

    result = invoke(client, ["push-plan", "bob/default", str(plan_file)])

    assert result.exit_code == 0, result.output
    assert "saved as plan: bob/default/1" in result.output
    assert client.calls == [
        PlanClientCall(method="save", args=("bob/default", PLAN_DEFINITION)),
    ]


def test_push_plan_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.yaml"

    result = invoke(FakePlanClient(), ["push-plan", "bob/default", str(missing)])

    assert result.exit_code == 1
    assert "could not read the rating plan from file" in result.output


def test_push_plan_invalid_url(tmp_path: Path) -> None:
    plan_file = tmp_path / "plan.yaml"
    plan_file.write_text(PLAN_DEFINITION, encoding="utf-8")
    client = FakePlanClient()

    result = invoke(client, ["push-plan", "bob", str(plan_file)])

    assert result.exit_code == 1
    assert 'Error: plan url "bob" not valid' in result.output
    assert client.calls == []


def test_push_plan_api_error(tmp_path: Path) -> None:
    plan_file = tmp_path / "plan.yaml"
    plan_file.write_text(PLAN_DEFINITION, encoding="utf-8")
    client = FakePlanClient(error=api_error("store the plan", status_code=400))

    result = invoke(client, ["push-plan", "bob/default", str(plan_file)])

    assert result.exit_code == 1
    assert "Error: failed to store the plan: silly error" in result.output
