"""Tests for the show-plan-revisions command."""

import json

from plans_client.api.fake import FakePlanClient
from tests.commands.helpers import api_error, invoke
from tests.test_utils.plans import sample_plan


def test_show_plan_revisions() -> None:
    client = FakePlanClient(
        plan_revisions={"bob/default": [sample_plan(revision=1), sample_plan(revision=2)]}
    )

    result = invoke(client, ["show-plan-revisions", "bob/default", "--format", "json"])

    assert result.exit_code == 0, result.output
    assert [plan["id"] for plan in json.loads(result.output)] == ["bob/default/1", "bob/default/2"]


def test_show_plan_revisions_tabular() -> None:
    client = FakePlanClient(plan_revisions={"bob/default": [sample_plan(revision=3)]})

    result = invoke(client, ["show-plan-revisions", "bob/default"])

    assert result.exit_code == 0, result.output
    assert "bob/default/3" in result.output


def test_show_plan_revisions_invalid_url() -> None:
    result = invoke(FakePlanClient(), ["show-plan-revisions", "bob/default/1"])

    assert result.exit_code == 1
    assert 'Error: plan url "bob/default/1" not valid' in result.output


def test_show_plan_revisions_api_error() -> None:
    client = FakePlanClient(error=api_error("retrieve plan revisions"))

    result = invoke(client, ["show-plan-revisions", "bob/default"])

    assert result.exit_code == 1
    assert "failed to retrieve plan revisions: silly error" in result.output
