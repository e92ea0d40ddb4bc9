"""Command to attach a plan to a charm."""

import click
import yaml

from plans_client.cli.context import PlansContext
from plans_client.cli.ensure import UserFacingCliError, client_errors_reported
from plans_client.cli.output import url_option
from plans_client.wireformat.validation import is_valid_charm_url


def plan_metric_names(definition: str) -> list[str]:
    """Return the metric names declared in a plan definition.

    Args:
        definition: YAML plan definition

    Returns:
        Sorted metric names from the top-level "metrics" mapping

    Raises:
        ValueError: If the definition is not valid YAML
    """
    try:
        parsed = yaml.safe_load(definition)
    except yaml.YAMLError as e:
        msg = f"failed to parse the plan definition: {e}"
        raise ValueError(msg) from e
    if not isinstance(parsed, dict):
        return []
    metrics = parsed.get("metrics")
    if not isinstance(metrics, dict):
        return []
    return sorted(str(name) for name in metrics)


@click.command("attach-plan")
@click.argument("charm_url")
@click.argument("plan_url")
@click.option("--default", "is_default", is_flag=True, help="Make this the charm's default plan.")
@url_option
@click.pass_obj
def attach_plan(
    ctx: PlansContext,
    charm_url: str,
    plan_url: str,
    is_default: bool,
    service_url: str | None,
) -> None:
    """Associate CHARM_URL with the plan PLAN_URL.

    Example:

        plans attach-plan cs:~canonical/landscape-3 canonical/landscape-default
    """
    if not is_valid_charm_url(charm_url):
        msg = f"charm url {charm_url!r} not valid"
        raise UserFacingCliError(msg)

    client = ctx.plan_client(url=service_url)
    with client_errors_reported():
        plans = client.get(plan_url)
    if len(plans) != 1:
        msg = f"expected 1 plan, got {len(plans)}"
        raise UserFacingCliError(msg)

    try:
        metric_names = plan_metric_names(plans[0].definition)
    except ValueError as e:
        raise UserFacingCliError(str(e)) from e
    if not metric_names:
        msg = f"plan {plan_url} cannot be used to rate charm {charm_url}: no metrics defined"
        raise UserFacingCliError(msg)

    with client_errors_reported():
        client.add_charm(plan_url, charm_url, is_default=is_default)
    click.echo("OK")
