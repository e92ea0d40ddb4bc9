"""Command to upload a new plan revision."""

from pathlib import Path

import click

from plans_client.cli.context import PlansContext
from plans_client.cli.ensure import UserFacingCliError, client_errors_reported
from plans_client.cli.output import url_option


@click.command("push-plan")
@click.argument("plan_url")
@click.argument("filename", type=click.Path(dir_okay=False, path_type=Path))
@url_option
@click.pass_obj
def push_plan(ctx: PlansContext, plan_url: str, filename: Path, service_url: str | None) -> None:
    """Upload the plan definition in FILENAME as a new revision of PLAN_URL.

    Example:

        plans push-plan canonical/default plan.yaml
    """
    if not filename.exists():
        msg = f"could not read the rating plan from file {str(filename)!r}"
        raise UserFacingCliError(msg)
    definition = filename.read_text(encoding="utf-8")

    client = ctx.plan_client(url=service_url)
    with client_errors_reported():
        plan = client.save(plan_url, definition)

    click.echo(f"saved as plan: {plan.id or plan_url}")
