"""Command to release a plan revision."""

import click

from plans_client.cli.context import PlansContext
from plans_client.cli.ensure import client_errors_reported
from plans_client.cli.output import url_option

# RFC 822 layout used when reporting when a release takes effect
_EFFECTIVE_TIME_FORMAT = "%d %b %y %H:%M %Z"


@click.command("release-plan")
@click.argument("plan_id")
@url_option
@click.pass_obj
def release_plan(ctx: PlansContext, plan_id: str, service_url: str | None) -> None:
    """Release revision PLAN_ID (owner/name/revision) of a plan."""
    client = ctx.plan_client(url=service_url)
    with client_errors_reported():
        plan = client.release(plan_id)

    click.echo(plan.id, err=True)
    if plan.effective_time is not None:
        effective = plan.effective_time.strftime(_EFFECTIVE_TIME_FORMAT)
        click.echo(f"effective from {effective}", err=True)
