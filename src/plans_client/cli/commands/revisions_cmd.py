"""Command to show every revision of a plan."""

import click

from plans_client.cli.context import PlansContext
from plans_client.cli.ensure import client_errors_reported
from plans_client.cli.output import OutputFormat, format_option, render_plans, url_option


@click.command("show-plan-revisions")
@click.argument("plan_url")
@format_option
@url_option
@click.pass_obj
def show_plan_revisions(
    ctx: PlansContext, plan_url: str, output_format: OutputFormat, service_url: str | None
) -> None:
    """Show all revisions of PLAN_URL (owner/name)."""
    client = ctx.plan_client(url=service_url)
    with client_errors_reported():
        plans = client.get_plan_revisions(plan_url)
    render_plans(plans, output_format)
