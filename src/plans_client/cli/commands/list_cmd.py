"""Command to list the plans of an owner."""

import click

from plans_client.cli.context import PlansContext
from plans_client.cli.ensure import client_errors_reported
from plans_client.cli.output import OutputFormat, format_option, render_plans, url_option


@click.command("list-plans")
@click.argument("owner")
@format_option
@url_option
@click.pass_obj
def list_plans(
    ctx: PlansContext, owner: str, output_format: OutputFormat, service_url: str | None
) -> None:
    """List plans owned by OWNER (a user or group)."""
    client = ctx.plan_client(url=service_url)
    with client_errors_reported():
        plans = client.get_plans(owner)
    render_plans(plans, output_format)
