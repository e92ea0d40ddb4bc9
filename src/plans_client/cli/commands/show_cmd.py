"""Command to show plan details."""

import click

from plans_client.cli.context import PlansContext
from plans_client.cli.ensure import client_errors_reported
from plans_client.cli.output import (
    OutputFormat,
    format_option,
    render_plan_details,
    url_option,
)


@click.command("show-plan")
@click.argument("plan")
@click.option("--content", "show_content", is_flag=True, help="Show the plan definition.")
@click.option(
    "--definition", "only_definition", is_flag=True, help="Show only the plan definition."
)
@format_option
@url_option
@click.pass_obj
def show_plan(
    ctx: PlansContext,
    plan: str,
    show_content: bool,
    only_definition: bool,
    output_format: OutputFormat,
    service_url: str | None,
) -> None:
    """Show details of PLAN (owner/name or owner/name/revision)."""
    client = ctx.plan_client(url=service_url)
    with client_errors_reported():
        details = client.get_plan_details(plan)

    if only_definition:
        click.echo(details.plan.id)
        click.echo(details.plan.definition, nl=False)
        return

    render_plan_details(details, show_content=show_content, output_format=output_format)
