import logging

import click

from plans_client.cli.commands.attach_cmd import attach_plan
from plans_client.cli.commands.list_cmd import list_plans
from plans_client.cli.commands.push_cmd import push_plan
from plans_client.cli.commands.release_cmd import release_plan
from plans_client.cli.commands.revisions_cmd import show_plan_revisions
from plans_client.cli.commands.show_cmd import show_plan
from plans_client.cli.commands.suspend_cmd import resume_plan, suspend_plan
from plans_client.cli.context import create_context
from plans_client.cli.ensure import UserFacingCliError

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="plans-client")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Manage rating plans on the plans service."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except ValueError as e:
            raise UserFacingCliError(str(e)) from e


cli.add_command(attach_plan)
cli.add_command(list_plans)
cli.add_command(push_plan)
cli.add_command(release_plan)
cli.add_command(resume_plan)
cli.add_command(show_plan)
cli.add_command(show_plan_revisions)
cli.add_command(suspend_plan)


def main() -> None:
    """CLI entry point used by the `plans` console script."""
    cli()
