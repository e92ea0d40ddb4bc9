"""Commands to suspend and resume a plan for charms.

suspend-plan and resume-plan share argument handling; only the client
operation differs.
"""

from typing import Literal

import click

from plans_client.cli.context import PlansContext
from plans_client.cli.ensure import UserFacingCliError, client_errors_reported
from plans_client.cli.output import url_option

Operation = Literal["suspend", "resume"]


def _suspend_resume_command(operation: Operation, *, summary: str) -> click.Command:
    @click.command(f"{operation}-plan", help=summary)
    @click.argument("plan_url")
    @click.argument("charm_urls", nargs=-1)
    @click.option(
        "--all", "all_charms", is_flag=True, help=f"{operation.capitalize()} for all charms."
    )
    @url_option
    @click.pass_obj
    def command(
        ctx: PlansContext,
        plan_url: str,
        charm_urls: tuple[str, ...],
        all_charms: bool,
        service_url: str | None,
    ) -> None:
        if all_charms and charm_urls:
            raise UserFacingCliError("cannot use --all and specify charm urls")
        if not all_charms and not charm_urls:
            raise UserFacingCliError("missing plan or charm url")

        client = ctx.plan_client(url=service_url)
        with client_errors_reported():
            if operation == "suspend":
                client.suspend(plan_url, all_charms=all_charms, charm_urls=list(charm_urls))
            else:
                client.resume(plan_url, all_charms=all_charms, charm_urls=list(charm_urls))

    return command


suspend_plan = _suspend_resume_command(
    "suspend",
    summary=(
        "Suspend PLAN_URL for the given charms.\n\n"
        "Example: plans suspend-plan foocorp/free cs:~foocorp/app-0 cs:~foocorp/app-1"
    ),
)
resume_plan = _suspend_resume_command(
    "resume",
    summary=(
        "Resume PLAN_URL for the given charms.\n\n"
        "Example: plans resume-plan foocorp/free cs:~foocorp/app-0 cs:~foocorp/app-1"
    ),
)
