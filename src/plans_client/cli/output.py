"""Output formatting shared by the listing commands."""

import json
from collections.abc import Callable
from datetime import datetime
from typing import Any, Literal

import click
import yaml
from rich.console import Console
from rich.table import Table

from plans_client.wireformat.codec import to_wire
from plans_client.wireformat.types import CharmPlanDetail, Event, Plan, PlanDetails

OutputFormat = Literal["tabular", "json", "yaml"]

# Keeps tables readable when stdout is not a terminal
_TABLE_WIDTH = 160


def format_option(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Add a --format option choosing between tabular, json and yaml output."""
    return click.option(
        "--format",
        "output_format",
        type=click.Choice(["tabular", "json", "yaml"]),
        default="tabular",
        show_default=True,
        help="Output format.",
    )(fn)


def url_option(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Add a --url option overriding the configured plans service URL."""
    return click.option(
        "--url",
        "service_url",
        default=None,
        help="Plans service URL (overrides OB_URL and the config file).",
    )(fn)


def _format_time(value: datetime | None) -> str:
    if value is None:
        return ""
    return value.isoformat()


def write_structured(value: object, output_format: OutputFormat) -> None:
    """Write a JSON-ready value as JSON or YAML to stdout."""
    if output_format == "json":
        click.echo(json.dumps(value, indent=2))
        return
    click.echo(yaml.safe_dump(value, sort_keys=False, default_flow_style=False), nl=False)


def _print_table(table: Table) -> None:
    console = Console(width=_TABLE_WIDTH, soft_wrap=False, markup=False, highlight=False)
    console.print(table)


def render_plans(plans: list[Plan], output_format: OutputFormat) -> None:
    """Render a list of plans (list-plans, show-plan-revisions)."""
    if output_format != "tabular":
        write_structured([to_wire(plan) for plan in plans], output_format)
        return

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("PLAN", no_wrap=True)
    table.add_column("CREATED ON", no_wrap=True, justify="right")
    table.add_column("EFFECTIVE TIME", no_wrap=True, justify="right")
    table.add_column("DEFINITION", max_width=50)
    for plan in plans:
        table.add_row(
            plan.id,
            plan.created_on,
            _format_time(plan.effective_time),
            plan.definition,
        )
    _print_table(table)


def _event_display(event: Event) -> dict[str, str]:
    return {"user": event.user, "type": event.type, "time": _format_time(event.time)}


def _charm_display(charm: CharmPlanDetail) -> dict[str, object]:
    display: dict[str, object] = {
        "charm": charm.charm_url,
        "attached": _event_display(charm.attached),
    }
    if charm.effective_since is not None:
        display["effective-since"] = _format_time(charm.effective_since)
    display["default"] = charm.default
    if charm.events:
        display["events"] = [_event_display(event) for event in charm.events]
    return display


def plan_details_display(details: PlanDetails, *, show_content: bool) -> dict[str, object]:
    """Build the show-plan view of plan details.

    The definition, description and price are only included with
    show_content.
    """
    display: dict[str, object] = {
        "id": details.plan.id,
        "created": _event_display(details.created),
    }
    if details.released is not None:
        display["released"] = _event_display(details.released)
    if show_content:
        if details.plan.definition:
            display["definition"] = details.plan.definition
        if details.plan.description:
            display["description"] = details.plan.description
        if details.plan.price:
            display["price"] = details.plan.price
    if details.charms:
        display["charms"] = [_charm_display(charm) for charm in details.charms]
    return display


def render_plan_details(
    details: PlanDetails, *, show_content: bool, output_format: OutputFormat
) -> None:
    """Render one plan with its history (show-plan)."""
    display = plan_details_display(details, show_content=show_content)
    if output_format != "tabular":
        write_structured(display, output_format)
        return

    table = Table(show_header=False, box=None, pad_edge=False)
    for _ in range(5):
        table.add_column(max_width=50)
    table.add_row("PLAN")
    table.add_row(details.plan.id)
    table.add_row("", "CREATED BY", "TIME")
    table.add_row("", details.created.user, _format_time(details.created.time))
    if details.released is not None:
        table.add_row("", "RELEASED BY", "TIME")
        table.add_row("", details.released.user, _format_time(details.released.time))
    if show_content:
        if details.plan.description:
            table.add_row("", "DESCRIPTION", details.plan.description)
        if details.plan.price:
            table.add_row("", "PRICE", details.plan.price)
        if details.plan.definition:
            table.add_row("", "DEFINITION", details.plan.definition)
    if details.charms:
        table.add_row("CHARMS")
        for charm in details.charms:
            table.add_row("CHARM", "ATTACHED BY", "TIME", "DEFAULT", "EFFECTIVE SINCE")
            table.add_row(
                charm.charm_url,
                charm.attached.user,
                _format_time(charm.attached.time),
                str(charm.default).lower(),
                _format_time(charm.effective_since),
            )
            if charm.events:
                table.add_row("", "EVENTS")
                table.add_row("", "", "BY", "TYPE", "TIME")
                for event in charm.events:
                    table.add_row("", "", event.user, event.type, _format_time(event.time))
    _print_table(table)
