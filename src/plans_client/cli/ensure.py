"""User-facing error reporting for CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import IO

import click

from plans_client.errors import (
    NotValidError,
    PlanApiError,
    RevisionError,
    TransportError,
    WireDecodeError,
)


class UserFacingCliError(click.ClickException):
    """Error shown to the user as "Error: <message>" with exit code 1."""

    def show(self, file: IO[str] | None = None) -> None:
        click.echo(click.style("Error: ", fg="red") + self.format_message(), err=True)


@contextmanager
def client_errors_reported() -> Iterator[None]:
    """Report plans client errors raised in the block as UserFacingCliError."""
    try:
        yield
    except (NotValidError, RevisionError, WireDecodeError, PlanApiError, TransportError) as e:
        raise UserFacingCliError(str(e)) from e
