"""CLI subcommand registration."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all subcommands on the CLI group."""
    from mcpcurl.cli_commands.catalogue import catalogue
    from mcpcurl.cli_commands.operations import operations

    cli.add_command(catalogue)
    cli.add_command(operations)
