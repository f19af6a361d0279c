"""``mcpcurl catalogue`` — fetch the server's tool catalogue."""

from __future__ import annotations

import click

from mcpcurl.cli_commands._output import echo_output, print_operations_table
from mcpcurl.cli_commands._state import CliState


@click.command("catalogue")
@click.option("--table", is_flag=True, help="Show operations as a table instead of raw JSON.")
@click.pass_obj
def catalogue(state: CliState, table: bool) -> None:
    """Fetch and print the tool catalogue (the raw ``tools/list`` response)."""
    if table:
        print_operations_table(state.tools())
        return
    echo_output(state.client().fetch_catalogue_raw())
