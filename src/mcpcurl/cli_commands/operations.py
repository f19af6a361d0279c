"""``mcpcurl operations`` — one subcommand per tool in the catalogue.

The subcommands do not exist until the catalogue has been fetched from the
server named by ``--server-command``.  If that fetch fails the group is
simply empty; ``catalogue`` keeps working.
"""

from __future__ import annotations

import functools
import logging
from typing import Any

import click

from mcpcurl.cli_commands._output import echo_output, render_response
from mcpcurl.cli_commands._state import CliState
from mcpcurl.protocols.errors import ProtocolError
from mcpcurl.synth.synthesizer import build_operation_command

logger = logging.getLogger(__name__)


class OperationsGroup(click.Group):
    """Click group whose commands are synthesized from ``tools/list``."""

    def list_commands(self, ctx: click.Context) -> list[str]:
        return sorted(self._operation_commands(ctx))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        return self._operation_commands(ctx).get(cmd_name)

    def _operation_commands(self, ctx: click.Context) -> dict[str, click.Command]:
        state = ctx.find_object(CliState)
        if state is None or not state.settings.server_command:
            return {}
        if state.commands is None:
            try:
                tools = state.tools()
            except ProtocolError as exc:
                logger.warning("Skipping operation commands: %s", exc)
                tools = []
            run = functools.partial(call_operation, state)
            state.commands = {tool.name: build_operation_command(tool, run) for tool in tools}
        return state.commands


def call_operation(state: CliState, name: str, arguments: dict[str, Any]) -> None:
    """Send ``tools/call`` and print the rendered response."""
    response = state.client().call_tool(name, arguments)
    echo_output(render_response(response, pretty=state.settings.pretty))


@click.group("operations", cls=OperationsGroup)
def operations() -> None:
    """Invoke an operation exposed by the server."""
