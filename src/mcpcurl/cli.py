"""mcpcurl CLI entrypoint."""

from __future__ import annotations

import logging

import click
from rich.logging import RichHandler

from mcpcurl import __version__
from mcpcurl.cli_commands._output import err_console, report_error
from mcpcurl.cli_commands._state import CliState
from mcpcurl.config import ClientSettings, env_var
from mcpcurl.protocols.errors import ProtocolError
from mcpcurl.protocols.mcp.transport import DEFAULT_TIMEOUT
from mcpcurl.synth.errors import InvocationError


class MainGroup(click.Group):
    """Root group; turns domain errors into a message on stderr and exit 1."""

    def invoke(self, ctx: click.Context) -> object:
        try:
            return super().invoke(ctx)
        except (InvocationError, ProtocolError) as exc:
            report_error(exc)
            ctx.exit(1)


@click.group(cls=MainGroup)
@click.version_option(version=__version__, prog_name="mcpcurl")
@click.option(
    "--server-command",
    "--stdio-server-cmd",
    "server_command",
    default="",
    envvar=env_var("server_command"),
    help="Command that starts the MCP server on stdio (split on whitespace, no quoting).",
)
@click.option(
    "--pretty",
    type=click.BOOL,
    default=True,
    show_default=True,
    metavar="true|false",
    envvar=env_var("pretty"),
    help="Pretty-print JSON and JSON-lines responses.",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=DEFAULT_TIMEOUT,
    show_default=True,
    envvar=env_var("timeout"),
    help="Seconds to wait for the server process before killing it.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def main(
    ctx: click.Context,
    server_command: str,
    pretty: bool,
    timeout: float,
    verbose: bool,
) -> None:
    """mcpcurl — call MCP server tools from the command line.

    Commands under ``operations`` are generated from the server's
    ``tools/list`` response each time the program runs.
    """
    _configure_logging(verbose)
    state = ctx.ensure_object(CliState)
    state.settings = ClientSettings(
        server_command=server_command,
        pretty=pretty,
        timeout=timeout,
        verbose=verbose,
    )


def _configure_logging(verbose: bool) -> None:
    package_logger = logging.getLogger("mcpcurl")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=err_console, show_time=False, show_path=False)
        )


# Register subcommands
from mcpcurl.cli_commands import register_commands  # noqa: E402

register_commands(main)

if __name__ == "__main__":
    main()
