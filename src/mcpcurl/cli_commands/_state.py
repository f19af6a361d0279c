"""Per-process CLI state shared by all subcommands through ``ctx.obj``."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mcpcurl.config import ClientSettings
from mcpcurl.protocols.mcp.client import MCPClient
from mcpcurl.protocols.mcp.transport import StdioTransport, Transport

if TYPE_CHECKING:
    from mcpcurl.protocols.mcp.models import MCPToolDef


class CliState:
    """Settings plus the catalogue, fetched at most once per process.

    *transport* overrides the subprocess transport; tests pass a stub here.
    """

    def __init__(
        self,
        settings: ClientSettings | None = None,
        transport: Transport | None = None,
    ) -> None:
        self.settings = settings or ClientSettings()
        self.transport = transport
        self.commands: dict[str, click.Command] | None = None
        self._tools: list[MCPToolDef] | None = None

    def client(self) -> MCPClient:
        """Build a client for the configured server command."""
        if not self.settings.server_command:
            msg = "--server-command is required"
            raise click.UsageError(msg)
        transport = self.transport or StdioTransport(timeout=self.settings.timeout)
        return MCPClient(self.settings.server_command, transport)

    def tools(self) -> list[MCPToolDef]:
        """Return the tool catalogue, fetching it on first use."""
        if self._tools is None:
            self._tools = self.client().fetch_catalogue()
        return self._tools
