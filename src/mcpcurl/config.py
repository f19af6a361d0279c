"""Client settings — global CLI options collected into one model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from mcpcurl.protocols.mcp.transport import DEFAULT_TIMEOUT

ENV_PREFIX = "MCPCURL"


class ClientSettings(BaseModel):
    """Options shared by every subcommand.

    Each field can also be set through ``MCPCURL_<FIELD>`` in the
    environment (e.g. ``MCPCURL_SERVER_COMMAND``).
    """

    server_command: str = Field(
        default="",
        description="Command that starts the MCP server on stdio (split on whitespace).",
    )
    pretty: bool = Field(default=True, description="Pretty-print JSON and JSON-lines responses.")
    timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0,
        description="Seconds to wait for the server process before killing it.",
    )
    verbose: bool = Field(default=False, description="Log debug output to stderr.")


def env_var(field: str) -> str:
    """Environment variable name for a settings *field*."""
    return f"{ENV_PREFIX}_{field.upper()}"
