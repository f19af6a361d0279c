"""Shared CLI output formatters."""

from __future__ import annotations

import json
from typing import Any

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mcpcurl.protocols.errors import RemoteError, RenderError
from mcpcurl.protocols.mcp.models import JsonRpcResponse, MCPToolDef, ToolCallResult

console = Console()
err_console = Console(stderr=True, soft_wrap=True)


def render_response(response_text: str, *, pretty: bool) -> str:
    """Format a ``tools/call`` response for display.

    With *pretty* off the text is returned untouched.  Otherwise every
    ``text`` content item must hold a JSON object or a JSON array of objects
    and is re-indented; an envelope without content falls back to the raw
    text.  The whole output is built before anything is printed.
    """
    if not pretty:
        return response_text

    try:
        response = JsonRpcResponse.model_validate_json(response_text)
    except ValidationError as exc:
        raise RenderError(f"failed to parse JSON: {exc}") from exc

    if response.error is not None:
        raise RemoteError(response.error.code, response.error.message)

    try:
        result = ToolCallResult.model_validate(response.result or {})
    except ValidationError as exc:
        raise RenderError(str(exc)) from exc

    if not result.content:
        return response_text

    blocks = [_pretty_text(item.text) for item in result.content if item.type == "text"]
    return "\n".join(blocks)


def _pretty_text(text: str) -> str:
    try:
        decoded: Any = json.loads(text)
    except json.JSONDecodeError:
        decoded = None

    if isinstance(decoded, dict):
        return json.dumps(decoded, indent=2, ensure_ascii=False)
    # JSON-lines style payloads arrive as an array of objects
    if isinstance(decoded, list) and all(isinstance(entry, dict) for entry in decoded):
        return json.dumps(decoded, indent=2, ensure_ascii=False)
    raise RenderError("text content is neither a JSON object nor a JSON array of objects")


def print_operations_table(tools: list[MCPToolDef]) -> None:
    """Pretty-print the tool catalogue as a table."""
    table = Table(title="Operations")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Required")

    for tool in tools:
        required = [
            name for name in tool.input_schema.required if name in tool.input_schema.properties
        ]
        table.add_row(
            tool.name,
            _truncate(tool.description),
            ", ".join(required) or "-",
        )

    console.print(table)


def echo_output(text: str) -> None:
    """Write *text* to stdout in one piece."""
    if text:
        click.echo(text, nl=not text.endswith("\n"))


def report_error(exc: Exception) -> None:
    """Write a one-line error message to stderr."""
    err_console.print(f"[red]Error:[/red] {escape(str(exc))}")


def _truncate(text: str, max_len: int = 80) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."
