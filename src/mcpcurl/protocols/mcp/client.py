"""MCPClient — discovery (``tools/list``) and execution (``tools/call``).

Each call is an independent exchange over its own server process; there is
no handshake and no session state between calls.
"""

from __future__ import annotations

import json
import logging
import secrets
from typing import Any

from pydantic import ValidationError

from mcpcurl.protocols.errors import SchemaDecodeError
from mcpcurl.protocols.mcp.models import (
    METHOD_CALL_TOOL,
    METHOD_LIST_TOOLS,
    Catalogue,
    JsonRpcRequest,
    JsonRpcResponse,
    MCPToolDef,
    RequestParams,
)
from mcpcurl.protocols.mcp.transport import StdioTransport, Transport
from mcpcurl.utils.telemetry import (
    ATTR_ARGUMENT_COUNT,
    ATTR_METHOD,
    ATTR_REQUEST_ID,
    ATTR_RESPONSE_BYTES,
    ATTR_TOOL_NAME,
    get_tracer,
)

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

_ID_RANGE = 10000


def build_request(
    method: str,
    name: str | None = None,
    arguments: dict[str, Any] | None = None,
) -> str:
    """Serialize a one-line JSON-RPC request with a random id."""
    if method == METHOD_CALL_TOOL:
        params = RequestParams(name=name or "", arguments=arguments or {})
    else:
        params = RequestParams()
    request = JsonRpcRequest(
        id=secrets.randbelow(_ID_RANGE),
        method=method,
        params=params,
    )
    return request.model_dump_json(exclude_none=True)


class MCPClient:
    """Talks to an MCP server started by *command* for every request.

    Usage::

        client = MCPClient("github-mcp-server stdio")
        tools = client.fetch_catalogue()
        text = client.call_tool("get_issue", {"owner": "golang", "issue_number": 1})
    """

    def __init__(self, command: str, transport: Transport | None = None) -> None:
        self._command = command
        self._transport = transport or StdioTransport()

    @property
    def command(self) -> str:
        return self._command

    def fetch_catalogue_raw(self) -> str:
        """Send ``tools/list`` and return the undecoded response text."""
        return self._send(build_request(METHOD_LIST_TOOLS), METHOD_LIST_TOOLS)

    def fetch_catalogue(self) -> list[MCPToolDef]:
        """Send ``tools/list`` and decode the tool definitions."""
        return decode_catalogue(self.fetch_catalogue_raw())

    def call_tool(self, name: str, arguments: dict[str, Any]) -> str:
        """Send ``tools/call`` for *name* and return the raw response text."""
        with _tracer.start_as_current_span("mcpcurl.tool") as span:
            span.set_attribute(ATTR_TOOL_NAME, name)
            span.set_attribute(ATTR_ARGUMENT_COUNT, len(arguments))
            body = build_request(METHOD_CALL_TOOL, name, arguments)
            return self._send(body, METHOD_CALL_TOOL)

    def _send(self, body: str, method: str) -> str:
        with _tracer.start_as_current_span("mcpcurl.request") as span:
            span.set_attribute(ATTR_METHOD, method)
            span.set_attribute(ATTR_REQUEST_ID, json.loads(body)["id"])
            logger.debug("Sending %s request: %s", method, body)
            response = self._transport.execute(self._command, body)
            span.set_attribute(ATTR_RESPONSE_BYTES, len(response))
            return response


def decode_catalogue(response_text: str) -> list[MCPToolDef]:
    """Decode a ``tools/list`` response into tool definitions.

    Raises :class:`SchemaDecodeError` for malformed JSON, a JSON-RPC error
    response, or a payload that does not match the tool schema.
    """
    try:
        payload = json.loads(response_text)
    except json.JSONDecodeError as exc:
        raise SchemaDecodeError(str(exc)) from exc
    if not isinstance(payload, dict):
        raise SchemaDecodeError("expected a JSON object")

    try:
        response = JsonRpcResponse.model_validate(payload)
        if response.error is not None:
            raise SchemaDecodeError(f"server error {response.error.code}: {response.error.message}")
        body = response.result if response.result is not None else payload
        catalogue = Catalogue.model_validate(body)
    except ValidationError as exc:
        raise SchemaDecodeError(str(exc)) from exc

    tools: list[MCPToolDef] = []
    seen: set[str] = set()
    for tool in catalogue.tools:
        if tool.name in seen:
            logger.warning("Duplicate tool %r in catalogue; keeping the first definition", tool.name)
            continue
        seen.add(tool.name)
        tools.append(tool)
    return tools
