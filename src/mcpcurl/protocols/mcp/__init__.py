"""MCP protocol — one-shot stdio client."""

from mcpcurl.protocols.mcp.client import MCPClient, build_request
from mcpcurl.protocols.mcp.models import (
    Catalogue,
    ContentItem,
    InputSchema,
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    MCPToolDef,
    Property,
    PropertyItem,
)
from mcpcurl.protocols.mcp.transport import StdioTransport, Transport

__all__ = [
    "Catalogue",
    "ContentItem",
    "InputSchema",
    "JsonRpcError",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "MCPClient",
    "MCPToolDef",
    "Property",
    "PropertyItem",
    "StdioTransport",
    "Transport",
    "build_request",
]
