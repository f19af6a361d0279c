"""MCP models — JSON-RPC 2.0 messages and tool definitions.

Covers the two methods this client speaks: tool discovery (``tools/list``)
and execution (``tools/call``).
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, Field

# ---------------------------------------------------------------------------
# JSON-RPC 2.0 envelope
# ---------------------------------------------------------------------------

METHOD_LIST_TOOLS = "tools/list"
METHOD_CALL_TOOL = "tools/call"


class RequestParams(BaseModel):
    """``params`` of a request; both fields are omitted for ``tools/list``."""

    name: str | None = None
    arguments: dict[str, Any] | None = None


class JsonRpcRequest(BaseModel):
    """A JSON-RPC 2.0 request message."""

    jsonrpc: str = "2.0"
    id: int = 0
    method: str
    params: RequestParams = Field(default_factory=RequestParams)


class JsonRpcError(BaseModel):
    """A JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None


class JsonRpcResponse(BaseModel):
    """A JSON-RPC 2.0 response message."""

    jsonrpc: str = "2.0"
    id: int | str | None = None
    result: dict[str, Any] | None = None
    error: JsonRpcError | None = None


# ---------------------------------------------------------------------------
# MCP-specific payloads
# ---------------------------------------------------------------------------


class Property(BaseModel):
    """One parameter of a tool's input schema."""

    type: str = ""
    description: str = ""
    enum: list[Any] = Field(default_factory=list)
    minimum: float | None = None
    maximum: float | None = None
    items: PropertyItem | None = None


class PropertyItem(BaseModel):
    """Element type of an ``array`` property."""

    model_config = {"populate_by_name": True}

    type: str = ""
    properties: dict[str, Property] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)
    additional_properties: bool = Field(default=False, alias="additionalProperties")


Property.model_rebuild()


class InputSchema(BaseModel):
    """The ``inputSchema`` of a tool."""

    model_config = {"populate_by_name": True}

    type: str = "object"
    properties: dict[str, Property] = Field(default_factory=dict)
    required: list[str] = Field(default_factory=list)
    additional_properties: bool = Field(default=False, alias="additionalProperties")

    def is_required(self, name: str) -> bool:
        return name in self.required


class MCPToolDef(BaseModel):
    """A tool definition as returned by ``tools/list``."""

    model_config = {"populate_by_name": True}

    name: str
    description: str = ""
    input_schema: InputSchema = Field(
        default_factory=InputSchema,
        validation_alias=AliasChoices("inputSchema", "input_schema", "schema"),
        serialization_alias="inputSchema",
    )


class Catalogue(BaseModel):
    """The ``result`` of ``tools/list``.

    A bare ``{"operations": [...]}`` document is accepted as well.
    """

    tools: list[MCPToolDef] = Field(
        default_factory=list,
        validation_alias=AliasChoices("tools", "operations"),
    )


class ContentItem(BaseModel):
    """One entry of a ``tools/call`` result's ``content`` list."""

    type: str
    text: str = ""


class ToolCallResult(BaseModel):
    """The ``result`` of ``tools/call``."""

    content: list[ContentItem] = Field(default_factory=list)
