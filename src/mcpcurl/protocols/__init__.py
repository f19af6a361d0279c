"""Protocol layer — MCP over a one-shot stdio subprocess."""

from mcpcurl.protocols.errors import (
    ExitError,
    ProtocolError,
    RemoteError,
    RenderError,
    SchemaDecodeError,
    SpawnError,
    TransportError,
    TransportTimeoutError,
    WriteError,
)

__all__ = [
    "ExitError",
    "ProtocolError",
    "RemoteError",
    "RenderError",
    "SchemaDecodeError",
    "SpawnError",
    "TransportError",
    "TransportTimeoutError",
    "WriteError",
]
