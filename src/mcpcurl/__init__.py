"""mcpcurl — a CLI synthesized at runtime from an MCP server's tool catalogue."""

from __future__ import annotations

__version__ = "0.1.0"
