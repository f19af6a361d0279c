"""Closed set of parameter kinds the synthesizer knows how to handle."""

from __future__ import annotations

from enum import Enum

from mcpcurl.protocols.mcp.models import Property


class ParamKind(str, Enum):
    """How a schema property is exposed on the command line."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    STRING_LIST = "string_list"
    OBJECT_LIST = "object_list"


_SCALAR_KINDS = {
    "string": ParamKind.STRING,
    "number": ParamKind.NUMBER,
    "boolean": ParamKind.BOOLEAN,
}

_ARRAY_KINDS = {
    "string": ParamKind.STRING_LIST,
    "object": ParamKind.OBJECT_LIST,
}


def classify(prop: Property) -> ParamKind | None:
    """Return the kind for *prop*, or ``None`` if it cannot be exposed."""
    if prop.type == "array":
        if prop.items is None:
            return None
        return _ARRAY_KINDS.get(prop.items.type)
    return _SCALAR_KINDS.get(prop.type)
