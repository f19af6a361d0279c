"""Command synthesis — one click command per MCP tool, built at runtime.

For every property of a tool's input schema the synthesizer registers a
typed option (see :mod:`mcpcurl.synth.kinds`).  Before the command's
``run`` callback is reached, the invocation is checked in a fixed order:

1. every required parameter was supplied,
2. every enum-constrained string holds an allowed value,
3. the values marshal into an argument map.

Only then is ``run(tool_name, arguments)`` called, so a rejected invocation
never reaches the server.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Collection, Iterable, Mapping
from typing import Any

import click
from pydantic import BaseModel

from mcpcurl.protocols.mcp.models import MCPToolDef, Property
from mcpcurl.synth.errors import EnumValidationError, MissingRequiredError
from mcpcurl.synth.kinds import ParamKind, classify
from mcpcurl.synth.marshal import build_arguments, explicit_dests

logger = logging.getLogger(__name__)

RunCallback = Callable[[str, dict[str, Any]], None]
OptionFactory = Callable[["ParamBinding", str], click.Option]

_NON_IDENTIFIER = re.compile(r"\W")
_RESERVED_FLAGS = frozenset({"--help"})


class ParamBinding(BaseModel):
    """Ties a schema property to the click option that carries it."""

    model_config = {"frozen": True}

    name: str
    dest: str
    kind: ParamKind
    required: bool = False
    enum: tuple[str, ...] = ()

    @property
    def flag(self) -> str:
        if self.kind is ParamKind.OBJECT_LIST:
            return f"--{self.name}-json"
        return f"--{self.name}"


class EnumValidator:
    """Checks all enum-constrained string parameters of one command.

    Built once from the command's complete set of bindings.
    """

    def __init__(self, bindings: Iterable[ParamBinding]) -> None:
        self._constrained = tuple(
            b for b in bindings if b.kind is ParamKind.STRING and b.enum
        )

    @property
    def parameters(self) -> list[str]:
        return [b.name for b in self._constrained]

    def __call__(self, values: Mapping[str, Any]) -> None:
        for binding in self._constrained:
            value = values.get(binding.dest)
            if value and value not in binding.enum:
                raise EnumValidationError(binding.name, binding.enum)


def check_required(bindings: Iterable[ParamBinding], explicit: Collection[str]) -> None:
    """Raise :class:`MissingRequiredError` for the first absent required parameter."""
    for binding in bindings:
        if binding.required and binding.dest not in explicit:
            raise MissingRequiredError(binding.name)


def bind_parameters(tool: MCPToolDef) -> list[ParamBinding]:
    """Create bindings for every property of *tool* the client understands."""
    schema = tool.input_schema
    bindings: list[ParamBinding] = []
    taken: set[str] = set()
    flags = set(_RESERVED_FLAGS)
    for name, prop in schema.properties.items():
        kind = classify(prop)
        if kind is None:
            logger.debug(
                "Skipping parameter %s of %s: unsupported type %r", name, tool.name, prop.type
            )
            continue
        enum = tuple(str(v) for v in prop.enum) if kind is ParamKind.STRING else ()
        binding = ParamBinding(
            name=name,
            dest=_dest_for(name, taken),
            kind=kind,
            required=schema.is_required(name),
            enum=enum,
        )
        if binding.flag in flags:
            logger.warning(
                "Skipping parameter %s of %s: flag %s is already in use",
                name,
                tool.name,
                binding.flag,
            )
            continue
        flags.add(binding.flag)
        taken.add(binding.dest)
        bindings.append(binding)
    return bindings


def build_operation_command(tool: MCPToolDef, run: RunCallback) -> click.Command:
    """Synthesize the click command for *tool*."""
    bindings = bind_parameters(tool)
    validator = EnumValidator(bindings)
    props = tool.input_schema.properties
    options = [
        _OPTION_FACTORIES[b.kind](b, _help_text(props[b.name], b)) for b in bindings
    ]

    def callback(**values: Any) -> None:
        ctx = click.get_current_context()
        explicit = explicit_dests(ctx, bindings)
        check_required(bindings, explicit)
        validator(values)
        arguments = build_arguments(bindings, values, explicit)
        run(tool.name, arguments)

    return click.Command(
        name=tool.name,
        callback=callback,
        params=options,
        help=tool.description or None,
        short_help=_first_line(tool.description),
    )


def _dest_for(name: str, taken: set[str]) -> str:
    dest = _NON_IDENTIFIER.sub("_", name)
    if not dest or not dest.isidentifier():
        dest = f"_{dest}"
    candidate = dest
    suffix = 2
    while candidate in taken:
        candidate = f"{dest}_{suffix}"
        suffix += 1
    return candidate


def _help_text(prop: Property, binding: ParamBinding) -> str:
    parts = [prop.description] if prop.description else []
    if binding.enum:
        parts.append(f"(one of: {', '.join(binding.enum)})")
    if binding.kind is ParamKind.NUMBER:
        if prop.minimum is not None:
            parts.append(f"(min: {prop.minimum:g})")
        if prop.maximum is not None:
            parts.append(f"(max: {prop.maximum:g})")
    if binding.kind is ParamKind.OBJECT_LIST:
        parts.append("(provide as JSON array)")
    if not binding.required:
        parts.append("(optional)")
    return " ".join(parts)


def _first_line(text: str) -> str | None:
    stripped = text.strip()
    return stripped.splitlines()[0] if stripped else None


# ---------------------------------------------------------------------------
# One option factory per parameter kind
# ---------------------------------------------------------------------------


def _string_option(binding: ParamBinding, help_text: str) -> click.Option:
    return click.Option([binding.flag, binding.dest], type=click.STRING, default="", help=help_text)


def _number_option(binding: ParamBinding, help_text: str) -> click.Option:
    return click.Option([binding.flag, binding.dest], type=click.FLOAT, default=0.0, help=help_text)


def _boolean_option(binding: ParamBinding, help_text: str) -> click.Option:
    return click.Option(
        [binding.flag, binding.dest],
        type=click.BOOL,
        default=False,
        is_flag=False,
        flag_value=True,
        metavar="[true|false]",
        help=help_text,
    )


def _string_list_option(binding: ParamBinding, help_text: str) -> click.Option:
    return click.Option(
        [binding.flag, binding.dest],
        type=click.STRING,
        multiple=True,
        default=(),
        help=help_text,
    )


def _object_list_option(binding: ParamBinding, help_text: str) -> click.Option:
    return click.Option(
        [binding.flag, binding.dest],
        type=click.STRING,
        default="",
        metavar="JSON",
        help=help_text,
    )


_OPTION_FACTORIES: dict[ParamKind, OptionFactory] = {
    ParamKind.STRING: _string_option,
    ParamKind.NUMBER: _number_option,
    ParamKind.BOOLEAN: _boolean_option,
    ParamKind.STRING_LIST: _string_list_option,
    ParamKind.OBJECT_LIST: _object_list_option,
}
