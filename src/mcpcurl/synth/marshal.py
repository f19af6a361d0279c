"""Argument marshaling — resolved option values to a ``tools/call`` argument map.

Each :class:`ParamKind` has one extractor deciding whether a value is
present and what it looks like on the wire.  Numbers and booleans count as
present only when the option was given explicitly; strings and lists count
as present when they are non-empty.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Collection, Iterable, Mapping
from typing import TYPE_CHECKING, Any

import click
from click.core import ParameterSource

from mcpcurl.synth.errors import ArgumentDecodeError
from mcpcurl.synth.kinds import ParamKind

if TYPE_CHECKING:
    from mcpcurl.synth.synthesizer import ParamBinding

_EXPLICIT_SOURCES = frozenset({ParameterSource.COMMANDLINE, ParameterSource.ENVIRONMENT})

_ABSENT = object()

Extractor = Callable[["ParamBinding", Any, bool], Any]


def explicit_dests(ctx: click.Context, bindings: Iterable[ParamBinding]) -> set[str]:
    """Destinations of the options the user actually supplied."""
    return {b.dest for b in bindings if ctx.get_parameter_source(b.dest) in _EXPLICIT_SOURCES}


def build_arguments(
    bindings: Iterable[ParamBinding],
    values: Mapping[str, Any],
    explicit: Collection[str],
) -> dict[str, Any]:
    """Build the invocation map for one command execution.

    Raises :class:`ArgumentDecodeError` if a raw-JSON option is not a JSON
    array.
    """
    arguments: dict[str, Any] = {}
    for binding in bindings:
        extract = _EXTRACTORS[binding.kind]
        value = extract(binding, values.get(binding.dest), binding.dest in explicit)
        if value is not _ABSENT:
            arguments[binding.name] = value
    return arguments


def _extract_string(_binding: ParamBinding, value: Any, _explicit: bool) -> Any:
    return value if value else _ABSENT


def _extract_number(_binding: ParamBinding, value: Any, explicit: bool) -> Any:
    if not explicit or value is None:
        return _ABSENT
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _extract_boolean(_binding: ParamBinding, value: Any, explicit: bool) -> Any:
    if not explicit or value is None:
        return _ABSENT
    return bool(value)


def _extract_string_list(_binding: ParamBinding, value: Any, _explicit: bool) -> Any:
    # Each occurrence may itself be comma separated: --labels a,b --labels c
    items = [part for raw in value or () for part in raw.split(",") if part]
    return items if items else _ABSENT


def _extract_object_list(binding: ParamBinding, value: Any, _explicit: bool) -> Any:
    if not value:
        return _ABSENT
    try:
        decoded = json.loads(value)
    except json.JSONDecodeError as exc:
        raise ArgumentDecodeError(binding.name, str(exc)) from exc
    if not isinstance(decoded, list):
        raise ArgumentDecodeError(binding.name, "expected a JSON array")
    return decoded


_EXTRACTORS: dict[ParamKind, Extractor] = {
    ParamKind.STRING: _extract_string,
    ParamKind.NUMBER: _extract_number,
    ParamKind.BOOLEAN: _extract_boolean,
    ParamKind.STRING_LIST: _extract_string_list,
    ParamKind.OBJECT_LIST: _extract_object_list,
}
