"""Tests for argument marshaling."""

from __future__ import annotations

import pytest

from mcpcurl.synth.errors import ArgumentDecodeError
from mcpcurl.synth.kinds import ParamKind
from mcpcurl.synth.marshal import build_arguments
from mcpcurl.synth.synthesizer import ParamBinding


def _binding(name: str, kind: ParamKind) -> ParamBinding:
    return ParamBinding(name=name, dest=name, kind=kind)


BINDINGS = [
    _binding("owner", ParamKind.STRING),
    _binding("page", ParamKind.NUMBER),
    _binding("force", ParamKind.BOOLEAN),
    _binding("labels", ParamKind.STRING_LIST),
    _binding("comments", ParamKind.OBJECT_LIST),
]

DEFAULTS = {"owner": "", "page": 0.0, "force": False, "labels": (), "comments": ""}


class TestInclusion:
    def test_nothing_set_gives_empty_map(self) -> None:
        assert build_arguments(BINDINGS, DEFAULTS, explicit=set()) == {}

    def test_string_included_when_non_empty(self) -> None:
        values = {**DEFAULTS, "owner": "golang"}
        assert build_arguments(BINDINGS, values, explicit={"owner"}) == {"owner": "golang"}

    def test_number_included_when_explicit(self) -> None:
        values = {**DEFAULTS, "page": 2.0}
        assert build_arguments(BINDINGS, values, explicit={"page"}) == {"page": 2}

    def test_explicit_zero_number_included(self) -> None:
        assert build_arguments(BINDINGS, DEFAULTS, explicit={"page"}) == {"page": 0}

    def test_fractional_number_kept_as_float(self) -> None:
        values = {**DEFAULTS, "page": 2.5}
        assert build_arguments(BINDINGS, values, explicit={"page"}) == {"page": 2.5}

    def test_unset_boolean_omitted(self) -> None:
        assert "force" not in build_arguments(BINDINGS, DEFAULTS, explicit=set())

    def test_explicit_false_boolean_included(self) -> None:
        assert build_arguments(BINDINGS, DEFAULTS, explicit={"force"}) == {"force": False}

    def test_explicit_true_boolean_included(self) -> None:
        values = {**DEFAULTS, "force": True}
        assert build_arguments(BINDINGS, values, explicit={"force"}) == {"force": True}

    def test_string_list_flattens_commas(self) -> None:
        values = {**DEFAULTS, "labels": ("bug,docs", "help wanted")}
        result = build_arguments(BINDINGS, values, explicit={"labels"})
        assert result == {"labels": ["bug", "docs", "help wanted"]}

    def test_object_list_parsed(self) -> None:
        values = {**DEFAULTS, "comments": '[{"path": "a.go", "line": 3}]'}
        result = build_arguments(BINDINGS, values, explicit={"comments"})
        assert result == {"comments": [{"path": "a.go", "line": 3}]}


class TestDecodeErrors:
    def test_malformed_json(self) -> None:
        values = {**DEFAULTS, "comments": "[{"}
        with pytest.raises(ArgumentDecodeError) as exc_info:
            build_arguments(BINDINGS, values, explicit={"comments"})
        assert exc_info.value.parameter == "comments"

    def test_json_object_is_not_an_array(self) -> None:
        values = {**DEFAULTS, "comments": '{"path": "a.go"}'}
        with pytest.raises(ArgumentDecodeError, match="JSON array"):
            build_arguments(BINDINGS, values, explicit={"comments"})


def test_schema_name_used_as_key() -> None:
    binding = ParamBinding(name="per-page", dest="per_page", kind=ParamKind.NUMBER)
    result = build_arguments([binding], {"per_page": 30.0}, explicit={"per_page"})
    assert result == {"per-page": 30}
