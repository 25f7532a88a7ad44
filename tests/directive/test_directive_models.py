"""Tests for Directive records and the prompt transform."""

from __future__ import annotations

import dataclasses
import json

import pytest

from chisel.directive.models import Directive, to_prompt
from chisel.directive.resolver import ResolutionKind


def _directive(**overrides: object) -> Directive:
    fields: dict[str, object] = {
        "tag_text": "// @ai implement this",
        "function_name": "doSomething",
        "function_source": "func doSomething() error {\n\treturn nil\n}",
        "function_start_line": 3,
        "function_end_line": 5,
        "function_start_byte": 14,
        "function_end_byte": 56,
        "comment_start_byte": 42,
        "comment_end_byte": 63,
        "binding": ResolutionKind.ENCLOSING,
    }
    fields.update(overrides)
    return Directive(**fields)  # type: ignore[arg-type]


class TestToPrompt:
    @pytest.mark.parametrize(
        ("tag_text", "expected"),
        [
            ("// @ai implement this", "implement this"),
            (
                "// Some context here\n// @ai implement with care\n// more details follow",
                "Some context here\nimplement with care\nmore details follow",
            ),
            ("//  @ai extra space", "@ai extra space"),
            ("//@ai no space", "//@ai no space"),
            ("// @ai first\n//\n// \n// last", "first\n//\nlast"),
            ("\t// @ai indented  ", "indented"),
        ],
    )
    def test_strips_marker_then_sentinel(self, tag_text: str, expected: str) -> None:
        assert to_prompt(tag_text) == expected

    def test_custom_marker_and_sentinel(self) -> None:
        assert to_prompt("# @todo tidy up", marker="#", sentinel="@todo") == "tidy up"

    def test_empty_block_yields_empty_prompt(self) -> None:
        assert to_prompt("") == ""


class TestDirective:
    def test_prompt_delegates_to_transform(self) -> None:
        assert _directive().prompt() == "implement this"

    def test_is_immutable(self) -> None:
        directive = _directive()
        with pytest.raises(dataclasses.FrozenInstanceError):
            directive.function_name = "other"  # type: ignore[misc]

    def test_to_dict_has_every_field(self) -> None:
        data = _directive().to_dict()

        assert data["function_name"] == "doSomething"
        assert data["binding"] == "inline"
        assert set(data) == {f.name for f in dataclasses.fields(Directive)}

    def test_to_dict_serializes_binding_as_string(self) -> None:
        data = _directive(binding=ResolutionKind.FOLLOWING).to_dict()

        assert json.loads(json.dumps(data))["binding"] == "doc"

    def test_equal_records_compare_equal(self) -> None:
        assert _directive() == _directive()
        assert _directive() != _directive(comment_start_byte=0)
