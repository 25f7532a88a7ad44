"""Directive records produced by the extraction engine."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from chisel.directive.resolver import ResolutionKind


def to_prompt(tag_text: str, *, marker: str = "//", sentinel: str = "@ai") -> str:
    """Strip comment markers and the sentinel from a directive's comment block.

    Per line: trim leading spaces/tabs, drop one ``"<marker> "`` prefix, drop
    one ``"<sentinel> "`` prefix, then trim. Empty lines are discarded.
    """
    result: list[str] = []
    for line in tag_text.split("\n"):
        line = line.lstrip(" \t")
        line = line.removeprefix(f"{marker} ")
        line = line.removeprefix(f"{sentinel} ")
        line = line.strip()
        if line:
            result.append(line)
    return "\n".join(result)


@dataclass(frozen=True, slots=True)
class Directive:
    """A tagged comment bound to a function-like construct.

    Holds only copied strings and offsets, never tree nodes. Byte offsets are
    0-based and end-exclusive; lines are 1-based and inclusive. ``binding``
    is the resolution strategy that fired; it compares and serializes as its
    string value (``"inline"`` or ``"doc"``).
    """

    tag_text: str
    function_name: str
    function_source: str
    function_start_line: int
    function_end_line: int
    function_start_byte: int
    function_end_byte: int
    comment_start_byte: int
    comment_end_byte: int
    binding: ResolutionKind

    def prompt(self, *, marker: str = "//", sentinel: str = "@ai") -> str:
        """Instruction text with comment syntax removed. See to_prompt()."""
        return to_prompt(self.tag_text, marker=marker, sentinel=sentinel)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return asdict(self)
