"""Shared fixtures for directive tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from chisel.directive.parser import DirectiveParser


class FakeNode:
    """Minimal stand-in for tree_sitter.Node, wired up by ``fake_tree``."""

    def __init__(
        self,
        type: str,
        *children: FakeNode,
        start_byte: int = 0,
        end_byte: int = 0,
        fields: dict[str, FakeNode] | None = None,
    ) -> None:
        self.type = type
        self.children = list(children)
        self.start_byte = start_byte
        self.end_byte = end_byte
        self.start_point = (0, start_byte)
        self.end_point = (0, end_byte)
        self.parent: FakeNode | None = None
        self._fields = fields or {}
        for child in self.children:
            child.parent = self

    def _sibling(self, offset: int) -> FakeNode | None:
        if self.parent is None:
            return None
        siblings = self.parent.children
        idx = next(i for i, n in enumerate(siblings) if n is self) + offset
        return siblings[idx] if 0 <= idx < len(siblings) else None

    @property
    def next_sibling(self) -> FakeNode | None:
        return self._sibling(1)

    @property
    def prev_sibling(self) -> FakeNode | None:
        return self._sibling(-1)

    def child_by_field_name(self, name: str) -> FakeNode | None:
        return self._fields.get(name)

    def __repr__(self) -> str:
        return f"FakeNode({self.type!r}, {self.start_byte}..{self.end_byte})"


@pytest.fixture
def node() -> Callable[..., FakeNode]:
    """Factory for FakeNode trees."""

    def build(type: str, *children: FakeNode, **kwargs: Any) -> FakeNode:
        return FakeNode(type, *children, **kwargs)

    return build


@pytest.fixture(scope="module")
def parser() -> DirectiveParser:
    """A DirectiveParser for Go with the default sentinel."""
    return DirectiveParser()
