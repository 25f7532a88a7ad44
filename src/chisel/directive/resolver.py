"""Bind a directive comment to the function it annotates.

Two strategies, tried in order:

1. Enclosing: the nearest function-like ancestor of the comment. A comment in
   a nested closure binds to the innermost closure.
2. Following: only for comments outside any function. Skip over sibling
   comments; the first non-comment sibling binds if it is function-like.

Anything else is unresolved and the comment is dropped.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from chisel.directive.grammar import SyntaxNode
from chisel.directive.packs import GrammarPack


class ResolutionKind(str, Enum):
    """How a comment was bound to its function."""

    ENCLOSING = "inline"
    FOLLOWING = "doc"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class Resolution:
    """Outcome of function resolution for one comment."""

    kind: ResolutionKind
    function: SyntaxNode | None = None

    @property
    def resolved(self) -> bool:
        return self.function is not None


UNRESOLVED = Resolution(ResolutionKind.UNRESOLVED)


def find_enclosing_function(comment: SyntaxNode, pack: GrammarPack) -> SyntaxNode | None:
    node = comment.parent
    while node is not None:
        if pack.is_function(node.type):
            return node
        node = node.parent
    return None


def find_following_function(comment: SyntaxNode, pack: GrammarPack) -> SyntaxNode | None:
    sibling = comment.next_sibling
    while sibling is not None:
        if pack.is_comment(sibling.type):
            sibling = sibling.next_sibling
            continue
        return sibling if pack.is_function(sibling.type) else None
    return None


def resolve_function(comment: SyntaxNode, pack: GrammarPack) -> Resolution:
    """Resolve the function a directive comment belongs to."""
    if (func := find_enclosing_function(comment, pack)) is not None:
        return Resolution(ResolutionKind.ENCLOSING, func)
    if (func := find_following_function(comment, pack)) is not None:
        return Resolution(ResolutionKind.FOLLOWING, func)
    return UNRESOLVED
