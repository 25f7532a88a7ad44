"""GrammarPack registry: tree-sitter config for each supported grammar.

A GrammarPack carries everything the directive engine needs to know about a
grammar:
- Grammar install metadata (package, module, loader function)
- Line-comment marker and comment node kind
- Function-like node kinds and the field holding their name

The PACKS registry is the canonical lookup: ``PACKS["go"]``.
"""

from __future__ import annotations

from dataclasses import dataclass

ANONYMOUS_FUNCTION = "<anonymous>"


@dataclass(frozen=True)
class GrammarPack:
    """Directive-related tree-sitter configuration for a single grammar."""

    # -- Identity --
    name: str  # Canonical grammar name ("go")

    # -- Grammar install --
    grammar_package: str  # PyPI package ("tree-sitter-go")
    grammar_module: str  # Python import ("tree_sitter_go")
    min_version: str
    language_func: str = "language"

    # -- Comments --
    comment_kind: str = "comment"
    line_comment_marker: str = "//"

    # -- Functions --
    function_kinds: frozenset[str] = frozenset()
    name_field: str = "name"

    def is_function(self, kind: str) -> bool:
        return kind in self.function_kinds

    def is_comment(self, kind: str) -> bool:
        return kind == self.comment_kind


# =========================================================================
# GO
# =========================================================================

GO_PACK = GrammarPack(
    name="go",
    grammar_package="tree-sitter-go",
    grammar_module="tree_sitter_go",
    min_version="0.23.0",
    function_kinds=frozenset({"function_declaration", "method_declaration", "func_literal"}),
)


PACKS: dict[str, GrammarPack] = {
    GO_PACK.name: GO_PACK,
}


def get_pack(name: str) -> GrammarPack | None:
    """Look up a grammar pack by name."""
    return PACKS.get(name)
