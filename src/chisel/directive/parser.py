"""Directive extraction: source bytes in, ordered Directive records out.

Usage::

    parser = DirectiveParser()
    for directive in parser.parse(Path("main.go").read_bytes()):
        print(directive.function_name, directive.prompt())

Each call builds and discards its own tree-sitter parser, tree and query
cursor, so a DirectiveParser may be shared across threads. Either the whole
call succeeds or a single ChiselError is raised; comments that bind to no
function are skipped silently.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from chisel.config.models import DirectiveConfig
from chisel.core.errors import DirectiveParseError
from chisel.directive.collector import collect_comment_block
from chisel.directive.grammar import Grammar, node_text
from chisel.directive.models import Directive
from chisel.directive.packs import ANONYMOUS_FUNCTION
from chisel.directive.query import TagQuery
from chisel.directive.resolver import resolve_function

if TYPE_CHECKING:
    from tree_sitter import Node, Tree

    from chisel.config.models import ChiselConfig

logger = structlog.get_logger()


def _first_error_line(root: Node) -> int:
    """1-based line of the first ERROR or MISSING node, depth-first."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_error or node.is_missing:
            return node.start_point[0] + 1
        stack.extend(reversed([c for c in node.children if c.has_error or c.is_missing]))
    return root.start_point[0] + 1


class DirectiveParser:
    """Extracts directives from source code of a single grammar."""

    def __init__(self, config: DirectiveConfig | None = None) -> None:
        self.config = config or DirectiveConfig()
        self.grammar = Grammar.load(self.config.grammar)
        self.query = TagQuery(self.grammar, self.config.sentinel)

    @classmethod
    def from_config(cls, config: ChiselConfig) -> DirectiveParser:
        return cls(config.directive)

    def parse(self, code: bytes) -> list[Directive]:
        """Extract all directives from ``code``, in source order.

        Raises:
            GrammarError: If the parser cannot be configured for the grammar.
            DirectiveParseError: If tree construction fails, or the source has
                syntax errors while ``strict_syntax`` is enabled.
        """
        logger.debug("directive_parse_started", bytes=len(code), grammar=self.grammar.name)

        tree = self._build_tree(code)
        directives = self._extract(code, tree.root_node)

        logger.debug("directive_parse_completed", directives=len(directives))
        return directives

    def parse_file(self, path: Path) -> list[Directive]:
        """Read ``path`` and extract its directives."""
        return self.parse(path.read_bytes())

    def _build_tree(self, code: bytes) -> Tree:
        parser = self.grammar.new_parser()
        try:
            tree = parser.parse(code)
        except (TypeError, ValueError) as err:
            logger.error("directive_parse_failed", grammar=self.grammar.name, error=str(err))
            raise DirectiveParseError.tree_construction(self.grammar.name, str(err)) from err
        if tree is None:
            raise DirectiveParseError.tree_construction(self.grammar.name, "no tree produced")

        if self.config.strict_syntax and tree.root_node.has_error:
            line = _first_error_line(tree.root_node)
            logger.error("directive_syntax_errors", grammar=self.grammar.name, line=line)
            raise DirectiveParseError.syntax_errors(self.grammar.name, line)
        return tree

    def _extract(self, code: bytes, root: Node) -> list[Directive]:
        pack = self.grammar.pack
        directives: list[Directive] = []

        for comment in self.query.matches(root, code):
            resolution = resolve_function(comment, pack)
            if not resolution.resolved:
                logger.debug("directive_orphan_skipped", line=comment.start_point[0] + 1)
                continue

            func = resolution.function
            assert func is not None
            block = collect_comment_block(code, comment, pack)
            name_node = func.child_by_field_name(pack.name_field)
            directives.append(
                Directive(
                    tag_text=block.text,
                    function_name=(
                        node_text(code, name_node) if name_node is not None else ANONYMOUS_FUNCTION
                    ),
                    function_source=node_text(code, func),
                    function_start_line=func.start_point[0] + 1,
                    function_end_line=func.end_point[0] + 1,
                    function_start_byte=func.start_byte,
                    function_end_byte=func.end_byte,
                    comment_start_byte=block.start_byte,
                    comment_end_byte=block.end_byte,
                    binding=resolution.kind,
                )
            )

        return directives


def extract_directives(code: bytes, *, config: DirectiveConfig | None = None) -> list[Directive]:
    """Parse ``code`` with a one-off DirectiveParser."""
    return DirectiveParser(config).parse(code)
