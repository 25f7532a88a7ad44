"""Tag query: locate directive comments with a tree-sitter pattern.

Matching is structural, so only comment nodes are candidates; a string
literal containing the sentinel never matches. The query captures every
comment and the sentinel test runs over the raw comment bytes, so source
that is not valid UTF-8 is never decoded here.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import TYPE_CHECKING

import structlog
from tree_sitter import Query, QueryCursor, QueryError

from chisel.core.errors import DirectiveParseError

if TYPE_CHECKING:
    from tree_sitter import Node

    from chisel.directive.grammar import Grammar

logger = structlog.get_logger()

CAPTURE_NAME = "directive.comment"


def build_tag_query(comment_kind: str) -> str:
    """Build the S-expression capturing every comment node."""
    return f"(({comment_kind}) @{CAPTURE_NAME})"


def build_tag_pattern(marker: str, sentinel: str) -> re.Pattern[bytes]:
    """Compile the byte pattern for ``<marker><ws>*<sentinel>``.

    Callers anchor it with ``Pattern.match`` at the comment start offset.
    """
    return re.compile(re.escape(marker.encode()) + rb"\s*" + re.escape(sentinel.encode()))


class TagQuery:
    """Compiled tag query for one grammar and sentinel."""

    def __init__(self, grammar: Grammar, sentinel: str) -> None:
        self.sentinel = sentinel
        self.source = build_tag_query(grammar.pack.comment_kind)
        self.pattern = build_tag_pattern(grammar.pack.line_comment_marker, sentinel)
        try:
            self._query = Query(grammar.language, self.source)
        except (QueryError, ValueError) as err:
            logger.error("tag_query_compile_failed", grammar=grammar.name, error=str(err))
            raise DirectiveParseError.query_compile(grammar.name, str(err)) from err

    def matches(self, root: Node, code: bytes) -> Iterator[Node]:
        """Yield tagged comment nodes in document order.

        A fresh cursor is used per call so independent trees never share state.
        """
        cursor = QueryCursor(self._query)
        captures = cursor.captures(root)
        for node in sorted(captures.get(CAPTURE_NAME, []), key=lambda n: n.start_byte):
            if self.pattern.match(code, node.start_byte, node.end_byte):
                yield node
