"""Merge a directive comment with its contiguous sibling comments."""

from __future__ import annotations

from dataclasses import dataclass

from chisel.directive.grammar import SyntaxNode, decode_span
from chisel.directive.packs import GrammarPack


@dataclass(frozen=True, slots=True)
class CommentBlock:
    """A run of adjacent comments, copied out of the source buffer."""

    text: str
    start_byte: int
    end_byte: int


def normalize_block(raw: str) -> str:
    """Trim leading spaces and tabs from every line, keeping comment markers."""
    return "\n".join(line.lstrip(" \t") for line in raw.split("\n"))


def collect_comment_block(code: bytes, comment: SyntaxNode, pack: GrammarPack) -> CommentBlock:
    """Expand ``comment`` backward and forward over adjacent comment siblings.

    Sibling adjacency in the tree already rules out intervening code, so
    blank lines between comments do not split a block.
    """
    start = comment.start_byte
    end = comment.end_byte

    sibling = comment.prev_sibling
    while sibling is not None and pack.is_comment(sibling.type):
        start = sibling.start_byte
        sibling = sibling.prev_sibling

    sibling = comment.next_sibling
    while sibling is not None and pack.is_comment(sibling.type):
        end = sibling.end_byte
        sibling = sibling.next_sibling

    raw = decode_span(code, start, end)
    return CommentBlock(text=normalize_block(raw), start_byte=start, end_byte=end)
