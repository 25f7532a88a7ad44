"""Grammar adapter over tree-sitter.

The resolver and collector only touch nodes through the SyntaxNode protocol,
a narrow view of ``tree_sitter.Node``: kind, field lookup, sibling and parent
navigation, and byte/row positions. Nodes are borrowed views into a tree and
are only valid while that tree is alive.
"""

from __future__ import annotations

import importlib
from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol

import structlog
import tree_sitter

from chisel.core.errors import GrammarError
from chisel.directive.packs import GrammarPack, get_pack

if TYPE_CHECKING:
    from tree_sitter import Language, Parser

logger = structlog.get_logger()


class SyntaxNode(Protocol):
    """The subset of ``tree_sitter.Node`` the directive engine relies on."""

    @property
    def type(self) -> str: ...

    @property
    def parent(self) -> SyntaxNode | None: ...

    @property
    def next_sibling(self) -> SyntaxNode | None: ...

    @property
    def prev_sibling(self) -> SyntaxNode | None: ...

    @property
    def start_byte(self) -> int: ...

    @property
    def end_byte(self) -> int: ...

    @property
    def start_point(self) -> Sequence[int]: ...

    @property
    def end_point(self) -> Sequence[int]: ...

    def child_by_field_name(self, name: str, /) -> SyntaxNode | None: ...


def decode_span(code: bytes, start: int, end: int) -> str:
    """Decode ``code[start:end]`` as UTF-8, keeping undecodable bytes.

    Invalid bytes become lone surrogates, so
    ``text.encode("utf-8", "surrogateescape")`` gives back the exact span.
    """
    return code[start:end].decode("utf-8", errors="surrogateescape")


def node_text(code: bytes, node: SyntaxNode) -> str:
    """Copy the source text spanned by a node out of the buffer."""
    return decode_span(code, node.start_byte, node.end_byte)


class Grammar:
    """A loaded tree-sitter language plus its GrammarPack.

    The Language object is immutable and safe to share; parsers are created
    fresh for every parse call.
    """

    def __init__(self, pack: GrammarPack, language: Language) -> None:
        self.pack = pack
        self.language = language

    @property
    def name(self) -> str:
        return self.pack.name

    @classmethod
    def load(cls, name: str) -> Grammar:
        """Load a grammar by pack name.

        Raises:
            GrammarError: If the pack is unknown, its module is not installed,
                or tree-sitter rejects the language it provides.
        """
        pack = get_pack(name)
        if pack is None:
            raise GrammarError.unavailable(name, "no grammar pack registered")

        try:
            mod = importlib.import_module(pack.grammar_module)
            lang_fn = getattr(mod, pack.language_func)
        except (ImportError, AttributeError) as err:
            logger.error("grammar_load_failed", grammar=name, module=pack.grammar_module)
            raise GrammarError.unavailable(
                name, f"install {pack.grammar_package}>={pack.min_version}"
            ) from err

        try:
            language = tree_sitter.Language(lang_fn())
        except (TypeError, ValueError) as err:
            logger.error("grammar_setup_failed", grammar=name, error=str(err))
            raise GrammarError.setup_failed(name, str(err)) from err

        return cls(pack, language)

    def new_parser(self) -> Parser:
        """Create a parser bound to this grammar.

        Raises:
            GrammarError: If tree-sitter rejects the language (ABI mismatch).
        """
        parser = tree_sitter.Parser()
        try:
            parser.language = self.language
        except (TypeError, ValueError) as err:
            logger.error("grammar_setup_failed", grammar=self.name, error=str(err))
            raise GrammarError.setup_failed(self.name, str(err)) from err
        return parser
