"""Directive extraction engine."""

from chisel.directive.models import Directive, to_prompt
from chisel.directive.packs import ANONYMOUS_FUNCTION, PACKS, GrammarPack, get_pack
from chisel.directive.parser import DirectiveParser, extract_directives
from chisel.directive.resolver import Resolution, ResolutionKind, resolve_function

__all__ = [
    "ANONYMOUS_FUNCTION",
    "PACKS",
    "Directive",
    "DirectiveParser",
    "GrammarPack",
    "Resolution",
    "ResolutionKind",
    "extract_directives",
    "get_pack",
    "resolve_function",
    "to_prompt",
]
