"""Chisel - extract @ai directives from source code and bind them to functions."""

from chisel.directive import Directive, DirectiveParser, extract_directives

__version__ = "0.1.0"

__all__ = ["Directive", "DirectiveParser", "extract_directives", "__version__"]
