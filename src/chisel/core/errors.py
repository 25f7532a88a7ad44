"""Chisel error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 30xx: Grammar setup
- 31xx: Directive parsing
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Grammar (30xx)
    GRAMMAR_UNAVAILABLE = 3001
    GRAMMAR_SETUP_FAILED = 3002

    # Parse (31xx)
    QUERY_COMPILE_FAILED = 3101
    PARSE_FAILED = 3102
    SYNTAX_ERRORS = 3103


@dataclass(frozen=True, slots=True)
class ChiselError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'PARSE_FAILED')."""
        return self.code.name

    @property
    def operation(self) -> str | None:
        """Engine operation that failed, when known."""
        return self.details.get("operation")

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(ChiselError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class GrammarError(ChiselError):
    """The tree-sitter grammar could not be loaded or configured."""

    @classmethod
    def unavailable(cls, grammar: str, reason: str) -> "GrammarError":
        return cls(
            code=ErrorCode.GRAMMAR_UNAVAILABLE,
            message=f"Grammar not available: {grammar} ({reason})",
            details={"operation": "load_language", "grammar": grammar, "reason": reason},
        )

    @classmethod
    def setup_failed(cls, grammar: str, reason: str) -> "GrammarError":
        return cls(
            code=ErrorCode.GRAMMAR_SETUP_FAILED,
            message=f"Setting language {grammar} failed: {reason}",
            details={"operation": "set_language", "grammar": grammar, "reason": reason},
        )


class DirectiveParseError(ChiselError):
    """Query compilation or tree construction failed."""

    @classmethod
    def query_compile(cls, grammar: str, reason: str) -> "DirectiveParseError":
        return cls(
            code=ErrorCode.QUERY_COMPILE_FAILED,
            message=f"Creating directive query failed: {reason}",
            details={"operation": "compile_query", "grammar": grammar, "reason": reason},
        )

    @classmethod
    def tree_construction(cls, grammar: str, reason: str) -> "DirectiveParseError":
        return cls(
            code=ErrorCode.PARSE_FAILED,
            message=f"Parsing source failed: {reason}",
            details={"operation": "parse", "grammar": grammar, "reason": reason},
        )

    @classmethod
    def syntax_errors(cls, grammar: str, line: int) -> "DirectiveParseError":
        return cls(
            code=ErrorCode.SYNTAX_ERRORS,
            message=f"Source has syntax errors (first at line {line})",
            details={"operation": "parse", "grammar": grammar, "line": line},
        )
