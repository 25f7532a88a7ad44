"""Core module exports."""

from chisel.core.errors import (
    ChiselError,
    ConfigError,
    DirectiveParseError,
    ErrorCode,
    GrammarError,
)
from chisel.core.logging import (
    clear_request_id,
    configure_logging,
    get_logger,
    get_request_id,
    set_request_id,
)

__all__ = [
    # Errors
    "ChiselError",
    "ConfigError",
    "DirectiveParseError",
    "ErrorCode",
    "GrammarError",
    # Logging
    "clear_request_id",
    "configure_logging",
    "get_logger",
    "get_request_id",
    "set_request_id",
]
