"""Config module exports."""

from chisel.config.loader import ChiselSettings, load_config
from chisel.config.models import (
    ChiselConfig,
    DirectiveConfig,
    LoggingConfig,
    LogOutputConfig,
)

__all__ = [
    "load_config",
    "ChiselConfig",
    "ChiselSettings",
    "DirectiveConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
