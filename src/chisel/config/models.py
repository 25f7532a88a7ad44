"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (CHISEL__SECTION__KEY)
3. Repo YAML (.chisel/config.yaml)
4. Global YAML (~/.config/chisel/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    CHISEL__<SECTION>__<KEY>=<VALUE>

Examples:
    CHISEL__LOGGING__LEVEL=DEBUG
    CHISEL__DIRECTIVE__SENTINEL=@todo
    CHISEL__DIRECTIVE__STRICT_SYNTAX=true
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        CHISEL__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every orphaned directive.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class DirectiveConfig(BaseModel):
    """Directive extraction configuration.

    Env vars:
        CHISEL__DIRECTIVE__SENTINEL: Token that marks a comment as a directive
        CHISEL__DIRECTIVE__GRAMMAR: Grammar pack used to parse sources
        CHISEL__DIRECTIVE__STRICT_SYNTAX: Reject sources with syntax errors
    """

    sentinel: str = Field(
        default="@ai",
        description="Token that must follow the comment marker. Case-sensitive.",
    )
    grammar: str = Field(
        default="go",
        description="Grammar pack name. See chisel.directive.packs.PACKS.",
    )
    strict_syntax: bool = Field(
        default=False,
        description="Fail the whole parse when the tree contains ERROR or MISSING nodes. "
        "Tree-sitter recovers from most errors, so lenient parsing is the default.",
    )

    @field_validator("sentinel")
    @classmethod
    def validate_sentinel(cls, v: str) -> str:
        if not v or any(ch.isspace() for ch in v):
            raise ValueError(f"Sentinel must be a non-empty token without whitespace, got {v!r}")
        return v

    @field_validator("grammar")
    @classmethod
    def validate_grammar(cls, v: str) -> str:
        from chisel.directive.packs import PACKS

        if v not in PACKS:
            raise ValueError(f"Unknown grammar {v!r}; expected one of {sorted(PACKS)}")
        return v


class ChiselConfig(BaseModel):
    """Root configuration for Chisel.

    All settings can be configured via:
    1. Environment variables: CHISEL__SECTION__KEY
    2. YAML config files (repo or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    directive: DirectiveConfig = Field(default_factory=DirectiveConfig)
