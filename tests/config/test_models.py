"""Tests for config/models.py module.

Covers:
- LogOutputConfig model
- LoggingConfig model
- DirectiveConfig model
- ChiselConfig root model
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from chisel.config.models import (
    ChiselConfig,
    DirectiveConfig,
    LoggingConfig,
    LogOutputConfig,
)


class TestLogOutputConfig:
    """Tests for LogOutputConfig model."""

    def test_defaults(self) -> None:
        """Default values."""
        config = LogOutputConfig()
        assert config.format == "console"
        assert config.destination == "stderr"
        assert config.level is None

    @pytest.mark.parametrize("destination", ["stderr", "stdout", "/var/log/chisel.log"])
    def test_valid_destinations(self, destination: str) -> None:
        """Console streams and absolute paths are accepted."""
        assert LogOutputConfig(destination=destination).destination == destination

    def test_relative_path_fails(self) -> None:
        """Relative path is rejected."""
        with pytest.raises(ValidationError, match="absolute path"):
            LogOutputConfig(destination="logs/chisel.log")


class TestLoggingConfig:
    """Tests for LoggingConfig model."""

    def test_defaults(self) -> None:
        config = LoggingConfig()
        assert config.level == "INFO"
        assert len(config.outputs) == 1
        assert config.outputs[0].destination == "stderr"

    def test_invalid_level_fails(self) -> None:
        with pytest.raises(ValidationError):
            LoggingConfig(level="VERBOSE")  # type: ignore[arg-type]


class TestDirectiveConfig:
    """Tests for DirectiveConfig model."""

    def test_defaults(self) -> None:
        config = DirectiveConfig()
        assert config.sentinel == "@ai"
        assert config.grammar == "go"
        assert config.strict_syntax is False

    def test_custom_sentinel(self) -> None:
        assert DirectiveConfig(sentinel="@todo").sentinel == "@todo"

    @pytest.mark.parametrize("sentinel", ["", "@ai now", "\t@ai"])
    def test_sentinel_with_whitespace_or_empty_fails(self, sentinel: str) -> None:
        with pytest.raises(ValidationError, match="Sentinel"):
            DirectiveConfig(sentinel=sentinel)

    def test_unknown_grammar_fails(self) -> None:
        with pytest.raises(ValidationError, match="Unknown grammar"):
            DirectiveConfig(grammar="cobol")


class TestChiselConfig:
    """Tests for the root model."""

    def test_defaults(self) -> None:
        config = ChiselConfig()
        assert config.logging.level == "INFO"
        assert config.directive.sentinel == "@ai"

    def test_nested_dict_input(self) -> None:
        config = ChiselConfig.model_validate(
            {"directive": {"sentinel": "@fix", "strict_syntax": True}}
        )
        assert config.directive.sentinel == "@fix"
        assert config.directive.strict_syntax is True
