"""Configuration for docblock sniffs.

This module provides the Pydantic configuration models controlling which
sniffs run, how their violations are reported, and whether fixes are
applied, plus a loader for JSON configuration files.
"""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..sniffer_logging import get_logger
from .base import SniffError

logger = get_logger()


class ConfigError(SniffError):
    """Raised when a configuration file cannot be used."""


class SniffConfig(BaseModel):
    """Individual sniff configuration."""

    model_config = ConfigDict(extra="allow")

    enabled: bool = Field(default=True, description="Enable this sniff")
    severity: str = Field(default="MEDIUM", description="Sniff severity override")
    auto_fix: bool = Field(
        default=True, description="Offer automatic fixes for this sniff's violations"
    )
    report_type: str = Field(
        default="error",
        pattern="^(error|warning)$",
        description="Report violations as 'error' or 'warning'",
    )

    @property
    def is_error(self) -> bool:
        """Whether violations are reported as errors."""
        return self.report_type == "error"


class SnifferConfig(BaseModel):
    """Configuration for a sniffing run.

    Controls which sniffs run, whether the fixer is active, and how
    sniff failures are handled.
    """

    model_config = ConfigDict(extra="allow")

    enabled: bool = Field(default=True, description="Enable sniffing")
    fix_enabled: bool = Field(
        default=False, description="Apply fixes while sniffing (fixer mode)"
    )
    continue_on_error: bool = Field(
        default=True, description="Keep running other sniffs when one raises"
    )
    sniffs: dict[str, SniffConfig] = Field(
        default_factory=dict, description="Sniff-specific configuration"
    )

    def is_sniff_enabled(self, sniff_id: str) -> bool:
        """Check if a specific sniff is enabled.

        Args:
            sniff_id: Sniff identifier (e.g., 'Commenting.FunctionComment')

        Returns:
            True if the sniff should run
        """
        if not self.enabled:
            return False

        if sniff_id in self.sniffs:
            return self.sniffs[sniff_id].enabled

        return True

    def get_sniff_config(self, sniff_id: str) -> SniffConfig | None:
        """Get configuration for a specific sniff.

        Args:
            sniff_id: Sniff identifier

        Returns:
            SniffConfig if exists, None otherwise
        """
        return self.sniffs.get(sniff_id)


class SnifferConfigLoader:
    """Loads a SnifferConfig from a JSON file."""

    DEFAULT_FILE = ".docblock-sniffs.json"

    def __init__(self, config_path: Path | None = None):
        self.config_path = Path(config_path) if config_path else Path.cwd() / self.DEFAULT_FILE

    def load(self) -> SnifferConfig:
        """Load configuration, falling back to defaults when no file exists.

        Raises:
            ConfigError: If the file is not valid JSON or fails validation
        """
        if not self.config_path.exists():
            logger.debug(f"No sniffer config at {self.config_path}, using defaults")
            return SnifferConfig()

        try:
            with open(self.config_path) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in sniffer config: {e}")
            raise ConfigError(f"Invalid sniffer config: {e}") from None
        except OSError as e:
            logger.error(f"Failed to read sniffer config: {e}")
            raise ConfigError(f"Cannot read sniffer config: {e}") from e

        try:
            config = SnifferConfig.model_validate(data)
        except ValidationError as e:
            logger.error(f"Sniffer config failed validation: {e}")
            raise ConfigError(f"Invalid sniffer config: {e}") from None

        logger.info(f"Loaded sniffer config from {self.config_path}")
        return config


def get_default_config() -> SnifferConfig:
    """Default configuration: every sniff enabled, fixer off."""
    return SnifferConfig()
