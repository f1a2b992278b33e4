"""Base classes and types for docblock sniffs.

This module provides the foundational abstractions shared by every sniff:
severity levels, the Violation record handed to the host, the per-file
SniffContext, and the BaseSniff interface.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .tokens import TokenStream, TokenType

if TYPE_CHECKING:
    from .config import SnifferConfig, SniffConfig
    from .fix import AutoFix, TokenFixer
    from .reporter import Reporter


class Severity(Enum):
    """Severity levels for violations."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class SniffError(Exception):
    """Base exception for sniff failures."""


@dataclass
class Violation:
    """A coding-standard violation reported by a sniff.

    The host owns presentation; a violation only records what was found,
    where, and the optional fix payload.
    """

    sniff_id: str  # e.g., "Commenting.FunctionComment"
    code: str  # e.g., "ReturnBeforeThrows"
    message: str
    token_index: int
    severity: Severity = Severity.MEDIUM
    is_error: bool = True
    fixable: bool = False
    fix: "AutoFix | None" = None

    @property
    def full_code(self) -> str:
        """Sniff ID and violation code joined, e.g. 'Commenting.FunctionComment.ReturnBeforeThrows'."""
        return f"{self.sniff_id}.{self.code}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result = {
            "code": self.full_code,
            "message": self.message,
            "token_index": self.token_index,
            "severity": self.severity.value,
            "type": "error" if self.is_error else "warning",
            "fixable": self.fixable,
        }
        if self.fix is not None:
            result["fix"] = self.fix.to_dict()
        return result


@dataclass
class SniffContext:
    """Everything a sniff needs while processing one file."""

    stream: TokenStream
    reporter: "Reporter"
    fixer: "TokenFixer"
    config: "SnifferConfig | None" = None
    file_path: Path | None = None

    def get_sniff_config(self, sniff_id: str) -> "SniffConfig | None":
        """Get configuration for a specific sniff, if any."""
        if self.config is None:
            return None
        return self.config.get_sniff_config(sniff_id)


class BaseSniff(ABC):
    """Abstract base class for sniffs.

    A sniff registers the token types it listens for and is called once
    per matching token. It reports through ``context.reporter`` and
    rewrites tokens only through ``context.fixer``.
    """

    @property
    @abstractmethod
    def sniff_id(self) -> str:
        """Unique sniff identifier.

        Format: Category.Name (e.g., 'Commenting.FunctionComment')
        """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable sniff name."""

    @property
    def category(self) -> str:
        """Sniff category, taken from the identifier prefix."""
        return self.sniff_id.split(".", 1)[0].lower()

    @property
    def default_severity(self) -> Severity:
        """Default severity level for violations from this sniff."""
        return Severity.MEDIUM

    @property
    def description(self) -> str:
        """Detailed description of what this sniff checks."""
        return f"Sniff {self.sniff_id}: {self.name}"

    @abstractmethod
    def register(self) -> list[TokenType]:
        """Token types this sniff wants to be called for."""

    @abstractmethod
    def process(self, context: SniffContext, stack_ptr: int) -> None:
        """Process one matching token.

        Args:
            context: SniffContext for the file being checked
            stack_ptr: Index of the token that triggered the call
        """

    def get_severity(self, config: "SniffConfig | None") -> Severity:
        """Get severity from config or use default.

        Args:
            config: Optional sniff-specific configuration

        Returns:
            Severity level to use for violations
        """
        if config and config.severity:
            try:
                return Severity(config.severity.lower())
            except ValueError:
                pass
        return self.default_severity

    def __repr__(self) -> str:
        """String representation of the sniff."""
        return f"<{self.__class__.__name__} {self.sniff_id}>"
