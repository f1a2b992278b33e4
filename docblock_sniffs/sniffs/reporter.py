"""
Violation reporting channel between sniffs and the host.

A sniff calls ``report`` for each violation. The return value tells the
sniff whether the host wants the fix applied right now.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..sniffer_logging import get_logger
from .base import Severity, Violation

if TYPE_CHECKING:
    from .fix import AutoFix

logger = get_logger()


class Reporter(ABC):
    """Receives violations from sniffs."""

    @abstractmethod
    def report(
        self,
        message: str,
        token_index: int,
        code: str,
        fixable: bool = False,
        fix: "AutoFix | None" = None,
        *,
        sniff_id: str = "",
        severity: Severity = Severity.MEDIUM,
        is_error: bool = True,
    ) -> bool:
        """Record a violation.

        Args:
            message: Human-readable description of the problem
            token_index: Token the violation is anchored to
            code: Violation code within the sniff (e.g., 'ReturnBeforeThrows')
            fixable: Whether the sniff can fix this violation
            fix: Optional fix payload the sniff would apply
            sniff_id: Identifier of the reporting sniff
            severity: Severity of the violation
            is_error: Report as an error rather than a warning

        Returns:
            True if the sniff should apply its fix now
        """


class CollectingReporter(Reporter):
    """Reporter that keeps every violation in memory.

    ``fix_enabled`` mirrors the host's "fixer is running" flag: a fix is
    only accepted for fixable violations while it is set.
    """

    def __init__(self, fix_enabled: bool = False):
        self.fix_enabled = fix_enabled
        self.violations: list[Violation] = []

    def report(
        self,
        message: str,
        token_index: int,
        code: str,
        fixable: bool = False,
        fix: "AutoFix | None" = None,
        *,
        sniff_id: str = "",
        severity: Severity = Severity.MEDIUM,
        is_error: bool = True,
    ) -> bool:
        violation = Violation(
            sniff_id=sniff_id,
            code=code,
            message=message,
            token_index=token_index,
            severity=severity,
            is_error=is_error,
            fixable=fixable,
            fix=fix,
        )
        self.violations.append(violation)
        logger.debug(f"{violation.full_code} at token {token_index}: {message}")

        return fixable and self.fix_enabled

    @property
    def error_count(self) -> int:
        """Number of violations reported as errors."""
        return sum(1 for v in self.violations if v.is_error)

    @property
    def warning_count(self) -> int:
        """Number of violations reported as warnings."""
        return sum(1 for v in self.violations if not v.is_error)

    @property
    def fixable_count(self) -> int:
        """Number of violations that carry a fix."""
        return sum(1 for v in self.violations if v.fixable)

    def clear(self) -> None:
        """Forget all collected violations."""
        self.violations = []
