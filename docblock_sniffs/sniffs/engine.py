"""Sniff engine for dispatching tokens to sniffs.

This module provides the SniffEngine class that manages sniff registration
and runs every registered sniff over a token stream.
"""

import time
from dataclasses import dataclass, field
from pathlib import Path

from ..sniffer_logging import get_logger
from .base import BaseSniff, SniffContext, Violation
from .config import SnifferConfig
from .fix import TokenFixer
from .reporter import CollectingReporter, Reporter
from .tokens import TokenStream

logger = get_logger()


@dataclass
class SniffEngineResult:
    """Aggregated result from running the sniffs over one stream."""

    violations: list[Violation] = field(default_factory=list)
    sniffs_executed: int = 0
    sniffs_skipped: int = 0
    fixes_applied: int = 0
    execution_time_ms: float = 0.0
    errors: list[tuple[str, str]] = field(default_factory=list)  # (sniff_id, error)
    fixed_content: str = ""

    @property
    def has_violations(self) -> bool:
        """Check if any violations were reported."""
        return len(self.violations) > 0

    @property
    def has_errors(self) -> bool:
        """Check if any sniff raised while running."""
        return len(self.errors) > 0

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "violations": [v.to_dict() for v in self.violations],
            "sniffs_executed": self.sniffs_executed,
            "sniffs_skipped": self.sniffs_skipped,
            "fixes_applied": self.fixes_applied,
            "execution_time_ms": self.execution_time_ms,
            "errors": [{"sniff_id": e[0], "error": e[1]} for e in self.errors],
        }


class SniffEngine:
    """Engine for running sniffs over token streams.

    Each sniff is called once for every token whose type it registered.
    """

    def __init__(self, config: SnifferConfig | None = None):
        """Initialize the sniff engine.

        Args:
            config: Optional sniffer configuration.
        """
        self.config = config or SnifferConfig()
        self._sniffs: dict[str, BaseSniff] = {}

    def register(self, sniff: BaseSniff) -> None:
        """Register a sniff with the engine.

        Raises:
            ValueError: If a sniff with the same ID is already registered.
        """
        if sniff.sniff_id in self._sniffs:
            raise ValueError(f"Sniff {sniff.sniff_id} is already registered")
        self._sniffs[sniff.sniff_id] = sniff

    def unregister(self, sniff_id: str) -> bool:
        """Unregister a sniff by ID.

        Returns:
            True if the sniff was unregistered, False if not found.
        """
        return self._sniffs.pop(sniff_id, None) is not None

    def get_sniff(self, sniff_id: str) -> BaseSniff | None:
        """Get a sniff by ID."""
        return self._sniffs.get(sniff_id)

    def get_all_sniffs(self) -> list[BaseSniff]:
        """Get all registered sniffs."""
        return list(self._sniffs.values())

    @property
    def sniff_count(self) -> int:
        """Number of registered sniffs."""
        return len(self._sniffs)

    def process(
        self,
        stream: TokenStream,
        reporter: Reporter | None = None,
        fixer: TokenFixer | None = None,
        file_path: Path | None = None,
    ) -> SniffEngineResult:
        """Run every enabled sniff over a token stream.

        Args:
            stream: Token stream of the file.
            reporter: Where violations go. Defaults to a CollectingReporter
                honouring ``config.fix_enabled``.
            fixer: Fixer for the stream. Defaults to a new TokenFixer.
            file_path: Optional path of the file, for logging.

        Returns:
            SniffEngineResult with violations and statistics.
        """
        start_time = time.perf_counter()

        if reporter is None:
            reporter = CollectingReporter(fix_enabled=self.config.fix_enabled)
        if fixer is None:
            fixer = TokenFixer(stream)

        context = SniffContext(
            stream=stream,
            reporter=reporter,
            fixer=fixer,
            config=self.config,
            file_path=file_path,
        )

        errors: list[tuple[str, str]] = []
        sniffs_executed = 0
        sniffs_skipped = 0

        for sniff in self._sniffs.values():
            if not self.config.is_sniff_enabled(sniff.sniff_id):
                sniffs_skipped += 1
                continue

            sniff_errors = self._execute_sniff(sniff, context)
            sniffs_executed += 1
            errors.extend((sniff.sniff_id, error) for error in sniff_errors)

        violations = list(getattr(reporter, "violations", []))
        total_time_ms = (time.perf_counter() - start_time) * 1000

        return SniffEngineResult(
            violations=violations,
            sniffs_executed=sniffs_executed,
            sniffs_skipped=sniffs_skipped,
            fixes_applied=fixer.fix_count,
            execution_time_ms=total_time_ms,
            errors=errors,
            fixed_content=stream.content,
        )

    def _execute_sniff(self, sniff: BaseSniff, context: SniffContext) -> list[str]:
        """Call a sniff for each token it registered.

        A failure on one token does not stop the sniff from seeing the
        remaining tokens.

        Returns:
            Error messages for the tokens where the sniff raised.
        """
        errors: list[str] = []
        for index in context.stream.indexes_of(sniff.register()):
            try:
                sniff.process(context, index)
            except Exception as e:
                if context.fixer.in_changeset:
                    context.fixer.rollback_changeset()
                where = context.file_path or "<stream>"
                logger.error(f"Sniff {sniff.sniff_id} failed at token {index} in {where}: {e}")
                if not self.config.continue_on_error:
                    raise
                errors.append(str(e))
        return errors


def create_sniff_engine(config: SnifferConfig | None = None) -> SniffEngine:
    """Create an engine with the built-in sniffs registered."""
    from .commenting import FunctionCommentSniff

    engine = SniffEngine(config)
    engine.register(FunctionCommentSniff())
    return engine
