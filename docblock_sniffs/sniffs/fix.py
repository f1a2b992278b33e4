"""
Auto-fix capability for sniffs.

This module provides the AutoFix dataclass describing a docblock rewrite,
and the TokenFixer that applies rewrites to a TokenStream in atomic
changesets.
"""

from dataclasses import dataclass
from typing import Any

from ..sniffer_logging import get_logger
from .base import SniffError
from .tokens import TokenStream

logger = get_logger()


class FixerError(SniffError):
    """Raised when a changeset is used incorrectly."""


class TokenFixer:
    """Applies token replacements to a stream in changesets.

    Replacements made inside a changeset are buffered and only written
    to the stream by ``end_changeset``, so a changeset is applied either
    completely or not at all.
    """

    def __init__(self, stream: TokenStream):
        self.stream = stream
        self._pending: dict[int, str] | None = None
        self.fix_count = 0

    @property
    def in_changeset(self) -> bool:
        """Whether a changeset is currently open."""
        return self._pending is not None

    def begin_changeset(self) -> None:
        """Open a new changeset.

        Raises:
            FixerError: If a changeset is already open
        """
        if self._pending is not None:
            raise FixerError("A changeset is already open")
        self._pending = {}

    def replace_token(self, index: int, content: str) -> None:
        """Queue a replacement of one token's content.

        Raises:
            FixerError: If no changeset is open or the index is out of range
        """
        if self._pending is None:
            raise FixerError("replace_token() called outside a changeset")
        if index < 0 or index >= len(self.stream):
            raise FixerError(f"Token index {index} is out of range")
        self._pending[index] = content

    def end_changeset(self) -> int:
        """Write every queued replacement and close the changeset.

        Returns:
            Number of tokens whose content changed

        Raises:
            FixerError: If no changeset is open
        """
        if self._pending is None:
            raise FixerError("end_changeset() called without an open changeset")

        pending, self._pending = self._pending, None
        changed = 0
        for index, content in pending.items():
            if self.stream[index].content != content:
                self.stream.replace_content(index, content)
                changed += 1

        # Changesets that leave the stream as it was are not fixes
        if changed:
            self.fix_count += 1
        return changed

    def rollback_changeset(self) -> None:
        """Discard the open changeset without touching the stream."""
        self._pending = None

    def apply(self, fix: "AutoFix") -> None:
        """Apply a whole AutoFix as a single changeset."""
        self.begin_changeset()
        try:
            fix.stage(self)
        except Exception:
            self.rollback_changeset()
            raise
        replaced = self.end_changeset()
        logger.info(
            f"Applied fix to tokens {fix.start_index}-{fix.end_index} "
            f"({replaced} tokens): {fix.description}"
        )


@dataclass
class AutoFix:
    """Represents an automatic rewrite of a token span.

    The whole new text goes into the start token; every token strictly
    between start and end is blanked. The end token is left untouched.
    """

    old_text: str
    new_text: str
    start_index: int
    end_index: int
    description: str

    def stage(self, fixer: TokenFixer) -> None:
        """Queue this fix's replacements on an open changeset."""
        fixer.replace_token(self.start_index, self.new_text)
        for index in range(self.start_index + 1, self.end_index):
            fixer.replace_token(index, "")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "old_text": self.old_text,
            "new_text": self.new_text,
            "start_index": self.start_index,
            "end_index": self.end_index,
            "description": self.description,
        }

    def preview(self) -> str:
        """Generate a human-readable preview of the fix.

        Returns:
            Formatted diff-like preview string
        """
        lines = []
        lines.append(f"# {self.description}")
        lines.append(f"# Tokens {self.start_index}-{self.end_index}")
        lines.append("")
        lines.append("--- old")
        lines.append("+++ new")

        for line in self.old_text.split("\n"):
            lines.append(f"-{line}")
        for line in self.new_text.split("\n"):
            lines.append(f"+{line}")

        return "\n".join(lines)
