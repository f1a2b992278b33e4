"""
Documentation-completeness checks composed into FunctionCommentSniff.

The completeness rules themselves (missing @param, type mismatches, ...)
live in the host's standard checker. FunctionCommentSniff only needs
something it can hand the comment, return and param checks to.
"""

from abc import ABC, abstractmethod

from ..base import SniffContext


class CompletenessChecker(ABC):
    """Standard function-comment checks a sniff can delegate to."""

    @abstractmethod
    def process_comment(self, context: SniffContext, stack_ptr: int) -> None:
        """Check the function comment as a whole (presence, layout)."""

    @abstractmethod
    def process_return(
        self, context: SniffContext, stack_ptr: int, comment_start: int
    ) -> None:
        """Check the @return documentation."""

    @abstractmethod
    def process_params(
        self, context: SniffContext, stack_ptr: int, comment_start: int
    ) -> None:
        """Check the @param documentation."""


class NullCompletenessChecker(CompletenessChecker):
    """Checker that accepts every comment. Used when no host checker is given."""

    def process_comment(self, context: SniffContext, stack_ptr: int) -> None:
        return None

    def process_return(
        self, context: SniffContext, stack_ptr: int, comment_start: int
    ) -> None:
        return None

    def process_params(
        self, context: SniffContext, stack_ptr: int, comment_start: int
    ) -> None:
        return None
