"""
Function comment sniff.

Runs the standard function-comment checks, except that {@inheritdoc}
docblocks skip the @return and @param checks, and enforces that @throws
tags come after the @return tag.
"""

from ...sniffer_logging import get_logger
from ..base import BaseSniff, Severity, SniffContext
from ..docblock import (
    check_return_before_throws,
    has_inherit_doc,
    locate_docblock,
    reorder_docblock_segments,
)
from ..fix import AutoFix
from ..tokens import TokenType
from .completeness import CompletenessChecker, NullCompletenessChecker

logger = get_logger()


class FunctionCommentSniff(BaseSniff):
    """Check function docblocks, honouring {@inheritdoc}.

    Comment, return and param checks are delegated to a composed
    CompletenessChecker. The @return/@throws order check is done here.
    """

    RETURN_BEFORE_THROWS = "ReturnBeforeThrows"
    RETURN_BEFORE_THROWS_MESSAGE = "The @return tag must be placed before the @throws tag(s)"

    def __init__(self, base_checker: CompletenessChecker | None = None):
        self.base_checker = base_checker or NullCompletenessChecker()

    @property
    def sniff_id(self) -> str:
        return "Commenting.FunctionComment"

    @property
    def name(self) -> str:
        return "Function Comment"

    @property
    def default_severity(self) -> Severity:
        return Severity.MEDIUM

    @property
    def description(self) -> str:
        return (
            "Checks function docblocks. Docblocks containing {@inheritdoc} "
            "skip the @return and @param checks, and @throws tags must "
            "follow the @return tag."
        )

    def register(self) -> list[TokenType]:
        return [TokenType.FUNCTION]

    def process(self, context: SniffContext, stack_ptr: int) -> None:
        """Run all function comment checks for one function.

        Args:
            context: SniffContext for the file being checked
            stack_ptr: Index of the FUNCTION token
        """
        self.base_checker.process_comment(context, stack_ptr)

        location = locate_docblock(context.stream, stack_ptr)
        if not location.found:
            return

        self.process_return(context, stack_ptr, location.start_index)
        self.process_params(context, stack_ptr, location.start_index)
        self.process_return_before_throws(context, stack_ptr)

    def process_return(
        self, context: SniffContext, stack_ptr: int, comment_start: int
    ) -> None:
        """Process the return comment unless the docblock is inherited."""
        if self.has_inherit_doc(context, stack_ptr):
            logger.debug(f"Skipping @return checks for {{@inheritdoc}} at token {stack_ptr}")
            return

        self.base_checker.process_return(context, stack_ptr, comment_start)

    def process_params(
        self, context: SniffContext, stack_ptr: int, comment_start: int
    ) -> None:
        """Process the param comments unless the docblock is inherited."""
        if self.has_inherit_doc(context, stack_ptr):
            logger.debug(f"Skipping @param checks for {{@inheritdoc}} at token {stack_ptr}")
            return

        self.base_checker.process_params(context, stack_ptr, comment_start)

    def has_inherit_doc(self, context: SniffContext, stack_ptr: int) -> bool:
        """Detect an {@inheritdoc} tag in the function's docblock."""
        location = locate_docblock(context.stream, stack_ptr)
        return has_inherit_doc(location.text)

    def process_return_before_throws(self, context: SniffContext, stack_ptr: int) -> None:
        """Report, and optionally fix, @throws tags placed before @return.

        Args:
            context: SniffContext for the file being checked
            stack_ptr: Index of the FUNCTION token
        """
        location = locate_docblock(context.stream, stack_ptr)
        if not location.found:
            return

        if check_return_before_throws(location.text) is None:
            return

        config = context.get_sniff_config(self.sniff_id)
        auto_fix = config.auto_fix if config else True
        is_error = config.is_error if config else True

        # The close tag stays where it is; only the body is rewritten
        new_text = reorder_docblock_segments(location.body)
        fixable = auto_fix and new_text != location.body

        fix = None
        if fixable:
            fix = AutoFix(
                old_text=location.body,
                new_text=new_text,
                start_index=location.start_index,
                end_index=location.end_index,
                description="Move @throws tags after the @return tag",
            )

        accepted = context.reporter.report(
            self.RETURN_BEFORE_THROWS_MESSAGE,
            stack_ptr,
            self.RETURN_BEFORE_THROWS,
            fixable=fixable,
            fix=fix,
            sniff_id=self.sniff_id,
            severity=self.get_severity(config),
            is_error=is_error,
        )

        if accepted and fix is not None:
            context.fixer.apply(fix)
