"""
PHP docblock sniffs.

This package provides the sniff infrastructure (token stream, reporter,
fixer, engine, configuration) and the Commenting.FunctionComment sniff.

Example usage:
    from docblock_sniffs.sniffs import CollectingReporter, TokenStream, create_sniff_engine

    stream = TokenStream(tokens)  # tokens produced by the host tokenizer
    engine = create_sniff_engine()
    result = engine.process(stream, CollectingReporter(fix_enabled=True))

    if result.fixes_applied:
        print(result.fixed_content)
"""

from .base import BaseSniff, Severity, SniffContext, SniffError, Violation
from .commenting import (
    CompletenessChecker,
    FunctionCommentSniff,
    NullCompletenessChecker,
)
from .config import (
    ConfigError,
    SniffConfig,
    SnifferConfig,
    SnifferConfigLoader,
    get_default_config,
)
from .docblock import (
    NOT_FOUND,
    DocblockLocation,
    DocblockSegment,
    OrderingViolation,
    SegmentKind,
    check_return_before_throws,
    has_inherit_doc,
    locate_docblock,
    reorder_docblock_segments,
    split_docblock_segments,
)
from .engine import SniffEngine, SniffEngineResult, create_sniff_engine
from .fix import AutoFix, FixerError, TokenFixer
from .reporter import CollectingReporter, Reporter
from .tokens import Token, TokenStream, TokenType

__all__ = [
    # Base types
    "Severity",
    "SniffError",
    "Violation",
    "SniffContext",
    "BaseSniff",
    # Tokens
    "Token",
    "TokenType",
    "TokenStream",
    # Docblock helpers
    "DocblockLocation",
    "DocblockSegment",
    "NOT_FOUND",
    "OrderingViolation",
    "SegmentKind",
    "check_return_before_throws",
    "has_inherit_doc",
    "locate_docblock",
    "reorder_docblock_segments",
    "split_docblock_segments",
    # Reporting and fixing
    "Reporter",
    "CollectingReporter",
    "AutoFix",
    "FixerError",
    "TokenFixer",
    # Configuration
    "ConfigError",
    "SniffConfig",
    "SnifferConfig",
    "SnifferConfigLoader",
    "get_default_config",
    # Sniffs
    "CompletenessChecker",
    "NullCompletenessChecker",
    "FunctionCommentSniff",
    # Engine
    "SniffEngine",
    "SniffEngineResult",
    "create_sniff_engine",
]
