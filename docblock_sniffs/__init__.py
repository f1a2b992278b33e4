"""Docblock Sniffs - PHP docblock coding-standard checks

Provides the FunctionComment sniff, which skips completeness checks for
{@inheritdoc} docblocks and keeps @throws tags after the @return tag.
"""

__version__ = "1.0.0"
__author__ = "Superbrave"
__description__ = "PHP function docblock sniffs with auto-fix support"

from .sniffs import (
    CollectingReporter,
    FunctionCommentSniff,
    SniffEngine,
    TokenFixer,
    TokenStream,
    create_sniff_engine,
)

__all__ = [
    "CollectingReporter",
    "FunctionCommentSniff",
    "SniffEngine",
    "TokenFixer",
    "TokenStream",
    "create_sniff_engine",
]
