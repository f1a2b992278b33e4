"""
Commenting sniffs for PHP docblocks.

Sniffs in this package:
- Commenting.FunctionComment - {@inheritdoc} handling and @return/@throws order
"""

from .completeness import CompletenessChecker, NullCompletenessChecker
from .function_comment import FunctionCommentSniff

__all__ = [
    "CompletenessChecker",
    "FunctionCommentSniff",
    "NullCompletenessChecker",
]
