"""
Docblock lookups and the @return/@throws reordering.

Everything here is a pure function over a TokenStream or docblock text.
Tag positions are found by plain substring search, so a ``@return`` or
``@throws`` written in a description line counts the same as a real tag.
"""

import re
from dataclasses import dataclass
from enum import Enum

from .tokens import TokenStream, TokenType

INHERIT_DOC_PATTERN = re.compile(r"{@inheritdoc}", re.IGNORECASE)

RETURN_MARKER = "@return"
THROWS_MARKER = "@throws"

# Comment continuation followed by an annotation marker
SEGMENT_SENTINEL = "* @"

# Closing marker at the very end of a docblock
CLOSE_TAG_PATTERN = re.compile(r"\*/\s*\Z")


@dataclass(frozen=True)
class DocblockLocation:
    """Where a function's docblock sits in the token stream."""

    text: str  # open through close tag
    body: str  # open tag up to, not including, the close tag
    start_index: int
    end_index: int
    found: bool = True


NOT_FOUND = DocblockLocation(text="", body="", start_index=-1, end_index=-1, found=False)


class SegmentKind(Enum):
    """Classification of a docblock segment."""

    GENERAL = "general"
    RETURN = "return"
    THROWS = "throws"


@dataclass(frozen=True)
class DocblockSegment:
    """One chunk of a docblock between ``* @`` sentinels."""

    kind: SegmentKind
    text: str


@dataclass(frozen=True)
class OrderingViolation:
    """A docblock whose first @throws comes before its first @return."""

    return_index: int
    throws_index: int
    fixed_text: str | None = None


def locate_docblock(stream: TokenStream, function_index: int) -> DocblockLocation:
    """Find the docblock in front of a function token.

    Args:
        stream: Token stream of the file
        function_index: Index of the FUNCTION token

    Returns:
        DocblockLocation, or NOT_FOUND when there is no complete docblock
    """
    if function_index <= 0:
        return NOT_FOUND

    start = stream.find_previous(TokenType.DOC_COMMENT_OPEN_TAG, function_index - 1)
    if start is None:
        return NOT_FOUND

    end = stream.find_next(TokenType.DOC_COMMENT_CLOSE_TAG, start)
    if end is None:
        return NOT_FOUND

    return DocblockLocation(
        text=stream.get_text(start, end),
        body=stream.get_text(start, end - 1),
        start_index=start,
        end_index=end,
    )


def has_inherit_doc(docblock: str | None) -> bool:
    """Return True when the docblock contains {@inheritdoc} in any case."""
    if not docblock:
        return False
    return INHERIT_DOC_PATTERN.search(docblock) is not None


def classify_segment(piece: str) -> SegmentKind:
    """Classify a piece that followed a ``* @`` sentinel."""
    prefix = piece[:6].lower()
    if prefix == "return":
        return SegmentKind.RETURN
    if prefix == "throws":
        return SegmentKind.THROWS
    return SegmentKind.GENERAL


def split_docblock_segments(text: str) -> list[DocblockSegment]:
    """Split docblock text on ``* @`` and classify every piece.

    The first piece is always general. Joining the segment texts with
    the sentinel gives back the input unchanged.
    """
    pieces = text.split(SEGMENT_SENTINEL)
    segments = [DocblockSegment(SegmentKind.GENERAL, pieces[0])]
    for piece in pieces[1:]:
        segments.append(DocblockSegment(classify_segment(piece), piece))
    return segments


def reorder_docblock_segments(text: str) -> str:
    """Move every @throws segment behind every @return segment.

    General segments come first, then return segments, then throws
    segments, each group keeping its original order. A trailing close
    tag is kept at the very end.
    """
    tail = ""
    match = CLOSE_TAG_PATTERN.search(text)
    if match:
        tail = text[match.start() :]
        text = text[: match.start()]

    segments = split_docblock_segments(text)
    ordered = [s.text for s in segments if s.kind is SegmentKind.GENERAL]
    ordered += [s.text for s in segments if s.kind is SegmentKind.RETURN]
    ordered += [s.text for s in segments if s.kind is SegmentKind.THROWS]

    return SEGMENT_SENTINEL.join(ordered) + tail


def check_return_before_throws(
    text: str, fix_requested: bool = False
) -> OrderingViolation | None:
    """Check that @return comes before @throws in a docblock.

    Args:
        text: Docblock text
        fix_requested: Also compute the reordered text

    Returns:
        OrderingViolation if @throws comes first, None otherwise
    """
    if has_inherit_doc(text):
        return None

    return_index = text.find(RETURN_MARKER)
    throws_index = text.find(THROWS_MARKER)
    if return_index < 0 or throws_index < 0:
        return None

    if return_index < throws_index:
        return None

    fixed_text = reorder_docblock_segments(text) if fix_requested else None
    return OrderingViolation(
        return_index=return_index,
        throws_index=throws_index,
        fixed_text=fixed_text,
    )
