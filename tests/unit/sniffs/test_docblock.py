"""
Unit tests for the docblock helpers.

Tests docblock location, {@inheritdoc} detection, segment splitting and
the @return/@throws ordering check and fix.
"""

import pytest

from docblock_sniffs.sniffs.docblock import (
    NOT_FOUND,
    SEGMENT_SENTINEL,
    SegmentKind,
    check_return_before_throws,
    classify_segment,
    has_inherit_doc,
    locate_docblock,
    reorder_docblock_segments,
    split_docblock_segments,
)
from docblock_sniffs.sniffs.tokens import Token, TokenStream, TokenType

SUMMARY_THROWS_FIRST = (
    "/**\n"
    " * Summary.\n"
    " *\n"
    " * @throws E1 bad\n"
    " * @throws E2 worse\n"
    " * @return int value\n"
    " */"
)

SUMMARY_RETURN_FIRST = (
    "/**\n"
    " * Summary.\n"
    " *\n"
    " * @return int value\n"
    " * @throws E1 bad\n"
    " * @throws E2 worse\n"
    " */"
)


def docblock_tokens(docblock: str) -> list[Token]:
    """Tokenize a docblock into open tag, one string token per line, close tag."""
    middle = docblock[len("/**") : -len("*/")]
    tokens = [Token(TokenType.DOC_COMMENT_OPEN_TAG, "/**")]
    for line in middle.splitlines(keepends=True):
        tokens.append(Token(TokenType.DOC_COMMENT_STRING, line))
    tokens.append(Token(TokenType.DOC_COMMENT_CLOSE_TAG, "*/"))
    return tokens


def build_stream(docblock: str | None, name: str = "foo") -> tuple[TokenStream, int]:
    """Build a stream for one PHP function; returns it and the FUNCTION index."""
    tokens = [Token(TokenType.OPEN_TAG, "<?php\n\n")]
    if docblock is not None:
        tokens.extend(docblock_tokens(docblock))
        tokens.append(Token(TokenType.WHITESPACE, "\n"))
    function_index = len(tokens)
    tokens.extend(
        [
            Token(TokenType.FUNCTION, "function"),
            Token(TokenType.WHITESPACE, " "),
            Token(TokenType.STRING, name),
            Token(TokenType.OTHER, "() {}\n"),
        ]
    )
    return TokenStream(tokens), function_index


# =============================================================================
# Docblock Locator Tests
# =============================================================================


class TestLocateDocblock:
    """Tests for locate_docblock."""

    def test_finds_docblock_before_function(self):
        """Test the docblock text, body and indexes are returned."""
        stream, function_index = build_stream(SUMMARY_RETURN_FIRST)
        location = locate_docblock(stream, function_index)

        assert location.found is True
        assert location.text == SUMMARY_RETURN_FIRST
        assert location.body == SUMMARY_RETURN_FIRST[: -len("*/")]
        assert stream[location.start_index].type is TokenType.DOC_COMMENT_OPEN_TAG
        assert stream[location.end_index].type is TokenType.DOC_COMMENT_CLOSE_TAG

    def test_missing_docblock(self):
        """Test a function without docblock gives NOT_FOUND."""
        stream, function_index = build_stream(None)
        location = locate_docblock(stream, function_index)
        assert location is NOT_FOUND
        assert location.found is False
        assert location.text == ""

    def test_function_at_start_of_stream(self):
        """Test a function token at index 0 has no docblock."""
        stream = TokenStream([Token(TokenType.FUNCTION, "function")])
        assert locate_docblock(stream, 0) is NOT_FOUND

    def test_unclosed_docblock(self):
        """Test an open tag without close tag is treated as no docblock."""
        stream = TokenStream(
            [
                Token(TokenType.DOC_COMMENT_OPEN_TAG, "/**"),
                Token(TokenType.DOC_COMMENT_STRING, " * @return int\n"),
                Token(TokenType.FUNCTION, "function"),
            ]
        )
        assert locate_docblock(stream, 2) is NOT_FOUND

    def test_picks_nearest_docblock(self):
        """Test the closest preceding docblock is used."""
        first, _ = build_stream("/** First. */", name="first")
        second, _ = build_stream("/** Second. */", name="second")
        stream = TokenStream(list(first) + list(second))
        function_index = len(first) + second.indexes_of([TokenType.FUNCTION])[0]

        location = locate_docblock(stream, function_index)
        assert location.text == "/** Second. */"

    def test_does_not_modify_stream(self):
        """Test locating is a pure read."""
        stream, function_index = build_stream(SUMMARY_THROWS_FIRST)
        before = stream.content
        locate_docblock(stream, function_index)
        assert stream.content == before


# =============================================================================
# Inherited-Doc Detector Tests
# =============================================================================


class TestHasInheritDoc:
    """Tests for has_inherit_doc."""

    @pytest.mark.parametrize(
        "marker", ["{@inheritdoc}", "{@inheritDoc}", "{@INHERITDOC}"]
    )
    def test_detects_any_case(self, marker):
        """Test the marker is matched case-insensitively."""
        assert has_inherit_doc(f"/**\n * {marker}\n */") is True

    def test_detects_marker_inside_prose(self):
        """Test the match is not anchored to a line start."""
        assert has_inherit_doc("/** See parent: {@inheritdoc} for details */") is True

    def test_plain_docblock(self):
        """Test a normal docblock is not inherited."""
        assert has_inherit_doc(SUMMARY_RETURN_FIRST) is False

    def test_requires_braces(self):
        """Test a bare @inheritdoc tag is not the inline marker."""
        assert has_inherit_doc("/**\n * @inheritdoc\n */") is False

    @pytest.mark.parametrize("docblock", ["", None])
    def test_empty_docblock(self, docblock):
        """Test missing documentation never counts as inherited."""
        assert has_inherit_doc(docblock) is False


# =============================================================================
# Segment Tests
# =============================================================================


class TestSegments:
    """Tests for segment classification and splitting."""

    @pytest.mark.parametrize(
        "piece,kind",
        [
            ("return int value\n ", SegmentKind.RETURN),
            ("Return int value\n ", SegmentKind.RETURN),
            ("returns int\n ", SegmentKind.RETURN),
            ("throws E bad\n ", SegmentKind.THROWS),
            ("THROWS E bad\n ", SegmentKind.THROWS),
            ("param int $a\n ", SegmentKind.GENERAL),
            ("see Foo\n ", SegmentKind.GENERAL),
            ("ret", SegmentKind.GENERAL),
        ],
    )
    def test_classify_segment(self, piece, kind):
        """Test classification by the first six characters."""
        assert classify_segment(piece) is kind

    def test_first_piece_is_general(self):
        """Test text before the first sentinel is general even if it looks like a tag."""
        segments = split_docblock_segments("return early * @throws E\n")
        assert segments[0].kind is SegmentKind.GENERAL
        assert segments[1].kind is SegmentKind.THROWS

    def test_split_reproduces_text(self):
        """Test joining segments gives back the original text."""
        segments = split_docblock_segments(SUMMARY_THROWS_FIRST)
        joined = SEGMENT_SENTINEL.join(s.text for s in segments)
        assert joined == SUMMARY_THROWS_FIRST
        assert [s.kind for s in segments] == [
            SegmentKind.GENERAL,
            SegmentKind.THROWS,
            SegmentKind.THROWS,
            SegmentKind.RETURN,
        ]


# =============================================================================
# Ordering Checker/Fixer Tests
# =============================================================================


class TestCheckReturnBeforeThrows:
    """Tests for check_return_before_throws."""

    def test_violation_when_throws_first(self):
        """Test @throws before @return is a violation."""
        result = check_return_before_throws(
            "/** @throws E description\n * @return int value */"
        )
        assert result is not None
        assert result.throws_index < result.return_index
        assert result.fixed_text is None

    def test_no_violation_when_return_first(self):
        """Test @return before @throws is fine."""
        assert (
            check_return_before_throws(
                "/** @return int value\n * @throws E description */"
            )
            is None
        )

    @pytest.mark.parametrize(
        "docblock",
        [
            "/**\n * @return int\n */",
            "/**\n * @throws E\n */",
            "/**\n * Summary only.\n */",
            "",
        ],
    )
    def test_no_violation_without_both_tags(self, docblock):
        """Test the rule only applies when both tags exist."""
        assert check_return_before_throws(docblock, fix_requested=True) is None

    @pytest.mark.parametrize(
        "marker", ["{@inheritdoc}", "{@inheritDoc}", "{@INHERITDOC}"]
    )
    def test_inherit_doc_suppresses_check(self, marker):
        """Test inherited docblocks are never checked."""
        docblock = f"/**\n * {marker}\n * @throws E\n * @return int\n */"
        assert check_return_before_throws(docblock, fix_requested=True) is None

    def test_tag_search_is_case_sensitive(self):
        """Test only the lowercase markers are searched for."""
        assert check_return_before_throws("/**\n * @Throws E\n * @return int\n */") is None

    def test_fix_moves_throws_after_return(self):
        """Test the fix is a stable partition that keeps the comment closed."""
        result = check_return_before_throws(SUMMARY_THROWS_FIRST, fix_requested=True)

        assert result is not None
        assert result.fixed_text == SUMMARY_RETURN_FIRST

    def test_fix_preserves_content(self):
        """Test no text is lost or duplicated by the fix."""
        fixed = reorder_docblock_segments(SUMMARY_THROWS_FIRST)

        assert fixed.startswith("/**\n * Summary.\n *\n")
        assert fixed.index("@throws E1") < fixed.index("@throws E2")
        assert fixed.index("@return") < fixed.index("@throws E1")
        assert sorted("".join(fixed.split())) == sorted(
            "".join(SUMMARY_THROWS_FIRST.split())
        )

    def test_fix_keeps_general_tags_in_order(self):
        """Test other tags keep their relative order ahead of return and throws."""
        docblock = (
            "/**\n"
            " * @param int $a\n"
            " * @throws E\n"
            " * @param int $b\n"
            " * @return int\n"
            " * @see Foo\n"
            " */"
        )
        expected = (
            "/**\n"
            " * @param int $a\n"
            " * @param int $b\n"
            " * @see Foo\n"
            " * @return int\n"
            " * @throws E\n"
            " */"
        )
        assert reorder_docblock_segments(docblock) == expected

    def test_fix_on_body_without_close_tag(self):
        """Test the fix also works on text that stops before the close tag."""
        body = SUMMARY_THROWS_FIRST[: -len("*/")]
        assert reorder_docblock_segments(body) == SUMMARY_RETURN_FIRST[: -len("*/")]

    def test_close_tag_indentation_moves_with_last_segment(self):
        """Test only the close tag is detached, not the whitespace in front of it."""
        docblock = "/**\n * @throws E\n * @return int\n   */"
        assert reorder_docblock_segments(docblock) == (
            "/**\n * @return int\n   * @throws E\n */"
        )

    def test_fixed_single_line_docblock_passes(self):
        """Test the checker accepts the output of its own fix."""
        result = check_return_before_throws(
            "/** @throws E description\n * @return int value */", fix_requested=True
        )
        assert result is not None
        assert result.fixed_text.endswith("*/")
        assert check_return_before_throws(result.fixed_text) is None

    def test_ordered_docblock_is_not_rewritten(self):
        """Test an already ordered docblock produces no fix at all."""
        assert check_return_before_throws(SUMMARY_RETURN_FIRST, fix_requested=True) is None

    def test_fix_is_idempotent(self):
        """Test fixing the fixed output changes nothing."""
        fixed = reorder_docblock_segments(SUMMARY_THROWS_FIRST)
        assert reorder_docblock_segments(fixed) == fixed
        assert check_return_before_throws(fixed) is None


class TestSubstringMatching:
    """Tag positions come from plain substring search, prose included."""

    def test_prose_return_after_throws_is_a_violation(self):
        """Test '@return' inside a description counts as the return tag."""
        docblock = (
            "/**\n"
            " * Summary.\n"
            " *\n"
            " * @throws RuntimeException when nothing can be @returned\n"
            " */"
        )
        result = check_return_before_throws(docblock, fix_requested=True)

        assert result is not None
        # Nothing to move: there is no real @return segment
        assert result.fixed_text == docblock

    def test_prose_throws_before_return_is_a_violation(self):
        """Test '@throws' in the summary is found before the real tags."""
        docblock = (
            "/**\n"
            " * Never @throws on empty input.\n"
            " *\n"
            " * @return int\n"
            " * @throws E\n"
            " */"
        )
        result = check_return_before_throws(docblock, fix_requested=True)

        assert result is not None
        assert result.fixed_text == docblock

    def test_prose_return_before_throws_hides_violation(self):
        """Test an early '@return' in prose masks a misplaced tag."""
        docblock = (
            "/**\n"
            " * Does not @return early.\n"
            " *\n"
            " * @throws E\n"
            " * @return int\n"
            " */"
        )
        assert check_return_before_throws(docblock) is None
