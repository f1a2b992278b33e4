"""
Token stream abstraction consumed by the sniffs.

The host checker tokenizes PHP source and hands the sniffs a TokenStream.
Sniffs only read it through the search and text helpers below; all writes
go through a TokenFixer changeset.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator


class TokenType(Enum):
    """Kinds of tokens the sniffs care about."""

    OPEN_TAG = "T_OPEN_TAG"
    DOC_COMMENT_OPEN_TAG = "T_DOC_COMMENT_OPEN_TAG"
    DOC_COMMENT_CLOSE_TAG = "T_DOC_COMMENT_CLOSE_TAG"
    DOC_COMMENT_STAR = "T_DOC_COMMENT_STAR"
    DOC_COMMENT_TAG = "T_DOC_COMMENT_TAG"
    DOC_COMMENT_STRING = "T_DOC_COMMENT_STRING"
    DOC_COMMENT_WHITESPACE = "T_DOC_COMMENT_WHITESPACE"
    FUNCTION = "T_FUNCTION"
    WHITESPACE = "T_WHITESPACE"
    STRING = "T_STRING"
    OTHER = "T_OTHER"


@dataclass
class Token:
    """A single lexical token."""

    type: TokenType
    content: str


class TokenStream:
    """Ordered tokens of one source file.

    Indexes are stable for the lifetime of the stream: replacing a token's
    content never inserts or removes tokens.
    """

    def __init__(self, tokens: Iterable[Token]):
        self._tokens: list[Token] = list(tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __getitem__(self, index: int) -> Token:
        return self._tokens[index]

    @property
    def content(self) -> str:
        """Full text of the stream."""
        return "".join(token.content for token in self._tokens)

    def find_previous(self, token_type: TokenType, start: int) -> int | None:
        """Find the nearest token of a type at or before ``start``.

        Args:
            token_type: Token type to look for
            start: Index to start scanning backwards from

        Returns:
            Index of the matching token, or None if there is none
        """
        if start >= len(self._tokens):
            start = len(self._tokens) - 1

        for index in range(start, -1, -1):
            if self._tokens[index].type is token_type:
                return index
        return None

    def find_next(self, token_type: TokenType, start: int) -> int | None:
        """Find the nearest token of a type at or after ``start``.

        Args:
            token_type: Token type to look for
            start: Index to start scanning forwards from

        Returns:
            Index of the matching token, or None if there is none
        """
        for index in range(max(start, 0), len(self._tokens)):
            if self._tokens[index].type is token_type:
                return index
        return None

    def get_text(self, start: int, end: int) -> str:
        """Verbatim text of tokens ``start`` through ``end`` inclusive."""
        if start < 0 or end < start:
            return ""
        return "".join(token.content for token in self._tokens[start : end + 1])

    def replace_content(self, index: int, content: str) -> None:
        """Overwrite the content of a single token.

        Sniffs should not call this directly; use a TokenFixer changeset.
        """
        self._tokens[index].content = content

    def indexes_of(self, token_types: Iterable[TokenType]) -> list[int]:
        """Indexes of every token whose type is in ``token_types``."""
        wanted = set(token_types)
        return [i for i, token in enumerate(self._tokens) if token.type in wanted]
