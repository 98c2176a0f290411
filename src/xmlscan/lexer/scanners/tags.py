"""Tag scanner mixin."""

from __future__ import annotations

from xmlscan.lexer.constructs import (
    CLOSE_TAG_MARKER,
    EOF,
    TAG_NAME_TERMINATORS,
    TAG_TERMINATOR,
    Construct,
)
from xmlscan.tokens import Token, TokenType


class TagScannerMixin:
    """Mixin providing open, close and self-closing tag scanning.

    Tags keep only their name. Attribute text and whitespace between the
    name and '>' are skipped without validation.

    """

    # These will be set by the Lexer class
    _source: str
    _pos: int

    def _peek(self) -> str:
        """Peek at current character. Implemented by Lexer."""
        raise NotImplementedError

    def _advance(self) -> str:
        """Consume current character. Implemented by Lexer."""
        raise NotImplementedError

    def _find_end(self, terminator: str, construct: Construct) -> int:
        """Find offset just past terminator. Implemented by Lexer."""
        raise NotImplementedError

    def _jump_to(self, pos: int) -> None:
        """Move cursor forward to pos. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: str) -> Token:
        """Create token at saved location. Implemented by Lexer."""
        raise NotImplementedError

    def _unterminated(self, construct: Construct, terminator: str) -> Exception:
        """Build an UnterminatedConstructError. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_tag_name(self) -> str:
        """Consume the tag name at the cursor.

        Stops before a space, '>', '/' or end of input. The
        terminating character is left for the caller.

        Returns:
            The name, possibly empty (e.g. for "<>").
        """
        start = self._pos
        char = self._peek()
        while char != EOF and char not in TAG_NAME_TERMINATORS:
            self._advance()
            char = self._peek()
        return self._source[start : self._pos]

    def _scan_close_tag(self) -> Token:
        """Scan </name ...>, discarding anything between name and '>'."""
        self._advance()  # Skip '/'
        name = self._scan_tag_name()
        self._jump_to(self._find_end(TAG_TERMINATOR, Construct.CLOSE_TAG))
        return self._make_token(TokenType.CLOSE_TAG, name)

    def _scan_open_tag(self) -> Token:
        """Scan <name ...> or <name .../>.

        Attribute content is skipped up to the first '>' or '/'. A '/'
        directly followed by '>' makes the tag self-closing; any other
        '/' is skipped and the tag ends at the next '>'.

        Returns:
            OPEN_TAG or SELF_CLOSING_TAG token carrying the name.

        Raises:
            UnterminatedConstructError: input ends before '>'
        """
        name = self._scan_tag_name()

        char = self._peek()
        while char != TAG_TERMINATOR and char != CLOSE_TAG_MARKER:
            if char == EOF:
                raise self._unterminated(Construct.TAG, TAG_TERMINATOR)
            self._advance()
            char = self._peek()

        if char == CLOSE_TAG_MARKER:
            self._advance()
            if self._peek() == TAG_TERMINATOR:
                self._advance()
                return self._make_token(TokenType.SELF_CLOSING_TAG, name)

        self._jump_to(self._find_end(TAG_TERMINATOR, Construct.TAG))
        return self._make_token(TokenType.OPEN_TAG, name)
