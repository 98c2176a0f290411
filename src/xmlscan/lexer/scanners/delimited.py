"""Delimited construct scanner mixin.

Prolog, comment, CDATA and doctype constructs all end at a fixed
delimiter. The token value is the whole span from the opening '<'
through the delimiter, inclusive.
"""

from __future__ import annotations

from xmlscan.lexer.constructs import (
    CDATA_TERMINATOR,
    COMMENT_TERMINATOR,
    PROLOG_TERMINATOR,
    TAG_TERMINATOR,
    Construct,
)
from xmlscan.tokens import Token, TokenType


class DelimitedScannerMixin:
    """Mixin providing scanning for constructs that end at a fixed delimiter.

    The delimiter search starts at the character after '<', so the
    marker characters themselves can take part in the match.

    """

    # These will be set by the Lexer class
    _source: str
    _pos: int
    _token_start: int

    def _find_end(self, terminator: str, construct: Construct) -> int:
        """Find offset just past terminator. Implemented by Lexer."""
        raise NotImplementedError

    def _jump_to(self, pos: int) -> None:
        """Move cursor forward to pos. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: str) -> Token:
        """Create token at saved location. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_delimited(
        self, construct: Construct, token_type: TokenType, terminator: str
    ) -> Token:
        """Scan to terminator and emit the full span.

        Args:
            construct: Construct being scanned (for error messages)
            token_type: Type of the emitted token
            terminator: Closing delimiter

        Returns:
            Token whose value runs from '<' through the terminator.

        Raises:
            UnterminatedConstructError: terminator not found
        """
        end = self._find_end(terminator, construct)
        value = self._source[self._token_start : end]
        self._jump_to(end)
        return self._make_token(token_type, value)

    def _scan_prolog(self) -> Token:
        return self._scan_delimited(Construct.PROLOG, TokenType.PROLOG, PROLOG_TERMINATOR)

    def _scan_comment(self) -> Token:
        return self._scan_delimited(
            Construct.COMMENT, TokenType.COMMENT, COMMENT_TERMINATOR
        )

    def _scan_cdata(self) -> Token:
        return self._scan_delimited(Construct.CDATA, TokenType.CDATA, CDATA_TERMINATOR)

    def _scan_doctype(self) -> Token:
        # Ends at the first '>', so internal subsets are not supported
        return self._scan_delimited(Construct.DOCTYPE, TokenType.DOCTYPE, TAG_TERMINATOR)
