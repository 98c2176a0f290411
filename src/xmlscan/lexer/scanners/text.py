"""Text run scanner mixin."""

from __future__ import annotations

from xmlscan.tokens import Token, TokenType


class TextScannerMixin:
    """Mixin providing character data scanning.

    A text run starts at the non-whitespace character the dispatcher
    just consumed and extends to the next '<' or end of input.
    Interior and trailing whitespace is kept, and entity references
    such as ``&amp;`` are left undecoded.

    """

    # These will be set by the Lexer class
    _source: str
    _source_len: int
    _pos: int
    _token_start: int

    def _jump_to(self, pos: int) -> None:
        """Move cursor forward to pos. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, value: str) -> Token:
        """Create token at saved location. Implemented by Lexer."""
        raise NotImplementedError

    def _scan_text(self) -> Token:
        """Scan a raw text run, leaving '<' unconsumed."""
        end = self._source.find("<", self._pos)
        if end == -1:
            end = self._source_len
        value = self._source[self._token_start : end]
        self._jump_to(end)
        return self._make_token(TokenType.TEXT, value)
