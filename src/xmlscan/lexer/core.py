"""Single-pass XML lexer.

Buffers the whole source and scans it once with a forward-only cursor.
Each loop iteration consumes one character, skips it if it is whitespace
between constructs, and otherwise hands off to exactly one scanner,
which returns one token.

Delimiter searches use str.find. A failed search raises
UnterminatedConstructError instead of producing a truncated token.

Thread Safety:
Lexer instances own all their state. Do not share one instance between
threads; create one per thread (or per document) instead.

"""

from __future__ import annotations

from pathlib import Path

from xmlscan.errors import UnterminatedConstructError
from xmlscan.lexer.classifiers import MarkupClassifierMixin
from xmlscan.lexer.constructs import (
    CONSTRUCT_NAMES,
    EOF,
    WHITESPACE,
    Construct,
)
from xmlscan.lexer.scanners import (
    DelimitedScannerMixin,
    TagScannerMixin,
    TextScannerMixin,
)
from xmlscan.source import read_source
from xmlscan.tokens import Token, TokenType
from xmlscan.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    # Classifiers (pure logic, no position mutation)
    MarkupClassifierMixin,
    # Scanners (advance the cursor past one construct)
    DelimitedScannerMixin,
    TagScannerMixin,
    TextScannerMixin,
):
    """Single-pass XML lexer.

    Usage:
            >>> lexer = Lexer("<book>XML &amp; Parsing</book>")
            >>> for token in lexer.tokenize():
            ...     print(repr(token))
        Token(OPEN_TAG, 'book', 1:1)
        Token(TEXT, 'XML &amp; Parsing', 1:7)
        Token(CLOSE_TAG, 'book', 1:24)

    A lexer is a reusable session. tokenize() consumes the buffered
    source; calling it again returns [] until reset() or load_file()
    supplies new text.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_lineno",
        "_col",
        "_source_file",
        # Start of the construct being scanned
        "_token_start",
        "_saved_lineno",
        "_saved_col",
    )

    def __init__(self, source: str = "", source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: XML source text (empty by default)
            source_file: Optional source file path for locations and errors
        """
        self.reset(source, source_file)

    @classmethod
    def from_file(cls, path: str | Path) -> Lexer:
        """Create a lexer over the contents of an XML file.

        Raises:
            SourceError: path is missing, not a file, or has the wrong suffix
        """
        lexer = cls()
        lexer.load_file(path)
        return lexer

    def reset(self, source: str, source_file: str | None = None) -> None:
        """Replace the buffered source and rewind the cursor.

        Tokens returned by earlier tokenize() calls are independent
        values and are not affected.

        Args:
            source: New XML source text
            source_file: Optional source file path for the new text
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._lineno = 1
        self._col = 1
        self._source_file = source_file

        self._token_start = 0
        self._saved_lineno = 1
        self._saved_col = 1

    def load_file(self, path: str | Path) -> None:
        """Validate and read path, then reset this lexer with its contents.

        The lexer is left unchanged if validation fails.

        Raises:
            SourceNotFoundError: path does not exist
            SourceNotAFileError: path is not a regular file
            SourceWrongExtensionError: suffix is not accepted
            SourceDecodeError: contents are not valid in ScanConfig.encoding
        """
        source = read_source(path)
        self.reset(source, source_file=str(path))

    @property
    def position(self) -> int:
        """Current cursor offset into the buffered source."""
        return self._pos

    @property
    def exhausted(self) -> bool:
        """True once the cursor has reached end of input."""
        return self._pos >= self._source_len

    def tokenize(self) -> list[Token]:
        """Tokenize the buffered source from the cursor to end of input.

        Returns:
            Tokens in document order. Empty if the lexer is exhausted.

        Raises:
            UnterminatedConstructError: a construct lacks its closing
                delimiter. ``error.tokens`` holds the tokens scanned
                before the failure and the lexer is left exhausted.

        Complexity: O(n) where n = len(source)
        """
        tokens: list[Token] = []
        source_len = self._source_len  # Local var for faster access
        try:
            while self._pos < source_len:
                self._save_location()
                char = self._advance()
                if char in WHITESPACE:
                    continue
                tokens.append(self._dispatch(char))
        except UnterminatedConstructError as e:
            e.tokens = tuple(tokens)
            self._jump_to(source_len)
            raise

        logger.debug(
            "Tokenized %s into %d tokens",
            self._source_file or "<string>",
            len(tokens),
        )
        return tokens

    def _dispatch(self, char: str) -> Token:
        """Run the scanner for the construct starting with char.

        Args:
            char: The character just consumed.

        Returns:
            The single token produced by the selected scanner.
        """
        if char != "<":
            return self._scan_text()

        construct = self._classify_markup()
        if construct is Construct.PROLOG:
            return self._scan_prolog()
        elif construct is Construct.COMMENT:
            return self._scan_comment()
        elif construct is Construct.CDATA:
            return self._scan_cdata()
        elif construct is Construct.DOCTYPE:
            return self._scan_doctype()
        elif construct is Construct.CLOSE_TAG:
            return self._scan_close_tag()
        return self._scan_open_tag()

    # =========================================================================
    # Cursor
    # =========================================================================

    def _peek(self) -> str:
        """Peek at current character without advancing.

        Returns:
            Current character or empty string at end of input.
        """
        if self._pos >= self._source_len:
            return EOF
        return self._source[self._pos]

    def _advance(self) -> str:
        """Advance position by one character.

        Updates line/column tracking.

        Returns:
            The consumed character, or empty string at end of input.
        """
        if self._pos >= self._source_len:
            return EOF

        char = self._source[self._pos]
        self._pos += 1

        if char == "\n":
            self._lineno += 1
            self._col = 1
        else:
            self._col += 1

        return char

    def _jump_to(self, pos: int) -> None:
        """Move the cursor forward to pos, updating line/column.

        Args:
            pos: Target offset, at or after the current position.
        """
        if pos <= self._pos:
            return

        # Count newlines in skipped segment using C-optimized str.count
        segment = self._source[self._pos : pos]
        newline_count = segment.count("\n")

        if newline_count > 0:
            last_nl = segment.rfind("\n")
            self._lineno += newline_count
            self._col = len(segment) - last_nl  # chars after last newline + 1
        else:
            self._col += len(segment)

        self._pos = pos

    def _find_end(self, terminator: str, construct: Construct) -> int:
        """Find the offset just past the next terminator.

        Searches from the cursor without moving it.

        Args:
            terminator: Closing delimiter to search for
            construct: Construct being scanned (for error messages)

        Returns:
            Offset of the first character after the terminator.

        Raises:
            UnterminatedConstructError: terminator not found
        """
        idx = self._source.find(terminator, self._pos)
        if idx == -1:
            raise self._unterminated(construct, terminator)
        return idx + len(terminator)

    def _unterminated(
        self, construct: Construct, terminator: str
    ) -> UnterminatedConstructError:
        """Build an error located at the construct's opening '<'."""
        return UnterminatedConstructError(
            CONSTRUCT_NAMES[construct],
            terminator,
            lineno=self._saved_lineno,
            col_offset=self._saved_col,
            source_file=self._source_file,
        )

    # =========================================================================
    # Location tracking
    # =========================================================================

    def _save_location(self) -> None:
        """Save current location as the start of the next token."""
        self._token_start = self._pos
        self._saved_lineno = self._lineno
        self._saved_col = self._col

    def _make_token(self, token_type: TokenType, value: str) -> Token:
        """Create a Token spanning from the saved location to the cursor.

        Args:
            token_type: The token type.
            value: The token value.

        Returns:
            Token with raw coordinates for lazy location creation.
        """
        return Token(
            type=token_type,
            value=value,
            _lineno=self._saved_lineno,
            _col=self._saved_col,
            _start_offset=self._token_start,
            _end_offset=self._pos,
            _end_lineno=self._lineno,
            _end_col=self._col,
            _source_file=self._source_file,
        )
