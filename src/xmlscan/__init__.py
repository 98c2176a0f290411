"""
xmlscan — Lightweight single-pass XML tokenizer

Turns XML markup into a flat list of typed tokens without building a
tree, validating structure, decoding entities or parsing attributes.
Zero runtime dependencies.

Quick Start:
    >>> from xmlscan import tokenize
    >>> for token in tokenize("<book><title>XML Parsing</title></book>"):
    ...     print(token)
    TokenType:          OPEN_TAG, data: book
    TokenType:          OPEN_TAG, data: title
    TokenType:              TEXT, data: XML Parsing
    TokenType:         CLOSE_TAG, data: title
    TokenType:         CLOSE_TAG, data: book

Reusing a lexer:
    >>> from xmlscan import Lexer
    >>> lexer = Lexer.from_file("library.xml")
    >>> tokens = lexer.tokenize()
    >>> lexer.reset("<end/>")
    >>> lexer.tokenize()
    [Token(SELF_CLOSING_TAG, 'end', 1:1)]
"""

from pathlib import Path

from xmlscan.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from xmlscan.errors import (
    SourceDecodeError,
    SourceError,
    SourceErrorKind,
    SourceNotAFileError,
    SourceNotFoundError,
    SourceWrongExtensionError,
    UnterminatedConstructError,
    XmlScanError,
)
from xmlscan.lexer import Lexer
from xmlscan.location import SourceLocation
from xmlscan.source import check_source, read_source
from xmlscan.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize(source: str, *, source_file: str | None = None) -> list[Token]:
    """Tokenize XML source text.

    Args:
        source: XML source text
        source_file: Optional file path recorded in token locations

    Returns:
        Tokens in document order.

    Raises:
        UnterminatedConstructError: a construct lacks its closing delimiter
    """
    return Lexer(source, source_file=source_file).tokenize()


def tokenize_file(path: str | Path) -> list[Token]:
    """Load an XML file and tokenize its contents.

    Raises:
        SourceError: path is missing, not a file, or has the wrong suffix
        UnterminatedConstructError: a construct lacks its closing delimiter
    """
    return Lexer.from_file(path).tokenize()


__all__ = [  # noqa: RUF022 — grouped by category
    "__version__",
    # High-level API
    "tokenize",
    "tokenize_file",
    "Lexer",
    # Tokens
    "Token",
    "TokenType",
    "SourceLocation",
    # Source loading
    "check_source",
    "read_source",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # Errors
    "XmlScanError",
    "SourceError",
    "SourceDecodeError",
    "SourceErrorKind",
    "SourceNotFoundError",
    "SourceNotAFileError",
    "SourceWrongExtensionError",
    "UnterminatedConstructError",
]
