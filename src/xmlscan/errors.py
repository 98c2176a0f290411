"""Exception classes for xmlscan.

Provides standardized exceptions for error handling throughout xmlscan.

Two families:
- SourceError and its subclasses, raised while loading a file into a lexer.
  Each carries a SourceErrorKind so callers can branch on the failure
  without matching exception classes.
- UnterminatedConstructError, raised by the lexer when a construct has no
  closing delimiter before end of input.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from xmlscan.tokens import Token


class XmlScanError(Exception):
    """Base exception for all xmlscan errors.

    Subclass this for specific error categories.
    """

    pass


class SourceErrorKind(Enum):
    """Why a source path could not be loaded."""

    NOT_FOUND = "not_found"
    NOT_A_FILE = "not_a_file"
    WRONG_EXTENSION = "wrong_extension"
    UNDECODABLE = "undecodable"  # Only found while reading, never by check_source


class SourceError(XmlScanError):
    """Error loading a source file.

    Abstract: raise one of the subclasses below, or build one with
    source_error_for(). Each subclass sets ``kind``. A failed load never
    touches the lexer it was loading into.
    """

    kind: SourceErrorKind

    def __init__(self, path: str | Path, message: str) -> None:
        """Initialize source error.

        Args:
            path: The path that failed validation
            message: Description of the failed check

        Raises:
            TypeError: instantiated directly instead of through a subclass
        """
        if type(self) is SourceError:
            raise TypeError(
                "SourceError is abstract; use a subclass or source_error_for()"
            )
        self.path = str(path)
        super().__init__(f"{self.path} {message}")


class SourceNotFoundError(SourceError):
    """The requested path does not exist."""

    kind = SourceErrorKind.NOT_FOUND

    def __init__(self, path: str | Path) -> None:
        super().__init__(path, "doesn't exist")


class SourceNotAFileError(SourceError):
    """The path exists but is not a regular file."""

    kind = SourceErrorKind.NOT_A_FILE

    def __init__(self, path: str | Path) -> None:
        super().__init__(path, "isn't a file")


class SourceWrongExtensionError(SourceError):
    """The path's suffix is not one of the accepted extensions."""

    kind = SourceErrorKind.WRONG_EXTENSION

    def __init__(
        self, path: str | Path, extensions: tuple[str, ...] = (".xml",)
    ) -> None:
        """Initialize wrong-extension error.

        Args:
            path: The offending path
            extensions: Suffixes that would have been accepted
        """
        self.extensions = extensions
        super().__init__(path, f"isn't {'/'.join(extensions)} file")


class SourceDecodeError(SourceError):
    """The file is not valid text in the configured encoding."""

    kind = SourceErrorKind.UNDECODABLE

    def __init__(
        self, path: str | Path, encoding: str = "utf-8", reason: str = ""
    ) -> None:
        """Initialize decode error.

        Args:
            path: The offending path
            encoding: Encoding the file was decoded with
            reason: Decoder message (e.g. the offending byte position)
        """
        self.encoding = encoding
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(path, f"isn't valid {encoding} text{detail}")


_SOURCE_ERRORS: dict[SourceErrorKind, type[SourceError]] = {
    SourceErrorKind.NOT_FOUND: SourceNotFoundError,
    SourceErrorKind.NOT_A_FILE: SourceNotAFileError,
    SourceErrorKind.WRONG_EXTENSION: SourceWrongExtensionError,
    SourceErrorKind.UNDECODABLE: SourceDecodeError,
}


def source_error_for(
    kind: SourceErrorKind,
    path: str | Path,
    extensions: tuple[str, ...] = (".xml",),
    encoding: str = "utf-8",
) -> SourceError:
    """Build the SourceError subclass matching kind."""
    if kind is SourceErrorKind.WRONG_EXTENSION:
        return SourceWrongExtensionError(path, extensions)
    if kind is SourceErrorKind.UNDECODABLE:
        return SourceDecodeError(path, encoding)
    return _SOURCE_ERRORS[kind](path)


class UnterminatedConstructError(XmlScanError):
    """A construct has no closing delimiter before end of input.

    Raised when the lexer cannot find the terminator of a prolog,
    doctype, comment, CDATA section or tag. The lexer never guesses
    where such a construct should have ended.
    """

    def __init__(
        self,
        construct: str,
        terminator: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize unterminated construct error with optional location.

        Args:
            construct: Name of the construct (e.g. "comment", "CDATA section")
            terminator: The delimiter that was not found (e.g. "-->")
            lineno: Line of the opening '<' (1-indexed)
            col_offset: Column of the opening '<' (1-indexed)
            source_file: Path to source file (optional)
        """
        self.construct = construct
        self.terminator = terminator
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file
        # Tokens scanned before the failure; filled in by Lexer.tokenize()
        self.tokens: tuple[Token, ...] = ()

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}unterminated {construct}: missing {terminator!r}")
