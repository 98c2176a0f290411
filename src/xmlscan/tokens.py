"""Token and TokenType definitions for the xmlscan lexer.

The lexer produces a list of Token objects, one per recognized construct.
Each Token has a type, a string value, and a source location.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.
Coordinates are excluded from equality, so two tokens compare equal when
their type and value match regardless of where they were scanned.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from xmlscan.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the lexer.

    Declarations keep their full markup span; tags keep only the name.

    """

    # Declarations (value is the full span, delimiters included)
    PROLOG = auto()  # <?xml ...?>
    DOCTYPE = auto()  # <!DOCTYPE ...>

    # Tags (value is the tag name only)
    OPEN_TAG = auto()  # <name ...>
    CLOSE_TAG = auto()  # </name>
    SELF_CLOSING_TAG = auto()  # <name .../>

    # Character data
    TEXT = auto()  # Raw run between markup, undecoded
    COMMENT = auto()  # <!-- ... -->
    CDATA = auto()  # <![CDATA[ ... ]]>


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Attributes:
        type: The token type (from TokenType enum)
        value: Tag name for tags, raw text for TEXT, full span otherwise
        _lineno: Start line number (1-indexed)
        _col: Start column offset (1-indexed)
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source
        _end_lineno: End line number
        _end_col: End column offset
        _source_file: Optional source file path

    Only ``type`` and ``value`` take part in equality and hashing.

    """

    type: TokenType
    value: str
    _lineno: int = field(default=1, compare=False)
    _col: int = field(default=1, compare=False)
    _start_offset: int = field(default=0, compare=False)
    _end_offset: int = field(default=0, compare=False)
    _end_lineno: int | None = field(default=None, compare=False)
    _end_col: int | None = field(default=None, compare=False)
    _source_file: str | None = field(default=None, compare=False)
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached).

        Returns:
            SourceLocation object for this token.
        """
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from xmlscan.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._start_offset,
            end_offset=self._end_offset,
            end_lineno=self._end_lineno,
            end_col_offset=self._end_col,
            source_file=self._source_file,
        )
        # Safe mutation of frozen dataclass cache field (idempotent write)
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, {self._lineno}:{self._col})"

    def __str__(self) -> str:
        """Diagnostic line naming the kind, then the raw value."""
        return f"TokenType: {self.type.name:>17}, data: {self.value}"

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column offset (convenience accessor)."""
        return self._col

    @property
    def is_tag(self) -> bool:
        """True for open, close and self-closing tags."""
        return self.type in _TAG_TYPES


_TAG_TYPES = frozenset(
    {TokenType.OPEN_TAG, TokenType.CLOSE_TAG, TokenType.SELF_CLOSING_TAG}
)
