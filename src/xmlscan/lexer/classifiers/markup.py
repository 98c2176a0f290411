"""Markup classifier: decides which construct a '<' opens."""

from __future__ import annotations

from xmlscan.lexer.constructs import (
    CDATA_OPENER,
    CLOSE_TAG_MARKER,
    COMMENT_OPENER,
    DECLARATION_MARKER,
    PROLOG_MARKER,
    Construct,
)


def classify_markup(source: str, pos: int) -> Construct:
    """Classify the markup whose '<' sits just before pos.

    Pure look-ahead: reads source[pos:] and never moves any cursor.
    pos may equal len(source), in which case the '<' is the last
    character and the result is Construct.TAG.

    Args:
        source: The buffered source text
        pos: Offset of the first character after '<'

    Returns:
        The construct to extract.
    """
    marker = source[pos : pos + 1]

    if marker == PROLOG_MARKER:
        return Construct.PROLOG

    if marker == DECLARATION_MARKER:
        if source.startswith(COMMENT_OPENER, pos + 1):
            return Construct.COMMENT
        if source.startswith(CDATA_OPENER, pos + 1):
            return Construct.CDATA
        return Construct.DOCTYPE

    if marker == CLOSE_TAG_MARKER:
        return Construct.CLOSE_TAG

    return Construct.TAG


class MarkupClassifierMixin:
    """Mixin exposing classify_markup at the lexer's current position."""

    _source: str
    _pos: int

    def _classify_markup(self) -> Construct:
        """Classify the markup opened by the '<' just consumed."""
        return classify_markup(self._source, self._pos)
