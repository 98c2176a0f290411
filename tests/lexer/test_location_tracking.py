"""Tests for accurate source location tracking in the lexer.

Locations point at the opening '<' of markup and at the first
character of a text run.
"""

from xmlscan.lexer import Lexer
from xmlscan.location import SourceLocation
from xmlscan.tokens import TokenType


class TestSingleLineLocations:
    """Test location tracking on one line."""

    def test_first_token(self) -> None:
        tokens = Lexer("<book>").tokenize()

        loc = tokens[0].location
        assert loc.lineno == 1
        assert loc.col_offset == 1
        assert loc.offset == 0
        assert loc.end_offset == 6

    def test_text_and_close_tag_columns(self) -> None:
        tokens = Lexer("<book>XML &amp; Parsing</book>").tokenize()

        assert [t.col for t in tokens] == [1, 7, 24]

    def test_text_starts_after_skipped_whitespace(self) -> None:
        tokens = Lexer("<a>   hi</a>").tokenize()

        text = tokens[1]
        assert text.type == TokenType.TEXT
        assert text.location.col_offset == 7
        assert text.location.offset == 6


class TestMultiLineLocations:
    """Test location tracking across lines."""

    SOURCE = (
        '<?xml version="1.0"?>\n'
        "<note>\n"
        "    <to>John</to>\n"
        "    <!-- a\n"
        "         b -->\n"
        "</note>"
    )

    def test_line_numbers(self) -> None:
        tokens = Lexer(self.SOURCE).tokenize()

        assert [(t.type, t.lineno) for t in tokens] == [
            (TokenType.PROLOG, 1),
            (TokenType.OPEN_TAG, 2),
            (TokenType.OPEN_TAG, 3),
            (TokenType.TEXT, 3),
            (TokenType.CLOSE_TAG, 3),
            (TokenType.COMMENT, 4),
            (TokenType.CLOSE_TAG, 6),
        ]

    def test_indented_tag_column(self) -> None:
        tokens = Lexer(self.SOURCE).tokenize()

        to_tag = tokens[2]
        assert to_tag.value == "to"
        assert to_tag.col == 5

    def test_multiline_token_end(self) -> None:
        tokens = Lexer(self.SOURCE).tokenize()

        comment = tokens[5].location
        assert comment.lineno == 4
        assert comment.end_lineno == 5
        assert comment.end_col_offset == 15

    def test_close_tag_after_multiline_comment(self) -> None:
        tokens = Lexer(self.SOURCE).tokenize()

        assert tokens[-1].location.col_offset == 1


class TestSourceFile:
    """Source file propagation."""

    def test_source_file_in_location(self) -> None:
        tokens = Lexer("<a/>", source_file="doc.xml").tokenize()

        loc = tokens[0].location
        assert loc.source_file == "doc.xml"
        assert str(loc) == "doc.xml:1:1"

    def test_location_without_file(self) -> None:
        assert str(SourceLocation(lineno=3, col_offset=5)) == "3:5"

    def test_location_is_cached(self) -> None:
        token = Lexer("<a/>").tokenize()[0]

        assert token.location is token.location

    def test_span_to(self) -> None:
        tokens = Lexer("<a>\n  text\n</a>").tokenize()

        span = tokens[0].location.span_to(tokens[-1].location)
        assert span.lineno == 1
        assert span.end_lineno == 3
        assert span.end_offset == len("<a>\n  text\n</a>")
        assert span.length == span.end_offset
