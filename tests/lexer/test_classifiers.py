"""Tests for the pure markup classifier."""

import pytest

from xmlscan.lexer import Construct, classify_markup


class TestClassifyMarkup:
    """classify_markup looks at the characters after '<'."""

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("<?xml?>", Construct.PROLOG),
            ("<!-- c -->", Construct.COMMENT),
            ("<![CDATA[x]]>", Construct.CDATA),
            ("<!DOCTYPE note>", Construct.DOCTYPE),
            ("<!ENTITY e 'x'>", Construct.DOCTYPE),
            ("<!-", Construct.DOCTYPE),
            ("<![CDATA", Construct.DOCTYPE),
            ("</note>", Construct.CLOSE_TAG),
            ("<note>", Construct.TAG),
            ("< note>", Construct.TAG),
            ("<", Construct.TAG),
        ],
    )
    def test_classification(self, source: str, expected: Construct) -> None:
        assert classify_markup(source, 1) is expected

    def test_mid_document_position(self) -> None:
        source = "<a><!-- c --></a>"
        assert classify_markup(source, 4) is Construct.COMMENT
        assert classify_markup(source, 14) is Construct.CLOSE_TAG

    def test_is_pure(self) -> None:
        """Repeated calls give the same answer."""
        source = "<![CDATA[x]]>"
        assert classify_markup(source, 1) is classify_markup(source, 1)
