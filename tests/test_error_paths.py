"""Error hierarchy and message formatting tests."""

import pytest

from xmlscan.errors import (
    SourceDecodeError,
    SourceError,
    SourceErrorKind,
    SourceNotAFileError,
    SourceNotFoundError,
    SourceWrongExtensionError,
    UnterminatedConstructError,
    XmlScanError,
    source_error_for,
)

# =========================================================================
# SourceError family
# =========================================================================


class TestSourceErrors:
    """Verify SourceError subclasses carry their kind and path."""

    @pytest.mark.parametrize(
        "error_class,kind,message",
        [
            (SourceNotFoundError, SourceErrorKind.NOT_FOUND, "doc.xml doesn't exist"),
            (SourceNotAFileError, SourceErrorKind.NOT_A_FILE, "doc.xml isn't a file"),
            (
                SourceWrongExtensionError,
                SourceErrorKind.WRONG_EXTENSION,
                "doc.xml isn't .xml file",
            ),
            (
                SourceDecodeError,
                SourceErrorKind.UNDECODABLE,
                "doc.xml isn't valid utf-8 text",
            ),
        ],
    )
    def test_kind_and_message(
        self, error_class: type, kind: SourceErrorKind, message: str
    ) -> None:
        err = error_class("doc.xml")

        assert err.kind is kind
        assert err.path == "doc.xml"
        assert str(err) == message
        assert isinstance(err, SourceError)
        assert isinstance(err, XmlScanError)

    def test_wrong_extension_lists_accepted(self) -> None:
        err = SourceWrongExtensionError("doc.txt", (".xml", ".xsd"))
        assert str(err) == "doc.txt isn't .xml/.xsd file"
        assert err.extensions == (".xml", ".xsd")

    def test_decode_error_includes_reason(self) -> None:
        err = SourceDecodeError("doc.xml", "ascii", "byte 0xe9 in position 6")
        assert str(err) == "doc.xml isn't valid ascii text: byte 0xe9 in position 6"
        assert err.encoding == "ascii"
        assert err.reason == "byte 0xe9 in position 6"

    def test_base_class_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            SourceError("doc.xml", "is bad")

    @pytest.mark.parametrize("error_class", SourceError.__subclasses__())
    def test_every_subclass_has_kind(self, error_class: type) -> None:
        assert isinstance(error_class.kind, SourceErrorKind)

    @pytest.mark.parametrize("kind", list(SourceErrorKind))
    def test_source_error_for_round_trips_kind(self, kind: SourceErrorKind) -> None:
        assert source_error_for(kind, "doc.xml").kind is kind

    def test_branch_on_kind(self) -> None:
        """Callers can branch on .kind after catching the base class."""
        try:
            raise SourceNotAFileError("/tmp")
        except SourceError as err:
            assert err.kind is SourceErrorKind.NOT_A_FILE


# =========================================================================
# UnterminatedConstructError
# =========================================================================


class TestUnterminatedConstructError:
    """Verify UnterminatedConstructError formatting."""

    def test_message_only(self) -> None:
        err = UnterminatedConstructError("comment", "-->")
        assert str(err) == "unterminated comment: missing '-->'"
        assert err.lineno is None
        assert err.tokens == ()

    def test_with_line_and_column(self) -> None:
        err = UnterminatedConstructError("CDATA section", "]]>", lineno=4, col_offset=5)
        assert str(err) == "4:5 unterminated CDATA section: missing ']]>'"

    def test_with_source_file(self) -> None:
        err = UnterminatedConstructError(
            "prolog", "?>", lineno=1, col_offset=1, source_file="note.xml"
        )
        assert str(err).startswith("note.xml:1:1 ")

    def test_is_xmlscan_error(self) -> None:
        assert isinstance(UnterminatedConstructError("tag", ">"), XmlScanError)
