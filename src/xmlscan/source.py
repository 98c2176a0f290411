"""Source loading for xmlscan.

Validates a path and reads the whole file into memory so a Lexer can
scan it. Validation runs three checks in order, and the first failing
check decides the error:

1. the path exists
2. the path is a regular file
3. the suffix is one of ScanConfig.extensions

Usage:
    >>> from xmlscan.source import check_source, read_source
    >>> check_source("missing.xml")
    <SourceErrorKind.NOT_FOUND: 'not_found'>
    >>> text = read_source("note.xml")  # raises SourceError on failure

"""

from __future__ import annotations

from pathlib import Path

from xmlscan.config import get_scan_config
from xmlscan.errors import SourceDecodeError, SourceErrorKind, source_error_for
from xmlscan.utils.logger import get_logger

logger = get_logger(__name__)


def check_source(path: str | Path) -> SourceErrorKind | None:
    """Validate a source path without raising.

    Args:
        path: Path to the XML file

    Returns:
        The first failing check, or None if the path can be loaded.
    """
    path = Path(path)
    if not path.exists():
        return SourceErrorKind.NOT_FOUND
    if not path.is_file():
        return SourceErrorKind.NOT_A_FILE
    if path.suffix not in get_scan_config().extensions:
        return SourceErrorKind.WRONG_EXTENSION
    return None


def read_source(path: str | Path) -> str:
    """Validate and read a source file.

    The file is decoded with ScanConfig.encoding. Newlines are kept
    exactly as stored so token offsets match the bytes on disk.

    Args:
        path: Path to the XML file

    Returns:
        The full file contents.

    Raises:
        SourceNotFoundError: path does not exist
        SourceNotAFileError: path is not a regular file
        SourceWrongExtensionError: suffix is not accepted
        SourceDecodeError: contents are not valid in ScanConfig.encoding
    """
    config = get_scan_config()
    kind = check_source(path)
    if kind is not None:
        raise source_error_for(kind, path, config.extensions)

    try:
        with open(path, encoding=config.encoding, newline="") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise SourceDecodeError(path, config.encoding, str(e)) from e

    logger.debug("Loaded %d characters from %s", len(text), path)
    return text


__all__ = ["check_source", "read_source"]
