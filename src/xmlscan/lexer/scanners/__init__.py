"""Construct scanners for the xmlscan lexer.

Each scanner is a mixin that extracts one family of constructs,
advancing the cursor past it and returning a single token.
"""

from __future__ import annotations

from xmlscan.lexer.scanners.delimited import DelimitedScannerMixin
from xmlscan.lexer.scanners.tags import TagScannerMixin
from xmlscan.lexer.scanners.text import TextScannerMixin

__all__ = [
    "DelimitedScannerMixin",
    "TagScannerMixin",
    "TextScannerMixin",
]
