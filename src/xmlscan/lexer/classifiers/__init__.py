"""Markup classifiers for the xmlscan lexer.

Classifiers are pure functions of (source, position) that decide which
construct starts at a '<'. They never move the cursor.
"""

from xmlscan.lexer.classifiers.markup import (
    MarkupClassifierMixin,
    classify_markup,
)

__all__ = [
    "MarkupClassifierMixin",
    "classify_markup",
]
