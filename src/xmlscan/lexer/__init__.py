"""Single-pass lexer for xmlscan.

This package provides a cursor-based lexer that turns XML text into
a flat list of tokens in one forward pass.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, Construct, classify_markup
├── core.py              # Lexer class (cursor, dispatch loop, reset)
├── constructs.py        # Construct enum, delimiter constants
├── classifiers/         # Pure look-ahead classification
│   └── markup.py        # What a '<' opens
└── scanners/            # Construct extraction mixins
    ├── delimited.py     # Prolog, comment, CDATA, doctype
    ├── tags.py          # Open, close, self-closing tags
    └── text.py          # Text runs

Usage:
    >>> from xmlscan.lexer import Lexer
    >>> lexer = Lexer("<note><to>John</to></note>")
    >>> [t.value for t in lexer.tokenize()]
    ['note', 'to', 'John', 'to', 'note']

"""

from xmlscan.lexer.classifiers import classify_markup
from xmlscan.lexer.constructs import Construct
from xmlscan.lexer.core import Lexer

__all__ = ["Construct", "Lexer", "classify_markup"]
