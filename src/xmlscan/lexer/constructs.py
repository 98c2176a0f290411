"""Markup constructs and delimiter constants.

This module defines the constructs a '<' can open and the character
sets and delimiters the scanners search for.
"""

from __future__ import annotations

from enum import Enum, auto


class Construct(Enum):
    """What a '<' opens, decided by look-ahead.

    - PROLOG: <? ... ?>
    - COMMENT: <!-- ... -->
    - CDATA: <![CDATA[ ... ]]>
    - DOCTYPE: <! ... > (any other '!' declaration)
    - CLOSE_TAG: </name>
    - TAG: <name ...> or <name .../>

    """

    PROLOG = auto()
    COMMENT = auto()
    CDATA = auto()
    DOCTYPE = auto()
    CLOSE_TAG = auto()
    TAG = auto()


# End-of-input sentinel returned by _peek() and _advance()
EOF = ""

# Whitespace skipped between constructs
WHITESPACE = frozenset(" \t\n\r")

# Characters that end a tag name (EOF ends it too)
TAG_NAME_TERMINATORS = frozenset(" >/")

# Markers following '<' or '<!'
PROLOG_MARKER = "?"
DECLARATION_MARKER = "!"
CLOSE_TAG_MARKER = "/"
COMMENT_OPENER = "--"
CDATA_OPENER = "[CDATA["

# Closing delimiters
PROLOG_TERMINATOR = "?>"
COMMENT_TERMINATOR = "-->"
CDATA_TERMINATOR = "]]>"
TAG_TERMINATOR = ">"

# Human-readable names for error messages
CONSTRUCT_NAMES = {
    Construct.PROLOG: "prolog",
    Construct.COMMENT: "comment",
    Construct.CDATA: "CDATA section",
    Construct.DOCTYPE: "doctype declaration",
    Construct.CLOSE_TAG: "close tag",
    Construct.TAG: "tag",
}
