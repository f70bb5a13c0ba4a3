"""
Hack Assembly Language Lexer
============================

The Hack assembly language is line oriented and whitespace insensitive:
every whitespace character on a line is discarded before the line is
interpreted, so ``D = M + 1`` and ``D=M+1`` are the same instruction.

This module holds the character-level rules shared by both assembler
passes:

- Whitespace removal and ``//`` comment stripping
- Identifier recognition (labels, variables, predefined symbols)
- Unsigned decimal recognition (address literals)

Comments
--------
Comments start with ``//`` and run to the end of the line. They may fill
the whole line or trail an instruction:

    // full-line comment
    @i      // trailing comment

Identifiers
-----------
An identifier is a non-empty run of letters, digits, ``.``, ``:``, ``$``
and ``_`` that does not start with a digit.

Example
-------
>>> from hack_sdk.assembler.lexer import clean_line, is_identifier
>>> clean_line("  D = D + A   // add")
'D=D+A'
>>> is_identifier("LOOP.end$1")
True
"""

import string

# Characters that can start an identifier
IDENT_START = frozenset(string.ascii_letters + ".:$_")

# Characters that can continue an identifier
IDENT_CHARS = IDENT_START | frozenset(string.digits)

# Comment introducer
COMMENT = "//"


def strip_whitespace(raw: str) -> str:
    """Remove every whitespace character from a line."""
    return "".join(raw.split())


def clean_line(raw: str) -> str:
    """
    Reduce a raw source line to its significant text.

    All whitespace is removed first, then a ``//`` comment and everything
    after it. A blank line or a comment-only line cleans to ``""``.

    Args:
        raw: The line as read from the source file

    Returns:
        The stripped token string
    """
    text = strip_whitespace(raw)
    comment_at = text.find(COMMENT)
    if comment_at >= 0:
        text = text[:comment_at]
    return text


def first_column(raw: str) -> int:
    """Return the 1-based column of the first non-blank character (1 if none)."""
    stripped = raw.lstrip()
    if not stripped:
        return 1
    return len(raw) - len(stripped) + 1


def is_identifier(text: str) -> bool:
    """
    Check whether text is a valid symbol name.

    >>> is_identifier("i")
    True
    >>> is_identifier("2fast")
    False
    """
    if not text or text[0] not in IDENT_START:
        return False
    return all(ch in IDENT_CHARS for ch in text)


def is_decimal(text: str) -> bool:
    """Check whether text is an unsigned decimal integer (ASCII digits only)."""
    return bool(text) and all(ch in string.digits for ch in text)
