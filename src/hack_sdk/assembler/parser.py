"""
Hack Assembly Language Parser
=============================

This module classifies source lines into statements. Every line of a Hack
program is exactly one of:

- **Blank**: nothing but whitespace and/or a ``//`` comment
- **LabelDef**: ``(NAME)``, binds NAME to the address of the next instruction
- **AddressInstruction**: ``@value`` or ``@symbol``
- **ComputeInstruction**: anything else, ``dest=comp;jump`` and its
  shorter forms

Classification is deliberately shallow: a compute instruction is only
recognized as "not one of the other three". Its internal grammar is
checked by :func:`parse_compute` when the code generator encodes it, so a
malformed line still occupies an instruction slot during label resolution.

Compute Grammar
---------------
The three accepted shapes, tried in order:

| Shape            | Example      | dest | comp  | jump |
|------------------|--------------|------|-------|------|
| dest=comp;jump   | ``D=D-1;JGT``| D    | D-1   | JGT  |
| dest=comp        | ``M=M+1``    | M    | M+1   | -    |
| comp;jump        | ``0;JMP``    | -    | 0     | JMP  |

Example
-------
>>> from hack_sdk.assembler.parser import parse_source
>>> for stmt in parse_source("(LOOP)\\n@LOOP\\n0;JMP"):
...     print(type(stmt).__name__)
LabelDef
AddressInstruction
ComputeInstruction
"""

import re
from dataclasses import dataclass
from typing import Iterator, Optional, Union

from hack_sdk.assembler.lexer import (
    clean_line,
    first_column,
    is_decimal,
    is_identifier,
)
from hack_sdk.errors import SourceLocation


# =============================================================================
# Statement Data Classes
# =============================================================================

@dataclass
class Statement:
    """
    Base class for all classified lines.

    Attributes:
        location: Where the line sits in the source (1-based line number)
        source_line: The line exactly as written, for diagnostics
    """
    location: SourceLocation
    source_line: str


@dataclass
class Blank(Statement):
    """Empty, whitespace-only or comment-only line."""


@dataclass
class LabelDef(Statement):
    """
    Label definition statement.

    Attributes:
        name: Label name, without the surrounding parentheses
    """
    name: str


@dataclass
class AddressInstruction(Statement):
    """
    Address instruction (``@target``).

    Attributes:
        target: Literal value (int) or symbol name (str)
    """
    target: Union[int, str]

    @property
    def is_literal(self) -> bool:
        return isinstance(self.target, int)


@dataclass
class ComputeInstruction(Statement):
    """
    Compute instruction candidate.

    Attributes:
        text: Whitespace- and comment-free instruction text
    """
    text: str


@dataclass(frozen=True)
class ComputeFields:
    """
    Parts of a compute instruction.

    Attributes:
        comp: Computation mnemonic (always present)
        dest: Destination mnemonic, or None
        jump: Jump mnemonic, or None
    """
    comp: str
    dest: Optional[str] = None
    jump: Optional[str] = None


# =============================================================================
# Compute Instruction Grammar
# =============================================================================

_PART = r"[^=;]+"

# Order matters: the full form must be tried before its prefixes
COMPUTE_GRAMMARS = (
    re.compile(rf"(?P<dest>{_PART})=(?P<comp>{_PART});(?P<jump>{_PART})"),
    re.compile(rf"(?P<dest>{_PART})=(?P<comp>{_PART})"),
    re.compile(rf"(?P<comp>{_PART});(?P<jump>{_PART})"),
)


def parse_compute(text: str) -> Optional[ComputeFields]:
    """
    Split a compute instruction into dest, comp and jump.

    Only the shape is checked here; whether each part is a known
    mnemonic is decided against the encoding tables by the caller.

    Args:
        text: Cleaned instruction text (no whitespace, no comment)

    Returns:
        ComputeFields, or None if the text matches none of the grammars
    """
    for grammar in COMPUTE_GRAMMARS:
        match = grammar.fullmatch(text)
        if match:
            parts = match.groupdict()
            return ComputeFields(
                comp=parts["comp"],
                dest=parts.get("dest"),
                jump=parts.get("jump"),
            )
    return None


# =============================================================================
# Line Classifier
# =============================================================================

LINE_BREAK = re.compile(r"\r\n|\r|\n")


def classify_line(raw: str, line: int = 1, filename: str = "<input>") -> Statement:
    """
    Classify a single source line.

    Args:
        raw: The line as read from the source (without line terminator)
        line: 1-based line number, used for diagnostics
        filename: Source name, used for diagnostics

    Returns:
        Exactly one of Blank, LabelDef, AddressInstruction or
        ComputeInstruction
    """
    location = SourceLocation(filename, line, first_column(raw))
    text = clean_line(raw)

    if not text:
        return Blank(location, raw)

    if text.startswith("(") and text.endswith(")") and is_identifier(text[1:-1]):
        return LabelDef(location, raw, name=text[1:-1])

    if text.startswith("@"):
        target = text[1:]
        if is_decimal(target):
            return AddressInstruction(location, raw, target=int(target))
        if is_identifier(target):
            return AddressInstruction(location, raw, target=target)

    return ComputeInstruction(location, raw, text=text)


def split_lines(source: str) -> list[str]:
    """
    Split source on line terminators only (\\n, \\r\\n, \\r).

    Form feeds and other Unicode separators stay inside their line, where
    clean_line discards them as whitespace. A final terminator does not
    start an extra line.
    """
    lines = LINE_BREAK.split(source)
    if lines[-1] == "":
        lines.pop()
    return lines


def iter_statements(source: str, filename: str = "<input>") -> Iterator[Statement]:
    """Classify each line of source lazily, numbering lines from 1."""
    for number, raw in enumerate(split_lines(source), start=1):
        yield classify_line(raw, number, filename)


def parse_source(source: str, filename: str = "<input>") -> list[Statement]:
    """
    Classify every line of a source program.

    Every line yields a statement, Blank included, so statement i always
    corresponds to source line i + 1.

    Args:
        source: Complete program text
        filename: Source name for diagnostics

    Returns:
        List of statements in source order
    """
    return list(iter_statements(source, filename))
