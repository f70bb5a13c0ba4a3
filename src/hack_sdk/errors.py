"""
Hack SDK Error Hierarchy
========================

This module defines the exception hierarchy for the Hack SDK.
All exceptions inherit from HackError, allowing callers to catch all
SDK-related errors with a single except clause if desired.

Exception Hierarchy
-------------------
HackError (base)
└── AssemblerError (assembler-related)
    ├── AssemblySyntaxError - line matches none of the instruction grammars
    │   └── UnknownMnemonicError - dest/comp/jump not in the encoding tables
    ├── AddressRangeError - literal address does not fit in 15 bits
    └── SymbolTableExhausted - no variable slot left in the address space

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class HackError(Exception):
    """
    Base exception for all Hack SDK errors.

        try:
            assembler.assemble_file("Max.asm")
        except HackError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed, counts every line of the file)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Assembler Exceptions
# =============================================================================

class AssemblerError(HackError):
    """
    Base exception for all assembler-related errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The original, unstripped source text (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    @property
    def line(self) -> Optional[int]:
        """1-based source line number, if known."""
        return self.location.line if self.location else None

    @property
    def text(self) -> Optional[str]:
        """Original text of the offending line, if known."""
        return self.source_line

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            Max.asm:7:1: error: invalid instruction 'D+A'
                D+A
                ^
            hint: compute instructions need '=' or ';'
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class AssemblySyntaxError(AssemblerError):
    """
    Syntax error in assembly source code.

    Raised during pass 2 when a real-instruction line matches none of the
    recognized grammars:

        dest=comp;jump
        dest=comp
        comp;jump

    Examples:
        - D+A          (neither '=' nor ';')
        - =M           (empty destination)
        - A=D=M        (two '=' signs)
    """
    pass


class UnknownMnemonicError(AssemblySyntaxError):
    """
    A well-formed compute instruction names a mnemonic missing from the
    destination, computation, or jump table.

    Attributes:
        field: Which part was not recognized ("dest", "comp" or "jump")
        mnemonic: The unrecognized text
    """

    def __init__(
        self,
        field: str,
        mnemonic: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        valid: Optional[list[str]] = None,
    ):
        self.field = field
        self.mnemonic = mnemonic

        hint = None
        if valid:
            hint = f"valid {field} mnemonics: {', '.join(valid)}"

        super().__init__(
            f"unknown {field} mnemonic '{mnemonic}'",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class AddressRangeError(AssemblerError):
    """
    Literal address does not fit in an address instruction.

    Address instructions carry a 15-bit unsigned value, so the largest
    literal is 32767.
    """

    def __init__(
        self,
        value: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.value = value
        super().__init__(
            f"address {value} does not fit in 15 bits",
            location=location,
            hint="address instructions accept values from 0 to 32767",
            source_line=source_line,
        )


class SymbolTableExhausted(AssemblerError):
    """
    Variable allocation ran past the end of the 15-bit address space.

    Variable slots are handed out from address 16 upwards and are never
    reused.
    """

    def __init__(
        self,
        symbol: str,
        limit: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.symbol = symbol
        self.limit = limit
        super().__init__(
            f"no variable slot left for '{symbol}' (limit {limit})",
            location=location,
            source_line=source_line,
        )
