"""
Hack Code Generator
===================

This module implements the two-pass translation from classified statements
to 16-bit machine words.

Pass 1 (label resolution)
-------------------------
Walks the statements with a program counter starting at 0. Each label is
bound to the current counter; each address or compute instruction advances
it by one. Nothing is emitted and nothing can fail here, so forward
references to labels work exactly like backward ones.

Pass 2 (encoding)
-----------------
Walks the statements again and emits one word per instruction:

    Address:  0vvvvvvvvvvvvvvv        @value / @symbol
    Compute:  111accccccdddjjj        dest=comp;jump

Symbols that are still unbound when first referenced by an address
instruction become variables, allocated from RAM address 16 upwards.

The first error aborts pass 2 with an AssemblerError subclass carrying the
source line; no partial output is kept.
"""

import logging
from pathlib import Path
from typing import Optional

from hack_sdk.assembler.parser import (
    AddressInstruction,
    Blank,
    ComputeInstruction,
    LabelDef,
    Statement,
    parse_compute,
)
from hack_sdk.assembler.symbols import SymbolTable
from hack_sdk.cpu import (
    COMPUTATIONS,
    DESTINATIONS,
    JUMPS,
    MAX_ADDRESS,
    NULL,
    encode_address,
    encode_compute,
    lookup_comp,
    lookup_dest,
    lookup_jump,
)
from hack_sdk.errors import (
    AddressRangeError,
    AssemblySyntaxError,
    SymbolTableExhausted,
    UnknownMnemonicError,
)

logger = logging.getLogger(__name__)


class CodeGenerator:
    """
    Generates Hack machine words from parsed statements.

    The code generator is the compilation session. Every call to
    generate() starts from a fresh symbol table seeded with the predefined
    symbols and any defines, so successive compilations never share state.

    Usage:
        codegen = CodeGenerator()
        words = codegen.generate(parse_source(text))
        codegen.get_symbols()
    """

    def __init__(self):
        self._defines: dict[str, int] = {}
        self._symbols = SymbolTable()
        self._words: list[str] = []
        self._listing_lines: list[str] = []
        self._generated = False

    # =========================================================================
    # Public Interface
    # =========================================================================

    def define_symbol(self, name: str, value: int) -> None:
        """
        Pre-define a symbol (e.g., from command line -D option).

        Defines are bound after the predefined symbols and before labels,
        so they cannot rename a register but do shadow a label of the same
        name.
        """
        if not 0 <= value <= MAX_ADDRESS:
            raise ValueError(f"value for '{name}' must be 0..{MAX_ADDRESS}, got {value}")
        self._defines[name] = value

    def generate(self, statements: list[Statement]) -> list[str]:
        """
        Translate statements into machine words.

        Args:
            statements: Classified source lines, one per line

        Returns:
            List of 16-character binary strings in source order

        Raises:
            AssemblySyntaxError: Malformed compute instruction
            UnknownMnemonicError: Unknown dest, comp or jump mnemonic
            AddressRangeError: Literal address above 32767
            SymbolTableExhausted: Too many variables
        """
        self._symbols = SymbolTable()
        self._words = []
        self._listing_lines = []
        self._generated = False

        for name, value in self._defines.items():
            self._symbols.define(name, value)

        instruction_count = self._pass1(statements)
        logger.debug(
            f"Pass 1 complete: {instruction_count} instructions, "
            f"{len(self._symbols)} symbols"
        )

        words = self._pass2(statements)
        logger.debug(
            f"Pass 2 complete: {len(words)} words, next variable at "
            f"{self._symbols.next_variable}"
        )

        self._words = words
        self._generated = True
        return list(words)

    def get_words(self) -> list[str]:
        """Return the generated machine words."""
        return list(self._words)

    def get_code(self) -> bytes:
        """Return the machine words as big-endian bytes, two per word."""
        return b"".join(int(word, 2).to_bytes(2, "big") for word in self._words)

    def get_symbols(self) -> dict[str, int]:
        """Return a dictionary of symbol names to values."""
        return self._symbols.as_dict()

    @property
    def symbol_table(self) -> SymbolTable:
        return self._symbols

    @property
    def has_output(self) -> bool:
        """True once generate() has completed without error."""
        return self._generated

    # =========================================================================
    # Listing and Symbol Output
    # =========================================================================

    def get_listing(self) -> str:
        """
        Get the assembly listing as a string.

        Returns:
            The listing showing ROM addresses, generated words, and source
            lines, followed by the symbol table.
        """
        lines = []
        lines.append("Hack Assembler Listing")
        lines.append("=" * 72)
        lines.append("")
        lines.append(" Addr  Code              Line  Source")
        lines.append("-" * 72)
        lines.extend(self._listing_lines)
        lines.append("")
        lines.append("Symbol Table")
        lines.append("-" * 30)
        for name, value in sorted(self._symbols.as_dict().items()):
            lines.append(f"{name:20s} = {value:5d}")
        return "\n".join(lines) + "\n"

    def write_listing(self, filepath: str | Path) -> None:
        """Write assembly listing file."""
        with open(filepath, "w") as f:
            f.write(self.get_listing())

    def write_symbols(self, filepath: str | Path) -> None:
        """
        Write symbol table file.

        Format: name value (one per line, sorted by name)
        """
        with open(filepath, "w") as f:
            f.write("# Symbol table\n")
            f.write("# Generated by hackasm\n")
            for name, value in sorted(self._symbols.as_dict().items()):
                f.write(f"{name} {value}\n")

    # =========================================================================
    # Pass 1: Label Resolution
    # =========================================================================

    def _pass1(self, statements: list[Statement]) -> int:
        """
        First pass: bind labels to instruction addresses.

        Returns:
            Number of real instructions seen
        """
        pc = 0
        for stmt in statements:
            if isinstance(stmt, LabelDef):
                self._symbols.bind_label(stmt.name, pc)
            elif isinstance(stmt, (AddressInstruction, ComputeInstruction)):
                pc += 1
        return pc

    # =========================================================================
    # Pass 2: Encoding
    # =========================================================================

    def _pass2(self, statements: list[Statement]) -> list[str]:
        """Second pass: emit one word per instruction."""
        words: list[str] = []

        for stmt in statements:
            if isinstance(stmt, Blank):
                continue

            if isinstance(stmt, LabelDef):
                self._listing_lines.append(
                    f"{'':5s}  {'':16s}  {stmt.location.line:4d}  {stmt.source_line.strip()}"
                )
                continue

            if isinstance(stmt, AddressInstruction):
                word = self._encode_address(stmt)
            elif isinstance(stmt, ComputeInstruction):
                word = self._encode_compute(stmt)
            else:
                raise TypeError(f"unexpected statement {stmt!r}")

            self._listing_lines.append(
                f"{len(words):5d}  {word}  {stmt.location.line:4d}  {stmt.source_line.strip()}"
            )
            words.append(word)

        return words

    def _encode_address(self, stmt: AddressInstruction) -> str:
        """Encode ``@value`` / ``@symbol``."""
        if stmt.is_literal:
            value = stmt.target
            if value > MAX_ADDRESS:
                raise AddressRangeError(
                    value, location=stmt.location, source_line=stmt.source_line
                )
        else:
            try:
                value = self._symbols.resolve_or_allocate(stmt.target)
            except SymbolTableExhausted as e:
                raise SymbolTableExhausted(
                    e.symbol, e.limit,
                    location=stmt.location, source_line=stmt.source_line,
                ) from None
        return encode_address(value)

    def _encode_compute(self, stmt: ComputeInstruction) -> str:
        """Encode ``dest=comp;jump`` and its shorter forms."""
        fields = parse_compute(stmt.text)
        if fields is None:
            raise AssemblySyntaxError(
                f"invalid instruction '{stmt.text}'",
                location=stmt.location,
                hint="expected dest=comp, comp;jump or dest=comp;jump",
                source_line=stmt.source_line,
            )

        comp_bits = lookup_comp(fields.comp)
        if comp_bits is None:
            raise self._unknown("comp", fields.comp, COMPUTATIONS, stmt)

        dest_bits = lookup_dest(fields.dest)
        if dest_bits is None:
            raise self._unknown("dest", fields.dest, DESTINATIONS, stmt)

        jump_bits = lookup_jump(fields.jump)
        if jump_bits is None:
            raise self._unknown("jump", fields.jump, JUMPS, stmt)

        return encode_compute(comp_bits, dest_bits, jump_bits)

    @staticmethod
    def _unknown(field: str, mnemonic: Optional[str], table: dict[str, str],
                 stmt: Statement) -> UnknownMnemonicError:
        valid = [name for name in table if name != NULL]
        return UnknownMnemonicError(
            field, mnemonic or "",
            location=stmt.location,
            source_line=stmt.source_line,
            valid=valid,
        )
