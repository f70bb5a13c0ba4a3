"""
Hack SDK - Assembler Toolchain for the Hack Computer
====================================================

This package provides an assembler for the Hack computer, the 16-bit
machine built in "The Elements of Computing Systems" (Nand2Tetris).

Main Components
---------------
- **assembler**: Two-pass Hack assembler (hackasm)
    Converts assembly source files (.asm) to machine code (.hack)

- **cpu**: Hack CPU definitions
    Encoding tables and predefined symbols

Quick Start
-----------
Assemble a program:
    >>> from hack_sdk.assembler import Assembler
    >>> asm = Assembler()
    >>> words = asm.assemble_file("Max.asm")
    >>> asm.write_hack("Max.hack")

Or use the command-line tool:
    $ hackasm Max.asm
    $ hackasm Max.asm -o out/Max.hack -l Max.lst

Version History
---------------
1.0.0 - Initial release with assembler and CLI
"""

__version__ = "1.0.0"
__author__ = "Hack SDK Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from hack_sdk.assembler import Assembler, SymbolTable, assemble, assemble_file
from hack_sdk.errors import (
    HackError,
    AssemblerError,
    AssemblySyntaxError,
    UnknownMnemonicError,
    AddressRangeError,
    SymbolTableExhausted,
    SourceLocation,
)

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Assembler
    "Assembler",
    "SymbolTable",
    "assemble",
    "assemble_file",
    # Exception hierarchy
    "HackError",
    "AssemblerError",
    "AssemblySyntaxError",
    "UnknownMnemonicError",
    "AddressRangeError",
    "SymbolTableExhausted",
    "SourceLocation",
]
