"""
Hack Assembler - Main Interface
===============================

This module provides the main Assembler class, which is the primary
interface for assembling Hack source code. It coordinates the parser and
the code generator and writes the output files.

Example Usage
-------------
>>> from hack_sdk.assembler import Assembler
>>>
>>> asm = Assembler()
>>> words = asm.assemble('''
...     @2
...     D=A
...     @3
...     D=D+A
...     @0
...     M=D
... ''')
>>> words[0]
'0000000000000010'
>>>
>>> asm.write_hack("Add.hack")

Command-Line Usage
------------------
The assembler can also be invoked from the command line:

    $ hackasm Add.asm -l Add.lst -s Add.sym

Options:
    -o, --output FILE      Output .hack file (default: input with .hack suffix)
    -b, --binary FILE      Raw big-endian binary instead of .hack text
    -l, --listing FILE     Generate listing file
    -s, --symbols FILE     Generate symbol file
    -D, --define SYM=VAL   Pre-define symbol
    -v, --verbose          Verbose output
"""

import logging
from pathlib import Path
from typing import Optional

from hack_sdk.assembler.codegen import CodeGenerator
from hack_sdk.assembler.parser import parse_source
from hack_sdk.errors import AssemblerError

logger = logging.getLogger(__name__)

# Suffix of the textual machine-code file
HACK_SUFFIX = ".hack"


class Assembler:
    """
    Main Hack assembler class.

    Attributes:
        verbose: If True, log progress at INFO level
    """

    def __init__(self, verbose: bool = False,
                 defines: dict[str, int] | None = None):
        """
        Initialize the assembler.

        Args:
            verbose: Enable verbose output
            defines: Dictionary of pre-defined symbols
        """
        self._verbose = verbose
        self._codegen = CodeGenerator()
        self._source_file: Optional[Path] = None

        if defines:
            for name, value in defines.items():
                self.define_symbol(name, value)

    def define_symbol(self, name: str, value: int) -> None:
        """
        Pre-define a symbol before assembly.

        Predefined register names keep their built-in values; a define of
        the same name is ignored.

        Args:
            name: Symbol name
            value: Symbol value (0..32767)
        """
        self._codegen.define_symbol(name, value)

    # =========================================================================
    # Assembly
    # =========================================================================

    def assemble(self, source: str, filename: str = "<input>") -> list[str]:
        """
        Assemble source code from a string.

        Args:
            source: Assembly source code
            filename: Name used in error messages

        Returns:
            List of 16-character binary words

        Raises:
            AssemblerError: If assembly fails
        """
        statements = parse_source(source, filename)
        words = self._codegen.generate(statements)
        if self._verbose:
            logger.info(f"Assembled {filename}: {len(words)} words")
        return words

    def assemble_string(self, source: str, filename: str = "<input>") -> list[str]:
        """Alias for assemble()."""
        return self.assemble(source, filename)

    def assemble_file(self, filepath: str | Path) -> list[str]:
        """
        Assemble source code from a file.

        Args:
            filepath: Path to the .asm source file

        Returns:
            List of 16-character binary words

        Raises:
            FileNotFoundError: If the file doesn't exist
            AssemblerError: If assembly fails
        """
        filepath = Path(filepath)
        self._source_file = filepath

        with open(filepath, "r", encoding="utf-8") as f:
            source = f.read()

        return self.assemble(source, str(filepath))

    # =========================================================================
    # Results
    # =========================================================================

    def get_words(self) -> list[str]:
        """Return the machine words of the last successful assembly."""
        return self._codegen.get_words()

    def get_code(self) -> bytes:
        """Return the machine code as big-endian bytes."""
        return self._codegen.get_code()

    def get_symbols(self) -> dict[str, int]:
        """Return the final symbol table."""
        return self._codegen.get_symbols()

    def get_listing(self) -> str:
        """Return the assembly listing."""
        return self._codegen.get_listing()

    def get_source_file(self) -> Optional[Path]:
        """Return the path of the last file passed to assemble_file()."""
        return self._source_file

    @staticmethod
    def default_output_path(input_file: str | Path) -> Path:
        """Return input_file with its suffix replaced by .hack."""
        return Path(input_file).with_suffix(HACK_SUFFIX)

    # =========================================================================
    # Output Files
    # =========================================================================

    def _require_output(self) -> None:
        if not self._codegen.has_output:
            raise AssemblerError("nothing to write: no successful assembly")

    def write_hack(self, filepath: str | Path) -> None:
        """
        Write the .hack file: one 16-character word per line.

        The whole file is produced in a single write after a successful
        assembly, so a failed assembly never leaves a truncated file.
        """
        self._require_output()
        text = "".join(f"{word}\n" for word in self._codegen.get_words())
        with open(filepath, "w", encoding="ascii", newline="\n") as f:
            f.write(text)

    def write_binary(self, filepath: str | Path) -> None:
        """Write raw machine code, two big-endian bytes per word."""
        self._require_output()
        with open(filepath, "wb") as f:
            f.write(self._codegen.get_code())

    def write_listing(self, filepath: str | Path) -> None:
        """Write assembly listing file."""
        self._require_output()
        self._codegen.write_listing(filepath)

    def write_symbols(self, filepath: str | Path) -> None:
        """Write symbol table file."""
        self._require_output()
        self._codegen.write_symbols(filepath)


# =============================================================================
# Convenience Functions
# =============================================================================

def assemble(source: str, defines: dict[str, int] | None = None) -> list[str]:
    """
    Assemble source code and return the machine words.

    >>> assemble("@LOOP\\n(LOOP)\\n0;JMP")
    ['0000000000000001', '1110101010000111']
    """
    return Assembler(defines=defines).assemble(source)


def assemble_file(filepath: str | Path,
                  output: str | Path | None = None) -> list[str]:
    """
    Assemble a file and write the .hack output next to it (or to output).

    Returns:
        List of machine words
    """
    asm = Assembler()
    words = asm.assemble_file(filepath)
    asm.write_hack(output if output is not None else Assembler.default_output_path(filepath))
    return words
