"""
hackasm - Hack Assembler Command-Line Interface
===============================================

This module implements the command-line interface for the Hack assembler.

Usage Examples
--------------
Basic assembly (writes Max.hack next to the source):
    $ hackasm Max.asm

With output file:
    $ hackasm Max.asm -o build/Max.hack

Generate all output files:
    $ hackasm Max.asm -l Max.lst -s Max.sym

Raw binary image instead of text:
    $ hackasm Max.asm -b Max.bin

Pre-defined symbols:
    $ hackasm -D LIMIT=100 -D BUFFER=0x4000 Loop.asm

Verbose mode:
    $ hackasm -v Max.asm
"""

import logging
from pathlib import Path
from typing import Optional

import click

from hack_sdk import __version__
from hack_sdk.assembler import Assembler
from hack_sdk.assembler.lexer import is_identifier
from hack_sdk.cli.errors import handle_cli_exception


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def parse_define(defn: str) -> tuple[str, int]:
    """
    Parse a -D argument.

    Accepted forms: NAME (value 1), NAME=123, NAME=0x7F, NAME=$7F.

    Raises:
        ValueError: If the name is not a valid symbol or the value is not
            a number
    """
    name, sep, value_str = defn.partition("=")
    name = name.strip()
    if not is_identifier(name):
        raise ValueError(f"invalid symbol name in -D {defn}")
    if not sep:
        return name, 1

    value_str = value_str.strip()
    try:
        if value_str.startswith("$"):
            value = int(value_str[1:], 16)
        elif value_str.lower().startswith("0x"):
            value = int(value_str[2:], 16)
        else:
            value = int(value_str)
    except ValueError:
        raise ValueError(f"invalid value in -D {defn}") from None
    return name, value


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output .hack file (default: input.hack)",
)
@click.option(
    "-b", "--binary",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Generate raw binary output (two big-endian bytes per word)",
)
@click.option(
    "-l", "--listing",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Generate listing file",
)
@click.option(
    "-s", "--symbols",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Generate symbol file",
)
@click.option(
    "-D", "--define",
    multiple=True,
    help="Define symbol (format: NAME=VALUE)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="hackasm")
def main(
    input_file: Path,
    output: Optional[Path],
    binary: Optional[Path],
    listing: Optional[Path],
    symbols: Optional[Path],
    define: tuple[str, ...],
    verbose: bool,
) -> None:
    """
    Assemble Hack assembly source into machine code.

    INPUT_FILE is the assembly source file (.asm) to assemble.

    The assembler writes one 16-character binary word per instruction.
    Nothing is written if assembly fails.

    \b
    Examples:
        hackasm Max.asm              # Outputs Max.hack
        hackasm Max.asm -o out.hack  # Specify output file
        hackasm -D N=10 Loop.asm     # Define symbol
    """
    setup_logging(verbose)

    if output is not None and binary is not None:
        raise click.UsageError("-o/--output and -b/--binary are mutually exclusive")

    try:
        asm = Assembler(verbose=verbose)
        for defn in define:
            name, value = parse_define(defn)
            asm.define_symbol(name, value)

        if verbose:
            click.echo(f"Assembling {input_file}...")

        words = asm.assemble_file(input_file)

        if binary is not None:
            asm.write_binary(binary)
            if verbose:
                click.echo(f"Wrote {len(words) * 2} bytes raw binary to {binary}")
        else:
            output_file = output if output is not None else Assembler.default_output_path(input_file)
            asm.write_hack(output_file)
            if verbose:
                click.echo(f"Wrote {len(words)} words to {output_file}")

        if listing:
            asm.write_listing(listing)
            if verbose:
                click.echo(f"Wrote listing to {listing}")

        if symbols:
            asm.write_symbols(symbols)
            if verbose:
                click.echo(f"Wrote symbols to {symbols}")

        if verbose:
            click.echo(f"Assembly complete: {len(words)} instructions")
            click.echo(f"Defined {len(asm.get_symbols())} symbols")

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, error_type="Assembly")


if __name__ == "__main__":
    main()
