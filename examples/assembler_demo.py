#!/usr/bin/env python3
"""
Hack Assembler Demo
===================

This script demonstrates how to use the Hack SDK assembler to:
1. Assemble a program from a string
2. Inspect the symbol table
3. Write .hack, listing and symbol files
4. Handle assembly errors

Usage:
    python examples/assembler_demo.py
"""

from pathlib import Path

from hack_sdk.assembler import Assembler
from hack_sdk.errors import AssemblySyntaxError

# Fills the first row of the screen with black pixels
SOURCE = """
// Blacken the top 16 pixel rows of the screen
    @SCREEN
    D=A
    @addr
    M=D         // addr = SCREEN
    @256
    D=A
    @n
    M=D         // n = 256 words
(LOOP)
    @n
    D=M
    @END
    D;JLE       // if n <= 0 goto END
    @addr
    A=M
    M=-1        // RAM[addr] = 1111111111111111
    @addr
    M=M+1
    @n
    M=M-1
    @LOOP
    0;JMP
(END)
    @END
    0;JMP
"""


def main():
    output_dir = Path("trash")
    output_dir.mkdir(exist_ok=True)

    # ==========================================================================
    # 1. Assemble from a string
    # ==========================================================================
    asm = Assembler()
    words = asm.assemble(SOURCE, "fill.asm")
    print(f"Assembled {len(words)} instructions")
    for address, word in enumerate(words[:4]):
        print(f"  {address:3d}: {word}")

    # ==========================================================================
    # 2. Inspect symbols
    # ==========================================================================
    # Labels get ROM addresses, variables get RAM addresses from 16 upwards
    symbols = asm.get_symbols()
    for name in ("LOOP", "END", "addr", "n"):
        print(f"  {name:6s} = {symbols[name]}")

    # ==========================================================================
    # 3. Write output files
    # ==========================================================================
    asm.write_hack(output_dir / "fill.hack")
    asm.write_listing(output_dir / "fill.lst")
    asm.write_symbols(output_dir / "fill.sym")
    print(f"Wrote fill.hack, fill.lst and fill.sym to {output_dir}/")

    # ==========================================================================
    # 4. Errors carry the line number and original text
    # ==========================================================================
    try:
        asm.assemble("@1\nD=A\nD+A\n", "broken.asm")
    except AssemblySyntaxError as e:
        print(f"\nLine {e.line} rejected: {e.text!r}")
        print(e)


if __name__ == "__main__":
    main()
