"""
Hack Assembler
==============

This module provides a two-pass assembler for the Hack computer. It
converts Hack assembly source (.asm) into textual machine code (.hack),
one 16-character binary word per instruction.

Main Components
---------------
- **Assembler**: Main assembler class that orchestrates the assembly process
- **parse_source / classify_line**: Classify lines into statements
- **SymbolTable**: Predefined symbols, labels and variables
- **CodeGenerator**: Label resolution and instruction encoding

Assembly Process
----------------
1. **Classification**: every line becomes Blank, LabelDef,
   AddressInstruction or ComputeInstruction
2. **Pass 1**: bind labels to the address of the next instruction
3. **Pass 2**: encode instructions, allocating variables from RAM[16]

Example Usage
-------------
>>> from hack_sdk.assembler import Assembler
>>> asm = Assembler()
>>> asm.assemble('''
... (LOOP)
...     @LOOP
...     0;JMP
... ''')
['0000000000000000', '1110101010000111']
"""

from hack_sdk.assembler.assembler import Assembler, assemble, assemble_file
from hack_sdk.assembler.parser import (
    Statement,
    Blank,
    LabelDef,
    AddressInstruction,
    ComputeInstruction,
    ComputeFields,
    classify_line,
    parse_compute,
    parse_source,
)
from hack_sdk.assembler.symbols import SymbolTable
from hack_sdk.assembler.codegen import CodeGenerator

__all__ = [
    # Main class and functions
    "Assembler",
    "assemble",
    "assemble_file",
    # Parser
    "Statement",
    "Blank",
    "LabelDef",
    "AddressInstruction",
    "ComputeInstruction",
    "ComputeFields",
    "classify_line",
    "parse_compute",
    "parse_source",
    # Symbols
    "SymbolTable",
    # Code generator
    "CodeGenerator",
]
