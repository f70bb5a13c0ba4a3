"""
Hack Instruction Set Definition
===============================

This module defines the encoding tables for the Hack computer, a 16-bit
machine with two registers (A and D) and a memory operand M = RAM[A].

Instruction Formats
-------------------
The Hack CPU has exactly two instruction formats, both 16 bits wide:

1. **Address instruction** (``@value``)
   - ``0vvv vvvv vvvv vvvv``
   - Loads a 15-bit unsigned value into the A register
   - Example: @2 -> 0000000000000010

2. **Compute instruction** (``dest=comp;jump``)
   - ``111a cccc ccdd djjj``
   - ``a cccccc``: ALU computation (7 bits, ``a`` selects M instead of A)
   - ``ddd``: destination registers
   - ``jjj``: jump condition
   - Example: D=A -> 1110110000010000

Predefined Symbols
------------------
Virtual registers R0-R15, the VM pointers SP/LCL/ARG/THIS/THAT, and the
memory-mapped I/O bases SCREEN and KBD. Note that R12 maps to 2, not 12,
and that ``D+M`` and ``M+D`` share one computation code. Both are aliases
the toolchain has always shipped with and are kept as-is.

Reference
---------
- Nisan & Schocken, The Elements of Computing Systems, chapter 6
"""

from typing import Optional


# =============================================================================
# Machine Constants
# =============================================================================

WORD_BITS = 16          # Width of every instruction word
ADDRESS_BITS = 15       # Payload width of an address instruction
MAX_ADDRESS = (1 << ADDRESS_BITS) - 1   # 32767
VARIABLE_BASE = 16      # First RAM slot handed out to variables

ADDRESS_PREFIX = "0"    # Leading bit of an address instruction
COMPUTE_PREFIX = "111"  # Leading bits of a compute instruction

# Key used for absent dest/jump fields
NULL = "NULL"


# =============================================================================
# Predefined Symbols
# =============================================================================

PREDEFINED_SYMBOLS: dict[str, int] = {
    "R0": 0, "R1": 1, "R2": 2, "R3": 3, "R4": 4, "R5": 5,
    "R6": 6, "R7": 7, "R8": 8, "R9": 9, "R10": 10, "R11": 11,
    "R12": 2, "R13": 13, "R14": 14, "R15": 15,
    "SP": 0, "LCL": 1, "ARG": 2, "THIS": 3, "THAT": 4,
    "SCREEN": 16384,    # Memory-mapped screen base
    "KBD": 24576,       # Memory-mapped keyboard register
}


# =============================================================================
# Encoding Tables
# =============================================================================

DESTINATIONS: dict[str, str] = {
    NULL: "000", "M": "001", "D": "010", "MD": "011",
    "A": "100", "AM": "101", "AD": "110", "AMD": "111",
}

JUMPS: dict[str, str] = {
    NULL: "000", "JGT": "001", "JEQ": "010", "JGE": "011",
    "JLT": "100", "JNE": "101", "JLE": "110", "JMP": "111",
}

# a=0: operand is A
# a=1: operand is M
COMPUTATIONS: dict[str, str] = {
    "0":   "0101010", "1":   "0111111", "-1":  "0111010",
    "D":   "0001100", "A":   "0110000", "!D":  "0001101",
    "!A":  "0110001", "-D":  "0001111", "-A":  "0110011",
    "D+1": "0011111", "A+1": "0110111", "D-1": "0001110",
    "A-1": "0110010", "D+A": "0000010", "D-A": "0010011",
    "A-D": "0000111", "D&A": "0000000", "D|A": "0010101",
    "M":   "1110000", "!M":  "1110001", "-M":  "1110011",
    "M+1": "1110111", "M-1": "1110010", "D+M": "1000010",
    "D-M": "1010011", "M-D": "1000111", "D&M": "1000000",
    "D|M": "1010101",
    "M+D": "1000010",   # alias of D+M
}


# =============================================================================
# Lookup Functions
# =============================================================================

def lookup_dest(mnemonic: Optional[str]) -> Optional[str]:
    """
    Look up the 3-bit destination code.

    Args:
        mnemonic: Destination mnemonic, or None for no destination

    Returns:
        Bit string, or None if the mnemonic is not a destination
    """
    return DESTINATIONS.get(NULL if mnemonic is None else mnemonic)


def lookup_jump(mnemonic: Optional[str]) -> Optional[str]:
    """
    Look up the 3-bit jump code.

    Args:
        mnemonic: Jump mnemonic, or None for no jump

    Returns:
        Bit string, or None if the mnemonic is not a jump
    """
    return JUMPS.get(NULL if mnemonic is None else mnemonic)


def lookup_comp(mnemonic: str) -> Optional[str]:
    """Look up the 7-bit computation code (None if unknown)."""
    return COMPUTATIONS.get(mnemonic)


def encode_address(value: int) -> str:
    """
    Encode an address instruction word.

    The caller is responsible for range checking; values must lie in
    0..MAX_ADDRESS.
    """
    return ADDRESS_PREFIX + format(value, f"0{ADDRESS_BITS}b")


def encode_compute(comp_bits: str, dest_bits: str, jump_bits: str) -> str:
    """Assemble a compute instruction word from its encoded fields."""
    return COMPUTE_PREFIX + comp_bits + dest_bits + jump_bits
