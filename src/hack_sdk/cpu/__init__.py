"""
Hack SDK CPU Package
====================

This package contains the Hack CPU definitions used by the assembler:
machine constants, the destination/computation/jump encoding tables and
the predefined symbol set.

Usage:
    from hack_sdk.cpu import (
        COMPUTATIONS,
        PREDEFINED_SYMBOLS,
        lookup_comp,
    )
"""

from hack_sdk.cpu.hack import (
    # Machine constants
    WORD_BITS,
    ADDRESS_BITS,
    MAX_ADDRESS,
    VARIABLE_BASE,
    NULL,
    # Tables
    PREDEFINED_SYMBOLS,
    DESTINATIONS,
    JUMPS,
    COMPUTATIONS,
    # Lookup and encoding helpers
    lookup_dest,
    lookup_jump,
    lookup_comp,
    encode_address,
    encode_compute,
)

__all__ = [
    "WORD_BITS",
    "ADDRESS_BITS",
    "MAX_ADDRESS",
    "VARIABLE_BASE",
    "NULL",
    "PREDEFINED_SYMBOLS",
    "DESTINATIONS",
    "JUMPS",
    "COMPUTATIONS",
    "lookup_dest",
    "lookup_jump",
    "lookup_comp",
    "encode_address",
    "encode_compute",
]
