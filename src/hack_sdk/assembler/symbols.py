"""
Hack Assembler Symbol Table
===========================

Maps symbol names to non-negative addresses for one compilation.

Symbols enter the table in this order:

1. Predefined symbols (R0-R15, SP, LCL, ARG, THIS, THAT, SCREEN, KBD)
2. Caller defines (``-D NAME=VALUE`` on the command line)
3. Labels, bound to instruction addresses during pass 1
4. Variables, allocated from RAM address 16 upwards during pass 2

The first definition of a name wins. Later attempts to bind the same name
are ignored, so a label called ``SCREEN`` leaves SCREEN at 16384.
"""

import logging
from typing import Iterator, Optional

from hack_sdk.cpu import MAX_ADDRESS, PREDEFINED_SYMBOLS, VARIABLE_BASE
from hack_sdk.errors import SymbolTableExhausted

logger = logging.getLogger(__name__)


class SymbolTable:
    """
    Mutable name -> value mapping with automatic variable allocation.

    Usage:
        table = SymbolTable()
        table.bind_label("LOOP", 4)
        table.resolve_or_allocate("i")      # 16
        table.resolve_or_allocate("sum")    # 17
        table.resolve_or_allocate("i")      # 16 again

    Attributes:
        variable_base: First address handed out to a variable
        limit: Largest address a variable may receive
    """

    def __init__(self, variable_base: int = VARIABLE_BASE,
                 limit: int = MAX_ADDRESS):
        self.variable_base = variable_base
        self.limit = limit
        self._symbols: dict[str, int] = {}
        self._next_variable = variable_base
        self.initialize()

    def initialize(self) -> None:
        """Reset the table to the predefined symbol set."""
        self._symbols = dict(PREDEFINED_SYMBOLS)
        self._next_variable = self.variable_base

    # =========================================================================
    # Binding
    # =========================================================================

    def _bind(self, name: str, value: int, kind: str) -> bool:
        if name in self._symbols:
            logger.debug(
                f"Ignoring {kind} '{name}' = {value}: already bound to "
                f"{self._symbols[name]}"
            )
            return False
        self._symbols[name] = value
        logger.debug(f"Bound {kind} '{name}' = {value}")
        return True

    def define(self, name: str, value: int) -> bool:
        """
        Add a caller-supplied constant.

        Returns:
            True if the name was bound, False if it already existed
        """
        return self._bind(name, value, "define")

    def bind_label(self, name: str, pc: int) -> bool:
        """
        Bind a label to a program counter value.

        Predefined names, defines and earlier labels take precedence; a
        collision is a no-op.

        Returns:
            True if the name was bound, False if it already existed
        """
        return self._bind(name, pc, "label")

    def resolve_or_allocate(self, name: str) -> int:
        """
        Return the value of name, allocating a variable slot if unbound.

        Raises:
            SymbolTableExhausted: If the next slot lies past ``limit``
        """
        value = self._symbols.get(name)
        if value is not None:
            return value

        if self._next_variable > self.limit:
            raise SymbolTableExhausted(name, self.limit)

        value = self._next_variable
        self._next_variable += 1
        self._symbols[name] = value
        logger.debug(f"Allocated variable '{name}' at {value}")
        return value

    # =========================================================================
    # Queries
    # =========================================================================

    def lookup(self, name: str) -> Optional[int]:
        """Return the value bound to name, or None."""
        return self._symbols.get(name)

    @property
    def next_variable(self) -> int:
        """Address the next new variable would receive."""
        return self._next_variable

    def as_dict(self) -> dict[str, int]:
        """Return a copy of the name -> value mapping."""
        return dict(self._symbols)

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)
