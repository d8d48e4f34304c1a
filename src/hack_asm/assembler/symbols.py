"""
Symbol Table and Variable Allocation
====================================

The assembler keeps one flat namespace for everything a symbolic operand
can name: predefined registers and I/O ports, jump labels, and variables.

Binding Rules
-------------
- Predefined entries are seeded when the table is created.
- Once bound, an address never changes; binding a name to a second,
  different address raises DuplicateSymbolError.
- Re-binding a name to the address it already has is a no-op.
- There is no way to remove a binding.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional
import logging

from hack_asm.cpu import (
    PREDEFINED_SYMBOLS,
    RESERVED_ADDRESSES,
    VARIABLE_BASE,
)
from hack_asm.errors import (
    DuplicateSymbolError,
    SourceLocation,
    UnknownSymbolError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Symbol Table Entry
# =============================================================================

class SymbolKind(Enum):
    """How a symbol came to be bound."""
    PREDEFINED = "predefined"
    LABEL = "label"
    VARIABLE = "variable"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Symbol:
    """
    Symbol table entry.

    Attributes:
        name: Symbol name (case-sensitive)
        address: Bound address
        kind: Predefined, label, or variable
        location: Where the symbol was bound (None for predefined entries)
    """
    name: str
    address: int
    kind: SymbolKind
    location: Optional[SourceLocation] = None


# =============================================================================
# Symbol Table
# =============================================================================

class SymbolTable:
    """
    Mapping from symbol name to address.

    Usage:
        table = SymbolTable()
        table.define("LOOP", 4, SymbolKind.LABEL)
        table.lookup("LOOP")    # -> 4
        "SCREEN" in table       # -> True
    """

    def __init__(self, predefined: Optional[dict[str, int]] = None):
        """
        Create a table seeded with the architecture's predefined symbols.

        Args:
            predefined: Alternative seed mapping (defaults to PREDEFINED_SYMBOLS)
        """
        self._symbols: dict[str, Symbol] = {}
        seed = PREDEFINED_SYMBOLS if predefined is None else predefined
        for name, address in seed.items():
            self._symbols[name] = Symbol(name, address, SymbolKind.PREDEFINED)

    def contains(self, name: str) -> bool:
        """Return True if the name is bound."""
        return name in self._symbols

    def lookup(self, name: str) -> int:
        """
        Return the address bound to a name.

        Raises:
            UnknownSymbolError: If the name has never been bound
        """
        symbol = self.get(name)
        if symbol is None:
            raise UnknownSymbolError(name)
        return symbol.address

    def get(self, name: str) -> Optional[Symbol]:
        """Return the full entry for a name, or None."""
        return self._symbols.get(name)

    def define(
        self,
        name: str,
        address: int,
        kind: SymbolKind = SymbolKind.LABEL,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ) -> None:
        """
        Bind a name to an address.

        Args:
            name: Symbol name
            address: Non-negative address
            kind: How the symbol is being bound
            location: Where the binding appears in source
            source_line: Source text for error messages

        Raises:
            DuplicateSymbolError: If the name is bound to a different address
        """
        existing = self.get(name)
        if existing is not None:
            if existing.address == address:
                return
            raise DuplicateSymbolError(
                name,
                address=address,
                existing_address=existing.address,
                location=location,
                original_location=existing.location,
                source_line=source_line,
            )
        if address < 0:
            raise ValueError(f"symbol address must be non-negative, got {address}")

        self._symbols[name] = Symbol(name, address, kind, location)
        logger.debug(f"Bound {kind} '{name}' = {address}")

    def entries(self, kind: Optional[SymbolKind] = None) -> list[Symbol]:
        """Return entries in binding order, optionally filtered by kind."""
        return [s for s in self._symbols.values() if kind is None or s.kind is kind]

    def to_dict(self) -> dict[str, int]:
        """Return a plain name -> address dictionary."""
        return {name: sym.address for name, sym in self._symbols.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(list(self._symbols.values()))


# =============================================================================
# Variable Allocation
# =============================================================================

class VariableAllocator:
    """
    Hands out RAM addresses to variables in order of first use.

    The cursor starts at the variable base and moves up by one for every
    allocation. SCREEN and KBD are never handed out; the cursor steps over
    them if it ever reaches them.
    """

    def __init__(
        self,
        base: int = VARIABLE_BASE,
        reserved: frozenset[int] = RESERVED_ADDRESSES,
    ):
        self._next = base
        self._reserved = reserved
        self._allocated: list[int] = []

    @property
    def next_address(self) -> int:
        """The address the next allocation would return."""
        address = self._next
        while address in self._reserved:
            address += 1
        return address

    @property
    def allocated(self) -> list[int]:
        """Addresses allocated so far, in order."""
        return list(self._allocated)

    def allocate(self) -> int:
        """Return a fresh variable address and advance the cursor."""
        address = self.next_address
        self._next = address + 1
        self._allocated.append(address)
        return address
