"""
Hack Code Generator
===================

This module generates Hack machine words from parsed statements. It
implements a two-pass assembly process:

Pass 1 (Label Pass)
-------------------
- Walk the statements keeping an instruction counter starting at 0
- Bind every (LABEL) to the counter's current value
- A- and C-instructions advance the counter; labels do not

Pass 2 (Code Generation)
------------------------
- Resolve every A-instruction operand: literal, predefined, label, or a
  freshly allocated variable
- Encode every C-instruction from its dest/comp/jump tables
- Emit one 16-character word per real instruction, in source order

The passes are never fused: labels may be referenced before they are
declared, so every label must be bound before any operand is resolved.

Output Formats
--------------
- Machine code: one word per line (.hack)
- Listing file with ROM addresses, words, and source
- Symbol table file
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import logging

from hack_asm.assembler.encoder import encode_address, encode_compute
from hack_asm.assembler.parser import AddressLoad, Compute, LabelDef, Statement
from hack_asm.assembler.symbols import SymbolKind, SymbolTable, VariableAllocator
from hack_asm.config import AssemblerConfig
from hack_asm.errors import AssemblerError, SourceLocation

logger = logging.getLogger(__name__)


# =============================================================================
# Listing Entry
# =============================================================================

@dataclass
class ListingEntry:
    """
    One line of the assembly listing.

    Attributes:
        location: Source location of the statement
        source: Stripped source text
        address: ROM address of the instruction (or label target)
        word: Encoded word, or None for labels
    """
    location: SourceLocation
    source: str
    address: int
    word: Optional[str] = None


# =============================================================================
# Code Generator
# =============================================================================

class CodeGenerator:
    """
    Generates Hack machine words from parsed statements.

    The code generator maintains:
    - Symbol table with predefined symbols, labels, and variables
    - Instruction counter (pass 1) and variable cursor (pass 2)
    - Output word buffer and listing entries

    Every call to generate() starts from a fresh symbol table.

    Usage:
        codegen = CodeGenerator()
        words = codegen.generate(statements)
        codegen.write_hack("Prog.hack")
    """

    def __init__(self, config: Optional[AssemblerConfig] = None):
        """
        Initialize the code generator.

        Args:
            config: Assembly settings (defaults to AssemblerConfig())
        """
        self._config = config or AssemblerConfig()
        self._symbols = SymbolTable()
        self._allocator = VariableAllocator(self._config.variable_base)
        self._words: list[str] = []
        self._listing: list[ListingEntry] = []
        self._instruction_count = 0

    @property
    def config(self) -> AssemblerConfig:
        return self._config

    @property
    def symbols(self) -> SymbolTable:
        """The symbol table of the last run."""
        return self._symbols

    def generate(self, statements: list[Statement]) -> list[str]:
        """
        Generate machine words from parsed statements.

        This is the main entry point for code generation.

        Args:
            statements: Parsed statements in source order

        Returns:
            Encoded 16-character words, one per A- or C-instruction

        Raises:
            AssemblerError: On the first error; nothing from the failed run is kept
        """
        self._reset()

        try:
            self._instruction_count = self._pass1(statements)
            logger.debug(
                f"Pass 1 complete: {self._instruction_count} instructions, "
                f"{len(self._symbols.entries(SymbolKind.LABEL))} labels"
            )
            self._pass2(statements)
        except AssemblerError:
            self._reset()
            raise

        logger.debug(
            f"Pass 2 complete: {len(self._words)} words, "
            f"{len(self._allocator.allocated)} variables"
        )
        return list(self._words)

    def _reset(self) -> None:
        """Drop all state from the previous run."""
        self._symbols = SymbolTable()
        self._allocator = VariableAllocator(self._config.variable_base)
        self._words = []
        self._listing = []
        self._instruction_count = 0

    # =========================================================================
    # Pass 1: Labels
    # =========================================================================

    def _pass1(self, statements: list[Statement]) -> int:
        """
        First pass: bind labels to ROM addresses.

        Returns:
            The number of real instructions (final counter value)
        """
        counter = 0
        for stmt in statements:
            if isinstance(stmt, LabelDef):
                self._symbols.define(
                    stmt.name,
                    counter,
                    SymbolKind.LABEL,
                    location=stmt.location,
                    source_line=stmt.source,
                )
            elif isinstance(stmt, (AddressLoad, Compute)):
                counter += 1
        return counter

    # =========================================================================
    # Pass 2: Code Generation
    # =========================================================================

    def _pass2(self, statements: list[Statement]) -> None:
        """Second pass: resolve operands and encode instructions."""
        for stmt in statements:
            pc = len(self._words)
            try:
                if isinstance(stmt, AddressLoad):
                    word = self._generate_address_load(stmt)
                elif isinstance(stmt, Compute):
                    word = encode_compute(stmt.fields)
                else:
                    self._listing.append(ListingEntry(stmt.location, stmt.source, pc))
                    continue
            except AssemblerError as e:
                raise e.with_context(self._error_location(stmt, e), stmt.source)

            self._words.append(word)
            self._listing.append(ListingEntry(stmt.location, stmt.source, pc, word))

    def _generate_address_load(self, stmt: AddressLoad) -> str:
        """Resolve an A-instruction operand and encode it."""
        address = self._resolve_operand(stmt)
        max_address = self._config.max_address if self._config.range_check else None
        return encode_address(address, max_address)

    def _resolve_operand(self, stmt: AddressLoad) -> int:
        """
        Resolve an operand to an address.

        Decimal literals stand for themselves. Any other operand is a
        symbol; a symbol seen for the first time becomes a variable at the
        next free RAM address.
        """
        if stmt.is_literal:
            return int(stmt.operand)

        name = stmt.operand
        if not self._symbols.contains(name):
            address = self._allocator.allocate()
            self._symbols.define(
                name,
                address,
                SymbolKind.VARIABLE,
                location=stmt.location,
                source_line=stmt.source,
            )
            logger.debug(f"{stmt.location}: allocated variable '{name}' at {address}")
        return self._symbols.lookup(name)

    def _error_location(self, stmt: Statement, error: AssemblerError) -> SourceLocation:
        """Point the caret at the field that caused an encoding error."""
        if isinstance(stmt, Compute):
            fields = stmt.fields
            field = getattr(error, "field", None)
            if field == "comp":
                return stmt.location.at_column(fields.comp_column)
            if field == "jump" and fields.jump_column:
                return stmt.location.at_column(fields.jump_column)
            return stmt.location.at_column(1)
        if isinstance(stmt, AddressLoad):
            return stmt.location.at_column(2)
        return stmt.location

    # =========================================================================
    # Results
    # =========================================================================

    def get_words(self) -> list[str]:
        """Return the generated words."""
        return list(self._words)

    def get_symbols(self) -> dict[str, int]:
        """Return a dictionary of symbol names to addresses."""
        return self._symbols.to_dict()

    def get_instruction_count(self) -> int:
        """Return the number of real instructions counted by pass 1."""
        return self._instruction_count

    def get_variable_addresses(self) -> list[int]:
        """Return variable addresses in allocation order."""
        return self._allocator.allocated

    # =========================================================================
    # Output File Writing
    # =========================================================================

    def get_listing(self) -> str:
        """
        Get the assembly listing as a string.

        Returns:
            The listing showing ROM addresses, words, and source lines,
            followed by the label and variable symbols.
        """
        lines = []
        lines.append("Hack Assembler Listing")
        lines.append("=" * 60)
        lines.append("")
        lines.append(" ROM   Word              Line  Source")
        lines.append("-" * 60)
        for entry in self._listing:
            if entry.word is None:
                lines.append(f"{'':5}   {'':16}  {entry.location.line:4d}  {entry.source}")
            else:
                lines.append(
                    f"{entry.address:5d}   {entry.word}  {entry.location.line:4d}  {entry.source}"
                )
        lines.append("")
        lines.append("Symbol Table")
        lines.append("-" * 30)
        for sym in sorted(self._symbols, key=lambda s: s.name):
            if sym.kind is not SymbolKind.PREDEFINED:
                lines.append(f"{sym.name:20s} = {sym.address:5d}  ({sym.kind})")
        return "\n".join(lines)

    def write_hack(self, filepath: str | Path) -> None:
        """
        Write machine words, one per line.
        """
        with open(filepath, "w") as f:
            for word in self._words:
                f.write(f"{word}\n")

    def write_listing(self, filepath: str | Path) -> None:
        """
        Write assembly listing file.
        """
        with open(filepath, "w") as f:
            f.write(self.get_listing())
            f.write("\n")

    def write_symbols(self, filepath: str | Path) -> None:
        """
        Write symbol table file.

        Format: name address kind (one per line, predefined symbols omitted)
        """
        with open(filepath, "w") as f:
            f.write("# Symbol table\n")
            f.write("# Generated by hackasm\n")
            for sym in sorted(self._symbols, key=lambda s: s.name):
                if sym.kind is not SymbolKind.PREDEFINED:
                    f.write(f"{sym.name} {sym.address} {sym.kind}\n")
