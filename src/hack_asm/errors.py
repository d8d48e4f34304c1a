"""
Hack Assembler Error Hierarchy
==============================

This module defines the exception hierarchy for the whole toolchain.
All exceptions inherit from HackError, allowing callers to catch every
toolchain error with a single except clause if desired.

Exception Hierarchy
-------------------
HackError (base)
├── AssemblerError (assembler-related)
│   ├── MalformedLineError - line shape cannot be parsed
│   ├── UnknownMnemonicError - dest/comp/jump field not in its table
│   ├── UnknownSymbolError - reference to an unbound symbol
│   ├── DuplicateSymbolError - symbol bound to two different addresses
│   └── AddressRangeError - address does not fit in an A-instruction
└── DisassemblyError - machine word cannot be decoded

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class HackError(Exception):
    """
    Base exception for all hack_asm errors.

        try:
            assembler.assemble_file("Prog.asm")
        except HackError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed, 0 when unknown)
    """
    filename: str
    line: int
    column: int = 1

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"

    def at_column(self, column: int) -> "SourceLocation":
        """Return a copy of this location pointing at another column."""
        return SourceLocation(self.filename, self.line, column)


# =============================================================================
# Assembler Exceptions
# =============================================================================

class AssemblerError(HackError):
    """
    Base exception for all assembler-related errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text at the error location (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            Prog.asm:7:3: error: unknown computation 'D+2'
                D=D+2
                  ^
            hint: did you mean 'D+1', 'D+A'?
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)

    def with_context(
        self,
        location: SourceLocation,
        source_line: Optional[str] = None,
    ) -> "AssemblerError":
        """
        Attach a source location to an error raised without one.

        Encoding helpers run without knowledge of the source file, so the
        code generator fills in the location before the error propagates.
        Errors that already carry a location are returned unchanged.
        """
        if self.location is not None:
            return self
        self.location = location
        self.source_line = source_line
        self.args = (self._format_message(),)
        return self


class MalformedLineError(AssemblerError):
    """
    A line whose shape cannot be parsed.

    Examples:
        - '@' with no operand
        - '(LOOP' with no closing parenthesis
        - 'A=D=M' with two destination separators
        - '=M' with an empty destination field
    """
    pass


class UnknownMnemonicError(AssemblerError):
    """
    A destination, computation, or jump field not present in its table.

    Attributes:
        field: Which field failed ("dest", "comp" or "jump")
        mnemonic: The offending field text
    """

    FIELD_NAMES = {
        "dest": "destination",
        "comp": "computation",
        "jump": "jump",
    }

    def __init__(
        self,
        field: str,
        mnemonic: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
        similar: Optional[list[str]] = None,
    ):
        self.field = field
        self.mnemonic = mnemonic
        self.similar = similar or []

        hint = None
        if self.similar:
            suggestions = ", ".join(f"'{s}'" for s in self.similar[:3])
            hint = f"did you mean {suggestions}?"

        super().__init__(
            f"unknown {self.FIELD_NAMES.get(field, field)} '{mnemonic}'",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class UnknownSymbolError(AssemblerError):
    """
    Lookup of a symbol that has never been bound.

    The code generator allocates unseen symbols as variables, so this
    is only reached when the symbol table is used directly.
    """

    def __init__(
        self,
        symbol: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.symbol = symbol
        super().__init__(
            f"unknown symbol '{symbol}'",
            location=location,
            source_line=source_line,
        )


class DuplicateSymbolError(AssemblerError):
    """
    Symbol bound to a second, different address.

    Includes information about the original definition when available.
    """

    def __init__(
        self,
        symbol: str,
        address: int,
        existing_address: int,
        location: Optional[SourceLocation] = None,
        original_location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.symbol = symbol
        self.address = address
        self.existing_address = existing_address
        self.original_location = original_location

        if original_location:
            hint = f"'{symbol}' was first defined at {original_location}"
        else:
            hint = f"'{symbol}' is already bound to address {existing_address}"

        super().__init__(
            f"duplicate symbol '{symbol}'",
            location=location,
            hint=hint,
            source_line=source_line,
        )


class AddressRangeError(AssemblerError):
    """
    Address outside the range an A-instruction can load.

    The most significant bit of every word distinguishes address-load
    from compute instructions, leaving 15 bits for the address.
    """

    def __init__(
        self,
        value: int,
        maximum: int,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.value = value
        self.maximum = maximum
        super().__init__(
            f"address {value} is out of range (0 to {maximum})",
            location=location,
            source_line=source_line,
        )


# =============================================================================
# Disassembler Exceptions
# =============================================================================

class DisassemblyError(HackError):
    """
    A machine word that cannot be decoded.

    Attributes:
        word: The offending text
        index: Zero-based position of the word in the input
    """

    def __init__(self, word: str, reason: str, index: Optional[int] = None):
        self.word = word
        self.reason = reason
        self.index = index
        where = f"word {index}: " if index is not None else ""
        super().__init__(f"{where}cannot decode '{word}': {reason}")
