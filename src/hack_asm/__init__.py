"""
hack-asm - Assembler Toolchain for the Hack Computer
====================================================

This package translates Hack assembly language into the 16-bit machine
words executed by the Hack computer, and back.

Main Components
---------------
- **assembler**: Two-pass symbolic assembler (hackasm)
    Converts assembly source files (.asm) to machine code text (.hack)

- **disassembler**: Machine code decoder (hackdisasm)
    Converts .hack files back to assembly text

- **config**: Assembly settings, with environment variable overrides

Quick Start
-----------
Assemble a program:
    >>> from hack_asm import Assembler
    >>> asm = Assembler()
    >>> words = asm.assemble_file("Add.asm")
    >>> asm.write_hack()            # writes Add.hack

Or use the command-line tools:
    $ hackasm Add.asm
    $ hackdisasm Add.hack
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from hack_asm.errors import (
    HackError,
    AssemblerError,
    MalformedLineError,
    UnknownMnemonicError,
    UnknownSymbolError,
    DuplicateSymbolError,
    AddressRangeError,
    DisassemblyError,
    SourceLocation,
)
from hack_asm.config import AssemblerConfig
from hack_asm.assembler import Assembler, SymbolTable, assemble, assemble_file
from hack_asm.disassembler import HackDisassembler

__all__ = [
    # Version info
    "__version__",
    # Assembler
    "Assembler",
    "AssemblerConfig",
    "SymbolTable",
    "assemble",
    "assemble_file",
    # Disassembler
    "HackDisassembler",
    # Exception hierarchy
    "HackError",
    "AssemblerError",
    "MalformedLineError",
    "UnknownMnemonicError",
    "UnknownSymbolError",
    "DuplicateSymbolError",
    "AddressRangeError",
    "DisassemblyError",
    "SourceLocation",
]
