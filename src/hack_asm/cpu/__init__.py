"""
Hack CPU Package
================

Instruction set definitions shared by the assembler, the disassembler,
and the configuration defaults.

Modules:
    hack: Word geometry, predefined symbols, and the comp/dest/jump
          encoding tables with their reverse (decoding) tables.

Usage:
    from hack_asm.cpu import COMP_TABLE, PREDEFINED_SYMBOLS, get_field_code
"""

from hack_asm.cpu.hack import (
    # Word geometry
    WORD_BITS,
    WORD_MASK,
    ADDRESS_BITS,
    MAX_ADDRESS,
    C_INSTRUCTION_PREFIX,
    NULL_MNEMONIC,
    # Memory map and predefined symbols
    SCREEN_ADDRESS,
    KBD_ADDRESS,
    VARIABLE_BASE,
    PREDEFINED_SYMBOLS,
    RESERVED_ADDRESSES,
    # Encoding tables
    COMP_TABLE,
    DEST_TABLE,
    JUMP_TABLE,
    COMP_DECODE,
    DEST_DECODE,
    JUMP_DECODE,
    FIELD_TABLES,
    # Lookup functions
    get_field_code,
)

__all__ = [
    "WORD_BITS",
    "WORD_MASK",
    "ADDRESS_BITS",
    "MAX_ADDRESS",
    "C_INSTRUCTION_PREFIX",
    "NULL_MNEMONIC",
    "SCREEN_ADDRESS",
    "KBD_ADDRESS",
    "VARIABLE_BASE",
    "PREDEFINED_SYMBOLS",
    "RESERVED_ADDRESSES",
    "COMP_TABLE",
    "DEST_TABLE",
    "JUMP_TABLE",
    "COMP_DECODE",
    "DEST_DECODE",
    "JUMP_DECODE",
    "FIELD_TABLES",
    "get_field_code",
]
