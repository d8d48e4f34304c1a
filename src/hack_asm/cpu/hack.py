"""
Hack Instruction Set Definition
===============================

This module defines the binary encoding of the Hack instruction set and
the symbols the architecture predefines. Every instruction is one 16-bit
word, written as a 16-character string of '0' and '1'.

Instruction Formats
-------------------
1. **A-instruction** (address load): ``@value``
   - Bit 15 is 0, bits 14..0 hold the address
   - Example: @21 -> 0000000000010101

2. **C-instruction** (compute): ``dest=comp;jump``
   - ``111`` + a + c1..c6 (comp, 7 bits) + d1..d3 (dest) + j1..j3 (jump)
   - dest and jump are optional; comp is mandatory
   - Example: D=D+A -> 111 0000010 010 000

3. **L pseudo-instruction** (label): ``(NAME)``
   - Emits no word; binds NAME to the address of the next instruction

Memory Map
----------
- RAM 0..15: virtual registers R0..R15 (SP, LCL, ARG, THIS, THAT alias 0..4)
- RAM 16..: variables, allocated in order of first use
- RAM 16384: SCREEN memory map base
- RAM 24576: KBD keyboard register
"""

from typing import Optional


# =============================================================================
# Word Geometry
# =============================================================================

WORD_BITS = 16
WORD_MASK = (1 << WORD_BITS) - 1
ADDRESS_BITS = 15
MAX_ADDRESS = (1 << ADDRESS_BITS) - 1  # 32767

C_INSTRUCTION_PREFIX = "111"

# Text used for an absent dest or jump field in the encoding tables
NULL_MNEMONIC = "null"


# =============================================================================
# Predefined Symbols
# =============================================================================

SCREEN_ADDRESS = 16384
KBD_ADDRESS = 24576

# First RAM address handed out to variables
VARIABLE_BASE = 16

PREDEFINED_SYMBOLS: dict[str, int] = {
    # Virtual registers
    "SP": 0,
    "LCL": 1,
    "ARG": 2,
    "THIS": 3,
    "THAT": 4,
    # General registers R0..R15
    **{f"R{n}": n for n in range(16)},
    # Memory-mapped I/O
    "SCREEN": SCREEN_ADDRESS,
    "KBD": KBD_ADDRESS,
}

# Addresses the variable allocator never hands out
RESERVED_ADDRESSES: frozenset[int] = frozenset({SCREEN_ADDRESS, KBD_ADDRESS})


# =============================================================================
# Encoding Tables
# =============================================================================
# Keys are the exact mnemonic text accepted in source; values are bit
# strings. The 'a' bit (first comp bit) selects M over A as the ALU's
# second operand.

COMP_TABLE: dict[str, str] = {
    "0":   "0101010",
    "1":   "0111111",
    "-1":  "0111010",
    "D":   "0001100",
    "A":   "0110000",
    "M":   "1110000",
    "!D":  "0001101",
    "!A":  "0110001",
    "!M":  "1110001",
    "-D":  "0001111",
    "-A":  "0110011",
    "-M":  "1110011",
    "D+1": "0011111",
    "A+1": "0110111",
    "M+1": "1110111",
    "D-1": "0001110",
    "A-1": "0110010",
    "M-1": "1110010",
    "D+A": "0000010",
    "D+M": "1000010",
    "D-A": "0010011",
    "D-M": "1010011",
    "A-D": "0000111",
    "M-D": "1000111",
    "D&A": "0000000",
    "D&M": "1000000",
    "D|A": "0010101",
    "D|M": "1010101",
}

DEST_TABLE: dict[str, str] = {
    "null": "000",
    "M":    "001",
    "D":    "010",
    "MD":   "011",
    "A":    "100",
    "AM":   "101",
    "AD":   "110",
    "AMD":  "111",
}

JUMP_TABLE: dict[str, str] = {
    "null": "000",
    "JGT":  "001",
    "JEQ":  "010",
    "JGE":  "011",
    "JLT":  "100",
    "JNE":  "101",
    "JLE":  "110",
    "JMP":  "111",
}

# Reverse tables for decoding (bit string -> mnemonic)
COMP_DECODE: dict[str, str] = {bits: name for name, bits in COMP_TABLE.items()}
DEST_DECODE: dict[str, str] = {bits: name for name, bits in DEST_TABLE.items()}
JUMP_DECODE: dict[str, str] = {bits: name for name, bits in JUMP_TABLE.items()}

FIELD_TABLES: dict[str, dict[str, str]] = {
    "dest": DEST_TABLE,
    "comp": COMP_TABLE,
    "jump": JUMP_TABLE,
}


# =============================================================================
# Lookup Functions
# =============================================================================

def get_field_code(field: str, mnemonic: Optional[str]) -> Optional[str]:
    """
    Look up the bit pattern of one C-instruction field.

    Args:
        field: "dest", "comp" or "jump"
        mnemonic: Field text; None means the field was omitted

    Returns:
        Bit string, or None if the mnemonic is not in the table
    """
    if mnemonic is None:
        mnemonic = NULL_MNEMONIC
    return FIELD_TABLES[field].get(mnemonic)
