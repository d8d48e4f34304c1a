"""
Hack Instruction Encoder
========================

Turns resolved instructions into 16-character binary words, and back.

A-instruction: the address in binary, left-padded with '0' to 16 chars.
C-instruction: '111' + comp (7 bits) + dest (3 bits) + jump (3 bits).
"""

import difflib
from typing import Optional

from hack_asm.cpu import (
    C_INSTRUCTION_PREFIX,
    COMP_DECODE,
    DEST_DECODE,
    FIELD_TABLES,
    JUMP_DECODE,
    MAX_ADDRESS,
    NULL_MNEMONIC,
    WORD_BITS,
    WORD_MASK,
    get_field_code,
)
from hack_asm.assembler.parser import ComputeFields
from hack_asm.errors import AddressRangeError, UnknownMnemonicError


def encode_address(address: int, max_address: Optional[int] = MAX_ADDRESS) -> str:
    """
    Encode an A-instruction word.

    Args:
        address: Resolved non-negative address
        max_address: Largest accepted address; None accepts anything that
                     fits in 16 bits

    Returns:
        16-character binary string

    Raises:
        AddressRangeError: If the address is negative or above the limit
    """
    limit = WORD_MASK if max_address is None else max_address
    if address < 0 or address > limit:
        raise AddressRangeError(address, limit)
    return format(address, "b").zfill(WORD_BITS)


def lookup_field(field: str, mnemonic: Optional[str]) -> str:
    """
    Look up one C-instruction field, raising on unknown text.

    Raises:
        UnknownMnemonicError: If the mnemonic is not in the field's table
    """
    code = get_field_code(field, mnemonic)
    if code is None:
        similar = difflib.get_close_matches(mnemonic, list(FIELD_TABLES[field]), n=3)
        raise UnknownMnemonicError(field, mnemonic, similar=similar)
    return code


def encode_compute(fields: ComputeFields) -> str:
    """
    Encode a C-instruction word.

    Unset dest and jump fields encode as 'null' (no write, no jump).

    Raises:
        UnknownMnemonicError: If any field's text is not in its table
    """
    comp = lookup_field("comp", fields.comp)
    dest = lookup_field("dest", fields.dest)
    jump = lookup_field("jump", fields.jump)
    return C_INSTRUCTION_PREFIX + comp + dest + jump


def decode_compute(word: str) -> ComputeFields:
    """
    Decode a C-instruction word back to its mnemonic fields.

    A 'null' dest or jump decodes to None.

    Raises:
        ValueError: If the word is not a valid C-instruction
    """
    if len(word) != WORD_BITS or not word.startswith(C_INSTRUCTION_PREFIX):
        raise ValueError(f"not a compute instruction: {word!r}")

    comp = COMP_DECODE.get(word[3:10])
    dest = DEST_DECODE.get(word[10:13])
    jump = JUMP_DECODE.get(word[13:16])
    if comp is None or dest is None or jump is None:
        raise ValueError(f"unknown field encoding in {word!r}")

    return ComputeFields(
        dest=None if dest == NULL_MNEMONIC else dest,
        comp=comp,
        jump=None if jump == NULL_MNEMONIC else jump,
    )
