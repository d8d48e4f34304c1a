"""
Hack Disassembler
=================

Disassembles Hack machine words back into assembly language. This is the
inverse operation of the assembler's code generation.

Every word is 16 characters of '0'/'1':
    - Bit 15 = 0: A-instruction, the remaining 15 bits are the address
    - Prefix 111: C-instruction, decoded through the comp/dest/jump tables

Usage:
    disasm = HackDisassembler()

    # Disassemble the contents of a .hack file
    instructions = disasm.disassemble(Path("Prog.hack").read_text().splitlines())

    # Disassemble a single word
    instr = disasm.disassemble_one("1110110000010000", address=1)
    print(instr.text)   # D=A

Copyright (c) 2026 hack-asm Contributors
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from hack_asm.assembler.encoder import decode_compute
from hack_asm.cpu import WORD_BITS
from hack_asm.errors import DisassemblyError


# =============================================================================
# Data Structures
# =============================================================================

@dataclass
class DisassembledInstruction:
    """
    A single disassembled Hack instruction.

    Attributes:
        address: ROM address of the instruction
        word: The 16-character machine word
        text: Assembly text (e.g. "@21", "D=M", "0;JMP")
        comment: Optional annotation (e.g. the numeric value of a symbol)
    """
    address: int
    word: str
    text: str
    comment: str = ""

    @property
    def is_address_load(self) -> bool:
        return self.word[0] == "0"

    def __str__(self) -> str:
        """Format as listing line: ADDRESS: WORD  TEXT"""
        if self.comment:
            return f"{self.address:5d}: {self.word}  {self.text:<16} // {self.comment}"
        return f"{self.address:5d}: {self.word}  {self.text}"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "address": self.address,
            "word": self.word,
            "text": self.text,
            "comment": self.comment,
        }


# =============================================================================
# Hack Disassembler
# =============================================================================

class HackDisassembler:
    """
    Disassembler for Hack machine words.

    Attributes:
        _symbol_table: Optional address -> name map used to print
                       A-instruction operands symbolically
    """

    def __init__(self, symbol_table: Optional[dict[int, str]] = None):
        """
        Args:
            symbol_table: Optional dict mapping addresses to symbol names
        """
        self._symbol_table = symbol_table or {}

    def disassemble_one(self, word: str, address: int = 0) -> DisassembledInstruction:
        """
        Disassemble a single word.

        Raises:
            DisassemblyError: If the word is malformed or uses unknown encodings
        """
        word = word.strip()
        if len(word) != WORD_BITS or any(c not in "01" for c in word):
            raise DisassemblyError(word, "expected 16 binary digits", address)

        if word[0] == "0":
            value = int(word, 2)
            name = self._symbol_table.get(value)
            if name is not None:
                return DisassembledInstruction(address, word, f"@{name}", str(value))
            return DisassembledInstruction(address, word, f"@{value}")

        if not word.startswith("111"):
            raise DisassemblyError(word, "compute instructions must start with 111", address)

        try:
            fields = decode_compute(word)
        except ValueError as e:
            raise DisassemblyError(word, str(e), address) from e

        text = fields.comp
        if fields.dest is not None:
            text = f"{fields.dest}={text}"
        if fields.jump is not None:
            text = f"{text};{fields.jump}"
        return DisassembledInstruction(address, word, text)

    def disassemble(
        self,
        words: Iterable[str],
        start_address: int = 0,
        count: Optional[int] = None,
    ) -> list[DisassembledInstruction]:
        """
        Disassemble a sequence of words.

        Blank lines are skipped and do not advance the address.

        Args:
            words: Machine words (e.g. lines of a .hack file)
            start_address: ROM address of the first word
            count: Maximum number of instructions (default: all)
        """
        result: list[DisassembledInstruction] = []
        address = start_address
        for word in words:
            if count is not None and len(result) >= count:
                break
            if not word.strip():
                continue
            result.append(self.disassemble_one(word, address))
            address += 1
        return result

    def to_source(self, words: Iterable[str]) -> str:
        """Return assembly text, one instruction per line."""
        return "\n".join(instr.text for instr in self.disassemble(words)) + "\n"
