"""
Hack Disassembler Module
========================

Decodes Hack machine words (the text of a .hack file) back into assembly.

Usage:
    from hack_asm.disassembler import HackDisassembler

    disasm = HackDisassembler()
    for instr in disasm.disassemble(lines):
        print(instr)

Copyright (c) 2026 hack-asm Contributors
"""

from .hack import HackDisassembler, DisassembledInstruction

__all__ = [
    "HackDisassembler",
    "DisassembledInstruction",
]
