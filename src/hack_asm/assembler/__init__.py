"""
Hack Assembler
==============

This package provides a two-pass symbolic assembler for the Hack
computer's 16-bit instruction set.

Main Components
---------------
- **Assembler**: Main assembler class that orchestrates the assembly process
- **Parser**: Classifies lines and splits instructions into fields
- **CodeGenerator**: Label pass and code-generation pass
- **SymbolTable**: Predefined symbols, labels, and variables
- **encoder**: Binary encoding of A- and C-instructions

Assembly Process
----------------
1. **Parsing**: every line is stripped and classified by its first
   character; A-instructions yield an operand, C-instructions are split
   into dest/comp/jump, labels yield a name.

2. **Code Generation** (two-pass):
   - Pass 1: bind labels to ROM addresses
   - Pass 2: resolve operands (allocating variables from RAM 16 upward)
     and encode every instruction

Example Usage
-------------
>>> from hack_asm.assembler import assemble
>>> assemble("(LOOP)\\n@LOOP\\n0;JMP")
['0000000000000000', '1110101010000111']
"""

from hack_asm.assembler.assembler import Assembler, assemble, assemble_file
from hack_asm.assembler.parser import (
    AddressLoad,
    CommandType,
    Compute,
    ComputeFields,
    LabelDef,
    Parser,
    Statement,
    classify_line,
    decompose_compute,
    extract_label,
    extract_operand,
    parse_source,
)
from hack_asm.assembler.codegen import CodeGenerator
from hack_asm.assembler.symbols import (
    Symbol,
    SymbolKind,
    SymbolTable,
    VariableAllocator,
)
from hack_asm.assembler.encoder import (
    decode_compute,
    encode_address,
    encode_compute,
)
from hack_asm.cpu import (
    COMP_TABLE,
    DEST_TABLE,
    JUMP_TABLE,
    PREDEFINED_SYMBOLS,
)

__all__ = [
    # Main class and functions
    "Assembler",
    "assemble",
    "assemble_file",
    # Parser
    "AddressLoad",
    "CommandType",
    "Compute",
    "ComputeFields",
    "LabelDef",
    "Parser",
    "Statement",
    "classify_line",
    "decompose_compute",
    "extract_label",
    "extract_operand",
    "parse_source",
    # Code generator
    "CodeGenerator",
    # Symbols
    "Symbol",
    "SymbolKind",
    "SymbolTable",
    "VariableAllocator",
    # Encoder
    "decode_compute",
    "encode_address",
    "encode_compute",
    # Tables
    "COMP_TABLE",
    "DEST_TABLE",
    "JUMP_TABLE",
    "PREDEFINED_SYMBOLS",
]
