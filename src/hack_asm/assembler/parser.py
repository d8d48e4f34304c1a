"""
Hack Assembly Language Parser
=============================

This module turns lines of Hack assembly source into statements the code
generator can process. Parsing is line-at-a-time; every line is stripped
of surrounding whitespace and then classified by its first character.

Statement Types
---------------
1. **AddressLoad**: ``@value`` or ``@symbol``
   ```asm
   @21
   @LOOP
   @counter
   ```

2. **Compute**: ``dest=comp;jump`` with optional dest and jump
   ```asm
   D=M
   M=M+1
   D;JGT
   0;JMP
   ```

3. **LabelDef**: ``(NAME)``
   ```asm
   (LOOP)
   ```

Blank lines and full-line comments (any line starting with '/') produce
no statement. Text after the first whitespace in an A- or C-instruction
is ignored, so ``D=M // load`` is accepted.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Optional, Union

from hack_asm.errors import MalformedLineError, SourceLocation


# =============================================================================
# Line Classification
# =============================================================================

class CommandType(Enum):
    """
    Kinds of source line, as decided by the first character.
    """
    SKIP = auto()           # Blank line or comment
    ADDRESS_LOAD = auto()   # @value
    COMPUTE = auto()        # dest=comp;jump
    LABEL = auto()          # (NAME)


def classify_line(line: str) -> CommandType:
    """
    Classify a stripped source line.

    Args:
        line: Source line with surrounding whitespace removed

    Returns:
        The line's CommandType
    """
    if not line:
        return CommandType.SKIP

    first = line[0]
    if first == "/":
        return CommandType.SKIP
    if first == "@":
        return CommandType.ADDRESS_LOAD
    if first == "(":
        return CommandType.LABEL
    return CommandType.COMPUTE


# =============================================================================
# Operand Extraction
# =============================================================================

def _find_whitespace(line: str, start: int) -> int:
    """Return the index of the first whitespace at or after start, or len(line)."""
    for i in range(start, len(line)):
        if line[i].isspace():
            return i
    return len(line)


def extract_operand(line: str, location: Optional[SourceLocation] = None) -> str:
    """
    Extract the operand of an address-load line.

    The operand runs from index 1 up to the first whitespace or the end
    of the line.

    Raises:
        MalformedLineError: If the operand is empty
    """
    operand = line[1:_find_whitespace(line, 1)]
    if not operand:
        raise MalformedLineError(
            "missing operand after '@'",
            location=location.at_column(2) if location else None,
            source_line=line,
        )
    return operand


def extract_label(line: str, location: Optional[SourceLocation] = None) -> str:
    """
    Extract the name of a label declaration.

    The name runs from index 1 up to the first ')'.

    Raises:
        MalformedLineError: If there is no ')' or the name is empty
    """
    end = line.find(")", 1)
    if end < 0:
        raise MalformedLineError(
            "unterminated label declaration",
            location=location.at_column(len(line) + 1) if location else None,
            hint="label declarations have the form (NAME)",
            source_line=line,
        )
    name = line[1:end]
    if not name:
        raise MalformedLineError(
            "empty label name",
            location=location.at_column(2) if location else None,
            source_line=line,
        )
    return name


# =============================================================================
# Compute Instruction Decomposition
# =============================================================================

@dataclass(frozen=True)
class ComputeFields:
    """
    The three mnemonic fields of a compute instruction.

    Attributes:
        dest: Destination mnemonic, or None for no write
        comp: Computation mnemonic
        jump: Jump mnemonic, or None for never jump
        comp_column: 1-based column where comp starts (for error carets)
        jump_column: 1-based column where jump starts
    """
    dest: Optional[str]
    comp: str
    jump: Optional[str]
    comp_column: int = 1
    jump_column: int = 0


def decompose_compute(line: str, location: Optional[SourceLocation] = None) -> ComputeFields:
    """
    Split a compute line into dest, comp and jump fields.

    Scans left to right keeping the start j of the current segment:
    '=' closes the destination, ';' closes the computation, and the first
    whitespace (or the end of the line) closes whichever field is still
    open - the jump if a computation was already captured, otherwise the
    computation. Anything after that first whitespace is ignored.

    Raises:
        MalformedLineError: On an empty field or misplaced separator
    """
    def malformed(message: str, index: int) -> MalformedLineError:
        return MalformedLineError(
            message,
            location=location.at_column(index + 1) if location else None,
            hint="compute instructions have the form dest=comp;jump",
            source_line=line,
        )

    dest: Optional[str] = None
    comp: Optional[str] = None
    jump: Optional[str] = None
    comp_start = 0
    jump_start = -1
    j = 0

    end = _find_whitespace(line, 0)
    for i in range(end + 1):
        ch = line[i] if i < end else None

        if ch is None:
            text = line[j:i]
            if comp is not None:
                if not text:
                    raise malformed("empty jump field", i)
                jump = text
                jump_start = j
            else:
                if not text:
                    raise malformed("empty computation field", i)
                comp = text
                comp_start = j
            break

        if ch == "=":
            if dest is not None:
                raise malformed("more than one '=' in instruction", i)
            if comp is not None:
                raise malformed("'=' after ';' in instruction", i)
            if i == j:
                raise malformed("empty destination field", i)
            dest = line[j:i]
            j = i + 1

        elif ch == ";":
            if comp is not None:
                raise malformed("more than one ';' in instruction", i)
            if i == j:
                raise malformed("empty computation field", i)
            comp = line[j:i]
            comp_start = j
            j = i + 1

    return ComputeFields(
        dest=dest,
        comp=comp,
        jump=jump,
        comp_column=comp_start + 1,
        jump_column=jump_start + 1 if jump is not None else 0,
    )


# =============================================================================
# Statement Data Classes
# =============================================================================

@dataclass
class Statement:
    """
    Base class for all parsed statements.

    Every statement keeps its source location and stripped source text
    for error reporting and listings.
    """
    location: SourceLocation
    source: str


@dataclass
class AddressLoad(Statement):
    """
    Address-load (A-) instruction.

    Attributes:
        operand: Literal digits or a symbol name
    """
    operand: str

    @property
    def is_literal(self) -> bool:
        """True if the operand is a non-negative decimal integer."""
        return self.operand.isascii() and self.operand.isdigit()


@dataclass
class Compute(Statement):
    """
    Compute (C-) instruction.

    Attributes:
        fields: The decomposed dest/comp/jump mnemonics
    """
    fields: ComputeFields


@dataclass
class LabelDef(Statement):
    """
    Label declaration.

    Attributes:
        name: Label name
    """
    name: str


# =============================================================================
# Parser
# =============================================================================

class Parser:
    """
    Line-oriented parser for Hack assembly.

    Usage:
        parser = Parser(source_lines, filename="Prog.asm")
        statements = parser.parse()
    """

    def __init__(self, lines: Iterable[str], filename: str = "<input>"):
        """
        Args:
            lines: Any iterable producing source lines (newlines allowed)
            filename: Name used in error locations
        """
        self._lines = lines
        self._filename = filename

    def parse(self) -> list[Statement]:
        """
        Parse every line into statements.

        Raises:
            MalformedLineError: On the first line that cannot be parsed
        """
        statements: list[Statement] = []
        for line_number, raw in enumerate(self._lines, start=1):
            stmt = self.parse_line(raw, line_number)
            if stmt is not None:
                statements.append(stmt)
        return statements

    def parse_line(self, raw: str, line_number: int) -> Optional[Statement]:
        """Parse one raw line; returns None for blank and comment lines."""
        line = raw.strip()
        kind = classify_line(line)
        if kind is CommandType.SKIP:
            return None

        # Columns are reported relative to the stripped text
        location = SourceLocation(self._filename, line_number, 1)

        if kind is CommandType.ADDRESS_LOAD:
            return AddressLoad(location, line, extract_operand(line, location))
        if kind is CommandType.LABEL:
            return LabelDef(location, line, extract_label(line, location))
        return Compute(location, line, decompose_compute(line, location))


def parse_source(source: Union[str, Iterable[str]], filename: str = "<input>") -> list[Statement]:
    """
    Parse Hack assembly source.

    Args:
        source: Source text, or an iterable of lines
        filename: Name used in error locations

    Returns:
        Statements in source order
    """
    if isinstance(source, str):
        source = source.splitlines()
    return Parser(source, filename).parse()
