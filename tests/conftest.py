"""
hack-asm - Test Configuration
=============================

Shared pytest fixtures: sample programs with known machine code and a
helper for writing source files into a temporary directory.
"""

from pathlib import Path

import pytest


# ═══════════════════════════════════════════════════════════════════════════════
# SAMPLE PROGRAMS
# ═══════════════════════════════════════════════════════════════════════════════

ADD_SOURCE = """\
// Computes R0 = 2 + 3
@2
D=A
@3
D=D+A
@0
M=D
"""

ADD_WORDS = [
    "0000000000000010",
    "1110110000010000",
    "0000000000000011",
    "1110000010010000",
    "0000000000000000",
    "1110001100001000",
]

MAX_SOURCE = """\
// Computes R2 = max(R0, R1)

   @R0
   D=M              // D = first number
   @R1
   D=D-M            // D = first number - second number
   @OUTPUT_FIRST
   D;JGT            // if D>0 (first is greater) goto output_first
   @R1
   D=M              // D = second number
   @OUTPUT_D
   0;JMP            // goto output_d
(OUTPUT_FIRST)
   @R0
   D=M              // D = first number
(OUTPUT_D)
   @R2
   M=D              // M[2] = D (greatest number)
(INFINITE_LOOP)
   @INFINITE_LOOP
   0;JMP            // infinite loop
"""

MAX_WORDS = [
    "0000000000000000",
    "1111110000010000",
    "0000000000000001",
    "1111010011010000",
    "0000000000001010",
    "1110001100000001",
    "0000000000000001",
    "1111110000010000",
    "0000000000001100",
    "1110101010000111",
    "0000000000000000",
    "1111110000010000",
    "0000000000000010",
    "1110001100001000",
    "0000000000001110",
    "1110101010000111",
]


@pytest.fixture
def add_program() -> tuple[str, list[str]]:
    """Fixture: the Add program and its machine code."""
    return ADD_SOURCE, ADD_WORDS


@pytest.fixture
def max_program() -> tuple[str, list[str]]:
    """Fixture: the Max program (labels, comments, indentation) and its machine code."""
    return MAX_SOURCE, MAX_WORDS


@pytest.fixture
def write_source(tmp_path: Path):
    """
    Fixture: write assembly source into tmp_path.

    Returns a function taking (source, name="Prog.asm") and returning the path.
    """
    def _write(source: str, name: str = "Prog.asm") -> Path:
        path = tmp_path / name
        path.write_text(source)
        return path

    return _write


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Fixture: keep HACK_ASM_* settings from the caller's environment out of tests."""
    for name in ("HACK_ASM_VARIABLE_BASE", "HACK_ASM_OUTPUT_SUFFIX", "HACK_ASM_RANGE_CHECK"):
        monkeypatch.delenv(name, raising=False)
