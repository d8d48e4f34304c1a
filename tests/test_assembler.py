# =============================================================================
# test_assembler.py - End-to-End Assembler Tests
# =============================================================================
# Tests for the Assembler facade: complete programs, file I/O, and output
# files.
# =============================================================================

import pytest

from hack_asm import Assembler, AssemblerConfig, assemble, assemble_file
from hack_asm.errors import (
    AssemblerError,
    DuplicateSymbolError,
    MalformedLineError,
    UnknownMnemonicError,
)


# =============================================================================
# Complete Program Tests
# =============================================================================

class TestPrograms:
    """Assemble whole programs and compare against known machine code."""

    def test_add(self, add_program):
        source, words = add_program
        assert assemble(source) == words

    def test_max(self, max_program):
        """Labels, forward references, comments and indentation."""
        source, words = max_program
        assert assemble(source) == words

    def test_loop_label(self):
        asm = Assembler()
        words = asm.assemble_string("(LOOP)\n@LOOP\n0;JMP")
        assert words == ["0000000000000000", "1110101010000111"]
        assert asm.get_symbols()["LOOP"] == 0

    def test_empty_program(self):
        assert assemble("// nothing here\n\n") == []

    def test_counter_loop(self):
        """Sum 1..100 into a variable, using labels and variables together."""
        source = """
            @i
            M=1
            @sum
            M=0
        (LOOP)
            @i
            D=M
            @100
            D=D-A
            @END
            D;JGT
            @i
            D=M
            @sum
            M=D+M
            @i
            M=M+1
            @LOOP
            0;JMP
        (END)
            @END
            0;JMP
        """
        asm = Assembler()
        words = asm.assemble_string(source)
        symbols = asm.get_symbols()
        assert symbols["i"] == 16
        assert symbols["sum"] == 17
        assert symbols["LOOP"] == 4
        assert symbols["END"] == 18
        assert len(words) == 20
        assert words[8] == "0000000000010010"
        assert asm.get_instruction_count() == 20

    def test_config_applied(self):
        asm = Assembler(AssemblerConfig(variable_base=1024))
        asm.assemble_string("@x\n@y")
        assert asm.get_code() == ["0000010000000000", "0000010000000001"]


# =============================================================================
# Error Reporting Tests
# =============================================================================

class TestErrors:
    """Errors abort the run and name the offending line."""

    def test_error_line_number(self):
        source = "@1\nD=A\n\n// comment\nD=D*A\n"
        with pytest.raises(UnknownMnemonicError) as exc_info:
            assemble(source, "Mul.asm")
        assert exc_info.value.location.line == 5
        assert str(exc_info.value).startswith("Mul.asm:5:3: error:")

    def test_caret_under_field(self):
        with pytest.raises(UnknownMnemonicError) as exc_info:
            assemble("AM=M-1;JNEQ")
        lines = str(exc_info.value).splitlines()
        assert lines[1] == "    AM=M-1;JNEQ"
        assert lines[2] == " " * 11 + "^"

    def test_malformed_line(self):
        with pytest.raises(MalformedLineError):
            assemble("@1\n(LOOP\n")

    def test_duplicate_label(self):
        with pytest.raises(DuplicateSymbolError):
            assemble("(A)\n@1\n(A)\n")

    def test_all_errors_share_base(self):
        """Every assembly failure can be caught as AssemblerError."""
        for source in ("@", "D=Q", "(X)\n@0\n(X)", "@99999"):
            with pytest.raises(AssemblerError):
                assemble(source)

    def test_failed_run_keeps_no_code(self, add_program):
        source, _ = add_program
        asm = Assembler()
        asm.assemble_string(source)
        with pytest.raises(AssemblerError):
            asm.assemble_string("D=Q")
        assert asm.get_code() == []
        with pytest.raises(RuntimeError):
            asm.write_hack("never.hack")


# =============================================================================
# File I/O Tests
# =============================================================================

class TestFiles:
    """Reading sources and writing output files."""

    def test_assemble_file(self, write_source, add_program):
        source, words = add_program
        path = write_source(source, "Add.asm")
        assert assemble_file(path) == words

    def test_assemble_file_error_names_file(self, write_source):
        path = write_source("@1\nD=X\n", "Bad.asm")
        with pytest.raises(UnknownMnemonicError) as exc_info:
            assemble_file(path)
        assert exc_info.value.location.filename == str(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            assemble_file(tmp_path / "missing.asm")

    def test_default_output_path(self, tmp_path):
        asm = Assembler()
        assert asm.default_output_path(tmp_path / "Max.asm") == tmp_path / "Max.hack"

    def test_default_output_path_custom_suffix(self, tmp_path):
        asm = Assembler(AssemblerConfig(output_suffix=".bin"))
        assert asm.default_output_path(tmp_path / "Max.asm") == tmp_path / "Max.bin"

    def test_write_hack_next_to_source(self, write_source, max_program):
        source, words = max_program
        path = write_source(source, "Max.asm")
        asm = Assembler()
        asm.assemble_file(path)
        written = asm.write_hack()
        assert written == path.with_suffix(".hack")
        assert written.read_text().splitlines() == words
        assert written.read_text().endswith("\n")

    def test_write_before_assembly(self, tmp_path):
        asm = Assembler()
        with pytest.raises(RuntimeError):
            asm.write_hack(tmp_path / "out.hack")
        with pytest.raises(RuntimeError):
            asm.write_symbols(tmp_path / "out.sym")

    def test_write_symbols(self, tmp_path, max_program):
        source, _ = max_program
        asm = Assembler()
        asm.assemble_string(source)
        out = tmp_path / "Max.sym"
        asm.write_symbols(out)
        lines = out.read_text().splitlines()
        assert lines[0].startswith("#")
        assert "INFINITE_LOOP 14 label" in lines
        assert "OUTPUT_D 12 label" in lines
        assert "OUTPUT_FIRST 10 label" in lines

    def test_write_listing(self, tmp_path, add_program):
        source, words = add_program
        asm = Assembler()
        asm.assemble_string(source, "Add.asm")
        out = tmp_path / "Add.lst"
        asm.write_listing(out)
        text = out.read_text()
        assert "Hack Assembler Listing" in text
        for word in words:
            assert word in text
        assert "D=D+A" in text
