# =============================================================================
# test_disassembler.py - Hack Disassembler Tests
# =============================================================================

import pytest

from hack_asm import assemble
from hack_asm.disassembler import DisassembledInstruction, HackDisassembler
from hack_asm.errors import DisassemblyError


@pytest.fixture
def disasm():
    """Fixture: disassembler without symbols."""
    return HackDisassembler()


# =============================================================================
# Single Word Tests
# =============================================================================

class TestDisassembleOne:
    """Decode individual words."""

    @pytest.mark.parametrize("word, text", [
        ("0000000000000010", "@2"),
        ("0100000000000000", "@16384"),
        ("1110110000010000", "D=A"),
        ("1110000010010000", "D=D+A"),
        ("1110101010000111", "0;JMP"),
        ("1110001100000001", "D;JGT"),
        ("1111110111111101", "AMD=M+1;JNE"),
        ("1110101010000000", "0"),
    ])
    def test_decode(self, disasm, word, text):
        assert disasm.disassemble_one(word).text == text

    def test_address_load_flag(self, disasm):
        assert disasm.disassemble_one("0000000000000001").is_address_load
        assert not disasm.disassemble_one("1110110000010000").is_address_load

    def test_surrounding_whitespace_ignored(self, disasm):
        assert disasm.disassemble_one("  1110110000010000\r\n").text == "D=A"

    @pytest.mark.parametrize("word", [
        "",
        "111011000001000",
        "11101100000100000",
        "11101100000100x0",
        "1000000000000000",
        "1010000000000000",
        "1111111111000000",
    ])
    def test_invalid_words(self, disasm, word):
        with pytest.raises(DisassemblyError):
            disasm.disassemble_one(word)

    def test_error_names_position(self, disasm):
        with pytest.raises(DisassemblyError) as exc_info:
            disasm.disassemble(["0000000000000001", "1000000000000000"])
        assert exc_info.value.index == 1
        assert "word 1:" in str(exc_info.value)


# =============================================================================
# Sequence Tests
# =============================================================================

class TestDisassemble:
    """Decode whole programs."""

    def test_addresses(self, disasm, add_program):
        _, words = add_program
        instructions = disasm.disassemble(words, start_address=100)
        assert [i.address for i in instructions] == list(range(100, 106))

    def test_blank_lines_skipped(self, disasm):
        instructions = disasm.disassemble(["0000000000000001", "", "1110110000010000", ""])
        assert [i.text for i in instructions] == ["@1", "D=A"]
        assert instructions[1].address == 1

    def test_count(self, disasm, add_program):
        _, words = add_program
        assert len(disasm.disassemble(words, count=3)) == 3

    def test_reassembles_to_same_words(self, disasm, max_program):
        """Labels become numbers, but the machine code is unchanged."""
        source, words = max_program
        assert assemble(disasm.to_source(words)) == words

    def test_symbolic_operands(self):
        disasm = HackDisassembler({16: "i", 17: "sum"})
        instr = disasm.disassemble_one("0000000000010001", address=4)
        assert instr.text == "@sum"
        assert instr.comment == "17"
        assert str(instr) == "    4: 0000000000010001  @sum             // 17"


# =============================================================================
# Instruction Formatting Tests
# =============================================================================

class TestDisassembledInstruction:

    def test_str_without_comment(self):
        instr = DisassembledInstruction(3, "1110110000010000", "D=A")
        assert str(instr) == "    3: 1110110000010000  D=A"

    def test_to_dict(self):
        instr = DisassembledInstruction(0, "0000000000000101", "@5")
        assert instr.to_dict() == {
            "address": 0,
            "word": "0000000000000101",
            "text": "@5",
            "comment": "",
        }
