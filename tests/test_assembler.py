# =============================================================================
# test_assembler.py - Full Assembler Integration Tests
# =============================================================================
# End-to-end tests for the Assembler class: source to machine words, file
# input, output files and error reporting with line numbers.
# =============================================================================

import re
from pathlib import Path

import pytest

from hack_sdk import assemble, assemble_file
from hack_sdk.assembler import Assembler
from hack_sdk.errors import (
    AssemblerError,
    AssemblySyntaxError,
    HackError,
)

DATA_DIR = Path(__file__).parent / "data"

WORD_PATTERN = re.compile(r"[01]{16}")


# =============================================================================
# Full Assembly Pipeline Tests
# =============================================================================

class TestFullPipeline:
    """Test the complete assembly pipeline from source to words."""

    def test_add_program(self):
        source = """
            @2
            D=A
            @3
            D=D+A
            @0
            M=D
        """
        words = Assembler().assemble(source)
        assert len(words) == 6
        assert words[0] == "0000000000000010"
        assert words[1] == "1110110000010000"

    def test_loop_program(self):
        words = Assembler().assemble("(LOOP)\n@LOOP\n0;JMP")
        assert words == ["0000000000000000", "1110101010000111"]

    def test_only_comments_and_blanks(self):
        source = "// nothing here\n\n   \n// still nothing\n"
        asm = Assembler()
        assert asm.assemble(source) == []
        assert asm.get_symbols()  # predefined symbols only

    def test_empty_source(self):
        assert Assembler().assemble("") == []

    def test_word_count_matches_instructions(self):
        source = (DATA_DIR / "Sum.asm").read_text()
        words = Assembler().assemble(source)
        instruction_lines = [
            line for line in source.splitlines()
            if line.strip()
            and not line.strip().startswith("//")
            and not line.strip().startswith("(")
        ]
        assert len(words) == len(instruction_lines) == 20

    def test_words_are_sixteen_bits(self):
        words = Assembler().assemble((DATA_DIR / "Sum.asm").read_text())
        assert all(WORD_PATTERN.fullmatch(word) for word in words)

    def test_max_matches_reference(self):
        expected = (DATA_DIR / "Max.hack").read_text().split()
        assert Assembler().assemble_file(DATA_DIR / "Max.asm") == expected

    def test_sum_symbols(self):
        asm = Assembler()
        asm.assemble_file(DATA_DIR / "Sum.asm")
        symbols = asm.get_symbols()
        assert symbols["i"] == 16
        assert symbols["sum"] == 17
        assert symbols["LOOP"] == 4
        assert symbols["END"] == 18

    def test_assemble_string_alias(self):
        asm = Assembler()
        assert asm.assemble_string("@7") == asm.assemble("@7")

    def test_defines(self):
        asm = Assembler(defines={"LIMIT": 100})
        assert asm.assemble("@LIMIT") == ["0000000001100100"]

    def test_module_assemble(self):
        assert assemble("@LOOP\n(LOOP)\n0;JMP") == [
            "0000000000000001",
            "1110101010000111",
        ]

    def test_reuse_is_independent(self):
        asm = Assembler()
        asm.assemble("@a\n@b")
        assert asm.assemble("@c") == ["0000000000010000"]


# =============================================================================
# Error Handling Tests
# =============================================================================

class TestErrors:
    """Test error reporting through the facade."""

    def test_syntax_error_line(self):
        with pytest.raises(AssemblySyntaxError) as exc_info:
            Assembler().assemble("@1\nD=A\nD+A\nM=D")
        assert exc_info.value.line == 3

    def test_form_feed_does_not_shift_line_numbers(self):
        with pytest.raises(AssemblySyntaxError) as exc_info:
            Assembler().assemble("@1 \x0c\nD+A")
        assert exc_info.value.line == 2

    def test_errors_share_base(self):
        with pytest.raises(HackError):
            Assembler().assemble("D+A")

    def test_filename_in_message(self, tmp_path):
        src = tmp_path / "bad.asm"
        src.write_text("// header\nD+A\n")
        with pytest.raises(AssemblySyntaxError) as exc_info:
            Assembler().assemble_file(src)
        assert f"{src}:2:1: error" in str(exc_info.value)
        assert "D+A" in str(exc_info.value)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            Assembler().assemble_file(tmp_path / "nope.asm")

    def test_write_without_assembly(self, tmp_path):
        with pytest.raises(AssemblerError):
            Assembler().write_hack(tmp_path / "out.hack")

    def test_no_output_after_failure(self, tmp_path):
        asm = Assembler()
        asm.assemble("@1")
        with pytest.raises(AssemblySyntaxError):
            asm.assemble("D+A")
        with pytest.raises(AssemblerError):
            asm.write_hack(tmp_path / "out.hack")
        assert not (tmp_path / "out.hack").exists()


# =============================================================================
# Output File Tests
# =============================================================================

class TestOutputFiles:
    """Test the files written after assembly."""

    def test_write_hack(self, tmp_path):
        asm = Assembler()
        asm.assemble("@2\nD=A")
        out = tmp_path / "Add.hack"
        asm.write_hack(out)
        assert out.read_bytes() == b"0000000000000010\n1110110000010000\n"

    def test_write_hack_empty_program(self, tmp_path):
        asm = Assembler()
        asm.assemble("// nothing")
        out = tmp_path / "Empty.hack"
        asm.write_hack(out)
        assert out.read_text() == ""

    def test_write_binary(self, tmp_path):
        asm = Assembler()
        asm.assemble("@2\nD=A")
        out = tmp_path / "Add.bin"
        asm.write_binary(out)
        assert out.read_bytes() == bytes([0x00, 0x02, 0xEC, 0x10])

    def test_write_symbols(self, tmp_path):
        asm = Assembler()
        asm.assemble("(LOOP)\n@i\n@LOOP\n0;JMP")
        out = tmp_path / "prog.sym"
        asm.write_symbols(out)
        lines = out.read_text().splitlines()
        assert "LOOP 0" in lines
        assert "i 16" in lines
        assert "SCREEN 16384" in lines

    def test_write_listing(self, tmp_path):
        asm = Assembler()
        asm.assemble_file(DATA_DIR / "Max.asm")
        out = tmp_path / "Max.lst"
        asm.write_listing(out)
        text = out.read_text()
        assert "(OUTPUT_FIRST)" in text
        assert "1110001100000001" in text

    def test_default_output_path(self):
        assert Assembler.default_output_path("prog/Max.asm") == Path("prog/Max.hack")
        assert Assembler.default_output_path("Max") == Path("Max.hack")

    def test_module_assemble_file(self, tmp_path):
        src = tmp_path / "Max.asm"
        src.write_text((DATA_DIR / "Max.asm").read_text())
        words = assemble_file(src)
        assert (tmp_path / "Max.hack").read_text().split() == words
        assert len(words) == 16
