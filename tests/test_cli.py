# =============================================================================
# test_cli.py - hackasm CLI Tests
# =============================================================================
# Tests for the hackasm command: output file naming, optional outputs,
# defines, exit codes and diagnostics.
# =============================================================================

from pathlib import Path

import pytest
from click.testing import CliRunner

from hack_sdk.cli.errors import ExitCode, exit_code_for
from hack_sdk.cli.hackasm import main, parse_define
from hack_sdk.errors import AssemblySyntaxError

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def max_asm(tmp_path):
    src = tmp_path / "Max.asm"
    src.write_text((DATA_DIR / "Max.asm").read_text())
    return src


# =============================================================================
# Basic Invocation Tests
# =============================================================================

class TestHackasmCLI:
    """Tests for the hackasm CLI tool."""

    def test_cli_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Assemble Hack assembly source" in result.output

    def test_cli_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "1.0.0" in result.output

    def test_default_output(self, runner, max_asm):
        result = runner.invoke(main, [str(max_asm)])
        assert result.exit_code == 0, result.output
        out = max_asm.with_suffix(".hack")
        assert out.read_text().split() == (DATA_DIR / "Max.hack").read_text().split()

    def test_output_option(self, runner, max_asm, tmp_path):
        out = tmp_path / "build.hack"
        result = runner.invoke(main, [str(max_asm), "-o", str(out)])
        assert result.exit_code == 0
        assert out.exists()
        assert not max_asm.with_suffix(".hack").exists()

    def test_binary_option(self, runner, tmp_path):
        src = tmp_path / "Add.asm"
        src.write_text("@2\nD=A\n")
        out = tmp_path / "Add.bin"
        result = runner.invoke(main, [str(src), "-b", str(out)])
        assert result.exit_code == 0
        assert out.read_bytes() == bytes([0x00, 0x02, 0xEC, 0x10])

    def test_listing_and_symbols(self, runner, max_asm, tmp_path):
        lst = tmp_path / "Max.lst"
        sym = tmp_path / "Max.sym"
        result = runner.invoke(main, [str(max_asm), "-l", str(lst), "-s", str(sym)])
        assert result.exit_code == 0
        assert "Hack Assembler Listing" in lst.read_text()
        assert "OUTPUT_D 12" in sym.read_text().splitlines()

    def test_define(self, runner, tmp_path):
        src = tmp_path / "Limit.asm"
        src.write_text("@LIMIT\nD=A\n")
        result = runner.invoke(main, [str(src), "-D", "LIMIT=0x64"])
        assert result.exit_code == 0
        assert src.with_suffix(".hack").read_text().splitlines()[0] == "0000000001100100"

    def test_verbose(self, runner, max_asm):
        result = runner.invoke(main, ["-v", str(max_asm)])
        assert result.exit_code == 0
        assert "Assembly complete: 16 instructions" in result.output


# =============================================================================
# Error Exit Tests
# =============================================================================

class TestHackasmErrors:
    """Tests for diagnostics and exit codes."""

    def test_missing_input_argument(self, runner):
        result = runner.invoke(main, [])
        assert result.exit_code == 2
        assert "Missing argument" in result.output

    def test_nonexistent_input(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path / "nope.asm")])
        assert result.exit_code == 2

    def test_syntax_error(self, runner, tmp_path):
        src = tmp_path / "Bad.asm"
        src.write_text("@1\n// comment\nD+A\n")
        result = runner.invoke(main, [str(src)])
        assert result.exit_code == ExitCode.BUILD_ERROR
        assert "Assembly error" in result.output
        assert ":3:1: error" in result.output
        assert not src.with_suffix(".hack").exists()

    def test_unknown_mnemonic(self, runner, tmp_path):
        src = tmp_path / "Bad.asm"
        src.write_text("D=Q\n")
        result = runner.invoke(main, [str(src)])
        assert result.exit_code == 1
        assert "unknown comp mnemonic 'Q'" in result.output

    def test_output_and_binary_exclusive(self, runner, max_asm, tmp_path):
        result = runner.invoke(main, [
            str(max_asm), "-o", str(tmp_path / "a.hack"), "-b", str(tmp_path / "a.bin"),
        ])
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "mutually exclusive" in result.output
        assert "Usage:" in result.output
        assert not (tmp_path / "a.hack").exists()

    def test_define_without_name(self, runner, max_asm):
        result = runner.invoke(main, [str(max_asm), "-D", "=5"])
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "invalid symbol name" in result.output
        assert not max_asm.with_suffix(".hack").exists()

    def test_bad_define(self, runner, max_asm):
        result = runner.invoke(main, [str(max_asm), "-D", "N=ten"])
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "invalid value" in result.output
        assert not max_asm.with_suffix(".hack").exists()


# =============================================================================
# Helper Tests
# =============================================================================

class TestHelpers:
    """Tests for CLI helper functions."""

    @pytest.mark.parametrize("defn,expected", [
        ("DEBUG", ("DEBUG", 1)),
        ("N=10", ("N", 10)),
        ("N = 10", ("N", 10)),
        ("BUF=0x4000", ("BUF", 0x4000)),
        ("BUF=$7F", ("BUF", 0x7F)),
    ])
    def test_parse_define(self, defn, expected):
        assert parse_define(defn) == expected

    def test_parse_define_invalid(self):
        with pytest.raises(ValueError):
            parse_define("N=abc")

    @pytest.mark.parametrize("defn", ["=5", "1X=5", "A B=1", "", "N+1"])
    def test_parse_define_invalid_name(self, defn):
        with pytest.raises(ValueError, match="invalid symbol name"):
            parse_define(defn)

    def test_exit_codes(self):
        assert exit_code_for(AssemblySyntaxError("x")) == ExitCode.BUILD_ERROR
        assert exit_code_for(FileNotFoundError("x")) == ExitCode.INVALID_ARGS
        assert exit_code_for(ValueError("x")) == ExitCode.INVALID_ARGS
        assert exit_code_for(RuntimeError("x")) == ExitCode.INTERNAL_ERROR
