from typer.testing import CliRunner

from phuff.errors import EXIT_INVALID_CODE_TABLE, EXIT_INVALID_INPUT, EXIT_PADDING_AMBIGUITY
from phuff.main import app

runner = CliRunner()


class TestEncodeCommand:
    def test_ab(self) -> None:
        result = runner.invoke(app, ["encode", "ab"])
        assert result.exit_code == 0
        assert "Packed: 40" in result.output
        assert "Bit length: 2 (padding: 6)" in result.output

    def test_empty(self) -> None:
        result = runner.invoke(app, ["encode", ""])
        assert result.exit_code == EXIT_INVALID_INPUT
        assert "InvalidInput" in result.output


class TestDecodeCommand:
    def test_ab(self) -> None:
        result = runner.invoke(app, ["decode", "40", "-c", "a=0", "-c", "b=1", "-n", "2"])
        assert result.exit_code == 0
        assert result.output.strip() == "ab"

    def test_equals_sign_as_character(self) -> None:
        result = runner.invoke(app, ["decode", "40", "-c", "a=0", "-c", "==1", "--bit-length", "2"])
        assert result.exit_code == 0
        assert result.output.strip() == "a="

    def test_prefix_conflict(self) -> None:
        result = runner.invoke(app, ["decode", "40", "-c", "x=01", "-c", "y=010", "-n", "3"])
        assert result.exit_code == EXIT_INVALID_CODE_TABLE

    def test_bit_length_does_not_fit(self) -> None:
        result = runner.invoke(app, ["decode", "40", "-c", "a=0", "-c", "b=1", "-n", "12"])
        assert result.exit_code == EXIT_PADDING_AMBIGUITY

    def test_bad_hex(self) -> None:
        result = runner.invoke(app, ["decode", "zz", "-c", "a=0"])
        assert result.exit_code == 2

    def test_bad_code_entry(self) -> None:
        result = runner.invoke(app, ["decode", "40", "-c", "a0"])
        assert result.exit_code == 2


class TestTreeCommand:
    def test_mississippi(self) -> None:
        result = runner.invoke(app, ["tree", "mississippi"])
        assert result.exit_code == 0
        assert "Weighted path length: 21" in result.output

    def test_empty(self) -> None:
        result = runner.invoke(app, ["tree", ""])
        assert result.exit_code == EXIT_INVALID_INPUT
