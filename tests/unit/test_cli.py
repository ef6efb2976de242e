"""Tests for the convert command line entrypoint."""

import pytest

from modules.base_convert.tool.cli import main
from universe.settings import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    monkeypatch.delenv("SPARKY_BASE_CONVERT_INT_BITS", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestSuccess:
    @pytest.mark.parametrize(
        ("argv", "expected"),
        [
            (["16", "10", "0xffff"], "65535"),
            (["10", "30", "1000"], "13a"),
            (["10", "16", "-10"], "-a"),
            (["16", "10", "-ff"], "-255"),
            (["--upper", "10", "16", "255"], "FF"),
            (["36", "10", "-h"], "-17"),
            (["36", "10", "-hello"], "-29234652"),
            (["--upper", "36", "36", "-h"], "-H"),
        ],
    )
    def test_prints_result(self, capsys, argv: list, expected: str) -> None:
        assert main(argv) == 0
        captured = capsys.readouterr()
        assert captured.out == expected + "\n"

    def test_bits_from_environment(self, capsys, monkeypatch) -> None:
        monkeypatch.setenv("SPARKY_BASE_CONVERT_INT_BITS", "8")
        get_settings.cache_clear()
        assert main(["10", "16", "256"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "exceeds" in captured.err


class TestFailures:
    def test_usage(self, capsys) -> None:
        assert main(["16", "10"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Usage: convert" in captured.err

    @pytest.mark.parametrize("argv", [["1", "10", "5"], ["10", "37", "5"], ["x", "10", "5"]])
    def test_invalid_base(self, capsys, argv: list) -> None:
        assert main(argv) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "between 2 and 36" in captured.err

    def test_invalid_digit(self, capsys) -> None:
        assert main(["16", "10", "g"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "error: Invalid digit for base 16" in captured.err

    def test_overflow_with_bits_flag(self, capsys) -> None:
        assert main(["--bits", "8", "10", "16", "256"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "exceeds the maximum of 255" in captured.err

    def test_bits_out_of_range(self, capsys) -> None:
        assert main(["--bits", "4", "10", "16", "1"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "int_bits" in captured.err


def test_long_help_flag(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0
    assert "usage: convert" in capsys.readouterr().out
