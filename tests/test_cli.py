"""
Tests for ten_puzzle.cli

Tests argument parsing and each subcommand's output and exit code.
"""

import pytest

from ten_puzzle import cli
from ten_puzzle.board.game import TenGame
from ten_puzzle.core.types import Verdict


class TestParseDigits:
    """parse_digits tests."""

    @pytest.mark.parametrize("raw", ["1234", "1,2,3,4", "1 2 3 4"])
    def test_valid(self, raw):
        assert cli.parse_digits(raw) == [1, 2, 3, 4]

    @pytest.mark.parametrize("raw", ["123", "12345", "1230", "abcd"])
    def test_invalid(self, raw):
        with pytest.raises(ValueError):
            cli.parse_digits(raw)


class TestCheck:
    """check subcommand tests."""

    def test_postfix_ten(self, capsys):
        assert cli.main(["check", "1234+++"]) == 0
        assert capsys.readouterr().out.strip() == "10"

    def test_postfix_invalid(self, capsys):
        assert cli.main(["check", "12+34+"]) == 1
        assert capsys.readouterr().out.strip() == "Invalid input"

    def test_infix(self, capsys):
        assert cli.main(["check", "--infix", "(1+4)*(3-1)"]) == 0
        assert capsys.readouterr().out.strip() == "10"

    def test_not_integer(self, capsys):
        assert cli.main(["check", "34+5/2*"]) == 1
        assert capsys.readouterr().out.strip() == "Not an integer"


class TestConvert:
    """postfix / infix subcommand tests."""

    def test_postfix(self, capsys):
        assert cli.main(["postfix", "(9-1)+8/4"]) == 0
        assert capsys.readouterr().out.strip() == "91-84/+"

    def test_postfix_error(self, capsys):
        assert cli.main(["postfix", "(1+2"]) == 1
        assert "unbalanced" in capsys.readouterr().err

    def test_infix(self, capsys):
        assert cli.main(["infix", "34+5*2-"]) == 0
        assert capsys.readouterr().out.strip() == "(3 + 4) * 5 - 2"

    def test_infix_rejects_bad_shape(self, capsys):
        assert cli.main(["infix", "+"]) == 1
        assert "shape error" in capsys.readouterr().err


class TestSolve:
    """solve subcommand tests."""

    def test_first_solution(self, capsys):
        assert cli.main(["solve", "1234"]) == 0
        assert capsys.readouterr().out.strip() == "1 + 2 + 3 + 4"

    def test_all(self, capsys):
        assert cli.main(["solve", "5555", "--all"]) == 0
        assert len(capsys.readouterr().out.strip().splitlines()) > 1

    def test_all_lines_make_ten(self, capsys):
        assert cli.main(["solve", "1125", "--all"]) == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert lines
        assert len(lines) == len(set(lines))
        assert all(cli.check_infix(line) is Verdict.TEN for line in lines)

    def test_no_solution(self, capsys):
        assert cli.main(["solve", "1111"]) == 1
        assert capsys.readouterr().out.strip() == "No solution"

    def test_bad_digits(self, capsys):
        assert cli.main(["solve", "12"]) == 2
        assert "Invalid digits" in capsys.readouterr().err


class TestPlay:
    """play subcommand tests."""

    def test_round(self, monkeypatch, capsys, sample_board, eights):
        monkeypatch.setattr(
            cli, "create_game",
            lambda config: TenGame(board=sample_board, digit_source=eights),
        )
        answers = iter(["1+2+3+4", "1+1+1+1", "5+5+5-5", "q"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

        assert cli.main(["play", "--seed", "1"]) == 0
        out = capsys.readouterr().out
        assert "Cleared row 0! +10" in out
        assert "Not 10" in out
        assert "Cleared row 2! +10" in out
        assert "Final score: 20" in out

    def test_eof_ends_round(self, monkeypatch, capsys, sample_board):
        monkeypatch.setattr(
            cli, "create_game", lambda config: TenGame(board=sample_board),
        )

        def eof(prompt=""):
            raise EOFError

        monkeypatch.setattr("builtins.input", eof)
        assert cli.main(["play"]) == 0
        assert "Final score: 0" in capsys.readouterr().out
