"""
test_console_parsing.py - Unit tests for console input parsing

Tests:
- parse_amount accepted and rejected inputs
- Command parsing for each command word
"""

import io
import pytest

from tally import Console, Command, Ledger, InvalidAmount, U64_MAX, parse_amount
from tally.console import main


class TestParseAmount:
    """Tests for parse_amount."""

    @pytest.mark.parametrize("text,expected", [
        ("0", 0),
        ("100", 100),
        ("007", 7),
        ("+5", 5),
        ("18446744073709551615", U64_MAX),
    ])
    def test_valid(self, text, expected):
        assert parse_amount(text) == expected

    @pytest.mark.parametrize("text", [
        "",
        "+",
        "-1",
        "abc",
        "1.5",
        "1 000",
        "1e3",
        "١٢",
        "18446744073709551616",
    ])
    def test_invalid(self, text):
        with pytest.raises(InvalidAmount) as exc_info:
            parse_amount(text)
        assert exc_info.value.text == text


class TestReadCommand:
    """Tests for Console.read_command."""

    def _console(self, text):
        return Console(Ledger("test", verbose=False), stdin=io.StringIO(text), stdout=io.StringIO())

    def test_deposit(self):
        console = self._console("deposit\nalice\n100\n")
        assert console.read_command() == Command("deposit", account="alice", amount=100)

    def test_withdraw(self):
        console = self._console("withdraw\n bob \n 5 \n")
        assert console.read_command() == Command("withdraw", account="bob", amount=5)

    def test_send(self):
        console = self._console("send\nbob\nalice\n10\n")
        assert console.read_command() == Command("send", account="bob", recipient="alice", amount=10)

    def test_print_and_quit(self):
        console = self._console("print\nquit\n")
        assert console.read_command() == Command("print")
        assert console.read_command() == Command("quit")

    def test_unknown(self):
        assert self._console("transfer\n").read_command() == Command("unknown")

    def test_invalid_amount(self):
        console = self._console("deposit\nalice\nlots\n")
        with pytest.raises(InvalidAmount):
            console.read_command()

    def test_prompts(self):
        stdout = io.StringIO()
        console = Console(Ledger("test", verbose=False), stdin=io.StringIO("send\na\nb\n1\n"), stdout=stdout)
        console.read_command()
        assert stdout.getvalue().splitlines() == ["Command:", "Sender:", "Recipient:", "Amount:"]


class TestMain:
    """Tests for the console entry point."""

    def test_main_runs_until_quit(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("deposit\nalice\n10\nprint\nquit\n"))
        assert main(["--name", "cli"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert "Ledger('cli', {'alice': 10})" in out
        assert out[-1] == "Ok, bye!"
