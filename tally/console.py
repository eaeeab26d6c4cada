"""
console.py - Interactive text console for a Ledger

Reads one command per line from an input stream, asks for the command's
arguments on the following lines, dispatches to the Ledger and prints the
outcome. Ledger and parsing errors are reported and the loop continues;
only `quit` or end of input stops it.

Protocol:
    Command:            -> deposit | withdraw | send | print | quit
    deposit / withdraw  -> Account:, Amount:
    send                -> Sender:, Recipient:, Amount:
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence, TextIO
import argparse
import sys

from .core import U64_MAX, AccountingError, InvalidAmount, ParsingError
from .journal import Journal
from .ledger import Ledger


PROMPT_COMMAND = "Command:"
PROMPT_ACCOUNT = "Account:"
PROMPT_SENDER = "Sender:"
PROMPT_RECIPIENT = "Recipient:"
PROMPT_AMOUNT = "Amount:"


def parse_amount(text: str) -> int:
    """
    Parse user text into an amount.

    Accepts an optional leading '+' followed by ASCII digits, with a value
    in [0, U64_MAX].

    Raises:
        InvalidAmount: For anything else (empty, negative, non-digit, overflow)
    """
    digits = text[1:] if text.startswith("+") else text
    if not digits or not digits.isascii() or not digits.isdigit():
        raise InvalidAmount(text)
    value = int(digits)
    if value > U64_MAX:
        raise InvalidAmount(text)
    return value


# ============================================================================
# COMMANDS
# ============================================================================

@dataclass(frozen=True)
class Command:
    """A parsed console command with its arguments."""
    name: str
    account: Optional[str] = None
    recipient: Optional[str] = None
    amount: Optional[int] = None


class EndOfInput(Exception):
    """Raised when the input stream is exhausted mid-command."""
    pass


class Console:
    """
    Read-dispatch-print loop over a Ledger.

    Every record returned by a successful command is appended to `journal`.

    Example:
        console = Console(Ledger("main", verbose=False), stdin=io.StringIO("print\\nquit\\n"))
        console.run()
    """

    def __init__(
        self,
        ledger: Ledger,
        journal: Optional[Journal] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.ledger = ledger
        self.journal = journal if journal is not None else Journal()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._handlers: Dict[str, Callable[[Command], None]] = {
            "deposit": self._do_deposit,
            "withdraw": self._do_withdraw,
            "send": self._do_send,
            "print": self._do_print,
        }

    def _write(self, text: str) -> None:
        print(text, file=self.stdout)

    def _read(self, label: str) -> str:
        self._write(label)
        line = self.stdin.readline()
        if not line:
            raise EndOfInput()
        return line.strip()

    def _read_amount(self) -> int:
        return parse_amount(self._read(PROMPT_AMOUNT))

    def read_command(self) -> Command:
        """
        Prompt for a command and its arguments.

        Raises:
            ParsingError: If the amount argument is invalid
            EndOfInput: If the stream ends
        """
        name = self._read(PROMPT_COMMAND)
        if name in ("deposit", "withdraw"):
            account = self._read(PROMPT_ACCOUNT)
            return Command(name, account=account, amount=self._read_amount())
        if name == "send":
            sender = self._read(PROMPT_SENDER)
            recipient = self._read(PROMPT_RECIPIENT)
            return Command(name, account=sender, recipient=recipient, amount=self._read_amount())
        if name in ("print", "quit"):
            return Command(name)
        return Command("unknown")

    def step(self) -> bool:
        """
        Process one command.

        Returns:
            False once the loop should stop, True otherwise
        """
        try:
            command = self.read_command()
        except EndOfInput:
            return False
        except ParsingError as e:
            self._write(f"Error: {e!r}")
            return True

        if command.name == "quit":
            self._write("Ok, bye!")
            return False
        handler = self._handlers.get(command.name)
        if handler is None:
            self._write("Unknown command")
            return True
        try:
            handler(command)
        except AccountingError as e:
            self._write(f"Command failed {e!r}")
        else:
            if command.name != "print":
                self._write("Ok")
        return True

    def run(self) -> None:
        """Process commands until quit or end of input."""
        while self.step():
            pass

    def _do_deposit(self, command: Command) -> None:
        self.journal.record(self.ledger.deposit(command.account, command.amount))

    def _do_withdraw(self, command: Command) -> None:
        self.journal.record(self.ledger.withdraw(command.account, command.amount))

    def _do_send(self, command: Command) -> None:
        self.journal.record(self.ledger.send(command.account, command.recipient, command.amount))

    def _do_print(self, command: Command) -> None:
        self._write(repr(self.ledger))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the console."""
    parser = argparse.ArgumentParser(description="Interactive in-memory account ledger")
    parser.add_argument("--name", default="main", help="Ledger name (default: main)")
    parser.add_argument("--verbose", action="store_true", help="Trace every ledger operation")
    parser.add_argument(
        "--atomic-send",
        action="store_true",
        help="Reject a send up front when the recipient cannot be credited",
    )
    args = parser.parse_args(argv)

    ledger = Ledger(args.name, verbose=args.verbose, atomic_send=args.atomic_send)
    Console(ledger).run()
    return 0
