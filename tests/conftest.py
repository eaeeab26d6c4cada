"""
conftest.py - Shared pytest fixtures for tally tests

Provides common fixtures used across unit, conformance and functional tests:
- Basic ledgers (empty, funded, at capacity)
- Journals and console harness
"""

import io
import pytest

from tally import Ledger, Journal, Console, U64_MAX


# =============================================================================
# BASIC FIXTURES
# =============================================================================

@pytest.fixture
def empty_ledger():
    """Fresh ledger with no accounts."""
    return Ledger("test", verbose=False)


@pytest.fixture
def funded_ledger():
    """Ledger with bob, alice and charlie holding 100 each."""
    ledger = Ledger("test", verbose=False)
    for account in ("bob", "alice", "charlie"):
        ledger.deposit(account, 100)
    return ledger


@pytest.fixture
def full_ledger():
    """Ledger where alice is at U64_MAX and bob holds 10."""
    ledger = Ledger("test", verbose=False)
    ledger.deposit("alice", U64_MAX)
    ledger.deposit("bob", 10)
    return ledger


@pytest.fixture
def journal():
    """Empty journal."""
    return Journal()


# =============================================================================
# CONSOLE FIXTURES
# =============================================================================

@pytest.fixture
def run_console():
    """
    Run a console over scripted input.

    Returns a function taking the input lines and returning
    (output_lines, console).
    """
    def _run(lines, ledger=None):
        stdin = io.StringIO("".join(line + "\n" for line in lines))
        stdout = io.StringIO()
        console = Console(
            ledger if ledger is not None else Ledger("console", verbose=False),
            stdin=stdin,
            stdout=stdout,
        )
        console.run()
        return stdout.getvalue().splitlines(), console
    return _run
