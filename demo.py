#!/usr/bin/env python3
"""
demo.py - Interactive Tutorial: Learn the Ledger Step by Step

A walkthrough of the account ledger. Each step builds on the previous one.
Press Enter to advance.

WHAT YOU'LL LEARN:
  1-2: Foundation  - The empty ledger, implicit account creation
  3-4: Mechanics   - Transfers, zero balances, rejected withdrawals
  5-6: Safety      - Overflow checks, the non-atomic send and atomic_send
  7:   History     - Collecting records in a Journal and replaying them

Run:
    python demo.py           # Interactive mode (press Enter for each step)
    python demo.py --quick   # Run all steps without pausing
"""

from dataclasses import dataclass
import sys

from tally import (
    Ledger, Journal,
    AccountingError, AccountOverFunded,
    U64_MAX,
)


# ============================================================================
# CONFIGURATION
# ============================================================================

@dataclass
class DemoConfig:
    """Configuration for the tutorial. Modify these to experiment."""
    initial_deposit: int = 100
    transfer_amount: int = 10
    accounts: tuple = ("bob", "alice", "charlie")


CONFIG = DemoConfig()

QUICK_MODE = "--quick" in sys.argv


def wait_for_enter():
    """Pause for user input unless in quick mode."""
    if not QUICK_MODE:
        input("\n[Press Enter to continue...]")


def step_header(number: int, title: str, objective: str):
    """Print a step header with learning objective."""
    print(f"\n{'='*70}")
    print(f"STEP {number}: {title}")
    print(f"{'='*70}")
    print(f"\nObjective: {objective}\n")


def section_header(text: str):
    print(f"\n--- {text} ---\n")


def attempt(description: str, operation, journal: Journal = None):
    """Run an operation, printing the record or the error it raised."""
    print(f">>> {description}")
    try:
        result = operation()
    except AccountingError as e:
        print(f"    raised {e!r}")
        return None
    print(f"    returned {result!r}")
    if journal is not None:
        journal.record(result)
    return result


# ============================================================================
# STEPS
# ============================================================================

def step_01_empty_ledger():
    step_header(1, "The Empty Ledger",
        "A ledger starts with no accounts at all.")

    print(">>> ledger = Ledger('tutorial', verbose=True)")
    ledger = Ledger("tutorial", verbose=True)
    print(f"Accounts: {ledger.snapshot()}")
    attempt("ledger.withdraw('bob', 0)", lambda: ledger.withdraw("bob", 0))

    section_header("Key Insight")
    print("""
    An account that was never credited is NOT the same as a zero balance.
    Withdrawing even 0 from it fails with AccountNotFound.
    """)
    return ledger


def step_02_first_deposits(ledger: Ledger, journal: Journal):
    step_header(2, "Implicit Account Creation",
        "The first deposit creates the account with that amount.")

    for account in CONFIG.accounts:
        attempt(
            f"ledger.deposit({account!r}, {CONFIG.initial_deposit})",
            lambda a=account: ledger.deposit(a, CONFIG.initial_deposit),
            journal,
        )
    print(f"\nAccounts: {ledger.snapshot()}")


def step_03_transfer(ledger: Ledger, journal: Journal):
    step_header(3, "Transfers",
        "A send is a Withdraw on the sender followed by a Deposit on the recipient.")

    amount = CONFIG.transfer_amount
    attempt(f"ledger.send('bob', 'alice', {amount})",
            lambda: ledger.send("bob", "alice", amount), journal)
    print(f"\nAccounts: {ledger.snapshot()}")
    print(f"Total:    {ledger.total_balance()} (unchanged by the transfer)")


def step_04_withdrawals(ledger: Ledger, journal: Journal):
    step_header(4, "Withdrawals",
        "Balances may reach zero but never go below it.")

    attempt("ledger.withdraw('charlie', 100)", lambda: ledger.withdraw("charlie", 100), journal)
    attempt("ledger.withdraw('alice', 110)", lambda: ledger.withdraw("alice", 110), journal)
    attempt("ledger.withdraw('bob', 100)", lambda: ledger.withdraw("bob", 100))
    attempt("ledger.withdraw('bob', 90)", lambda: ledger.withdraw("bob", 90), journal)
    print(f"\nAccounts: {ledger.snapshot()}")


def step_05_overflow():
    step_header(5, "Overflow",
        f"Balances are unsigned 64-bit: the maximum is {U64_MAX}.")

    ledger = Ledger("overflow", verbose=True)
    attempt("ledger.deposit('alice', U64_MAX)", lambda: ledger.deposit("alice", U64_MAX))
    attempt("ledger.deposit('alice', 1)", lambda: ledger.deposit("alice", 1))
    print(f"\nalice still holds {ledger.get_balance('alice')}")


def step_06_send_atomicity():
    step_header(6, "Send Atomicity",
        "By default a send can debit the sender and then fail on the recipient.")

    for atomic in (False, True):
        section_header(f"atomic_send={atomic}")
        ledger = Ledger("send", verbose=False, atomic_send=atomic)
        ledger.deposit("alice", U64_MAX)
        ledger.deposit("bob", 10)
        try:
            ledger.send("bob", "alice", 10)
        except AccountOverFunded as e:
            print(f"send raised {e!r}")
        print(f"Accounts after: {ledger.snapshot()}")


def step_07_journal(ledger: Ledger, journal: Journal):
    step_header(7, "Journal and Replay",
        "The ledger keeps no history; callers collect the records they get back.")

    for i, record in enumerate(journal):
        print(f"  [{i}] {record!r}")
    replayed = journal.replay()
    print(f"\nReplayed: {replayed.snapshot()}")
    print(f"Matches:  {replayed.snapshot() == ledger.snapshot()}")


def main():
    print("=" * 70)
    print("       ACCOUNT LEDGER TUTORIAL")
    print("=" * 70)

    journal = Journal()
    ledger = step_01_empty_ledger()
    wait_for_enter()

    step_02_first_deposits(ledger, journal)
    wait_for_enter()

    step_03_transfer(ledger, journal)
    wait_for_enter()

    step_04_withdrawals(ledger, journal)
    wait_for_enter()

    step_05_overflow()
    wait_for_enter()

    step_06_send_atomicity()
    wait_for_enter()

    step_07_journal(ledger, journal)

    print("\n" + "=" * 70)
    print("       TUTORIAL COMPLETE!")
    print("=" * 70)
    print("""
    Next steps:
      - Try the console: python -m tally
      - Run tests: pytest tests/
    """)


if __name__ == "__main__":
    main()
