"""
tally - In-Memory Account Ledger

Tracks named accounts' unsigned 64-bit balances and describes every
balance change as an immutable Deposit or Withdraw record.

Usage:
    from tally import Ledger, Journal, Deposit, Withdraw

    ledger = Ledger("main")
    journal = Journal()

    # First deposit creates the account
    journal.record(ledger.deposit("alice", 100))
    journal.record(ledger.deposit("bob", 100))

    # Transfer between existing accounts
    withdraw, deposit = journal.record(ledger.send("alice", "bob", 10))
    assert withdraw == Withdraw("alice", 10)
    assert deposit == Deposit("bob", 10)
"""

# Core types
from .core import (
    Deposit,
    Withdraw,
    Transaction,
    AccountMap,
    LedgerError,
    AccountingError,
    AccountNotFound,
    AccountUnderFunded,
    AccountOverFunded,
    ParsingError,
    InvalidAmount,
    checked_add,
    checked_sub,
    AMOUNT_BITS,
    U64_MAX,
)

# Ledger
from .ledger import Ledger

# Journal
from .journal import Journal

# Console
from .console import Console, Command, parse_amount

__all__ = [
    # Core
    'Deposit', 'Withdraw', 'Transaction', 'AccountMap',
    'LedgerError', 'AccountingError', 'AccountNotFound',
    'AccountUnderFunded', 'AccountOverFunded', 'ParsingError', 'InvalidAmount',
    'checked_add', 'checked_sub', 'AMOUNT_BITS', 'U64_MAX',
    # Ledger
    'Ledger',
    # Journal
    'Journal',
    # Console
    'Console', 'Command', 'parse_amount',
]

__version__ = '1.0.0'
