"""
Core types and pure functions for the account ledger.

This module provides the foundational pieces used by the Ledger:
1. Constants: the fixed-width balance domain (U64_MAX)
2. Exceptions: LedgerError and the accounting/parsing error kinds
3. Immutable records: Deposit and Withdraw
4. Type aliases: AccountMap, Transaction
5. Checked arithmetic: overflow/underflow-reporting add and subtract

Nothing in this module holds or mutates ledger state.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union


# ============================================================================
# CONSTANTS
# ============================================================================

# Balances and amounts are unsigned integers of this width.
AMOUNT_BITS = 64

# Largest representable balance (and amount).
U64_MAX = 2 ** AMOUNT_BITS - 1


# ============================================================================
# TYPE ALIASES
# ============================================================================

# Mapping from account identifier to balance.
AccountMap = Dict[str, int]


# ============================================================================
# EXCEPTIONS
# ============================================================================

class LedgerError(Exception):
    """Base exception for all ledger-related errors."""

    # Names of the attributes that identify an error instance.
    _fields: Tuple[str, ...] = ()

    def _key(self) -> Tuple:
        return (type(self),) + tuple(getattr(self, name) for name in self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LedgerError):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __reduce__(self):
        # Rebuild from the subclass constructor arguments, not the message.
        return (type(self), tuple(getattr(self, name) for name in self._fields))

    def __repr__(self) -> str:
        args = ", ".join(repr(getattr(self, name)) for name in self._fields)
        return f"{type(self).__name__}({args})"


class AccountingError(LedgerError):
    """Raised when a ledger operation cannot be applied to the current balances."""
    pass


class AccountNotFound(AccountingError):
    """Raised when an operation references an account that was never credited."""

    _fields = ("account",)

    def __init__(self, account: str):
        self.account = account
        super().__init__(f"Account {account!r} not found")


class AccountUnderFunded(AccountingError):
    """Raised when a withdrawal exceeds the account's current balance."""

    _fields = ("account", "amount")

    def __init__(self, account: str, amount: int):
        self.account = account
        self.amount = amount
        super().__init__(f"Account {account!r} cannot cover withdrawal of {amount}")


class AccountOverFunded(AccountingError):
    """Raised when a deposit would push the balance past U64_MAX."""

    _fields = ("account", "amount")

    def __init__(self, account: str, amount: int):
        self.account = account
        self.amount = amount
        super().__init__(f"Account {account!r} cannot hold a further deposit of {amount}")


class ParsingError(LedgerError):
    """Raised when user-entered text cannot be turned into a ledger argument."""
    pass


class InvalidAmount(ParsingError):
    """Raised when text is not an unsigned integer within the amount domain."""

    _fields = ("text",)

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Invalid amount {text!r}: expected an integer in [0, {U64_MAX}]")


# ============================================================================
# VALIDATION
# ============================================================================

def validate_account(account: str) -> None:
    """
    Check that an account identifier is a string.

    Any string is a valid identifier, including the empty string.

    Raises:
        ValueError: If account is not a str
    """
    if not isinstance(account, str):
        raise ValueError(f"Account must be str, got {type(account)}")


def validate_amount(amount: int) -> None:
    """
    Check that an amount lies in the unsigned 64-bit domain.

    Raises:
        ValueError: If amount is not an int (bool excluded) or is out of range
    """
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValueError(f"Amount must be int, got {type(amount)}")
    if amount < 0 or amount > U64_MAX:
        raise ValueError(f"Amount must be in [0, {U64_MAX}], got {amount}")


# ============================================================================
# CHECKED ARITHMETIC
# ============================================================================

def checked_add(balance: int, amount: int) -> Optional[int]:
    """Return balance + amount, or None if the sum exceeds U64_MAX."""
    result = balance + amount
    if result > U64_MAX:
        return None
    return result


def checked_sub(balance: int, amount: int) -> Optional[int]:
    """Return balance - amount, or None if the difference would be negative."""
    if amount > balance:
        return None
    return balance - amount


# ============================================================================
# TRANSACTION RECORDS
# ============================================================================

@dataclass(frozen=True, slots=True)
class Deposit:
    """
    A completed credit of `amount` to `account`.

    Records carry the requested account and amount, never the resulting balance.
    This class is immutable (frozen=True) and memory-optimized (slots=True).
    """
    account: str
    amount: int

    def __post_init__(self):
        validate_account(self.account)
        validate_amount(self.amount)

    def __repr__(self) -> str:
        return f"Deposit({self.account!r}, {self.amount})"


@dataclass(frozen=True, slots=True)
class Withdraw:
    """
    A completed debit of `amount` from `account`.

    This class is immutable (frozen=True) and memory-optimized (slots=True).
    """
    account: str
    amount: int

    def __post_init__(self):
        validate_account(self.account)
        validate_amount(self.amount)

    def __repr__(self) -> str:
        return f"Withdraw({self.account!r}, {self.amount})"


# A transfer is represented by a (Withdraw, Deposit) pair, never its own type.
Transaction = Union[Deposit, Withdraw]
