"""
ledger.py - Stateful Account Ledger

The Ledger class is the single owner of account balances.
It is the only module that mutates state, and it does so only through
deposit(), withdraw() and send().

Key responsibilities:
    - Maintains the mapping from account identifier to unsigned 64-bit balance
    - Applies checked arithmetic before every mutation (no wraparound, ever)
    - Returns immutable Deposit/Withdraw records describing what happened
    - Raises typed AccountingError subclasses without touching state on failure
"""

from __future__ import annotations
from typing import List, NoReturn, Tuple
import threading

from .core import (
    # Types
    AccountMap, Deposit, Withdraw, Transaction,
    # Exceptions
    AccountNotFound, AccountUnderFunded, AccountOverFunded, AccountingError,
    # Helper functions
    checked_add, checked_sub, validate_account, validate_amount,
)


class Ledger:
    """
    In-memory ledger of named accounts holding unsigned 64-bit balances.

    Accounts are created implicitly by their first deposit and never deleted.
    A balance of zero is still an account; an identifier that was never
    credited is not.

    The ledger does not keep the records it returns. Callers that need a
    history collect them, e.g. in a Journal.

    Thread Safety:
        Every public method holds the ledger's lock for its whole duration,
        so a send() is never observed half-applied.

    Example:
        ledger = Ledger("main")
        ledger.deposit("alice", 100)
        ledger.deposit("bob", 100)
        withdraw, deposit = ledger.send("alice", "bob", 10)
    """

    def __init__(
        self,
        name: str = "main",
        verbose: bool = True,
        atomic_send: bool = False,
    ):
        """
        Create a ledger.

        Args:
            name: Ledger identifier
            verbose: Print a trace line for every applied or rejected operation (default: True)
            atomic_send: Check the recipient's capacity before debiting the sender,
                so a send either fully applies or changes nothing (default: False)
        """
        self.name = name
        self.verbose = verbose
        self.atomic_send = atomic_send
        self.accounts: AccountMap = {}
        self._lock = threading.RLock()

    # ========================================================================
    # READ ACCESS (non-mutating)
    # ========================================================================

    def snapshot(self) -> AccountMap:
        """Return a copy of all account balances."""
        with self._lock:
            return dict(self.accounts)

    def get_balance(self, account: str) -> int:
        """
        Get the balance of an account.

        Raises:
            AccountNotFound: If the account was never credited
        """
        with self._lock:
            if account not in self.accounts:
                raise AccountNotFound(account)
            return self.accounts[account]

    def has_account(self, account: str) -> bool:
        """Check if an account exists."""
        with self._lock:
            return account in self.accounts

    def list_accounts(self) -> List[str]:
        """List all account identifiers, sorted."""
        with self._lock:
            return sorted(self.accounts)

    def total_balance(self) -> int:
        """
        Sum of all balances.

        Accounts are sorted before summation to ensure deterministic
        accumulation order.
        """
        with self._lock:
            return sum(self.accounts[a] for a in sorted(self.accounts))

    def __contains__(self, account: object) -> bool:
        if not isinstance(account, str):
            return False
        return self.has_account(account)

    def __len__(self) -> int:
        with self._lock:
            return len(self.accounts)

    def __repr__(self) -> str:
        with self._lock:
            return f"Ledger({self.name!r}, {self.accounts!r})"

    # ========================================================================
    # OPERATIONS (mutating)
    # ========================================================================

    def deposit(self, account: str, amount: int) -> Deposit:
        """
        Credit `amount` to `account`, creating the account if needed.

        A new account is inserted with `amount` as its initial balance.

        Returns:
            Deposit record with the requested account and amount

        Raises:
            AccountOverFunded: If the new balance would exceed U64_MAX
            ValueError: If account or amount is outside its domain
        """
        validate_account(account)
        validate_amount(amount)
        with self._lock:
            if account not in self.accounts:
                self.accounts[account] = amount
            else:
                new_balance = checked_add(self.accounts[account], amount)
                if new_balance is None:
                    self._reject(AccountOverFunded(account, amount))
                self.accounts[account] = new_balance
            return self._applied(Deposit(account, amount))

    def withdraw(self, account: str, amount: int) -> Withdraw:
        """
        Debit `amount` from an existing account.

        Returns:
            Withdraw record with the requested account and amount

        Raises:
            AccountNotFound: If the account does not exist (no entry is created)
            AccountUnderFunded: If amount exceeds the current balance
            ValueError: If account or amount is outside its domain
        """
        validate_account(account)
        validate_amount(amount)
        with self._lock:
            if account not in self.accounts:
                self._reject(AccountNotFound(account))
            new_balance = checked_sub(self.accounts[account], amount)
            if new_balance is None:
                self._reject(AccountUnderFunded(account, amount))
            self.accounts[account] = new_balance
            return self._applied(Withdraw(account, amount))

    def send(self, sender: str, recipient: str, amount: int) -> Tuple[Withdraw, Deposit]:
        """
        Move `amount` from sender to recipient as a withdraw followed by a deposit.

        Both accounts must already exist; send never creates the recipient.

        With atomic_send=False (the default) the withdraw is committed before
        the deposit is attempted, so a recipient overflow leaves the sender
        debited with no matching credit. With atomic_send=True the recipient's
        capacity is checked first and a failing send changes nothing.

        Returns:
            (Withdraw, Deposit) pair, in that order

        Raises:
            AccountNotFound: If sender (checked first) or recipient is absent
            AccountUnderFunded: If sender's balance is below amount
            AccountOverFunded: If recipient's balance would exceed U64_MAX
        """
        validate_account(sender)
        validate_account(recipient)
        validate_amount(amount)
        with self._lock:
            if sender not in self.accounts:
                self._reject(AccountNotFound(sender))
            if recipient not in self.accounts:
                self._reject(AccountNotFound(recipient))

            if self.atomic_send:
                self._check_send_capacity(sender, recipient, amount)

            withdraw = self.withdraw(sender, amount)
            deposit = self.deposit(recipient, amount)
            return withdraw, deposit

    def _check_send_capacity(self, sender: str, recipient: str, amount: int) -> None:
        # A self-send nets to zero once the debit has been checked.
        if sender == recipient:
            return
        if checked_sub(self.accounts[sender], amount) is None:
            self._reject(AccountUnderFunded(sender, amount))
        if checked_add(self.accounts[recipient], amount) is None:
            self._reject(AccountOverFunded(recipient, amount))

    # ========================================================================
    # TRACE OUTPUT
    # ========================================================================

    def _applied(self, record: Transaction) -> Transaction:
        if self.verbose:
            print(f"✓ APPLIED [{self.name}]: {record!r}")
        return record

    def _reject(self, error: AccountingError) -> NoReturn:
        if self.verbose:
            print(f"✗ REJECTED [{self.name}]: {error!r}")
        raise error

    # ========================================================================
    # LEDGER OPERATIONS
    # ========================================================================

    def clone(self) -> Ledger:
        """
        Create an independent copy of this ledger.

        Modifications to the clone do not affect the original, and vice versa.
        Configuration (name, verbose, atomic_send) is copied as well.
        """
        with self._lock:
            cloned = Ledger(self.name, verbose=self.verbose, atomic_send=self.atomic_send)
            cloned.accounts = dict(self.accounts)
            return cloned

    def apply(self, record: Transaction) -> Transaction:
        """
        Re-apply a previously returned record to this ledger.

        Deposit records go through deposit() and Withdraw records through
        withdraw(), so all the usual checks and errors apply.

        Raises:
            TypeError: If record is not a Deposit or Withdraw
        """
        if isinstance(record, Deposit):
            return self.deposit(record.account, record.amount)
        if isinstance(record, Withdraw):
            return self.withdraw(record.account, record.amount)
        raise TypeError(f"Cannot apply {type(record).__name__}")
