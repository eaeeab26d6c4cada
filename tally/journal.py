"""
journal.py - Caller-side append-only record of ledger activity

The Ledger returns records but never keeps them. A Journal is where a
caller collects them, in execution order, so the history can be inspected
or replayed into a fresh ledger later.
"""

from __future__ import annotations
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .core import Deposit, Withdraw, Transaction
from .ledger import Ledger


class Journal:
    """
    Append-only, in-process list of Deposit and Withdraw records.

    Records are only ever added at the end. Nothing is persisted.

    Example:
        ledger = Ledger("main", verbose=False)
        journal = Journal()
        journal.record(ledger.deposit("alice", 100))
        journal.record(ledger.deposit("bob", 100))
        journal.record(ledger.send("alice", "bob", 10))
    """

    def __init__(self, records: Optional[Iterable[Transaction]] = None):
        self._records: List[Transaction] = []
        if records is not None:
            self.extend(records)

    def record(
        self,
        result: Union[Transaction, Tuple[Transaction, ...]],
    ) -> Union[Transaction, Tuple[Transaction, ...]]:
        """
        Append the result of a ledger operation and return it unchanged.

        Accepts a single record (deposit, withdraw) or a tuple of records
        (the pair returned by send).

        Raises:
            TypeError: If anything other than Deposit/Withdraw is given
        """
        if isinstance(result, tuple):
            self.extend(result)
        else:
            self.append(result)
        return result

    @staticmethod
    def _check(record: Transaction) -> None:
        if not isinstance(record, (Deposit, Withdraw)):
            raise TypeError(f"Journal accepts Deposit or Withdraw, got {type(record).__name__}")

    def append(self, record: Transaction) -> None:
        """Append one record."""
        self._check(record)
        self._records.append(record)

    def extend(self, records: Iterable[Transaction]) -> None:
        """
        Append records in order.

        Every record is checked before any is appended, so a rejected batch
        leaves the journal unchanged.
        """
        batch = list(records)
        for record in batch:
            self._check(record)
        self._records.extend(batch)

    @property
    def records(self) -> Tuple[Transaction, ...]:
        """All records in execution order."""
        return tuple(self._records)

    def for_account(self, account: str) -> List[Transaction]:
        """Records touching a single account, in execution order."""
        return [r for r in self._records if r.account == account]

    def net_flows(self) -> Dict[str, int]:
        """
        Net amount credited per account (deposits minus withdrawals).

        For a journal that recorded every operation since the ledger was
        created, this equals the ledger's balances.
        """
        flows: Dict[str, int] = {}
        for r in self._records:
            delta = r.amount if isinstance(r, Deposit) else -r.amount
            flows[r.account] = flows.get(r.account, 0) + delta
        return flows

    def replay(self, name: str = "replayed", from_record: int = 0) -> Ledger:
        """
        Create a new ledger by re-applying recorded operations in order.

        Args:
            name: Name for the new ledger
            from_record: Index of the first record to replay

        Returns:
            New Ledger (verbose off) reflecting the replayed records

        Raises:
            AccountingError: If a record cannot be applied in sequence
        """
        ledger = Ledger(name, verbose=False)
        for record in self._records[from_record:]:
            ledger.apply(record)
        return ledger

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(tuple(self._records))

    def __getitem__(self, index: int) -> Transaction:
        return self._records[index]

    def __repr__(self) -> str:
        return f"Journal({len(self._records)} records)"
