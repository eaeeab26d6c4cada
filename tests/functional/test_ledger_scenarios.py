"""
test_ledger_scenarios.py - End-to-end ledger scenarios

Walks through multi-step sessions against a single Ledger, checking every
returned record and the balances after each step.
"""

import pytest

from tally import (
    Ledger, Journal, Deposit, Withdraw,
    AccountUnderFunded, AccountOverFunded, U64_MAX,
)


class TestThreeAccountScenario:
    """bob, alice and charlie each start with 100."""

    def test_full_session(self):
        ledger = Ledger("scenario", verbose=False)
        journal = Journal()

        for account in ("bob", "alice", "charlie"):
            assert journal.record(ledger.deposit(account, 100)) == Deposit(account, 100)
        assert ledger.snapshot() == {"bob": 100, "alice": 100, "charlie": 100}

        assert journal.record(ledger.send("bob", "alice", 10)) == (
            Withdraw("bob", 10), Deposit("alice", 10),
        )
        assert ledger.get_balance("bob") == 90
        assert ledger.get_balance("alice") == 110

        assert journal.record(ledger.withdraw("charlie", 100)) == Withdraw("charlie", 100)
        assert ledger.has_account("charlie")
        assert ledger.get_balance("charlie") == 0

        assert journal.record(ledger.withdraw("alice", 110)) == Withdraw("alice", 110)
        assert ledger.get_balance("alice") == 0

        with pytest.raises(AccountUnderFunded) as exc_info:
            ledger.withdraw("bob", 100)
        assert exc_info.value == AccountUnderFunded("bob", 100)
        assert ledger.get_balance("bob") == 90

        assert journal.record(ledger.withdraw("bob", 90)) == Withdraw("bob", 90)
        assert ledger.snapshot() == {"bob": 0, "alice": 0, "charlie": 0}

        assert len(journal) == 8
        assert journal.replay().snapshot() == ledger.snapshot()


class TestOverflowScenario:
    """alice starts at the maximum representable balance."""

    def test_deposit_past_max(self):
        ledger = Ledger("scenario", verbose=False)
        assert ledger.deposit("alice", U64_MAX) == Deposit("alice", U64_MAX)

        with pytest.raises(AccountOverFunded) as exc_info:
            ledger.deposit("alice", 1)
        assert exc_info.value == AccountOverFunded("alice", 1)
        assert ledger.get_balance("alice") == U64_MAX

    def test_withdraw_then_redeposit_at_max(self):
        ledger = Ledger("scenario", verbose=False)
        ledger.deposit("alice", U64_MAX)
        ledger.withdraw("alice", U64_MAX)
        ledger.deposit("alice", U64_MAX)
        assert ledger.get_balance("alice") == U64_MAX
