"""
Conformance Test Suite

This suite defines the NORMATIVE behavior of the tally Ledger.
Any compliant implementation MUST pass these tests.

The tests are organized by invariant:
1. test_conservation.py - Transfers redistribute but never create or destroy value
2. test_atomicity.py - Failed operations leave balances untouched
3. test_checked_arithmetic.py - Balances stay within [0, U64_MAX]

These tests use hypothesis for property-based testing.
"""
