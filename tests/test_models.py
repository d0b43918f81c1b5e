"""Tests for domain models."""

import dataclasses
from datetime import datetime
from decimal import Decimal

import pytest

from bank_ledger.exceptions import InsufficientFundsError, InvalidAmountError
from bank_ledger.models import Direction, ErrorKind, HistoryEntry, LedgerResult, Transaction


class TestTransaction:
    """Tests for Transaction model."""

    def test_transaction_creation(self, when: datetime) -> None:
        tx = Transaction(Decimal("25.50"), when, "Deposit")

        assert tx.amount == Decimal("25.50")
        assert tx.timestamp == when
        assert tx.note == "Deposit"

    def test_transaction_is_immutable(self, when: datetime) -> None:
        tx = Transaction(Decimal("10"), when, "Deposit")

        with pytest.raises(dataclasses.FrozenInstanceError):
            tx.amount = Decimal("20")  # type: ignore[misc]

    def test_direction_from_sign(self, when: datetime) -> None:
        assert Transaction(Decimal("10"), when, "in").direction == Direction.CREDIT
        assert Transaction(Decimal("-10"), when, "out").direction == Direction.DEBIT

    def test_transactions_are_values(self, when: datetime) -> None:
        assert Transaction(Decimal("1"), when, "a") == Transaction(Decimal("1"), when, "a")


class TestHistoryEntry:
    """Tests for HistoryEntry model."""

    def test_history_entry_creation(self, when: datetime) -> None:
        entry = HistoryEntry(when, Decimal("-50"), Decimal("250"), "Withdraw")

        assert entry.timestamp == when
        assert entry.amount == Decimal("-50")
        assert entry.balance == Decimal("250")
        assert entry.note == "Withdraw"


class TestLedgerResult:
    """Tests for LedgerResult."""

    def test_success(self) -> None:
        result = LedgerResult.success(42)

        assert result.ok
        assert result.value == 42
        assert result.error is None
        assert result.error_kind is None
        assert result.message == ""
        assert result.unwrap() == 42

    def test_failure_carries_error_kind(self) -> None:
        result = LedgerResult.failure(InsufficientFundsError(Decimal("1"), Decimal("2")))

        assert not result.ok
        assert result.value is None
        assert result.error_kind == ErrorKind.INSUFFICIENT_FUNDS
        assert result.message == "Insufficient funds for this withdrawal"

    def test_unwrap_raises_carried_error(self) -> None:
        error = InvalidAmountError("withdrawal", Decimal("-1"))
        result = LedgerResult.failure(error)

        with pytest.raises(InvalidAmountError) as exc_info:
            result.unwrap()

        assert exc_info.value is error
