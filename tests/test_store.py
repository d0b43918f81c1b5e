"""Tests for AccountRegistry and AccountNumberSequence."""

from datetime import datetime
from decimal import Decimal

import pytest

from bank_ledger.exceptions import AccountNotFoundError
from bank_ledger.ledger import AccountNumberSequence
from bank_ledger.models import ErrorKind
from bank_ledger.store import AccountRegistry


class TestAccountNumberSequence:
    """Tests for AccountNumberSequence."""

    def test_default_seed(self, sequence: AccountNumberSequence) -> None:
        assert sequence.start == 1234567890
        assert sequence.next() == "1234567890"
        assert sequence.next() == "1234567891"

    def test_peek_does_not_advance(self, sequence: AccountNumberSequence) -> None:
        assert sequence.peek() == "1234567890"
        assert sequence.peek() == "1234567890"
        assert sequence.next() == "1234567890"

    def test_custom_start(self) -> None:
        sequence = AccountNumberSequence(start=7)

        assert [sequence.next() for _ in range(3)] == ["7", "8", "9"]

    def test_reset(self, sequence: AccountNumberSequence) -> None:
        sequence.next()
        sequence.next()
        sequence.reset()

        assert sequence.next() == "1234567890"

    def test_reset_to_new_start(self, sequence: AccountNumberSequence) -> None:
        sequence.reset(start=100)

        assert sequence.start == 100
        assert sequence.next() == "100"

    def test_negative_start_rejected(self) -> None:
        with pytest.raises(ValueError):
            AccountNumberSequence(start=-1)


class TestAccountRegistry:
    """Tests for AccountRegistry."""

    def test_open_account(self, registry: AccountRegistry) -> None:
        account = registry.open_account("Alice", Decimal("500")).unwrap()

        assert account.account_number == "1234567890"
        assert account.balance == Decimal("500")
        assert len(account.transactions) == 1
        assert len(registry) == 1

    def test_open_account_with_timestamp(self, registry: AccountRegistry, when: datetime) -> None:
        account = registry.open_account("Alice", Decimal("1"), when).unwrap()

        assert account.transactions[0].timestamp == when

    def test_account_numbers_increase_by_one(self, registry: AccountRegistry) -> None:
        first = registry.open_account("Alice", Decimal("10")).unwrap()
        second = registry.open_account("Bob", Decimal("20")).unwrap()

        assert first.account_number != second.account_number
        assert int(second.account_number) == int(first.account_number) + 1

    def test_rejected_opening_consumes_no_number(self, registry: AccountRegistry) -> None:
        result = registry.open_account("Alice", Decimal("0"))

        assert result.error_kind == ErrorKind.INVALID_AMOUNT
        assert len(registry) == 0
        assert registry.open_account("Alice", Decimal("1")).unwrap().account_number == "1234567890"

    def test_default_sequence(self) -> None:
        registry = AccountRegistry()

        assert registry.open_account("Alice", 1).unwrap().account_number == "1234567890"

    def test_seeded_sequences_are_independent(self) -> None:
        a = AccountRegistry(AccountNumberSequence(start=1))
        b = AccountRegistry(AccountNumberSequence(start=1))

        assert a.open_account("A", 1).unwrap().account_number == "1"
        assert b.open_account("B", 1).unwrap().account_number == "1"

    def test_get_account(self, registry: AccountRegistry) -> None:
        account = registry.open_account("Alice", Decimal("10")).unwrap()

        assert registry.get_account(account.account_number) is account

    def test_get_account_not_found(self, registry: AccountRegistry) -> None:
        with pytest.raises(AccountNotFoundError, match="Account 42 not found"):
            registry.get_account("42")

    def test_accounts_in_opening_order(self, registry: AccountRegistry) -> None:
        registry.open_account("Alice", 1)
        registry.open_account("Bob", 1)

        assert [a.owner for a in registry.accounts()] == ["Alice", "Bob"]

    def test_summary(self, registry: AccountRegistry, when: datetime) -> None:
        account = registry.open_account("Alice", Decimal("10")).unwrap()
        account.deposit(Decimal("5"), when, "Deposit")
        registry.open_account("Bob", Decimal("1"))

        assert registry.summary() == {"accounts": 2, "transactions": 3}

    def test_open_account_logs(self, registry: AccountRegistry, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("INFO", logger="bank_ledger.store.accounts"):
            registry.open_account("Alice", Decimal("10"))
            registry.open_account("Bob", Decimal("-1"))

        assert "Opened account 1234567890 for Alice" in caplog.text
        assert "rejected" in caplog.text
