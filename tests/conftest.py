"""Pytest configuration and fixtures."""

from datetime import datetime
from decimal import Decimal

import pytest

from bank_ledger.ledger import AccountNumberSequence, BankAccount
from bank_ledger.store import AccountRegistry


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def when() -> datetime:
    """Fixed transaction timestamp."""
    return datetime(2024, 3, 15, 14, 30)


@pytest.fixture
def sequence() -> AccountNumberSequence:
    """Account number sequence at the standard seed."""
    return AccountNumberSequence()


@pytest.fixture
def registry(sequence: AccountNumberSequence) -> AccountRegistry:
    """Fresh registry for each test."""
    return AccountRegistry(sequence)


@pytest.fixture
def account(when: datetime) -> BankAccount:
    """Account opened with a balance of 100."""
    return BankAccount.open("1234567890", "Alice Martin", Decimal("100"), when).unwrap()
