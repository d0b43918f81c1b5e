"""Transaction and history row models."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from bank_ledger.models.enums import Direction


@dataclass(frozen=True)
class Transaction:
    """A single signed monetary movement on an account ledger.

    Positive amounts are deposits, negative amounts are withdrawals.
    """

    amount: Decimal
    timestamp: datetime
    note: str

    @property
    def direction(self) -> Direction:
        """CREDIT for deposits, DEBIT for withdrawals."""
        return Direction.CREDIT if self.amount > 0 else Direction.DEBIT


@dataclass(frozen=True)
class HistoryEntry:
    """One line of an account history."""

    timestamp: datetime
    amount: Decimal
    balance: Decimal  # running balance right after this transaction
    note: str
