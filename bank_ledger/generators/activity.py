"""Synthetic deposit/withdrawal activity for an account."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Iterable, Iterator

from bank_ledger.generators.base import BaseGenerator
from bank_ledger.ledger import BankAccount
from bank_ledger.models import Direction, LedgerResult, Transaction


@dataclass(frozen=True)
class Operation:
    """A deposit or withdrawal request to replay against an account."""

    direction: Direction
    amount: Decimal
    timestamp: datetime
    note: str


class ActivityGenerator(BaseGenerator):
    """Generate synthetic owners and account activity."""

    DIRECTIONS = [Direction.CREDIT, Direction.DEBIT]
    DIRECTION_WEIGHTS = [0.55, 0.45]

    def owner_name(self) -> str:
        return self.fake.name()

    def initial_balance(self) -> Decimal:
        """Strictly positive opening deposit."""
        return self._amount(scale=200)

    def generate(
        self, count: int, start: datetime | None = None
    ) -> Iterator[Operation]:
        """Generate ``count`` operations with increasing timestamps.

        Parameters
        ----------
        count : int
            Number of operations to generate.
        start : datetime | None
            Timestamp of the first operation (default: 90 days ago).

        Yields
        ------
        Operation
            Deposit (CREDIT) or withdrawal (DEBIT) request.
        """
        when = start or datetime.now() - timedelta(days=90)
        for _ in range(count):
            direction = self.rng.choices(self.DIRECTIONS, weights=self.DIRECTION_WEIGHTS, k=1)[0]
            when += timedelta(hours=self.rng.randint(1, 72), minutes=self.rng.randint(0, 59))
            yield Operation(
                direction=direction,
                amount=self._amount(scale=50),
                timestamp=when,
                note=self.fake.sentence(nb_words=3).rstrip("."),
            )

    def apply(
        self, account: BankAccount, operations: Iterable[Operation]
    ) -> list[LedgerResult[Transaction]]:
        """Replay operations against ``account``.

        Withdrawals the balance cannot cover come back as failures and
        leave the account unchanged.
        """
        results = []
        for op in operations:
            if op.direction == Direction.CREDIT:
                results.append(account.deposit(op.amount, op.timestamp, op.note))
            else:
                results.append(account.withdraw(op.amount, op.timestamp, op.note))
        return results

    def _amount(self, scale: float) -> Decimal:
        # Pareto-distributed, capped, two decimals, never below one cent
        amount = min(self.rng.paretovariate(1.5) * scale, 50000)
        return max(Decimal(str(round(amount, 2))), Decimal("0.01"))
