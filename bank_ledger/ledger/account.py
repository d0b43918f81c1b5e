"""Account ledger: append-only transactions with a derived balance."""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from itertools import accumulate
from typing import Any

from bank_ledger.exceptions import InsufficientFundsError, InvalidAmountError
from bank_ledger.models import HistoryEntry, LedgerResult, Transaction

INITIAL_BALANCE_NOTE = "Initial balance"
DEFAULT_DATE_FORMAT = "%Y-%m-%d"
HISTORY_HEADER = "Date\t\tAmount\tBalance\tNote"

# Amounts are whole cents up to MAX_AMOUNT, so balances of any realistic
# ledger stay exact under the default 28-digit decimal context.
CENT = Decimal("0.01")
MAX_AMOUNT = Decimal("1000000000000")


def _to_amount(value: Any) -> Decimal | None:
    """Coerce ``value`` to a finite Decimal, or None if it is not one."""
    if isinstance(value, bool):
        return None
    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value))
        except InvalidOperation:
            return None
    return value if value.is_finite() else None


def _check_amount(operation: str, amount: Any) -> LedgerResult[Decimal]:
    """Validate a deposit or withdrawal amount.

    Returns the amount as a plain (non-exponent) Decimal, or an
    INVALID_AMOUNT failure if it is not positive, exceeds ``MAX_AMOUNT``
    or has fractions of a cent.
    """
    value = _to_amount(amount)
    if value is None or value <= 0:
        return LedgerResult.failure(InvalidAmountError(operation, amount))
    if value > MAX_AMOUNT or value != value.quantize(CENT):
        return LedgerResult.failure(
            InvalidAmountError(
                operation,
                amount,
                reason=f"must be a whole number of cents no greater than {MAX_AMOUNT}",
            )
        )
    if value.as_tuple().exponent > 0:
        value = value.quantize(Decimal(1))
    return LedgerResult.success(value)


class BankAccount:
    """A single bank account backed by an append-only transaction ledger.

    The balance is never stored: every read folds over the ledger, so it
    cannot drift from the recorded transactions. Deposits and withdrawals
    return a :class:`LedgerResult` instead of raising; a failed operation
    leaves the ledger untouched.

    Use :meth:`open` (or ``AccountRegistry.open_account``) to create an
    account with its initial deposit.
    """

    def __init__(self, account_number: str, owner: str) -> None:
        self._account_number = account_number
        self.owner = owner
        self._transactions: list[Transaction] = []

    @classmethod
    def open(
        cls,
        account_number: str,
        owner: str,
        initial_balance: Decimal | int | str,
        when: datetime | None = None,
    ) -> LedgerResult["BankAccount"]:
        """Create an account funded by an initial deposit.

        Parameters
        ----------
        account_number : str
            Identifier for the new account.
        owner : str
            Display name of the account holder.
        initial_balance : Decimal | int | str
            Opening deposit; must be strictly positive.
        when : datetime | None
            Timestamp of the opening deposit (default: now).

        Returns
        -------
        LedgerResult[BankAccount]
            The new account, or an INVALID_AMOUNT failure.
        """
        account = cls(account_number, owner)
        result = account.deposit(initial_balance, when or datetime.now(), INITIAL_BALANCE_NOTE)
        if not result.ok:
            return LedgerResult.failure(result.error)
        return LedgerResult.success(account)

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        """Read-only snapshot of the ledger in insertion order."""
        return tuple(self._transactions)

    @property
    def balance(self) -> Decimal:
        """Sum of all transaction amounts, recomputed on every read."""
        return sum((tx.amount for tx in self._transactions), Decimal("0"))

    def deposit(
        self, amount: Decimal | int | str, when: datetime, note: str
    ) -> LedgerResult[Transaction]:
        """Record a deposit of ``amount``."""
        checked = _check_amount("deposit", amount)
        if not checked.ok:
            return LedgerResult.failure(checked.error)
        value = checked.value

        transaction = Transaction(value, when, note)
        self._transactions.append(transaction)
        return LedgerResult.success(transaction)

    def withdraw(
        self, amount: Decimal | int | str, when: datetime, note: str
    ) -> LedgerResult[Transaction]:
        """Record a withdrawal of ``amount``.

        The amount is validated before funds are checked, so a non-positive
        amount always reports INVALID_AMOUNT.
        """
        checked = _check_amount("withdrawal", amount)
        if not checked.ok:
            return LedgerResult.failure(checked.error)
        value = checked.value

        balance = self.balance
        if balance - value < 0:
            return LedgerResult.failure(InsufficientFundsError(balance, value))

        transaction = Transaction(-value, when, note)
        self._transactions.append(transaction)
        return LedgerResult.success(transaction)

    def history(self) -> list[HistoryEntry]:
        """One entry per transaction, with the running balance after it."""
        running = accumulate(tx.amount for tx in self._transactions)
        return [
            HistoryEntry(tx.timestamp, tx.amount, balance, tx.note)
            for tx, balance in zip(self._transactions, running)
        ]

    def render_history(self, date_format: str = DEFAULT_DATE_FORMAT) -> str:
        """Render the history as a header plus one tab-separated line per transaction."""
        lines = [HISTORY_HEADER]
        for entry in self.history():
            lines.append(
                f"{entry.timestamp.strftime(date_format)}\t{entry.amount}\t{entry.balance}\t{entry.note}"
            )
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"BankAccount(account_number={self._account_number!r}, owner={self.owner!r})"
