"""Custom exception hierarchy for bank-ledger."""

from decimal import Decimal

from bank_ledger.models.enums import ErrorKind


class BankLedgerError(Exception):
    """Base exception for all bank-ledger errors."""

    kind: ErrorKind | None = None


class InvalidAmountError(BankLedgerError):
    """Raised when a deposit or withdrawal amount is not a valid positive amount."""

    kind = ErrorKind.INVALID_AMOUNT

    def __init__(
        self,
        operation: str,
        amount: object,
        parameter: str = "amount",
        reason: str = "must be positive",
    ) -> None:
        self.operation = operation
        self.amount = amount
        self.parameter = parameter
        self.reason = reason
        super().__init__(f"{parameter}: the {operation} amount {reason}")


class InsufficientFundsError(BankLedgerError):
    """Raised when a withdrawal would take the balance below zero."""

    kind = ErrorKind.INSUFFICIENT_FUNDS

    def __init__(self, balance: Decimal, amount: Decimal) -> None:
        self.balance = balance
        self.amount = amount
        super().__init__("Insufficient funds for this withdrawal")


class AccountNotFoundError(BankLedgerError):
    """Raised when a referenced account number does not exist."""


class ConfigurationError(BankLedgerError):
    """Raised when configuration is invalid or missing."""
