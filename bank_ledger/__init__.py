"""In-memory single-account bank ledger."""

from bank_ledger.exceptions import (
    AccountNotFoundError,
    BankLedgerError,
    InsufficientFundsError,
    InvalidAmountError,
)
from bank_ledger.ledger import AccountNumberSequence, BankAccount
from bank_ledger.models import ErrorKind, LedgerResult, Transaction
from bank_ledger.store import AccountRegistry

__version__ = "0.1.0"

__all__ = [
    "AccountNotFoundError",
    "AccountNumberSequence",
    "AccountRegistry",
    "BankAccount",
    "BankLedgerError",
    "ErrorKind",
    "InsufficientFundsError",
    "InvalidAmountError",
    "LedgerResult",
    "Transaction",
    "__version__",
]
