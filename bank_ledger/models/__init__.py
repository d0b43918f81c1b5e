"""Domain models for the account ledger."""

from bank_ledger.models.enums import Direction, ErrorKind
from bank_ledger.models.result import LedgerResult
from bank_ledger.models.transaction import HistoryEntry, Transaction

__all__ = ["Direction", "ErrorKind", "HistoryEntry", "LedgerResult", "Transaction"]
