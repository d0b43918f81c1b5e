"""Account ledger and account numbering."""

from bank_ledger.ledger.account import BankAccount
from bank_ledger.ledger.numbering import AccountNumberSequence

__all__ = ["AccountNumberSequence", "BankAccount"]
