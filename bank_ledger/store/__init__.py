"""In-memory stores for opened accounts."""

from bank_ledger.store.accounts import AccountRegistry

__all__ = ["AccountRegistry"]
