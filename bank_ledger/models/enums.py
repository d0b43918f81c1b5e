"""Enumeration types for ledger entities."""

from enum import Enum


class Direction(str, Enum):
    CREDIT = "CREDIT"
    DEBIT = "DEBIT"


class ErrorKind(str, Enum):
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
