"""Tagged success/failure values returned by ledger mutations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from bank_ledger.models.enums import ErrorKind

if TYPE_CHECKING:
    from bank_ledger.exceptions import BankLedgerError

T = TypeVar("T")


@dataclass(frozen=True)
class LedgerResult(Generic[T]):
    """Outcome of a ledger operation.

    Exactly one of ``value`` and ``error`` is set. Failures carry the domain
    exception as a value, so callers can branch on ``error_kind`` without
    catching anything, or call :meth:`unwrap` to get exception semantics.
    """

    value: T | None = None
    error: BankLedgerError | None = None

    @classmethod
    def success(cls, value: T) -> LedgerResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, error: BankLedgerError) -> LedgerResult[T]:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> ErrorKind | None:
        """Kind of the carried error, or None on success."""
        return self.error.kind if self.error is not None else None

    @property
    def message(self) -> str:
        return str(self.error) if self.error is not None else ""

    def unwrap(self) -> T:
        """Return the value, raising the carried error on failure."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
