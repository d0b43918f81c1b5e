"""In-memory account registry."""

from datetime import datetime
from decimal import Decimal

from bank_ledger.exceptions import AccountNotFoundError
from bank_ledger.ledger import AccountNumberSequence, BankAccount
from bank_ledger.logging import get_logger
from bank_ledger.models import LedgerResult

logger = get_logger(__name__)


class AccountRegistry:
    """Opens accounts and keeps them indexed by account number.

    The registry owns the account number sequence. A number is only
    consumed when an account is actually opened.

    Parameters
    ----------
    numbers : AccountNumberSequence | None
        Sequence to draw account numbers from (default: a fresh sequence
        at the standard seed).
    """

    def __init__(self, numbers: AccountNumberSequence | None = None) -> None:
        self.numbers = numbers or AccountNumberSequence()
        self._accounts: dict[str, BankAccount] = {}

    def open_account(
        self,
        owner: str,
        initial_balance: Decimal | int | str,
        when: datetime | None = None,
    ) -> LedgerResult[BankAccount]:
        """Open a new account funded by ``initial_balance``."""
        result = BankAccount.open(self.numbers.peek(), owner, initial_balance, when)
        if not result.ok:
            logger.info("Account opening for %s rejected: %s", owner, result.message)
            return result

        account = result.value
        self.numbers.next()
        self._accounts[account.account_number] = account
        logger.info(
            "Opened account %s for %s with %s",
            account.account_number,
            owner,
            account.balance,
        )
        return result

    def get_account(self, account_number: str) -> BankAccount:
        """Get an account by number."""
        try:
            return self._accounts[account_number]
        except KeyError:
            raise AccountNotFoundError(f"Account {account_number} not found") from None

    def accounts(self) -> list[BankAccount]:
        """All opened accounts, in opening order."""
        return list(self._accounts.values())

    def summary(self) -> dict[str, int]:
        """Return summary counts."""
        return {
            "accounts": len(self._accounts),
            "transactions": sum(len(a.transactions) for a in self._accounts.values()),
        }

    def __len__(self) -> int:
        return len(self._accounts)
