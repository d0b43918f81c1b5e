"""Interactive console for a single bank account.

Runs the menu loop on stdin/stdout:

1. ask for the owner name and the initial balance,
2. repeat the menu (deposit, withdraw, history, quit) until the user quits
   or stdin is exhausted.
"""

import re
from datetime import datetime
from decimal import Decimal
from typing import Callable

from bank_ledger.config import LedgerConfig
from bank_ledger.ledger import AccountNumberSequence, BankAccount
from bank_ledger.ledger.account import CENT, DEFAULT_DATE_FORMAT, MAX_AMOUNT
from bank_ledger.logging import get_logger, setup_logging
from bank_ledger.models import ErrorKind
from bank_ledger.store import AccountRegistry

logger = get_logger(__name__)

DEPOSIT_NOTE = "Deposit"
WITHDRAW_NOTE = "Withdraw"

AMOUNT_PATTERN = re.compile(r"\+?[0-9]+(\.[0-9]+)?")

MENU = (
    "\nChoose an action:\n"
    "1. Make a deposit\n"
    "2. Make a withdrawal\n"
    "3. Show account history\n"
    "4. Quit"
)


def parse_amount(text: str) -> Decimal | None:
    """Parse a plain non-negative amount such as ``12`` or ``12.50``.

    Returns None for anything else, including exponent notation, digit
    separators, fractions of a cent and amounts above ``MAX_AMOUNT``.
    """
    text = text.strip()
    if not AMOUNT_PATTERN.fullmatch(text):
        return None
    value = Decimal(text)
    if value > MAX_AMOUNT or value != value.quantize(CENT):
        return None
    return value


class ConsoleApp:
    """Menu-driven console around one :class:`BankAccount`.

    Parameters
    ----------
    registry : AccountRegistry
        Registry used to open the session's account.
    date_format : str
        strftime format for history dates.
    input_func, output_func : Callable
        I/O hooks (default ``input`` and ``print``).
    """

    def __init__(
        self,
        registry: AccountRegistry,
        date_format: str = DEFAULT_DATE_FORMAT,
        input_func: Callable[[str], str] | None = None,
        output_func: Callable[[str], None] | None = None,
    ) -> None:
        self.registry = registry
        self.date_format = date_format
        self._input = input_func or input
        self._output = output_func or print
        self.account: BankAccount | None = None

    def run(self) -> int:
        """Run the session; returns the process exit code."""
        self._output("Welcome to the Central Banking System!")
        try:
            self.account = self.open_account()
            while True:
                self._output(MENU)
                if not self.handle_choice(self._input("Enter your choice: ").strip()):
                    break
        except EOFError:
            logger.debug("End of input, leaving menu loop")
            self._output("")
            self._output("Closing the program. Thank you!")
        return 0

    def open_account(self) -> BankAccount:
        owner = ""
        while not owner:
            owner = self._input("Enter your name: ").strip()

        while True:
            initial = self._prompt_amount(
                "Enter the initial balance: ",
                "Please enter a valid positive number for the initial balance.",
            )
            result = self.registry.open_account(owner, initial)
            if result.ok:
                break
            self._output(result.message)

        account = result.value
        self._output(
            f"Account {account.account_number} was created for {account.owner} "
            f"with an initial balance of {account.balance}."
        )
        return account

    def handle_choice(self, choice: str) -> bool:
        """Dispatch one menu choice; returns False when the user quits."""
        logger.debug("Menu choice %r", choice)
        if choice == "1":
            self.deposit()
        elif choice == "2":
            self.withdraw()
        elif choice == "3":
            self._output(self.account.render_history(self.date_format))
        elif choice == "4":
            self._output("Closing the program. Thank you!")
            return False
        else:
            self._output("Invalid choice. Please enter a number from 1 to 4.")
        return True

    def deposit(self) -> None:
        amount = self._prompt_amount(
            "Enter the deposit amount: ",
            "Please enter a valid positive amount for the deposit.",
        )
        result = self.account.deposit(amount, datetime.now(), DEPOSIT_NOTE)
        if result.ok:
            self._output(f"Deposit of {amount} completed. Current balance is {self.account.balance}")
        else:
            self._output(result.message)

    def withdraw(self) -> None:
        amount = self._prompt_amount(
            "Enter the withdrawal amount: ",
            "Please enter a valid positive amount for the withdrawal.",
        )
        result = self.account.withdraw(amount, datetime.now(), WITHDRAW_NOTE)
        if result.ok:
            self._output(f"Withdrawal of {amount} completed. Current balance is {self.account.balance}")
            return
        if result.error_kind == ErrorKind.INSUFFICIENT_FUNDS:
            logger.debug("Withdrawal of %s refused, balance %s", amount, self.account.balance)
        self._output(result.message)

    def _prompt_amount(self, prompt: str, retry_message: str) -> Decimal:
        amount = parse_amount(self._input(prompt))
        while amount is None:
            self._output(retry_message)
            amount = parse_amount(self._input(prompt))
        return amount


def main() -> int:
    """Main entry point."""
    config = LedgerConfig.from_env()
    setup_logging(level=config.log_level, format_type=config.log_format)

    registry = AccountRegistry(AccountNumberSequence(config.numbering.seed))
    app = ConsoleApp(registry, date_format=config.display.date_format)
    try:
        return app.run()
    except KeyboardInterrupt:
        print()
        return 130
