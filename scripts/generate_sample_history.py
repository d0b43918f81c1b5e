#!/usr/bin/env python3
"""Print the history of a synthetic account.

Opens one account with a Faker-generated owner, replays random deposits and
withdrawals against it, and prints the resulting history. Useful for
eyeballing the history layout and the running balances.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_ledger.generators import ActivityGenerator
from bank_ledger.ledger import AccountNumberSequence
from bank_ledger.logging import get_logger, setup_logging
from bank_ledger.store import AccountRegistry

logger = get_logger(__name__)


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Print a synthetic account history")
    parser.add_argument(
        "--operations",
        type=int,
        default=20,
        help="Number of deposits/withdrawals to generate (default: 20)",
    )
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    parser.add_argument("--locale", type=str, default="fr_FR", help="Faker locale (default: fr_FR)")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: INFO)",
    )
    args = parser.parse_args()

    setup_logging(level=args.log_level)

    gen = ActivityGenerator(seed=args.seed, locale=args.locale)
    registry = AccountRegistry(AccountNumberSequence())
    account = registry.open_account(gen.owner_name(), gen.initial_balance()).unwrap()

    results = gen.apply(account, gen.generate(args.operations))
    rejected = [r for r in results if not r.ok]
    logger.info(
        "Replayed %d operations on account %s (%d rejected)",
        len(results),
        account.account_number,
        len(rejected),
    )

    print(f"Account {account.account_number} ({account.owner})")
    print(account.render_history())
    print(f"\nBalance: {account.balance}")


if __name__ == "__main__":
    main()
