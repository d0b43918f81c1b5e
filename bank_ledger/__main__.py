import sys

from bank_ledger.console import main

sys.exit(main())
