"""Run the Domolect REPL: ``python -m domolect``."""

import sys

from domolect.adapters.cli.repl import main

if __name__ == "__main__":
    sys.exit(main())
