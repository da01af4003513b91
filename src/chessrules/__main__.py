"""``python -m chessrules`` entry point."""

import sys

from chessrules.cli import main

sys.exit(main())
