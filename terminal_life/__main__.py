"""Allow running as ``python -m terminal_life``."""

import sys

from terminal_life.main import main

sys.exit(main())
