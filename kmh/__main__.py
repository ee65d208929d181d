"""Run the command-line entry point with ``python -m kmh``."""

import sys

from .cli import main

sys.exit(main())
