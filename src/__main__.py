"""Allow ``python -m src``."""

import sys

from src.cli.main import main

sys.exit(main())
