"""Allow `python -m conventional_commit_parser`."""

import sys

from .cli import main

sys.exit(main())
