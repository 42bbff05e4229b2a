"""Allow `python -m rumble_engine`."""

import sys

from .cli import main

sys.exit(main())
