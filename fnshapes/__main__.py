"""Allow ``python -m fnshapes``."""

import sys

from .cli import main

sys.exit(main())
