"""Allow ``python -m tagcloud``."""

import sys

from .cli import main

sys.exit(main())
