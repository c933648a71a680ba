"""Allow ``python -m tinylex FILE``."""

import sys

from tinylex.cli import main

sys.exit(main())
