#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Allow running gdocs2html as ``python -m gdocs2html``."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
