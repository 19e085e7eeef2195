"""Entry point: python -m gs1dl"""

from __future__ import annotations

import sys

from gs1dl.cli import main

if __name__ == "__main__":
    sys.exit(main())
