"""
Entry point for module execution (``python -m go_unexport``).

This module delegates execution to the CLI handler in ``go_unexport.cli.__main__``.
"""

import sys
from go_unexport.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
