"""
Entry point for running yardcalc as a module.

Usage:
    python -m yardcalc eval "1 + 2 * 3"
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
