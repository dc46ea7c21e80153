"""Main entry point for running muxt_math as a module.

This allows running muxt-math with:
    python -m muxt_math -e "3 + 5 * 4"
    python -m muxt_math -e "3 * x = 6" --solve x
    python -m muxt_math --version

This is equivalent to running:
    python -m muxt_math.cli
    muxt
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
