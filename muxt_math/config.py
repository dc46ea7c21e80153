"""Centralized configuration for muxt-math.

This module defines:
- Input validation limits (length, parenthesis nesting, tree depth)
- Output formatting precision

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with MUXT_)
"""

import importlib.metadata
import os

try:
    VERSION = importlib.metadata.version("muxt-math")
except importlib.metadata.PackageNotFoundError:
    # Running from a source checkout
    VERSION = "0.1.0"

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("MUXT_MAX_INPUT_LENGTH", "10000"))  # characters
MAX_NESTING_DEPTH = int(
    os.getenv("MUXT_MAX_NESTING_DEPTH", "64")
)  # parenthesis levels
MAX_EXPRESSION_DEPTH = int(
    os.getenv("MUXT_MAX_EXPRESSION_DEPTH", "256")
)  # tree depth, bounds recursion in the rewrite engine

# Output
OUTPUT_PRECISION = int(os.getenv("MUXT_OUTPUT_PRECISION", "6"))  # significant digits

# Largest numeric residual accepted when cross-checking results with SymPy
VERIFY_TOLERANCE = float(os.getenv("MUXT_VERIFY_TOLERANCE", "1e-9"))
