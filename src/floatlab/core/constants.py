"""Core constants for floatlab.

This module defines:
- IEEE 754 layout of the supported precisions
- The canonical ill-conditioned evaluation case
- Narration defaults for the epsilon iteration table
"""

from __future__ import annotations

# IEEE 754 binary32 / binary64 layouts: (total, stored mantissa, exponent, sign)
SINGLE_LAYOUT = (32, 23, 8, 1)
DOUBLE_LAYOUT = (64, 52, 11, 1)

# Initial trial value of the epsilon halving loop
EPSILON_START = 0.5

# Canonical instability case: (x - 1)^3 expanded, ascending order
TRIPLE_ROOT_COEFFS = (-1.0, 3.0, -3.0, 1.0)
TRIPLE_ROOT_X = 1.001
TRIPLE_ROOT_EXACT = 1.0e-9  # (1.001 - 1)^3

# Iteration table narration: rows < TRACE_HEAD plus every TRACE_EVERY-th row
TRACE_HEAD = 10
TRACE_EVERY = 5

# Printing precision (significant digits after the point) per C type
SINGLE_PRINT_DIGITS = 7
DOUBLE_PRINT_DIGITS = 16
COMPARISON_PRINT_DIGITS = 10
