"""Side-by-side comparison of the classical and Horner evaluators.

The exact value is supplied by the caller (e.g. from a closed form such as
``(x - 1)**3``). When it is omitted, a double-precision Horner evaluation of
the same coefficients is used as the reference.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from ..core.constants import TRIPLE_ROOT_COEFFS, TRIPLE_ROOT_EXACT, TRIPLE_ROOT_X
from ..core.types import ComparisonResult, MethodOutcome, PrecisionKind
from .evaluation import EVALUATION_STRATEGIES, evaluate_horner, multiplication_count


def _relative_error(abs_error: float, exact: float) -> float:
    if exact != 0.0:
        return abs_error / abs(exact)
    return 0.0 if abs_error == 0.0 else math.inf


def reference_value(coeffs: Sequence[float] | np.ndarray, x: float) -> float:
    """Double-precision reference for polynomials with no closed form at hand."""
    return evaluate_horner(coeffs, x, precision=PrecisionKind.DOUBLE)


def compare_methods(
    coeffs: Sequence[float] | np.ndarray,
    x: float,
    exact: float | None = None,
    precision: PrecisionKind | str = PrecisionKind.SINGLE,
) -> ComparisonResult:
    """Evaluate with both methods and measure each against ``exact``.

    Args:
        coeffs: Coefficients in ascending order, length >= 1.
        x: Evaluation point.
        exact: Known value of p(x); a double-precision reference when None.
        precision: Working precision of both evaluations.

    Returns:
        ComparisonResult holding both outcomes.
    """
    precision = PrecisionKind.parse(precision)
    if exact is None:
        exact = reference_value(coeffs, x)
    exact = float(exact)

    outcomes: dict[str, MethodOutcome] = {}
    for name, fn in EVALUATION_STRATEGIES.items():
        value = fn(coeffs, x, precision=precision)
        abs_error = abs(value - exact)
        outcomes[name] = MethodOutcome(
            method=name,
            value=value,
            abs_error=abs_error,
            rel_error=_relative_error(abs_error, exact),
            multiplications=multiplication_count(name, len(coeffs) - 1),
        )

    return ComparisonResult(
        coefficients=tuple(float(c) for c in coeffs),
        x=float(x),
        precision=precision,
        exact=exact,
        classical=outcomes["classical"],
        horner=outcomes["horner"],
    )


def triple_root_case(precision: PrecisionKind | str = PrecisionKind.SINGLE) -> ComparisonResult:
    """(x - 1)^3 = x^3 - 3x^2 + 3x - 1 at x = 1.001, exact value 1e-9.

    The triple root at 1 makes the expanded form ill-conditioned there: the
    terms are of order 3 with alternating signs and cancel down to 1e-9.
    """
    return compare_methods(TRIPLE_ROOT_COEFFS, TRIPLE_ROOT_X, exact=TRIPLE_ROOT_EXACT, precision=precision)
