"""Polynomial evaluation: classical summation vs. Horner's scheme.

Coefficients are stored in ascending order: ``coeffs[i]`` multiplies ``x**i``,
so ``[a0, a1, ..., an]`` is ``p(x) = a0 + a1*x + ... + an*x**n``.

Interface:
    evaluate_classical(coeffs, x, precision) -> float
    evaluate_horner(coeffs, x, precision) -> float

Both functions round the coefficients and the point to the working precision
first and then carry out every multiply and add on numpy scalars of that
dtype. The result is returned as a Python float; widening float32 to double
is exact, so the returned value is the working-precision result unchanged.

The classical method deliberately recomputes ``x**i`` from scratch for every
term with ``i`` multiplications. Its O(n^2) cost and its rounding profile are
what the comparison with Horner measures, so it must stay in this form.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

import numpy as np

from ..core.errors import EmptyCoefficientsError
from ..core.types import PrecisionKind

Evaluator = Callable[..., float]


def _prepare(
    coeffs: Sequence[float] | np.ndarray,
    x: float,
    precision: PrecisionKind | str,
) -> tuple[np.ndarray, np.floating]:
    """Validate inputs and round them to the working precision."""
    precision = PrecisionKind.parse(precision)
    dtype = precision.dtype

    try:
        raw = np.asarray(coeffs, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Coefficients must be real numbers: {exc}") from exc

    if raw.ndim != 1:
        raise ValueError(f"Coefficients must be a 1-D sequence, got shape {raw.shape}")
    if raw.size == 0:
        raise EmptyCoefficientsError()

    with np.errstate(over="ignore"):
        a = raw.astype(dtype)
        x0 = dtype(x)

    if not np.all(np.isfinite(a)):
        raise ValueError(f"Coefficients must be finite in {precision.value} precision: {raw.tolist()}")
    # Degree 0 never multiplies by x, so any point is accepted
    if a.size > 1 and not np.isfinite(x0):
        raise ValueError(f"Evaluation point must be finite in {precision.value} precision: {x!r}")

    return a, x0


def evaluate_classical(
    coeffs: Sequence[float] | np.ndarray,
    x: float,
    precision: PrecisionKind | str = PrecisionKind.SINGLE,
) -> float:
    """Evaluate a polynomial by direct term-by-term summation.

    Computes ``a0 + a1*x + a2*x**2 + ... + an*x**n``, building each power by
    ``i`` repeated multiplications.

    Cost: n(n+1)/2 + (n+1) multiplications, n additions (plus the initial
    add to zero).

    Args:
        coeffs: Coefficients in ascending order, length >= 1.
        x: Evaluation point.
        precision: Working precision.

    Returns:
        p(x) computed in the working precision.

    Raises:
        EmptyCoefficientsError: If ``coeffs`` is empty.
        ValueError: If coefficients are not finite real numbers, or if the
            polynomial has degree >= 1 and x is not finite in the working
            precision.
    """
    a, x0 = _prepare(coeffs, x, precision)
    one = a.dtype.type(1.0)
    n = a.size - 1

    total = a.dtype.type(0.0)
    for i in range(n + 1):
        xp = one
        for _ in range(i):
            xp = xp * x0
        total = total + a[i] * xp
    return float(total)


def evaluate_horner(
    coeffs: Sequence[float] | np.ndarray,
    x: float,
    precision: PrecisionKind | str = PrecisionKind.SINGLE,
) -> float:
    """Evaluate a polynomial with Horner's nested multiplication.

    Rewrites ``a0 + a1*x + ... + an*x**n`` as
    ``a0 + x*(a1 + x*(a2 + ... + x*(a_{n-1} + x*an)))`` and iterates
    ``r = r*x + a[i]`` from the highest degree down.

    Cost: n multiplications, n additions.

    Args:
        coeffs: Coefficients in ascending order, length >= 1.
        x: Evaluation point.
        precision: Working precision.

    Returns:
        p(x) computed in the working precision.

    Raises:
        EmptyCoefficientsError: If ``coeffs`` is empty.
        ValueError: If coefficients are not finite real numbers, or if the
            polynomial has degree >= 1 and x is not finite in the working
            precision.
    """
    a, x0 = _prepare(coeffs, x, precision)
    n = a.size - 1

    r = a[n]
    for i in range(n - 1, -1, -1):
        r = r * x0 + a[i]
    return float(r)


EVALUATION_STRATEGIES: dict[str, Evaluator] = {
    "classical": evaluate_classical,
    "horner": evaluate_horner,
}


def get_strategy(name: str) -> Evaluator:
    """Look up an evaluation method by name ("classical" or "horner")."""
    try:
        return EVALUATION_STRATEGIES[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown evaluation method {name!r}, expected one of {sorted(EVALUATION_STRATEGIES)}"
        ) from None


def multiplication_count(method: str, degree: int) -> int:
    """Multiplications performed by ``method`` for a degree-``degree`` polynomial.

    Classical: sum of i for i in 0..n to build the powers, plus one per term.
    Horner: one per step.
    """
    if degree < 0:
        raise ValueError(f"degree must be >= 0, got {degree}")
    get_strategy(method)
    if method.lower() == "classical":
        return degree * (degree + 1) // 2 + (degree + 1)
    return degree


def addition_count(method: str, degree: int) -> int:
    """Additions performed beyond the initial accumulator, n for both methods."""
    if degree < 0:
        raise ValueError(f"degree must be >= 0, got {degree}")
    get_strategy(method)
    return degree
