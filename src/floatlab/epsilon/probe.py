"""Empirical machine epsilon.

Interface:
    probe_epsilon(precision) -> EpsilonResult(epsilon, mantissa_bits, trace)

The trial value starts at 0.5 and is halved until ``1 + t`` rounds back to
exactly 1 in the working precision. The last trial that still made a
difference (the final ``t`` doubled) is epsilon, and the number of halvings
is the stored mantissa width: 23 for binary32, 52 for binary64.

All arithmetic is done on numpy scalars of the requested dtype so that no
intermediate value is silently widened to Python's double.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..core.constants import EPSILON_START
from ..core.types import EpsilonResult, PrecisionKind, ProbeStep


def probe_epsilon(precision: PrecisionKind | str = PrecisionKind.DOUBLE) -> EpsilonResult:
    """Determine machine epsilon by repeated halving.

    Args:
        precision: Working precision (``PrecisionKind`` or its name).

    Returns:
        EpsilonResult with the epsilon, the iteration count and the loop trace.
    """
    precision = PrecisionKind.parse(precision)
    dtype = precision.dtype
    one = dtype(1.0)
    two = dtype(2.0)

    iterations = 0
    trial = dtype(EPSILON_START)
    value = one + trial
    trace: list[ProbeStep] = []

    while value > one:
        trace.append(ProbeStep(iteration=iterations, trial=float(trial), one_plus_trial=float(value)))
        trial = trial / two
        value = one + trial
        iterations += 1

    # Undo the halving that made 1 + t collapse to 1
    trial = trial * two

    return EpsilonResult(
        precision=precision,
        epsilon=float(trial),
        mantissa_bits=iterations,
        trace=tuple(trace),
    )


def probe_all(
    precisions: Iterable[PrecisionKind | str] = (PrecisionKind.SINGLE, PrecisionKind.DOUBLE),
) -> list[EpsilonResult]:
    """Probe every requested precision, in the given order."""
    return [probe_epsilon(p) for p in precisions]
