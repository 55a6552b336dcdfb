"""Text rendering and coefficient input for the command-line reports.

Nothing here does numerical work; every function formats results produced by
``floatlab.epsilon`` and ``floatlab.poly`` or reads coefficients for them.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import TextIO

from .core.constants import (
    COMPARISON_PRINT_DIGITS,
    DOUBLE_PRINT_DIGITS,
    SINGLE_PRINT_DIGITS,
    TRACE_EVERY,
    TRACE_HEAD,
)
from .core.errors import CoefficientParseError
from .core.types import (
    ComparisonResult,
    EpsilonResult,
    PrecisionKind,
    ProbeStep,
    RepresentationInfo,
)

RULE = "=" * 68
THIN_RULE = "-" * 66


def _digits(precision: PrecisionKind) -> int:
    return SINGLE_PRINT_DIGITS if precision is PrecisionKind.SINGLE else DOUBLE_PRINT_DIGITS


def banner(title: str) -> str:
    return f"{RULE}\n  {title}\n{RULE}"


# ---------------------------------------------------------------------------
# Epsilon
# ---------------------------------------------------------------------------


def select_trace_rows(
    trace: Iterable[ProbeStep],
    head: int = TRACE_HEAD,
    every: int = TRACE_EVERY,
) -> list[ProbeStep]:
    """Keep the first ``head`` iterations and then every ``every``-th one."""
    if every < 1:
        raise ValueError(f"every must be >= 1, got {every}")
    return [s for s in trace if s.iteration < head or s.iteration % every == 0]


def render_epsilon(result: EpsilonResult, head: int = TRACE_HEAD, every: int = TRACE_EVERY) -> str:
    """Iteration table and summary for one epsilon probe."""
    d = _digits(result.precision)
    lines = [
        f"=== Machine epsilon for {result.precision.label.upper()} ===",
        "Iteration\tEpsilon\t\t\t1.0 + epsilon",
        THIN_RULE,
    ]
    for step in select_trace_rows(result.trace, head, every):
        lines.append(f"{step.iteration}\t\t{step.trial:.{d}e}\t{step.one_plus_trial:.{d}f}")
    lines.append("")
    lines.append(f"Computed machine epsilon: {result.epsilon:.{d}e}")
    lines.append(f"Mantissa bits (iterations): {result.mantissa_bits}")
    return "\n".join(lines)


def render_representation(info: RepresentationInfo) -> str:
    d = _digits(info.precision)
    lines = [
        f"{info.precision.label.upper()} ({info.total_bits} bit):",
        f"  Total bits:      {info.total_bits}",
        f"  Mantissa bits:   {info.mantissa_bits} (+ 1 implicit = {info.mantissa_bits + 1} bits)",
        f"  Exponent bits:   {info.exponent_bits}",
        f"  Sign bits:       {info.sign_bits}",
        f"  Range:           {info.tiny:.2e} to {info.max:.2e}",
        f"  Decimal digits:  {info.decimal_digits}",
        f"  Machine epsilon: {info.machine_epsilon:.{d}e}",
        f"  Epsilon = 2^({info.epsilon_exponent})",
    ]
    return "\n".join(lines)


def render_representation_table(infos: Sequence[RepresentationInfo]) -> str:
    body = "\n\n".join(render_representation(i) for i in infos)
    single = next((i for i in infos if i.precision is PrecisionKind.SINGLE), None)
    if single is not None:
        n = single.decimal_digits
        body += (
            f"\n\n  Meaning of {n} decimal digits for float:\n"
            f"  - any decimal number with {n} significant digits survives a round trip\n"
            f"    through float and back without losing those {n} digits\n"
            f"  - it does NOT mean every {n}-digit decimal is stored exactly\n"
            f"    (only some decimals have an exact binary representation)"
        )
    return f"=== IEEE 754 REPRESENTATION ===\n\n{body}"


def render_conclusions(results: Sequence[EpsilonResult] = ()) -> str:
    lines = [
        banner("CONCLUSIONS"),
        "1. Machine epsilon is the smallest number such that 1.0 + eps > 1.0",
    ]
    for i, r in enumerate(results, start=2):
        lines.append(f"{i}. For {r.precision.label}: eps = 2^(-{r.mantissa_bits}) ~ {r.epsilon:.3g}")
    n = len(results) + 2
    lines.append(f"{n}. The number of iterations equals the mantissa bit width")
    lines.append(f"{n + 1}. Never compare floating-point numbers with ==")
    lines.append(RULE)
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Polynomials
# ---------------------------------------------------------------------------


def format_coefficient(value: float) -> str:
    """Shortest general form with 6 significant digits (``%g``)."""
    return f"{value:g}"


def format_polynomial(coeffs: Sequence[float]) -> str:
    """Render ascending coefficients highest degree first.

    ``[-1, 3, -3, 1]`` -> ``1*x^3 -3*x^2 + 3*x^1 -1``. Non-negative
    coefficients after the leading term get `` + ``; negative ones get a
    single space since their sign is already printed.
    """
    if len(coeffs) == 0:
        return ""
    n = len(coeffs) - 1
    parts: list[str] = []
    for i in range(n, -1, -1):
        c = float(coeffs[i])
        if i != n:
            parts.append(" + " if c >= 0.0 else " ")
        term = format_coefficient(c)
        parts.append(term if i == 0 else f"{term}*x^{i}")
    return "".join(parts)


def render_comparison(result: ComparisonResult, title: str | None = None) -> str:
    d = COMPARISON_PRINT_DIGITS
    lines = [
        banner(title or "COMPARISON: Classical method vs Horner"),
        f"Expanded form: {format_polynomial(result.coefficients)}",
        f"Evaluation point: x0 = {result.x:g}",
        f"Working precision: {result.precision.label}",
        THIN_RULE,
        "RESULTS:",
        f"Exact value:      {result.exact:.{d}g}",
        f"Classical method: {result.classical.value:.{d}g}"
        f"   (abs err {result.classical.abs_error:.3e}, {result.classical.multiplications} mult)",
        f"Horner method:    {result.horner.value:.{d}g}"
        f"   (abs err {result.horner.abs_error:.3e}, {result.horner.multiplications} mult)",
        "",
    ]
    verdict = "at least as accurate as" if result.horner_is_at_least_as_accurate else "less accurate than"
    lines.append(f"Horner is {verdict} the classical method here.")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Coefficient input
# ---------------------------------------------------------------------------

_SEPARATORS = re.compile(r"[,\s;]+")


def _parse_one(raw: str, index: int | None) -> float:
    try:
        return float(raw)
    except ValueError:
        raise CoefficientParseError(raw, index) from None


def parse_coefficients(text: str) -> list[float]:
    """Parse ``"a0, a1, ..."`` (commas, semicolons or whitespace)."""
    tokens = [t for t in _SEPARATORS.split(text.strip()) if t]
    return [_parse_one(t, i) for i, t in enumerate(tokens)]


def read_coefficients(degree: int, stdin: TextIO, stdout: TextIO) -> list[float]:
    """Prompt for ``degree + 1`` coefficients a[0] .. a[degree], one per line.

    Raises:
        CoefficientParseError: On a malformed or missing entry.
    """
    if degree < 0:
        raise ValueError(f"degree must be >= 0, got {degree}")
    coeffs: list[float] = []
    for i in range(degree + 1):
        stdout.write(f"a[{i}] = ")
        stdout.flush()
        line = stdin.readline()
        if not line:
            raise CoefficientParseError("<end of input>", i)
        coeffs.append(_parse_one(line.strip(), i))
    return coeffs
