"""Test the (x - 1)^3 cancellation scenario.

Near the triple root at x = 1 the expanded terms are of order 3 with
alternating signs, so in float32 both methods lose most significant digits.
Horner must still land at least as close to the exact value.
"""

import math

import numpy as np
import pytest

from floatlab.core.constants import TRIPLE_ROOT_COEFFS, TRIPLE_ROOT_EXACT, TRIPLE_ROOT_X
from floatlab.core.types import PrecisionKind
from floatlab.poly import compare_methods, evaluate_classical, evaluate_horner, triple_root_case


def test_exact_reference_value():
    assert TRIPLE_ROOT_EXACT == 1.0e-9
    assert math.isclose((TRIPLE_ROOT_X - 1.0) ** 3, TRIPLE_ROOT_EXACT, rel_tol=1e-9)


def test_horner_at_least_as_close_in_single_precision():
    classical = evaluate_classical(TRIPLE_ROOT_COEFFS, TRIPLE_ROOT_X, precision=PrecisionKind.SINGLE)
    horner = evaluate_horner(TRIPLE_ROOT_COEFFS, TRIPLE_ROOT_X, precision=PrecisionKind.SINGLE)

    assert abs(horner - TRIPLE_ROOT_EXACT) <= abs(classical - TRIPLE_ROOT_EXACT)


def test_single_precision_values():
    """Both results are small multiples of the float32 spacing at 1.0."""
    ulp = float(np.finfo(np.float32).eps)
    assert evaluate_classical(TRIPLE_ROOT_COEFFS, TRIPLE_ROOT_X) == 2 * ulp
    assert evaluate_horner(TRIPLE_ROOT_COEFFS, TRIPLE_ROOT_X) == ulp


def test_neither_method_is_exact_in_single():
    result = triple_root_case(PrecisionKind.SINGLE)
    assert result.classical.value != TRIPLE_ROOT_EXACT
    assert result.horner.value != TRIPLE_ROOT_EXACT
    assert result.horner_is_at_least_as_accurate


def test_triple_root_case_fields():
    result = triple_root_case()
    assert result.coefficients == TRIPLE_ROOT_COEFFS
    assert result.x == TRIPLE_ROOT_X
    assert result.exact == TRIPLE_ROOT_EXACT
    assert result.degree == 3
    assert result.precision is PrecisionKind.SINGLE
    assert result.classical.multiplications == 10
    assert result.horner.multiplications == 3
    assert result.horner.rel_error == pytest.approx(result.horner.abs_error / TRIPLE_ROOT_EXACT)


def test_double_precision_is_much_closer():
    single = triple_root_case(PrecisionKind.SINGLE)
    double = triple_root_case(PrecisionKind.DOUBLE)
    assert double.horner.abs_error < single.horner.abs_error
    assert double.classical.abs_error < single.classical.abs_error


def test_compare_without_exact_uses_double_reference():
    result = compare_methods([1.0, -2.0, 1.0], 3.0)
    assert result.exact == 4.0
    assert result.classical.abs_error == 0.0
    assert result.horner.abs_error == 0.0
    assert result.methods_agree


def test_zero_exact_relative_error():
    result = compare_methods([0.0, 1.0], 0.0, exact=0.0)
    assert result.horner.rel_error == 0.0
    assert result.classical.rel_error == 0.0


def test_to_dict_is_json_ready():
    d = triple_root_case().to_dict()
    assert d["precision"] == "single"
    assert d["coefficients"] == [-1.0, 3.0, -3.0, 1.0]
    assert d["horner"]["method"] == "horner"
    assert d["horner_is_at_least_as_accurate"] is True
