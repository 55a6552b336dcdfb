"""Test the machine epsilon probe."""

import numpy as np
import pytest

from floatlab.core.types import PrecisionKind
from floatlab.epsilon import probe_all, probe_epsilon


@pytest.mark.parametrize(
    "precision, bits",
    [(PrecisionKind.SINGLE, 23), (PrecisionKind.DOUBLE, 52)],
)
def test_iterations_equal_mantissa_width(precision, bits):
    result = probe_epsilon(precision)
    assert result.mantissa_bits == bits
    assert result.iterations == bits
    assert result.epsilon == 2.0**-bits


@pytest.mark.parametrize("precision", list(PrecisionKind))
def test_epsilon_is_smallest_distinguishable_increment(precision):
    """1 + eps > 1 while 1 + eps/2 == 1 in the probed precision."""
    dtype = precision.dtype
    eps = dtype(probe_epsilon(precision).epsilon)
    one = dtype(1.0)

    assert one + eps > one
    assert one + eps / dtype(2.0) == one


@pytest.mark.parametrize("precision", list(PrecisionKind))
def test_epsilon_matches_finfo(precision):
    assert probe_epsilon(precision).epsilon == float(np.finfo(precision.dtype).eps)


def test_accepts_precision_names():
    assert probe_epsilon("single").precision is PrecisionKind.SINGLE
    assert probe_epsilon("float64").precision is PrecisionKind.DOUBLE


def test_unknown_precision_rejected():
    with pytest.raises(ValueError, match="Unknown precision"):
        probe_epsilon("half")


def test_result_unpacks_as_pair():
    eps, bits = probe_epsilon(PrecisionKind.DOUBLE)
    assert bits == 52
    assert eps == 2.0**-52


def test_trace_records_every_iteration():
    result = probe_epsilon(PrecisionKind.SINGLE)

    assert len(result.trace) == result.mantissa_bits
    first = result.trace[0]
    assert (first.iteration, first.trial, first.one_plus_trial) == (0, 0.5, 1.5)

    # Each row halves the previous trial
    for prev, cur in zip(result.trace, result.trace[1:]):
        assert cur.iteration == prev.iteration + 1
        assert cur.trial == prev.trial / 2

    # The last trial that still changed 1.0 is epsilon itself
    assert result.trace[-1].trial == result.epsilon
    assert all(step.one_plus_trial > 1.0 for step in result.trace)


def test_probe_all_order():
    results = probe_all()
    assert [r.precision for r in results] == [PrecisionKind.SINGLE, PrecisionKind.DOUBLE]
    assert [r.mantissa_bits for r in results] == [23, 52]
