"""floatlab: machine epsilon and classical vs. Horner polynomial evaluation."""

__version__ = "0.1.0"

from floatlab.core import EmptyCoefficientsError, EpsilonResult, PrecisionKind
from floatlab.epsilon import probe_epsilon
from floatlab.poly import compare_methods, evaluate_classical, evaluate_horner

__all__ = [
    "__version__",
    "PrecisionKind",
    "EpsilonResult",
    "EmptyCoefficientsError",
    "probe_epsilon",
    "evaluate_classical",
    "evaluate_horner",
    "compare_methods",
]
