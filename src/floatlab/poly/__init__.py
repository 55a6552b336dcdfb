"""Polynomial evaluation: classical summation and Horner's scheme."""

from .compare import compare_methods, reference_value, triple_root_case
from .evaluation import (
    EVALUATION_STRATEGIES,
    addition_count,
    evaluate_classical,
    evaluate_horner,
    get_strategy,
    multiplication_count,
)

__all__ = [
    "evaluate_classical",
    "evaluate_horner",
    "EVALUATION_STRATEGIES",
    "get_strategy",
    "multiplication_count",
    "addition_count",
    "compare_methods",
    "reference_value",
    "triple_root_case",
]
