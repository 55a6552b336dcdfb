"""Core module: shared types, errors, configuration and logging."""

from .errors import CoefficientParseError, EmptyCoefficientsError
from .types import (
    ComparisonResult,
    EpsilonResult,
    MethodOutcome,
    PrecisionKind,
    ProbeStep,
    RepresentationInfo,
)

__all__ = [
    "PrecisionKind",
    "ProbeStep",
    "EpsilonResult",
    "RepresentationInfo",
    "MethodOutcome",
    "ComparisonResult",
    "EmptyCoefficientsError",
    "CoefficientParseError",
]
