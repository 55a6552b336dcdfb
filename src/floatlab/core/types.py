"""Core types shared by the epsilon prober and the polynomial evaluator.

These are plain value types: every function in floatlab returns fresh
instances and never mutates its inputs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import numpy as np


class PrecisionKind(str, Enum):
    """Floating-point representation used for working arithmetic."""

    SINGLE = "single"
    DOUBLE = "double"

    @property
    def dtype(self) -> type[np.floating]:
        """numpy scalar type implementing this precision."""
        return np.float32 if self is PrecisionKind.SINGLE else np.float64

    @property
    def label(self) -> str:
        """C-style type name, as shown in reports."""
        return "float" if self is PrecisionKind.SINGLE else "double"

    @classmethod
    def parse(cls, value: str | PrecisionKind) -> PrecisionKind:
        """Parse a precision name (single/float/float32, double/float64)."""
        if isinstance(value, PrecisionKind):
            return value
        key = str(value).strip().lower()
        aliases = {
            "single": cls.SINGLE,
            "float": cls.SINGLE,
            "float32": cls.SINGLE,
            "fp32": cls.SINGLE,
            "double": cls.DOUBLE,
            "float64": cls.DOUBLE,
            "fp64": cls.DOUBLE,
        }
        if key not in aliases:
            raise ValueError(f"Unknown precision {value!r}, expected 'single' or 'double'")
        return aliases[key]


@dataclass(frozen=True)
class ProbeStep:
    """One iteration of the epsilon halving loop, recorded before halving."""

    iteration: int
    trial: float
    one_plus_trial: float


@dataclass(frozen=True)
class EpsilonResult:
    """Result of probing machine epsilon.

    Attributes:
        precision: Precision that was probed.
        epsilon: Smallest power of two t with 1 + t > 1.
        mantissa_bits: Number of halvings performed (stored mantissa width).
        trace: Per-iteration record of the loop.
    """

    precision: PrecisionKind
    epsilon: float
    mantissa_bits: int
    trace: tuple[ProbeStep, ...] = field(default=(), repr=False)

    @property
    def iterations(self) -> int:
        return self.mantissa_bits

    def __iter__(self):
        # Allows ``eps, bits = probe_epsilon(...)``
        yield self.epsilon
        yield self.mantissa_bits

    def to_dict(self) -> dict[str, object]:
        return {
            "precision": self.precision.value,
            "epsilon": self.epsilon,
            "mantissa_bits": self.mantissa_bits,
        }


@dataclass(frozen=True)
class RepresentationInfo:
    """IEEE 754 layout facts for one precision."""

    precision: PrecisionKind
    total_bits: int
    mantissa_bits: int
    exponent_bits: int
    sign_bits: int
    tiny: float
    max: float
    decimal_digits: int
    machine_epsilon: float
    epsilon_exponent: int

    def to_dict(self) -> dict[str, object]:
        return {
            "precision": self.precision.value,
            "total_bits": self.total_bits,
            "mantissa_bits": self.mantissa_bits,
            "exponent_bits": self.exponent_bits,
            "sign_bits": self.sign_bits,
            "tiny": self.tiny,
            "max": self.max,
            "decimal_digits": self.decimal_digits,
            "machine_epsilon": self.machine_epsilon,
            "epsilon_exponent": self.epsilon_exponent,
        }


@dataclass(frozen=True)
class MethodOutcome:
    """Value and error of one evaluation method against the exact value."""

    method: str
    value: float
    abs_error: float
    rel_error: float
    multiplications: int

    def to_dict(self) -> dict[str, object]:
        return {
            "method": self.method,
            "value": self.value,
            "abs_error": self.abs_error,
            "rel_error": self.rel_error,
            "multiplications": self.multiplications,
        }


@dataclass(frozen=True)
class ComparisonResult:
    """Classical vs. Horner evaluation of one polynomial at one point."""

    coefficients: tuple[float, ...]
    x: float
    precision: PrecisionKind
    exact: float
    classical: MethodOutcome
    horner: MethodOutcome

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    @property
    def horner_is_at_least_as_accurate(self) -> bool:
        """True when Horner's absolute error does not exceed the classical one."""
        return self.horner.abs_error <= self.classical.abs_error

    @property
    def methods_agree(self) -> bool:
        return self.classical.value == self.horner.value

    def to_dict(self) -> dict[str, object]:
        return {
            "coefficients": list(self.coefficients),
            "x": self.x,
            "precision": self.precision.value,
            "degree": self.degree,
            "exact": self.exact,
            "classical": self.classical.to_dict(),
            "horner": self.horner.to_dict(),
            "horner_is_at_least_as_accurate": self.horner_is_at_least_as_accurate,
        }
