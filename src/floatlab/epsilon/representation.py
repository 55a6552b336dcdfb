"""IEEE 754 representation facts for the supported precisions.

The layout (bit widths) is fixed by the standard; range, decimal digits and
epsilon are read from ``np.finfo`` so they reflect the running platform.
"""

from __future__ import annotations

import math

import numpy as np

from ..core.constants import DOUBLE_LAYOUT, SINGLE_LAYOUT
from ..core.types import PrecisionKind, RepresentationInfo

_LAYOUTS = {
    PrecisionKind.SINGLE: SINGLE_LAYOUT,
    PrecisionKind.DOUBLE: DOUBLE_LAYOUT,
}


def representation_info(precision: PrecisionKind | str) -> RepresentationInfo:
    """Describe the binary layout and limits of one precision."""
    precision = PrecisionKind.parse(precision)
    total, mantissa, exponent, sign = _LAYOUTS[precision]
    finfo = np.finfo(precision.dtype)

    eps = float(finfo.eps)
    return RepresentationInfo(
        precision=precision,
        total_bits=total,
        mantissa_bits=mantissa,
        exponent_bits=exponent,
        sign_bits=sign,
        tiny=float(finfo.tiny),
        max=float(finfo.max),
        decimal_digits=int(finfo.precision),
        machine_epsilon=eps,
        epsilon_exponent=int(round(math.log2(eps))),
    )


def all_representation_info() -> list[RepresentationInfo]:
    return [representation_info(p) for p in PrecisionKind]
