"""Exception types raised by floatlab."""

from __future__ import annotations


class EmptyCoefficientsError(ValueError):
    """A polynomial needs at least one coefficient (degree >= 0)."""

    def __init__(self, message: str = "Coefficient sequence must contain at least one value") -> None:
        super().__init__(message)


class CoefficientParseError(ValueError):
    """A coefficient entered by the user could not be read as a number."""

    def __init__(self, raw: str, index: int | None = None) -> None:
        self.raw = raw
        self.index = index
        where = f"a[{index}]" if index is not None else "coefficient"
        super().__init__(f"Invalid value for {where}: {raw!r}")
