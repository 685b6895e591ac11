"""A small complex-number value type."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from numbers import Real


class ComplexNumberError(ValueError):
    """Raised when a complex number with a non-zero imaginary part is used as a real."""


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text


@dataclass
class ComplexNumber:
    """A complex number with float real and imaginary parts."""

    real: float = 0.0
    imag: float = 0.0

    def __post_init__(self) -> None:
        self.real = float(self.real)
        self.imag = float(self.imag)

    @classmethod
    def from_real(cls, num: float) -> ComplexNumber:
        """Build a complex number with zero imaginary part."""
        return cls(num, 0.0)

    def to_tuple(self) -> tuple[float, float]:
        """Return ``(real, imag)``."""
        return (self.real, self.imag)

    def _parts(self, other: object) -> tuple[float, float] | None:
        if isinstance(other, ComplexNumber):
            return other.real, other.imag
        if isinstance(other, Real):
            return float(other), 0.0
        return None

    def __add__(self, other: object) -> ComplexNumber:
        parts = self._parts(other)
        if parts is None:
            return NotImplemented
        real, imag = parts
        return ComplexNumber(self.real + real, self.imag + imag)

    def __radd__(self, other: object) -> ComplexNumber:
        return self.__add__(other)

    def __iadd__(self, other: object) -> ComplexNumber:
        parts = self._parts(other)
        if parts is None:
            return NotImplemented
        real, imag = parts
        self.real += real
        self.imag += imag
        return self

    def __float__(self) -> float:
        if self.imag != 0.0:
            raise ComplexNumberError(
                "Cannot convert ComplexNumber with non-zero imaginary part into float"
            )
        return self.real

    def __str__(self) -> str:
        return f"{_format_float(self.real)} + {_format_float(self.imag)}i"