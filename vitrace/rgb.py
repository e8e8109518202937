"""Floating-point RGB colour values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

_Number = (int, float)


@dataclass(frozen=True, slots=True)
class RGB:
    """A colour with unbounded floating-point channels."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b

    def __add__(self, other: RGB | float) -> RGB:
        if isinstance(other, RGB):
            return RGB(self.r + other.r, self.g + other.g, self.b + other.b)
        if isinstance(other, _Number):
            return RGB(self.r + other, self.g + other, self.b + other)
        return NotImplemented

    def __radd__(self, other: float) -> RGB:
        return self.__add__(other)

    def __mul__(self, other: RGB | float) -> RGB:
        if isinstance(other, RGB):
            return RGB(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, _Number):
            return RGB(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __rmul__(self, other: RGB | float) -> RGB:
        return self.__mul__(other)

    def __truediv__(self, other: RGB | float) -> RGB:
        if isinstance(other, RGB):
            return RGB(self.r / other.r, self.g / other.g, self.b / other.b)
        if isinstance(other, _Number):
            return RGB(self.r / other, self.g / other, self.b / other)
        return NotImplemented

    def luminance(self) -> float:
        """Relative luminance (Rec. 709 weights)."""
        return self.r * 0.2126 + self.g * 0.7152 + self.b * 0.0722

    def is_zero(self) -> bool:
        return self.r == 0.0 and self.g == 0.0 and self.b == 0.0