"""Integer two-dimensional vector."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


@dataclass(frozen=True, order=True)
class Vec2d:
    """An immutable integer vector, ordered by x then y."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Vec2d) -> Vec2d:
        if not isinstance(other, Vec2d):
            return NotImplemented
        return Vec2d(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2d) -> Vec2d:
        if not isinstance(other, Vec2d):
            return NotImplemented
        return Vec2d(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: int) -> Vec2d:
        if not isinstance(scalar, int):
            return NotImplemented
        return Vec2d(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: int) -> Vec2d:
        """Divide each coordinate by an integer, truncating toward zero."""
        if not isinstance(scalar, int):
            return NotImplemented
        return Vec2d(_trunc_div(self.x, scalar), _trunc_div(self.y, scalar))

    def __neg__(self) -> Vec2d:
        return Vec2d(-self.x, -self.y)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def length_squared(self) -> int:
        return self.x * self.x + self.y * self.y

    def dot(self, other: Vec2d) -> int:
        return self.x * other.x + self.y * other.y