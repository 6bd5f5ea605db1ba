"""
sunmoon Matrix

Immutable 3x3 matrix, stored row-major. Instances are created through the
named constructors (identity and the axis rotations) or by combining other
matrices; none of the operations modify their operands.
"""

import math
from typing import Iterable, Sequence

from services.ephemeris.vector import Vector
from sunmoon.exceptions import IndexOutOfRangeError, InvalidArgumentError
from sunmoon.types import Radians


class Matrix:
    """A three dimensional matrix.

    Equality and hashing compare all nine components exactly.
    """

    __slots__ = ("_mx",)

    def __init__(self, values: Iterable[float]) -> None:
        mx = tuple(float(v) for v in values)
        if len(mx) != 9:
            raise InvalidArgumentError("requires 9 values", expected=9, actual=len(mx))
        object.__setattr__(self, "_mx", mx)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("Matrix is immutable")

    # -------------------------------------------------------------------------
    # Named constructors
    # -------------------------------------------------------------------------

    @classmethod
    def identity(cls) -> "Matrix":
        return cls((
            1.0, 0.0, 0.0,
            0.0, 1.0, 0.0,
            0.0, 0.0, 1.0,
        ))

    @classmethod
    def rotate_x(cls, angle: Radians) -> "Matrix":
        """Matrix that rotates a vector by the given angle about the X axis."""
        s = math.sin(angle)
        c = math.cos(angle)
        return cls((
            1.0, 0.0, 0.0,
            0.0, c, s,
            0.0, -s, c,
        ))

    @classmethod
    def rotate_y(cls, angle: Radians) -> "Matrix":
        """Matrix that rotates a vector by the given angle about the Y axis."""
        s = math.sin(angle)
        c = math.cos(angle)
        return cls((
            c, 0.0, -s,
            0.0, 1.0, 0.0,
            s, 0.0, c,
        ))

    @classmethod
    def rotate_z(cls, angle: Radians) -> "Matrix":
        """Matrix that rotates a vector by the given angle about the Z axis."""
        s = math.sin(angle)
        c = math.cos(angle)
        return cls((
            c, s, 0.0,
            -s, c, 0.0,
            0.0, 0.0, 1.0,
        ))

    # -------------------------------------------------------------------------
    # Algebra
    # -------------------------------------------------------------------------

    def get(self, r: int, c: int) -> float:
        """Value at row ``r`` and column ``c``, both in 0..2.

        Raises:
            IndexOutOfRangeError: If row or column is out of range
        """
        if r < 0 or r > 2 or c < 0 or c > 2:
            raise IndexOutOfRangeError(r, c)
        return self._mx[r * 3 + c]

    def __getitem__(self, index: tuple[int, int]) -> float:
        return self.get(*index)

    def transpose(self) -> "Matrix":
        return Matrix(self._mx[c * 3 + r] for r in range(3) for c in range(3))

    def negate(self) -> "Matrix":
        return Matrix(-v for v in self._mx)

    def add(self, right: "Matrix") -> "Matrix":
        return Matrix(a + b for a, b in zip(self._mx, right._mx))

    def subtract(self, right: "Matrix") -> "Matrix":
        return Matrix(a - b for a, b in zip(self._mx, right._mx))

    def multiply(self, right):
        """Multiply this matrix with a Matrix, a Vector or a scalar.

        A Vector is treated as a column vector. The resulting Vector only
        carries Cartesian coordinates; its polar form is derived anew.
        """
        if isinstance(right, Matrix):
            return Matrix(
                sum(self._mx[i * 3 + k] * right._mx[k * 3 + j] for k in range(3))
                for i in range(3)
                for j in range(3)
            )
        if isinstance(right, Vector):
            vec = (right.x, right.y, right.z)
            return Vector.from_sequence([
                sum(self._mx[i * 3 + j] * vec[j] for j in range(3))
                for i in range(3)
            ])
        return Matrix(v * right for v in self._mx)

    def to_rows(self) -> tuple[tuple[float, ...], ...]:
        return tuple(self._mx[r * 3:r * 3 + 3] for r in range(3))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        return cls(v for row in rows for v in row)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._mx == other._mx

    def __hash__(self) -> int:
        return hash(self._mx)

    def __str__(self) -> str:
        rows = ", ".join("[" + ", ".join(str(v) for v in row) + "]" for row in self.to_rows())
        return f"[{rows}]"

    def __repr__(self) -> str:
        return f"Matrix({self})"
