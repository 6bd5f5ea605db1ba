"""
sunmoon Vector

Immutable three dimensional vector with Cartesian and spherical (polar)
representations.

The polar form is derived once at construction. Vectors built from polar
coordinates keep the given angles as they are, so that no precision is
lost and the azimuth of a vector at the origin stays well defined.
"""

import math
from dataclasses import dataclass, field
from typing import Sequence

from services.ephemeris.scalars import TAU, is_zero
from sunmoon.exceptions import InvalidArgumentError
from sunmoon.types import Radians


@dataclass(frozen=True)
class Vector:
    """A three dimensional vector.

    Attributes:
        x: Cartesian X coordinate
        y: Cartesian Y coordinate
        z: Cartesian Z coordinate
        phi: Azimuthal angle (φ) in radians, [0, 2π)
        theta: Polar angle (θ) in radians, [-π/2, π/2]
        r: Radial distance
    """
    x: float
    y: float
    z: float
    polar: tuple[float, float, float] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "polar", self._to_polar())

    def _to_polar(self) -> tuple[float, float, float]:
        if is_zero(self.x) and is_zero(self.y):
            phi = 0.0
        else:
            phi = math.atan2(self.y, self.x)
        if phi < 0.0:
            phi += TAU

        rho_sqr = self.x * self.x + self.y * self.y
        if is_zero(self.z) and is_zero(rho_sqr):
            theta = 0.0
        else:
            theta = math.atan2(self.z, math.sqrt(rho_sqr))

        r = math.sqrt(rho_sqr + self.z * self.z)
        return phi, theta, r

    @classmethod
    def from_sequence(cls, d: Sequence[float]) -> "Vector":
        """Create a vector from a sequence of exactly 3 Cartesian coordinates.

        Raises:
            InvalidArgumentError: If the sequence does not have 3 elements
        """
        if len(d) != 3:
            raise InvalidArgumentError("invalid vector length", expected=3, actual=len(d))
        return cls(float(d[0]), float(d[1]), float(d[2]))

    @classmethod
    def of_polar(cls, phi: Radians, theta: Radians, r: float = 1.0) -> "Vector":
        """Create a vector from polar coordinates.

        Args:
            phi: Azimuthal angle
            theta: Polar angle
            r: Radial distance, defaults to 1

        Returns:
            Vector keeping the given polar coordinates
        """
        cos_theta = math.cos(theta)
        vec = cls(
            r * math.cos(phi) * cos_theta,
            r * math.sin(phi) * cos_theta,
            r * math.sin(theta),
        )
        object.__setattr__(vec, "polar", (phi, theta, r))
        return vec

    @property
    def phi(self) -> Radians:
        return self.polar[0]

    @property
    def theta(self) -> Radians:
        return self.polar[1]

    @property
    def r(self) -> float:
        return self.polar[2]

    def add(self, vec: "Vector") -> "Vector":
        return Vector(self.x + vec.x, self.y + vec.y, self.z + vec.z)

    def subtract(self, vec: "Vector") -> "Vector":
        return Vector(self.x - vec.x, self.y - vec.y, self.z - vec.z)

    def multiply(self, scalar: float) -> "Vector":
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    def negate(self) -> "Vector":
        return Vector(-self.x, -self.y, -self.z)

    def cross(self, right: "Vector") -> "Vector":
        """Cross product of this vector and ``right``."""
        return Vector(
            self.y * right.z - self.z * right.y,
            self.z * right.x - self.x * right.z,
            self.x * right.y - self.y * right.x,
        )

    def dot(self, right: "Vector") -> float:
        """Dot product of this vector and ``right``."""
        return self.x * right.x + self.y * right.y + self.z * right.z

    def norm(self) -> float:
        return math.sqrt(self.dot(self))

    __add__ = add
    __sub__ = subtract
    __neg__ = negate

    def __mul__(self, scalar: float) -> "Vector":
        return self.multiply(scalar)

    def __str__(self) -> str:
        return f"(x={self.x}, y={self.y}, z={self.z})"
