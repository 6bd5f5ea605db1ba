"""
sunmoon Quadratic Interpolation

Fits a parabola through three equally spaced samples at x = -1, 0, +1 and
reports its extremum and the roots within [-1, 1].
"""

import math


class QuadraticInterpolation:
    """Parabola through the samples ``y(-1)``, ``y(0)`` and ``y(+1)``.

    Three collinear samples do not describe a parabola. The extremum is then
    at infinity (NaN if the line is flat) and no roots are reported.

    Attributes:
        xe: X of the extremum. Can be outside [-1, 1].
        ye: Y at the extremum.
        is_maximum: True if the extremum is a maximum.
        number_of_roots: Number of roots found in [-1, 1].
        root2: X of the second root, NaN if there are no real roots.
    """

    __slots__ = ("xe", "ye", "is_maximum", "number_of_roots", "_root1", "root2")

    def __init__(self, y_minus: float, y0: float, y_plus: float) -> None:
        a = 0.5 * (y_plus + y_minus) - y0
        b = 0.5 * (y_plus - y_minus)

        self.is_maximum = a < 0.0
        self._root1 = math.nan
        self.root2 = math.nan
        self.number_of_roots = 0

        if a == 0.0:
            self.xe = math.copysign(math.inf, -b) if b != 0.0 else math.nan
            self.ye = math.nan
            return

        self.xe = -b / (2.0 * a)
        self.ye = (a * self.xe + b) * self.xe + y0

        dis = b * b - 4.0 * a * y0
        if dis >= 0.0:
            dx = 0.5 * math.sqrt(dis) / abs(a)
            self._root1 = self.xe - dx
            self.root2 = self.xe + dx
            if abs(self._root1) <= 1.0:
                self.number_of_roots += 1
            if abs(self.root2) <= 1.0:
                self.number_of_roots += 1

    @property
    def root1(self) -> float:
        """X of the first root.

        If the first computed root lies left of -1, the second root is
        returned instead, so that a single root in range is always found
        here.
        """
        if self._root1 < -1.0:
            return self.root2
        return self._root1

    def __repr__(self) -> str:
        return (
            f"QuadraticInterpolation(xe={self.xe}, ye={self.ye}, "
            f"roots={self.number_of_roots}, maximum={self.is_maximum})"
        )
