"""
sunmoon Moon Illumination

Illuminated fraction, phase angle and bright limb angle of the moon.
"""

import math
from dataclasses import dataclass
from datetime import datetime

from services.almanac.moon_phase import Phase
from services.ephemeris import moon, sun
from sunmoon.params import julian_date
from sunmoon.types import Degrees


@dataclass(frozen=True)
class MoonIllumination:
    """Illumination of the moon.

    Attributes:
        fraction: Illuminated fraction, 0.0 (new moon) to 1.0 (full moon)
        phase: Phase angle in degrees, -180 to 180. Negative while waxing,
            0 at full moon, positive while waning.
        angle: Angle of the bright limb's midpoint, in degrees. Negative
            means the left limb is illuminated.
    """
    fraction: float
    phase: Degrees
    angle: Degrees

    @property
    def closest_phase(self) -> Phase:
        """Phase preset closest to the current phase angle."""
        return Phase.to_phase(self.phase + 180.0)

    def __str__(self) -> str:
        return (
            f"MoonIllumination[fraction={self.fraction}, phase={self.phase}°, "
            f"angle={self.angle}°]"
        )


def _sign(value: float) -> float:
    if value > 0.0:
        return 1.0
    if value < 0.0:
        return -1.0
    return value


def compute_moon_illumination(when: datetime) -> MoonIllumination:
    """
    Compute the illumination of the moon.

    Illumination does not depend on the observer's location.

    Args:
        when: Date and time (naive means UTC)

    Returns:
        MoonIllumination
    """
    t = julian_date(when)
    s = sun.position(t)
    m = moon.position(t)

    phi = math.pi - math.acos(m.dot(s) / (m.r * s.r))
    sun_moon = m.cross(s)
    angle = math.atan2(
        math.cos(s.theta) * math.sin(s.phi - m.phi),
        math.sin(s.theta) * math.cos(m.theta)
        - math.cos(s.theta) * math.sin(m.theta) * math.cos(s.phi - m.phi),
    )

    return MoonIllumination(
        fraction=(1 + math.cos(phi)) / 2,
        phase=math.degrees(phi * _sign(sun_moon.theta)),
        angle=math.degrees(angle),
    )
