"""
sunmoon Shared Type Definitions

Type aliases shared across the ephemeris, numeric and almanac services.
They carry no behaviour; they document the unit a float is expressed in.

Usage:
    from sunmoon.types import Degrees, Radians, ScalarFunction
"""

from typing import Callable, NamedTuple, TypeAlias


# =============================================================================
# Unit Aliases
# =============================================================================

Degrees: TypeAlias = float
Radians: TypeAlias = float
Hours: TypeAlias = float
Kilometers: TypeAlias = float
Meters: TypeAlias = float

# Modified Julian Date, in days
Days: TypeAlias = float

# Time in Julian centuries since J2000.0
JulianCenturies: TypeAlias = float


# =============================================================================
# Callable Types
# =============================================================================

# A continuous real function, as consumed by the root finder and the
# extremum refinement.
ScalarFunction: TypeAlias = Callable[[float], float]


# =============================================================================
# Coordinate Types
# =============================================================================

class DegreesMinutesSeconds(NamedTuple):
    """Sexagesimal angle.

    Only the sign of ``degrees`` is significant; the signs of minutes and
    seconds are ignored.
    """
    degrees: int
    minutes: int = 0
    seconds: float = 0.0
