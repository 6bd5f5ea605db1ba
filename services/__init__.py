"""
sunmoon Services Package

This package contains the sunmoon computation modules organized by function.

Core Services
=============

Ephemeris (services.ephemeris)
------------------------------
- Vector, Matrix: 3D vector and 3x3 matrix algebra
- extended_math: refraction, parallax, frame rotations, extremum refinement
- JulianDate: Modified Julian Date, Julian centuries, sidereal time
- sun, moon: low-precision position models

Numeric (services.numeric)
--------------------------
- QuadraticInterpolation: parabola through three equally spaced samples
- pegasus: bracketed root finder

Almanac (services.almanac)
--------------------------
- compute_sun_times / compute_moon_times: rise, set, noon and nadir
- compute_moon_phase: next time the moon reaches a phase
- compute_sun_position / compute_moon_position: horizontal positions
- compute_moon_illumination: illuminated fraction and limb angle
- AlmanacService: location-bound facade

Unified Access
--------------
    from services.almanac import AlmanacService
    from sunmoon.params import Location

    almanac = AlmanacService(Location(50.938056, 6.956944), "Europe/Berlin")
    times = almanac.sun_times()
"""

__version__ = "0.1.0"
