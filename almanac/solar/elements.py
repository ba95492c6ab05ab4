"""Low-precision solar elements as functions of the Julian century T.

Coefficients follow Meeus, Astronomical Algorithms, chapters 12, 22 and 25.
Angles are returned in degrees.
"""

import math

from .angles import normalize_degrees_360


def mean_longitude(t: float) -> float:
    return normalize_degrees_360(280.46645 + 36000.76983 * t + 0.0003032 * t * t)


def mean_anomaly(t: float) -> float:
    return normalize_degrees_360(
        357.52910 + 35999.05030 * t - 0.0001559 * t * t - 0.00000048 * t * t * t
    )


def earth_orbit_eccentricity(t: float) -> float:
    return 0.016708617 - 0.000042037 * t - 0.0000001236 * t * t


def equation_center(t: float) -> float:
    m = math.radians(mean_anomaly(t))
    return (
        (1.9146 - 0.004817 * t - 0.000014 * t * t) * math.sin(m)
        + (0.019993 - 0.000101 * t) * math.sin(2.0 * m)
        + 0.000290 * math.sin(3.0 * m)
    )


def ascending_node_longitude(t: float) -> float:
    """Longitude of the Moon's ascending node (Omega) used by the nutation terms."""
    return 125.04 - 1934.136 * t


def ecliptic_mean_obliquity(t: float) -> float:
    return 23.439291111 - 0.013004167 * t - 0.000000164 * t * t + 0.000000504 * t * t * t


def greenwich_mean_sidereal_time(t: float) -> float:
    return 100.46061837 + 36000.770053608 * t + 0.000387933 * t * t - t * t * t / 38710000.0
