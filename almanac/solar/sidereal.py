from .angles import normalize_degrees_360
from .julian import J2000_JD, julian_century_from_jd


def gmst_from_julian_day(jd: float) -> float:
    """Greenwich mean sidereal time in degrees at any instant (Meeus 12.4)."""
    d = jd - J2000_JD
    t = julian_century_from_jd(jd)
    return normalize_degrees_360(
        280.46061837 + 360.98564736629 * d + 0.000387933 * t * t - t * t * t / 38710000.0
    )


def local_sidereal_time(jd: float, longitude_deg: float) -> float:
    return normalize_degrees_360(gmst_from_julian_day(jd) - longitude_deg)
