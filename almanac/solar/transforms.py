import math

from .angles import cosd, normalize_degrees_360, sind
from .sidereal import gmst_from_julian_day


def hour_angle_at(jd: float, longitude_deg: float, ra_deg: float) -> float:
    """Local hour angle in degrees of an object at ``ra_deg`` (east-positive longitude)."""
    return normalize_degrees_360(gmst_from_julian_day(jd) + longitude_deg - ra_deg)


def equatorial_to_altaz(
    latitude_deg: float,
    longitude_deg: float,
    ra_deg: float,
    dec_deg: float,
    jd: float,
) -> tuple[float, float]:
    """Altitude and azimuth in degrees; azimuth reckoned from north through east."""
    ha = hour_angle_at(jd, longitude_deg, ra_deg)
    x = -cosd(ha) * cosd(dec_deg) * sind(latitude_deg) + sind(dec_deg) * cosd(latitude_deg)
    y = -sind(ha) * cosd(dec_deg)
    z = cosd(ha) * cosd(dec_deg) * cosd(latitude_deg) + sind(dec_deg) * sind(latitude_deg)
    alt = math.degrees(math.atan2(z, math.hypot(x, y)))
    az = normalize_degrees_360(math.degrees(math.atan2(y, x)))
    return alt, az
