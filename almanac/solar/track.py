from dataclasses import dataclass

from .position import SolarObservation
from .transforms import equatorial_to_altaz


@dataclass(frozen=True)
class TrackPoint:
    julian_day: float
    altitude_deg: float
    azimuth_deg: float


def solar_track(
    latitude_deg: float,
    longitude_deg: float,
    jd_start: float,
    jd_end: float,
    num_points: int,
) -> list[TrackPoint]:
    """Sun altitude/azimuth sampled at ``num_points + 1`` evenly spaced instants."""
    if num_points <= 0:
        raise ValueError("num_points must be positive")
    step = (jd_end - jd_start) / num_points
    points = []
    for i in range(num_points + 1):
        jd = jd_start + step * i
        ra, dec = SolarObservation.from_julian_day(jd).apparent_position()
        alt, az = equatorial_to_altaz(latitude_deg, longitude_deg, ra, dec, jd)
        points.append(TrackPoint(julian_day=jd, altitude_deg=alt, azimuth_deg=az))
    return points
