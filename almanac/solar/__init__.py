from .angles import normalize_degrees_360
from .julian import julian_century_since_2000, julian_day
from .position import STANDARD_ALTITUDE_DEG, SolarObservation
from .track import TrackPoint, solar_track
from .transforms import equatorial_to_altaz

__all__ = [
    "SolarObservation",
    "STANDARD_ALTITUDE_DEG",
    "TrackPoint",
    "equatorial_to_altaz",
    "julian_century_since_2000",
    "julian_day",
    "normalize_degrees_360",
    "solar_track",
]
