from __future__ import annotations

import dataclasses
import datetime
import logging
import math
from dataclasses import dataclass

from almanac.errors import PolarDayCondition, PolarNightCondition
from . import elements
from .angles import normalize_degrees_360
from .julian import (
    J2000_JD,
    DAYS_PER_CENTURY,
    calendar_from_datetime,
    calendar_from_julian_day,
    julian_day,
)

logger = logging.getLogger(__name__)

# Solar disk semi-diameter plus standard refraction at the horizon
STANDARD_ALTITUDE_DEG = -0.8333

_CURRENT_DAY_OFFSET = 0.0008


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class SolarObservation:
    """Sun as seen from one (date, location) pair.

    Build with :meth:`on_date` then :meth:`with_location`; each step returns a
    new value with every time basis derived. Longitude follows the same sign
    in every formula below, so callers must pick one convention and keep it.
    """

    year: int
    month: int
    day: float
    julian_day: float
    julian_day_2000: float
    julian_century: float
    latitude: float = 0.0
    longitude: float = 0.0

    @classmethod
    def on_date(cls, year: int, month: int, day: float) -> SolarObservation:
        jd = julian_day(year, month, day)
        jd2000 = jd - J2000_JD
        return cls(
            year=year,
            month=month,
            day=day,
            julian_day=jd,
            julian_day_2000=jd2000,
            julian_century=jd2000 / DAYS_PER_CENTURY,
        )

    @classmethod
    def from_datetime(cls, dt: datetime.datetime) -> SolarObservation:
        return cls.on_date(*calendar_from_datetime(dt))

    @classmethod
    def from_julian_day(cls, jd: float) -> SolarObservation:
        year, month, day = calendar_from_julian_day(jd)
        return cls.on_date(year, month, day)

    def with_date(self, year: int, month: int, day: float) -> SolarObservation:
        dated = self.on_date(year, month, day)
        return dataclasses.replace(dated, latitude=self.latitude, longitude=self.longitude)

    def with_location(self, latitude: float, longitude: float) -> SolarObservation:
        return dataclasses.replace(self, latitude=latitude, longitude=longitude)

    def current_julian_day(self) -> int:
        return _round_half_away(self.julian_day - J2000_JD + _CURRENT_DAY_OFFSET)

    def mean_longitude(self) -> float:
        return elements.mean_longitude(self.julian_century)

    def mean_anomaly(self) -> float:
        return elements.mean_anomaly(self.julian_century)

    def earth_orbit_eccentricity(self) -> float:
        return elements.earth_orbit_eccentricity(self.julian_century)

    def equation_center(self) -> float:
        return elements.equation_center(self.julian_century)

    def true_longitude(self) -> float:
        return normalize_degrees_360(self.mean_longitude() + self.equation_center())

    def true_anomaly(self) -> float:
        # Left unnormalized; only consumed through cos() in radius_vector.
        return self.mean_anomaly() + self.equation_center()

    def radius_vector(self) -> float:
        """Sun-Earth distance in astronomical units."""
        e = self.earth_orbit_eccentricity()
        v = math.radians(self.true_anomaly())
        return 1.000001018 * (1.0 - e * e) / (1.0 + e * math.cos(v))

    def apparent_longitude(self) -> float:
        omega = math.radians(elements.ascending_node_longitude(self.julian_century))
        # Left unnormalized after the nutation and aberration correction.
        return self.true_longitude() - 0.00569 - 0.00478 * math.sin(omega)

    def ecliptic_mean_obliquity(self) -> float:
        return elements.ecliptic_mean_obliquity(self.julian_century)

    def apparent_position(self) -> tuple[float, float]:
        """Apparent right ascension and declination, both in degrees."""
        omega = math.radians(elements.ascending_node_longitude(self.julian_century))
        eps = math.radians(self.ecliptic_mean_obliquity() + 0.00256 * math.cos(omega))
        lam = math.radians(self.apparent_longitude())
        ra = math.degrees(math.atan2(math.cos(eps) * math.sin(lam), math.cos(lam)))
        dec = math.degrees(math.asin(math.sin(eps) * math.sin(lam)))
        return normalize_degrees_360(ra), dec

    def mean_solar_time(self) -> float:
        return self.current_julian_day() - self.longitude / 360.0

    def transit(self) -> float:
        """Julian day of solar transit (local noon) at this longitude."""
        m = math.radians(self.mean_anomaly())
        lam = math.radians(self.true_longitude())
        return J2000_JD + self.mean_solar_time() + 0.0053 * math.sin(m) - 0.0069 * math.sin(2.0 * lam)

    def greenwich_mean_sidereal_time(self) -> float:
        return elements.greenwich_mean_sidereal_time(self.julian_century)

    def local_mean_sidereal_time(self) -> float:
        return self.greenwich_mean_sidereal_time() - self.longitude

    def hour_angle_zero(self) -> float:
        return normalize_degrees_360(self.local_mean_sidereal_time() + self.longitude)

    def hour_angle(self) -> float:
        """Hour angle in degrees at which the Sun crosses the standard altitude.

        Raises PolarDayCondition or PolarNightCondition when the Sun stays
        above or below that altitude all day.
        """
        _, dec = self.apparent_position()
        lat = math.radians(self.latitude)
        dec = math.radians(dec)
        numerator = math.sin(math.radians(STANDARD_ALTITUDE_DEG)) - math.sin(lat) * math.sin(dec)
        denominator = math.cos(lat) * math.cos(dec)
        ratio = numerator / denominator
        if ratio < -1.0:
            logger.debug("Sun never sets at lat=%s jd=%s (ratio=%s)", self.latitude, self.julian_day, ratio)
            raise PolarDayCondition(ratio, f"Sun never sets at latitude {self.latitude:.4f}")
        if ratio > 1.0:
            logger.debug("Sun never rises at lat=%s jd=%s (ratio=%s)", self.latitude, self.julian_day, ratio)
            raise PolarNightCondition(ratio, f"Sun never rises at latitude {self.latitude:.4f}")
        return normalize_degrees_360(math.degrees(math.acos(ratio)))

    def altitude(self) -> float:
        """Altitude in degrees at the hour angle returned by :meth:`hour_angle`."""
        _, dec = self.apparent_position()
        lat = math.radians(self.latitude)
        dec = math.radians(dec)
        h = math.radians(self.hour_angle())
        sin_alt = math.sin(lat) * math.sin(dec) + math.cos(lat) * math.cos(dec) * math.cos(h)
        return math.degrees(math.asin(max(-1.0, min(1.0, sin_alt))))
