"""Calendar date to Julian day conversions.

Based on Meeus, Astronomical Algorithms, chapter 7. Dates before the
Gregorian reform (1582-10-15) are taken on the Julian calendar.
"""

import datetime
import math

J2000_JD = 2451545.0
MJD_OFFSET = 2400000.5
DAYS_PER_CENTURY = 36525.0

# First Julian day of the Gregorian calendar (1582-10-15)
_GREGORIAN_START_JD = 2299161


def _is_julian_calendar(year: int, month: int, day: float) -> bool:
    if year != 1582:
        return year < 1582
    if month != 10:
        return month < 10
    return day < 15.0


def julian_day(year: int, month: int, day: float) -> float:
    """Julian day of a calendar date; the fractional day encodes UTC time-of-day."""
    julian = _is_julian_calendar(year, month, day)
    if month <= 2:
        year -= 1
        month += 12
    if julian:
        b = 0
    else:
        a = math.floor(year / 100)
        b = 2 - a + math.floor(a / 4)
    return math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1)) + day + b - 1524.5


def modified_julian_day(year: int, month: int, day: float) -> float:
    return julian_day(year, month, day) - MJD_OFFSET


def julian_day_2000(year: int, month: int, day: float) -> float:
    return julian_day(year, month, day) - J2000_JD


def julian_century_since_2000(year: int, month: int, day: float) -> float:
    return julian_day_2000(year, month, day) / DAYS_PER_CENTURY


def julian_century_from_jd(jd: float) -> float:
    return (jd - J2000_JD) / DAYS_PER_CENTURY


def calendar_from_julian_day(jd: float) -> tuple[int, int, float]:
    """Inverse of :func:`julian_day`, valid for non-negative Julian days.

    Returns ``(year, month, fractional_day)``.
    """
    f, z = math.modf(jd + 0.5)
    z = int(z)
    if z < _GREGORIAN_START_JD:
        a = z
    else:
        alpha = int((z - 1867216.25) / 36524.25)
        a = z + 1 + alpha - alpha // 4
    b = a + 1524
    c = int((b - 122.1) / 365.25)
    d = int(365.25 * c)
    e = int((b - d) / 30.6001)
    day = b - d - int(30.6001 * e) + f
    month = e - 1 if e < 14 else e - 13
    year = c - 4716 if month > 2 else c - 4715
    return year, month, day


def day_fraction_to_hms(fraction: float) -> tuple[int, int, float]:
    hours = fraction * 24.0
    h = int(hours)
    m = int((hours - h) * 60.0)
    s = (hours - h - m / 60.0) * 3600.0
    return h, m, s


def calendar_from_datetime(dt: datetime.datetime) -> tuple[int, int, float]:
    """UTC ``(year, month, fractional_day)``; naive datetimes are taken as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=datetime.timezone.utc)
    dt = dt.astimezone(datetime.timezone.utc)
    day = dt.day + (dt.hour + (dt.minute + (dt.second + dt.microsecond / 1e6) / 60.0) / 60.0) / 24.0
    return dt.year, dt.month, day


def julian_day_from_datetime(dt: datetime.datetime) -> float:
    return julian_day(*calendar_from_datetime(dt))
