import math
import re
from typing import Tuple


def deg_to_arcsec(deg: float) -> float:
    return deg * 3600.0


def deg_to_hours(deg: float) -> float:
    return deg / 15.0


def _split_sexagesimal(value: float, precision: int, modulus: float | None = None) -> Tuple[int, int, float]:
    """Split a non-negative value into whole units, minutes and rounded seconds."""
    total_seconds = round(value * 3600.0, precision)
    if modulus is not None:
        total_seconds %= modulus * 3600.0
    whole = int(total_seconds // 3600)
    minutes = int((total_seconds - whole * 3600) // 60)
    return whole, minutes, total_seconds - whole * 3600 - minutes * 60


def _format_seconds(seconds: float, precision: int) -> str:
    width = 3 + precision if precision else 2
    return f"{seconds:0{width}.{precision}f}"


def deg_to_hms(deg: float, precision: int = 2) -> str:
    h, m, s = _split_sexagesimal(deg_to_hours(deg) % 24.0, precision, modulus=24.0)
    return f"{h:02d}:{m:02d}:{_format_seconds(s, precision)}"


def deg_to_dms(deg: float, precision: int = 2) -> str:
    sign = "-" if deg < 0 else "+"
    d, m, s = _split_sexagesimal(abs(deg), precision)
    return f"{sign}{d:02d}:{m:02d}:{_format_seconds(s, precision)}"


def format_angle(deg: float, style: str = "deg", precision: int = 2) -> str:
    if style == "deg":
        return f"{deg:.{precision}f}°"
    if style == "arcsec":
        return f'{deg_to_arcsec(deg):.{precision}f}"'
    if style == "hms":
        return deg_to_hms(deg, precision=precision)
    if style == "dms":
        return deg_to_dms(deg, precision=precision)
    raise ValueError(f"Unknown angle style: {style}")


def format_dms_direction(angle_deg: float, is_latitude: bool) -> str:
    """Render e.g. ``69° 40' 12.0" N`` for a latitude or longitude."""
    if is_latitude:
        direction = "N" if angle_deg >= 0.0 else "S"
    else:
        direction = "E" if angle_deg >= 0.0 else "W"
    a = abs(angle_deg)
    d = math.trunc(a)
    minutes_total = (a - d) * 60.0
    m = math.trunc(minutes_total)
    s = (minutes_total - m) * 60.0
    return f"{d}° {m}' {s:.1f}\" {direction}"


_DMS_SEPARATORS = re.compile(r"[dms°'\"\s]+")


def parse_degrees(text: str, minimum: float, maximum: float) -> float:
    """Parse decimal degrees or DMS text such as ``69d40m12s N`` or ``19°0'0"E``."""
    value = text.strip()
    try:
        deg = float(value)
    except ValueError:
        deg = _parse_dms(value)
    if not math.isfinite(deg):
        raise ValueError(f"Angle {text!r} is not finite")
    if deg < minimum or deg > maximum:
        raise ValueError(f"Angle {deg} outside [{minimum}, {maximum}]")
    return deg


def _parse_dms(text: str) -> float:
    lowered = text.lower().strip()
    sign = 1.0
    # A trailing "s" right after a digit is the seconds marker, not south
    if lowered and (lowered[-1] in "new" or (lowered[-1] == "s" and lowered[:-1][-1:] in (" ", "°", "'", '"'))):
        if lowered[-1] in "sw":
            sign = -1.0
        lowered = lowered[:-1]
    parts = [p.strip() for p in _DMS_SEPARATORS.split(lowered)]
    parts = [p for p in parts if p]
    if not parts or len(parts) > 3:
        raise ValueError(f"Cannot parse angle: {text!r}")
    try:
        numbers = [float(p) for p in parts]
    except ValueError as e:
        raise ValueError(f"Cannot parse angle: {text!r}") from e
    numbers += [0.0] * (3 - len(numbers))
    deg, minutes, seconds = numbers
    if deg < 0:
        sign = -sign
        deg = -deg
    return sign * (deg + minutes / 60.0 + seconds / 3600.0)
