import math


def normalize_degrees_360(angle: float) -> float:
    value = angle % 360.0
    # Tiny negative inputs round up to exactly 360.0
    if value == 360.0:
        return 0.0
    return value


def normalize_degrees_180(angle: float) -> float:
    value = angle % 180.0
    if value == 180.0:
        return 0.0
    return value


def sind(angle_deg: float) -> float:
    return math.sin(math.radians(angle_deg))


def cosd(angle_deg: float) -> float:
    return math.cos(math.radians(angle_deg))


def tand(angle_deg: float) -> float:
    return math.tan(math.radians(angle_deg))
