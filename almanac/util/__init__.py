from .format import (
    deg_to_arcsec,
    deg_to_dms,
    deg_to_hms,
    format_angle,
    format_dms_direction,
    parse_degrees,
)

__all__ = [
    "deg_to_arcsec",
    "deg_to_dms",
    "deg_to_hms",
    "format_angle",
    "format_dms_direction",
    "parse_degrees",
]
