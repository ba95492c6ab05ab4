"""Cross-check of the low-precision solar position against astropy."""

from __future__ import annotations

try:
    from astropy.coordinates import TETE, get_sun
    from astropy.time import Time

    ASTROPY_AVAILABLE = True
except ImportError:
    ASTROPY_AVAILABLE = False


def astropy_apparent_position(jd: float) -> tuple[float, float]:
    """Apparent (true equator and equinox of date) RA/Dec of the Sun in degrees.

    ``jd`` is taken on the TT scale; the UTC offset is far below the
    precision of the low-precision formulas.
    """
    if not ASTROPY_AVAILABLE:
        raise RuntimeError(
            "astropy is required for the reference ephemeris. "
            "Install with: pip install -e .[tools]"
        )
    t = Time(jd, format="jd", scale="tt")
    sun = get_sun(t).transform_to(TETE(obstime=t))
    return float(sun.ra.deg), float(sun.dec.deg)
