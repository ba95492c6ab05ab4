import datetime
import json
import logging
import sys
from pathlib import Path

from almanac.config import Config, load_config
from almanac.errors import ConfigError, HourAngleUndefined, PolarDayCondition
from almanac.solar.julian import julian_day_from_datetime
from almanac.solar.position import SolarObservation
from almanac.solar.track import solar_track
from almanac.util.format import deg_to_dms, deg_to_hms, format_dms_direction, parse_degrees

logger = logging.getLogger(__name__)

EXIT_BAD_INPUT = 2
EXIT_HORIZON_UNDEFINED = 3


def _json_envelope(command: str, ok: bool, data=None, error=None) -> dict:
    return {
        "ok": ok,
        "command": command,
        "timestamp_utc": datetime.datetime.now(datetime.timezone.utc).isoformat(),
        "data": data,
        "error": error,
    }


def _init_logging(level: str | None) -> None:
    if not level:
        return
    level_map = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warn": logging.WARNING,
        "error": logging.ERROR,
    }
    logging.basicConfig(level=level_map.get(level, logging.INFO))


def _config_path_from_args(args) -> Path | None:
    if args is None:
        return None
    path = getattr(args, "config", None)
    return Path(path) if path else None


def _parse_datetime_arg(value: str | None) -> datetime.datetime | None:
    if not value:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    dt = datetime.datetime.fromisoformat(value)
    if dt.tzinfo is None:
        return dt.replace(tzinfo=datetime.timezone.utc)
    return dt.astimezone(datetime.timezone.utc)


def _parse_location_args(args, config: Config) -> tuple[float, float]:
    lat = getattr(args, "latitude_deg", None)
    lon = getattr(args, "longitude_deg", None)
    if lat is None and lon is None:
        return config.observer_latitude_deg, config.observer_longitude_deg
    if lat is None or lon is None:
        raise ValueError(
            "Both latitude and longitude are required when specifying location"
        )
    return parse_degrees(lat, -90.0, 90.0), parse_degrees(lon, -180.0, 180.0)


def _print_error(command: str, args, code: str, message: str) -> None:
    if getattr(args, "json", False):
        payload = _json_envelope(
            command=command,
            ok=False,
            data=None,
            error={"code": code, "message": message, "details": None},
        )
        print(json.dumps(payload, indent=2))
    else:
        print(message, file=sys.stderr)


def _observation_from_args(args, config: Config) -> SolarObservation:
    when = _parse_datetime_arg(getattr(args, "time", None))
    if when is None:
        when = config.observation_time_utc()
    lat, lon = _parse_location_args(args, config)
    return SolarObservation.from_datetime(when).with_location(lat, lon)


def run_sun(args) -> int:
    _init_logging(getattr(args, "log_level", None))
    try:
        config = load_config(_config_path_from_args(args))
        obs = _observation_from_args(args, config)
    except (ConfigError, FileNotFoundError, ValueError) as e:
        _print_error("sun", args, "invalid_input", str(e))
        return EXIT_BAD_INPUT

    ra, dec = obs.apparent_position()
    data = {
        "julian_day": obs.julian_day,
        "julian_century": obs.julian_century,
        "latitude_deg": obs.latitude,
        "longitude_deg": obs.longitude,
        "ra_deg": ra,
        "dec_deg": dec,
        "apparent_longitude_deg": obs.apparent_longitude(),
        "radius_vector_au": obs.radius_vector(),
        "transit_jd": obs.transit(),
        "hour_angle_deg": None,
        "altitude_deg": None,
        "condition": None,
    }
    exit_code = 0
    try:
        data["hour_angle_deg"] = obs.hour_angle()
        data["altitude_deg"] = obs.altitude()
    except HourAngleUndefined as e:
        data["condition"] = "polar_day" if isinstance(e, PolarDayCondition) else "polar_night"
        logger.info("%s", e)
        exit_code = EXIT_HORIZON_UNDEFINED

    if getattr(args, "compare", False):
        from almanac.solar.reference import astropy_apparent_position

        try:
            ref_ra, ref_dec = astropy_apparent_position(obs.julian_day)
        except RuntimeError as e:
            _print_error("sun", args, "missing_dependency", str(e))
            return 1
        data["reference"] = {
            "ra_deg": ref_ra,
            "dec_deg": ref_dec,
            "delta_ra_deg": ra - ref_ra,
            "delta_dec_deg": dec - ref_dec,
        }

    if getattr(args, "json", False):
        payload = _json_envelope(command="sun", ok=exit_code == 0, data=data, error=None)
        print(json.dumps(payload, indent=2))
        return exit_code

    print("Almanac Sun")
    print("===========")
    print(
        f"Location: {format_dms_direction(obs.latitude, True)}, "
        f"{format_dms_direction(obs.longitude, False)}"
    )
    print(f"JD: {obs.julian_day:.5f} (T = {obs.julian_century:.9f})")
    print(f"RA: {deg_to_hms(ra)} ({ra:.4f}°)")
    print(f"Dec: {deg_to_dms(dec)} ({dec:.4f}°)")
    print(f"Distance: {data['radius_vector_au']:.5f} AU")
    print(f"Transit JD: {data['transit_jd']:.5f}")
    if data["condition"] is None:
        print(f"Hour angle: {data['hour_angle_deg']:.4f}°")
        print(f"Altitude: {data['altitude_deg']:.4f}°")
    elif data["condition"] == "polar_day":
        print("Hour angle: none (Sun never sets)")
    else:
        print("Hour angle: none (Sun never rises)")
    if "reference" in data:
        ref = data["reference"]
        print(f"astropy RA/Dec: {ref['ra_deg']:.4f}° / {ref['dec_deg']:.4f}°")
        print(f"Difference: {ref['delta_ra_deg']:+.4f}° / {ref['delta_dec_deg']:+.4f}°")
    return exit_code


def run_track(args) -> int:
    _init_logging(getattr(args, "log_level", None))
    try:
        config = load_config(_config_path_from_args(args))
        lat, lon = _parse_location_args(args, config)
        start = _parse_datetime_arg(args.start) or config.observation_time_utc()
        end = _parse_datetime_arg(args.end) or start + datetime.timedelta(days=1)
        points = solar_track(
            lat,
            lon,
            julian_day_from_datetime(start),
            julian_day_from_datetime(end),
            args.points,
        )
    except (ConfigError, FileNotFoundError, ValueError) as e:
        _print_error("track", args, "invalid_input", str(e))
        return EXIT_BAD_INPUT

    if getattr(args, "json", False):
        data = [
            {
                "julian_day": p.julian_day,
                "altitude_deg": p.altitude_deg,
                "azimuth_deg": p.azimuth_deg,
            }
            for p in points
        ]
        print(json.dumps(_json_envelope(command="track", ok=True, data=data), indent=2))
        return 0

    print(f"{'JD':>15}  {'Alt':>8}  {'Az':>8}")
    for p in points:
        print(f"{p.julian_day:15.5f}  {p.altitude_deg:8.3f}  {p.azimuth_deg:8.3f}")
    return 0
