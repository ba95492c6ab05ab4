import datetime
import logging
import math
from pathlib import Path
from typing import TYPE_CHECKING

from almanac.errors import ConfigError
from almanac.solar.position import SolarObservation
from almanac.util.format import parse_degrees

if TYPE_CHECKING:
    import tomli as tomllib
else:
    try:
        import tomllib
    except ModuleNotFoundError:  # Python < 3.11
        import tomli as tomllib

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "almanac" / "config.toml"

_DATE_FORMATS = ("%Y-%m-%d", "%d/%m/%Y", "%d-%m-%Y", "%Y%m%d")
_TIME_FORMATS = ("%H:%M:%S", "%H:%M")


def parse_local_time(value: str | None, now: datetime.datetime | None = None) -> datetime.datetime:
    """Parse a naive local timestamp; an empty value means ``now``."""
    if now is None:
        now = datetime.datetime.now()
    if not value:
        return now
    value = value.strip()
    for date_fmt in _DATE_FORMATS:
        for time_fmt in _TIME_FORMATS:
            try:
                return datetime.datetime.strptime(value, f"{date_fmt} {time_fmt}")
            except ValueError:
                pass
    for date_fmt in _DATE_FORMATS:
        try:
            return datetime.datetime.strptime(value, date_fmt)
        except ValueError:
            pass
    for time_fmt in _TIME_FORMATS:
        try:
            t = datetime.datetime.strptime(value, time_fmt).time()
        except ValueError:
            continue
        return datetime.datetime.combine(now.date(), t)
    raise ConfigError(f"Unrecognised time: {value!r}")


class Config:
    def __init__(self, data: dict):
        self._data = data

    def _section(self, name: str) -> dict:
        return self._data.get(name, None) or {}

    def _angle(self, key: str, minimum: float, maximum: float) -> float:
        value = self._section("observer").get(key, None)
        if value is None:
            return 0.0
        try:
            if isinstance(value, str):
                return parse_degrees(value, minimum, maximum)
            value = float(value)
        except ValueError as e:
            raise ConfigError(f"Invalid observer.{key}: {e}") from e
        if not math.isfinite(value):
            raise ConfigError(f"Invalid observer.{key}: {value} is not a finite angle")
        if value < minimum or value > maximum:
            raise ConfigError(f"Invalid observer.{key}: {value} outside [{minimum}, {maximum}]")
        return value

    @property
    def observer_name(self):
        return self._section("observer").get("name", "My observatory")

    @property
    def observer_latitude_deg(self) -> float:
        return self._angle("latitude", -90.0, 90.0)

    @property
    def observer_longitude_deg(self) -> float:
        return self._angle("longitude", -180.0, 180.0)

    @property
    def observer_elevation_m(self):
        return self._section("observer").get("elevation", 0)

    @property
    def observer_timezone_h(self) -> float:
        return float(self._section("observer").get("timezone", 0.0))

    @property
    def time_local(self):
        value = self._data.get("time", None)
        # TOML datetimes arrive already parsed; an explicit offset is kept
        if isinstance(value, datetime.datetime):
            return value
        if isinstance(value, datetime.date):
            return datetime.datetime.combine(value, datetime.time())
        return parse_local_time(value)

    @property
    def environment_pressure_mbar(self):
        return self._section("environment").get("pressure", 1010)

    @property
    def environment_temperature_c(self):
        return self._section("environment").get("temperature", 20)

    @property
    def environment_humidity_pct(self):
        return self._section("environment").get("humidity", 50)

    @property
    def constraint_min_altitude_deg(self):
        return self._section("constraints").get("min_altitude", 20)

    @property
    def constraint_max_altitude_deg(self):
        return self._section("constraints").get("max_altitude", 80)

    @property
    def constraint_min_size_arcmin(self):
        return self._section("constraints").get("min_size", 10)

    @property
    def constraint_max_size_arcmin(self):
        return self._section("constraints").get("max_size", 300)

    @property
    def constraint_moon_separation_deg(self):
        return self._section("constraints").get("moon_separation", 45)

    @property
    def constraint_frac_observable_time(self):
        return self._section("constraints").get("frac_observable_time", 50)

    @property
    def constraint_max_targets(self):
        return self._section("constraints").get("max_targets", 50)

    @property
    def constraint_use_darkness(self):
        return self._section("constraints").get("use_darkness", False)

    @property
    def target_list(self):
        return self._section("others").get("target_list", "OpenNGC")

    @property
    def type_filter(self):
        return self._section("others").get("type_filter", "")

    @property
    def output_dir(self):
        path = self._section("others").get("output_dir", "output")
        return Path(path).expanduser()

    def observation_time_utc(self) -> datetime.datetime:
        local = self.time_local
        if local.tzinfo is not None:
            return local.astimezone(datetime.timezone.utc)
        offset = datetime.timedelta(hours=self.observer_timezone_h)
        return (local - offset).replace(tzinfo=datetime.timezone.utc)

    def observation(self) -> SolarObservation:
        utc = self.observation_time_utc()
        obs = SolarObservation.from_datetime(utc).with_location(
            self.observer_latitude_deg, self.observer_longitude_deg
        )
        logger.debug("Observation for %s at %s: jd=%s", self.observer_name, utc.isoformat(), obs.julian_day)
        return obs


def load_config(path: Path | None = None) -> Config:
    explicit_path = path
    path = path or DEFAULT_CONFIG_PATH

    if not path.exists():
        if explicit_path is not None:
            raise FileNotFoundError(f"Config file not found: {path}")
        logger.debug("No config at %s, using defaults", path)
        return Config({})

    with open(path, "rb") as f:
        data = tomllib.load(f)

    logger.debug("Loaded config from %s", path)
    return Config(data)
