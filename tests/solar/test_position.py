import datetime
import math

import pytest

from almanac.errors import HourAngleUndefined, PolarDayCondition, PolarNightCondition
from almanac.solar.angles import normalize_degrees_360
from almanac.solar.elements import earth_orbit_eccentricity
from almanac.solar.julian import julian_day_from_datetime
from almanac.solar.position import STANDARD_ALTITUDE_DEG, SolarObservation


@pytest.fixture
def meeus_example():
    # Meeus, Astronomical Algorithms, example 25.a: 1992 October 13.0
    return SolarObservation.on_date(1992, 10, 13.0)


def test_time_basis(meeus_example):
    assert meeus_example.julian_day == 2448908.5
    assert meeus_example.julian_day_2000 == -2636.5
    assert meeus_example.julian_century == pytest.approx(-0.072183436, abs=1e-9)
    assert meeus_example.latitude == 0.0
    assert meeus_example.longitude == 0.0


def test_geometric_elements(meeus_example):
    assert meeus_example.mean_longitude() == pytest.approx(201.80722, abs=1e-4)
    assert meeus_example.mean_anomaly() == pytest.approx(278.99396, abs=1e-4)
    assert meeus_example.earth_orbit_eccentricity() == pytest.approx(0.016711651, abs=1e-9)
    assert meeus_example.equation_center() == pytest.approx(-1.89732, abs=1e-4)
    assert meeus_example.true_longitude() == pytest.approx(199.9099, abs=1e-4)
    assert meeus_example.radius_vector() == pytest.approx(0.99766, abs=1e-4)
    assert meeus_example.apparent_longitude() == pytest.approx(199.909, abs=1e-3)


def test_obliquity_and_apparent_position(meeus_example):
    assert meeus_example.ecliptic_mean_obliquity() == pytest.approx(23.44023, abs=1e-5)
    ra, dec = meeus_example.apparent_position()
    assert ra == pytest.approx(198.3808, abs=1e-3)
    assert dec == pytest.approx(-7.7851, abs=1e-3)


def test_sums_left_unnormalized(meeus_example):
    assert meeus_example.true_anomaly() == (
        meeus_example.mean_anomaly() + meeus_example.equation_center()
    )
    omega = math.radians(125.04 - 1934.136 * meeus_example.julian_century)
    assert meeus_example.apparent_longitude() == (
        meeus_example.true_longitude() - 0.00569 - 0.00478 * math.sin(omega)
    )


def test_current_julian_day(meeus_example):
    assert meeus_example.current_julian_day() == -2636
    assert SolarObservation.on_date(2000, 1, 1.5).current_julian_day() == 0


def test_transit_near_local_noon(meeus_example):
    # Equation of time in mid October puts transit about 13.6 min before noon
    assert meeus_example.transit() == pytest.approx(2448908.99035, abs=1e-4)
    east = meeus_example.with_location(0.0, 90.0)
    assert east.transit() - meeus_example.transit() == pytest.approx(-0.25)


def test_sidereal_time():
    obs = SolarObservation.on_date(1987, 4, 10.0)
    gmst = obs.greenwich_mean_sidereal_time()
    # Meeus example 12.a
    assert normalize_degrees_360(gmst) == pytest.approx(197.693195, abs=1e-5)
    located = obs.with_location(10.0, 25.0)
    assert located.local_mean_sidereal_time() == pytest.approx(gmst - 25.0)


def test_hour_angle_zero_ignores_longitude():
    obs = SolarObservation.on_date(1987, 4, 10.0)
    expected = normalize_degrees_360(obs.greenwich_mean_sidereal_time())
    for lon in (-120.0, 0.0, 77.5):
        assert obs.with_location(0.0, lon).hour_angle_zero() == pytest.approx(expected)


def test_hour_angle_equator(meeus_example):
    _, dec = meeus_example.apparent_position()
    expected = math.degrees(
        math.acos(math.sin(math.radians(STANDARD_ALTITUDE_DEG)) / math.cos(math.radians(dec)))
    )
    assert meeus_example.hour_angle() == pytest.approx(expected)
    assert 90.0 < meeus_example.hour_angle() < 91.0


@pytest.mark.parametrize("lat", [-60.0, -35.0, 0.0, 38.9, 51.5, 64.0])
def test_altitude_at_horizon_crossing(lat):
    obs = SolarObservation.on_date(2024, 3, 20.5).with_location(lat, 12.0)
    assert obs.altitude() == pytest.approx(STANDARD_ALTITUDE_DEG, abs=1e-9)


def test_polar_night_reported():
    # Tromso in December
    obs = SolarObservation.on_date(2024, 12, 11.5).with_location(69.67, 19.0)
    with pytest.raises(PolarNightCondition) as exc_info:
        obs.hour_angle()
    assert exc_info.value.ratio > 1.0
    with pytest.raises(PolarNightCondition):
        obs.altitude()


def test_polar_day_reported():
    obs = SolarObservation.on_date(2024, 6, 21.5).with_location(69.67, 19.0)
    with pytest.raises(PolarDayCondition) as exc_info:
        obs.hour_angle()
    assert exc_info.value.ratio < -1.0


def test_polar_conditions_share_base():
    obs = SolarObservation.on_date(2024, 6, 21.5).with_location(-75.0, 0.0)
    with pytest.raises(HourAngleUndefined):
        obs.hour_angle()
    with pytest.raises(ArithmeticError):
        obs.hour_angle()


def test_builder_returns_new_values(meeus_example):
    located = meeus_example.with_location(38.9, -77.0)
    assert located is not meeus_example
    assert meeus_example.latitude == 0.0
    redated = located.with_date(2024, 1, 1.0)
    assert (redated.latitude, redated.longitude) == (38.9, -77.0)
    assert redated.julian_century == SolarObservation.on_date(2024, 1, 1.0).julian_century


def test_observation_is_frozen(meeus_example):
    with pytest.raises(AttributeError):
        meeus_example.latitude = 10.0


def test_from_julian_day_round_trip():
    obs = SolarObservation.from_julian_day(2448908.5)
    assert (obs.year, obs.month, obs.day) == (1992, 10, 13.0)
    assert obs.julian_day == 2448908.5


def test_methods_are_idempotent():
    obs = SolarObservation.on_date(2010, 7, 4.25).with_location(47.3, 8.5)
    for name in (
        "mean_longitude",
        "true_anomaly",
        "radius_vector",
        "apparent_position",
        "transit",
        "hour_angle",
        "altitude",
    ):
        assert getattr(obs, name)() == getattr(obs, name)()


def test_range_invariants():
    for year in (1950, 1992, 2000, 2024, 2050):
        for month in range(1, 13):
            for lat in (-80.0, -45.0, 0.0, 45.0, 80.0):
                obs = SolarObservation.on_date(year, month, 15.3).with_location(lat, -30.0)
                ra, dec = obs.apparent_position()
                assert 0.0 <= ra < 360.0
                assert -90.0 <= dec <= 90.0
                for value in (obs.mean_longitude(), obs.mean_anomaly(), obs.true_longitude()):
                    assert 0.0 <= value < 360.0
                try:
                    h = obs.hour_angle()
                except HourAngleUndefined:
                    continue
                assert 0.0 <= h < 360.0
                assert -90.0 <= obs.altitude() <= 90.0


def test_eccentricity_stability():
    for i in range(-10, 11):
        assert 0.0166 <= earth_orbit_eccentricity(i / 10.0) <= 0.0168


def test_from_datetime_matches_julian_day_from_datetime():
    dt = datetime.datetime(2024, 6, 21, 22, 30, 15, 750000, tzinfo=datetime.timezone.utc)
    obs = SolarObservation.from_datetime(dt)
    assert obs.julian_day == julian_day_from_datetime(dt)
    assert (obs.year, obs.month) == (2024, 6)
