from __future__ import annotations

import math
from datetime import datetime, timezone

import pytest

from skydome.models import ScreenPoint
from skydome.projection import project_horizon
from skydome.sidereal import compute_lst
from skydome.transform import eq_to_hz

from .conftest import HOUSTON_LAT, HOUSTON_LON

SIRIUS = (101.2877, -16.7161)


def test_output_ranges_over_the_sphere():
    for ra in range(0, 360, 15):
        for dec in (-90.0, -60.0, -16.7, 0.0, 29.766, 89.9, 90.0):
            for lat in (-90.0, -45.0, 0.0, 29.766, 90.0):
                pos = eq_to_hz(float(ra), dec, lat, 123.456)
                assert -math.pi / 2 <= pos.alt <= math.pi / 2
                assert 0.0 <= pos.az < 2 * math.pi
                assert not math.isnan(pos.az)


def test_zenith_star_is_overhead_and_projects_to_centre():
    lst = 211.5
    pos = eq_to_hz(lst, HOUSTON_LAT, HOUSTON_LAT, lst)
    assert pos.alt == pytest.approx(math.pi / 2, abs=1e-6)

    center = ScreenPoint(300.0, 300.0)
    point = project_horizon(pos.alt, pos.az, 280.0, center)
    assert math.hypot(point.x - center.x, point.y - center.y) < 1.0


def test_pole_observer_gets_zero_azimuth():
    pos = eq_to_hz(40.0, 35.0, 90.0, 300.0)
    assert pos.az == 0.0
    assert pos.alt == pytest.approx(math.radians(35.0), abs=1e-9)

    south = eq_to_hz(40.0, -35.0, -90.0, 300.0)
    assert south.az == 0.0


def test_meridian_transits():
    south = eq_to_hz(10.0, 0.0, 40.0, 10.0)
    assert south.alt == pytest.approx(math.radians(50.0), abs=1e-9)
    assert south.az == pytest.approx(math.pi, abs=1e-6)

    north = eq_to_hz(10.0, 80.0, 40.0, 10.0)
    assert north.alt == pytest.approx(math.radians(50.0), abs=1e-9)
    assert min(north.az, 2 * math.pi - north.az) == pytest.approx(0.0, abs=1e-6)


def test_rising_star_is_east_and_setting_star_is_west():
    rising = eq_to_hz(100.0, 0.0, 30.0, 40.0)  # hour angle -60
    setting = eq_to_hz(100.0, 0.0, 30.0, 160.0)  # hour angle +60
    assert 0.0 < rising.az < math.pi
    assert math.pi < setting.az < 2 * math.pi
    assert rising.alt == pytest.approx(setting.alt, abs=1e-12)
    assert rising.az + setting.az == pytest.approx(2 * math.pi, abs=1e-9)


def test_sirius_over_houston_at_nine_pm_local():
    when = datetime(1993, 2, 25, 3, 0, tzinfo=timezone.utc)
    lst = compute_lst(when, HOUSTON_LON)
    pos = eq_to_hz(*SIRIUS, HOUSTON_LAT, lst)
    assert pos.alt > 0
    assert pos.alt == pytest.approx(0.7575, abs=0.01)
    assert pos.az == pytest.approx(3.218, abs=0.01)


def test_sirius_over_houston_at_2100_utc_is_below_horizon():
    when = datetime(1993, 2, 24, 21, 0, tzinfo=timezone.utc)
    lst = compute_lst(when, HOUSTON_LON)
    pos = eq_to_hz(*SIRIUS, HOUSTON_LAT, lst)
    assert pos.alt == pytest.approx(-0.0982, abs=0.01)
    # Still east of the meridian: rising
    assert 0.0 < pos.az < math.pi
