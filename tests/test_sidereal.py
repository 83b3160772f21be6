from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone

import pytest
from skyfield.api import load

from skydome.sidereal import compute_lst, julian_date


def _angle_diff(a: float, b: float) -> float:
    return (a - b + 180.0) % 360.0 - 180.0


def test_julian_date_at_j2000():
    assert julian_date(datetime(2000, 1, 1, 12, 0, tzinfo=timezone.utc)) == 2451545.0


def test_julian_date_naive_is_utc():
    aware = datetime(1993, 2, 24, 21, 0, tzinfo=timezone.utc)
    assert julian_date(aware.replace(tzinfo=None)) == julian_date(aware)
    assert julian_date(aware) == pytest.approx(2449043.375, abs=1e-9)


def test_gmst_polynomial_constant_term_at_epoch():
    j2000 = datetime(2000, 1, 1, 12, 0, tzinfo=timezone.utc)
    assert compute_lst(j2000, 0.0) == pytest.approx(280.46061837, abs=1e-9)


def test_longitude_is_added_and_wrapped():
    when = datetime(2021, 6, 1, 4, 30, tzinfo=timezone.utc)
    base = compute_lst(when, 0.0)
    assert compute_lst(when, 90.0) == pytest.approx((base + 90.0) % 360.0, abs=1e-9)
    assert compute_lst(when, -95.3701) == pytest.approx((base - 95.3701) % 360.0, abs=1e-9)


def test_lst_always_in_range():
    start = datetime(1950, 1, 1, tzinfo=timezone.utc)
    for i in range(200):
        when = start + timedelta(days=97 * i, minutes=37 * i)
        for lon in (-180.0, -95.3701, -0.0001, 0.0, 45.5, 179.9999, 180.0):
            lst = compute_lst(when, lon)
            assert 0.0 <= lst < 360.0


def test_houston_scenario_lst():
    when = datetime(1993, 2, 24, 21, 0, tzinfo=timezone.utc)
    assert compute_lst(when, -95.3701) == pytest.approx(14.3704, abs=0.01)


@pytest.mark.parametrize(
    "when",
    [
        datetime(1993, 2, 24, 21, 0, tzinfo=timezone.utc),
        datetime(2010, 7, 14, 3, 15, tzinfo=timezone.utc),
        datetime(2025, 8, 5, 2, 0, tzinfo=timezone.utc),
    ],
)
def test_gmst_matches_skyfield(when):
    ts = load.timescale()
    reference_deg = ts.from_datetime(when).gmst * 15.0
    assert math.fabs(_angle_diff(compute_lst(when, 0.0), reference_deg)) < 0.01
