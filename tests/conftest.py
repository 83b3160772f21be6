from __future__ import annotations

from datetime import datetime, timezone

import pytest

from skydome.models import Location, ObservationMoment

HOUSTON_LAT = 29.7660
HOUSTON_LON = -95.3701


@pytest.fixture
def houston() -> Location:
    return Location(
        lat=HOUSTON_LAT,
        lon=HOUSTON_LON,
        city="Houston",
        state="TX",
        timezone="America/Chicago",
    )


@pytest.fixture
def evening() -> ObservationMoment:
    # 21:00 CST on 1993-02-24
    return ObservationMoment(instant=datetime(1993, 2, 25, 3, 0, tzinfo=timezone.utc))
