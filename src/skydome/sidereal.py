"""Sidereal clock: UTC instant + longitude to Local Sidereal Time."""

from datetime import datetime, timezone

_UNIX_EPOCH_JD = 2440587.5
_J2000_JD = 2451545.0
_MS_PER_DAY = 86_400_000.0


def _normalize_deg(angle: float) -> float:
    """Floor-based modulo into [0, 360). Never negative."""
    wrapped = angle % 360.0
    # -1e-17 % 360.0 rounds to 360.0
    return 0.0 if wrapped >= 360.0 else wrapped


def julian_date(instant: datetime) -> float:
    """Julian Date of an instant. Naive datetimes are read as UTC."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    unix_millis = instant.timestamp() * 1000.0
    return unix_millis / _MS_PER_DAY + _UNIX_EPOCH_JD


def compute_lst(instant: datetime, lon_deg: float) -> float:
    """Return Local Sidereal Time in degrees for an observer longitude.

    Greenwich Mean Sidereal Time comes from the standard third-order
    polynomial in Julian centuries since J2000.0; the East-positive
    longitude is then added.

    Args:
        instant: Observation time (timezone-aware, or naive UTC).
        lon_deg: Observer longitude, East positive.

    Returns:
        LST in degrees, in [0, 360).
    """
    jd = julian_date(instant)
    days = jd - _J2000_JD
    t = days / 36525.0
    gmst = (
        280.46061837
        + 360.98564736629 * days
        + 0.000387933 * t * t
        - t * t * t / 38710000.0
    )
    return _normalize_deg(_normalize_deg(gmst) + lon_deg)
