"""Equatorial (RA/Dec) to horizontal (Alt/Az) coordinate conversion."""

import math
import sys

from skydome.models import HorizontalPosition

_TWO_PI = 2.0 * math.pi
_EPS = sys.float_info.epsilon


def _clamp_unit(value: float) -> float:
    return max(-1.0, min(1.0, value))


def eq_to_hz(
    ra_deg: float, dec_deg: float, lat_deg: float, lst_deg: float
) -> HorizontalPosition:
    """Convert a catalog direction to altitude/azimuth for one observer.

    Azimuth is measured from North through East. At the poles, and for a
    direction exactly at zenith or nadir, azimuth is undefined; it is
    reported as 0 there instead of NaN.

    Args:
        ra_deg: Right ascension (degrees).
        dec_deg: Declination (degrees).
        lat_deg: Observer latitude (degrees).
        lst_deg: Local Sidereal Time (degrees).

    Returns:
        HorizontalPosition in radians.
    """
    dec = math.radians(dec_deg)
    lat = math.radians(lat_deg)
    hour_angle = math.radians(lst_deg) - math.radians(ra_deg)

    sin_dec, cos_dec = math.sin(dec), math.cos(dec)
    sin_lat, cos_lat = math.sin(lat), math.cos(lat)

    sin_alt = sin_dec * sin_lat + cos_dec * cos_lat * math.cos(hour_angle)
    alt = math.asin(_clamp_unit(sin_alt))

    cos_alt = math.cos(alt)
    if abs(cos_alt) <= _EPS or abs(cos_lat) <= _EPS:
        return HorizontalPosition(alt=alt, az=0.0)

    cos_az = (sin_dec - math.sin(alt) * sin_lat) / (cos_alt * cos_lat)
    az = math.acos(_clamp_unit(cos_az))
    if math.sin(hour_angle) > 0:
        az = _TWO_PI - az
    # acos() == 0 on the western branch lands exactly on 2*pi
    az = az % _TWO_PI
    return HorizontalPosition(alt=alt, az=az)
