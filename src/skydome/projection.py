"""Disc projection: spherical directions to points on a fixed-radius circle.

Two visualisations share the same disc geometry:

* ``ProjectionMode.HORIZON``: what is overhead now. Zenith at the centre,
  horizon on the rim, azimuth clockwise from North at the top.
* ``ProjectionMode.EQUATORIAL``: a fixed view of the celestial sphere.
  North celestial pole at the centre, declination -90 on the rim, angle
  taken straight from right ascension.
"""

import math

from skydome.models import HorizontalPosition, ProjectionMode, ScreenPoint
from skydome.transform import eq_to_hz


def _polar_to_screen(r: float, angle: float, center: ScreenPoint) -> ScreenPoint:
    return ScreenPoint(
        x=center.x + r * math.sin(angle),
        y=center.y - r * math.cos(angle),
    )


def project_horizon(
    alt: float, az: float, radius: float, center: ScreenPoint
) -> ScreenPoint:
    """Place an Alt/Az direction (radians) on the disc."""
    r = radius * (90.0 - math.degrees(alt)) / 90.0
    return _polar_to_screen(r, az, center)


def project_equatorial(
    ra_deg: float, dec_deg: float, radius: float, center: ScreenPoint
) -> ScreenPoint:
    """Place an RA/Dec direction (degrees) on the disc."""
    r = radius * (90.0 - dec_deg) / 180.0
    return _polar_to_screen(r, math.radians(ra_deg), center)


def project_radec(
    ra_deg: float,
    dec_deg: float,
    mode: ProjectionMode,
    lst_deg: float,
    lat_deg: float,
    radius: float,
    center: ScreenPoint,
) -> tuple[ScreenPoint, HorizontalPosition | None]:
    """Project one catalog direction through the chosen mode.

    Returns:
        The screen point, and the horizontal position it was derived from
        (None in equatorial mode, where altitude plays no part).
    """
    if mode is ProjectionMode.EQUATORIAL:
        return project_equatorial(ra_deg, dec_deg, radius, center), None
    pos = eq_to_hz(ra_deg, dec_deg, lat_deg, lst_deg)
    return project_horizon(pos.alt, pos.az, radius, center), pos


def grid_radius(step_deg: float, mode: ProjectionMode, radius: float) -> float:
    """Radius of a reference circle drawn at an altitude or declination step."""
    if mode is ProjectionMode.EQUATORIAL:
        return radius * (90.0 - step_deg) / 180.0
    return radius * (90.0 - step_deg) / 90.0
