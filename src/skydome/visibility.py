"""Visibility policy for stars and constellation edges."""

import math

from skydome.models import HorizontalPosition, ScreenPoint

RIM_EPSILON_PX = 1.0


def star_visible(pos: HorizontalPosition) -> bool:
    """Strictly above the horizon. A star at alt == 0 is not drawn."""
    return pos.alt > 0.0


def within_disc(
    point: ScreenPoint,
    center: ScreenPoint,
    radius: float,
    epsilon: float = RIM_EPSILON_PX,
) -> bool:
    """Point lies inside the disc, allowing ``epsilon`` px of rim overshoot."""
    return math.hypot(point.x - center.x, point.y - center.y) <= radius + epsilon


def edge_visible(
    p1: HorizontalPosition | None,
    p2: HorizontalPosition | None,
    s1: ScreenPoint,
    s2: ScreenPoint,
    center: ScreenPoint,
    radius: float,
    epsilon: float = RIM_EPSILON_PX,
) -> bool:
    """Decide whether a constellation segment is drawn.

    Both endpoints must be above the horizon and both projected points must
    fall within the disc. Passing None for both horizontal positions (the
    equatorial projection) checks disc bounds only.

    Args:
        p1: Horizontal position of the first endpoint, or None.
        p2: Horizontal position of the second endpoint, or None.
        s1: Projected first endpoint.
        s2: Projected second endpoint.
        center: Disc centre.
        radius: Disc radius (px).
        epsilon: Allowed rim overshoot (px).
    """
    for pos in (p1, p2):
        if pos is not None and not star_visible(pos):
            return False
    return within_disc(s1, center, radius, epsilon) and within_disc(
        s2, center, radius, epsilon
    )
