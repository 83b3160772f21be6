"""Frame renderer: (catalog, constellations, instant, location) to an ordered draw sequence.

Paint order is fixed and never varies between frames:

1. background fill
2. disc border
3. reference grid (concentric circles + radial spokes every 45°)
4. stars, each a radial glow followed by a solid core
5. constellation lines, on top of the stars

The renderer is a pure function. It holds no state between calls and never
raises for degenerate input: invalid stars are dropped and counted, an empty
catalog yields the placeholder frame.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence

from skydome.caption import format_caption
from skydome.constellations import iter_edges
from skydome.draw import (
    DrawCommand,
    FillCircle,
    FillRect,
    FillText,
    RadialGlow,
    StrokeCircle,
    StrokeLine,
)
from skydome.models import (
    Constellation,
    FrameOutput,
    Location,
    ObservationMoment,
    ProjectionMode,
    ScreenPoint,
    StarRecord,
)
from skydome.projection import grid_radius, project_radec
from skydome.settings import RenderSettings
from skydome.sidereal import compute_lst
from skydome.validation import partition_stars
from skydome.visibility import edge_visible, star_visible

LOG = logging.getLogger(__name__)

HORIZON_GRID_STEPS: tuple[float, ...] = (30.0, 60.0)  # Altitude circles (degrees)
EQUATORIAL_GRID_STEPS: tuple[float, ...] = (-45.0, 0.0, 45.0)  # Declination circles
SPOKE_STEP_DEG = 45


def star_size(magnitude: float, settings: RenderSettings) -> float:
    """Base radius: affine in magnitude, floored at ``min_size``."""
    return max(settings.min_size, settings.size_offset - settings.size_slope * magnitude)


def glow_alpha(magnitude: float, settings: RenderSettings) -> float:
    """Glow centre alpha, clamped to [0, 1]."""
    alpha = settings.alpha_offset - settings.alpha_slope * magnitude
    return max(0.0, min(1.0, alpha))


def star_appearance(
    star: StarRecord, point: ScreenPoint, settings: RenderSettings
) -> tuple[RadialGlow, FillCircle]:
    """Glow + core commands for one star. Brighter stars are larger and more opaque."""
    base = star_size(star.magnitude, settings)
    glow = RadialGlow(
        cx=point.x,
        cy=point.y,
        r=settings.glow_scale * base,
        color=settings.star_color,
        center_alpha=glow_alpha(star.magnitude, settings),
    )
    core = FillCircle(
        cx=point.x,
        cy=point.y,
        r=settings.core_scale * base,
        color=settings.star_color,
        alpha=settings.core_alpha,
    )
    return glow, core


def _frame_chrome(center: ScreenPoint, settings: RenderSettings) -> list[DrawCommand]:
    return [
        FillRect(
            x=0.0,
            y=0.0,
            width=float(settings.canvas_size),
            height=float(settings.canvas_size),
            color=settings.background_color,
        ),
        StrokeCircle(
            cx=center.x,
            cy=center.y,
            r=settings.radius,
            color=settings.border_color,
            alpha=1.0,
            line_width=1.0,
        ),
    ]


def _grid(
    center: ScreenPoint, mode: ProjectionMode, settings: RenderSettings
) -> list[DrawCommand]:
    steps = EQUATORIAL_GRID_STEPS if mode is ProjectionMode.EQUATORIAL else HORIZON_GRID_STEPS
    radius = settings.radius
    commands: list[DrawCommand] = [
        StrokeCircle(
            cx=center.x,
            cy=center.y,
            r=grid_radius(step, mode, radius),
            color=settings.grid_color,
            alpha=settings.grid_alpha,
            line_width=settings.grid_line_width,
        )
        for step in steps
    ]
    for angle_deg in range(0, 360, SPOKE_STEP_DEG):
        theta = math.radians(angle_deg)
        commands.append(
            StrokeLine(
                x1=center.x,
                y1=center.y,
                x2=center.x + radius * math.sin(theta),
                y2=center.y - radius * math.cos(theta),
                color=settings.grid_color,
                alpha=settings.grid_alpha,
                line_width=settings.grid_line_width,
            )
        )
    return commands


def render_frame(
    stars: Sequence[StarRecord],
    constellations: Iterable[Constellation],
    moment: ObservationMoment,
    location: Location,
    mode: ProjectionMode | None = None,
    settings: RenderSettings | None = None,
) -> FrameOutput:
    """Compute one frame of the sky dome.

    Args:
        stars: Catalog records (already cleaned by the catalog layer; rechecked here).
        constellations: Named line groups to overlay.
        moment: Observation instant and caption clock flag.
        location: Observer position.
        mode: Projection; defaults to ``settings.projection``.
        settings: Presentation parameters; defaults to ``RenderSettings()``.

    Returns:
        FrameOutput with the ordered draw commands and caption.
    """
    if settings is None:
        settings = RenderSettings()
    mode = ProjectionMode(settings.projection if mode is None else mode)

    half = settings.canvas_size / 2.0
    center = ScreenPoint(half, half)
    radius = settings.radius
    caption = format_caption(moment, location)
    commands = _frame_chrome(center, settings)

    if not stars:
        commands.append(
            FillText(
                x=center.x,
                y=center.y,
                text=settings.placeholder_text,
                color=settings.text_color,
                font_size=16.0,
            )
        )
        return FrameOutput(
            commands=tuple(commands),
            caption=caption,
            width=settings.canvas_size,
            height=settings.canvas_size,
            placeholder=True,
            grid_end=len(commands),
        )

    valid, failed = partition_stars(stars)
    if failed:
        LOG.debug("dropped %d invalid star records", len(failed))

    lst = compute_lst(moment.utc, location.lon)
    commands.extend(_grid(center, mode, settings))
    grid_end = len(commands)

    drawn = 0
    for star in valid:
        point, pos = project_radec(
            star.ra_deg, star.dec_deg, mode, lst, location.lat, radius, center
        )
        if pos is not None and not star_visible(pos):
            continue
        commands.extend(star_appearance(star, point, settings))
        drawn += 1

    lines = 0
    for edge in iter_edges(constellations):
        s1, p1 = project_radec(edge.ra1, edge.dec1, mode, lst, location.lat, radius, center)
        s2, p2 = project_radec(edge.ra2, edge.dec2, mode, lst, location.lat, radius, center)
        if not edge_visible(p1, p2, s1, s2, center, radius):
            continue
        commands.append(
            StrokeLine(
                x1=s1.x,
                y1=s1.y,
                x2=s2.x,
                y2=s2.y,
                color=settings.line_color,
                alpha=settings.line_alpha,
                line_width=settings.line_width,
            )
        )
        lines += 1

    LOG.debug(
        "frame %s mode=%s lst=%.4f stars=%d/%d lines=%d",
        moment.utc.isoformat(),
        mode.value,
        lst,
        drawn,
        len(valid),
        lines,
    )
    return FrameOutput(
        commands=tuple(commands),
        caption=caption,
        width=settings.canvas_size,
        height=settings.canvas_size,
        dropped_stars=len(failed),
        grid_end=grid_end,
    )
