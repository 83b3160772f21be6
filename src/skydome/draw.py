"""Draw commands: an ordered, inspectable description of one frame.

The renderer never touches a canvas. It emits these immutable commands in
paint order; any surface implementing :class:`DrawingSurface` can execute
them with :func:`replay`.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, Union


@dataclass(frozen=True)
class FillRect:
    x: float
    y: float
    width: float
    height: float
    color: str


@dataclass(frozen=True)
class StrokeCircle:
    cx: float
    cy: float
    r: float
    color: str
    alpha: float = 1.0
    line_width: float = 1.0


@dataclass(frozen=True)
class StrokeLine:
    x1: float
    y1: float
    x2: float
    y2: float
    color: str
    alpha: float = 1.0
    line_width: float = 1.0


@dataclass(frozen=True)
class RadialGlow:
    """Filled disc whose alpha falls from ``center_alpha`` to 0 at the edge."""

    cx: float
    cy: float
    r: float
    color: str
    center_alpha: float


@dataclass(frozen=True)
class FillCircle:
    cx: float
    cy: float
    r: float
    color: str
    alpha: float = 1.0


@dataclass(frozen=True)
class FillText:
    x: float  # Anchor is the text centre
    y: float
    text: str
    color: str
    font_size: float = 16.0


DrawCommand = Union[FillRect, StrokeCircle, StrokeLine, RadialGlow, FillCircle, FillText]


class DrawingSurface(Protocol):
    """Minimal immediate-mode 2D surface."""

    def fill_rect(self, cmd: FillRect) -> None: ...

    def stroke_circle(self, cmd: StrokeCircle) -> None: ...

    def stroke_line(self, cmd: StrokeLine) -> None: ...

    def fill_radial_glow(self, cmd: RadialGlow) -> None: ...

    def fill_circle(self, cmd: FillCircle) -> None: ...

    def fill_text(self, cmd: FillText) -> None: ...


_DISPATCH: dict[type, str] = {
    FillRect: "fill_rect",
    StrokeCircle: "stroke_circle",
    StrokeLine: "stroke_line",
    RadialGlow: "fill_radial_glow",
    FillCircle: "fill_circle",
    FillText: "fill_text",
}


def replay(commands: Iterable[DrawCommand], surface: DrawingSurface) -> None:
    """Execute commands on a surface, in order.

    Raises:
        TypeError: If an object is not a known draw command.
    """
    for cmd in commands:
        method = _DISPATCH.get(type(cmd))
        if method is None:
            raise TypeError(f"Unknown draw command: {cmd!r}")
        getattr(surface, method)(cmd)
