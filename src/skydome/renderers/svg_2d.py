"""SVG poster renderer.

Executes a FrameOutput on an in-memory SVG surface and appends the caption
block under the disc, producing a self-contained ``<svg>`` document.

Coordinate system (matches the frame's pixel space):
  x ∈ [0, width]   left to right
  y ∈ [0, height]  top to bottom; caption block lives below y = height
"""

from __future__ import annotations

import html

from skydome.draw import (
    FillCircle,
    FillRect,
    FillText,
    RadialGlow,
    StrokeCircle,
    StrokeLine,
    replay,
)
from skydome.models import FrameOutput

_TITLE = "THE NIGHT SKY"
_CAPTION_COLOR = "#ffffff"
_CAPTION_LINE_HEIGHT = 22.0
_CAPTION_PADDING = 28.0


class SvgSurface:
    """DrawingSurface that accumulates SVG elements."""

    def __init__(self) -> None:
        self.parts: list[str] = []
        self.defs: list[str] = []
        # One radialGradient per (colour, alpha) pair, shared by every star using it
        self._gradient_ids: dict[tuple[str, str], str] = {}

    def _gradient(self, color: str, center_alpha: float) -> str:
        key = (color, f"{center_alpha:.2f}")
        grad_id = self._gradient_ids.get(key)
        if grad_id is None:
            grad_id = f"glow{len(self._gradient_ids)}"
            self._gradient_ids[key] = grad_id
            self.defs.append(
                f'<radialGradient id="{grad_id}" cx="50%" cy="50%" r="50%">'
                f'<stop offset="0%" stop-color="{color}" stop-opacity="{key[1]}"/>'
                f'<stop offset="100%" stop-color="{color}" stop-opacity="0"/>'
                f"</radialGradient>"
            )
        return grad_id

    def fill_rect(self, cmd: FillRect) -> None:
        self.parts.append(
            f'<rect x="{cmd.x:.2f}" y="{cmd.y:.2f}" width="{cmd.width:.2f}"'
            f' height="{cmd.height:.2f}" fill="{cmd.color}"/>'
        )

    def stroke_circle(self, cmd: StrokeCircle) -> None:
        self.parts.append(
            f'<circle cx="{cmd.cx:.2f}" cy="{cmd.cy:.2f}" r="{cmd.r:.2f}" fill="none"'
            f' stroke="{cmd.color}" stroke-opacity="{cmd.alpha:.2f}"'
            f' stroke-width="{cmd.line_width:.2f}"/>'
        )

    def stroke_line(self, cmd: StrokeLine) -> None:
        self.parts.append(
            f'<line x1="{cmd.x1:.2f}" y1="{cmd.y1:.2f}" x2="{cmd.x2:.2f}" y2="{cmd.y2:.2f}"'
            f' stroke="{cmd.color}" stroke-opacity="{cmd.alpha:.2f}"'
            f' stroke-width="{cmd.line_width:.2f}"/>'
        )

    def fill_radial_glow(self, cmd: RadialGlow) -> None:
        grad_id = self._gradient(cmd.color, cmd.center_alpha)
        self.parts.append(
            f'<circle cx="{cmd.cx:.2f}" cy="{cmd.cy:.2f}" r="{cmd.r:.2f}"'
            f' fill="url(#{grad_id})"/>'
        )

    def fill_circle(self, cmd: FillCircle) -> None:
        self.parts.append(
            f'<circle cx="{cmd.cx:.2f}" cy="{cmd.cy:.2f}" r="{cmd.r:.2f}"'
            f' fill="{cmd.color}" fill-opacity="{cmd.alpha:.2f}"/>'
        )

    def fill_text(self, cmd: FillText) -> None:
        self.parts.append(
            f'<text x="{cmd.x:.2f}" y="{cmd.y:.2f}" fill="{cmd.color}"'
            f' font-family="sans-serif" font-size="{cmd.font_size:.0f}"'
            f' text-anchor="middle" dominant-baseline="middle">'
            f"{html.escape(cmd.text)}</text>"
        )


def _caption_block(frame: FrameOutput, background: str) -> tuple[list[str], float]:
    lines = [_TITLE, *frame.caption.splitlines()]
    height = _CAPTION_PADDING * 2 + _CAPTION_LINE_HEIGHT * len(lines)
    parts = [
        f'<rect x="0" y="{frame.height}" width="{frame.width}" height="{height:.2f}"'
        f' fill="{background}"/>'
    ]
    y = frame.height + _CAPTION_PADDING
    for i, line in enumerate(lines):
        # Title gets letter spacing, as on the printed poster
        spacing = ' letter-spacing="4"' if i == 0 else ""
        parts.append(
            f'<text x="{frame.width / 2:.2f}" y="{y:.2f}" fill="{_CAPTION_COLOR}"'
            f' font-family="sans-serif" font-size="14" text-anchor="middle"{spacing}>'
            f"{html.escape(line)}</text>"
        )
        y += _CAPTION_LINE_HEIGHT
    return parts, height


def render_svg(frame: FrameOutput, include_caption: bool = True) -> str:
    """Return a standalone SVG document for a frame.

    Args:
        frame: Output of ``render_frame``.
        include_caption: Append the title and caption lines under the disc.

    Returns:
        SVG markup as a string.
    """
    surface = SvgSurface()
    replay(frame.commands, surface)

    height = float(frame.height)
    caption_parts: list[str] = []
    if include_caption:
        background = next(
            (c.color for c in frame.commands if isinstance(c, FillRect)), "#000000"
        )
        caption_parts, caption_height = _caption_block(frame, background)
        height += caption_height

    defs_svg = "\n    ".join(surface.defs)
    body_svg = "\n  ".join(surface.parts + caption_parts)
    return f"""<svg xmlns="http://www.w3.org/2000/svg" width="{frame.width}" height="{height:.0f}" viewBox="0 0 {frame.width} {height:.2f}">
  <defs>
    {defs_svg}
  </defs>
  {body_svg}
</svg>
"""
