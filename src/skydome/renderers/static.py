"""Matplotlib static PNG renderer."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.collections import EllipseCollection
from matplotlib.colors import to_rgba_array
from matplotlib.figure import Figure
from matplotlib.patches import Circle, Rectangle

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

_ROOT = Path(__file__).parent.parent.parent.parent
_GLOW_RINGS = 8  # Concentric discs approximating a radial gradient


class MatplotlibSurface:
    """DrawingSurface over a matplotlib Axes in frame pixel coordinates.

    Consecutive star commands are buffered and drawn as one collection per
    glow ring plus one for the cores. Call ``flush`` after the last command.
    """

    def __init__(self, ax: Axes) -> None:
        self.ax = ax
        self._z = 0
        self._glows: list[RadialGlow] = []
        self._cores: list[FillCircle] = []

    def _next_z(self) -> int:
        # Paint order is the command order
        self.flush()
        self._z += 1
        return self._z

    def _discs(self, x, y, radii, rgba, zorder: int) -> None:
        diameters = 2 * np.asarray(radii, dtype=float)
        self.ax.add_collection(
            EllipseCollection(
                diameters,
                diameters,
                np.zeros(len(diameters)),
                units="xy",
                offsets=np.column_stack([x, y]),
                offset_transform=self.ax.transData,
                facecolors=rgba,
                edgecolors="none",
                zorder=zorder,
            )
        )

    def flush(self) -> None:
        """Draw buffered glows, then cores, as batched collections."""
        glows = [g for g in self._glows if g.center_alpha > 0]
        cores = self._cores
        self._glows, self._cores = [], []
        if glows:
            self._z += 1
            x = np.array([g.cx for g in glows])
            y = np.array([g.cy for g in glows])
            r = np.array([g.r for g in glows])
            rgba = to_rgba_array([g.color for g in glows])
            # Stacked translucent rings, outermost first; cumulative alpha peaks at the centre
            rgba[:, 3] = np.array([g.center_alpha for g in glows]) / _GLOW_RINGS
            for scale in np.linspace(1.0, 1.0 / _GLOW_RINGS, _GLOW_RINGS):
                self._discs(x, y, r * scale, rgba, self._z)
        if cores:
            self._z += 1
            rgba = to_rgba_array([c.color for c in cores])
            rgba[:, 3] = [c.alpha for c in cores]
            self._discs(
                [c.cx for c in cores],
                [c.cy for c in cores],
                [c.r for c in cores],
                rgba,
                self._z,
            )

    def fill_rect(self, cmd: FillRect) -> None:
        self.ax.add_patch(
            Rectangle(
                (cmd.x, cmd.y),
                cmd.width,
                cmd.height,
                facecolor=cmd.color,
                edgecolor="none",
                zorder=self._next_z(),
            )
        )

    def stroke_circle(self, cmd: StrokeCircle) -> None:
        self.ax.add_patch(
            Circle(
                (cmd.cx, cmd.cy),
                cmd.r,
                fill=False,
                edgecolor=cmd.color,
                alpha=cmd.alpha,
                linewidth=cmd.line_width,
                zorder=self._next_z(),
            )
        )

    def stroke_line(self, cmd: StrokeLine) -> None:
        self.ax.plot(
            [cmd.x1, cmd.x2],
            [cmd.y1, cmd.y2],
            color=cmd.color,
            alpha=cmd.alpha,
            linewidth=cmd.line_width,
            zorder=self._next_z(),
        )

    def fill_radial_glow(self, cmd: RadialGlow) -> None:
        self._glows.append(cmd)

    def fill_circle(self, cmd: FillCircle) -> None:
        self._cores.append(cmd)

    def fill_text(self, cmd: FillText) -> None:
        self.ax.text(
            cmd.x,
            cmd.y,
            cmd.text,
            color=cmd.color,
            fontsize=cmd.font_size * 0.75,
            ha="center",
            va="center",
            zorder=self._next_z(),
        )


def render_static_chart(frame: FrameOutput, chart_size: float = 8.0) -> Figure:
    """Render a frame as a static matplotlib image.

    Args:
        frame: Output of ``render_frame``.
        chart_size: Output image size in inches (square disc area).

    Returns:
        matplotlib Figure object.
    """
    caption_lines = frame.caption.splitlines()
    caption_inches = 0.3 * (len(caption_lines) + 1)
    fig = plt.figure(figsize=(chart_size, chart_size + caption_inches))
    background = next(
        (c.color for c in frame.commands if isinstance(c, FillRect)), "black"
    )
    fig.patch.set_facecolor(background)

    disc_frac = chart_size / (chart_size + caption_inches)
    ax = fig.add_axes((0.0, 1.0 - disc_frac, 1.0, disc_frac))
    ax.set_xlim(0, frame.width)
    ax.set_ylim(frame.height, 0)  # Pixel space: y grows downward
    ax.set_aspect("equal")
    ax.axis("off")

    surface = MatplotlibSurface(ax)
    replay(frame.commands, surface)
    surface.flush()

    text = "\n".join(["THE NIGHT SKY", *caption_lines])
    fig.text(
        0.5,
        (1.0 - disc_frac) / 2,
        text,
        color="white",
        ha="center",
        va="center",
        fontsize=10,
        linespacing=1.6,
    )
    return fig


def save_static_chart(
    frame: FrameOutput, output_path: Path | None = None, chart_size: float = 8.0
) -> Path:
    """Save a frame as a PNG file.

    Args:
        frame: Output of ``render_frame``.
        output_path: Destination path. Auto-generated under results/ if None.
        chart_size: Output image size in inches.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        first_line = frame.caption.splitlines()[0] if frame.caption else "sky"
        filename = f"{first_line}.png".replace(" ", "_").replace(",", "")
        output_path = _ROOT / "results" / filename

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_chart(frame, chart_size=chart_size)
    fig.savefig(output_path, facecolor=fig.get_facecolor(), dpi=frame.width / chart_size)
    plt.close(fig)
    return output_path
