"""Plotly 2D interactive renderer.

Replays a frame into a Plotly figure: circles and the background become
layout shapes, stars become two marker traces (glow under core), and
constellation lines a single trace using None separators.
Supports wheel zoom and drag panning.
"""

from __future__ import annotations

import plotly.graph_objects as go

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


class PlotlySurface:
    """DrawingSurface that collects shapes and trace data for a go.Figure."""

    def __init__(self) -> None:
        self.shapes: list[dict] = []
        self.annotations: list[dict] = []
        self.glow: dict[str, list] = {"x": [], "y": [], "size": [], "opacity": []}
        self.core: dict[str, list] = {"x": [], "y": [], "size": [], "opacity": []}
        self.grid_x: list[float | None] = []
        self.grid_y: list[float | None] = []
        self.line_x: list[float | None] = []
        self.line_y: list[float | None] = []
        self.star_color = "#ffffff"
        self.line_color = "#ffffff"
        self.line_alpha = 1.0
        self.overlay = False  # Set once the background and grid are replayed

    def fill_rect(self, cmd: FillRect) -> None:
        self.shapes.append(
            dict(
                type="rect",
                x0=cmd.x,
                y0=cmd.y,
                x1=cmd.x + cmd.width,
                y1=cmd.y + cmd.height,
                fillcolor=cmd.color,
                line=dict(width=0),
                layer="below",
            )
        )

    def stroke_circle(self, cmd: StrokeCircle) -> None:
        self.shapes.append(
            dict(
                type="circle",
                x0=cmd.cx - cmd.r,
                y0=cmd.cy - cmd.r,
                x1=cmd.cx + cmd.r,
                y1=cmd.cy + cmd.r,
                line=dict(color=cmd.color, width=cmd.line_width),
                opacity=cmd.alpha,
                layer="below",
            )
        )

    def stroke_line(self, cmd: StrokeLine) -> None:
        if self.overlay:
            self.line_x += [cmd.x1, cmd.x2, None]
            self.line_y += [cmd.y1, cmd.y2, None]
            self.line_color = cmd.color
            self.line_alpha = cmd.alpha
        else:
            self.shapes.append(
                dict(
                    type="line",
                    x0=cmd.x1,
                    y0=cmd.y1,
                    x1=cmd.x2,
                    y1=cmd.y2,
                    line=dict(color=cmd.color, width=cmd.line_width),
                    opacity=cmd.alpha,
                    layer="below",
                )
            )

    def fill_radial_glow(self, cmd: RadialGlow) -> None:
        self.glow["x"].append(cmd.cx)
        self.glow["y"].append(cmd.cy)
        self.glow["size"].append(2 * cmd.r)
        self.glow["opacity"].append(cmd.center_alpha * 0.5)
        self.star_color = cmd.color

    def fill_circle(self, cmd: FillCircle) -> None:
        self.core["x"].append(cmd.cx)
        self.core["y"].append(cmd.cy)
        self.core["size"].append(2 * cmd.r)
        self.core["opacity"].append(cmd.alpha)

    def fill_text(self, cmd: FillText) -> None:
        self.annotations.append(
            dict(
                x=cmd.x,
                y=cmd.y,
                text=cmd.text,
                showarrow=False,
                font=dict(color=cmd.color, size=cmd.font_size),
            )
        )


def render_plotly_chart(frame: FrameOutput) -> go.Figure:
    """Render a frame as a Plotly 2D interactive chart.

    Args:
        frame: Output of ``render_frame``.

    Returns:
        Plotly Figure object.
    """
    surface = PlotlySurface()
    replay(frame.commands[: frame.grid_end], surface)
    surface.overlay = True
    replay(frame.commands[frame.grid_end :], surface)

    glow_trace = go.Scatter(
        x=surface.glow["x"],
        y=surface.glow["y"],
        mode="markers",
        marker=dict(
            size=surface.glow["size"],
            color=surface.star_color,
            opacity=surface.glow["opacity"],
            line=dict(width=0),
        ),
        hoverinfo="skip",
        name="glow",
    )
    core_trace = go.Scatter(
        x=surface.core["x"],
        y=surface.core["y"],
        mode="markers",
        marker=dict(
            size=surface.core["size"],
            color=surface.star_color,
            opacity=surface.core["opacity"],
            line=dict(width=0),
        ),
        hoverinfo="skip",
        name="stars",
    )
    line_trace = go.Scatter(
        x=surface.line_x,
        y=surface.line_y,
        mode="lines",
        line=dict(color=surface.line_color, width=1),
        opacity=surface.line_alpha,
        hoverinfo="skip",
        name="constellations",
    )

    fig = go.Figure(data=[glow_trace, core_trace, line_trace])
    fig.update_layout(
        paper_bgcolor="#000000",
        plot_bgcolor="#000000",
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        width=frame.width,
        height=frame.height,
        dragmode="pan",
        shapes=surface.shapes,
        annotations=surface.annotations,
        xaxis=dict(visible=False, range=[0, frame.width], fixedrange=False),
        # Pixel space: y grows downward
        yaxis=dict(
            visible=False,
            range=[frame.height, 0],
            scaleanchor="x",
            fixedrange=False,
        ),
    )
    fig._config = {"scrollZoom": True, "displayModeBar": False}  # type: ignore[attr-defined]
    return fig
