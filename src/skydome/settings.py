"""Render configuration: presentation constants and environment overrides.

Every value has a default. ``load_settings`` reads ``SKYDOME_*`` variables
(optionally from a ``.env`` file) on top of those defaults, e.g.::

    SKYDOME_CANVAS_SIZE=800
    SKYDOME_PROJECTION=equatorial
    SKYDOME_LIMITING_MAGNITUDE=6.5
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace

from dotenv import load_dotenv

from skydome.models import ProjectionMode

LOG = logging.getLogger(__name__)

_ENV_PREFIX = "SKYDOME_"


class SettingsError(ValueError):
    """Malformed configuration value."""


@dataclass(frozen=True)
class RenderSettings:
    """Presentation parameters for one frame. Not physical constants."""

    canvas_size: int = 600  # Square canvas (px)
    margin: float = 20.0  # Gap between disc rim and canvas edge (px)
    projection: ProjectionMode = ProjectionMode.HORIZON

    background_color: str = "#0b0e1a"
    border_color: str = "#ffffff"
    grid_color: str = "#ffffff"
    grid_alpha: float = 0.20
    grid_line_width: float = 0.6
    star_color: str = "#ffffff"
    line_color: str = "#ffffff"
    line_alpha: float = 0.35
    line_width: float = 0.6
    text_color: str = "#ffffff"

    # baseSize = max(min_size, size_offset - size_slope * mag)
    size_offset: float = 6.0
    size_slope: float = 1.2
    min_size: float = 0.8
    glow_scale: float = 2.2  # glow radius = glow_scale * baseSize
    core_scale: float = 0.6  # core radius = core_scale * baseSize
    core_alpha: float = 0.95
    # glow centre alpha = clamp(alpha_offset - alpha_slope * mag, 0, 1)
    alpha_offset: float = 1.3
    alpha_slope: float = 0.15

    limiting_magnitude: float = 8.0  # Catalog brightness cutoff
    max_stars: int = 50_000  # Catalog count cap

    placeholder_text: str = "Loading stars..."

    @property
    def radius(self) -> float:
        return self.canvas_size / 2.0 - self.margin


def _coerce(name: str, current: object, raw: str) -> object:
    try:
        if isinstance(current, ProjectionMode):
            return ProjectionMode(raw.strip().lower())
        if isinstance(current, int):
            return int(raw)
        if isinstance(current, float):
            return float(raw)
    except ValueError as exc:
        raise SettingsError(f"{_ENV_PREFIX}{name.upper()}={raw!r}: {exc}") from exc
    return raw


def load_settings(
    env: Mapping[str, str] | None = None, use_dotenv: bool = True
) -> RenderSettings:
    """Build RenderSettings from defaults plus ``SKYDOME_*`` variables.

    Args:
        env: Variables to read. Defaults to ``os.environ``.
        use_dotenv: Load a ``.env`` file into the process environment first.

    Returns:
        Validated RenderSettings.

    Raises:
        SettingsError: When a value cannot be parsed or is out of range.
    """
    if use_dotenv:
        load_dotenv()
    if env is None:
        env = os.environ

    defaults = RenderSettings()
    overrides: dict[str, object] = {}
    for f in fields(RenderSettings):
        raw = env.get(_ENV_PREFIX + f.name.upper())
        if raw is None:
            continue
        overrides[f.name] = _coerce(f.name, getattr(defaults, f.name), raw)

    settings = replace(defaults, **overrides)
    if settings.radius <= 0:
        raise SettingsError(
            f"canvas_size={settings.canvas_size} leaves no room for margin={settings.margin}"
        )
    if settings.min_size <= 0:
        raise SettingsError("min_size must be positive")
    if settings.max_stars < 0:
        raise SettingsError("max_stars must not be negative")
    if overrides:
        LOG.debug("settings overrides: %s", sorted(overrides))
    return settings
