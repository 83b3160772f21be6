"""Data model definitions: explicit boundaries between catalog, compute, and render layers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from skydome.draw import DrawCommand


class ProjectionMode(str, Enum):
    """How a celestial direction is laid onto the disc."""

    HORIZON = "horizon"  # Alt/Az, zenith at centre (time-aware)
    EQUATORIAL = "equatorial"  # RA/Dec, north celestial pole at centre (time-independent)


@dataclass(frozen=True)
class StarRecord:
    """Celestial coordinates + brightness for a single catalog star."""

    ra_deg: float  # Right ascension (degrees, [0, 360))
    dec_deg: float  # Declination (degrees, [-90, 90])
    magnitude: float  # Apparent magnitude (smaller = brighter)


@dataclass(frozen=True)
class ConstellationEdge:
    """A single constellation line segment between two catalog directions."""

    ra1: float
    dec1: float
    ra2: float
    dec2: float


@dataclass(frozen=True)
class Constellation:
    """A named group of line segments."""

    name: str
    edges: tuple[ConstellationEdge, ...]


@dataclass(frozen=True)
class Location:
    """Observer position on the ground."""

    lat: float  # Latitude (decimal degrees, North positive)
    lon: float  # Longitude (decimal degrees, East positive)
    city: str = ""
    state: str = ""
    timezone: str | None = None  # IANA zone name; looked up from lat/lon when None


@dataclass(frozen=True)
class ObservationMoment:
    """The instant being drawn."""

    instant: datetime  # Absolute UTC timestamp (naive values are read as UTC)
    show_clock_time: bool = True  # Caption includes time-of-day

    @property
    def utc(self) -> datetime:
        if self.instant.tzinfo is None:
            return self.instant.replace(tzinfo=timezone.utc)
        return self.instant.astimezone(timezone.utc)


@dataclass(frozen=True)
class HorizontalPosition:
    """Altitude/azimuth of a direction for one observer, in radians."""

    alt: float  # (-pi/2, pi/2], 0 = horizon
    az: float  # [0, 2*pi), 0 = North, pi/2 = East


@dataclass(frozen=True)
class ScreenPoint:
    """Disc-local pixel coordinates."""

    x: float
    y: float


@dataclass(frozen=True)
class FrameOutput:
    """The sole input to drawing surfaces. Fully computed frame."""

    commands: tuple[DrawCommand, ...]  # In paint order
    caption: str
    width: int
    height: int
    placeholder: bool = False  # True while the catalog is still empty
    dropped_stars: int = 0  # Records rejected by validation
    grid_end: int = 0  # Commands before this index are background and grid
