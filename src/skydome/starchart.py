"""CLI entry point for sky dome generation.

    uv run skydome --lat 29.7660 --lon -95.3701 --city Houston --state TX \\
        --when 1993-02-25T03:00:00Z --out results/houston.svg
"""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from datetime import datetime, timezone
from pathlib import Path

from dotenv import load_dotenv

from skydome.catalog import load_hipparcos_stars
from skydome.constellations import CONSTELLATIONS
from skydome.models import Location, ObservationMoment, ProjectionMode
from skydome.render import render_frame
from skydome.renderers.static import save_static_chart
from skydome.renderers.svg_2d import render_svg
from skydome.settings import load_settings

LOG = logging.getLogger(__name__)


def _parse_instant(value: str) -> datetime:
    """ISO 8601; a trailing Z or a missing offset both mean UTC."""
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="skydome", description=__doc__.splitlines()[0])
    parser.add_argument("--lat", type=float, required=True, help="Latitude, North positive")
    parser.add_argument("--lon", type=float, required=True, help="Longitude, East positive")
    parser.add_argument("--city", default="")
    parser.add_argument("--state", default="")
    parser.add_argument("--tz", default=None, help="IANA time zone for the caption")
    parser.add_argument(
        "--when",
        type=_parse_instant,
        default=None,
        help="UTC instant, e.g. 1993-02-25T03:00:00Z (default: now)",
    )
    parser.add_argument("--no-clock", action="store_true", help="Omit time-of-day in caption")
    parser.add_argument(
        "--mode",
        choices=[m.value for m in ProjectionMode],
        default=None,
        help="Projection (default from SKYDOME_PROJECTION, else horizon)",
    )
    parser.add_argument("--data-dir", type=Path, default=None, help="Catalog download dir")
    parser.add_argument(
        "--out", type=Path, default=None, help="Output .png or .svg (default: results/*.png)"
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = load_settings(use_dotenv=False)
    mode = ProjectionMode(args.mode) if args.mode else settings.projection
    stars = load_hipparcos_stars(
        args.data_dir,
        limiting_magnitude=settings.limiting_magnitude,
        max_stars=settings.max_stars,
    )
    location = Location(
        lat=args.lat, lon=args.lon, city=args.city, state=args.state, timezone=args.tz
    )
    moment = ObservationMoment(
        instant=args.when or datetime.now(timezone.utc),
        show_clock_time=not args.no_clock,
    )

    frame = render_frame(stars, CONSTELLATIONS, moment, location, mode, settings)
    if frame.dropped_stars:
        LOG.warning("skipped %d invalid star records", frame.dropped_stars)

    if args.out is not None and args.out.suffix.lower() == ".svg":
        args.out.parent.mkdir(parents=True, exist_ok=True)
        args.out.write_text(render_svg(frame), encoding="utf-8")
        path = args.out
    else:
        path = save_static_chart(frame, args.out)
    print(f"Saved: {path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
