"""Caption text under the dome: place, date, and coordinates."""

from datetime import datetime, tzinfo

from pytz import UnknownTimeZoneError, timezone, utc
from timezonefinder import TimezoneFinder

from skydome.models import Location, ObservationMoment

_tf = TimezoneFinder()


def _observer_zone(location: Location) -> tzinfo:
    """Resolve the observer's zone: explicit name first, then lat/lon lookup, then UTC."""
    name = location.timezone or _tf.timezone_at(lat=location.lat, lng=location.lon)
    if name is None:
        return utc
    try:
        return timezone(name)
    except UnknownTimeZoneError:
        return utc


def local_time(moment: ObservationMoment, location: Location) -> datetime:
    """The observation instant on the observer's wall clock."""
    return moment.utc.astimezone(_observer_zone(location))


def format_location(location: Location) -> str:
    parts = [p.strip() for p in (location.city, location.state) if p and p.strip()]
    return ", ".join(parts) or "Unknown location"


def format_date(moment: ObservationMoment, location: Location) -> str:
    """``February 24, 1993`` with `` 15:00 CST`` appended when the clock is shown."""
    local = local_time(moment, location)
    text = f"{local.strftime('%B')} {local.day}, {local.year}"
    if moment.show_clock_time:
        text += f" {local.strftime('%H:%M')} {local.tzname()}"
    return text


def format_coordinates(lat: float, lon: float) -> str:
    """Latitude/longitude with hemisphere suffixes, e.g. ``29.7660° N  95.3701° W``."""
    ns = "N" if lat >= 0 else "S"
    ew = "E" if lon >= 0 else "W"
    return f"{abs(lat):.4f}° {ns}  {abs(lon):.4f}° {ew}"


def format_caption(moment: ObservationMoment, location: Location) -> str:
    """Three-line caption: location, date, coordinates."""
    return "\n".join(
        (
            format_location(location),
            format_date(moment, location),
            format_coordinates(location.lat, location.lon),
        )
    )
