"""Per-record validation of catalog stars."""

import math
from collections.abc import Iterable
from dataclasses import dataclass

from skydome.models import StarRecord


@dataclass(frozen=True)
class StarValidation:
    """Tagged outcome of checking one record."""

    star: StarRecord
    ok: bool
    reason: str = ""  # Empty when ok


def _is_finite_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def validate_star(star: StarRecord) -> StarValidation:
    """Check that RA, Dec, and magnitude are all finite numbers."""
    for field in ("ra_deg", "dec_deg", "magnitude"):
        if not _is_finite_number(getattr(star, field)):
            return StarValidation(star=star, ok=False, reason=f"{field} not finite")
    return StarValidation(star=star, ok=True)


def partition_stars(
    stars: Iterable[StarRecord],
) -> tuple[tuple[StarRecord, ...], tuple[StarValidation, ...]]:
    """Split records into (valid stars, failed validations), preserving order."""
    valid: list[StarRecord] = []
    failed: list[StarValidation] = []
    for star in stars:
        result = validate_star(star)
        if result.ok:
            valid.append(star)
        else:
            failed.append(result)
    return tuple(valid), tuple(failed)
