"""Catalog layer: turns a star table into clean, bounded StarRecord tuples.

Parsing the catalog file is skyfield's job (``hipparcos.load_dataframe``);
this module only selects columns, drops unusable rows, applies the
brightness cutoff, and caps the count.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd
from skyfield.api import Loader
from skyfield.data import hipparcos

from skydome.models import StarRecord

LOG = logging.getLogger(__name__)

DEFAULT_LIMITING_MAGNITUDE = 8.0
DEFAULT_MAX_STARS = 50_000

# (ra, dec, magnitude) column names per known table layout
_COLUMN_LAYOUTS: tuple[tuple[str, str, str], ...] = (
    ("ra_degrees", "dec_degrees", "magnitude"),  # skyfield hipparcos dataframe
    ("RAdeg", "DEdeg", "Vmag"),  # VizieR I/239 CSV export
    ("ra_deg", "dec_deg", "magnitude"),
)

_ROOT = Path(__file__).parent.parent.parent


class CatalogError(Exception):
    """Star table is missing the columns needed to build records."""


def _pick_columns(df: pd.DataFrame) -> tuple[str, str, str]:
    for layout in _COLUMN_LAYOUTS:
        if all(col in df.columns for col in layout):
            return layout
    raise CatalogError(
        f"No RA/Dec/magnitude columns found; have {sorted(map(str, df.columns))}"
    )


def stars_from_dataframe(
    df: pd.DataFrame,
    limiting_magnitude: float = DEFAULT_LIMITING_MAGNITUDE,
    max_stars: int = DEFAULT_MAX_STARS,
) -> tuple[StarRecord, ...]:
    """Build StarRecords from a star table.

    Non-numeric cells are coerced to NaN and those rows dropped, then rows
    fainter than ``limiting_magnitude`` are removed and the first
    ``max_stars`` kept, in table order.

    Args:
        df: Star table in one of the known column layouts.
        limiting_magnitude: Maximum magnitude to include (inclusive).
        max_stars: Upper bound on the number of records returned.

    Returns:
        Tuple of StarRecord objects.

    Raises:
        CatalogError: When no known column layout matches.
    """
    ra_col, dec_col, mag_col = _pick_columns(df)
    table = pd.DataFrame(
        {
            "ra": pd.to_numeric(df[ra_col], errors="coerce"),
            "dec": pd.to_numeric(df[dec_col], errors="coerce"),
            "mag": pd.to_numeric(df[mag_col], errors="coerce"),
        }
    )
    total = len(table)
    table = table.dropna(subset=["ra", "dec", "mag"])
    table = table[table["mag"] <= limiting_magnitude]
    table = table.head(max(0, max_stars))

    records = tuple(
        StarRecord(ra_deg=float(ra), dec_deg=float(dec), magnitude=float(mag))
        for ra, dec, mag in table.itertuples(index=False, name=None)
    )
    LOG.info(
        "catalog: kept %d of %d rows (mag <= %.1f, cap %d)",
        len(records),
        total,
        limiting_magnitude,
        max_stars,
    )
    return records


def load_hipparcos_stars(
    data_dir: Path | str | None = None,
    limiting_magnitude: float = DEFAULT_LIMITING_MAGNITUDE,
    max_stars: int = DEFAULT_MAX_STARS,
) -> tuple[StarRecord, ...]:
    """Load the Hipparcos main catalogue through skyfield and clean it.

    ``hip_main.dat`` is downloaded into ``data_dir`` on first use.
    """
    loader = Loader(str(data_dir or _ROOT / "resources"))
    with loader.open(hipparcos.URL) as f:
        df = hipparcos.load_dataframe(f)
    return stars_from_dataframe(df, limiting_magnitude, max_stars)
