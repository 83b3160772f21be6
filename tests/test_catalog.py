from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from skydome.catalog import CatalogError, load_hipparcos_stars, stars_from_dataframe
from skydome.models import StarRecord


def test_voidmain_columns_are_cleaned():
    df = pd.DataFrame(
        {
            "HIP": [1, 2, 3, 4, 5],
            "RAdeg": ["101.2877", "", "88.7929", "10.0", "abc"],
            "DEdeg": ["-16.7161", "5.0", "7.4071", "20.0", "1.0"],
            "Vmag": ["-1.46", "2.0", "0.45", "9.5", "3.0"],
        }
    )
    stars = stars_from_dataframe(df)
    assert stars == (
        StarRecord(101.2877, -16.7161, -1.46),
        StarRecord(88.7929, 7.4071, 0.45),
    )


def test_skyfield_hipparcos_columns():
    df = pd.DataFrame(
        {
            "ra_degrees": [0.5, 1.5, np.nan],
            "dec_degrees": [10.0, -10.0, 0.0],
            "magnitude": [5.0, 6.9, 1.0],
        },
        index=pd.Index([11, 12, 13], name="hip"),
    )
    stars = stars_from_dataframe(df, limiting_magnitude=6.5)
    assert stars == (StarRecord(0.5, 10.0, 5.0),)


def test_cap_keeps_first_rows_in_table_order():
    df = pd.DataFrame(
        {
            "ra_deg": [float(i) for i in range(10)],
            "dec_deg": [0.0] * 10,
            "magnitude": [1.0] * 10,
        }
    )
    stars = stars_from_dataframe(df, max_stars=3)
    assert [s.ra_deg for s in stars] == [0.0, 1.0, 2.0]
    assert stars_from_dataframe(df, max_stars=0) == ()


def test_cutoff_is_inclusive():
    df = pd.DataFrame({"RAdeg": [1.0, 2.0], "DEdeg": [0.0, 0.0], "Vmag": [8.0, 8.01]})
    assert len(stars_from_dataframe(df)) == 1


def test_missing_columns_raise():
    with pytest.raises(CatalogError):
        stars_from_dataframe(pd.DataFrame({"ra": [1.0], "dec": [2.0]}))


def _hip_row(hip, vmag, ra, dec):
    # Pipe-delimited hip_main.dat layout; skyfield reads fields 1, 5, 8, 9, 11, 12, 13
    fields = ["H", hip, "", "", "", vmag, "", "G", ra, dec, "*", "1.00", "0.00", "0.00"]
    return "|".join(fields + [""] * 6) + "\n"


def test_load_hipparcos_stars_from_local_file(tmp_path):
    (tmp_path / "hip_main.dat").write_text(
        _hip_row("27989", "0.45", "88.79287161", "7.40703634")
        + _hip_row("1", "9.10", "0.00091185", "1.08901332")
        + _hip_row("32349", "-1.44", "101.28854105", "-16.71314306")
        + _hip_row("2", "", "0.00379737", "-19.49883745")
    )

    stars = load_hipparcos_stars(tmp_path, limiting_magnitude=8.0, max_stars=10)

    assert [s.magnitude for s in stars] == pytest.approx([0.45, -1.44])
    assert stars[0].ra_deg == pytest.approx(88.79287161)
    assert stars[1].dec_deg == pytest.approx(-16.71314306)
    assert load_hipparcos_stars(tmp_path, max_stars=1) == stars[:1]
