from pathlib import Path

import pandas as pd
import pytest

import hpi_core.loaders.series_loader as sl
from hpi_core.errors import EmptyResultError, HpiDataError, SchemaError


def test_build_series_index_wide(wide_header, wide_rows):
    idx = sl.build_series_index(wide_header, wide_rows)
    assert idx.regions == ("Metro A", "Metro B")
    assert idx.latest("Metro A").value == 104.0


def test_build_series_index_schema_error_propagates():
    with pytest.raises(SchemaError) as exc:
        sl.build_series_index(["City", "2020-01", "2020-02", "Region2"], [])
    assert exc.value.user_message == "cannot read this file's structure."


def test_load_series_index_from_csv(tmp_path: Path):
    p = tmp_path / "hpi.csv"
    p.write_text(
        "city,date,index\n"
        "X,2021/01,50\n"
        "X,,60\n"
        "X,2021/02,bad\n"
        "Y,2021-03-15,70.5\n",
        encoding="utf-8",
    )

    idx = sl.load_series_index(p)

    assert [(o.region, o.date, o.value) for o in idx.observations] == [
        ("X", pd.Timestamp("2021-01-01", tz="UTC"), 50.0),
        ("Y", pd.Timestamp("2021-03-15", tz="UTC"), 70.5),
    ]


def test_load_series_index_no_usable_rows(tmp_path: Path):
    p = tmp_path / "blank.csv"
    p.write_text("city,date,index\n,2021-01,5\n,2021-02,6\n", encoding="utf-8")

    with pytest.raises(EmptyResultError) as exc:
        sl.load_series_index(p)
    assert isinstance(exc.value, HpiDataError)
    assert exc.value.user_message == "no usable data."


def test_load_series_index_uses_loader(monkeypatch, wide_header, wide_rows):
    calls = []

    def fake_load(source):
        calls.append(source)
        return wide_header, wide_rows

    monkeypatch.setattr(sl, "load_raw_table", fake_load)

    idx = sl.load_series_index("anything.csv")
    assert calls == ["anything.csv"]
    assert len(idx) == 10


def test_load_series_index_unreadable_file_is_a_data_error(tmp_path: Path):
    p = tmp_path / "blank.csv"
    p.write_text("", encoding="utf-8")
    with pytest.raises(HpiDataError) as exc:
        sl.load_series_index(p)
    assert exc.value.user_message == "could not read this file."


def test_load_series_index_skips_footnote_row(tmp_path: Path):
    p = tmp_path / "noted.csv"
    p.write_text("city,date,index\nX,2021-01,5\nfoot,note,with,extra,commas\n", encoding="utf-8")
    idx = sl.load_series_index(p)
    assert len(idx) == 1
    assert idx.latest("X").value == 5.0
