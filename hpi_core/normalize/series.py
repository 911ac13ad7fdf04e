from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Sequence

import numpy as np
import pandas as pd

from hpi_core.errors import EmptyResultError
from hpi_core.normalize.dates import DATE_DTYPE, parse_dates
from hpi_core.normalize.schema import Orientation, SchemaDescriptor

logger = logging.getLogger(__name__)

RawRow = Mapping[str, Any]

FRAME_COLUMNS = ["region", "date", "value"]


@dataclass(frozen=True)
class Observation:
    region: str
    date: pd.Timestamp
    value: float


@dataclass(frozen=True)
class SeriesIndex:
    """
    Canonical store handed to the charts.
    `observations` is sorted by (date, region); `by_region` keeps each
    region's observations in that same order, keyed in first-appearance order
    (read-only);
    `regions` is the sorted key list for selection controls.
    """

    observations: tuple[Observation, ...]
    by_region: Mapping[str, tuple[Observation, ...]] = field(repr=False, hash=False)
    regions: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.observations)

    def __contains__(self, region: object) -> bool:
        return region in self.by_region

    def series(self, region: str) -> tuple[Observation, ...]:
        return self.by_region[region]

    def latest(self, region: str) -> Observation:
        return self.by_region[region][-1]

    def to_frame(self, region: str | None = None) -> pd.DataFrame:
        obs = self.observations if region is None else self.series(region)
        if not obs:
            return pd.DataFrame(columns=FRAME_COLUMNS)
        return pd.DataFrame(
            {
                "region": [o.region for o in obs],
                "date": pd.Series([o.date for o in obs], dtype=DATE_DTYPE),
                "value": np.array([o.value for o in obs], dtype=float),
            }
        )

    def to_rows(self) -> list[dict[str, Any]]:
        """Long-format raw rows (region, date, value) that normalize back to this index."""
        rows = []
        for o in self.observations:
            d = o.date.strftime("%Y-%m-%d") if o.date == o.date.normalize() else o.date.isoformat()
            rows.append({"region": o.region, "date": d, "value": o.value})
        return rows

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> "SeriesIndex":
        """Build from a frame already filtered and sorted by (date, region)."""
        obs = tuple(
            Observation(region=r, date=d, value=float(v))
            for r, d, v in zip(df["region"], df["date"], df["value"])
        )
        groups: dict[str, list[Observation]] = {}
        for o in obs:
            groups.setdefault(o.region, []).append(o)
        return cls(
            observations=obs,
            by_region=MappingProxyType({k: tuple(v) for k, v in groups.items()}),
            regions=tuple(sorted(groups)),
        )


def region_text(v: Any) -> str:
    if v is None or (not isinstance(v, str) and pd.isna(v)):
        return ""
    return str(v).strip()


def parse_values(cells: Iterable[Any]) -> pd.Series:
    """Numeric parse; empty, missing, non-numeric and non-finite cells become NaN."""
    s = pd.Series(list(cells), dtype="object").map(lambda v: v.strip() if isinstance(v, str) else v)
    num = pd.to_numeric(s, errors="coerce").astype(float)
    return num.where(np.isfinite(num))


def _wide_candidates(rows: Sequence[RawRow], schema: SchemaDescriptor) -> pd.DataFrame:
    cols = list(schema.date_columns)
    n_rows, n_cols = len(rows), len(cols)

    col_dates = parse_dates(cols)
    # row-major: every date column of row 0, then row 1, ...
    regions = pd.Series([region_text(r.get(schema.region_column)) for r in rows], dtype="object")
    return pd.DataFrame(
        {
            "region": regions.repeat(n_cols).reset_index(drop=True),
            "date": col_dates.take(np.tile(np.arange(n_cols), n_rows)).reset_index(drop=True),
            "value": parse_values(r.get(c) for r in rows for c in cols),
        }
    )


def _long_candidates(rows: Sequence[RawRow], schema: SchemaDescriptor) -> pd.DataFrame:
    return pd.DataFrame(
        {
            "region": pd.Series([region_text(r.get(schema.region_column)) for r in rows], dtype="object"),
            "date": parse_dates(r.get(schema.date_column) for r in rows),
            "value": parse_values(r.get(schema.value_column) for r in rows),
        }
    )


def normalize(rows: Sequence[RawRow], schema: SchemaDescriptor) -> SeriesIndex:
    """
    Turn raw rows into a SeriesIndex using a detected schema.
    Rows with an empty region, unreadable date or invalid value are dropped.
    Duplicate (region, date) pairs are kept in input order.

    Raises:
        EmptyResultError: nothing survived validation.
    """
    # header names are matched as strings, see detect()
    rows = [{str(k): v for k, v in r.items()} for r in rows]
    if schema.orientation is Orientation.WIDE:
        cand = _wide_candidates(rows, schema)
    else:
        cand = _long_candidates(rows, schema)

    valid = cand["region"].ne("") & cand["date"].notna() & cand["value"].notna()
    kept = cand[valid]
    logger.info(
        "Normalized %d observations from %d rows (%d candidates dropped)",
        len(kept), len(rows), len(cand) - len(kept),
    )
    if kept.empty:
        logger.error("After normalization, no valid rows.")
        raise EmptyResultError("no valid observations after normalization")

    # multi-key sort is a stable lexsort, so duplicates keep input order
    kept = kept.sort_values(["date", "region"]).reset_index(drop=True)
    return SeriesIndex.from_frame(kept)
