from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Sequence

from hpi_core.errors import SchemaError

logger = logging.getLogger(__name__)

# Ranked synonyms: earlier entries win over later ones.
REGION_CANDIDATES = ("city", "regionname", "region", "metro", "location", "area", "name")
DATE_CANDIDATES = ("date", "month", "time", "period", "year_month")
VALUE_CANDIDATES = ("index", "value", "hpi", "price", "priceindex", "nsa", "house_price_index")

# Wide layout needs at least this many date-like headers, and at least
# WIDE_MIN_SHARE of the non-region columns.
WIDE_MIN_DATE_COLUMNS = 6
WIDE_MIN_SHARE = 0.3

_DATE_HEADER_RES = (
    re.compile(r"^\d{4}[-/]\d{2}([-/]\d{2})?$"),
    re.compile(r"^\d{6}$"),
    re.compile(r"^\d{4}$"),
)


class Orientation(str, Enum):
    WIDE = "wide"
    LONG = "long"


@dataclass(frozen=True)
class SchemaDescriptor:
    orientation: Orientation
    region_column: str
    date_column: Optional[str] = None
    value_column: Optional[str] = None
    date_columns: tuple[str, ...] = ()

    @property
    def columns(self) -> tuple[str, ...]:
        """Every header name this schema reads."""
        if self.orientation is Orientation.WIDE:
            return (self.region_column, *self.date_columns)
        return (self.region_column, self.date_column, self.value_column)


def find_key(keys: Sequence[str], candidates: Iterable[str]) -> Optional[str]:
    """
    Ranked, case-insensitive header search.
    For each candidate in order, return the first key (in header order) that
    equals it or contains it. None when nothing matches.
    """
    lowered = [(k, k.lower()) for k in keys]
    for cand in candidates:
        for raw, low in lowered:
            if low == cand or cand in low:
                return raw
    return None


def looks_like_date_header(name: Any) -> bool:
    t = str(name).strip()
    return any(rx.match(t) for rx in _DATE_HEADER_RES)


def wide_threshold(n_other: int) -> float:
    return max(WIDE_MIN_DATE_COLUMNS, n_other * WIDE_MIN_SHARE)


def detect(
    header: Sequence[Any],
    sample_rows: Optional[Sequence[Mapping[str, Any]]] = None,
) -> SchemaDescriptor:
    """
    Classify the table layout from its header names.

    `sample_rows` is accepted so callers can pass what they have, but the
    decision reads header names only, which keeps it deterministic.

    Raises:
        SchemaError: no region column, or (long layout) no date/value column.
    """
    keys = [str(k) for k in header]

    region_key = find_key(keys, REGION_CANDIDATES)
    if region_key is None:
        logger.error("Cannot detect region column from headers: %s", keys)
        raise SchemaError("no region column")

    other_keys = [k for k in keys if k != region_key]
    date_cols = [k for k in other_keys if looks_like_date_header(k)]

    if len(date_cols) >= wide_threshold(len(other_keys)):
        logger.info(
            "Detected WIDE format. Region column: %s, date columns: %d",
            region_key, len(date_cols),
        )
        return SchemaDescriptor(
            orientation=Orientation.WIDE,
            region_column=region_key,
            date_columns=tuple(date_cols),
        )

    date_key = find_key(other_keys, DATE_CANDIDATES)
    value_key = find_key([k for k in other_keys if k != date_key], VALUE_CANDIDATES)
    logger.info(
        "Detected LONG format. region/date/value: %s / %s / %s",
        region_key, date_key, value_key,
    )
    if date_key is None or value_key is None:
        logger.error("Cannot detect date/value columns. Headers: %s", keys)
        raise SchemaError("no date/value column")

    return SchemaDescriptor(
        orientation=Orientation.LONG,
        region_column=region_key,
        date_column=date_key,
        value_column=value_key,
    )
