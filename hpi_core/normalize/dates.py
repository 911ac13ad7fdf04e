from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, Iterable, Optional, Sequence

import pandas as pd

# A parser takes a Series of trimmed strings and returns UTC timestamps on the
# same index, NaT where it could not read the value.
DateParser = Callable[[pd.Series], pd.Series]

# Shared result dtype. Microseconds hold any year a strptime format can read.
DATE_DTYPE = "datetime64[us, UTC]"

# Priority order matters: the first format that reads a value wins.
STRICT_FORMATS: tuple[str, ...] = ("%Y-%m-%d", "%Y/%m/%d", "%Y-%m", "%Y/%m", "%Y%m", "%Y")


def strict_parser(fmt: str) -> DateParser:
    """Parser that accepts exactly one strptime format (whole string, UTC)."""

    def parse(raw: pd.Series) -> pd.Series:
        return pd.to_datetime(raw, format=fmt, exact=True, errors="coerce", utc=True)

    parse.__name__ = f"strict_{fmt}"
    return parse


STRICT_PARSERS: tuple[DateParser, ...] = tuple(strict_parser(f) for f in STRICT_FORMATS)


def generic_parser(raw: pd.Series) -> pd.Series:
    """
    Best-effort element-wise parse (dateutil through pandas).
    Lenient by nature: swap it for `no_fallback` to accept strict formats only.
    """
    return pd.to_datetime(raw, format="mixed", errors="coerce", utc=True)


def no_fallback(raw: pd.Series) -> pd.Series:
    return pd.Series(pd.NaT, index=raw.index, dtype=DATE_DTYPE)


def _clean_text(v: Any) -> Optional[str]:
    if v is None or isinstance(v, datetime):
        return None
    if not isinstance(v, str) and pd.isna(v):
        return None
    s = str(v).strip()
    return s or None


def as_utc(parsed: pd.Series) -> pd.Series:
    """Bring a parser result to DATE_DTYPE; values it cannot hold become NaT."""
    if not isinstance(parsed.dtype, pd.DatetimeTZDtype):
        parsed = pd.to_datetime(parsed, errors="coerce", utc=True)
    elif str(parsed.dt.tz) != "UTC":
        parsed = parsed.dt.tz_convert("UTC")
    return parsed.dt.as_unit("us")


def parse_dates(
    values: Iterable[Any],
    *,
    parsers: Sequence[DateParser] = STRICT_PARSERS,
    fallback: DateParser = generic_parser,
) -> pd.Series:
    """
    Vectorised date parsing with the smart policy:
      - datetime / Timestamp cells pass through (converted to UTC)
      - strings are trimmed and tried against each parser in order,
        then against `fallback`
      - anything left over is NaT
    Returns a Series (RangeIndex) of DATE_DTYPE, so years outside the
    nanosecond range (before 1677, after 2262) still parse.
    """
    raw = pd.Series(list(values), dtype="object")
    out = pd.Series(pd.NaT, index=raw.index, dtype=DATE_DTYPE)

    is_stamp = raw.map(lambda v: isinstance(v, datetime))
    if is_stamp.any():
        out.loc[is_stamp] = as_utc(pd.to_datetime(raw[is_stamp], errors="coerce", utc=True))

    text = raw.map(_clean_text)
    todo = text.notna() & out.isna()
    for parse in (*parsers, fallback):
        if not todo.any():
            break
        parsed = as_utc(parse(text[todo]))
        out.loc[parsed.index] = parsed
        todo = todo & out.isna()
    return out


def parse_date_smart(
    value: Any,
    *,
    parsers: Sequence[DateParser] = STRICT_PARSERS,
    fallback: DateParser = generic_parser,
) -> Optional[pd.Timestamp]:
    """Parse one cell or header name; None when no parser reads it."""
    parsed = parse_dates([value], parsers=parsers, fallback=fallback).iloc[0]
    return None if pd.isna(parsed) else parsed
