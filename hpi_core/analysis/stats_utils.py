from __future__ import annotations

from typing import Iterable, Optional

import numpy as np
import pandas as pd


def value_extent(values: Iterable[float]) -> Optional[tuple[float, float]]:
    """(min, max) of the finite values; None when there are none."""
    v = np.asarray(list(values), dtype=float)
    v = v[np.isfinite(v)]
    if v.size == 0:
        return None
    return float(v.min()), float(v.max())


def date_extent(dates: Iterable[pd.Timestamp]) -> Optional[tuple[pd.Timestamp, pd.Timestamp]]:
    d = pd.Series(list(dates), dtype="object").dropna()
    if d.empty:
        return None
    return min(d), max(d)


def padded_domain(values: Iterable[float], low: float = 0.95, high: float = 1.05) -> Optional[tuple[float, float]]:
    """Axis domain [min*low, max*high] (multiplicative, as the trend chart uses)."""
    ext = value_extent(values)
    if ext is None:
        return None
    return ext[0] * float(low), ext[1] * float(high)


def widen(lo, hi, frac: float = 0.05):
    """Grow [lo, hi] by `frac` of its span on each side (numbers or Timestamps)."""
    pad = (hi - lo) * float(frac)
    return lo - pad, hi + pad
