import numpy as np
import pandas as pd
import pytest

from hpi_core.analysis.stats_utils import date_extent, padded_domain, value_extent, widen


def test_value_extent_empty():
    assert value_extent([]) is None
    assert value_extent([np.nan, np.inf]) is None


def test_value_extent_ignores_non_finite():
    assert value_extent([3.0, np.nan, 1.0, 2.0, np.inf]) == (1.0, 3.0)


def test_padded_domain_known_values():
    lo, hi = padded_domain([100.0, 200.0])
    assert lo == pytest.approx(95.0)
    assert hi == pytest.approx(210.0)
    assert padded_domain([], 0.5, 2.0) is None


def test_date_extent():
    d = pd.date_range("2020-01-01", periods=3, freq="MS", tz="UTC")
    assert date_extent([d[2], d[0], d[1]]) == (d[0], d[2])
    assert date_extent([]) is None


def test_widen_numbers_and_dates():
    assert widen(100.0, 101.6, 0.05) == pytest.approx((99.92, 101.68))
    assert widen(5.0, 5.0) == (5.0, 5.0)
    lo, hi = widen(pd.Timestamp("2020-01-01", tz="UTC"), pd.Timestamp("2020-01-21", tz="UTC"), 0.05)
    assert lo == pd.Timestamp("2019-12-31", tz="UTC")
    assert hi == pd.Timestamp("2020-01-22", tz="UTC")
