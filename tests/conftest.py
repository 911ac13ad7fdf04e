import sys
from pathlib import Path

import pytest

# Add repo root to Python path so `import hpi_core...` works in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

WIDE_HEADER = ["RegionName", "2020-01", "2020-02", "2020-03", "2020-04", "2020-05", "2020-06"]


@pytest.fixture
def wide_header():
    return list(WIDE_HEADER)


@pytest.fixture
def wide_rows():
    return [
        dict(zip(WIDE_HEADER, ["Metro A", "100", "101", "99", "102", "103", "104"])),
        dict(zip(WIDE_HEADER, ["Metro B", "200", "", "n/a", "210", "211", "212"])),
        dict(zip(WIDE_HEADER, ["  ", "1", "2", "3", "4", "5", "6"])),
    ]


@pytest.fixture
def long_rows():
    # deliberately unsorted, with one duplicate (Chicago, 2020-02)
    return [
        {"city": "Chicago", "date": "2020-02", "index": "150"},
        {"city": "Boston", "date": "2020-01", "index": "300"},
        {"city": "Chicago", "date": "2020-01", "index": "148"},
        {"city": "Austin", "date": "2020-02", "index": "210"},
        {"city": "Chicago", "date": "2020-02", "index": "151"},
        {"city": "Boston", "date": "2020-03", "index": "305"},
    ]
