"""
Dashboard configuration: data location, logging level, chart constants.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths / logging (override with env vars for deployment)
# ---------------------------------------------------------------------------
DATA_FILE = Path(os.environ.get("HPI_DATA_FILE", str(Path("data") / "cities-month-NSA.csv")))
LOG_LEVEL = os.environ.get("HPI_LOG_LEVEL", "INFO").upper()

# ---------------------------------------------------------------------------
# Scenes
# ---------------------------------------------------------------------------
# Shown first in the trend chart and used as the default selection (order matters)
PREFERRED_REGIONS = ("New York", "Los Angeles", "Chicago")
TREND_REGION_COUNT = 3
SNAPSHOT_TOP_N = 15

# Trend y-axis runs from min*low to max*high over every observation
TREND_PADDING = (0.95, 1.05)
