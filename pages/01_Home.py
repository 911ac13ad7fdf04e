# pages/01_Home.py

import streamlit as st

from hpi_core.config import DATA_FILE
from hpi_core.errors import HpiDataError
from hpi_core.loaders.series_loader import load_series_index
from hpi_core.log_setup import get_logger
from hpi_core.ui_state import clear_series_index, get_series_index, put_series_index

logger = get_logger().getChild("pages.home")


st.title("House Price Index Explorer")
st.caption("Load a regional price-index table (wide or long layout) and explore it with three interactive views.")

st.markdown(
    """
### What this app does
- **Reads** a CSV whose layout is not known in advance: one column per month (*wide*),
  or one row per region/date/value (*long*). Column names are matched against common synonyms.
- **Cleans** the table: rows with a blank region, an unreadable date or a non-numeric value are skipped.
- **Charts** a multi-region trend, a ranked snapshot of the latest values, and a single-region drill-down.
"""
)

st.divider()


# Data source
st.subheader("Data source")
mode = st.radio("Source", ["Default file", "Upload"], horizontal=True)

source = None
label = None
if mode == "Default file":
    st.caption(f"Default path: `{DATA_FILE}` (set `HPI_DATA_FILE` to change it)")
    if DATA_FILE.exists():
        source, label = str(DATA_FILE), DATA_FILE.name
    else:
        st.info("Default file not found. Upload a CSV instead.")
else:
    up = st.file_uploader("CSV file", type=["csv", "txt"])
    if up is not None:
        source, label = up, up.name

if source is not None and st.button("Load", type="primary"):
    clear_series_index()
    try:
        with st.spinner("Reading and normalizing…"):
            index = load_series_index(source)
    except HpiDataError as e:
        logger.error("Load failed for %s: %s", label, e)
        st.error(f"**{label}**: {e.user_message}")
        st.stop()
    put_series_index(index, label)


# Current dataset
index = get_series_index()
if index is None:
    st.info("No data loaded yet.")
    st.stop()

first, last = index.observations[0].date, index.observations[-1].date
c1, c2, c3 = st.columns(3)
c1.metric("Regions", len(index.regions))
c2.metric("Observations", len(index))
c3.metric("Span", f"{first:%Y-%m} → {last:%Y-%m}")
st.caption(f"Loaded from **{st.session_state.get('series_source', '?')}**")

st.subheader("📊 Views")
st.page_link("pages/10_Trends.py", label="Trends — three regions over time", icon=":material/show_chart:")
st.page_link("pages/11_Latest_Snapshot.py", label="Latest Snapshot — top regions by most recent value", icon=":material/bar_chart:")
st.page_link("pages/12_Region_Drilldown.py", label="Region Drill-down — one region, first vs. last", icon=":material/insights:")
st.page_link("pages/02_Region_Selector.py", label="Pick the drill-down region", icon=":material/settings:")
