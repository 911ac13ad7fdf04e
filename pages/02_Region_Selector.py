# pages/02_Region_Selector.py
import streamlit as st

from hpi_core.session import with_region
from hpi_core.ui_state import get_session, put_session, require_series_index

st.title("Global selection — Region")

INDEX = require_series_index()
state = get_session(INDEX)

regions = list(INDEX.regions)
current = state.selected_region if state.selected_region in INDEX else regions[0]

region = st.selectbox("Region", regions, index=regions.index(current))

# Persist so the drill-down page reads the same choice
state = with_region(state, INDEX, region)
put_session(state)

latest = INDEX.latest(state.selected_region)
st.success(
    f"**Region:** {state.selected_region}  \n"
    f"**Observations:** {len(INDEX.series(state.selected_region))}  \n"
    f"**Latest:** {latest.value:,.1f} ({latest.date:%Y-%m})"
)

st.page_link("pages/12_Region_Drilldown.py", label="Open drill-down", icon=":material/insights:")
