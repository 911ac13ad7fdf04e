# pages/12_Region_Drilldown.py
import streamlit as st

from hpi_core.analysis.scenes import first_last, scene_figure
from hpi_core.session import Scene, with_scene
from hpi_core.ui_state import get_session, put_session, require_series_index

INDEX = require_series_index()
state = with_scene(get_session(INDEX), Scene.DRILLDOWN)
put_session(state)

REGION = state.selected_region
st.title(f"House Price Trend — {REGION}")
st.page_link("pages/02_Region_Selector.py", label="Change region", icon=":material/settings:")

st.plotly_chart(scene_figure(INDEX, state), use_container_width=True)

first, last = first_last(INDEX, REGION)
change = (last.value / first.value - 1.0) * 100 if first.value else float("nan")
c1, c2, c3 = st.columns(3)
c1.metric(f"First ({first.date:%Y-%m})", f"{first.value:,.1f}")
c2.metric(f"Last ({last.date:%Y-%m})", f"{last.value:,.1f}")
c3.metric("Change", f"{change:+.1f} %")
