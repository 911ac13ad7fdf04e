# pages/10_Trends.py
import streamlit as st

from hpi_core.analysis.scenes import trend_figure, trend_regions
from hpi_core.session import Scene, with_scene
from hpi_core.ui_state import get_session, put_session, require_series_index

st.title("House Price Trends")

INDEX = require_series_index()
put_session(with_scene(get_session(INDEX), Scene.TRENDS))

default = trend_regions(INDEX)
with st.sidebar:
    st.header("Controls")
    chosen = st.multiselect("Regions", list(INDEX.regions), default=default)

if not chosen:
    st.info("Pick at least one region.")
    st.stop()

st.caption("Both axes span the whole dataset, so lines stay comparable when the selection changes.")
st.plotly_chart(trend_figure(INDEX, chosen), use_container_width=True)
