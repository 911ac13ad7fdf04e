# pages/11_Latest_Snapshot.py
import streamlit as st

from hpi_core.analysis.scenes import latest_snapshot, snapshot_figure
from hpi_core.config import SNAPSHOT_TOP_N
from hpi_core.session import Scene, with_scene
from hpi_core.ui_state import get_session, put_session, require_series_index

st.title("Most Recent Index — Top Regions")

INDEX = require_series_index()
put_session(with_scene(get_session(INDEX), Scene.SNAPSHOT))

n_max = max(1, len(INDEX.regions))
top_n = st.slider("Regions shown", min_value=1, max_value=n_max, value=min(SNAPSHOT_TOP_N, n_max))

st.plotly_chart(snapshot_figure(INDEX, top_n), use_container_width=True)

with st.expander("Values"):
    df = latest_snapshot(INDEX, top_n)
    df["date"] = df["date"].dt.strftime("%Y-%m")
    st.dataframe(df, use_container_width=True, hide_index=True)
