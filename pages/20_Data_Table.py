# pages/20_Data_Table.py
import streamlit as st

from hpi_core.ui_state import require_series_index

st.title("Data Table")

INDEX = require_series_index()
df = INDEX.to_frame()

with st.sidebar:
    st.header("Filter")
    picked = st.multiselect("Regions", list(INDEX.regions))

if picked:
    df = df[df["region"].isin(picked)]

counts = df.groupby("region").agg(n=("value", "size"), first=("date", "min"), last=("date", "max"))
st.subheader("Per region")
st.dataframe(counts, use_container_width=True)

st.subheader("Observations")
st.caption(f"{len(df):,} rows, sorted by date then region.")
st.dataframe(df, use_container_width=True, hide_index=True)
