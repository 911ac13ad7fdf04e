# app.py
from pathlib import Path
import streamlit as st

from hpi_core.config import LOG_LEVEL
from hpi_core.log_setup import setup_logging

st.set_page_config(page_title="House Price Index Explorer", page_icon="📈", layout="wide")
setup_logging(LOG_LEVEL)

pages: dict[str, list] = {}

# Helper to add pages
def add(section: str, path: str, title: str, icon: str):
    if Path(path).exists():
        pages.setdefault(section, []).append(st.Page(path, title=title, icon=icon))


# Overview
add("Overview", "pages/01_Home.py", "Home & Data", ":material/home:")
add("Overview", "pages/02_Region_Selector.py", "Region Selector", ":material/settings:")
add("Overview", "pages/99_About.py", "About", ":material/info:")


# Charts
add("Charts", "pages/10_Trends.py", "Trends", ":material/show_chart:")
add("Charts", "pages/11_Latest_Snapshot.py", "Latest Snapshot", ":material/bar_chart:")
add("Charts", "pages/12_Region_Drilldown.py", "Region Drill-down", ":material/insights:")


# Data
add("Data", "pages/20_Data_Table.py", "Data Table", ":material/table_chart:")


pg = st.navigation(pages, position="sidebar", expanded=True)
pg.run()
