# pages/99_About.py
import streamlit as st

st.title("About this app")

st.markdown(
    """
This app charts **regional house price indices** from a CSV whose exact layout is not known in advance.
"""
)

st.divider()

st.subheader("How a file is read")
st.markdown(
    """
1. **Region column**: the first header matching *city, regionname, region, metro, location, area, name*
   (in that priority order, exact or substring, case-insensitive).
2. **Layout**: if at least `max(6, 30 %)` of the other headers look like dates
   (`2020-01`, `2020/01/31`, `202001`, `2020`), each of those columns is one month (*wide*).
   Otherwise the file is *long* and needs a date column (*date, month, time, period, year_month*)
   and a value column (*index, value, hpi, price, priceindex, nsa, house_price_index*).
3. **Rows**: blank regions, unreadable dates and non-numeric values are skipped.
   Duplicate region/month rows are kept as they are.
"""
)

st.subheader("Quick links")
st.page_link("pages/01_Home.py", label="Home & Data", icon=":material/home:")
st.page_link("pages/02_Region_Selector.py", label="Region Selector", icon=":material/settings:")
st.page_link("pages/10_Trends.py", label="Trends", icon=":material/show_chart:")
st.page_link("pages/11_Latest_Snapshot.py", label="Latest Snapshot", icon=":material/bar_chart:")
st.page_link("pages/12_Region_Drilldown.py", label="Region Drill-down", icon=":material/insights:")
st.page_link("pages/20_Data_Table.py", label="Data Table", icon=":material/table_chart:")

st.caption("Built with Streamlit + Plotly. All dates are UTC calendar dates.")
