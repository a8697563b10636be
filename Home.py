import streamlit as st
import sys
import os

# Add parent directory to path to import isocharts
sys.path.append(os.path.dirname(__file__))

from isocharts.viewer import render_sidebar

st.set_page_config(
    page_title="isocharts Gallery",
    page_icon="📊",
    layout="wide"
)

render_sidebar()

st.title("📊 isocharts Gallery")
st.markdown(r"""
### Select a chart to begin

Every chart here is a **single self-contained SVG string**, rendered on the server with no browser DOM.
Paste it into a page, return it from an endpoint, or download it.

---
""")

col1, col2 = st.columns(2)

with col1:
    st.subheader("Areas & Lines")
    st.info("Smooth Catmull-Rom curves, stacked or overlapping.")

    st.page_link("pages/1_Area_Chart.py", label="Area Chart", icon="🏔️", use_container_width=True)
    st.page_link("pages/2_Stacked_Areas.py", label="Stacked Areas", icon="🧱", use_container_width=True)
    st.page_link("pages/4_Line_Chart.py", label="Line Chart", icon="📈", use_container_width=True)

with col2:
    st.subheader("Bars")
    st.info("Grouped bars with rounded corners, mixable with lines and areas.")

    st.page_link("pages/3_Bar_Chart.py", label="Bar Chart", icon="📊", use_container_width=True)
    st.page_link("pages/5_Composed_Chart.py", label="Composed Chart", icon="🧩", use_container_width=True)

st.markdown("---")
st.caption("isocharts v0.1")
