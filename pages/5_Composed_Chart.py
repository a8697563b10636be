import streamlit as st
import sys
import os

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from isocharts import CartesianChart, ChartConfig
from isocharts.samples import page_data
from isocharts.viewer import render_chart, render_sidebar

st.set_page_config(layout="wide", page_title="Composed Chart")
dark_mode = render_sidebar()

st.sidebar.title("⚙️ Layers")
show_area = st.sidebar.checkbox("Area (amt)", value=True)
show_bars = st.sidebar.checkbox("Bars (pv)", value=True)
show_line = st.sidebar.checkbox("Line (uv)", value=True)

st.title("Composed Chart")
st.caption("With bars present, the area and line points move to the middle of each section.")

chart = (
    CartesianChart(ChartConfig(data=page_data(), aspect_ratio=2, padding=7))
    .x_axis(height=5, data_key="name")
    .y_axis(width=10)
    .cartesian_grid()
)
if show_area:
    chart.area(data_key="amt", fill="#8884d8", stroke="#8884d8")
if show_bars:
    chart.bar(data_key="pv", fill="#413ea0")
if show_line:
    chart.line(data_key="uv", stroke="#ff7300")

render_chart(chart, dark_mode=dark_mode, file_name="composed-chart.svg")
