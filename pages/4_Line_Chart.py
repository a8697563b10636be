import streamlit as st
import sys
import os

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from isocharts import CartesianChart, ChartConfig
from isocharts.samples import monthly_data
from isocharts.viewer import render_chart, render_sidebar

st.set_page_config(layout="wide", page_title="Line Chart")
dark_mode = render_sidebar()

st.sidebar.title("⚙️ Lines")
num_ticks = st.sidebar.number_input("Y Axis Ticks", 2, 11, 5)
dashed = st.sidebar.multiselect("Dashed Series", ["a", "b", "c"], default=["c"])

st.title("Line Chart")

chart = (
    CartesianChart(ChartConfig(data=monthly_data(), aspect_ratio=2, padding=7))
    .x_axis(height=5, data_key="month")
    .y_axis(width=10, num_ticks=int(num_ticks))
    .cartesian_grid()
)
for key, color in (("a", "#8884d8"), ("b", "#82ca9d"), ("c", "#ffc658")):
    chart.line(data_key=key, stroke=color, style="dashed" if key in dashed else "solid")

render_chart(chart, dark_mode=dark_mode, file_name="line-chart.svg")
