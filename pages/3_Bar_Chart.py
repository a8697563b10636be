import streamlit as st
import sys
import os

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from isocharts import CartesianChart, ChartConfig
from isocharts.samples import monthly_data
from isocharts.viewer import render_chart, render_sidebar

st.set_page_config(layout="wide", page_title="Bar Chart")
dark_mode = render_sidebar()

st.sidebar.title("⚙️ Appearance")
border_radius = st.sidebar.slider("Border Radius", 0.0, 3.0, 1.0, step=0.25)
overlay_line = st.sidebar.checkbox("Overlay Line (series c)", value=True)
c_col1, c_col2 = st.sidebar.columns(2)
fill_a = c_col1.color_picker("Series a", "#8884d8")
fill_b = c_col2.color_picker("Series b", "#82ca9d")

st.title("Bar Chart")
st.caption("Adding a bar series centres every data point inside its section.")

chart = (
    CartesianChart(ChartConfig(data=monthly_data(), aspect_ratio=2, padding=7))
    .x_axis(height=5, data_key="month")
    .y_axis(width=10)
    .cartesian_grid()
    .bar(data_key="a", fill=fill_a, border_radius=border_radius)
    .bar(data_key="b", fill=fill_b, border_radius=border_radius)
)
if overlay_line:
    chart.line(data_key="c", stroke="#ff7300", style="dashed")

render_chart(chart, dark_mode=dark_mode, file_name="bar-chart.svg")
