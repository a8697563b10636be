import streamlit as st
import sys
import os

# Add parent directory to path so we can import isocharts
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from isocharts import CartesianChart, ChartConfig
from isocharts.samples import monthly_data
from isocharts.viewer import render_chart, render_sidebar

st.set_page_config(layout="wide", page_title="Area Chart")
dark_mode = render_sidebar()

st.sidebar.title("⚙️ Layout")
aspect_ratio = st.sidebar.slider("Aspect Ratio", 1.0, 3.0, 2.0, step=0.25)
padding = st.sidebar.slider("Padding", 0.0, 15.0, 7.0, step=0.5)
show_grid = st.sidebar.checkbox("Show Grid", value=True)

st.title("Area Chart")
st.caption("Three overlapping areas. The first registered series is painted on top.")

chart = (
    CartesianChart(ChartConfig(data=monthly_data(), aspect_ratio=aspect_ratio, padding=padding))
    .x_axis(height=5, data_key="month")
    .y_axis(width=10)
    .area(data_key="a", stroke="#8884d8", fill="rgba(136, 132, 216, 0.1)")
    .area(data_key="b", stroke="#82ca9d", fill="rgba(130, 202, 157, 0.1)")
    .area(data_key="c", stroke="#ffc658", fill="rgba(255, 198, 88, 0.1)")
)
if show_grid:
    chart.cartesian_grid()

render_chart(chart, dark_mode=dark_mode, file_name="area-chart.svg")
