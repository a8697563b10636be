import streamlit as st
import sys
import os

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from isocharts import CartesianChart, ChartConfig
from isocharts.samples import monthly_data, to_percent
from isocharts.viewer import render_chart, render_sidebar

st.set_page_config(layout="wide", page_title="Stacked Areas")
dark_mode = render_sidebar()

st.sidebar.title("⚙️ Stacking")
mode = st.sidebar.radio("Stack Offset", ["Absolute", "Percentage (expand)"], index=1)
stack_offset = "expand" if mode.startswith("Percentage") else "none"

st.title("Stacked Areas")

chart = (
    CartesianChart(ChartConfig(data=monthly_data(), aspect_ratio=2, padding=7, stack_offset=stack_offset))
    .x_axis(height=5, data_key="month")
    .y_axis(width=10, tick_formatter=to_percent if stack_offset == "expand" else None)
    .cartesian_grid()
    .area(data_key="c", stroke="#ffc658", fill="#ffc658", stack_id="1")
    .area(data_key="b", stroke="#82ca9d", fill="#82ca9d", stack_id="1")
    .area(data_key="a", stroke="#8884d8", fill="#8884d8", stack_id="1")
)

render_chart(chart, dark_mode=dark_mode, file_name="stacked-areas.svg")
