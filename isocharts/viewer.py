import streamlit as st
import streamlit.components.v1 as components

from .chart import CartesianChart

DARK_BACKGROUND = "black"
DARK_TEXT = "white"


def render_sidebar():
    """
    Renders the sidebar with a Home button and the dark mode toggle.
    Returns True when dark mode is on.
    """
    with st.sidebar:
        st.page_link("Home.py", label="Home", icon="🏠", use_container_width=True)
        st.markdown("---")
        return st.toggle("Dark mode", value=False)


def render_chart(chart: CartesianChart, dark_mode: bool = False, height: int = 520, file_name: str = "chart.svg"):
    """Embeds the chart's SVG in the page and offers it as a download."""
    if dark_mode:
        chart.cfg.background_color = DARK_BACKGROUND
        chart.cfg.text_color = DARK_TEXT

    svg_string = chart.get_svg_string()
    page_bg = DARK_BACKGROUND if dark_mode else "white"
    page_fg = DARK_TEXT if dark_mode else "black"

    html_code = f"""
    <div style="background: {page_bg}; color: {page_fg}; padding: 12px; border-radius: 5px;">
        {svg_string}
    </div>
    """
    components.html(html_code, height=height, scrolling=False)
    st.download_button("Download SVG", data=svg_string, file_name=file_name, mime="image/svg+xml")
