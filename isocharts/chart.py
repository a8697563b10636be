import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, List, Optional

import svgwrite

from .axes import TickFormatter, XAxis, YAxis
from .errors import ChartConfigError
from .grid import CartesianGrid
from .scale import ValueDomain, compute_value_domain
from .series import STACK_OFFSETS, PlotArea, Series, SeriesRenderer

logger = logging.getLogger(__name__)

CANVAS_HEIGHT = 100
DOMAIN_SEGMENTS = 4

STYLESHEET = """
.grid-line {{
  stroke-dasharray: 3, 3;
}}
.tooltip {{
  display: none;
}}
g:hover .tooltip {{
  display: block;
}}
.bar-group {{
  fill: transparent;
}}
g:hover > .bar-group {{
  fill: rgba(0, 0, 0, 0.03);
}}
text {{
  fill: {text_color};
}}
svg {{
  background-color: {background_color};
}}
"""


# --- 1. Configuration & Defaults ---
@dataclass
class ChartConfig:
    data: Sequence[Mapping[str, Any]]
    aspect_ratio: float = 1.0
    padding: float = 3.0
    background_color: Optional[str] = None
    text_color: str = "currentColor"
    stack_offset: str = "none"

    def __post_init__(self):
        if (not isinstance(self.data, Sequence) or isinstance(self.data, (str, bytes))
                or not all(isinstance(d, Mapping) for d in self.data)):
            raise ChartConfigError("data must be a sequence of records (mappings of field name to value)")
        if self.aspect_ratio <= 0:
            raise ChartConfigError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.stack_offset not in STACK_OFFSETS:
            raise ChartConfigError(f"Unknown stack_offset {self.stack_offset!r}; expected one of {STACK_OFFSETS}")

    @property
    def height(self) -> float:
        return CANVAS_HEIGHT

    @property
    def width(self) -> float:
        return CANVAS_HEIGHT * self.aspect_ratio


def _format_number(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return f"{int(value)}"
    return str(value)


# --- 2. The Chart ---
class CartesianChart:
    """
    Fluent cartesian chart builder. Register axes, grid and series, then call
    get_svg_string() (or str(chart)) as often as needed; rendering never mutates the chart.

    A chart instance is not safe to reconfigure from one thread while another renders it.
    """

    def __init__(self, config: ChartConfig):
        self.cfg = config
        self.series: List[Series] = []
        self._x_axis: Optional[XAxis] = None
        self._y_axis: Optional[YAxis] = None
        self._grid: Optional[CartesianGrid] = None
        self.center_data_points = False

    @property
    def data(self) -> Sequence[Mapping[str, Any]]:
        return self.cfg.data

    # --- Builder ---
    def x_axis(self, height: float, num_ticks: Optional[int] = None, stroke: Optional[str] = None,
               center_labels: Optional[bool] = None, data_key: Optional[str] = None):
        labels = [_format_number(d[data_key]) if data_key in d else "" for d in self.data] if data_key else []
        self._x_axis = XAxis(height, num_ticks=num_ticks, stroke=stroke, labels=labels,
                             center_labels=center_labels)
        return self

    def y_axis(self, width: float, num_ticks: Optional[int] = None, stroke: Optional[str] = None,
               tick_formatter: Optional[TickFormatter] = None):
        self._y_axis = YAxis(width, num_ticks=num_ticks, stroke=stroke, tick_formatter=tick_formatter)
        return self

    def cartesian_grid(self, stroke: Optional[str] = None):
        self._grid = CartesianGrid(stroke=stroke)
        return self

    def bar(self, data_key: str, stroke: Optional[str] = None, fill: Optional[str] = None,
            border_radius: Optional[float] = None):
        self.center_data_points = True
        self.series.append(Series("bar", data_key, stroke=stroke, fill=fill, border_radius=border_radius))
        return self

    def line(self, data_key: str, stroke: Optional[str] = None, fill: Optional[str] = None, style: str = "solid"):
        self.series.append(Series("line", data_key, stroke=stroke, fill=fill, style=style))
        return self

    def area(self, data_key: str, stroke: Optional[str] = None, fill: Optional[str] = None,
             stack_id: Optional[str] = None):
        self.series.append(Series("area", data_key, stroke=stroke, fill=fill, stack_id=stack_id))
        return self

    # --- Layout ---
    def get_plot_area(self) -> PlotArea:
        x_axis_height = self._x_axis.height if self._x_axis else 0
        y_axis_width = self._y_axis.width if self._y_axis else 0
        pad = self.cfg.padding
        return PlotArea(
            x=y_axis_width + pad,
            y=pad,
            width=self.cfg.width - y_axis_width - pad * 2,
            height=self.cfg.height - x_axis_height - pad * 2,
        )

    def get_value_domain(self) -> ValueDomain:
        return compute_value_domain(self.data, self.series, segments=DOMAIN_SEGMENTS)

    def _of_kind(self, kind: str) -> List[Series]:
        return [s for s in self.series if s.kind == kind]

    def _new_drawing(self) -> svgwrite.Drawing:
        c = self.cfg
        dwg = svgwrite.Drawing(size=("100%", "100%"),
                               viewBox=f"0 0 {_format_number(c.width)} {_format_number(c.height)}",
                               preserveAspectRatio="xMidYMid meet",
                               style="font-size: 2.5px; font-family: sans-serif;", debug=False)
        # Width only; the height follows from the viewBox aspect ratio.
        dwg.attribs.pop("height")
        dwg.embed_stylesheet(STYLESHEET.format(text_color=c.text_color,
                                               background_color=c.background_color or "transparent"))
        return dwg

    # --- Rendering ---
    def get_svg_string(self) -> str:
        c = self.cfg
        domain = self.get_value_domain()
        plot = self.get_plot_area()
        num_x_ticks = len(self.data) + (1 if self.center_data_points else 0)

        dwg = self._new_drawing()
        renderer = SeriesRenderer(dwg, self.data, plot, domain, centered=self.center_data_points,
                                  stack_offset=c.stack_offset)

        logger.debug("rendering %sx%s chart: %d records, %d series, domain=(%s, %s)",
                     c.width, c.height, len(self.data), len(self.series), domain.min_value, domain.max_value)

        dwg.add(renderer.draw_areas(self._of_kind("area")))
        dwg.add(renderer.draw_bars(self._of_kind("bar")))

        if self._y_axis:
            if c.stack_offset == "expand":
                tick_values = self._y_axis.tick_values(0, 1)
            else:
                tick_values = self._y_axis.tick_values(domain.min_value, domain.max_value)
            dwg.add(self._y_axis.render(dwg, height=plot.height, x=c.padding, y=plot.y,
                                        labels=self._y_axis.format_labels(tick_values)))

        if self._x_axis:
            dwg.add(self._x_axis.render(dwg, width=plot.width, x=plot.x, y=plot.bottom,
                                        num_ticks=num_x_ticks, center_labels=self.center_data_points))

        dwg.add(renderer.draw_lines(self._of_kind("line")))
        dwg.add(renderer.draw_highlights())

        if self._grid:
            num_y_ticks = self._y_axis.num_ticks if self._y_axis else 5
            dwg.add(self._grid.render(dwg, height=plot.height, width=plot.width, x=plot.x, y=plot.y,
                                      num_vertical_ticks=num_x_ticks, num_horizontal_ticks=num_y_ticks))

        return dwg.tostring()

    def __str__(self) -> str:
        return self.get_svg_string()
