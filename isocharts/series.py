import logging
import math
from dataclasses import dataclass
from typing import Any, List, Mapping, NamedTuple, Optional, Sequence

import svgwrite

from .catmull_rom import format_coord, to_catmull_rom
from .errors import ChartConfigError
from .scale import StackAccumulator, ValueDomain, divide, normalize, numeric_value, remap

logger = logging.getLogger(__name__)

SERIES_KINDS = ("bar", "line", "area")
LINE_STYLES = ("solid", "dashed")
STACK_OFFSETS = ("none", "expand")
SPLINE_TENSION = 0.5


# --- 1. Definitions ---
@dataclass
class Series:
    kind: str
    data_key: str
    stroke: Optional[str] = None
    fill: Optional[str] = None
    style: str = "solid"
    border_radius: Optional[float] = None
    stack_id: Optional[str] = None

    def __post_init__(self):
        if self.kind not in SERIES_KINDS:
            raise ChartConfigError(f"Unknown series kind {self.kind!r}; expected one of {SERIES_KINDS}")
        if not self.data_key:
            raise ChartConfigError("A series needs a non-empty data_key")
        if self.style not in LINE_STYLES:
            raise ChartConfigError(f"Unknown line style {self.style!r}; expected one of {LINE_STYLES}")


class PlotArea(NamedTuple):
    x: float
    y: float
    width: float
    height: float

    @property
    def bottom(self) -> float:
        return self.y + self.height


# --- 2. Geometry ---
class SeriesRenderer:
    """
    Turns registered series into SVG geometry for a single render pass.

    Everything it needs is handed in up front; it keeps no state between passes, and
    the stack accumulators it uses are created inside each draw call.
    """

    def __init__(self, dwg: svgwrite.Drawing, data: List[Mapping[str, Any]], plot: PlotArea,
                 domain: ValueDomain, centered: bool = False, stack_offset: str = "none"):
        self.dwg = dwg
        self.data = data
        self.plot = plot
        self.domain = domain
        self.centered = centered
        self.stack_offset = stack_offset

    @property
    def num_sections(self) -> int:
        return len(self.data) - (0 if self.centered else 1)

    @property
    def section_width(self) -> float:
        return divide(self.plot.width, self.num_sections)

    def _point_x(self, index: int, section_width: float) -> float:
        x = index * section_width
        if self.centered:
            x += section_width / 2
        return self.plot.x + x

    def _point_y(self, value: float, max_value: float) -> float:
        normalized = normalize(self.domain.min_value, max_value, value)
        return self.plot.y + remap(self.plot.height, 0, normalized)

    def draw_highlights(self):
        layer = self.dwg.g()
        section_width = self.section_width
        for i in range(self.num_sections):
            cell = self.dwg.g()
            cell.add(self.dwg.rect(insert=(self.plot.x + i * section_width, self.plot.y),
                                   size=(section_width, self.plot.height),
                                   fill="transparent", class_="bar-group"))
            layer.add(cell)
        return layer

    def draw_bars(self, bars: Sequence[Series]):
        layer = self.dwg.g()
        if not bars:
            return layer

        section_width = divide(self.plot.width, len(self.data))
        bar_width = section_width / len(bars)
        bar_spacing = bar_width * 0.15
        bar_width -= bar_spacing * 1.5

        for i, record in enumerate(self.data):
            cell = self.dwg.g()
            for j, bar in enumerate(bars):
                value = numeric_value(record, bar.data_key)
                if value is None:
                    logger.debug("bar %r: no numeric value at index %d, skipped", bar.data_key, i)
                    continue

                bar_height = remap(0, self.plot.height, divide(value, self.domain.max_value))
                radius = bar.border_radius or 0
                cell.add(self.dwg.rect(
                    insert=(self.plot.x + i * section_width + bar_width * j + bar_spacing * (j + 1),
                            self.plot.bottom - bar_height),
                    size=(bar_width, bar_height),
                    fill=bar.fill, rx=radius, ry=radius, class_="bar",
                ))
            layer.add(cell)
        return layer

    def draw_lines(self, lines: Sequence[Series]):
        layer = self.dwg.g()
        section_width = self.section_width

        for line in lines:
            points = []
            for i, record in enumerate(self.data):
                value = numeric_value(record, line.data_key)
                if value is None:
                    logger.debug("line %r: no numeric value at index %d", line.data_key, i)
                    value = math.nan
                points.append((self._point_x(i, section_width), self._point_y(value, self.domain.max_value)))

            group = self.dwg.g()
            group.add(self.dwg.path(
                d=to_catmull_rom(points, SPLINE_TENSION), fill="none", stroke=line.stroke, stroke_width=1,
                stroke_dasharray="5, 5" if line.style == "dashed" else "none",
                vector_effect="non-scaling-stroke",
            ))
            for x, y in points:
                group.add(self.dwg.circle(center=(x, y), r=0.5, fill=line.stroke))
            layer.add(group)
        return layer

    def draw_areas(self, areas: Sequence[Series]):
        """
        Areas stack per stack id. In "expand" mode a stacked layer is scaled against the
        full height of its stack at that index instead of the shared domain maximum.
        Shapes are emitted last-registered first so the first registered series ends up on top.
        """
        layer = self.dwg.g()
        section_width = self.section_width

        totals = StackAccumulator()
        for area in areas:
            if area.stack_id is None:
                continue
            for i, record in enumerate(self.data):
                totals.add(area.stack_id, i, numeric_value(record, area.data_key) or 0.0)

        running = StackAccumulator()
        shapes = []
        for area in areas:
            points = []
            for i, record in enumerate(self.data):
                value = numeric_value(record, area.data_key)
                max_value = self.domain.max_value
                if area.stack_id is not None:
                    # A missing value adds nothing to the stack.
                    value = running.add(area.stack_id, i, value or 0.0)
                    if self.stack_offset == "expand":
                        max_value = totals.get(area.stack_id, i, max_value)
                elif value is None:
                    value = math.nan
                points.append((self._point_x(i, section_width), self._point_y(value, max_value)))
            shapes.append(self._area_shape(area, points))

        for shape in reversed(shapes):
            layer.add(shape)
        return layer

    def _area_shape(self, area: Series, points):
        path = to_catmull_rom(points, SPLINE_TENSION)
        outline = path
        if points:
            bottom = self.plot.bottom
            last_x, first_x, bottom = (format_coord(v) for v in (points[-1][0], points[0][0], bottom))
            outline = f"{path} L {last_x} {bottom} L {first_x} {bottom} Z"

        group = self.dwg.g()
        group.add(self.dwg.path(d=outline, fill=area.fill, stroke="none", vector_effect="non-scaling-stroke"))
        group.add(self.dwg.path(d=path, stroke=area.stroke, fill="none", vector_effect="non-scaling-stroke"))
        return group
