import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Callable, List, Optional, Sequence

import svgwrite

from .scale import divide, remap

TickFormatter = Callable[[float, int], str]

AXIS_STROKE = "#666"
DEFAULT_NUM_TICKS = 5


def fixed_point(value: float, fixed: int) -> str:
    """Fixed-point label with halves rounded away from zero (2.5 -> "3")."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    exact = Decimal(value + 0.0)
    # Enough digits for every integer digit plus the requested decimals.
    context = Context(prec=max(28, exact.adjusted() + fixed + 2))
    return str(exact.quantize(Decimal(1).scaleb(-fixed), rounding=ROUND_HALF_UP, context=context))


def _tick_position(start: float, end: float, index: int, num_ticks: int) -> float:
    # num_ticks == 1 leaves the spacing undefined; positions come out as nan.
    return remap(start, end, divide(1, num_ticks - 1) * index)


class XAxis:
    """Category axis drawn along the bottom edge of the plot area."""

    def __init__(self, height: float, num_ticks: Optional[int] = None, stroke: Optional[str] = None,
                 labels: Optional[Sequence[str]] = None, center_labels: Optional[bool] = None):
        self.height = height
        self.num_ticks = DEFAULT_NUM_TICKS if num_ticks is None else num_ticks
        self.stroke = stroke or AXIS_STROKE
        self.labels: List[str] = list(labels or [])
        self.center_labels = bool(center_labels)

    def _line(self, dwg: svgwrite.Drawing, start, end):
        return dwg.line(start=start, end=end, stroke=self.stroke, stroke_width=1,
                        vector_effect="non-scaling-stroke")

    def render(self, dwg: svgwrite.Drawing, width: float, x: float, y: float,
               num_ticks: Optional[int] = None, center_labels: Optional[bool] = None):
        num_ticks = self.num_ticks if num_ticks is None else num_ticks
        center_labels = self.center_labels if center_labels is None else center_labels

        group = dwg.g()
        group.add(self._line(dwg, (x, y), (x + width, y)))

        tick_width = divide(width, num_ticks - 1)
        offset_x = x + (tick_width * 0.5 if center_labels else 0)

        for i in range(num_ticks):
            px = _tick_position(offset_x, offset_x + width, i, num_ticks)
            group.add(self._line(dwg, (px, y), (px, y + self.height * 0.25)))

        for i, label in enumerate(self.labels):
            px = _tick_position(offset_x, offset_x + width, i, num_ticks)
            group.add(dwg.text(label, insert=(px, y + self.height * 0.75), font_size="1em",
                               text_anchor="middle", dominant_baseline="middle"))
        return group


class YAxis:
    """Value axis drawn to the left of the plot area, ticks running bottom to top."""

    tick_width = 1

    def __init__(self, width: float, num_ticks: Optional[int] = None, stroke: Optional[str] = None,
                 tick_formatter: Optional[TickFormatter] = None):
        self.width = width
        self.num_ticks = DEFAULT_NUM_TICKS if num_ticks is None else num_ticks
        self.stroke = stroke or AXIS_STROKE
        self.tick_formatter = tick_formatter or fixed_point

    def tick_values(self, min_value: float, max_value: float) -> List[float]:
        return [_tick_position(min_value, max_value, i, self.num_ticks) for i in range(self.num_ticks)]

    def format_labels(self, values: Sequence[float]) -> List[str]:
        return [self.tick_formatter(value, 0) for value in values]

    def render(self, dwg: svgwrite.Drawing, height: float, x: float, y: float, labels: Sequence[str] = ()):
        group = dwg.g()
        left = x + self.width
        bottom = y + height

        group.add(dwg.rect(insert=(x, y), size=(self.width, height), fill="none"))
        group.add(dwg.line(start=(left, y), end=(left, bottom), stroke=self.stroke, stroke_width=1,
                           vector_effect="non-scaling-stroke"))

        for i in range(self.num_ticks):
            py = _tick_position(bottom, y, i, self.num_ticks)
            group.add(dwg.line(start=(left, py), end=(left - self.tick_width, py), stroke=self.stroke,
                               stroke_width=1, vector_effect="non-scaling-stroke"))

        for i, label in enumerate(labels):
            py = _tick_position(bottom, y, i, self.num_ticks)
            group.add(dwg.text(label, insert=(left - self.tick_width - 1, py), font_size="1em",
                               text_anchor="end", dominant_baseline="middle"))
        return group
