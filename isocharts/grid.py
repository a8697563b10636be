from typing import Optional

import svgwrite

from .scale import divide, remap

GRID_STROKE = "rgba(50, 50, 50, 0.15)"


class CartesianGrid:
    """Dashed background gridlines. Tick counts come from the axes at render time."""

    def __init__(self, stroke: Optional[str] = None):
        self.stroke = stroke or GRID_STROKE

    def _line(self, dwg: svgwrite.Drawing, start, end):
        return dwg.line(start=start, end=end, stroke=self.stroke, stroke_width=1,
                        vector_effect="non-scaling-stroke", class_="grid-line")

    def render(self, dwg: svgwrite.Drawing, height: float, width: float, x: float, y: float,
               num_vertical_ticks: int, num_horizontal_ticks: int):
        group = dwg.g()
        group.add(dwg.rect(insert=(x, y), size=(width, height), fill="none"))

        for i in range(num_vertical_ticks):
            px = remap(x, x + width, divide(1, num_vertical_ticks - 1) * i)
            group.add(self._line(dwg, (px, y), (px, y + height)))

        for i in range(num_horizontal_ticks):
            py = remap(y + height, y, divide(1, num_horizontal_ticks - 1) * i)
            group.add(self._line(dwg, (x, py), (x + width, py)))
        return group
