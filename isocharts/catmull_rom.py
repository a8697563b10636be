import math
from typing import Sequence, Tuple

import numpy as np

Point = Tuple[float, float]


def format_coord(value) -> str:
    value = float(value)
    if math.isfinite(value):
        return str(value)
    # Degenerate data is spelled the way browsers print it.
    if math.isnan(value):
        return "NaN"
    return "Infinity" if value > 0 else "-Infinity"


def to_catmull_rom(points: Sequence[Point], tension: float = 0.5) -> str:
    """
    Converts an ordered point sequence into SVG path data that runs through every point.

    Each gap between neighbours becomes one cubic Bezier segment whose control points
    follow the Catmull-Rom tangents. The end points are repeated at the boundaries, so
    the curve starts and stops exactly on the first and last point.
    """
    if len(points) == 0:
        return "M 0 0"

    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    commands = [f"M {format_coord(pts[0, 0])} {format_coord(pts[0, 1])}"]
    if len(pts) == 1:
        return commands[0]

    idx = np.arange(len(pts) - 1)
    p0 = pts[np.maximum(idx - 1, 0)]
    p1 = pts[idx]
    p2 = pts[idx + 1]
    p3 = pts[np.minimum(idx + 2, len(pts) - 1)]

    c1 = p1 + (p2 - p0) * tension / 3
    c2 = p2 - (p3 - p1) * tension / 3

    for control1, control2, end in zip(c1, c2, p2):
        c1x, c1y, c2x, c2y, x, y = (format_coord(v) for v in (*control1, *control2, *end))
        commands.append(f"C {c1x} {c1y}, {c2x} {c2y}, {x} {y}")
    return " ".join(commands)
