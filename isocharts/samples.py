"""Sample datasets used by the demo pages and the tests."""
import copy
from typing import Any, Dict, List

from .axes import fixed_point

_MONTHLY = [
    {"month": "2015.01", "a": 4000, "b": 2400, "c": 2400},
    {"month": "2015.02", "a": 3000, "b": 1398, "c": 2210},
    {"month": "2015.03", "a": 2000, "b": 9800, "c": 2290},
    {"month": "2015.04", "a": 2780, "b": 3908, "c": 2000},
    {"month": "2015.05", "a": 1890, "b": 4800, "c": 2181},
    {"month": "2015.06", "a": 2390, "b": 3800, "c": 2500},
    {"month": "2015.07", "a": 3490, "b": 4300, "c": 2100},
]


def monthly_data() -> List[Dict[str, Any]]:
    """Seven months of three numeric series keyed "a", "b" and "c"."""
    return copy.deepcopy(_MONTHLY)


def to_percent(decimal: float, fixed: int = 0) -> str:
    """Tick formatter for stack_offset="expand" charts."""
    return f"{fixed_point(decimal * 100, fixed)}%"


_PAGES = [
    {"name": "Page A", "uv": 590, "pv": 800, "amt": 1400},
    {"name": "Page B", "uv": 868, "pv": 967, "amt": 1506},
    {"name": "Page C", "uv": 1397, "pv": 1098, "amt": 989},
    {"name": "Page D", "uv": 1480, "pv": 1200, "amt": 1228},
    {"name": "Page E", "uv": 1520, "pv": 1108, "amt": 1100},
    {"name": "Page F", "uv": 1400, "pv": 680, "amt": 1700},
]


def page_data() -> List[Dict[str, Any]]:
    """Six pages with "uv", "pv" and "amt" counts, for the composed chart."""
    return copy.deepcopy(_PAGES)
