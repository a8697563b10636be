from .axes import XAxis, YAxis, fixed_point
from .catmull_rom import to_catmull_rom
from .chart import CartesianChart, ChartConfig
from .errors import ChartConfigError
from .grid import CartesianGrid
from .scale import (
    ScaleBounds,
    StackAccumulator,
    ValueDomain,
    compute_value_domain,
    normalize,
    remap,
    round_by_digits_with_zero_in_segments,
)
from .series import PlotArea, Series, SeriesRenderer

__all__ = [
    "CartesianChart",
    "CartesianGrid",
    "ChartConfig",
    "ChartConfigError",
    "PlotArea",
    "ScaleBounds",
    "Series",
    "SeriesRenderer",
    "StackAccumulator",
    "ValueDomain",
    "XAxis",
    "YAxis",
    "compute_value_domain",
    "fixed_point",
    "normalize",
    "remap",
    "round_by_digits_with_zero_in_segments",
    "to_catmull_rom",
]
