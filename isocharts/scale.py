import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import Any, Dict, Hashable, Iterable, List, Mapping, NamedTuple, Optional, Tuple

import numpy as np

logger = logging.getLogger(__name__)


# --- 1. Numeric Helpers ---
def divide(numerator: float, denominator: float) -> float:
    """IEEE-754 division: a zero denominator gives inf or nan instead of raising."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


def normalize(min_value: float, max_value: float, value: float) -> float:
    if min_value == max_value:
        return 0.0
    return divide(value - min_value, max_value - min_value)


def remap(min_value: float, max_value: float, value: float) -> float:
    return min_value + (max_value - min_value) * value


def numeric_value(record: Mapping[str, Any], key: str) -> Optional[float]:
    """Returns the record's value at `key` as a float, or None when absent or not a number."""
    value = record.get(key)
    if isinstance(value, bool) or not isinstance(value, Real):
        return None
    return float(value)


# --- 2. Nice Rounding ---
class ScaleBounds(NamedTuple):
    rounded_min: float
    rounded_max: float
    segment_step: float


@dataclass(frozen=True)
class ValueDomain:
    min_value: float = 0.0
    max_value: float = 0.0


def round_by_digits_with_zero_in_segments(min_value: float, max_value: float, segments: int = 10,
                                          rounding_factor: float = 10) -> ScaleBounds:
    """
    Rounds [min_value, max_value] outward so that zero is included and the range splits
    into `segments - 1` equal steps. The upper bound never overshoots the true maximum.

    segments == 1 is not special-cased: the step becomes infinite and the bounds nan.
    """
    min_value = min(min_value, 0.0)
    max_value = max(max_value, 0.0)

    factor = max(rounding_factor, 10)
    rounded_min = float(np.floor(min_value / factor) * factor)
    rounded_max = float(np.ceil(max_value / factor) * factor)

    value_range = rounded_max - rounded_min
    if value_range == 0:
        # Only reachable when every value is zero; a zero step would divide 0 by 0 below.
        return ScaleBounds(0.0, 0.0, 0.0)

    segment_step = float(np.ceil(divide(value_range, segments - 1)))

    with np.errstate(invalid="ignore"):
        adjusted_min = float(np.floor(divide(rounded_min, segment_step)) * segment_step)
        adjusted_max = float(np.ceil(divide(rounded_max, segment_step)) * segment_step)

    if adjusted_max > max_value:
        adjusted_max = max_value

    return ScaleBounds(adjusted_min, adjusted_max, segment_step)


# --- 3. Stacking ---
class StackAccumulator:
    """Running per-(stack id, record index) sums. Built fresh for every render pass."""

    def __init__(self):
        self._sums: Dict[Tuple[Hashable, int], float] = {}

    def add(self, stack_id: Hashable, index: int, value: float) -> float:
        total = self._sums.get((stack_id, index), 0.0) + value
        self._sums[(stack_id, index)] = total
        return total

    def get(self, stack_id: Hashable, index: int, default: Optional[float] = None) -> Optional[float]:
        return self._sums.get((stack_id, index), default)

    def __len__(self) -> int:
        return len(self._sums)


def stacked_values(data: List[Mapping[str, Any]], series: Iterable, stacks: StackAccumulator) -> List[List[Optional[float]]]:
    """
    Reads each series' values in registration order, folding stacked series into `stacks`.
    Non-numeric cells come back as None and leave the stack untouched.
    """
    rows = []
    for item in series:
        values = []
        for index, record in enumerate(data):
            value = numeric_value(record, item.data_key)
            if value is not None and item.stack_id is not None:
                value = stacks.add(item.stack_id, index, value)
            values.append(value)
        rows.append(values)
    return rows


def compute_value_domain(data: List[Mapping[str, Any]], series: Iterable, segments: int = 4) -> ValueDomain:
    """Derives the shared value domain of all registered series, stacking included."""
    max_seen = -math.inf
    min_seen = math.inf

    for values in stacked_values(data, series, StackAccumulator()):
        for value in values:
            # NaN cells (or stacks a NaN ran into) take no part in the domain.
            if value is None or math.isnan(value):
                continue
            max_seen = max(max_seen, value)
            min_seen = min(min_seen, value)

    bounds = round_by_digits_with_zero_in_segments(min_seen, max_seen, segments=segments)
    logger.debug("value domain: raw=(%s, %s) rounded=(%s, %s) step=%s",
                 min_seen, max_seen, bounds.rounded_min, bounds.rounded_max, bounds.segment_step)
    return ValueDomain(bounds.rounded_min, bounds.rounded_max)
