"""Tests for the category and value axes."""

from __future__ import annotations

import math

import pytest

from isocharts.axes import XAxis, YAxis, fixed_point
from tests.svg_helpers import floats, fragment

pytestmark = pytest.mark.unit


def test_x_axis_draws_baseline_and_evenly_spaced_ticks(dwg) -> None:
    axis = XAxis(height=4, stroke="#123")

    group = fragment(axis.render(dwg, width=90, x=10, y=80, num_ticks=4))
    lines = group.findall("line")

    baseline, ticks = lines[0], lines[1:]
    assert (float(baseline.get("x1")), float(baseline.get("x2"))) == (10, 100)
    assert floats(ticks, "x1") == pytest.approx([10, 40, 70, 100])
    assert floats(ticks, "y2") == [81, 81, 81, 81]
    assert all(line.get("stroke") == "#123" for line in lines)
    assert all(line.get("vector-effect") == "non-scaling-stroke" for line in lines)


def test_x_axis_labels_sit_on_ticks(dwg) -> None:
    axis = XAxis(height=4, labels=["a", "b", "c"])

    texts = fragment(axis.render(dwg, width=90, x=10, y=80, num_ticks=3)).findall("text")

    assert [t.text for t in texts] == ["a", "b", "c"]
    assert floats(texts, "x") == [10, 55, 100]
    assert floats(texts, "y") == [83, 83, 83]
    assert all(t.get("text-anchor") == "middle" for t in texts)


def test_centered_labels_shift_by_half_a_tick(dwg) -> None:
    axis = XAxis(height=4, labels=["a", "b", "c"])

    group = fragment(axis.render(dwg, width=90, x=10, y=80, num_ticks=4, center_labels=True))

    assert floats(group.findall("text"), "x") == pytest.approx([25, 55, 85])
    assert float(group.findall("line")[0].get("x1")) == 10


def test_x_axis_uses_its_own_settings_by_default(dwg) -> None:
    axis = XAxis(height=4)

    ticks = fragment(axis.render(dwg, width=100, x=0, y=0)).findall("line")[1:]

    assert len(ticks) == 5
    assert ticks[0].get("stroke") == "#666"


def test_single_tick_is_an_unguarded_boundary(dwg) -> None:
    """num_ticks=1 divides by zero; the tick position comes out as nan."""

    axis = XAxis(height=4, labels=["only"])

    group = fragment(axis.render(dwg, width=90, x=10, y=80, num_ticks=1))

    assert math.isnan(float(group.findall("line")[1].get("x1")))
    assert math.isnan(float(group.find("text").get("x")))


def test_default_tick_formatter_is_fixed_point() -> None:
    assert fixed_point(24.6, 0) == "25"
    assert fixed_point(0.125, 2) == "0.13"
    assert fixed_point(-2.5, 0) == "-3"
    assert fixed_point(math.nan, 0) == "NaN"


def test_fixed_point_handles_values_past_default_decimal_precision() -> None:
    assert fixed_point(1e30, 0) == str(int(1e30))
    assert fixed_point(-1e30, 0) == str(int(-1e30))
    assert fixed_point(1e26, 2) == f"{int(1e26)}.00"


def test_halves_round_up_on_a_ten_domain() -> None:
    axis = YAxis(width=10, num_ticks=5)

    assert axis.format_labels(axis.tick_values(0, 10)) == ["0", "3", "5", "8", "10"]


def test_y_axis_labels_for_hundred_domain() -> None:
    axis = YAxis(width=10, num_ticks=5)

    values = axis.tick_values(0, 100)

    assert values == [0, 25, 50, 75, 100]
    assert axis.format_labels(values) == ["0", "25", "50", "75", "100"]


def test_y_axis_uses_custom_formatter() -> None:
    axis = YAxis(width=10, num_ticks=3, tick_formatter=lambda value, fixed: f"{value * 100:.{fixed}f}%")

    assert axis.format_labels(axis.tick_values(0, 1)) == ["0%", "50%", "100%"]


def test_y_axis_runs_bottom_to_top(dwg) -> None:
    axis = YAxis(width=10, num_ticks=3)

    group = fragment(axis.render(dwg, height=80, x=3, y=5, labels=["0", "5", "10"]))
    lines = group.findall("line")
    texts = group.findall("text")

    baseline, ticks = lines[0], lines[1:]
    assert float(baseline.get("x1")) == 13
    assert (float(baseline.get("y1")), float(baseline.get("y2"))) == (5, 85)
    assert floats(ticks, "y1") == [85, 45, 5]
    assert floats(ticks, "x2") == [12, 12, 12]
    assert [t.text for t in texts] == ["0", "5", "10"]
    assert floats(texts, "x") == [11, 11, 11]
    assert all(t.get("text-anchor") == "end" for t in texts)


def test_y_axis_reserves_its_width(dwg) -> None:
    group = fragment(YAxis(width=10).render(dwg, height=80, x=3, y=5))
    rect = group.find("rect")

    assert floats([rect], "width") == [10]
    assert rect.get("fill") == "none"
    assert group.findall("text") == []
