"""Shared fixtures."""

from __future__ import annotations

import pytest
import svgwrite


@pytest.fixture
def dwg() -> svgwrite.Drawing:
    """Element factory matching the one the chart renders with."""
    return svgwrite.Drawing(debug=False)
