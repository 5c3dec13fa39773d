"""
Unit tests for weighted area splitting.
"""

import pytest
from treewm.layouts.layout_utils import split_weighted, split_area_weighted
from treewm.protocol import Area


@pytest.mark.unit
class TestSplitWeighted:
    """Test splitting a line into weighted parts."""

    def test_equal_weights(self):
        assert split_weighted(0, 100, [1.0, 1.0]) == [(0, 50), (50, 50)]

    def test_uneven_weights(self):
        assert split_weighted(0, 100, [1.0, 3.0]) == [(0, 25), (25, 75)]

    def test_offset_and_gap(self):
        assert split_weighted(20, 110, [1.0, 1.0], gap=10) == [(20, 50), (80, 50)]

    def test_parts_cover_line_exactly(self):
        parts = split_weighted(0, 1000, [1.0] * 7, gap=4)

        assert parts[0][0] == 0
        last_begin, last_length = parts[-1]
        assert last_begin + last_length == 1000
        assert sum(length for _, length in parts) == 1000 - 6 * 4

    def test_gaps_wider_than_line(self):
        parts = split_weighted(0, 10, [1.0, 1.0, 1.0], gap=10)

        assert parts == [(0, 0), (10, 0), (10, 0)]

    def test_no_weights(self):
        assert split_weighted(0, 100, []) == []

    def test_zero_weights_rejected(self):
        with pytest.raises(ValueError):
            split_weighted(0, 100, [0.0, 0.0])


@pytest.mark.unit
class TestSplitAreaWeighted:
    """Test splitting an area along one axis."""

    def test_horizontal_keeps_height(self):
        area = Area(10, 20, 100, 40)

        parts = split_area_weighted(area, [1.0, 1.0], horizontal=True)

        assert parts == [Area(10, 20, 50, 40), Area(60, 20, 50, 40)]

    def test_vertical_keeps_width(self):
        area = Area(10, 20, 100, 40)

        parts = split_area_weighted(area, [1.0, 1.0], gap=2, horizontal=False)

        assert parts == [Area(10, 20, 100, 19), Area(10, 41, 100, 19)]
