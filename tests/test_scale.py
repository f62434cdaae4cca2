"""Tests for the y value scale function."""

import pytest

from vafchart.utils.scale import y_value_scale_function

Y_PADDING = 10


class TestYValueScaleFunction:
    """Tests for y_value_scale_function."""

    def test_linear_zero_min(self):
        """Test a linear scale starting at zero."""
        f = y_value_scale_function(0, 10, 120, False)
        assert f(1) == 120 - Y_PADDING - 10

    def test_linear_positive_min(self):
        """Test a linear scale with a positive minimum."""
        f = y_value_scale_function(1, 9, 120, False)
        assert f(1) == 120 - Y_PADDING - 0

    def test_log_zero_min(self):
        """Test that a zero minimum uses the log floor."""
        f = y_value_scale_function(0, 10, 120, True)
        assert f(1) == pytest.approx(120 - Y_PADDING - 75)

    def test_log_positive_min(self):
        """Test a log scale with a positive minimum."""
        f = y_value_scale_function(1, 9, 120, True)
        assert f(2) == pytest.approx(120 - Y_PADDING - 31.5, abs=0.1)

    def test_range_ends_map_to_padding(self):
        """Test that the range ends sit on the padding."""
        for use_log_scale in (False, True):
            f = y_value_scale_function(0.01, 0.8, 200, use_log_scale)
            assert f(0.01) == pytest.approx(200 - Y_PADDING)
            assert f(0.8) == pytest.approx(Y_PADDING)

    def test_log_zero_value_maps_to_floor(self):
        """Test that zero maps through the log floor."""
        f = y_value_scale_function(0, 1, 120, True)
        assert f(0) == pytest.approx(120 - Y_PADDING)

    def test_empty_range_maps_to_bottom(self):
        """Test that a zero-width range does not divide by zero."""
        f = y_value_scale_function(0.5, 0.5, 120, False)
        assert f(0.5) == 120 - Y_PADDING
        assert f(0.9) == 120 - Y_PADDING
