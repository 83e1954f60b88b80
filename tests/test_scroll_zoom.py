"""Tests for scroll and zoom gestures."""

import math

import pytest

from doubleslider.config.settings import SliderConfig
from doubleslider.interaction.scroll_zoom import apply_scroll, apply_zoom


class TestScroll:
    """Test range shifting by scroll."""

    def test_shift_by_pixels(self, config):
        """Test 20px of scroll on a 200px track moves the range by 10 units."""
        assert apply_scroll(20.0, 40.0, 20.0, config, 200.0) == pytest.approx((30.0, 50.0))

    def test_scroll_factor(self):
        """Test scroll_factor scales the travel."""
        config = SliderConfig(scroll_factor=0.5)

        assert apply_scroll(20.0, 40.0, 20.0, config, 200.0) == pytest.approx((25.0, 45.0))

    def test_pushed_back_inside(self):
        """Test the range is pushed back against the bound with its width kept."""
        config = SliderConfig(axis_max=50.0)

        assert apply_scroll(10.0, 20.0, 180.0, config, 200.0) == (40.0, 50.0)

    def test_vertical_track_length_sign_ignored(self, config):
        """Test a negative (vertical) track length scrolls the same way."""
        assert apply_scroll(20.0, 40.0, 20.0, config, -200.0) == pytest.approx((30.0, 50.0))

    def test_no_op_cases(self, config):
        """Test zero travel, a collapsed track or non-finite deltas change nothing."""
        assert apply_scroll(20.0, 40.0, 0.0, config, 200.0) == (20.0, 40.0)
        assert apply_scroll(20.0, 40.0, 20.0, config, 0.0) == (20.0, 40.0)
        assert apply_scroll(20.0, 40.0, math.inf, config, 200.0) == (20.0, 40.0)

    def test_degenerate_axis(self):
        """Test a collapsed axis pins both values."""
        config = SliderConfig(axis_min=5.0, axis_max=5.0)

        assert apply_scroll(5.0, 5.0, 30.0, config, 200.0) == (5.0, 5.0)


class TestZoom:
    """Test range widening and narrowing."""

    def test_widen_clamps_to_axis(self, config):
        """Test a strong zoom-out fills the axis."""
        assert apply_zoom(40.0, 60.0, 2.0, config) == (0.0, 100.0)

    def test_narrow_about_midpoint(self, config):
        """Test zooming in shrinks the range around its centre."""
        low, high = apply_zoom(40.0, 60.0, 0.5, config)

        assert (low + high) / 2.0 == pytest.approx(50.0)
        assert high - low == pytest.approx(20.0 / math.sqrt(10.0))

    def test_narrow_respects_separation(self, separated_config):
        """Test zoom never narrows below the separation distance."""
        low, high = apply_zoom(40.0, 60.0, 0.5, separated_config)

        assert (low, high) == pytest.approx((45.0, 55.0))

    def test_anchor(self, config):
        """Test zooming around an anchor keeps the anchor fixed."""
        low, high = apply_zoom(40.0, 60.0, 0.5, config, anchor_pos=0.4)

        assert low == pytest.approx(40.0)
        assert high == pytest.approx(40.0 + 20.0 / math.sqrt(10.0))

    def test_invalid_deltas_ignored(self, config):
        """Test neutral or invalid zoom deltas change nothing."""
        assert apply_zoom(40.0, 60.0, 1.0, config) == (40.0, 60.0)
        assert apply_zoom(40.0, 60.0, math.nan, config) == (40.0, 60.0)
        assert apply_zoom(40.0, 60.0, -1.0, config) == (40.0, 60.0)

    def test_extreme_delta_stays_finite(self, config):
        """Test an absurd zoom gesture still yields axis values."""
        assert apply_zoom(40.0, 60.0, 1e9, config) == (0.0, 100.0)
        low, high = apply_zoom(40.0, 60.0, 1e-9, config)
        assert 0.0 <= low <= high <= 100.0

    def test_log_axis(self, log_config):
        """Test zoom on a log axis scales in position space."""
        low, high = apply_zoom(10.0, 100.0, 2.0, log_config)

        assert (low, high) == (1.0, 1000.0)

    def test_degenerate_axis(self):
        """Test a collapsed axis pins both values."""
        config = SliderConfig(axis_min=5.0, axis_max=5.0)

        assert apply_zoom(5.0, 5.0, 2.0, config) == (5.0, 5.0)
