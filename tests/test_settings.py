"""Tests for SliderConfig validation and conversion."""

import math

import pytest

from doubleslider.config.settings import SliderConfig
from doubleslider.config.slider_constants import SliderDefaults
from doubleslider.domain.geometry import Orientation
from doubleslider.domain.mapping import AxisRange
from doubleslider.shared.exceptions import ConfigError


class TestDefaults:
    """Test default settings."""

    def test_defaults(self):
        """Test defaults match SliderDefaults."""
        config = SliderConfig()

        assert config.axis == AxisRange(0.0, 100.0)
        assert config.orientation is Orientation.HORIZONTAL
        assert config.clamp_to_other is True
        assert config.push_by_dragging is False
        assert config.handle_radius == SliderDefaults.HANDLE_RADIUS
        assert config.desired_size == (SliderDefaults.WIDTH, SliderDefaults.HEIGHT)

    def test_default_height_fits_handle(self):
        """Test the default height holds a handle plus padding."""
        assert SliderDefaults.HEIGHT == 18.0

    def test_effective_separation(self):
        """Test the clamp flag switches the enforced gap."""
        assert SliderConfig(separation_distance=10.0).effective_separation == 10.0
        assert (
            SliderConfig(separation_distance=10.0, clamp_to_other=False).effective_separation
            == 0.0
        )


class TestValidation:
    """Test invalid settings raise ConfigError."""

    @pytest.mark.parametrize(
        "kwargs, field_name",
        [
            ({"axis_min": 10.0, "axis_max": 0.0}, "axis"),
            ({"axis_max": math.inf}, "axis"),
            ({"axis_min": "abc"}, "axis"),
            ({"separation_distance": -1.0}, "separation_distance"),
            ({"logarithmic": True}, "logarithmic"),
            ({"scroll_factor": math.nan}, "scroll_factor"),
            ({"zoom_factor": 0.0}, "zoom_factor"),
            ({"handle_radius": 0.0}, "handle_radius"),
            ({"band_thickness": -2.0}, "band_thickness"),
            ({"width": -1.0}, "width"),
            ({"orientation": "diagonal"}, "orientation"),
        ],
    )
    def test_invalid(self, kwargs, field_name):
        """Test each invalid field is reported by name."""
        with pytest.raises(ConfigError) as exc_info:
            SliderConfig(**kwargs)

        assert exc_info.value.field_name == field_name

    def test_separation_wider_than_axis_allowed(self):
        """Test a separation beyond the axis span is accepted."""
        config = SliderConfig(axis_max=5.0, separation_distance=10.0)

        assert config.separation_distance == 10.0


class TestWithOptions:
    """Test builder-style copies."""

    def test_replaces_fields(self):
        """Test with_options returns a modified copy."""
        base = SliderConfig()
        changed = base.with_options(width=240.0, separation_distance=5.0)

        assert changed.width == 240.0
        assert changed.separation_distance == 5.0
        assert base.width == SliderDefaults.WIDTH

    def test_validates(self):
        """Test the copy is validated."""
        with pytest.raises(ConfigError):
            SliderConfig().with_options(zoom_factor=-1.0)

    def test_unknown_option(self):
        """Test unknown option names are rejected."""
        with pytest.raises(ConfigError):
            SliderConfig().with_options(colour="red")


class TestDictConversion:
    """Test to_dict / from_dict."""

    def test_round_trip(self):
        """Test a config survives conversion to a dict and back."""
        config = SliderConfig(
            axis_min=1.0,
            axis_max=500.0,
            logarithmic=True,
            orientation=Orientation.VERTICAL,
            inverted_highlighting=True,
        )

        data = config.to_dict()

        assert data["orientation"] == "vertical"
        assert SliderConfig.from_dict(data) == config

    def test_unknown_keys_ignored(self, caplog):
        """Test unknown keys are dropped with a warning."""
        config = SliderConfig.from_dict({"axis_max": 50.0, "colour": "red"})

        assert config.axis_max == 50.0
        assert "colour" in caplog.text
