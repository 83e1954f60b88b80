"""Tests for slider preset import/export."""

import pytest
import yaml

from doubleslider.config.io import (
    PRESET_VERSION,
    export_slider_config,
    import_slider_config,
    slider_config_from_data,
)
from doubleslider.config.settings import SliderConfig
from doubleslider.shared.exceptions import ConfigError


class TestExportImport:
    """Test YAML preset round trips."""

    def test_round_trip(self, tmp_path):
        """Test an exported preset imports to an equal config."""
        config = SliderConfig(separation_distance=4.0, orientation="vertical", zoom_factor=3.0)
        path = tmp_path / "presets" / "slider.yaml"

        export_slider_config(config, path)

        assert path.exists()
        assert import_slider_config(path) == config

    def test_preset_layout(self, tmp_path):
        """Test the file holds a version and a slider section."""
        path = tmp_path / "slider.yaml"
        export_slider_config(SliderConfig(), path)

        with open(path) as f:
            data = yaml.safe_load(f)

        assert data["version"] == PRESET_VERSION
        assert data["slider"]["axis_max"] == 100.0
        assert data["slider"]["orientation"] == "horizontal"


class TestImportErrors:
    """Test import failures raise ConfigError."""

    def test_missing_file(self, tmp_path):
        """Test a missing file."""
        with pytest.raises(ConfigError) as exc_info:
            import_slider_config(tmp_path / "nope.yaml")

        assert exc_info.value.config_path.endswith("nope.yaml")

    def test_malformed_yaml(self, tmp_path):
        """Test unparsable YAML."""
        path = tmp_path / "bad.yaml"
        path.write_text("slider: [unclosed\n")

        with pytest.raises(ConfigError):
            import_slider_config(path)

    def test_empty_file(self, tmp_path):
        """Test an empty file."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        with pytest.raises(ConfigError):
            import_slider_config(path)

    def test_invalid_values_carry_path(self, tmp_path):
        """Test validation errors name the preset file."""
        path = tmp_path / "invalid.yaml"
        path.write_text("version: 1\nslider:\n  axis_min: 10\n  axis_max: 0\n")

        with pytest.raises(ConfigError) as exc_info:
            import_slider_config(path)

        assert exc_info.value.config_path == str(path)

    def test_non_numeric_bound(self, tmp_path):
        """Test a bound that is not a number raises ConfigError with the path."""
        path = tmp_path / "text_bound.yaml"
        path.write_text("slider:\n  axis_min: abc\n")

        with pytest.raises(ConfigError) as exc_info:
            import_slider_config(path)

        assert exc_info.value.config_path == str(path)


class TestFromData:
    """Test building configs from parsed data."""

    def test_bare_mapping(self):
        """Test a plain mapping of fields is accepted."""
        config = slider_config_from_data({"axis_max": 20.0, "separation_distance": 2.0})

        assert config.axis_max == 20.0
        assert config.separation_distance == 2.0

    def test_not_a_mapping(self):
        """Test non-mapping data is rejected."""
        with pytest.raises(ConfigError):
            slider_config_from_data([1, 2, 3])

    def test_future_version_warns(self, caplog):
        """Test an unknown preset version still imports with a warning."""
        config = slider_config_from_data({"version": 99, "slider": {"axis_max": 5.0}})

        assert config.axis_max == 5.0
        assert "version 99" in caplog.text
