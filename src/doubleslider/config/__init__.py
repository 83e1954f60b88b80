"""Configuration module for the double slider."""

from doubleslider.config.io import export_slider_config, import_slider_config
from doubleslider.config.settings import SliderConfig
from doubleslider.config.slider_constants import SliderDefaults


__all__ = [
    "SliderConfig",
    "SliderDefaults",
    "export_slider_config",
    "import_slider_config",
]
