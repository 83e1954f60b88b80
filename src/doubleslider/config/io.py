"""
Slider configuration presets.

Exports and imports ``SliderConfig`` snapshots to/from YAML files so hosts
can keep per-view slider presets next to their other settings.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from doubleslider.config.settings import SliderConfig
from doubleslider.shared.exceptions import ConfigError


logger = logging.getLogger(__name__)

PRESET_VERSION = 1


def export_slider_config(config: SliderConfig, output_path: Path | str) -> None:
    """
    Export a slider configuration to a YAML file.

    Parameters
    ----------
    config : SliderConfig
        Configuration to export
    output_path : Path | str
        Path to output YAML file
    """
    output_path = Path(output_path)
    export_data = {
        "version": PRESET_VERSION,
        "slider": config.to_dict(),
    }

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        yaml.safe_dump(export_data, f, default_flow_style=False, sort_keys=False)

    logger.info(f"Exported slider config to {output_path}")


def slider_config_from_data(data: Any, source: str | None = None) -> SliderConfig:
    """
    Build a SliderConfig from already parsed YAML/JSON data.

    Accepts either the preset layout (``{"version": 1, "slider": {...}}``)
    or a bare mapping of SliderConfig fields.

    Parameters
    ----------
    data : Any
        Parsed mapping
    source : str | None
        Where the data came from, used in error messages

    Returns
    -------
    SliderConfig
        Validated configuration
    """
    if not isinstance(data, dict):
        raise ConfigError("Slider config must be a mapping", config_path=source)

    version = data.get("version", PRESET_VERSION)
    if version != PRESET_VERSION:
        logger.warning(f"Unknown slider preset version {version}, attempting import anyway")

    slider_data = data.get("slider", data)
    if not isinstance(slider_data, dict):
        raise ConfigError("'slider' section must be a mapping", config_path=source)
    slider_data = {k: v for k, v in slider_data.items() if k != "version"}

    try:
        return SliderConfig.from_dict(slider_data)
    except ConfigError as e:
        if source is None or e.config_path is not None:
            raise
        raise ConfigError(str(e), config_path=source) from e


def import_slider_config(input_path: Path | str) -> SliderConfig:
    """
    Import a slider configuration from a YAML file.

    Parameters
    ----------
    input_path : Path | str
        Path to input YAML file

    Returns
    -------
    SliderConfig
        Validated configuration

    Raises
    ------
    ConfigError
        If the file is missing, unreadable, empty or holds invalid settings
    """
    input_path = Path(input_path)

    if not input_path.exists():
        raise ConfigError("Config file not found", config_path=str(input_path))

    try:
        with open(input_path, "r") as f:
            import_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Malformed YAML: {e}", config_path=str(input_path)) from e

    if not import_data:
        raise ConfigError("Empty or invalid config file", config_path=str(input_path))

    config = slider_config_from_data(import_data, source=str(input_path))
    logger.info(f"Imported slider config from {input_path}")
    return config


__all__ = [
    "PRESET_VERSION",
    "export_slider_config",
    "import_slider_config",
    "slider_config_from_data",
]
