"""
doubleslider replay tool - main entry point.

Replays a recorded gesture script (YAML) through a ``DoubleSlider`` and logs
the value pair after every frame. Useful for reproducing interaction bugs
without a GUI. Uses tyro for argument parsing.

Script layout::

    config:              # SliderConfig fields or a preset file path
      axis_min: 0.0
      axis_max: 100.0
      separation_distance: 10.0
    rect: [0, 0, 200, 20]   # x, y, width, height
    values: [20.0, 80.0]
    dtype: float            # optional: float, int or a numpy dtype name
    frames:
      - {pointer: [50, 10], pressed: true, down: true}
      - {pointer: [80, 10], down: true}
      - {pointer: [80, 10], released: true}
      - {pointer: [100, 10], scroll: [0, 4]}
      - {pointer: [100, 10], zoom: 1.2}
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Annotated, Any

import tyro
import yaml

from doubleslider.config.io import import_slider_config, slider_config_from_data
from doubleslider.config.settings import SliderConfig
from doubleslider.core.slider import DoubleSlider
from doubleslider.domain.geometry import Pos2, Rect, Vec2
from doubleslider.domain.numeric import NumericType, resolve_numeric_type
from doubleslider.interaction.state import DragState, FrameInput, SliderResponse
from doubleslider.shared.exceptions import (
    ConfigError,
    DoubleSliderError,
    NumericTypeError,
    ReplayScriptError,
)


logger = logging.getLogger(__name__)

_FRAME_KEYS = {"pointer", "pressed", "down", "released", "scroll", "zoom"}


@dataclass
class ReplayScript:
    """Parsed gesture script."""

    config: SliderConfig
    rect: Rect
    low: Any
    high: Any
    numeric_type: NumericType
    frames: list[FrameInput] = field(default_factory=list)


def _pair(value: Any, key: str, path: str, index: int | None = None) -> tuple[float, float]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ReplayScriptError(f"'{key}' must be a pair of numbers", path, index)
    try:
        return float(value[0]), float(value[1])
    except (TypeError, ValueError) as e:
        raise ReplayScriptError(f"'{key}' must be a pair of numbers: {e}", path, index) from e


def parse_frame(entry: Any, index: int, path: str = "<script>") -> FrameInput:
    """
    Convert one script frame entry to a FrameInput.

    Parameters
    ----------
    entry : Any
        Mapping with optional keys pointer, pressed, down, released, scroll, zoom
    index : int
        Frame index, for error messages
    path : str
        Script path, for error messages

    Returns
    -------
    FrameInput
        Parsed frame
    """
    if not isinstance(entry, dict):
        raise ReplayScriptError("Frame entry must be a mapping", path, index)

    unknown = set(entry) - _FRAME_KEYS
    if unknown:
        raise ReplayScriptError(f"Unknown frame keys: {sorted(unknown)}", path, index)

    pointer = None
    if entry.get("pointer") is not None:
        pointer = Pos2(*_pair(entry["pointer"], "pointer", path, index))

    scroll = Vec2()
    if entry.get("scroll") is not None:
        scroll = Vec2(*_pair(entry["scroll"], "scroll", path, index))

    try:
        zoom = float(entry.get("zoom", 1.0))
    except (TypeError, ValueError) as e:
        raise ReplayScriptError(f"'zoom' must be a number: {e}", path, index) from e

    pressed = bool(entry.get("pressed", False))
    return FrameInput(
        pointer=pointer,
        pressed=pressed,
        down=bool(entry.get("down", pressed)),
        released=bool(entry.get("released", False)),
        scroll_delta=scroll,
        zoom_delta=zoom,
    )


def load_replay_script(script_path: Path | str) -> ReplayScript:
    """
    Load and validate a gesture script.

    Parameters
    ----------
    script_path : Path | str
        YAML script file

    Returns
    -------
    ReplayScript
        Parsed script

    Raises
    ------
    ReplayScriptError
        If the file is missing or malformed
    """
    script_path = Path(script_path)
    path = str(script_path)
    if not script_path.exists():
        raise ReplayScriptError("Script file not found", path)

    try:
        with open(script_path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ReplayScriptError(f"Malformed YAML: {e}", path) from e

    if not isinstance(data, dict):
        raise ReplayScriptError("Script must be a mapping", path)

    config_data = data.get("config", {})
    try:
        if isinstance(config_data, str):
            config = import_slider_config(script_path.parent / config_data)
        else:
            config = slider_config_from_data(config_data or {}, source=path)
    except ConfigError as e:
        raise ReplayScriptError(f"Invalid slider config: {e}", path) from e

    rect_data = data.get("rect", [0.0, 0.0, config.width, config.height])
    if not isinstance(rect_data, (list, tuple)) or len(rect_data) != 4:
        raise ReplayScriptError("'rect' must be [x, y, width, height]", path)
    try:
        rect = Rect(*(float(v) for v in rect_data))
    except (TypeError, ValueError) as e:
        raise ReplayScriptError(f"'rect' must hold numbers: {e}", path) from e

    try:
        numeric_type = resolve_numeric_type(str(data.get("dtype", "float")))
    except NumericTypeError as e:
        raise ReplayScriptError(str(e), path) from e

    values = data.get("values", [config.axis_min, config.axis_max])
    low, high = _pair(values, "values", path)

    frames_data = data.get("frames") or []
    if not isinstance(frames_data, list):
        raise ReplayScriptError("'frames' must be a list", path)
    frames = [parse_frame(entry, i, path) for i, entry in enumerate(frames_data)]

    return ReplayScript(
        config=config,
        rect=rect,
        low=numeric_type.from_f64(low),
        high=numeric_type.from_f64(high),
        numeric_type=numeric_type,
        frames=frames,
    )


def run_replay(script: ReplayScript) -> list[SliderResponse]:
    """
    Feed every frame of a script through a DoubleSlider.

    Returns
    -------
    list[SliderResponse]
        One response per frame, in order
    """
    slider = DoubleSlider(script.config, numeric_type=script.numeric_type, name="replay")
    low, high = script.low, script.high
    state = DragState.idle()
    responses = []

    for index, frame in enumerate(script.frames):
        response = slider.update(low, high, script.rect, frame, state)
        low, high, state = response.low, response.high, response.state
        logger.info(
            f"frame {index:4d}: low={low} high={high} "
            f"drag={state.target.name} changed={response.changed}"
        )
        responses.append(response)

    return responses


def setup_logging(level: str = "INFO") -> None:
    """
    Setup logging configuration.

    Parameters
    ----------
    level : str
        Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main(
    script: Annotated[Path, tyro.conf.Positional],
    log_level: str = "INFO",
    json_output: bool = False,
) -> int:
    """
    Replay a recorded double slider gesture script.

    Parameters
    ----------
    script : Path
        Path to the YAML gesture script
    log_level : str
        Logging level: DEBUG, INFO, WARNING, ERROR (default: INFO)
    json_output : bool
        Print the final values as JSON instead of plain text

    Examples
    --------
    Replay a script:
        doubleslider-replay ./gestures/drag_low.yaml

    Trace engine decisions:
        doubleslider-replay ./gestures/drag_low.yaml --log-level DEBUG
    """
    setup_logging(log_level)

    try:
        replay = load_replay_script(script)
    except DoubleSliderError as e:
        logger.error(str(e))
        return 1

    logger.info("=== doubleslider replay ===")
    logger.info(f"Script: {script}")
    logger.info(f"Axis: [{replay.config.axis_min}, {replay.config.axis_max}]")
    logger.info(f"Frames: {len(replay.frames)}")

    responses = run_replay(replay)
    low = responses[-1].low if responses else replay.low
    high = responses[-1].high if responses else replay.high

    if json_output:
        print(json.dumps({"low": float(low), "high": float(high), "frames": len(responses)}))
    else:
        print(f"low={low} high={high}")
    return 0


def cli() -> None:
    """Entry point for the installed script."""
    raise SystemExit(tyro.cli(main))


if __name__ == "__main__":
    cli()
