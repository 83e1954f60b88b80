"""
doubleslider - interaction and coordinate-mapping engine for dual-handle range sliders.

The engine is immediate-mode: hosts call ``update_slider`` (or
``DoubleSlider.update``) once per frame with the current value pair, the
widget rectangle, pointer input and the drag state from the previous frame.
Drawing is left to the host; the returned ``Geometry`` says where the
handles, band and highlight segments are.
"""

from doubleslider.config import SliderConfig, SliderDefaults
from doubleslider.core import DoubleSlider
from doubleslider.domain import (
    AxisRange,
    Geometry,
    NumericType,
    NumpyNumeric,
    Orientation,
    Pos2,
    Rect,
    Vec2,
    from_normalized,
    numeric_type_for,
    to_normalized,
)
from doubleslider.interaction import (
    DragState,
    DragTarget,
    Event,
    EventBus,
    EventType,
    FrameInput,
    SliderResponse,
    ZoneFlags,
    update_slider,
)
from doubleslider.shared.exceptions import (
    ConfigError,
    DoubleSliderError,
    NumericTypeError,
    ReplayScriptError,
)


__version__ = "0.1.0"

__all__ = [
    "AxisRange",
    "ConfigError",
    "DoubleSlider",
    "DoubleSliderError",
    "DragState",
    "DragTarget",
    "Event",
    "EventBus",
    "EventType",
    "FrameInput",
    "Geometry",
    "NumericType",
    "NumericTypeError",
    "NumpyNumeric",
    "Orientation",
    "Pos2",
    "Rect",
    "ReplayScriptError",
    "SliderConfig",
    "SliderDefaults",
    "SliderResponse",
    "Vec2",
    "ZoneFlags",
    "from_normalized",
    "numeric_type_for",
    "to_normalized",
    "update_slider",
]
