"""
DoubleSlider: the host-facing widget object.

Wraps ``update_slider`` with numeric type conversion and event emission.
The host keeps ownership of the two values and of the drag state:

>>> slider = DoubleSlider(SliderConfig(axis_min=0.0, axis_max=100.0))
>>> state = DragState.idle()
>>> response = slider.update(low, high, rect, frame, state)
>>> low, high, state = response.low, response.high, response.state
"""

from __future__ import annotations

import dataclasses
import logging
import math
from typing import Any

from doubleslider.config.settings import SliderConfig
from doubleslider.domain.geometry import Rect
from doubleslider.domain.numeric import NumericType, numeric_type_for
from doubleslider.interaction.engine import update_slider
from doubleslider.interaction.events import EventBus, EventType
from doubleslider.interaction.state import (
    DragState,
    DragTarget,
    FrameInput,
    SliderResponse,
)


logger = logging.getLogger(__name__)

_ZONES = (DragTarget.LOW_HANDLE, DragTarget.HIGH_HANDLE, DragTarget.IN_BETWEEN)


class DoubleSlider:
    """
    Dual-handle range slider for one value pair.

    Handles:
    - Conversion between the caller's numeric type and engine floats
    - Per-frame update through the interaction engine
    - Event emission (drag start/release, range changes, gestures)
    """

    def __init__(
        self,
        config: SliderConfig | None = None,
        numeric_type: NumericType | None = None,
        event_bus: EventBus | None = None,
        name: str = "double_slider",
    ):
        """
        Initialize DoubleSlider.

        Parameters
        ----------
        config : SliderConfig | None
            Slider settings, defaults if None
        numeric_type : NumericType | None
            Value type; inferred from the values on each update if None
        event_bus : EventBus | None
            Bus to emit interaction events on; a private bus is created if None
        name : str
            Source name attached to emitted events
        """
        self.config = config if config is not None else SliderConfig()
        self.numeric_type = numeric_type
        self.event_bus = event_bus if event_bus is not None else EventBus(name=name)
        self.name = name

        logger.debug(f"DoubleSlider '{name}' initialized on axis {self.config.axis}")

    def configure(self, config: SliderConfig) -> None:
        """Replace the configuration used from the next update on."""
        self.config = config

    def _resolve_type(self, low: Any) -> NumericType:
        if self.numeric_type is None:
            self.numeric_type = numeric_type_for(low)
            logger.debug(f"[{self.name}] Inferred numeric type {self.numeric_type}")
        return self.numeric_type

    def _fit_to_axis(self, kind: NumericType, value: Any) -> Any:
        """Keep a rounded integer inside ``[ceil(axis_min), floor(axis_max)]``."""
        if not kind.is_integer:
            return value
        axis = self.config.axis
        lowest = math.ceil(axis.min_value)
        highest = math.floor(axis.max_value)
        if lowest > highest:
            # No integer on the axis, nearest rounding is the best available
            return value
        as_float = kind.to_f64(value)
        if as_float < lowest:
            return kind.from_f64(float(lowest))
        if as_float > highest:
            return kind.from_f64(float(highest))
        return value

    def update(
        self,
        low: Any,
        high: Any,
        rect: Rect,
        frame: FrameInput,
        state: DragState | None = None,
    ) -> SliderResponse:
        """
        Run one frame for this slider.

        Parameters
        ----------
        low, high : Any
            Current values in the caller's numeric type
        rect : Rect
            Widget rectangle for this frame
        frame : FrameInput
            Pointer and gesture input
        state : DragState | None
            Drag state from the previous frame, idle if None

        Returns
        -------
        SliderResponse
            Response with ``low``/``high`` converted back to the caller's type

        Notes
        -----
        Integer values are rounded every frame and no fractional remainder is
        carried over, so a scroll or band step worth less than half a unit
        leaves an integer slider where it is. Hosts wanting slow scrolling on
        integer sliders should raise ``scroll_factor`` or accumulate the wheel
        delta themselves. Rounded integers never leave the axis bounds.
        """
        kind = self._resolve_type(low)
        response = update_slider(
            kind.to_f64(low),
            kind.to_f64(high),
            rect,
            frame,
            state if state is not None else DragState.idle(),
            self.config,
        )

        new_low = self._fit_to_axis(kind, kind.from_f64(response.low))
        new_high = self._fit_to_axis(kind, kind.from_f64(response.high))
        changed = bool(new_low != low or new_high != high)
        response = dataclasses.replace(response, low=new_low, high=new_high, changed=changed)

        self._emit_events(response, frame, previous=(low, high))
        return response

    def _emit_events(
        self,
        response: SliderResponse,
        frame: FrameInput,
        previous: tuple[Any, Any],
    ) -> None:
        for target in _ZONES:
            flags = response.flags_for(target)
            if flags.drag_started:
                self.event_bus.emit(EventType.DRAG_STARTED, source=self.name, target=target)
            if flags.drag_released:
                self.event_bus.emit(EventType.DRAG_RELEASED, source=self.name, target=target)

        if response.scrolled:
            self.event_bus.emit(
                EventType.SCROLLED, source=self.name, delta=frame.scroll_delta.total
            )
        if response.zoomed:
            self.event_bus.emit(EventType.ZOOMED, source=self.name, zoom_delta=frame.zoom_delta)

        if response.changed:
            logger.debug(
                f"[{self.name}] Range {previous[0]}..{previous[1]} -> "
                f"{response.low}..{response.high}"
            )
            self.event_bus.emit(
                EventType.RANGE_CHANGED,
                source=self.name,
                low=response.low,
                high=response.high,
                previous=previous,
            )


__all__ = ["DoubleSlider"]
