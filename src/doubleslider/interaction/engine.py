"""
One-frame update of the double slider.

``update_slider`` is the single entry point hosts call once per rendered
frame. It is a pure function of its arguments: values, drag state, input,
rectangle and configuration in; new values, new drag state and interaction
flags out.
"""

from __future__ import annotations

import logging

from doubleslider.config.settings import SliderConfig
from doubleslider.domain.geometry import Geometry, Rect, resolve
from doubleslider.domain.mapping import to_normalized
from doubleslider.interaction.drag import begin_drag, continue_drag, hit_test
from doubleslider.interaction.scroll_zoom import apply_scroll, apply_zoom
from doubleslider.interaction.state import (
    DragState,
    DragTarget,
    FrameInput,
    SliderResponse,
    ZoneFlags,
)
from doubleslider.shared.math import widen_to


logger = logging.getLogger(__name__)


def sanitize_values(low: float, high: float, config: SliderConfig) -> tuple[float, float]:
    """
    Repair an incoming value pair so every invariant holds before interaction.

    Values are clamped to the axis (NaN to the minimum), put in order and,
    with the clamp flag on, spread to the separation distance.
    """
    axis = config.axis
    new_low = axis.clamp(low)
    new_high = axis.clamp(high)
    if new_low > new_high:
        new_low, new_high = new_high, new_low
    new_low, new_high = widen_to(
        new_low, new_high, config.effective_separation, axis.min_value, axis.max_value
    )

    if (new_low, new_high) != (low, high):
        logger.debug(f"Repaired slider values ({low}, {high}) -> ({new_low}, {new_high})")
    return new_low, new_high


def layout(low: float, high: float, rect: Rect, config: SliderConfig) -> Geometry:
    """Resolve the geometry for a value pair under ``config``."""
    axis = config.axis
    return resolve(
        rect,
        config.orientation,
        to_normalized(low, axis, config.logarithmic),
        to_normalized(high, axis, config.logarithmic),
        handle_radius=config.handle_radius,
        band_thickness=config.band_thickness,
        inverted=config.inverted_highlighting,
    )


def update_slider(
    low: float,
    high: float,
    rect: Rect,
    frame: FrameInput,
    state: DragState,
    config: SliderConfig,
) -> SliderResponse:
    """
    Run one frame of slider interaction.

    Parameters
    ----------
    low, high : float
        Values at the start of the frame
    rect : Rect
        Where the widget is drawn this frame
    frame : FrameInput
        Pointer and gesture input
    state : DragState
        Drag state returned by the previous frame (``DragState.idle()`` at first)
    config : SliderConfig
        Slider settings

    Returns
    -------
    SliderResponse
        New values, next drag state and per-zone flags
    """
    new_low, new_high = sanitize_values(low, high, config)
    geometry = layout(new_low, new_high, rect, config)
    hovered = frame.pointer is not None and rect.contains(frame.pointer)

    started = DragTarget.NONE
    released = DragTarget.NONE

    if not state.is_dragging and frame.pressed:
        high_pos = to_normalized(new_high, config.axis, config.logarithmic)
        state = begin_drag(frame, geometry, high_pos)
        started = state.target

    if state.is_dragging:
        new_low, new_high, state = continue_drag(
            state, frame, geometry, new_low, new_high, config
        )
        if frame.released or not frame.down:
            released = state.target
            logger.debug(f"Drag released on {released.name}")
            state = DragState.idle()

    scrolled = zoomed = False
    # Gestures only while hovering and not holding a zone
    if hovered and not state.is_dragging and released is DragTarget.NONE:
        scroll = frame.scroll_delta.total
        if scroll != 0.0:
            new_low, new_high = apply_scroll(
                new_low, new_high, scroll, config, geometry.track_length
            )
            scrolled = True
        if frame.zoom_delta != 1.0:
            anchor_pos = geometry.pixel_to_normalized(frame.pointer)
            new_low, new_high = apply_zoom(
                new_low, new_high, frame.zoom_delta, config, anchor_pos
            )
            zoomed = True

    final_geometry = layout(new_low, new_high, rect, config)

    if state.is_dragging:
        hovered_target = state.target
    elif released is not DragTarget.NONE:
        hovered_target = released
    elif frame.pointer is not None:
        high_pos = to_normalized(new_high, config.axis, config.logarithmic)
        hovered_target = hit_test(final_geometry, frame.pointer, high_pos)
    else:
        hovered_target = DragTarget.NONE

    def flags(target: DragTarget) -> ZoneFlags:
        return ZoneFlags(
            hovered=hovered_target is target,
            drag_started=started is target,
            dragged=state.target is target,
            drag_released=released is target,
        )

    return SliderResponse(
        low=new_low,
        high=new_high,
        state=state,
        changed=(new_low, new_high) != (low, high),
        hovered=hovered,
        geometry=final_geometry,
        scrolled=scrolled,
        zoomed=zoomed,
        low_handle=flags(DragTarget.LOW_HANDLE),
        high_handle=flags(DragTarget.HIGH_HANDLE),
        in_between=flags(DragTarget.IN_BETWEEN),
    )


__all__ = ["layout", "sanitize_values", "update_slider"]
