"""
Drag state machine for the two handles and the band between them.

States are ``Idle`` (``DragTarget.NONE``) and ``Dragging(target)``:

- a press inside a zone grabs it (handles take priority over the band),
- pointer movement while grabbed updates the values,
- releasing the button returns to idle.

The grab survives the pointer leaving the widget rectangle.
"""

from __future__ import annotations

import logging

from doubleslider.config.settings import SliderConfig
from doubleslider.domain.geometry import Geometry, Pos2
from doubleslider.domain.mapping import from_normalized, value_delta
from doubleslider.interaction.state import DragState, DragTarget, FrameInput
from doubleslider.shared.math import translate_within


logger = logging.getLogger(__name__)


def hit_test(geometry: Geometry, point: Pos2, high_pos: float) -> DragTarget:
    """
    Find the zone under ``point``.

    Handle zones win over the band. When both handle zones contain the point
    the nearer centre wins; on a tie the high handle is taken unless it already
    sits at the top of the axis, so stacked handles can always be separated.

    Parameters
    ----------
    geometry : Geometry
        Current layout
    point : Pos2
        Pointer position
    high_pos : float
        Normalized position of the high handle

    Returns
    -------
    DragTarget
        Zone under the pointer, ``NONE`` if outside all zones
    """
    in_low = geometry.low_zone.contains(point)
    in_high = geometry.high_zone.contains(point)

    if in_low and in_high:
        coord = geometry.primary(point)
        d_low = abs(coord - geometry.primary(geometry.low_center))
        d_high = abs(coord - geometry.primary(geometry.high_center))
        if d_low < d_high:
            return DragTarget.LOW_HANDLE
        if d_high < d_low:
            return DragTarget.HIGH_HANDLE
        return DragTarget.LOW_HANDLE if high_pos >= 1.0 else DragTarget.HIGH_HANDLE
    if in_low:
        return DragTarget.LOW_HANDLE
    if in_high:
        return DragTarget.HIGH_HANDLE
    if geometry.band_zone is not None and geometry.band_zone.contains(point):
        return DragTarget.IN_BETWEEN
    return DragTarget.NONE


def move_low_handle(
    target: float,
    low: float,
    high: float,
    config: SliderConfig,
) -> tuple[float, float]:
    """
    Move the low handle towards ``target``.

    Without push mode the handle stops at ``high - separation`` (clamp flag
    on) or at ``high``. In push mode the high handle is pushed along until it
    reaches the top of the axis.
    """
    axis = config.axis
    gap = config.effective_separation

    if config.push_by_dragging:
        new_low = max(axis.min_value, min(target, axis.max_value - gap))
        new_high = min(max(high, new_low + gap), axis.max_value)
        return new_low, new_high

    new_low = max(min(target, high - gap), axis.min_value)
    return new_low, high


def move_high_handle(
    target: float,
    low: float,
    high: float,
    config: SliderConfig,
) -> tuple[float, float]:
    """Move the high handle towards ``target``, mirror of ``move_low_handle``."""
    axis = config.axis
    gap = config.effective_separation

    if config.push_by_dragging:
        new_high = min(axis.max_value, max(target, axis.min_value + gap))
        new_low = max(min(low, new_high - gap), axis.min_value)
        return new_low, new_high

    new_high = min(max(target, low + gap), axis.max_value)
    return low, new_high


def move_band(
    position_delta: float,
    low: float,
    high: float,
    config: SliderConfig,
) -> tuple[float, float]:
    """
    Translate both values by the same amount.

    ``position_delta`` is a normalized distance along the track; it is turned
    into one value-space delta anchored at ``low`` and applied to both ends,
    so the width ``high - low`` never changes. A pair that would leave the axis
    is pushed back against the violated bound.
    """
    axis = config.axis
    delta = value_delta(low, position_delta, axis, config.logarithmic)
    return translate_within(low, high, delta, axis.min_value, axis.max_value)


def begin_drag(
    frame: FrameInput,
    geometry: Geometry,
    high_pos: float,
) -> DragState:
    """Idle -> Dragging transition for a press inside a zone."""
    if not frame.pressed or frame.pointer is None:
        return DragState.idle()

    target = hit_test(geometry, frame.pointer, high_pos)
    if target is DragTarget.NONE:
        return DragState.idle()

    grab_offset = 0.0
    coord = geometry.primary(frame.pointer)
    if target is DragTarget.LOW_HANDLE:
        grab_offset = coord - geometry.primary(geometry.low_center)
    elif target is DragTarget.HIGH_HANDLE:
        grab_offset = coord - geometry.primary(geometry.high_center)

    logger.debug(f"Drag started on {target.name} (grab offset {grab_offset:.1f}px)")
    return DragState(target=target, grab_offset=grab_offset, last_pointer=frame.pointer)


def continue_drag(
    state: DragState,
    frame: FrameInput,
    geometry: Geometry,
    low: float,
    high: float,
    config: SliderConfig,
) -> tuple[float, float, DragState]:
    """
    Apply pointer movement for an active drag.

    Parameters
    ----------
    state : DragState
        Current drag state, must be dragging
    frame : FrameInput
        Input for this frame
    geometry : Geometry
        Layout resolved from the values at the start of the frame
    low, high : float
        Current values
    config : SliderConfig
        Slider settings

    Returns
    -------
    tuple[float, float, DragState]
        New values and updated drag state
    """
    if frame.pointer is None:
        return low, high, state

    axis = config.axis
    if axis.is_degenerate:
        return axis.min_value, axis.min_value, state

    pointer = frame.pointer
    if state.target is DragTarget.IN_BETWEEN:
        last = state.last_pointer if state.last_pointer is not None else pointer
        pixels = (pointer - last).along(geometry.orientation)
        if pixels != 0.0:
            low, high = move_band(geometry.pixels_to_position_delta(pixels), low, high, config)
    else:
        position = geometry.coord_to_normalized(geometry.primary(pointer) - state.grab_offset)
        target = from_normalized(position, axis, config.logarithmic)
        if state.target is DragTarget.LOW_HANDLE:
            low, high = move_low_handle(target, low, high, config)
        else:
            low, high = move_high_handle(target, low, high, config)

    return low, high, DragState(
        target=state.target,
        grab_offset=state.grab_offset,
        last_pointer=pointer,
    )


__all__ = [
    "begin_drag",
    "continue_drag",
    "hit_test",
    "move_band",
    "move_high_handle",
    "move_low_handle",
]
