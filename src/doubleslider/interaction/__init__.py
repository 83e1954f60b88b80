"""Interaction layer: drag state machine, gestures and the per-frame engine."""

from doubleslider.interaction.engine import update_slider
from doubleslider.interaction.events import Event, EventBus, EventType
from doubleslider.interaction.state import (
    DragState,
    DragTarget,
    FrameInput,
    SliderResponse,
    ZoneFlags,
)


__all__ = [
    "DragState",
    "DragTarget",
    "Event",
    "EventBus",
    "EventType",
    "FrameInput",
    "SliderResponse",
    "ZoneFlags",
    "update_slider",
]
