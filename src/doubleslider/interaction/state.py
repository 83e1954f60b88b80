"""
Per-frame input, transient drag state and interaction results.

The host owns the ``DragState`` between frames: it passes the state
returned by one update into the next. The engine keeps no hidden memory.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from doubleslider.domain.geometry import Geometry, Pos2, Vec2


class DragTarget(Enum):
    """Zone that owns the current pointer interaction."""

    NONE = auto()
    LOW_HANDLE = auto()
    HIGH_HANDLE = auto()
    IN_BETWEEN = auto()


@dataclass(frozen=True)
class DragState:
    """Drag bookkeeping carried from one frame to the next.

    Attributes
    ----------
    target : DragTarget
        Grabbed zone, ``NONE`` while idle
    grab_offset : float
        Primary-axis pixels from the grabbed handle centre to the pointer at
        press time; keeps the handle from jumping under the cursor
    last_pointer : Pos2 | None
        Pointer position seen on the previous dragging frame
    """

    target: DragTarget = DragTarget.NONE
    grab_offset: float = 0.0
    last_pointer: Pos2 | None = None

    @classmethod
    def idle(cls) -> DragState:
        """Initial state: nothing grabbed."""
        return cls()

    @property
    def is_dragging(self) -> bool:
        return self.target is not DragTarget.NONE


@dataclass(frozen=True)
class FrameInput:
    """Pointer and gesture input for one frame.

    Attributes
    ----------
    pointer : Pos2 | None
        Pointer position, ``None`` when outside the window
    pressed : bool
        Primary button went down this frame
    down : bool
        Primary button is held
    released : bool
        Primary button went up this frame
    scroll_delta : Vec2
        Smooth scroll in pixels
    zoom_delta : float
        Multiplicative zoom gesture, 1.0 means none
    """

    pointer: Pos2 | None = None
    pressed: bool = False
    down: bool = False
    released: bool = False
    scroll_delta: Vec2 = field(default_factory=Vec2)
    zoom_delta: float = 1.0

    @classmethod
    def press(cls, pointer: Pos2) -> FrameInput:
        return cls(pointer=pointer, pressed=True, down=True)

    @classmethod
    def move(cls, pointer: Pos2 | None) -> FrameInput:
        return cls(pointer=pointer, down=True)

    @classmethod
    def release(cls, pointer: Pos2 | None) -> FrameInput:
        return cls(pointer=pointer, released=True)

    @classmethod
    def hover(
        cls,
        pointer: Pos2 | None,
        scroll_delta: Vec2 | None = None,
        zoom_delta: float = 1.0,
    ) -> FrameInput:
        return cls(
            pointer=pointer,
            scroll_delta=scroll_delta if scroll_delta is not None else Vec2(),
            zoom_delta=zoom_delta,
        )


@dataclass(frozen=True)
class ZoneFlags:
    """Interaction result for one zone."""

    hovered: bool = False
    drag_started: bool = False
    dragged: bool = False
    drag_released: bool = False


@dataclass(frozen=True)
class SliderResponse:
    """Result of one update call.

    Attributes
    ----------
    low, high : float
        Updated values (engine floats, or caller types from ``DoubleSlider``)
    state : DragState
        State to pass into the next frame
    changed : bool
        Whether either value changed
    scrolled, zoomed : bool
        Whether a scroll or zoom gesture was applied this frame
    hovered : bool
        Pointer over the widget rectangle
    geometry : Geometry
        Layout after the update, for drawing
    low_handle, high_handle, in_between : ZoneFlags
        Per-zone interaction flags
    """

    low: float
    high: float
    state: DragState
    changed: bool
    hovered: bool
    geometry: Geometry
    scrolled: bool = False
    zoomed: bool = False
    low_handle: ZoneFlags = field(default_factory=ZoneFlags)
    high_handle: ZoneFlags = field(default_factory=ZoneFlags)
    in_between: ZoneFlags = field(default_factory=ZoneFlags)

    def flags_for(self, target: DragTarget) -> ZoneFlags:
        """ZoneFlags for a drag target (empty flags for ``NONE``)."""
        if target is DragTarget.LOW_HANDLE:
            return self.low_handle
        if target is DragTarget.HIGH_HANDLE:
            return self.high_handle
        if target is DragTarget.IN_BETWEEN:
            return self.in_between
        return ZoneFlags()


__all__ = [
    "DragState",
    "DragTarget",
    "FrameInput",
    "SliderResponse",
    "ZoneFlags",
]
