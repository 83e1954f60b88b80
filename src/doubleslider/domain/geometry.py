"""Pixel geometry of the slider: handle centres, hit zones and the band.

Geometry is recomputed every frame from the widget rectangle, the
orientation and the normalized handle positions. Nothing here is stored
between frames.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from doubleslider.shared.math import clamp01


# Extra padding at both track ends, room for the handle highlight stroke
TRACK_PADDING = 2.0


class Orientation(Enum):
    """Primary axis of the slider."""

    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class Vec2:
    """A 2D offset in pixels."""

    x: float = 0.0
    y: float = 0.0

    def along(self, orientation: Orientation) -> float:
        """Component on the slider's primary axis, positive towards higher values."""
        if orientation is Orientation.HORIZONTAL:
            return self.x
        return -self.y

    @property
    def total(self) -> float:
        """Sum of both components (scroll wheels may report either)."""
        return self.x + self.y

    @property
    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0


@dataclass(frozen=True)
class Pos2:
    """A 2D point in pixels, y grows downwards."""

    x: float
    y: float

    def __sub__(self, other: Pos2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def distance(self, other: Pos2) -> float:
        d = self - other
        return (d.x * d.x + d.y * d.y) ** 0.5


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_min_max(cls, min_pos: Pos2, max_pos: Pos2) -> Rect:
        x0, x1 = sorted((min_pos.x, max_pos.x))
        y0, y1 = sorted((min_pos.y, max_pos.y))
        return cls(x0, y0, x1 - x0, y1 - y0)

    @classmethod
    def from_center_size(cls, center: Pos2, width: float, height: float) -> Rect:
        return cls(center.x - width / 2.0, center.y - height / 2.0, width, height)

    @property
    def min(self) -> Pos2:
        return Pos2(self.x, self.y)

    @property
    def max(self) -> Pos2:
        return Pos2(self.x + self.width, self.y + self.height)

    @property
    def center(self) -> Pos2:
        return Pos2(self.x + self.width / 2.0, self.y + self.height / 2.0)

    def contains(self, point: Pos2) -> bool:
        """Inclusive containment test."""
        return (
            self.x <= point.x <= self.x + self.width
            and self.y <= point.y <= self.y + self.height
        )

    def length(self, orientation: Orientation) -> float:
        """Extent along the primary axis."""
        return self.width if orientation is Orientation.HORIZONTAL else self.height


@dataclass(frozen=True)
class Geometry:
    """Resolved pixel layout for one frame.

    Attributes
    ----------
    rect : Rect
        Full widget rectangle
    orientation : Orientation
        Primary axis
    track_start : float
        Pixel coordinate of normalized position 0 on the primary axis
    track_length : float
        Signed pixel distance from position 0 to position 1 (negative when
        the primary axis runs against screen coordinates, i.e. vertical)
    low_center, high_center : Pos2
        Handle centres
    low_zone, high_zone : Rect
        Handle hit areas
    band_zone : Rect | None
        Draggable band between the handles, ``None`` when too short or disabled
    highlight_segments : tuple[Rect, ...]
        Track segments to highlight: the band, or the two outer parts when inverted
    """

    rect: Rect
    orientation: Orientation
    track_start: float
    track_length: float
    low_center: Pos2
    high_center: Pos2
    low_zone: Rect
    high_zone: Rect
    band_zone: Rect | None = None
    highlight_segments: tuple[Rect, ...] = field(default_factory=tuple)

    @property
    def track_extent(self) -> float:
        """Unsigned track length in pixels."""
        return abs(self.track_length)

    def project(self, position: float) -> Pos2:
        """Pixel point on the centre line for a normalized position."""
        return _project(
            self.orientation, self.track_start, self.track_length, self.rect.center, position
        )

    def pixel_to_normalized(self, point: Pos2) -> float:
        """Inverse projection of a pointer position, clamped to [0, 1]."""
        return self.coord_to_normalized(self.primary(point))

    def coord_to_normalized(self, coord: float) -> float:
        """Normalized position of a primary-axis pixel coordinate, clamped to [0, 1]."""
        if self.track_length == 0.0:
            return 0.0
        return clamp01((coord - self.track_start) / self.track_length)

    def pixels_to_position_delta(self, pixels: float) -> float:
        """Normalized distance covered by ``pixels`` along the track."""
        if self.track_length == 0.0:
            return 0.0
        return pixels / abs(self.track_length)

    def primary(self, point: Pos2) -> float:
        """Coordinate of a point on the primary axis."""
        return point.x if self.orientation is Orientation.HORIZONTAL else point.y


def _project(
    orientation: Orientation,
    track_start: float,
    track_length: float,
    center: Pos2,
    position: float,
) -> Pos2:
    coord = track_start + clamp01(position) * track_length
    if orientation is Orientation.HORIZONTAL:
        return Pos2(coord, center.y)
    return Pos2(center.x, coord)


def _span_rect(
    orientation: Orientation,
    a: float,
    b: float,
    center: Pos2,
    thickness: float,
) -> Rect:
    lo, hi = sorted((a, b))
    if orientation is Orientation.HORIZONTAL:
        return Rect(lo, center.y - thickness / 2.0, hi - lo, thickness)
    return Rect(center.x - thickness / 2.0, lo, thickness, hi - lo)


def resolve(
    rect: Rect,
    orientation: Orientation,
    low_pos: float,
    high_pos: float,
    *,
    handle_radius: float,
    band_thickness: float,
    inverted: bool = False,
) -> Geometry:
    """
    Lay out the slider inside ``rect``.

    The track is inset by ``handle_radius + TRACK_PADDING`` at both ends so a
    handle at either extreme stays inside the rectangle. Horizontal sliders
    grow to the right, vertical sliders grow upwards.

    Parameters
    ----------
    rect : Rect
        Widget rectangle in pixels
    orientation : Orientation
        Primary axis
    low_pos, high_pos : float
        Normalized handle positions
    handle_radius : float
        Half the side of each square handle hit area
    band_thickness : float
        Size of the band on the secondary axis
    inverted : bool
        Highlight the outer segments instead of the band; disables the band zone

    Returns
    -------
    Geometry
        Pixel layout for this frame
    """
    inset = handle_radius + TRACK_PADDING
    length = max(0.0, rect.length(orientation) - 2.0 * inset)

    if orientation is Orientation.HORIZONTAL:
        track_start = rect.x + inset
        track_length = length
    else:
        track_start = rect.y + rect.height - inset
        track_length = -length

    center = rect.center
    low_center = _project(orientation, track_start, track_length, center, low_pos)
    high_center = _project(orientation, track_start, track_length, center, high_pos)
    side = 2.0 * handle_radius
    low_zone = Rect.from_center_size(low_center, side, side)
    high_zone = Rect.from_center_size(high_center, side, side)

    low_coord = low_center.x if orientation is Orientation.HORIZONTAL else low_center.y
    high_coord = high_center.x if orientation is Orientation.HORIZONTAL else high_center.y

    band_zone = None
    if not inverted and abs(high_coord - low_coord) > 2.0 * handle_radius:
        step = handle_radius if high_coord > low_coord else -handle_radius
        band_zone = _span_rect(
            orientation, low_coord + step, high_coord - step, center, band_thickness
        )

    if inverted:
        start_coord = track_start
        end_coord = track_start + track_length
        highlight_segments = (
            _span_rect(orientation, start_coord, low_coord, center, band_thickness),
            _span_rect(orientation, high_coord, end_coord, center, band_thickness),
        )
    else:
        highlight_segments = (
            _span_rect(orientation, low_coord, high_coord, center, band_thickness),
        )

    return Geometry(
        rect=rect,
        orientation=orientation,
        track_start=track_start,
        track_length=track_length,
        low_center=low_center,
        high_center=high_center,
        low_zone=low_zone,
        high_zone=high_zone,
        band_zone=band_zone,
        highlight_segments=highlight_segments,
    )


__all__ = [
    "TRACK_PADDING",
    "Geometry",
    "Orientation",
    "Pos2",
    "Rect",
    "Vec2",
    "resolve",
]
