"""
Configuration dataclass for the double slider.

A ``SliderConfig`` is an immutable snapshot validated once at construction.
The host builds (or reuses) one per frame; ``with_options`` gives the
builder-style ergonomics of chained setters without mutation.
"""

from __future__ import annotations

import dataclasses
import logging
import math
from dataclasses import dataclass

from doubleslider.config.slider_constants import SliderDefaults
from doubleslider.domain.geometry import Orientation
from doubleslider.domain.mapping import AxisRange
from doubleslider.shared.exceptions import ConfigError


logger = logging.getLogger(__name__)


__all__ = ["SliderConfig"]


@dataclass(frozen=True)
class SliderConfig:
    """Per-frame slider settings.

    Attributes
    ----------
    axis_min, axis_max : float
        Inclusive value bounds
    separation_distance : float
        Minimum gap between the handles in value units
    orientation : Orientation
        Horizontal or vertical track
    logarithmic : bool
        Logarithmic value mapping (needs ``axis_min > 0``)
    clamp_to_other : bool
        Keep ``separation_distance`` between the handles while dragging one;
        when off the handles may touch but never cross
    push_by_dragging : bool
        A dragged handle pushes the other one instead of stopping at it
    inverted_highlighting : bool
        Highlight outside the selected range; the band is then not draggable
    scroll_factor : float
        Track pixels moved per scroll pixel
    zoom_factor : float
        Range width scale per unit of zoom gesture magnitude
    width, height : float
        Requested widget size in pixels
    handle_radius : float
        Handle hit area half-size in pixels
    band_thickness : float
        Cross-axis size of the band in pixels
    """

    axis_min: float = SliderDefaults.AXIS_MIN
    axis_max: float = SliderDefaults.AXIS_MAX
    separation_distance: float = SliderDefaults.SEPARATION_DISTANCE
    orientation: Orientation = Orientation.HORIZONTAL
    logarithmic: bool = False
    clamp_to_other: bool = SliderDefaults.CLAMP_TO_OTHER
    push_by_dragging: bool = SliderDefaults.PUSH_BY_DRAGGING
    inverted_highlighting: bool = False
    scroll_factor: float = SliderDefaults.SCROLL_FACTOR
    zoom_factor: float = SliderDefaults.ZOOM_FACTOR
    width: float = SliderDefaults.WIDTH
    height: float = SliderDefaults.HEIGHT
    handle_radius: float = SliderDefaults.HANDLE_RADIUS
    band_thickness: float = SliderDefaults.BAND_THICKNESS

    def __post_init__(self):
        """Validate settings after initialization."""
        if isinstance(self.orientation, str):
            try:
                object.__setattr__(self, "orientation", Orientation(self.orientation.lower()))
            except ValueError as e:
                raise ConfigError(
                    f"Unknown orientation {self.orientation!r}", field_name="orientation"
                ) from e

        try:
            bounds = (float(self.axis_min), float(self.axis_max))
        except (TypeError, ValueError) as e:
            raise ConfigError(
                f"Axis bounds must be numbers, got [{self.axis_min!r}, {self.axis_max!r}]",
                field_name="axis",
            ) from e
        # AxisRange validates finiteness and ordering
        axis = AxisRange(*bounds)

        if not math.isfinite(self.separation_distance) or self.separation_distance < 0:
            raise ConfigError(
                f"separation_distance must be >= 0, got {self.separation_distance}",
                field_name="separation_distance",
            )
        if self.logarithmic and not axis.supports_log():
            raise ConfigError(
                f"Logarithmic scale requires axis_min > 0, got {self.axis_min}",
                field_name="logarithmic",
            )
        if not math.isfinite(self.scroll_factor):
            raise ConfigError(
                f"scroll_factor must be finite, got {self.scroll_factor}",
                field_name="scroll_factor",
            )
        if not math.isfinite(self.zoom_factor) or self.zoom_factor <= 0:
            raise ConfigError(
                f"zoom_factor must be positive, got {self.zoom_factor}",
                field_name="zoom_factor",
            )
        for name in ("handle_radius", "band_thickness"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ConfigError(f"{name} must be positive, got {value}", field_name=name)
        for name in ("width", "height"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ConfigError(f"{name} must be >= 0, got {value}", field_name=name)

        if self.separation_distance > axis.span:
            logger.debug(
                f"separation_distance {self.separation_distance} exceeds axis span {axis.span}; "
                "handles will stop at the axis bounds"
            )

    @property
    def axis(self) -> AxisRange:
        """Axis bounds as an AxisRange."""
        return AxisRange(float(self.axis_min), float(self.axis_max))

    @property
    def effective_separation(self) -> float:
        """Gap enforced between dragged handles."""
        return self.separation_distance if self.clamp_to_other else 0.0

    @property
    def desired_size(self) -> tuple[float, float]:
        """Size the host should allocate, ``(width, height)`` in pixels."""
        return (self.width, self.height)

    def with_options(self, **changes) -> SliderConfig:
        """
        Return a copy with some fields replaced.

        Parameters
        ----------
        **changes
            Field values to replace

        Returns
        -------
        SliderConfig
            New validated configuration

        Examples
        --------
        >>> cfg = SliderConfig().with_options(width=240.0, separation_distance=5.0)
        """
        unknown = set(changes) - {f.name for f in dataclasses.fields(self)}
        if unknown:
            raise ConfigError(f"Unknown slider options: {sorted(unknown)}")
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary (orientation stored by value)."""
        data = dataclasses.asdict(self)
        data["orientation"] = self.orientation.value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> SliderConfig:
        """Create SliderConfig from dictionary, ignoring unknown keys."""
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning(f"Ignoring unknown slider config keys: {sorted(unknown)}")
        kwargs = {k: v for k, v in data.items() if k in known}
        try:
            return cls(**kwargs)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid slider config: {e}") from e
