"""Axis abstraction and value <-> normalized position mapping.

The mapping layer converts slider values to a position in ``[0, 1]`` along
the control's axis and back, in linear or logarithmic mode. Everything above
this module (geometry, dragging, scrolling) works in normalized positions.

Example
-------
>>> axis = AxisRange(1.0, 1000.0)
>>> to_normalized(100.0, axis, log_scale=True)  # 0.666...
>>> from_normalized(0.5, AxisRange(0.0, 50.0))
25.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from doubleslider.shared.exceptions import ConfigError
from doubleslider.shared.math import clamp, clamp01


@dataclass(frozen=True)
class AxisRange:
    """Inclusive bounds ``[min_value, max_value]`` a slider value may occupy.

    Attributes
    ----------
    min_value : float
        Lowest reachable value
    max_value : float
        Highest reachable value, ``>= min_value``

    Examples
    --------
    >>> axis = AxisRange(0.0, 100.0)
    >>> axis.span
    100.0
    >>> axis.clamp(120.0)
    100.0
    """

    min_value: float
    max_value: float

    def __post_init__(self):
        """Validate bounds after initialization."""
        if not (math.isfinite(self.min_value) and math.isfinite(self.max_value)):
            raise ConfigError(
                f"Axis bounds must be finite, got [{self.min_value}, {self.max_value}]",
                field_name="axis",
            )
        if self.min_value > self.max_value:
            raise ConfigError(
                f"Axis minimum {self.min_value} exceeds maximum {self.max_value}",
                field_name="axis",
            )

    @property
    def span(self) -> float:
        """Total extent in value units."""
        return self.max_value - self.min_value

    @property
    def is_degenerate(self) -> bool:
        """Whether the axis collapses to a single value."""
        return self.max_value == self.min_value

    def clamp(self, value: float) -> float:
        """Clamp a value to the axis.

        NaN falls back to ``min_value``, infinities to the matching bound.
        """
        return clamp(value, self.min_value, self.max_value)

    def supports_log(self) -> bool:
        """Whether a logarithmic mapping is defined on this axis."""
        return self.min_value > 0.0


def _require_log_domain(axis: AxisRange) -> None:
    if not axis.supports_log():
        raise ValueError(
            f"Logarithmic mapping requires a positive axis minimum, got {axis.min_value}"
        )


def to_normalized(value: float, axis: AxisRange, log_scale: bool = False) -> float:
    """Convert a value to its normalized position on the axis.

    Parameters
    ----------
    value : float
        Value in axis units; clamped to the axis first
    axis : AxisRange
        Axis bounds
    log_scale : bool
        Use logarithmic interpolation (requires ``axis.min_value > 0``)

    Returns
    -------
    float
        Position in [0, 1]; ``0.0`` on a degenerate axis

    Raises
    ------
    ValueError
        If ``log_scale`` is requested on an axis starting at or below zero
    """
    if log_scale:
        _require_log_domain(axis)
    if axis.is_degenerate:
        return 0.0

    value = axis.clamp(value)
    if log_scale:
        log_min = math.log(axis.min_value)
        position = (math.log(value) - log_min) / (math.log(axis.max_value) - log_min)
    else:
        position = (value - axis.min_value) / axis.span

    # Spans near the float limits can overflow to inf/NaN
    if not math.isfinite(position):
        return 0.0 if value <= axis.min_value else 1.0
    return clamp01(position)


def from_normalized(position: float, axis: AxisRange, log_scale: bool = False) -> float:
    """Convert a normalized position back to an axis value.

    Parameters
    ----------
    position : float
        Position on the axis; clamped to [0, 1] first (NaN maps to 0)
    axis : AxisRange
        Axis bounds
    log_scale : bool
        Use logarithmic interpolation (requires ``axis.min_value > 0``)

    Returns
    -------
    float
        Value within ``[axis.min_value, axis.max_value]``
    """
    if log_scale:
        _require_log_domain(axis)
    if axis.is_degenerate:
        return axis.min_value

    position = clamp01(position)
    if log_scale:
        log_min = math.log(axis.min_value)
        log_max = math.log(axis.max_value)
        value = math.exp(log_min + position * (log_max - log_min))
    else:
        value = axis.min_value + position * axis.span

    if position == 1.0:
        return axis.max_value
    return axis.clamp(value)


def value_delta(
    anchor: float,
    position_delta: float,
    axis: AxisRange,
    log_scale: bool = False,
) -> float:
    """Value-space offset for moving ``anchor`` by ``position_delta`` along the axis.

    On a linear axis this is ``position_delta * span`` regardless of the
    anchor. On a logarithmic axis the offset depends on where the movement
    starts, so the anchor's own position is moved and the difference taken.
    The moved anchor stops at the axis ends; the caller clips the partner value.
    """
    if axis.is_degenerate or not math.isfinite(position_delta):
        return 0.0
    if not log_scale:
        return position_delta * axis.span

    start = to_normalized(anchor, axis, log_scale=True)
    return from_normalized(start + position_delta, axis, log_scale=True) - axis.clamp(anchor)


__all__ = ["AxisRange", "from_normalized", "to_normalized", "value_delta"]
