"""Scroll and zoom gestures over the selected range."""

from __future__ import annotations

import logging
import math

from doubleslider.config.settings import SliderConfig
from doubleslider.domain.mapping import from_normalized, to_normalized
from doubleslider.interaction.drag import move_band
from doubleslider.shared.math import widen_to


logger = logging.getLogger(__name__)

# Bound on the zoom exponent, keeps math.exp finite for absurd gestures
_MAX_LOG_SCALE = 50.0


def apply_scroll(
    low: float,
    high: float,
    delta: float,
    config: SliderConfig,
    track_length: float,
) -> tuple[float, float]:
    """
    Shift the whole range by a scroll gesture.

    ``delta * scroll_factor`` is read as pixels of travel along the track and
    applied like dragging the band: the width is kept and the pair is pushed
    back inside the axis when it would leave it.

    Parameters
    ----------
    low, high : float
        Current values
    delta : float
        Scroll amount in pixels
    config : SliderConfig
        Slider settings
    track_length : float
        Track length in pixels (sign ignored)

    Returns
    -------
    tuple[float, float]
        Shifted values
    """
    axis = config.axis
    if axis.is_degenerate:
        return axis.min_value, axis.min_value

    pixels = delta * config.scroll_factor
    extent = abs(track_length)
    if pixels == 0.0 or extent == 0.0 or not math.isfinite(pixels):
        return low, high

    return move_band(pixels / extent, low, high, config)


def apply_zoom(
    low: float,
    high: float,
    zoom_delta: float,
    config: SliderConfig,
    anchor_pos: float | None = None,
) -> tuple[float, float]:
    """
    Widen or narrow the range around an anchor.

    The range scales by ``zoom_factor ** (zoom_delta - 1)``, so a gesture
    above 1.0 widens it and one below 1.0 narrows it. Scaling happens in
    normalized positions (value space on a linear axis). Each end is then
    clamped to the axis and the separation distance restored by growing the
    range outward.

    Parameters
    ----------
    low, high : float
        Current values
    zoom_delta : float
        Multiplicative zoom gesture, 1.0 for none
    config : SliderConfig
        Slider settings
    anchor_pos : float | None
        Normalized position to zoom around, the range midpoint if None

    Returns
    -------
    tuple[float, float]
        Zoomed values
    """
    axis = config.axis
    if axis.is_degenerate:
        return axis.min_value, axis.min_value
    if not math.isfinite(zoom_delta) or zoom_delta <= 0.0 or zoom_delta == 1.0:
        return low, high

    log_scale = (zoom_delta - 1.0) * math.log(config.zoom_factor)
    scale = math.exp(max(-_MAX_LOG_SCALE, min(log_scale, _MAX_LOG_SCALE)))

    low_pos = to_normalized(low, axis, config.logarithmic)
    high_pos = to_normalized(high, axis, config.logarithmic)
    if anchor_pos is None or not math.isfinite(anchor_pos):
        anchor_pos = (low_pos + high_pos) / 2.0

    new_low_pos = anchor_pos - (anchor_pos - low_pos) * scale
    new_high_pos = anchor_pos + (high_pos - anchor_pos) * scale
    new_low = from_normalized(new_low_pos, axis, config.logarithmic)
    new_high = from_normalized(new_high_pos, axis, config.logarithmic)
    if new_low > new_high:
        new_low, new_high = new_high, new_low

    new_low, new_high = widen_to(
        new_low, new_high, config.separation_distance, axis.min_value, axis.max_value
    )
    logger.debug(f"Zoom x{scale:.3f}: ({low}, {high}) -> ({new_low}, {new_high})")
    return new_low, new_high


__all__ = ["apply_scroll", "apply_zoom"]
