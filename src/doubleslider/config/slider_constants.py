"""Centralized default values for slider configuration.

This module provides named constants for the defaults used by
``SliderConfig``. Centralizing these values keeps presets, the replay tool
and tests consistent.
"""

from __future__ import annotations

from doubleslider.domain.geometry import TRACK_PADDING


class SliderDefaults:
    """Named constants for slider defaults."""

    # === Size (pixels) ===
    WIDTH = 100.0
    HANDLE_RADIUS = 7.0
    BAND_THICKNESS = 7.0
    # Cross-axis size fits a handle plus its highlight padding
    HEIGHT = 2.0 * HANDLE_RADIUS + 2.0 * TRACK_PADDING

    # === Axis ===
    AXIS_MIN = 0.0
    AXIS_MAX = 100.0

    # === Handle constraints (value units) ===
    SEPARATION_DISTANCE = 0.0
    CLAMP_TO_OTHER = True
    PUSH_BY_DRAGGING = False

    # === Gestures ===
    # Pixels of track travel per pixel of scroll
    SCROLL_FACTOR = 1.0
    # Width scale per unit of zoom gesture magnitude
    ZOOM_FACTOR = 10.0
