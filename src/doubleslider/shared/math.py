"""Small numeric helpers shared by the mapping and interaction layers."""

import math


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` to ``[low, high]``.

    NaN is mapped to ``low`` so it can never leak into slider state.

    Example:
        >>> clamp(12.0, 0.0, 10.0)
        10.0
        >>> clamp(float("nan"), 0.0, 10.0)
        0.0
    """
    if math.isnan(value):
        return low
    return max(low, min(value, high))


def clamp01(value: float) -> float:
    """Clamp to the unit interval."""
    return clamp(value, 0.0, 1.0)


def translate_within(
    low: float,
    high: float,
    delta: float,
    lo_bound: float,
    hi_bound: float,
) -> tuple[float, float]:
    """
    Rigidly translate ``(low, high)`` by ``delta`` and push it back inside bounds.

    The width ``high - low`` is kept; when the moved pair would leave
    ``[lo_bound, hi_bound]`` it is shifted back just far enough to touch the
    violated bound. A pair wider than the bounds is clamped instead.

    Args:
        low: Lower endpoint
        high: Upper endpoint
        delta: Translation in value units
        lo_bound: Lowest allowed value
        hi_bound: Highest allowed value

    Returns:
        The translated ``(low, high)`` pair

    Example:
        >>> translate_within(10.0, 20.0, 45.0, 0.0, 50.0)
        (40.0, 50.0)
    """
    width = high - low
    if not math.isfinite(delta):
        delta = 0.0
    if width > hi_bound - lo_bound:
        return clamp(low, lo_bound, hi_bound), clamp(high, lo_bound, hi_bound)

    new_low = low + delta
    if new_low < lo_bound:
        return lo_bound, min(lo_bound + width, hi_bound)
    if new_low + width > hi_bound:
        return max(hi_bound - width, lo_bound), hi_bound
    return new_low, new_low + width


def widen_to(
    low: float,
    high: float,
    min_width: float,
    lo_bound: float,
    hi_bound: float,
) -> tuple[float, float]:
    """
    Grow ``(low, high)`` outward until it is at least ``min_width`` wide.

    The missing width is split evenly between both ends; an end blocked by a
    bound hands its share to the other end. Bounds narrower than
    ``min_width`` yield the full bounds.

    Example:
        >>> widen_to(48.0, 50.0, 10.0, 0.0, 50.0)
        (40.0, 50.0)
    """
    if high - low >= min_width:
        return low, high
    if min_width >= hi_bound - lo_bound:
        return lo_bound, hi_bound

    need = min_width - (high - low)
    new_low = low - need / 2.0
    new_high = high + need / 2.0
    if new_low < lo_bound:
        new_high += lo_bound - new_low
        new_low = lo_bound
    if new_high > hi_bound:
        new_low -= new_high - hi_bound
        new_high = hi_bound
    return max(new_low, lo_bound), new_high
