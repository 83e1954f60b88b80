"""Domain layer: value mapping, numeric types and pixel geometry."""

from doubleslider.domain.geometry import Geometry, Orientation, Pos2, Rect, Vec2, resolve
from doubleslider.domain.mapping import AxisRange, from_normalized, to_normalized
from doubleslider.domain.numeric import NumericType, NumpyNumeric, numeric_type_for


__all__ = [
    "AxisRange",
    "Geometry",
    "NumericType",
    "NumpyNumeric",
    "Orientation",
    "Pos2",
    "Rect",
    "Vec2",
    "from_normalized",
    "numeric_type_for",
    "resolve",
    "to_normalized",
]
