"""Numeric value types accepted by the slider.

The interaction engine computes in 64-bit floats. A ``NumericType`` converts
caller values into that representation and back, so the same slider works
for ``float32`` sliders, ``int32`` sliders, or plain Python numbers.

Example
-------
>>> kind = numeric_type_for(np.int32(5))
>>> kind.from_f64(4.6)
np.int32(5)
>>> FLOAT64.from_f64(0.25)
0.25
"""

from __future__ import annotations

import math
from typing import Any, Protocol, runtime_checkable

import numpy as np

from doubleslider.shared.exceptions import NumericTypeError


@runtime_checkable
class NumericType(Protocol):
    """Capability set needed from a slider value type."""

    name: str

    @property
    def is_integer(self) -> bool: ...

    def to_f64(self, value: Any) -> float: ...

    def from_f64(self, value: float) -> Any: ...


class NumpyNumeric:
    """
    NumericType backed by a numpy dtype.

    Integer dtypes round half up and saturate at the dtype limits.
    Float dtypes saturate at ``finfo.max``; NaN from the engine side is never
    produced, but a NaN handed to ``from_f64`` is mapped to zero.
    """

    def __init__(self, dtype: np.dtype | type | str, python_scalar: bool = False):
        """
        Initialize NumpyNumeric.

        Parameters
        ----------
        dtype : np.dtype | type | str
            Any integer or floating numpy dtype
        python_scalar : bool
            Return plain ``int``/``float`` from ``from_f64`` instead of numpy scalars
        """
        try:
            self.dtype = np.dtype(dtype)
        except TypeError as e:
            raise NumericTypeError(f"Not a numpy dtype: {e}", type_name=str(dtype)) from e

        if self.dtype.kind not in "iuf":
            raise NumericTypeError(
                "Slider values must be integer or floating point",
                type_name=self.dtype.name,
            )

        self.python_scalar = python_scalar
        if python_scalar:
            self.name = "int" if self.is_integer else "float"
        else:
            self.name = self.dtype.name

        if self.is_integer:
            info = np.iinfo(self.dtype)
            self._min, self._max = int(info.min), int(info.max)
        else:
            info = np.finfo(self.dtype)
            self._min, self._max = float(info.min), float(info.max)

    @property
    def is_integer(self) -> bool:
        return self.dtype.kind in "iu"

    def to_f64(self, value: Any) -> float:
        """Convert a caller value to float, NaN/inf pass through for the mapping to repair."""
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise NumericTypeError(
                f"Cannot convert {value!r} to a float", type_name=type(value).__name__
            ) from e

    def from_f64(self, value: float) -> Any:
        """Convert an engine float back to the caller's type."""
        if math.isnan(value):
            value = 0.0
        if self.is_integer:
            if math.isinf(value):
                result = self._max if value > 0 else self._min
            else:
                # Round half up: shifting by a whole number never changes the rounding
                result = max(self._min, min(math.floor(value + 0.5), self._max))
        else:
            result = max(self._min, min(value, self._max))

        if self.python_scalar:
            return result
        return self.dtype.type(result)

    def __repr__(self) -> str:
        return f"NumpyNumeric({self.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumpyNumeric):
            return NotImplemented
        return self.dtype == other.dtype and self.python_scalar == other.python_scalar

    def __hash__(self) -> int:
        return hash((self.dtype, self.python_scalar))


FLOAT32 = NumpyNumeric(np.float32)
FLOAT64 = NumpyNumeric(np.float64, python_scalar=True)
INT32 = NumpyNumeric(np.int32)
INT64 = NumpyNumeric(np.int64, python_scalar=True)


def numeric_type_for(value: Any) -> NumericType:
    """
    Infer the NumericType for a caller value.

    Parameters
    ----------
    value : Any
        Python ``int``/``float``, a numpy scalar, or a numpy dtype

    Returns
    -------
    NumericType
        Matching numeric type

    Raises
    ------
    NumericTypeError
        If the value is not numeric (``bool`` is rejected on purpose)
    """
    if isinstance(value, (bool, np.bool_)):
        raise NumericTypeError("Boolean values cannot drive a slider", type_name="bool")
    if isinstance(value, np.generic):
        return NumpyNumeric(value.dtype)
    if isinstance(value, np.dtype):
        return NumpyNumeric(value)
    if isinstance(value, int):
        return INT64
    if isinstance(value, float):
        return FLOAT64
    raise NumericTypeError("Unsupported slider value", type_name=type(value).__name__)


def resolve_numeric_type(name: str) -> NumericType:
    """Look up a numeric type by name (``"float"``, ``"int"`` or a numpy dtype name)."""
    if name == "float":
        return FLOAT64
    if name == "int":
        return INT64
    return NumpyNumeric(name)


__all__ = [
    "FLOAT32",
    "FLOAT64",
    "INT32",
    "INT64",
    "NumericType",
    "NumpyNumeric",
    "numeric_type_for",
    "resolve_numeric_type",
]
