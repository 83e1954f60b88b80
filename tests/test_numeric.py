"""Tests for slider numeric types."""

import math

import numpy as np
import pytest

from doubleslider.domain.numeric import (
    FLOAT32,
    FLOAT64,
    INT32,
    INT64,
    NumericType,
    NumpyNumeric,
    numeric_type_for,
    resolve_numeric_type,
)
from doubleslider.shared.exceptions import NumericTypeError


class TestIntegerConversion:
    """Test float -> integer conversion."""

    def test_rounds_half_up(self):
        """Test rounding to the nearest integer, halves upward."""
        assert INT32.from_f64(4.6) == 5
        assert INT32.from_f64(4.4) == 4
        assert INT32.from_f64(2.5) == 3
        assert INT32.from_f64(-2.5) == -2

    def test_returns_dtype_scalar(self):
        """Test numpy types come back as numpy scalars."""
        assert isinstance(INT32.from_f64(1.0), np.int32)
        assert isinstance(INT64.from_f64(1.0), int)

    def test_saturates_at_limits(self):
        """Test out-of-range values saturate at the dtype limits."""
        assert INT32.from_f64(1e20) == np.iinfo(np.int32).max
        assert INT32.from_f64(-1e20) == np.iinfo(np.int32).min
        assert INT32.from_f64(math.inf) == np.iinfo(np.int32).max

        uint8 = NumpyNumeric(np.uint8)
        assert uint8.from_f64(-3.0) == 0
        assert uint8.from_f64(300.0) == 255

    def test_nan_maps_to_zero(self):
        """Test NaN converts to zero."""
        assert INT32.from_f64(math.nan) == 0


class TestFloatConversion:
    """Test float -> float conversion."""

    def test_float64_is_python_float(self):
        """Test the default float type returns plain floats."""
        result = FLOAT64.from_f64(0.25)

        assert result == 0.25
        assert isinstance(result, float)

    def test_float32_saturates(self):
        """Test float32 saturates at its finite maximum."""
        result = FLOAT32.from_f64(1e300)

        assert isinstance(result, np.float32)
        assert result == np.finfo(np.float32).max

    def test_to_f64_rejects_non_numbers(self):
        """Test conversion of a non-numeric value raises NumericTypeError."""
        with pytest.raises(NumericTypeError):
            FLOAT64.to_f64("abc")


class TestNumericTypeFor:
    """Test numeric type inference."""

    def test_python_scalars(self):
        """Test int and float map to the 64-bit types."""
        assert numeric_type_for(3) is INT64
        assert numeric_type_for(3.0) is FLOAT64

    def test_numpy_scalars(self):
        """Test numpy scalars map to their dtype."""
        assert numeric_type_for(np.int32(1)) == INT32
        assert numeric_type_for(np.float32(1.0)) == FLOAT32
        assert numeric_type_for(np.dtype(np.int16)).name == "int16"

    def test_bool_rejected(self):
        """Test booleans are rejected."""
        with pytest.raises(NumericTypeError):
            numeric_type_for(True)
        with pytest.raises(NumericTypeError):
            numeric_type_for(np.bool_(True))

    def test_unsupported_types_rejected(self):
        """Test non-numeric values and dtypes are rejected."""
        with pytest.raises(NumericTypeError):
            numeric_type_for("5")
        with pytest.raises(NumericTypeError):
            NumpyNumeric(np.complex64)
        with pytest.raises(NumericTypeError):
            NumpyNumeric("not_a_dtype")

    def test_protocol(self):
        """Test NumpyNumeric satisfies the NumericType protocol."""
        assert isinstance(INT32, NumericType)

    def test_resolve_by_name(self):
        """Test lookup by name."""
        assert resolve_numeric_type("float") is FLOAT64
        assert resolve_numeric_type("int") is INT64
        assert resolve_numeric_type("int32") == INT32
