"""floatpeek: inspect and rebuild IEEE 754 binary64 values."""

from __future__ import annotations

from .bits import (
    binary_string,
    bits_to_float,
    exponent,
    exponent_binary_string,
    exponent_bits,
    float_to_bits,
    mantissa,
    mantissa_binary_string,
    mantissa_bits,
    sem,
    sign,
    sign_bit,
    sign_exponent_mantissa,
)
from .classify import (
    CATEGORIES,
    DENORMAL,
    INFINITY,
    NAN,
    NORMAL,
    ZERO,
    classify,
    is_denormal,
    is_finite,
    is_infinite,
    is_nan,
    is_normal,
    is_zero,
)
from .constants import DBL_EPSILON, DBL_INFINITY, DBL_MINIMUM, DBL_NAN, DBL_ULPDENORMAL
from .errors import FieldRangeError, Ieee754Error, NonFiniteError
from .floatbits import FloatBits
from .rational import (
    biased_exponent,
    interpreted_sign_exponent_mantissa,
    mantissa_fraction,
    to_rational,
)
from .reconstruct import compile, compile_bits
from .render import human_readable, layout_diagram
from .ulp import ulp, ulps_from, ulps_from_zero, unit_in_the_last_place

__all__ = [
    "CATEGORIES",
    "DBL_EPSILON",
    "DBL_INFINITY",
    "DBL_MINIMUM",
    "DBL_NAN",
    "DBL_ULPDENORMAL",
    "DENORMAL",
    "FieldRangeError",
    "FloatBits",
    "INFINITY",
    "Ieee754Error",
    "NAN",
    "NORMAL",
    "NonFiniteError",
    "ZERO",
    "biased_exponent",
    "binary_string",
    "bits_to_float",
    "classify",
    "compile",
    "compile_bits",
    "exponent",
    "exponent_binary_string",
    "exponent_bits",
    "float_to_bits",
    "human_readable",
    "interpreted_sign_exponent_mantissa",
    "is_denormal",
    "is_finite",
    "is_infinite",
    "is_nan",
    "is_normal",
    "is_zero",
    "layout_diagram",
    "mantissa",
    "mantissa_binary_string",
    "mantissa_bits",
    "mantissa_fraction",
    "sem",
    "sign",
    "sign_bit",
    "sign_exponent_mantissa",
    "to_rational",
    "ulp",
    "ulps_from",
    "ulps_from_zero",
    "unit_in_the_last_place",
]
