"""Build binary64 values from explicit raw fields."""

from __future__ import annotations

from .bits import EXP_MAX, MANT_MAX, bits_to_float, pack_f64
from .errors import FieldRangeError


def check_field(name: str, value: int, limit: int) -> int:
    """Return value if it is an int in 0..limit, raise otherwise."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(name + " must be an int, not " + type(value).__name__)
    if value < 0 or value > limit:
        raise FieldRangeError(name, value, limit)
    return value


def compile_bits(sign_bit: int, exponent: int, mantissa: int) -> int:
    """Pack raw fields into a 64-bit pattern. sign_bit is 0 or 1."""
    check_field("sign bit", sign_bit, 1)
    check_field("exponent", exponent, EXP_MAX)
    check_field("mantissa", mantissa, MANT_MAX)
    return pack_f64(sign_bit, exponent, mantissa)


def compile(sign: int, exponent: int, mantissa: int) -> float:
    """Return the double whose fields are (sign, exponent, mantissa).

    sign is +1 or -1 (any negative number selects the sign bit). exponent
    and mantissa are the raw encoded fields, 0..2047 and 0..2**52-1; values
    outside those widths raise FieldRangeError rather than being truncated.

    For every x, compile(*sign_exponent_mantissa(x)) has the same bits as x,
    NaN payloads included:

        compile(-1, 1024, 0) == -2.0
        compile(+1, 1022, 0) == 0.5
        compile(+1, 1023, 2**50) == 1.25
        compile(+1, 2047, 0) == inf
    """
    sign_bit: int = 1 if sign < 0 else 0
    return bits_to_float(compile_bits(sign_bit, exponent, mantissa))
