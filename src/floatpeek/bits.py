"""Bit-level view of IEEE 754 binary64 values.

Layout, most significant bit first:

    0 1           12                                                   64
    +-+-----------+----------------------------------------------------+
    |s| e (11bits)|                      m (52bits)                    |
    +-+-----------+----------------------------------------------------+

s is 1 for negative values. The integer helpers (`*_f64`) take the 64-bit
pattern as an unsigned int; the float-level accessors reinterpret first.
"""

from __future__ import annotations

import struct

# ---------------------------------------------------------------------------
# Layer 1: Constants and bit manipulation
# ---------------------------------------------------------------------------

MASK64: int = 0xFFFFFFFFFFFFFFFF
SIGN_MASK: int = 0x8000000000000000
EXP_MASK: int = 0x7FF0000000000000
MANT_MASK: int = 0x000FFFFFFFFFFFFF

MANT_BITS: int = 52
EXP_MAX: int = 0x7FF
MANT_MAX: int = MANT_MASK
BIAS: int = 1023
HIDDEN_BIT: int = 1 << MANT_BITS

BINARY_FORM: str = "{:01b}{:011b}{:052b}"


def float_to_bits(x: float) -> int:
    """Reinterpret a double as its unsigned 64-bit pattern."""
    return struct.unpack(">Q", struct.pack(">d", x))[0]


def bits_to_float(ui: int) -> float:
    """Reinterpret an unsigned 64-bit pattern as a double."""
    return struct.unpack(">d", struct.pack(">Q", ui))[0]


def sign_f64(ui: int) -> int:
    return (ui >> 63) & 1


def exp_f64(ui: int) -> int:
    return (ui >> 52) & EXP_MAX


def frac_f64(ui: int) -> int:
    return ui & MANT_MASK


def pack_f64(sign: int, exp: int, sig: int) -> int:
    """Pack already range-checked fields into a 64-bit pattern."""
    return (sign << 63) | (exp << 52) | sig


def abs_f64(ui: int) -> int:
    return ui & (MASK64 ^ SIGN_MASK)


def is_nan_f64(ui: int) -> bool:
    return abs_f64(ui) > EXP_MASK


# ---------------------------------------------------------------------------
# Layer 2: Field accessors on floats
# ---------------------------------------------------------------------------


def sign_bit(x: float) -> int:
    return sign_f64(float_to_bits(x))


def exponent_bits(x: float) -> int:
    return exp_f64(float_to_bits(x))


def mantissa_bits(x: float) -> int:
    return frac_f64(float_to_bits(x))


def sign(x: float) -> int:
    """Return -1 if the sign bit is set, +1 otherwise.

    Read from the bit pattern, so -0.0 and negative NaNs report -1.
    """
    if sign_bit(x) == 1:
        return -1
    return 1


# The raw-field names used throughout the rest of the package.
exponent = exponent_bits
mantissa = mantissa_bits


def sign_exponent_mantissa(x: float) -> tuple[int, int, int]:
    """Return (sign, raw exponent, raw mantissa), e.g. 1.0 -> (1, 1023, 0)."""
    ui: int = float_to_bits(x)
    s: int = -1 if sign_f64(ui) == 1 else 1
    return (s, exp_f64(ui), frac_f64(ui))


sem = sign_exponent_mantissa


# ---------------------------------------------------------------------------
# Layer 3: Binary strings
# ---------------------------------------------------------------------------


def binary_string(x: float) -> tuple[str, str, str]:
    """Return the sign, exponent and mantissa as "0"/"1" strings.

    Widths are 1, 11 and 52:

        >>> binary_string(1.0)
        ('0', '01111111111', '0000000000000000000000000000000000000000000000000000')
    """
    ui: int = float_to_bits(x)
    return binary_fields(sign_f64(ui), exp_f64(ui), frac_f64(ui))


def binary_fields(sign_bit: int, exp: int, sig: int) -> tuple[str, str, str]:
    b: str = BINARY_FORM.format(sign_bit, exp, sig)
    return (b[0:1], b[1:12], b[12:64])


def exponent_binary_string(x: float) -> str:
    return "{:011b}".format(exponent_bits(x))


def mantissa_binary_string(x: float) -> str:
    return "{:052b}".format(mantissa_bits(x))
