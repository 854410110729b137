"""Exact rational view of binary64 values.

A finite double is sign * f * 2**e with f a dyadic fraction, so it converts
to a Fraction whose denominator is a power of two without any rounding.
"""

from __future__ import annotations

from fractions import Fraction

from .bits import BIAS, EXP_MAX, HIDDEN_BIT, exp_f64, float_to_bits, frac_f64
from .bits import sign as sign_of
from .errors import NonFiniteError

MIN_EXPONENT: int = 1 - BIAS


def biased_exponent(x: float) -> int | float:
    """Logical exponent of a finite x: 1.0 -> 0, 0.5 -> -1.

    Zero and denormals report -1022. Non-finite x is returned unchanged.
    """
    exp: int = exp_f64(float_to_bits(x))
    if exp == EXP_MAX:
        return x
    if exp == 0:
        return MIN_EXPONENT
    return exp - BIAS


def mantissa_fraction(x: float) -> Fraction | float:
    """Significand of a finite x as an exact fraction.

    Normals restore the hidden leading bit, giving a value in [1, 2);
    denormals lie in (0, 1) and zero is 0. Non-finite x is returned unchanged.
    """
    ui: int = float_to_bits(x)
    exp: int = exp_f64(ui)
    sig: int = frac_f64(ui)
    if exp == EXP_MAX:
        return x
    if exp == 0:
        return Fraction(sig, HIDDEN_BIT)
    return Fraction(sig + HIDDEN_BIT, HIDDEN_BIT)


def interpreted_sign_exponent_mantissa(
    x: float,
) -> tuple[int, int | float, Fraction | float]:
    """Return (sign, biased_exponent, mantissa_fraction), e.g. 1.0 -> (1, 0, 1)."""
    return (sign_of(x), biased_exponent(x), mantissa_fraction(x))


def to_rational(x: float) -> Fraction:
    """Return the Fraction exactly equal to x.

    Raises NonFiniteError for infinities and NaNs.
    """
    if exp_f64(float_to_bits(x)) == EXP_MAX:
        raise NonFiniteError(x, "to_rational")
    e: int = biased_exponent(x)
    f: Fraction = sign_of(x) * mantissa_fraction(x)
    if e < 0:
        return f * Fraction(1, 2**-e)
    return f * 2**e
