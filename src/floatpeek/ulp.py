"""Unit in the last place and ULP distances.

Non-finite inputs are echoed back instead of raising: ulp(inf) is inf,
ulps_from_zero(nan) is that same nan. Callers check with is_nan / is_finite.
"""

from __future__ import annotations

from .bits import (
    EXP_MAX,
    HIDDEN_BIT,
    MANT_BITS,
    exp_f64,
    float_to_bits,
    frac_f64,
    is_nan_f64,
    sign_f64,
)
from .classify import is_nan
from .constants import DBL_ULPDENORMAL
from .reconstruct import compile


def ulp(x: float) -> float:
    """Return the spacing from x to the next representable value away from zero.

    No float y satisfies x < y < x + ulp(x) for finite x:

        ulp(1.0) == 2.0**-52
        1.0 + ulp(1.0) / 2 == 1.0
    """
    exp: int = exp_f64(float_to_bits(x))
    if exp == EXP_MAX:
        return x
    if exp == 0:
        # zero and denormals share the fixed denormal spacing
        return DBL_ULPDENORMAL
    f: int = exp - MANT_BITS
    if f >= 1:
        return compile(+1, f, 0)
    # The lowest normal binades are spaced like the denormals below them.
    return compile(+1, 0, 1 << (exp - 1))


unit_in_the_last_place = ulp


def ulps_from_zero(x: float) -> int | float:
    """Signed count of floats between 0 and x. NaN returns x.

    Non-negative bit patterns sort in the same order as the values they
    encode, so |x| read as an integer (exponent * 2**52 + mantissa) is its
    index from zero.
    """
    ui: int = float_to_bits(x)
    if is_nan_f64(ui):
        return x
    n: int = exp_f64(ui) * HIDDEN_BIT + frac_f64(ui)
    if sign_f64(ui) == 1:
        return -n
    return n


def ulps_from(x: float, reference: float) -> int | float:
    """Signed number of floats on the interval [reference, x].

    Negative when x < reference. A NaN argument is returned unchanged, x
    first. Equal values, including +0.0 and -0.0, are 0 apart.
    """
    if is_nan(x):
        return x
    if is_nan(reference):
        return reference
    if x == reference:
        return 0
    return ulps_from_zero(x) - ulps_from_zero(reference)
