"""Value categories of binary64 numbers.

| exponent | mantissa | category |
|----------|----------|----------|
| 0        | 0        | zero     |
| 0        | != 0     | denormal |
| 1..2046  | any      | normal   |
| 2047     | 0        | infinity |
| 2047     | != 0     | nan      |

Classification reads the raw fields only. Comparing values would misreport
NaN, which is unequal to everything including itself.
"""

from __future__ import annotations

from .bits import EXP_MAX, exp_f64, float_to_bits, frac_f64

ZERO: str = "zero"
NORMAL: str = "normal"
DENORMAL: str = "denormal"
INFINITY: str = "infinity"
NAN: str = "nan"

CATEGORIES: list[str] = [ZERO, NORMAL, DENORMAL, INFINITY, NAN]


def classify_fields(exponent: int, mantissa: int) -> str:
    """Category of a raw (exponent, mantissa) pair."""
    if exponent == 0:
        if mantissa == 0:
            return ZERO
        return DENORMAL
    if exponent == EXP_MAX:
        if mantissa == 0:
            return INFINITY
        return NAN
    return NORMAL


def classify_bits(ui: int) -> str:
    return classify_fields(exp_f64(ui), frac_f64(ui))


def classify(x: float) -> str:
    return classify_bits(float_to_bits(x))


def is_zero(x: float) -> bool:
    return classify(x) == ZERO


def is_normal(x: float) -> bool:
    """Finite with magnitude at least the minimum normal number."""
    return classify(x) == NORMAL


def is_denormal(x: float) -> bool:
    """Finite, nonzero, and smaller in magnitude than the minimum normal."""
    return classify(x) == DENORMAL


def is_infinite(x: float) -> bool:
    return classify(x) == INFINITY


def is_nan(x: float) -> bool:
    return classify(x) == NAN


def is_finite(x: float) -> bool:
    return exp_f64(float_to_bits(x)) != EXP_MAX
