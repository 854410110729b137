"""Human-readable renderings of binary64 structure."""

from __future__ import annotations

from .bits import binary_fields, exp_f64, float_to_bits, frac_f64, sign_f64
from .classify import DENORMAL, NAN, NORMAL, ZERO, classify_bits


def human_readable(x: float) -> str:
    """Spell out x as sign * significand * power of two.

        human_readable(0.0)   == "+0.0"
        human_readable(1.5)   == "+1 * 0b1.1000...0000 * 2**(1023-1023)"
        human_readable(5e-324) == "+1 * 0b0.0000...0001 * 2**-1022"
        human_readable(-inf)  == "-Infinity"
        human_readable(nan)   == "NaN <0, 11111111111, 1000...0000>"

    Comparing [0.1 * 3, 0.3] this way shows they differ in the last three
    mantissa bits.
    """
    ui: int = float_to_bits(x)
    s, e, m = binary_fields(sign_f64(ui), exp_f64(ui), frac_f64(ui))
    sign_char: str = "-" if s == "1" else "+"
    category: str = classify_bits(ui)
    if category == ZERO:
        return sign_char + "0.0"
    if category == NORMAL:
        return "%s1 * 0b1.%s * 2**(%d-1023)" % (sign_char, m, exp_f64(ui))
    if category == DENORMAL:
        return "%s1 * 0b0.%s * 2**-1022" % (sign_char, m)
    if category == NAN:
        return "NaN <%s, %s, %s>" % (s, e, m)
    return sign_char + "Infinity"


def layout_diagram(x: float) -> str:
    """Draw the bit layout of x as a three-line box.

        +-+-----------+----------------------------------------------------+
        |0|01111111111|0000000000000000000000000000000000000000000000000000|
        +-+-----------+----------------------------------------------------+
    """
    ui: int = float_to_bits(x)
    s, e, m = binary_fields(sign_f64(ui), exp_f64(ui), frac_f64(ui))
    rule: str = "+-+" + "-" * len(e) + "+" + "-" * len(m) + "+"
    return rule + "\n|" + s + "|" + e + "|" + m + "|\n" + rule
