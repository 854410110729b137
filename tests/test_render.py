"""Tests for human-readable renderings."""

import math

import pytest

from conftest import i2f
from floatpeek import DBL_NAN, compile, human_readable, layout_diagram

ZEROS_52 = "0" * 52
ONES_52 = "1" * 52


@pytest.mark.parametrize(
    "x,expected",
    [
        (0.0, "+0.0"),
        (-0.0, "-0.0"),
        (1.0, "+1 * 0b1." + ZEROS_52 + " * 2**(1023-1023)"),
        (1.5, "+1 * 0b1.1" + "0" * 51 + " * 2**(1023-1023)"),
        (-2.0, "-1 * 0b1." + ZEROS_52 + " * 2**(1024-1023)"),
        (2.2250738585072014e-308, "+1 * 0b1." + ZEROS_52 + " * 2**(1-1023)"),
        (1.7976931348623157e308, "+1 * 0b1." + ONES_52 + " * 2**(2046-1023)"),
        (compile(1, 0, 1), "+1 * 0b0." + "0" * 51 + "1 * 2**-1022"),
        (-5e-324, "-1 * 0b0." + "0" * 51 + "1 * 2**-1022"),
        (math.inf, "+Infinity"),
        (-math.inf, "-Infinity"),
    ],
)
def test_human_readable(x: float, expected: str):
    assert human_readable(x) == expected


def test_human_readable_nan():
    assert human_readable(i2f(0x7FF8000000000000)) == (
        "NaN <0, 11111111111, 1" + "0" * 51 + ">"
    )
    assert human_readable(DBL_NAN) == "NaN <1, 11111111111, " + ONES_52 + ">"


def test_human_readable_shows_rounding():
    a = human_readable(0.1 * 3)
    b = human_readable(0.3)
    assert a.endswith("0011001100110100 * 2**(1021-1023)")
    assert b.endswith("0011001100110011 * 2**(1021-1023)")


def test_layout_diagram():
    rule = "+-+" + "-" * 11 + "+" + "-" * 52 + "+"
    assert layout_diagram(2.0**-52).split("\n") == [
        rule,
        "|0|01111001011|" + ZEROS_52 + "|",
        rule,
    ]
