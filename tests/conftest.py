"""Pytest configuration for the floatpeek test suite.

Bit patterns are generated TestFloat-style, weighted toward boundary cases:
- Special exponents: 0 (zero/denormal), 1, 52-53 (lowest ULP binades),
  0x3FE-0x400 (near 1.0), 0x7FE-0x7FF (largest finite, inf/NaN)
- Special mantissas: 0, 1, all-ones, single-bit, high-bit patterns
- Two signs mixed uniformly
"""

import random
import struct
import sys
from pathlib import Path

import pytest

# Add src directory to path so the package imports without installation
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

ROUNDS = 20_000
SEED = 0xF64

SPECIAL_EXPS = [
    0x000,  # zero / denormal
    0x001,  # smallest normal
    0x002,
    0x034,  # last binade spaced like the denormals
    0x035,
    0x3CB,  # epsilon
    0x3FE,  # 0.5 .. 1.0
    0x3FF,  # 1.0 .. 2.0
    0x400,  # 2.0 .. 4.0
    0x433,  # 2^52 (ULP = 1)
    0x7FE,  # largest finite
    0x7FF,  # inf / NaN
]

SPECIAL_SIGS = [
    0x0000000000000,  # zero
    0x0000000000001,  # smallest
    0x0000000000002,
    0x4000000000000,  # mid-range single bit
    0x8000000000000,  # quiet NaN bit
    0xFFFFFFFFFFFFE,
    0xFFFFFFFFFFFFF,  # max
    0x0010000000000,  # isolated middle bit
]


def f2i(f: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", f))[0]


def i2f(i: int) -> float:
    return struct.unpack("<d", struct.pack("<Q", i))[0]


def weighted_f64(rng: random.Random) -> int:
    """Generate a float64 bit pattern weighted toward boundary cases."""
    r: int = rng.randint(0, 99)
    if r < 30:
        exp = rng.choice(SPECIAL_EXPS)
        sig = rng.randint(0, 0xFFFFFFFFFFFFF)
    elif r < 50:
        exp = rng.randint(0, 0x7FF)
        sig = rng.choice(SPECIAL_SIGS)
    elif r < 60:
        exp = rng.choice(SPECIAL_EXPS)
        sig = rng.choice(SPECIAL_SIGS)
    else:
        exp = rng.randint(0, 0x7FF)
        sig = rng.randint(0, 0xFFFFFFFFFFFFF)
    sign = rng.randint(0, 1)
    return (sign << 63) | (exp << 52) | sig


@pytest.fixture(scope="session")
def patterns() -> list[int]:
    """Seeded boundary-weighted bit patterns, shared across tests."""
    rng = random.Random(SEED)
    return [weighted_f64(rng) for _ in range(ROUNDS)]
