"""FloatBits value type: the three raw fields of one binary64 value."""

from __future__ import annotations

from dataclasses import dataclass

from .bits import (
    EXP_MAX,
    MANT_MAX,
    binary_fields,
    bits_to_float,
    exp_f64,
    float_to_bits,
    frac_f64,
    pack_f64,
    sign_f64,
)
from .classify import classify_fields
from .reconstruct import check_field


@dataclass(frozen=True)
class FloatBits:
    """Lossless decomposition of a double.

    Invariants:
    - sign_bit in {0, 1}
    - 0 <= exponent <= 2047
    - 0 <= mantissa <= 2**52 - 1
    - FloatBits.from_float(x).to_float() has the same bits as x
    """

    sign_bit: int
    exponent: int
    mantissa: int

    def __post_init__(self) -> None:
        check_field("sign bit", self.sign_bit, 1)
        check_field("exponent", self.exponent, EXP_MAX)
        check_field("mantissa", self.mantissa, MANT_MAX)

    @classmethod
    def from_bits(cls, ui: int) -> FloatBits:
        check_field("bit pattern", ui, (1 << 64) - 1)
        return cls(sign_f64(ui), exp_f64(ui), frac_f64(ui))

    @classmethod
    def from_float(cls, x: float) -> FloatBits:
        return cls.from_bits(float_to_bits(x))

    def to_bits(self) -> int:
        return pack_f64(self.sign_bit, self.exponent, self.mantissa)

    def to_float(self) -> float:
        return bits_to_float(self.to_bits())

    @property
    def sign(self) -> int:
        return -1 if self.sign_bit == 1 else 1

    @property
    def category(self) -> str:
        return classify_fields(self.exponent, self.mantissa)

    def binary_string(self) -> tuple[str, str, str]:
        return binary_fields(self.sign_bit, self.exponent, self.mantissa)
