"""floatpeek CLI: print the binary64 structure of numbers."""

from __future__ import annotations

import sys

from .bits import MASK64, binary_string, bits_to_float, sign_exponent_mantissa
from .errors import NonFiniteError
from .rational import to_rational
from .render import human_readable, layout_diagram
from .ulp import ulp, ulps_from_zero

USAGE: str = """\
floatpeek [OPTIONS] VALUE...

Print the IEEE 754 binary64 structure of each VALUE. A VALUE is a decimal
float (inf and nan accepted) or a 64-bit pattern written 0x....

Options:
  --bits        Print sign, exponent and mantissa bit strings
  --fields      Print sign, raw exponent and raw mantissa integers
  --rational    Print the exact rational value
  --ulp         Print the ULP and the ULP distance from zero
  --diagram     Print the bit layout diagram
  --help        Show this help message
"""

FLAGS: list[str] = ["--bits", "--fields", "--rational", "--ulp", "--diagram"]


def parse_value(text: str) -> float:
    """Parse a decimal float or a 0x-prefixed bit pattern. Raises ValueError."""
    if text.lower().startswith("0x"):
        ui = int(text[2:], 16)
        if ui < 0 or ui > MASK64:
            raise ValueError("bit pattern outside 0..2**64-1")
        return bits_to_float(ui)
    return float(text)


def describe(x: float, flags: list[str]) -> list[str]:
    """Output lines for one value. Raises NonFiniteError for --rational on inf/nan."""
    lines: list[str] = [human_readable(x)]
    for flag in FLAGS:
        if flag not in flags:
            continue
        if flag == "--bits":
            lines.append("bits: " + " ".join(binary_string(x)))
        elif flag == "--fields":
            s, e, m = sign_exponent_mantissa(x)
            lines.append("fields: %+d %d %d" % (s, e, m))
        elif flag == "--rational":
            lines.append("rational: " + str(to_rational(x)))
        elif flag == "--ulp":
            lines.append("ulp: " + repr(ulp(x)))
            lines.append("ulps from zero: " + repr(ulps_from_zero(x)))
        elif flag == "--diagram":
            lines.extend(layout_diagram(x).split("\n"))
    return lines


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]
    flags: list[str] = []
    texts: list[str] = []
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--help" or arg == "-h":
            print(USAGE, end="")
            return 0
        elif arg in FLAGS:
            flags.append(arg)
        elif arg == "--":
            texts.extend(args[i + 1 :])
            break
        elif arg.startswith("--"):
            print("floatpeek: unknown flag '" + arg + "'", file=sys.stderr)
            return 2
        else:
            texts.append(arg)
        i += 1
    if len(texts) == 0:
        print("floatpeek: missing value argument", file=sys.stderr)
        return 2

    exit_code = 0
    for text in texts:
        try:
            x = parse_value(text)
        except ValueError:
            print("floatpeek: invalid value '" + text + "'", file=sys.stderr)
            exit_code = 1
            continue
        try:
            lines = describe(x, flags)
        except NonFiniteError as e:
            print("floatpeek: " + str(e), file=sys.stderr)
            exit_code = 1
            continue
        for line in lines:
            print(line)
    return exit_code


if __name__ == "__main__":
    sys.exit(main())
