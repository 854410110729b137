"""Named binary64 constants, built once from their raw fields.

DBL_EPSILON, machine epsilon (2.0**-52):

    +-+-----------+----------------------------------------------------+
    |0|01111001011|0000000000000000000000000000000000000000000000000000|
    +-+-----------+----------------------------------------------------+

DBL_MINIMUM, the minimum positive normal number:

    +-+-----------+----------------------------------------------------+
    |0|00000000001|0000000000000000000000000000000000000000000000000000|
    +-+-----------+----------------------------------------------------+

DBL_ULPDENORMAL, one ulp of the denormal range (2.0**(-52-1022)):

    +-+-----------+----------------------------------------------------+
    |0|00000000000|0000000000000000000000000000000000000000000000000001|
    +-+-----------+----------------------------------------------------+
"""

from __future__ import annotations

from .bits import MANT_MAX
from .reconstruct import compile

DBL_EPSILON: float = compile(+1, 971, 0)
DBL_MINIMUM: float = compile(+1, 1, 0)
DBL_ULPDENORMAL: float = compile(+1, 0, 1)
DBL_INFINITY: float = compile(+1, 2047, 0)
DBL_NAN: float = compile(-1, 2047, MANT_MAX)
