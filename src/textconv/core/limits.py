"""Numeric domain limits shared by the parsers and the formatters.

Values mirror the standard C limits of each declared width so that range
checks behave the same way regardless of Python's unbounded integers.
"""

import sys
from typing import Final

# Signed widths
INT16_MIN: Final[int] = -(2**15)
INT16_MAX: Final[int] = 2**15 - 1
INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1
INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

# C "int" and "unsigned int" are 32 bits wide on every supported platform
INT_MIN: Final[int] = INT32_MIN
INT_MAX: Final[int] = INT32_MAX

# Unsigned widths
UINT16_MAX: Final[int] = 2**16 - 1
UINT32_MAX: Final[int] = 2**32 - 1
UINT64_MAX: Final[int] = 2**64 - 1
UINT_MAX: Final[int] = UINT32_MAX

# Largest finite double
DBL_MAX: Final[float] = sys.float_info.max
# Smallest positive normal double; anything closer to zero is subnormal
DBL_MIN: Final[float] = sys.float_info.min

# Digits of INT64_MIN plus its sign, plus the terminator slot
INTSTRING_MAX_DIGITS: Final[int] = len(str(INT64_MIN)) + 1

# Default capacity for rendered text and split line arrays
BUFSIZE: Final[int] = 1024
