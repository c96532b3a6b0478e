from __future__ import annotations

import re
from typing import Optional


_LEADING_INT = re.compile(r"^\s*([+-]?)([0-9]+)")

# Longer digit runs are junk in a year/age column (and int() rejects huge ones)
_MAX_DIGITS = 18


def parse_leading_int(value) -> Optional[int]:
    """Parse the leading base-10 integer of a sheet cell.

    Accepts what spreadsheet users actually type into year columns:
    '1950', ' 1950 ', '1950-03-02', '1950 (approx)'. Returns None for empty
    or non-numeric input, for zero, which the sheet uses as a blank, and for
    digit runs longer than any real year or count.
    """
    if value is None:
        return None
    m = _LEADING_INT.match(str(value))
    if not m:
        return None
    sign, digits = m.groups()
    if len(digits) > _MAX_DIGITS:
        return None
    parsed = int(sign + digits)
    return parsed or None
