"""Partial ordering over risp values.

`compare` enumerates exactly the pairs that have an order:

- Num/Num, Num/Float, Float/Float (Num is promoted to float against a Float)
- Time/Time, Date/Date, DateTime/DateTime
- DateTime against Time (clock part) or Date (calendar part), either way round

Everything else, NaN included, is unordered and `compare` returns None.
"""

from __future__ import annotations

from typing import Optional

from risp.types.errors import ArgumentMismatch
from risp.types.val import Date, DateTime, Float, Num, Time, Val


def _cmp(a, b) -> Optional[int]:
    try:
        if a < b:
            return -1
        if a > b:
            return 1
    except TypeError:
        # naive against timezone-aware
        return None
    if a == b:
        return 0
    return None  # NaN


def compare(a: Val, b: Val) -> Optional[int]:
    """Return -1, 0 or 1 when `a` and `b` are ordered, else None."""
    match a, b:
        case Num(x), Num(y):
            return _cmp(x, y)
        case (Num(x) | Float(x)), (Num(y) | Float(y)):
            return _cmp(float(x), float(y))
        case Time(x), Time(y):
            return _cmp(x, y)
        case DateTime(x), DateTime(y):
            return _cmp(x, y)
        case Date(x), Date(y):
            return _cmp(x, y)
        case DateTime(x), Time(y):
            return _cmp(x.time(), y)
        case Time(x), DateTime(y):
            return _cmp(x, y.time())
        case DateTime(x), Date(y):
            return _cmp(x.date(), y)
        case Date(x), DateTime(y):
            return _cmp(x, y.date())
    return None


def ordered(a: Val, b: Val) -> int:
    """Like `compare`, but an unordered pair raises ArgumentMismatch."""
    result = compare(a, b)
    if result is None:
        raise ArgumentMismatch(a, b)
    return result
