from __future__ import annotations

import datetime as dt

from risp.types.errors import NumArguments
from risp.types.val import DateTime, List


def wall_clock() -> dt.datetime:
    return dt.datetime.now()


def builtin_now(args: List, env) -> DateTime:
    """(now) => the current local date and time."""
    if args.len() != 0:
        raise NumArguments(0, args.len())
    return DateTime(wall_clock())
