"""Comparison builtins: min, max, gt, lt, ge, le, eq, ne."""

from __future__ import annotations

from typing import Callable

from risp.evaluation.ordering import ordered
from risp.types.errors import NotANumber, NumArguments
from risp.types.val import FALSE, TRUE, Bool, Float, List, Num, Val


def _select(keep: Callable[[int], bool], args: List) -> Val:
    if args.len() == 0:
        raise NumArguments(1, 0)
    acc, rest = args.pop(0)
    for item in rest:
        if keep(ordered(acc, item)):
            acc = item
    return acc


def builtin_min(args: List, env) -> Val:
    """Return the least argument."""
    return _select(lambda order: order > 0, args)


def builtin_max(args: List, env) -> Val:
    """Return the greatest argument."""
    return _select(lambda order: order < 0, args)


def _relation(holds: Callable[[int], bool]):
    def builtin(args: List, env) -> Bool:
        cells = args.children
        for left, right in zip(cells, cells[1:]):
            if not holds(ordered(left, right)):
                return FALSE
        return TRUE

    return builtin


builtin_gt = _relation(lambda order: order > 0)
builtin_lt = _relation(lambda order: order < 0)
builtin_ge = _relation(lambda order: order >= 0)
builtin_le = _relation(lambda order: order <= 0)
builtin_eq = _relation(lambda order: order == 0)


def builtin_ne(args: List, env) -> Bool:
    """True when no numeric argument repeats an earlier one."""
    seen: set = set()
    for item in args:
        match item:
            case Num(x) | Float(x):
                if x in seen:
                    return FALSE
                seen.add(x)
            case _:
                raise NotANumber(item)
    return TRUE
