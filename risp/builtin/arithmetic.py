"""Arithmetic builtins: add, sub, mul, div, rem.

Each is a left fold over its already-evaluated arguments. Num op Num stays a
Num (promoted to Float if it leaves the 64-bit range); any Float operand makes
both sides floats. Integer division and remainder truncate toward zero and
raise DivisionByZero on a zero divisor; floats follow IEEE 754 instead.
"""

from __future__ import annotations

import math
from typing import Callable

from risp.types.errors import DivisionByZero, NotANumber, NumArguments
from risp.types.val import Float, List, Num, Val, num


def _int_div(a: int, b: int) -> int:
    if b == 0:
        raise DivisionByZero()
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def _int_rem(a: int, b: int) -> int:
    return a - b * _int_div(a, b)


def _float_div(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _float_rem(a: float, b: float) -> float:
    if b == 0.0 or math.isinf(a):
        return math.nan
    return math.fmod(a, b)


def _binary(
    int_op: Callable[[int, int], int], float_op: Callable[[float, float], float]
) -> Callable[[Val, Val], Val]:
    def apply(a: Val, b: Val) -> Val:
        match a, b:
            case Num(x), Num(y):
                return num(int_op(x, y))
            case (Num(x) | Float(x)), (Num(y) | Float(y)):
                return Float(float_op(float(x), float(y)))
            case (Num() | Float()), _:
                raise NotANumber(b)
        raise NotANumber(a)

    return apply


def _fold(op: Callable[[Val, Val], Val], args: List) -> Val:
    if args.len() == 0:
        raise NumArguments(1, 0)
    acc, rest = args.pop(0)
    if not isinstance(acc, (Num, Float)):
        raise NotANumber(acc)
    for item in rest:
        acc = op(acc, item)
    return acc


_add = _binary(lambda x, y: x + y, lambda x, y: x + y)
_sub = _binary(lambda x, y: x - y, lambda x, y: x - y)
_mul = _binary(lambda x, y: x * y, lambda x, y: x * y)
_div = _binary(_int_div, _float_div)
_rem = _binary(_int_rem, _float_rem)


def builtin_add(args: List, env) -> Val:
    """(add a b ...) => a + b + ..."""
    return _fold(_add, args)


def builtin_sub(args: List, env) -> Val:
    """(sub a b ...) => a - b - ...; (sub a) => -a."""
    if args.len() == 1:
        match args.children[0]:
            case Num(x):
                return num(-x)
            case Float(x):
                return Float(-x)
            case other:
                raise NotANumber(other)
    return _fold(_sub, args)


def builtin_mul(args: List, env) -> Val:
    """(mul a b ...) => a * b * ..."""
    return _fold(_mul, args)


def builtin_div(args: List, env) -> Val:
    """(div a b ...) => a / b / ..., truncating for integers."""
    return _fold(_div, args)


def builtin_rem(args: List, env) -> Val:
    """(rem a b ...) => a % b % ..., sign follows the dividend."""
    return _fold(_rem, args)
