"""Runtime values for risp.

Every parsed form and every evaluation result is a `Val`. The variants are
small frozen dataclasses, so equality is structural and a value can never be
edited in place: operations that "mutate" a list return a new one.

    Bool, Num, Float, Sym, List, Risp, Fun, Time, Date, DateTime

`Fun` compares by name only. The `tag` it carries selects the implementation
from the builtin dispatch tables and takes no part in equality.
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from risp.types.errors import NoChildren, NotANumber, WrongType

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class Val:
    """Base class of all runtime values."""

    __slots__ = ()

    def len(self) -> int:
        raise NoChildren(self)

    def as_num(self) -> int:
        raise NotANumber(self)

    def as_bool(self) -> bool:
        raise WrongType("bool", str(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self})"


@dataclass(frozen=True, repr=False)
class Bool(Val):
    value: bool

    def as_bool(self) -> bool:
        return self.value

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True, repr=False)
class Num(Val):
    value: int

    def as_num(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, repr=False)
class Float(Val):
    value: float

    def __str__(self) -> str:
        # Positional notation with a fractional part, so the reader sees a float.
        x = self.value
        if x != x or x in (float("inf"), float("-inf")):
            return repr(x)
        text = format(Decimal(repr(x)), "f")
        if "." not in text:
            text += ".0"
        return text


@dataclass(frozen=True, repr=False)
class Sym(Val):
    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, repr=False)
class Time(Val):
    value: dt.time

    def __str__(self) -> str:
        return self.value.strftime("%H:%M:%S")


@dataclass(frozen=True, repr=False)
class Date(Val):
    value: dt.date

    def __str__(self) -> str:
        return self.value.isoformat()


@dataclass(frozen=True, repr=False)
class DateTime(Val):
    value: dt.datetime

    def __str__(self) -> str:
        return self.value.isoformat(timespec="seconds")


@dataclass(frozen=True, repr=False)
class Fun(Val):
    name: str
    tag: str = field(default="", compare=False)

    def __str__(self) -> str:
        return f"<builtin: {self.name}>"


class _Cells(Val):
    """Shared behaviour of the two sequence variants."""

    __slots__ = ()

    @property
    def cells(self) -> tuple[Val, ...]:
        raise NotImplementedError

    def len(self) -> int:
        return len(self.cells)

    def add(self, item: Val):
        """Return a copy with `item` appended."""
        return type(self)(self.cells + (item,))

    def pop(self, index: int = 0):
        """Return `(item, rest)` where `rest` is a copy without the item at `index`."""
        cells = self.cells
        try:
            item = cells[index]
        except IndexError:
            raise NoChildren(self) from None
        if index < 0:
            index += len(cells)
        return item, type(self)(cells[:index] + cells[index + 1:])

    def __iter__(self):
        return iter(self.cells)


@dataclass(frozen=True, repr=False)
class List(_Cells):
    children: tuple[Val, ...] = ()

    @property
    def cells(self) -> tuple[Val, ...]:
        return self.children

    @classmethod
    def of(cls, *children: Val) -> List:
        return cls(tuple(children))

    def __str__(self) -> str:
        return "(" + " ".join(str(c) for c in self.children) + ")"


@dataclass(frozen=True, repr=False)
class Risp(_Cells):
    forms: tuple[Val, ...] = ()

    @property
    def cells(self) -> tuple[Val, ...]:
        return self.forms

    @classmethod
    def of(cls, *forms: Val) -> Risp:
        return cls(tuple(forms))

    def __str__(self) -> str:
        return "<toplevel>"


TRUE = Bool(True)
FALSE = Bool(False)
NIL = FALSE

NUMERIC = (Num, Float)
TEMPORAL = (Time, Date, DateTime)


def num(n: int) -> Num | Float:
    """Wrap an integer, promoting to Float outside the signed 64-bit range."""
    if INT64_MIN <= n <= INT64_MAX:
        return Num(n)
    return Float(float(n))


def from_python(obj: Any) -> Val:
    """Convert a host value into a `Val`."""
    if isinstance(obj, Val):
        return obj
    # bool before int, datetime before date: both are subclasses
    if isinstance(obj, bool):
        return Bool(obj)
    if isinstance(obj, int):
        return num(obj)
    if isinstance(obj, float):
        return Float(obj)
    if isinstance(obj, dt.datetime):
        return DateTime(obj)
    if isinstance(obj, dt.date):
        return Date(obj)
    if isinstance(obj, dt.time):
        return Time(obj)
    if isinstance(obj, (list, tuple)):
        return List(tuple(from_python(x) for x in obj))
    raise WrongType("bool, number or temporal value", type(obj).__name__)


def to_python(val: Val) -> Any:
    """Convert a `Val` back into a plain host value."""
    match val:
        case Bool(b) | Num(b) | Float(b) | Time(b) | Date(b) | DateTime(b):
            return b
        case Sym(name) | Fun(name):
            return name
        case List(children) | Risp(children):
            return [to_python(c) for c in children]
    raise WrongType("value", repr(val))
