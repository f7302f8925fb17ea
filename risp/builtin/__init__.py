"""Builtin dispatch tables.

A `Fun` value holds the name it was installed under plus a tag. The evaluator
looks the tag up in SPECIAL_FORMS (unevaluated arguments) first, then in
BUILTINS (evaluated arguments).
"""

from __future__ import annotations

from risp.builtin.arithmetic import (
    builtin_add,
    builtin_div,
    builtin_mul,
    builtin_rem,
    builtin_sub,
)
from risp.builtin.clock import builtin_now
from risp.builtin.comparison import (
    builtin_eq,
    builtin_ge,
    builtin_gt,
    builtin_le,
    builtin_lt,
    builtin_max,
    builtin_min,
    builtin_ne,
)
from risp.builtin.logic_forms import and_form, if_form, not_form, or_form
from risp.types.val import FALSE, TRUE, Fun, NIL

BUILTINS = {
    "add": builtin_add,
    "sub": builtin_sub,
    "mul": builtin_mul,
    "div": builtin_div,
    "rem": builtin_rem,
    "min": builtin_min,
    "max": builtin_max,
    "gt": builtin_gt,
    "lt": builtin_lt,
    "ge": builtin_ge,
    "le": builtin_le,
    "eq": builtin_eq,
    "ne": builtin_ne,
    "now": builtin_now,
}

SPECIAL_FORMS = {
    "and": and_form,
    "or": or_form,
    "not": not_form,
    "if": if_form,
}

# (name, tag) in installation order
NAMES = [
    ("add", "add"), ("+", "add"),
    ("sub", "sub"), ("-", "sub"),
    ("mul", "mul"), ("*", "mul"),
    ("div", "div"), ("/", "div"),
    ("rem", "rem"), ("%", "rem"),
    ("min", "min"),
    ("max", "max"),
    ("gt", "gt"), (">", "gt"),
    ("lt", "lt"), ("<", "lt"),
    ("ge", "ge"), (">=", "ge"),
    ("le", "le"), ("<=", "le"),
    ("eq", "eq"), ("==", "eq"),
    ("ne", "ne"), ("!=", "ne"),
    ("and", "and"),
    ("or", "or"),
    ("not", "not"),
    ("if", "if"),
    ("now", "now"),
]

TAGS = dict(NAMES)

CONSTANTS = {
    "true": TRUE,
    "false": FALSE,
    "nil": NIL,
}


def register(env) -> None:
    """Install every builtin and constant into `env`."""
    for name, tag in NAMES:
        env.put(name, Fun(name, tag))
    for name, value in CONSTANTS.items():
        env.put(name, value)
