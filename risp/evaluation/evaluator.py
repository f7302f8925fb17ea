"""Tree-walking evaluator for risp.

Dispatch is on the shape of the value alone:

- Risp: evaluate every form left to right, return the last result
- Sym: look the name up in the environment
- List: evaluate the head; a Fun is applied to the rest, a lone non-callable
  value is the result (so `(42)` is `42`)
- anything else evaluates to itself
"""

from __future__ import annotations

import logging

from risp.builtin import BUILTINS, SPECIAL_FORMS, TAGS
from risp.types.environment import Environment
from risp.types.errors import UnknownFunction, WrongType
from risp.types.val import NIL, Fun, List, Risp, Sym, Val

logger = logging.getLogger(__name__)


def evaluate(value: Val, env: Environment) -> Val:
    """Evaluate `value` against `env` and return the resulting value."""
    match value:
        case Risp(forms):
            results = [evaluate(form, env) for form in forms]
            if not results:
                return NIL
            return results[-1]

        case Sym(name):
            return env.get(name)

        case List(children):
            if not children:
                return value
            head, tail = value.pop(0)
            head = evaluate(head, env)
            if isinstance(head, Fun):
                return apply(head, tail, env)
            if not tail.children:
                return head
            # the rest is still evaluated, so its errors come first
            for cell in tail:
                evaluate(cell, env)
            raise WrongType("function", str(head))

    # --- Atoms return as-is ---
    return value


def apply(fn: Fun, tail: List, env: Environment) -> Val:
    """Apply a builtin to its argument cells.

    Special forms get the cells as written; every other builtin gets them
    evaluated left to right.
    """
    # a Fun built without a tag resolves through its installed name
    tag = fn.tag or TAGS.get(fn.name, fn.name)
    form = SPECIAL_FORMS.get(tag)
    if form is not None:
        logger.debug("apply: special form %s %s", fn.name, tail)
        return form(tail, env, evaluate)

    builtin = BUILTINS.get(tag)
    if builtin is None:
        raise UnknownFunction(fn.name)
    args = List(tuple(evaluate(cell, env) for cell in tail))
    logger.debug("apply: %s %s", fn.name, args)
    return builtin(args, env)
