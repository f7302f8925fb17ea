"""Special forms: if, and, or, not.

These receive their argument cells unevaluated and decide themselves which
cells to evaluate, so a branch that is not taken is never evaluated.
Only `Bool(false)` is falsy; every other value counts as true.
"""

from __future__ import annotations

from risp import EvaluatorFn
from risp.types.errors import NumArguments, WrongType
from risp.types.val import FALSE, Bool, List, Val


def if_form(tail: List, env, evaluate_fn: EvaluatorFn) -> Val:
    """(if cond then else): cond must evaluate to a Bool."""
    if tail.len() != 3:
        raise NumArguments(3, tail.len())
    cond, then_branch, else_branch = tail.children
    test = evaluate_fn(cond, env)
    if not isinstance(test, Bool):
        raise WrongType("bool", str(test))
    return evaluate_fn(then_branch if test.value else else_branch, env)


def and_form(tail: List, env, evaluate_fn: EvaluatorFn) -> Val:
    """Short-circuiting logical AND.

    (and a b ... z) evaluates a, b, ... left to right and returns false at the
    first one that is false. Otherwise z is evaluated and returned.
    """
    if tail.len() < 2:
        raise NumArguments(2, tail.len())
    *init, last = tail.children
    for expr in init:
        if evaluate_fn(expr, env) == FALSE:
            return FALSE
    return evaluate_fn(last, env)


def or_form(tail: List, env, evaluate_fn: EvaluatorFn) -> Val:
    """Short-circuiting logical OR.

    (or a b ... z) evaluates a, b, ... until one is not false, then evaluates
    and returns z. If all of them are false, returns false and z is never
    evaluated.
    """
    if tail.len() < 2:
        raise NumArguments(2, tail.len())
    *init, last = tail.children
    for expr in init:
        if evaluate_fn(expr, env) != FALSE:
            return evaluate_fn(last, env)
    return FALSE


def not_form(tail: List, env, evaluate_fn: EvaluatorFn) -> Val:
    if tail.len() != 1:
        raise NumArguments(1, tail.len())
    match evaluate_fn(tail.children[0], env):
        case Bool(b):
            return Bool(not b)
    return FALSE
