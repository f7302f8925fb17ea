# Core type aliases for risp.
#
# EvaluatorFn is the signature special forms receive for evaluating their own
# argument cells. It is defined before any submodule is imported.

from typing import Callable

EvaluatorFn = Callable[..., "Val"]

from risp.types.errors import (  # noqa: E402
    RispError,
    ArgumentMismatch,
    DivisionByZero,
    NoChildren,
    NotANumber,
    NumArguments,
    ParseError,
    UnknownFunction,
    WrongType,
)
from risp.types.val import (  # noqa: E402
    Val,
    Bool,
    Num,
    Float,
    Sym,
    List,
    Risp,
    Fun,
    Time,
    Date,
    DateTime,
    from_python,
    to_python,
)
from risp.types.environment import Environment  # noqa: E402
from risp.reader.parser import parse  # noqa: E402
from risp.evaluation.evaluator import evaluate  # noqa: E402
from risp.interpreter import Interpreter  # noqa: E402

__version__ = "0.1.0"
