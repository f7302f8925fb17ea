from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from risp.evaluation.evaluator import evaluate
from risp.reader.parser import parse
from risp.types.environment import Environment
from risp.types.val import Risp, Val, from_python

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates risp rules against one Environment.

    The environment lives as long as the interpreter, so a host can parse a
    rule once, then `put` fresh input readings and `eval` it on every tick.
    """

    def __init__(self, bindings: Optional[Mapping[str, Any]] = None):
        self.env: Environment = Environment()
        if bindings:
            for name, value in bindings.items():
                self.put(name, value)

    def put(self, name: str, value: Any) -> None:
        """Bind `name` to a Val or a host value (bool, int, float, date, time, datetime)."""
        self.env.put(name, from_python(value))

    def get(self, name: str) -> Val:
        return self.env.get(name)

    def parse(self, code: str) -> Risp:
        return parse(code)

    def eval(self, code: str | Val) -> Val:
        """Evaluate source text or an already parsed value."""
        program = parse(code) if isinstance(code, str) else code
        result = evaluate(program, self.env)
        logger.debug("eval: %s -> %r", code, result)
        return result
