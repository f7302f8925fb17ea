"""Runtime environment for risp.

A single flat namespace mapping names to values. A fresh Environment holds the
builtin callables and the constants `true`, `false` and `nil`; after that the
only way in is `put`, which a host calls between evaluations to refresh its
input readings. There is no nesting and no internal locking.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Iterator, Mapping, Optional

from risp.builtin import register
from risp.types.errors import UnknownFunction, WrongType
from risp.types.val import Val

logger = logging.getLogger(__name__)


class Environment:
    """Flat mapping from names to risp values."""

    __slots__ = ("vars",)

    def __init__(self, data: Optional[Mapping[str, Val]] = None):
        self.vars: dict[str, Val] = dict(data) if data else {}
        register(self)

    def put(self, name: str, value: Val) -> None:
        """Bind `name` to `value`, replacing any existing binding that differs."""
        if not isinstance(value, Val):
            raise WrongType("value", type(value).__name__)
        current = self.vars.get(name)
        if current is None or current != value:
            self.vars[name] = value

    def get(self, name: str) -> Val:
        """Return the value bound to `name`.

        Raises UnknownFunction if the name was never installed or put.
        """
        try:
            value = self.vars[name]
        except KeyError:
            raise UnknownFunction(name) from None
        logger.debug("lookup: retrieved %r from key %r", value, name)
        return value

    def update(self, mapping: Mapping[str, Val]) -> None:
        """Bulk `put` of a mapping of name -> value."""
        for k, v in mapping.items():
            self.put(k, v)

    def __contains__(self, name: object) -> bool:
        return name in self.vars

    def __iter__(self) -> Iterator[str]:
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Environment) and self.vars == other.vars

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v}" for k, v in self.vars.items()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {self}>"
