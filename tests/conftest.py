import datetime as dt

import pytest

from risp.builtin import clock
from risp.evaluation.evaluator import evaluate
from risp.reader.parser import parse
from risp.types.environment import Environment


@pytest.fixture
def env():
    """Fresh environment with builtins loaded."""
    return Environment()


@pytest.fixture
def run(env):
    """Parse and evaluate source text against the `env` fixture."""
    def _run(source: str):
        return evaluate(parse(source), env)
    return _run


FIXED_NOW = dt.datetime(2024, 5, 1, 19, 30, 0)


@pytest.fixture
def fixed_clock(monkeypatch):
    # Pin (now) so clock comparisons are deterministic
    monkeypatch.setattr(clock, "wall_clock", lambda: FIXED_NOW)
    return FIXED_NOW
