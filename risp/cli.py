"""
Command line entry point for risp.

    risp eval "(if (< temp 78) true false)" -b temp=72.5
    risp run rules/heater.risp -b temp=72.5 -b cutoff=18:00:00
    risp check rules/heater.risp
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from risp.evaluation.evaluator import evaluate
from risp.interpreter import Interpreter
from risp.reader.parser import parse
from risp.types.environment import Environment
from risp.types.errors import RispError
from risp.types.val import NUMERIC, TEMPORAL, Bool, Val


def parse_binding(text: str) -> tuple[str, Val]:
    """Read a NAME=VALUE pair, VALUE being a single risp atom."""
    name, sep, source = text.partition("=")
    name = name.strip()
    if not sep or not name:
        raise click.BadParameter(f"expected NAME=VALUE, got {text!r}")
    try:
        program = parse(source)
        if program.len() != 1:
            raise click.BadParameter(f"{name}: expected a single value, got {source!r}")
        value = evaluate(program, Environment())
    except RispError as e:
        raise click.BadParameter(f"{name}: {e}") from e
    if not isinstance(value, (Bool, *NUMERIC, *TEMPORAL)):
        raise click.BadParameter(f"{name}: {value} cannot be bound")
    return name, value


def _bindings(ctx: click.Context, param: click.Parameter, values: tuple[str, ...]) -> dict[str, Val]:
    return dict(parse_binding(v) for v in values)


bind_option = click.option(
    "--bind",
    "-b",
    "bindings",
    multiple=True,
    callback=_bindings,
    metavar="NAME=VALUE",
    help="Bind NAME to VALUE before evaluating (repeatable)",
)

verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Log lookups and builtin calls",
)


def _run(source: str, bindings: dict[str, Val], verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    interp = Interpreter(bindings)
    try:
        result = interp.eval(source)
    except RispError as e:
        raise click.ClickException(f"{type(e).__name__}: {e}") from e
    click.echo(str(result))


@click.group("risp")
@click.version_option(package_name="risp")
def main() -> None:
    """Evaluate risp decision rules."""
    pass


@main.command("eval")
@click.argument("source", type=str)
@bind_option
@verbose_option
def eval_cmd(source: str, bindings: dict[str, Val], verbose: bool) -> None:
    """Evaluate SOURCE and print the result."""
    _run(source, bindings, verbose)


@main.command("run")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@bind_option
@verbose_option
def run_cmd(path: Path, bindings: dict[str, Val], verbose: bool) -> None:
    """Evaluate the rule file PATH and print the result."""
    _run(path.read_text(encoding="utf-8"), bindings, verbose)


@main.command("check")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def check_cmd(path: Path) -> None:
    """Parse the rule file PATH without evaluating it."""
    try:
        program = parse(path.read_text(encoding="utf-8"))
    except RispError as e:
        raise click.ClickException(f"{path}:{e}") from e
    click.echo(f"ok: {program.len()} form(s)")


if __name__ == "__main__":
    main()
