#!/usr/bin/env python3
"""
shuntcalc.py — ShuntCalc CLI.

Evaluates space separated infix expressions of integers and + - * /.
Exit status is 0 on success and 1 on any rejected expression.

Configuration: environment variables prefixed with SHUNT_CALC_
or a .env file (e.g. SHUNT_CALC_LOG_LEVEL=DEBUG).

Subcommands:
    eval     — evaluate an expression and print the result
    rpn      — print the postfix (RPN) form of an expression
    explain  — print tokens, postfix and every evaluation step
    repl     — interactive console loop

Usage:
    python shuntcalc.py eval "3 * -2 + 6"
    echo "20 / 4 / 2" | python shuntcalc.py eval
    python shuntcalc.py rpn "1 + 2 * 3"
    python shuntcalc.py explain "8 / 2 * 3 + 1"
    python shuntcalc.py repl
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Union

from rich import box
from rich.console import Console
from rich.table import Table

from calculator import Calculator
from config import Settings
from contracts import CalculatorError, Evaluation


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def format_number(value: Union[int, float], digits: int = 0) -> str:
    """Integral values print without a decimal point; digits > 0 rounds floats."""
    if not isinstance(value, float):
        return str(value)
    if value.is_integer():
        return str(int(value))
    if digits > 0:
        return f"{value:.{digits}g}"
    return repr(value)


def _print_evaluation_table(ev: Evaluation, digits: int) -> None:
    table = Table(title="Evaluation", box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Field", no_wrap=True, style="bold cyan")
    table.add_column("Value")
    table.add_row("Expression", ev.expression)
    table.add_row("Tokens", f"{len(ev.tokens)} ({len(ev.tokens) // 2} operators)")
    table.add_row("RPN", " ".join(ev.rpn))
    table.add_row("Result", format_number(ev.value, digits))
    table.add_row("Exact", "yes" if ev.is_exact else "no (rounded to float)")
    _console().print(table)


def _print_steps_table(steps: list[str]) -> None:
    table = Table(title=f"Steps [{len(steps)}]", box=box.ASCII, show_lines=False)
    table.add_column("#", justify="right", no_wrap=True)
    table.add_column("Step")
    for idx, step in enumerate(steps, 1):
        table.add_row(str(idx), step)
    _console().print(table)


def _read_expression(args: argparse.Namespace) -> str:
    if getattr(args, "expression", None):
        return " ".join(args.expression)
    return sys.stdin.read().strip()


def _fail(exc: CalculatorError) -> None:
    print(f"Error: {exc}", file=sys.stderr)
    sys.exit(1)


# -- subcommands -----------------------------------------------------------

def _eval(args: argparse.Namespace, calc: Calculator, settings: Settings) -> None:
    try:
        value = calc.evaluate(_read_expression(args))
    except CalculatorError as exc:
        _fail(exc)
        return
    print(format_number(value, settings.float_digits))


def _rpn(args: argparse.Namespace, calc: Calculator, settings: Settings) -> None:
    try:
        rpn = calc.to_rpn(_read_expression(args))
    except CalculatorError as exc:
        _fail(exc)
        return
    print(" ".join(rpn))


def _explain(args: argparse.Namespace, calc: Calculator, settings: Settings) -> None:
    try:
        ev = calc.explain(_read_expression(args))
    except CalculatorError as exc:
        _fail(exc)
        return
    _print_evaluation_table(ev, settings.float_digits)
    if ev.steps:
        _print_steps_table(ev.steps)


def _repl(args: argparse.Namespace, calc: Calculator, settings: Settings) -> None:
    """Reads one expression per line; an empty line or EOF ends the session."""
    errors = 0
    while True:
        try:
            line = input(settings.repl_prompt)
        except EOFError:
            break
        if not line.strip():
            break
        try:
            print(format_number(calc.evaluate(line), settings.float_digits))
        except CalculatorError as exc:
            errors += 1
            print(f"Error: {exc}", file=sys.stderr)
    if errors and args.strict:
        sys.exit(1)


# -- main ------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shuntcalc",
        description="Evaluate infix integer expressions via Shunting Yard + RPN",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # eval
    p = sub.add_parser("eval", help="Evaluate an expression (argument or stdin)")
    p.add_argument("expression", nargs="*", help='Expression, e.g. "3 * -2 + 6"')

    # rpn
    p = sub.add_parser("rpn", help="Print the postfix form of an expression")
    p.add_argument("expression", nargs="*")

    # explain
    p = sub.add_parser("explain", help="Print tokens, postfix and evaluation steps")
    p.add_argument("expression", nargs="*")

    # repl
    p = sub.add_parser("repl", help="Interactive console loop")
    p.add_argument("--strict", action="store_true",
                   help="Exit with status 1 if any line was rejected")

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    commands = {
        "eval":    _eval,
        "rpn":     _rpn,
        "explain": _explain,
        "repl":    _repl,
    }
    commands[args.command](args, Calculator(), settings)


if __name__ == "__main__":
    main()
