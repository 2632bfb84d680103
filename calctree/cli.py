# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from dataclasses import dataclass, field
from typing import Dict, List, Optional, TextIO

from .calculator import CONSTANTS, Calculator
from .errors import ParseError


@dataclass
class RunOptions:
	expression: str
	variables: Dict[str, float] = field(default_factory=dict)
	constants: bool = True
	render: bool = False
	json: bool = False


def _binding(text: str) -> tuple[str, float]:
	name, sep, raw = text.partition("=")
	name = name.strip()
	if not sep or not name:
		raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got '{text}'")
	try:
		return name, float(raw)
	except ValueError:
		raise argparse.ArgumentTypeError(f"value for '{name}' is not a number: '{raw}'") from None


def _build_parser() -> argparse.ArgumentParser:
	p = argparse.ArgumentParser(prog="calctree", description="Evaluate an arithmetic expression with named variables")
	p.add_argument("expression", help="Expression text, e.g. '6*(3+sin(pi/2))^5'")
	p.add_argument(
		"--var",
		dest="bindings",
		type=_binding,
		action="append",
		default=[],
		metavar="NAME=VALUE",
		help="Bind a variable (repeatable); unbound variables read as 0",
	)
	p.add_argument("--no-constants", action="store_true", help="Do not pre-bind pi and e")
	p.add_argument("--render", action="store_true", help="Print the parsed expression before its value")
	p.add_argument("--json", action="store_true", help="Emit machine-readable JSON")
	p.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
	return p


def _json_number(value: float) -> float | str:
	"""Strict JSON has no infinity or NaN; those are written as strings."""
	if math.isnan(value):
		return "nan"
	if math.isinf(value):
		return "inf" if value > 0 else "-inf"
	return value


def run(opts: RunOptions, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
	out = out or sys.stdout
	err = err or sys.stderr
	calc = Calculator(CONSTANTS if opts.constants else None).with_variables(opts.variables)
	try:
		formula = calc.compile(opts.expression)
	except ParseError as exc:
		if opts.json:
			print(json.dumps({"error": exc.to_dict()}), file=out)
		else:
			print(exc.format_human(), file=err)
		return 2
	value = formula.evaluate()
	if opts.json:
		bound = {name: _json_number(calc.variables.get(name, 0.0)) for name in formula.variables}
		payload = {"expression": str(formula), "value": _json_number(value), "variables": bound}
		print(json.dumps(payload, allow_nan=False), file=out)
		return 0
	if opts.render:
		print(str(formula), file=out)
	print(repr(value), file=out)
	return 0


def main(argv: List[str] | None = None) -> int:
	p = _build_parser()
	args = p.parse_args(argv)
	if args.verbose:
		logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
	opts = RunOptions(
		expression=args.expression,
		variables=dict(args.bindings),
		constants=not args.no_constants,
		render=bool(args.render),
		json=bool(args.json),
	)
	return run(opts)


if __name__ == "__main__":  # pragma: no cover
	sys.exit(main())
