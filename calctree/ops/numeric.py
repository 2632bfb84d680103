# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
IEEE-754 flavoured arithmetic.

Python floats raise on division by zero and `math` raises on domain errors or
overflow. Evaluation has no error channel, so these helpers return the
infinity/NaN results a C double would produce instead.
"""

from __future__ import annotations

import math
from typing import Callable, Dict

from ..errors import TreeInvariantError
from ..tree import FunctionKind


def _is_odd_integer(x: float) -> bool:
	return math.isfinite(x) and x == math.floor(x) and math.fmod(x, 2.0) != 0.0


def divide(numerator: float, denominator: float) -> float:
	try:
		return numerator / denominator
	except ZeroDivisionError:
		if numerator == 0.0 or math.isnan(numerator):
			return math.nan
		return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def power(base: float, exponent: float) -> float:
	try:
		return math.pow(base, exponent)
	except OverflowError:
		if base < 0.0 and _is_odd_integer(exponent):
			return -math.inf
		return math.inf
	except ValueError:
		# zero to a negative power is a pole, not a domain error
		if base == 0.0:
			return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
		return math.nan


def _ieee(fn: Callable[[float], float]) -> Callable[[float], float]:
	def apply(x: float) -> float:
		try:
			return fn(x)
		except OverflowError:
			return math.inf
		except ValueError:
			# only the logarithms reject zero
			return -math.inf if x == 0.0 else math.nan

	apply.__name__ = fn.__name__
	return apply


FUNCTIONS: Dict[FunctionKind, Callable[[float], float]] = {
	FunctionKind.SIN: _ieee(math.sin),
	FunctionKind.COS: _ieee(math.cos),
	FunctionKind.TAN: _ieee(math.tan),
	FunctionKind.ASIN: _ieee(math.asin),
	FunctionKind.ACOS: _ieee(math.acos),
	FunctionKind.ATAN: _ieee(math.atan),
	FunctionKind.SQRT: _ieee(math.sqrt),
	FunctionKind.EXP: _ieee(math.exp),
	FunctionKind.LN: _ieee(math.log),
	FunctionKind.LOG: _ieee(math.log10),
	FunctionKind.LOG2: _ieee(math.log2),
}


def apply_function(function: FunctionKind, argument: float) -> float:
	impl = FUNCTIONS.get(function)
	if impl is None:
		raise TreeInvariantError(f"no implementation for function kind {function!r}")
	return impl(argument)


__all__ = ["FUNCTIONS", "apply_function", "divide", "power"]
