# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Render a tree back to expression text the parser accepts.

Uses the same reversed pre-order stack walk as evaluation, with
`(text, precedence)` pairs on the stack instead of floats. Parentheses are
emitted only where the grammar needs them, so chains read naturally
(`a + b - c`) and re-parse to a tree with the same value.
"""

from __future__ import annotations

import math
from typing import List, Tuple

from .. import tree as T
from ..errors import TreeInvariantError
from .base import ExpressionOperation

_SUM = 1
_PRODUCT = 2
_POWER = 3
_ATOM = 4

Rendered = Tuple[str, int]


def format_number(value: float) -> str:
	"""NUMBER lexeme that `float()` reads back as `value`."""
	if math.isnan(value):
		raise TreeInvariantError("a NaN constant has no literal form")
	if math.isinf(value):
		# overflows back to infinity when re-parsed
		return "1e999" if value > 0 else "-1e999"
	if value.is_integer() and abs(value) < 1e16:
		return str(int(value))
	return repr(value)


def _wrap(item: Rendered, min_level: int) -> str:
	text, level = item
	return text if level >= min_level else f"({text})"


class RenderOperation(ExpressionOperation):
	def __init__(self) -> None:
		self._stack: List[Rendered] = []

	def _pop(self) -> Rendered:
		if not self._stack:
			raise TreeInvariantError("render stack underflow")
		return self._stack.pop()

	def visit_constant(self, node: T.ConstantNode) -> None:
		text = format_number(node.value)
		self._stack.append((text, _SUM if text.startswith("-") else _ATOM))

	def visit_variable(self, node: T.VariableNode) -> None:
		self._stack.append((node.name, _ATOM))

	def _sum(self, node: T.SumNode) -> None:
		parts: List[str] = []
		for index, term in enumerate(node.terms):
			item = self._pop()
			if index == 0:
				parts.append(item[0] if term.positive else "-" + _wrap(item, _PRODUCT))
			else:
				parts.append(("+ " if term.positive else "- ") + _wrap(item, _PRODUCT))
		self._stack.append((" ".join(parts), _SUM))

	def _product(self, node: T.ProductNode) -> None:
		parts: List[str] = []
		for index, term in enumerate(node.terms):
			item = self._pop()
			if index == 0:
				parts.append(_wrap(item, _PRODUCT) if term.positive else "1 / " + _wrap(item, _POWER))
			else:
				parts.append(("* " if term.positive else "/ ") + _wrap(item, _POWER))
		self._stack.append((" ".join(parts), _PRODUCT))

	def visit_addition(self, node: T.AdditionNode) -> None:
		self._sum(node)

	def visit_subtraction(self, node: T.SubtractionNode) -> None:
		self._sum(node)

	def visit_multiplication(self, node: T.MultiplicationNode) -> None:
		self._product(node)

	def visit_division(self, node: T.DivisionNode) -> None:
		self._product(node)

	def visit_exponentiation(self, node: T.ExponentiationNode) -> None:
		base = self._pop()
		exponent = self._pop()
		self._stack.append((f"{_wrap(base, _ATOM)}^{_wrap(exponent, _POWER)}", _POWER))

	def visit_function(self, node: T.FunctionNode) -> None:
		argument = self._pop()
		self._stack.append((f"{node.function.value}({argument[0]})", _ATOM))

	def result(self) -> str:
		if len(self._stack) != 1:
			raise TreeInvariantError(f"expected one rendered expression, found {len(self._stack)}")
		return self._stack[0][0]


def render(root: T.ExpressionNode) -> str:
	"""Expression text for `root`; variables appear by name, not by value."""
	operation = RenderOperation()
	for node in reversed(list(root.traverse())):
		node.accept(operation)
	return operation.result()


__all__ = ["RenderOperation", "format_number", "render"]
