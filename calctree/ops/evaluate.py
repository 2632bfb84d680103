# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Value operation: reduce a tree to a float without recursion.

The pre-order enumeration of a node is the node followed by its children's
enumerations in order. Read backwards, every child's value lands on the stack
before its parent is visited and the first child ends up on top, so a parent
pops its operands in declaration order. This holds for any number of terms,
which is why sequence nodes need no special casing beyond "pop len(terms)".

Accumulation order is fixed and left to right: `a - b + c` is computed as
`(a - b) + c`, `a / b * c` as `(a / b) * c`. Chains of three or more terms
therefore round exactly like the equivalent left-nested binary expression.
"""

from __future__ import annotations

from typing import List, Sequence

from .. import tree as T
from ..errors import TreeInvariantError
from .base import ExpressionOperation
from .numeric import apply_function, divide, power


class ValueOperation(ExpressionOperation):
	"""Stack machine fed with nodes in reversed pre-order."""

	def __init__(self) -> None:
		self._stack: List[float] = []

	def _pop(self) -> float:
		if not self._stack:
			raise TreeInvariantError("value stack underflow; nodes were not fed in reversed pre-order")
		return self._stack.pop()

	def _pop_terms(self, terms: Sequence[T.Term]) -> List[float]:
		return [self._pop() for _ in terms]

	def visit_constant(self, node: T.ConstantNode) -> None:
		self._stack.append(node.value)

	def visit_variable(self, node: T.VariableNode) -> None:
		self._stack.append(node.value)

	def _sum(self, node: T.SumNode) -> None:
		terms = node.terms
		values = self._pop_terms(terms)
		acc = values[0] if terms[0].positive else -values[0]
		for term, value in zip(terms[1:], values[1:]):
			acc = acc + value if term.positive else acc - value
		self._stack.append(acc)

	def _product(self, node: T.ProductNode) -> None:
		terms = node.terms
		values = self._pop_terms(terms)
		acc = values[0] if terms[0].positive else divide(1.0, values[0])
		for term, value in zip(terms[1:], values[1:]):
			acc = acc * value if term.positive else divide(acc, value)
		self._stack.append(acc)

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
		self._stack.append(power(base, exponent))

	def visit_function(self, node: T.FunctionNode) -> None:
		self._stack.append(apply_function(node.function, self._pop()))

	def result(self) -> float:
		if len(self._stack) != 1:
			raise TreeInvariantError(f"expected one value after evaluation, found {len(self._stack)}")
		return self._stack[0]


def evaluate(root: T.ExpressionNode) -> float:
	"""Value of the tree under the variables' current values (unbound reads as 0.0)."""
	operation = ValueOperation()
	for node in reversed(list(root.traverse())):
		node.accept(operation)
	return operation.result()


__all__ = ["ValueOperation", "evaluate"]
