# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Variable binding: set the value of matching variable leaves in place.

Binding never rebuilds the tree, so a parsed formula can be rebound and
re-evaluated as often as needed.
"""

from __future__ import annotations

from typing import List, Mapping, Set

from .. import tree as T
from .base import ExpressionOperation


class BindOperation(ExpressionOperation):
	"""Assign values to variables by name; every other kind is a no-op."""

	def __init__(self, values: Mapping[str, float]) -> None:
		self.values = dict(values)
		self.updated = 0

	def apply(self, root: T.ExpressionNode) -> int:
		"""Visit each node of `root` at most once; returns the number of leaves updated."""
		seen: Set[int] = set()
		for node in root.traverse():
			if id(node) in seen:
				continue
			seen.add(id(node))
			node.accept(self)
		return self.updated

	def visit_variable(self, node: T.VariableNode) -> None:
		if node.name in self.values:
			node.value = float(self.values[node.name])
			self.updated += 1

	def visit_constant(self, node: T.ConstantNode) -> None:
		pass

	def visit_addition(self, node: T.AdditionNode) -> None:
		pass

	def visit_subtraction(self, node: T.SubtractionNode) -> None:
		pass

	def visit_multiplication(self, node: T.MultiplicationNode) -> None:
		pass

	def visit_division(self, node: T.DivisionNode) -> None:
		pass

	def visit_exponentiation(self, node: T.ExponentiationNode) -> None:
		pass

	def visit_function(self, node: T.FunctionNode) -> None:
		pass


def bind(root: T.ExpressionNode, name: str, value: float) -> int:
	return BindOperation({name: value}).apply(root)


def bind_all(root: T.ExpressionNode, values: Mapping[str, float]) -> int:
	"""Apply several bindings in a single pass over the tree."""
	if not values:
		return 0
	return BindOperation(values).apply(root)


def variable_names(root: T.ExpressionNode) -> List[str]:
	"""Distinct variable names in first-appearance order."""
	names: List[str] = []
	for node in root.traverse():
		if isinstance(node, T.VariableNode) and node.name not in names:
			names.append(node.name)
	return names


__all__ = ["BindOperation", "bind", "bind_all", "variable_names"]
