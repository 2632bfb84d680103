# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Operation protocol over the closed node-kind set.

`node.accept(operation)` calls back the `visit_*` method for the node's kind.
Every method is abstract, so adding a node kind without teaching every
operation about it fails loudly at instantiation time instead of silently
skipping nodes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from .. import tree as T


class ExpressionOperation(ABC):
	"""Double-dispatch target for `ExpressionNode.accept()`."""

	@abstractmethod
	def visit_constant(self, node: T.ConstantNode) -> None: ...

	@abstractmethod
	def visit_variable(self, node: T.VariableNode) -> None: ...

	@abstractmethod
	def visit_addition(self, node: T.AdditionNode) -> None: ...

	@abstractmethod
	def visit_subtraction(self, node: T.SubtractionNode) -> None: ...

	@abstractmethod
	def visit_multiplication(self, node: T.MultiplicationNode) -> None: ...

	@abstractmethod
	def visit_division(self, node: T.DivisionNode) -> None: ...

	@abstractmethod
	def visit_exponentiation(self, node: T.ExponentiationNode) -> None: ...

	@abstractmethod
	def visit_function(self, node: T.FunctionNode) -> None: ...


__all__ = ["ExpressionOperation"]
