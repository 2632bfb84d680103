# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Expression tree data model.

The node set is closed: constants and variables are the only leaves, sequence
nodes fold a whole chain of same-precedence operators into one n-ary node,
and exponentiation/function nodes have a fixed number of children.

Sequence nodes come in two families that differ only in how their terms
combine:

  sum family      ADDITION, SUBTRACTION       term.positive: add vs subtract
  product family  MULTIPLICATION, DIVISION    term.positive: multiply vs divide

The node kind records which operator opened the chain (`a-b+c` is a
SUBTRACTION node with terms +a, -b, +c); evaluation only looks at the terms.

After parsing the structure is fixed. The one mutable field is
`VariableNode.value`, which `calctree.ops.bind` updates in place.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, ClassVar, Iterable, Iterator, List, Tuple

from .traversal import preorder

if TYPE_CHECKING:
	from .ops.base import ExpressionOperation


class NodeKind(Enum):
	CONSTANT = auto()
	VARIABLE = auto()
	ADDITION = auto()
	SUBTRACTION = auto()
	MULTIPLICATION = auto()
	DIVISION = auto()
	EXPONENTIATION = auto()
	FUNCTION = auto()


SUM_KINDS = frozenset({NodeKind.ADDITION, NodeKind.SUBTRACTION})
PRODUCT_KINDS = frozenset({NodeKind.MULTIPLICATION, NodeKind.DIVISION})


class FunctionKind(Enum):
	"""Unary functions known to the parser; the value is the source spelling."""

	SIN = "sin"
	COS = "cos"
	TAN = "tan"
	ASIN = "asin"
	ACOS = "acos"
	ATAN = "atan"
	SQRT = "sqrt"
	EXP = "exp"
	LN = "ln"
	LOG = "log"  # base 10
	LOG2 = "log2"


class ExpressionNode(ABC):
	"""Base class for all expression tree nodes."""

	kind: ClassVar[NodeKind]

	def children(self) -> Tuple[ExpressionNode, ...]:
		return ()

	@abstractmethod
	def accept(self, operation: ExpressionOperation) -> None:
		"""Dispatch to the `visit_*` method of `operation` for this node kind."""

	def traverse(self) -> Iterator[ExpressionNode]:
		"""Fresh pre-order enumeration of this subtree."""
		return preorder(self)


@dataclass(frozen=True, eq=True)
class ConstantNode(ExpressionNode):
	value: float

	kind: ClassVar[NodeKind] = NodeKind.CONSTANT

	def accept(self, operation: ExpressionOperation) -> None:
		operation.visit_constant(self)


@dataclass(eq=True)
class VariableNode(ExpressionNode):
	"""Named leaf; reads as 0.0 until a value is bound."""

	name: str
	value: float = 0.0

	kind: ClassVar[NodeKind] = NodeKind.VARIABLE

	def accept(self, operation: ExpressionOperation) -> None:
		operation.visit_variable(self)


@dataclass(frozen=True)
class Term:
	"""One child of a sequence node with its sign (sums) or mode (products)."""

	child: ExpressionNode
	positive: bool = True


class SequenceNode(ExpressionNode):
	"""
	N-ary node holding an ordered list of terms.

	Callers see the terms as a tuple. The list grows only through `_add()`,
	which `of()` and the parser call while a chain is being folded.
	"""

	def __init__(self, first: ExpressionNode, positive: bool = True) -> None:
		self._terms: List[Term] = [Term(first, positive)]

	@classmethod
	def of(cls, terms: Iterable[Term]) -> SequenceNode:
		"""Build a node from ready-made terms (at least one)."""
		items = list(terms)
		if not items:
			raise ValueError(f"{cls.__name__} needs at least one term")
		node = cls(items[0].child, items[0].positive)
		for term in items[1:]:
			node._add(term.child, term.positive)
		return node

	@property
	def terms(self) -> Tuple[Term, ...]:
		return tuple(self._terms)

	def _add(self, child: ExpressionNode, positive: bool = True) -> None:
		self._terms.append(Term(child, positive))

	def children(self) -> Tuple[ExpressionNode, ...]:
		return tuple(term.child for term in self._terms)

	def __len__(self) -> int:
		return len(self._terms)

	def __eq__(self, other: object) -> bool:
		if type(other) is not type(self):
			return NotImplemented
		return self._terms == other._terms  # type: ignore[attr-defined]

	__hash__ = None  # type: ignore[assignment]

	def __repr__(self) -> str:
		inner = ", ".join(
			f"{'+' if t.positive else '-'}{t.child!r}" for t in self._terms
		)
		return f"{type(self).__name__}([{inner}])"


class SumNode(SequenceNode):
	"""Sum family: positive terms are added, negative terms subtracted."""


class ProductNode(SequenceNode):
	"""Product family: positive terms multiply, negative terms divide."""


class AdditionNode(SumNode):
	kind: ClassVar[NodeKind] = NodeKind.ADDITION

	def accept(self, operation: ExpressionOperation) -> None:
		operation.visit_addition(self)


class SubtractionNode(SumNode):
	kind: ClassVar[NodeKind] = NodeKind.SUBTRACTION

	def accept(self, operation: ExpressionOperation) -> None:
		operation.visit_subtraction(self)


class MultiplicationNode(ProductNode):
	kind: ClassVar[NodeKind] = NodeKind.MULTIPLICATION

	def accept(self, operation: ExpressionOperation) -> None:
		operation.visit_multiplication(self)


class DivisionNode(ProductNode):
	kind: ClassVar[NodeKind] = NodeKind.DIVISION

	def accept(self, operation: ExpressionOperation) -> None:
		operation.visit_division(self)


@dataclass(frozen=True, eq=True)
class ExponentiationNode(ExpressionNode):
	base: ExpressionNode
	exponent: ExpressionNode

	kind: ClassVar[NodeKind] = NodeKind.EXPONENTIATION

	def children(self) -> Tuple[ExpressionNode, ...]:
		return (self.base, self.exponent)

	def accept(self, operation: ExpressionOperation) -> None:
		operation.visit_exponentiation(self)


@dataclass(frozen=True, eq=True)
class FunctionNode(ExpressionNode):
	function: FunctionKind
	argument: ExpressionNode

	kind: ClassVar[NodeKind] = NodeKind.FUNCTION

	def children(self) -> Tuple[ExpressionNode, ...]:
		return (self.argument,)

	def accept(self, operation: ExpressionOperation) -> None:
		operation.visit_function(self)


__all__ = [
	"AdditionNode",
	"ConstantNode",
	"DivisionNode",
	"ExponentiationNode",
	"ExpressionNode",
	"FunctionKind",
	"FunctionNode",
	"MultiplicationNode",
	"NodeKind",
	"PRODUCT_KINDS",
	"ProductNode",
	"SUM_KINDS",
	"SequenceNode",
	"SubtractionNode",
	"SumNode",
	"Term",
	"VariableNode",
]
