# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Depth-first enumeration of expression trees.

Every operation in `calctree.ops` is driven by the same order: root before
children, children left to right (sequence terms in stored order, base before
exponent). Reversing that order puts every operator after all of its operands,
which is what the stack-based operations rely on.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List, Set

from .errors import TreeInvariantError

if TYPE_CHECKING:
	from .tree import ExpressionNode


def preorder(root: ExpressionNode) -> Iterator[ExpressionNode]:
	"""
	Yield every node under `root`, pre-order.

	Uses an explicit stack so wide or deep trees never grow the Python call
	stack. Each call returns an independent generator; the tree is only read.
	"""
	pending: List[ExpressionNode] = [root]
	while pending:
		node = pending.pop()
		yield node
		pending.extend(reversed(node.children()))


def check_tree(root: ExpressionNode) -> int:
	"""
	Verify that no node object appears at more than one position.

	Returns the node count. Raises `TreeInvariantError` on aliasing; a cycle
	is reported the first time the enumeration comes back to a node.
	"""
	seen: Set[int] = set()
	for node in preorder(root):
		if id(node) in seen:
			raise TreeInvariantError(f"node {node!r} is reachable through more than one parent")
		seen.add(id(node))
	return len(seen)


__all__ = ["check_tree", "preorder"]
