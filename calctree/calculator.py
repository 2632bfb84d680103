# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Convenience layer: text in, number out.

`Calculator` collects variable bindings fluently and turns expression text
into a value in one call. `Formula` keeps the parsed tree around so a host can
rebind and re-evaluate without parsing again:

	f = Calculator().compile("x * 2")
	f.bind("x", 3).evaluate()   # 6.0
	f.bind("x", 10).evaluate()  # 20.0

A `Formula` is not safe to bind and evaluate from several threads at once;
compile one per thread or serialize access.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, List, Mapping, Optional

from .lexer import tokenize
from .ops import bind_all, evaluate, render, variable_names
from .parser import parse
from .tree import ExpressionNode

logger = logging.getLogger(__name__)

CONSTANTS: Dict[str, float] = {"pi": math.pi, "e": math.e}


class Formula:
	"""A parsed expression that can be rebound and evaluated repeatedly."""

	def __init__(self, source: str, root: ExpressionNode) -> None:
		self.source = source
		self.root = root
		self.variables: List[str] = variable_names(root)

	def bind(self, name: str, value: float) -> Formula:
		updated = bind_all(self.root, {name: value})
		if not updated:
			logger.debug("binding %s=%r matched no variable in %r", name, value, self.source)
		return self

	def bind_all(self, values: Mapping[str, float]) -> Formula:
		bind_all(self.root, values)
		return self

	def evaluate(self) -> float:
		return evaluate(self.root)

	def __str__(self) -> str:
		return render(self.root)

	def __repr__(self) -> str:
		return f"Formula({self.source!r})"


class Calculator:
	"""Fluent variable bindings plus parse-then-evaluate."""

	def __init__(self, variables: Optional[Mapping[str, float]] = None) -> None:
		self.variables: Dict[str, float] = dict(variables or {})

	def with_variable(self, name: str, value: float) -> Calculator:
		self.variables[name] = float(value)
		return self

	def with_variables(self, values: Mapping[str, float]) -> Calculator:
		for name, value in values.items():
			self.with_variable(name, value)
		return self

	def compile(self, text: str) -> Formula:
		"""Tokenize and parse `text`, then apply the pending bindings."""
		formula = Formula(text, parse(tokenize(text)))
		logger.debug("compiled %r; variables=%s", text, formula.variables)
		formula.bind_all(self.variables)
		unbound = [name for name in formula.variables if name not in self.variables]
		if unbound:
			logger.debug("unbound variables in %r read as 0: %s", text, ", ".join(unbound))
		return formula

	def calculate(self, text: str) -> float:
		value = self.compile(text).evaluate()
		logger.debug("%r = %r", text, value)
		return value


__all__ = ["CONSTANTS", "Calculator", "Formula"]
