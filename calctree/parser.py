# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Recursive descent parser: token sequence -> expression tree.

Grammar (precedence low to high):

	expression    := signed_term sum_tail
	sum_tail      := ( ('+'|'-') term )*
	signed_term   := ('+'|'-')? term
	term          := factor term_tail
	term_tail     := ( ('*'|'/') signed_factor )*
	signed_factor := ('+'|'-')? factor
	factor        := argument ( '^' signed_factor )?
	argument      := FUNCTION argument | '(' expression ')' | value
	value         := NUMBER | VARIABLE

Sum and product chains fold into one n-ary node per precedence level instead
of a left-leaning binary chain: `1 - 2 + 3` is a single SUBTRACTION node with
terms +1, -2, +3. Exponentiation is right associative because the exponent
recurses into `signed_factor`. A leading `-` becomes a one-term SUBTRACTION
node with a negative term; there is no separate negation node.

There is no backtracking and no recovery: the first token that fits no
production raises a `ParseError` subclass and no partial tree escapes.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Type, cast

from . import tree as T
from .errors import (
	TrailingInputError,
	UnbalancedBracketsError,
	UnexpectedEndOfInputError,
	UnexpectedTokenError,
)
from .tokens import END, Token, TokenKind

_SIGNS = (TokenKind.PLUS, TokenKind.MINUS)


class _Parser:
	"""Single-use parser state: the remaining tokens and one lookahead."""

	def __init__(self, tokens: Iterable[Token]) -> None:
		self.tokens: Deque[Token] = deque(tokens)
		self.lookahead: Token = self.tokens[0] if self.tokens else END

	def advance(self) -> Token:
		"""Consume the lookahead; the END sentinel stands in once the queue is empty."""
		consumed = self.lookahead
		if self.tokens:
			self.tokens.popleft()
		self.lookahead = self.tokens[0] if self.tokens else END
		return consumed

	def at(self, kind: TokenKind) -> bool:
		return self.lookahead.kind is kind

	def parse(self) -> T.ExpressionNode:
		expr = self.expression()
		if not self.at(TokenKind.END):
			raise TrailingInputError(
				f"unexpected {self.lookahead} after a complete expression",
				token=self.lookahead,
			)
		extra = next((tok for tok in self.tokens if tok.kind is not TokenKind.END), None)
		if extra is not None:
			raise TrailingInputError(f"unexpected {extra} after end of input", token=extra)
		return expr

	def expression(self) -> T.ExpressionNode:
		return self.sum_tail(self.signed_term())

	def sum_tail(self, expr: T.ExpressionNode) -> T.ExpressionNode:
		while self.lookahead.kind in _SIGNS:
			positive = self.advance().kind is TokenKind.PLUS
			chain = _extend(expr, T.SUM_KINDS, T.AdditionNode if positive else T.SubtractionNode)
			chain._add(self.term(), positive)
			expr = chain
		return expr

	def signed_term(self) -> T.ExpressionNode:
		if self.at(TokenKind.PLUS):
			self.advance()
			return self.term()
		if self.at(TokenKind.MINUS):
			self.advance()
			return T.SubtractionNode(self.term(), positive=False)
		return self.term()

	def term(self) -> T.ExpressionNode:
		return self.term_tail(self.factor())

	def term_tail(self, expr: T.ExpressionNode) -> T.ExpressionNode:
		while self.lookahead.kind in (TokenKind.MULT, TokenKind.DIV):
			positive = self.advance().kind is TokenKind.MULT
			chain = _extend(expr, T.PRODUCT_KINDS, T.MultiplicationNode if positive else T.DivisionNode)
			chain._add(self.signed_factor(), positive)
			expr = chain
		return expr

	def signed_factor(self) -> T.ExpressionNode:
		if self.at(TokenKind.PLUS):
			self.advance()
			return self.factor()
		if self.at(TokenKind.MINUS):
			self.advance()
			return T.SubtractionNode(self.factor(), positive=False)
		return self.factor()

	def factor(self) -> T.ExpressionNode:
		base = self.argument()
		if self.at(TokenKind.RAISED):
			self.advance()
			return T.ExponentiationNode(base, self.signed_factor())
		return base

	def argument(self) -> T.ExpressionNode:
		if self.at(TokenKind.FUNCTION):
			token = self.advance()
			try:
				function = T.FunctionKind(token.lexeme)
			except ValueError:
				raise UnexpectedTokenError(f"unknown function {token}", token=token) from None
			return T.FunctionNode(function, self.argument())
		if self.at(TokenKind.OPEN_BRACKET):
			opening = self.advance()
			expr = self.expression()
			if not self.at(TokenKind.CLOSE_BRACKET):
				raise UnbalancedBracketsError(
					f"expected ')' to close the bracket at offset {opening.position}, found {self.lookahead}",
					token=self.lookahead,
					opening=opening,
				)
			self.advance()
			return expr
		return self.value()

	def value(self) -> T.ExpressionNode:
		if self.at(TokenKind.NUMBER):
			token = self.advance()
			try:
				return T.ConstantNode(float(token.lexeme))
			except ValueError:
				raise UnexpectedTokenError(f"malformed number {token}", token=token) from None
		if self.at(TokenKind.VARIABLE):
			return T.VariableNode(self.advance().lexeme)
		if self.at(TokenKind.END):
			raise UnexpectedEndOfInputError("unexpected end of input, expected a value", token=self.lookahead)
		raise UnexpectedTokenError(f"unexpected {self.lookahead}, expected a value", token=self.lookahead)


def _extend(
	expr: T.ExpressionNode,
	family: frozenset,
	new_kind: Type[T.SequenceNode],
) -> T.SequenceNode:
	"""Reuse `expr` if it already is a chain of this precedence, else start one."""
	if expr.kind in family:
		return cast(T.SequenceNode, expr)
	return new_kind(expr)


def parse(tokens: Iterable[Token]) -> T.ExpressionNode:
	"""Build an expression tree from `tokens`; the input sequence is not modified."""
	return _Parser(tokens).parse()


__all__ = ["parse"]
