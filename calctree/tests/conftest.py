# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
import math
from typing import Callable, List

import pytest

from calctree.lexer import tokenize
from calctree.parser import parse
from calctree.tokens import Token, TokenKind
from calctree.tree import ExpressionNode


@pytest.fixture
def tree_of() -> Callable[[str], ExpressionNode]:
	"""Parse expression text straight to a tree."""

	def build(text: str) -> ExpressionNode:
		return parse(tokenize(text))

	return build


@pytest.fixture
def tok() -> Callable[..., List[Token]]:
	"""
	Build a token list by hand: tok(("NUMBER", "2"), ("PLUS", "+"), ...).

	Positions are assigned from the running lexeme lengths, the way a
	tokenizer without whitespace would report them.
	"""

	def build(*pairs: tuple) -> List[Token]:
		out: List[Token] = []
		pos = 0
		for kind_name, lexeme in pairs:
			out.append(Token(TokenKind[kind_name], lexeme, pos))
			pos += len(lexeme)
		return out

	return build


@pytest.fixture
def pi() -> float:
	return math.pi
