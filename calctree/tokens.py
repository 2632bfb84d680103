# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Token stream consumed by the parser.

Tokens are produced by `calctree.lexer.tokenize` but any producer that honours
this shape can feed the parser directly (tests build token lists by hand).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
	END = auto()
	PLUS = auto()
	MINUS = auto()
	MULT = auto()
	DIV = auto()
	RAISED = auto()
	FUNCTION = auto()
	OPEN_BRACKET = auto()
	CLOSE_BRACKET = auto()
	NUMBER = auto()
	VARIABLE = auto()


@dataclass(frozen=True)
class Token:
	"""A lexeme with its kind and character offset in the source text."""

	kind: TokenKind
	lexeme: str
	position: int

	def __str__(self) -> str:
		if self.kind is TokenKind.END:
			return "end of input"
		return f"'{self.lexeme}'"


END = Token(TokenKind.END, "", -1)


__all__ = ["END", "Token", "TokenKind"]
