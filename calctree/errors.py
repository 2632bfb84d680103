# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Error types raised by the tokenizer, the parser and the tree operations.

Parse-time failures are user-facing: they subclass `ValueError`, carry a
stable reason code plus the offending token, and can be rendered for humans or
serialized for tooling. `TreeInvariantError` is different: it means a tree or
an operation broke an internal invariant and is never caught by the package.
"""

from __future__ import annotations

from typing import Any, Optional

from .tokens import END, Token


class ParseError(ValueError):
	"""Base class for failures that abort a `parse()` call."""

	code = "E-PARSE"

	def __init__(self, message: str, *, token: Optional[Token] = None, position: Optional[int] = None) -> None:
		super().__init__(message)
		self.message = message
		self.token = token if token is not None else END
		self.position = position if position is not None else self.token.position

	def __str__(self) -> str:
		return self.format_human()

	def format_human(self) -> str:
		if self.position < 0:
			return f"[{self.code}] {self.message}"
		return f"[{self.code}] {self.message} (at offset {self.position})"

	def to_dict(self) -> dict[str, Any]:
		return {
			"code": self.code,
			"message": self.message,
			"lexeme": self.token.lexeme,
			"position": self.position,
		}


class UnexpectedTokenError(ParseError):
	"""Lookahead matches no production at the current grammar position."""

	code = "E-PARSE-UNEXPECTED-TOKEN"


class UnexpectedEndOfInputError(ParseError):
	"""Input ended where a value or function argument was required."""

	code = "E-PARSE-UNEXPECTED-END"


class UnbalancedBracketsError(ParseError):
	"""An opening bracket was consumed but no closing bracket followed."""

	code = "E-PARSE-UNBALANCED-BRACKETS"

	def __init__(self, message: str, *, token: Optional[Token] = None, opening: Optional[Token] = None) -> None:
		super().__init__(message, token=token)
		self.opening = opening

	def to_dict(self) -> dict[str, Any]:
		out = super().to_dict()
		out["opening_position"] = self.opening.position if self.opening is not None else None
		return out


class TrailingInputError(ParseError):
	"""A complete expression was reduced but tokens remain."""

	code = "E-PARSE-TRAILING-INPUT"


class TokenizeError(ParseError):
	"""A character that cannot start any token."""

	code = "E-LEX-UNEXPECTED-CHAR"


class TreeInvariantError(RuntimeError):
	"""An expression tree or operation violated a structural invariant."""


__all__ = [
	"ParseError",
	"TokenizeError",
	"TrailingInputError",
	"TreeInvariantError",
	"UnbalancedBracketsError",
	"UnexpectedEndOfInputError",
	"UnexpectedTokenError",
]
