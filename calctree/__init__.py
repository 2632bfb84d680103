# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
calctree: parse arithmetic expressions once, evaluate them many times.

Pipeline:
  text → tokens (lexer) → expression tree (parser) → bind/evaluate (ops)
"""

from .calculator import CONSTANTS, Calculator, Formula
from .errors import (
	ParseError,
	TokenizeError,
	TrailingInputError,
	TreeInvariantError,
	UnbalancedBracketsError,
	UnexpectedEndOfInputError,
	UnexpectedTokenError,
)
from .lexer import tokenize
from .ops import bind, bind_all, evaluate, render, variable_names
from .parser import parse
from .tokens import Token, TokenKind
from .traversal import check_tree, preorder
from .tree import ExpressionNode, FunctionKind, NodeKind

__all__ = [
	"CONSTANTS",
	"Calculator",
	"ExpressionNode",
	"Formula",
	"FunctionKind",
	"NodeKind",
	"ParseError",
	"Token",
	"TokenKind",
	"TokenizeError",
	"TrailingInputError",
	"TreeInvariantError",
	"UnbalancedBracketsError",
	"UnexpectedEndOfInputError",
	"UnexpectedTokenError",
	"bind",
	"bind_all",
	"check_tree",
	"evaluate",
	"parse",
	"preorder",
	"render",
	"tokenize",
	"variable_names",
]
