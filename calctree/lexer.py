# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Tokenizer: expression text -> list of `Token`.

Character scanning is delegated to a lark `basic` lexer built from
`grammar.lark`. This module maps lark terminals onto `TokenKind` and splits
identifiers into function names and variables.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from lark import Lark
from lark.exceptions import UnexpectedCharacters

from .errors import TokenizeError
from .tokens import Token, TokenKind
from .tree import FunctionKind

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

_LEXER = Lark(_GRAMMAR_SRC, parser="lalr", lexer="basic", start="start")

_TERMINAL_KINDS: Dict[str, TokenKind] = {
	"NUMBER": TokenKind.NUMBER,
	"PLUS": TokenKind.PLUS,
	"MINUS": TokenKind.MINUS,
	"STAR": TokenKind.MULT,
	"SLASH": TokenKind.DIV,
	"CARET": TokenKind.RAISED,
	"LPAR": TokenKind.OPEN_BRACKET,
	"RPAR": TokenKind.CLOSE_BRACKET,
}

FUNCTION_NAMES = frozenset(kind.value for kind in FunctionKind)


def _identifier_kind(name: str) -> TokenKind:
	return TokenKind.FUNCTION if name in FUNCTION_NAMES else TokenKind.VARIABLE


def tokenize(text: str) -> List[Token]:
	"""
	Split `text` into tokens terminated by an END token at `len(text)`.

	Raises `TokenizeError` at the first character no terminal can start with.
	"""
	tokens: List[Token] = []
	try:
		for tok in _LEXER.lex(text):
			if tok.type == "NAME":
				kind = _identifier_kind(tok.value)
			else:
				kind = _TERMINAL_KINDS[tok.type]
			tokens.append(Token(kind, str(tok.value), tok.start_pos))
	except UnexpectedCharacters as err:
		char = text[err.pos_in_stream]
		raise TokenizeError(f"unexpected character '{char}'", position=err.pos_in_stream) from err
	tokens.append(Token(TokenKind.END, "", len(text)))
	return tokens


__all__ = ["FUNCTION_NAMES", "tokenize"]
