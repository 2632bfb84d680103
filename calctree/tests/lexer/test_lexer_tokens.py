# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
import pytest

from calctree.errors import TokenizeError
from calctree.lexer import tokenize
from calctree.tokens import TokenKind


def _kinds(text: str) -> list:
	return [t.kind for t in tokenize(text)]


def test_tokenize_operators_and_brackets() -> None:
	assert _kinds("(1+2)*3/4^5-6") == [
		TokenKind.OPEN_BRACKET,
		TokenKind.NUMBER,
		TokenKind.PLUS,
		TokenKind.NUMBER,
		TokenKind.CLOSE_BRACKET,
		TokenKind.MULT,
		TokenKind.NUMBER,
		TokenKind.DIV,
		TokenKind.NUMBER,
		TokenKind.RAISED,
		TokenKind.NUMBER,
		TokenKind.MINUS,
		TokenKind.NUMBER,
		TokenKind.END,
	]


def test_tokenize_records_offsets_and_skips_whitespace() -> None:
	tokens = tokenize("  x1 *  2.5")
	assert [(t.lexeme, t.position) for t in tokens] == [("x1", 2), ("*", 5), ("2.5", 8), ("", 11)]


def test_end_token_sits_after_last_character() -> None:
	tokens = tokenize("")
	assert len(tokens) == 1
	assert tokens[0].kind is TokenKind.END
	assert tokens[0].position == 0


@pytest.mark.parametrize("text", ["12", "1.5", ".5", "2.", "1e-3", "6.02E23"])
def test_number_forms(text: str) -> None:
	tokens = tokenize(text)
	assert tokens[0].kind is TokenKind.NUMBER
	assert tokens[0].lexeme == text
	assert tokens[1].kind is TokenKind.END


def test_function_names_are_classified() -> None:
	tokens = tokenize("sin cos x log2 sinx")
	assert [(t.kind, t.lexeme) for t in tokens[:-1]] == [
		(TokenKind.FUNCTION, "sin"),
		(TokenKind.FUNCTION, "cos"),
		(TokenKind.VARIABLE, "x"),
		(TokenKind.FUNCTION, "log2"),
		(TokenKind.VARIABLE, "sinx"),
	]


def test_unknown_character_reports_offset() -> None:
	with pytest.raises(TokenizeError, match="unexpected character '#'") as info:
		tokenize("1 + #")
	assert info.value.position == 4
	assert info.value.code == "E-LEX-UNEXPECTED-CHAR"
