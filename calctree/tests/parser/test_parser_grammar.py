# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from calctree.parser import parse
from calctree.traversal import check_tree
from calctree.tree import (
	AdditionNode,
	ConstantNode,
	DivisionNode,
	ExponentiationNode,
	FunctionKind,
	FunctionNode,
	MultiplicationNode,
	NodeKind,
	SubtractionNode,
	Term,
	VariableNode,
)


def _c(v: float) -> ConstantNode:
	return ConstantNode(float(v))


def test_parse_single_number(tok) -> None:
	assert parse(tok(("NUMBER", "1"))) == _c(1)


def test_parse_add_two(tok) -> None:
	tree = parse(tok(("NUMBER", "1"), ("PLUS", "+"), ("NUMBER", "2")))
	assert tree == AdditionNode.of([Term(_c(1)), Term(_c(2))])


def test_sum_chain_folds_into_one_node(tree_of) -> None:
	tree = tree_of("a+b-c")
	assert tree.kind is NodeKind.ADDITION
	assert [(t.positive, t.child) for t in tree.terms] == [
		(True, VariableNode("a")),
		(True, VariableNode("b")),
		(False, VariableNode("c")),
	]


def test_chain_kind_follows_opening_operator(tree_of) -> None:
	tree = tree_of("6-2-3")
	assert tree == SubtractionNode.of([Term(_c(6)), Term(_c(2), False), Term(_c(3), False)])
	assert tree_of("6-2+3").kind is NodeKind.SUBTRACTION


def test_product_chain_folds_into_one_node(tree_of) -> None:
	tree = tree_of("a*b/c")
	assert tree == MultiplicationNode.of(
		[Term(VariableNode("a")), Term(VariableNode("b")), Term(VariableNode("c"), False)]
	)
	assert tree_of("a/b*c") == DivisionNode.of(
		[Term(VariableNode("a")), Term(VariableNode("b"), False), Term(VariableNode("c"))]
	)


def test_product_binds_tighter_than_sum(tree_of) -> None:
	tree = tree_of("1+2*3")
	assert tree == AdditionNode.of([Term(_c(1)), Term(MultiplicationNode.of([Term(_c(2)), Term(_c(3))]))])


def test_exponent_is_right_associative(tree_of) -> None:
	tree = tree_of("a^b^c")
	assert tree == ExponentiationNode(
		VariableNode("a"),
		ExponentiationNode(VariableNode("b"), VariableNode("c")),
	)


def test_leading_minus_is_a_single_negative_term(tree_of) -> None:
	assert tree_of("-x") == SubtractionNode(VariableNode("x"), positive=False)
	assert tree_of("+x") == VariableNode("x")


def test_leading_minus_applies_to_whole_product(tree_of) -> None:
	tree = tree_of("-a*b")
	assert tree == SubtractionNode(
		MultiplicationNode.of([Term(VariableNode("a")), Term(VariableNode("b"))]),
		positive=False,
	)


def test_leading_minus_then_chain_extends_same_node(tree_of) -> None:
	tree = tree_of("-a+b")
	assert tree == SubtractionNode.of([Term(VariableNode("a"), False), Term(VariableNode("b"))])


def test_minus_in_exponent_negates_only_exponent(tree_of) -> None:
	tree = tree_of("2^-x")
	assert tree == ExponentiationNode(_c(2), SubtractionNode(VariableNode("x"), positive=False))


def test_signed_factor_after_multiply(tree_of) -> None:
	tree = tree_of("2*-3")
	assert tree == MultiplicationNode.of([Term(_c(2)), Term(SubtractionNode(_c(3), positive=False))])


def test_functions_nest_without_brackets(tree_of) -> None:
	tree = tree_of("sin cos x")
	assert tree == FunctionNode(FunctionKind.SIN, FunctionNode(FunctionKind.COS, VariableNode("x")))


def test_function_binds_tighter_than_power(tree_of) -> None:
	assert tree_of("sin x^2") == ExponentiationNode(FunctionNode(FunctionKind.SIN, VariableNode("x")), _c(2))
	assert tree_of("2^sin x") == ExponentiationNode(_c(2), FunctionNode(FunctionKind.SIN, VariableNode("x")))


def test_parse_extended_expression(tok) -> None:
	# 6*(3+sin(3.1415/2))^5
	tree = parse(
		tok(
			("NUMBER", "6"),
			("MULT", "*"),
			("OPEN_BRACKET", "("),
			("NUMBER", "3"),
			("PLUS", "+"),
			("FUNCTION", "sin"),
			("OPEN_BRACKET", "("),
			("NUMBER", "3.1415"),
			("DIV", "/"),
			("NUMBER", "2"),
			("CLOSE_BRACKET", ")"),
			("CLOSE_BRACKET", ")"),
			("RAISED", "^"),
			("NUMBER", "5"),
		)
	)
	half = DivisionNode.of([Term(_c(3.1415)), Term(_c(2), False)])
	base = AdditionNode.of([Term(_c(3)), Term(FunctionNode(FunctionKind.SIN, half))])
	expected = MultiplicationNode.of([Term(_c(6)), Term(ExponentiationNode(base, _c(5)))])
	assert tree == expected


def test_bracketed_chain_is_extended_in_place(tree_of) -> None:
	tree = tree_of("(a+b)+c")
	assert tree == AdditionNode.of([Term(VariableNode("a")), Term(VariableNode("b")), Term(VariableNode("c"))])


def test_parser_does_not_consume_caller_tokens(tok) -> None:
	tokens = tok(("NUMBER", "1"), ("PLUS", "+"), ("NUMBER", "2"))
	parse(tokens)
	assert len(tokens) == 3


def test_parsed_trees_never_share_nodes(tree_of) -> None:
	tree = tree_of("x*x + x^x - sin(x)/x")
	assert check_tree(tree) == len(list(tree.traverse()))
