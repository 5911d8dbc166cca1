"""
Tests for the canonical expression parser.

These tests verify:
    - Precedence: ! over && over || over == and ^
    - Left association within a level
    - Parentheses override precedence
    - Malformed input raises EvaluationError carrying the text
"""

import pytest
from proptable.errors import EvaluationError
from proptable.expressions import (
    BinaryExpression,
    BinaryOperator,
    VariableReference,
    Literal,
    UnaryExpression,
    UnaryOperator,
)
from proptable.parser import parse_expression, RESERVED_WORDS


P = VariableReference("p")
Q = VariableReference("q")
R = VariableReference("r")


def _not(expr):
    return UnaryExpression(UnaryOperator.NOT, expr)


class TestPrimary:
    """Test atoms."""

    def test_variable(self):
        assert parse_expression("p") == P

    def test_literals(self):
        assert parse_expression("1") == Literal(True)
        assert parse_expression("0") == Literal(False)

    def test_identifier_with_digits(self):
        assert parse_expression("x1") == VariableReference("x1")

    def test_parenthesized(self):
        assert parse_expression("((p))") == P


class TestPrecedence:
    """Test operator precedence and association."""

    def test_and_binds_tighter_than_or(self):
        expr = parse_expression("p || q && r")
        assert expr == BinaryExpression(
            BinaryOperator.OR, P, BinaryExpression(BinaryOperator.AND, Q, R)
        )

    def test_or_binds_tighter_than_iff(self):
        expr = parse_expression("p || q == r")
        assert expr == BinaryExpression(
            BinaryOperator.IFF, BinaryExpression(BinaryOperator.OR, P, Q), R
        )

    def test_xor_and_iff_share_lowest_level(self):
        expr = parse_expression("p ^ q == r")
        assert expr == BinaryExpression(
            BinaryOperator.IFF, BinaryExpression(BinaryOperator.XOR, P, Q), R
        )

    def test_not_binds_tightest(self):
        expr = parse_expression("!p && q")
        assert expr == BinaryExpression(BinaryOperator.AND, _not(P), Q)

    def test_double_negation(self):
        assert parse_expression("!!p") == _not(_not(P))

    def test_left_association(self):
        expr = parse_expression("p && q && r")
        assert expr == BinaryExpression(
            BinaryOperator.AND, BinaryExpression(BinaryOperator.AND, P, Q), R
        )

    def test_parentheses_override(self):
        expr = parse_expression("(p || q) && r")
        assert expr == BinaryExpression(
            BinaryOperator.AND, BinaryExpression(BinaryOperator.OR, P, Q), R
        )

    def test_whitespace_optional(self):
        assert parse_expression("!(p)||(q)") == parse_expression("!(p) || (q)")


class TestMalformed:
    """Test parse failures."""

    @pytest.mark.parametrize("text", [
        "",
        "   ",
        "p &&",
        "&& p",
        "(p",
        "p)",
        "()",
        "!(p) || ()",
        "p q",
        "p $ q",
        "p -> q",
        "10",
    ])
    def test_malformed_raises(self, text):
        with pytest.raises(EvaluationError) as exc_info:
            parse_expression(text)
        assert exc_info.value.offending_expression == text

    @pytest.mark.parametrize("word", ["and", "OR", "Xor", "then", "true"])
    def test_reserved_words_rejected(self, word):
        with pytest.raises(EvaluationError, match="Reserved word"):
            parse_expression(f"p && {word}")

    def test_reserved_words_cover_operator_words(self):
        assert {"and", "or", "not", "then", "xor", "true", "false"} <= RESERVED_WORDS
