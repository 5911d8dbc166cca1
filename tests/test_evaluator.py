"""
Tests for expression evaluation and assignment substitution.
"""

import pytest
from proptable.errors import EvaluationError
from proptable.evaluator import bind_assignment, evaluate, substitute_assignment
from proptable.expressions import (
    BinaryExpression,
    BinaryOperator,
    VariableReference,
    Literal,
    UnaryExpression,
    UnaryOperator,
)
from proptable.parser import parse_expression


class TestEvaluate:
    """Test tree evaluation."""

    @pytest.mark.parametrize("operator,table", [
        (BinaryOperator.AND, [True, False, False, False]),
        (BinaryOperator.OR, [True, True, True, False]),
        (BinaryOperator.IFF, [True, False, False, True]),
        (BinaryOperator.XOR, [False, True, True, False]),
    ])
    def test_binary_operators(self, operator, table):
        expr = BinaryExpression(operator, VariableReference("p"), VariableReference("q"))
        pairs = [(True, True), (True, False), (False, True), (False, False)]
        results = [evaluate(expr, {"p": p, "q": q}) for p, q in pairs]
        assert results == table

    def test_negation(self):
        expr = UnaryExpression(UnaryOperator.NOT, Literal(True))
        assert evaluate(expr, {}) is False

    def test_literal(self):
        assert evaluate(Literal(False), {}) is False

    def test_variable_lookup_is_case_insensitive(self):
        assert evaluate(VariableReference("P"), {"p": True}) is True

    def test_unbound_variable(self):
        with pytest.raises(EvaluationError, match="Unbound variable"):
            evaluate(VariableReference("z"), {"p": True})

    def test_unbound_variable_on_right_side_detected(self):
        """Both operands are evaluated, even when the left decides the result."""
        expr = parse_expression("0 && z")
        with pytest.raises(EvaluationError):
            evaluate(expr, {})

    def test_precedence_end_to_end(self):
        # p || (q && r), not (p || q) && r
        expr = parse_expression("p || q && r")
        assert evaluate(expr, {"p": True, "q": False, "r": False}) is True

    def test_unsupported_node(self):
        with pytest.raises(TypeError):
            evaluate(object(), {})


class TestBindAssignment:
    """Test variable binding."""

    def test_names_case_folded(self):
        assert bind_assignment(["P", "q"], (True, False)) == {"p": True, "q": False}


class TestSubstituteAssignment:
    """Test diagnostic substitution."""

    def test_substitutes_values(self):
        text = substitute_assignment("!(p) || (q)", ["p", "q"], [True, False])
        assert text == "!(true) || (false)"

    def test_case_insensitive(self):
        assert substitute_assignment("P && p", ["p"], [True]) == "true && true"

    def test_whole_words_only(self):
        assert substitute_assignment("pq && p", ["p"], [False]) == "pq && false"

    def test_no_variables(self):
        assert substitute_assignment("1 && 0", [], []) == "1 && 0"
