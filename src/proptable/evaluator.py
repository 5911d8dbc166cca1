"""
Expression Evaluator.

Walks an Expression tree under one truth assignment. Variable lookup is
case-insensitive, matching how assignments are substituted into text.
"""

import re
from typing import Dict, Sequence

from proptable.errors import EvaluationError
from proptable.expressions import (
    Expression,
    BinaryExpression,
    BinaryOperator,
    VariableReference,
    Literal,
    UnaryExpression,
    UnaryOperator,
)


def bind_assignment(variables: Sequence[str], assignment: Sequence[bool]) -> Dict[str, bool]:
    """Map each variable (case-folded) to its value in `assignment`."""
    return {name.casefold(): value for name, value in zip(variables, assignment)}


def evaluate(expr: Expression, env: Dict[str, bool]) -> bool:
    """
    Evaluate an expression tree.

    Args:
        expr: Expression tree from parse_expression
        env: Truth values keyed by case-folded variable name

    Returns:
        The truth value of `expr`

    Raises:
        EvaluationError: If a variable has no value in `env`
    """
    if isinstance(expr, Literal):
        return expr.value

    if isinstance(expr, VariableReference):
        try:
            return env[expr.name.casefold()]
        except KeyError:
            raise EvaluationError(f"Unbound variable '{expr.name}'") from None

    if isinstance(expr, UnaryExpression):
        if expr.operator == UnaryOperator.NOT:
            return not evaluate(expr.operand, env)

    elif isinstance(expr, BinaryExpression):
        left = evaluate(expr.left, env)
        # No short-circuit: both sides are always checked for unbound names
        right = evaluate(expr.right, env)
        if expr.operator == BinaryOperator.AND:
            return left and right
        if expr.operator == BinaryOperator.OR:
            return left or right
        if expr.operator == BinaryOperator.IFF:
            return left == right
        if expr.operator == BinaryOperator.XOR:
            return left != right

    raise TypeError(f"Unsupported Expression type: {type(expr)}")


def substitute_assignment(text: str, variables: Sequence[str], assignment: Sequence[bool]) -> str:
    """
    Replace every whole-word variable in `text` with its literal value.

    Used to show which concrete row an expression failed on.

    Example:
        substitute_assignment("!(p) || (q)", ["p", "q"], [True, False])
        -> "!(true) || (false)"
    """
    for name, value in zip(variables, assignment):
        pattern = re.compile(rf"\b{re.escape(name)}\b", re.IGNORECASE)
        text = pattern.sub("true" if value else "false", text)
    return text


__all__ = ["evaluate", "bind_assignment", "substitute_assignment"]
