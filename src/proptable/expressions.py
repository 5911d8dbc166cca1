"""
Expression Tree for proptable

Compiled statements are parsed into immutable trees before evaluation.
Each truth table row is then a walk over the tree with a variable binding,
never a reinterpretation of text.

This ensures:
    - No caller-controlled text is executed as code
    - Operator precedence is decided once, at parse time
    - Trees can be inspected (depth, size, variables) by the analyzer

ARCHITECTURAL RULE:
    Nodes are structure only.
    Evaluation lives in proptable.evaluator.
"""

from abc import ABC
from dataclasses import dataclass
from enum import Enum


class Expression(ABC):
    """
    Base class for all expression tree nodes.

    It exists to provide type-safety for the expression hierarchy.

    DO NOT:
        - Add evaluation logic here (belongs in evaluator)
        - Add display logic here (belongs in display)
    """
    pass


class BinaryOperator(Enum):
    """
    Binary connectives of the canonical grammar.

    Values are the canonical tokens produced by the compiler.
    Implication never appears here: it is eliminated before parsing.
    """

    AND = "&&"
    OR = "||"
    IFF = "=="
    XOR = "^"


class UnaryOperator(Enum):
    """Unary connectives of the canonical grammar."""
    NOT = "!"


@dataclass(frozen=True)
class Literal(Expression):
    """
    A constant truth value.

    Example:
        1  ->  Literal(True)
        0  ->  Literal(False)
    """

    value: bool


@dataclass(frozen=True)
class VariableReference(Expression):
    """
    References a free variable of the truth table.

    Properties:
        name: Identifier as spelled in the statement

    IMPORTANT:
        Binding is case-insensitive; "P" and "p" are the same variable.
    """

    name: str


@dataclass(frozen=True)
class UnaryExpression(Expression):
    """
    Represents a negation.

    Example:
        !(p && q)

    Becomes:
        UnaryExpression(
            operator=UnaryOperator.NOT,
            operand=BinaryExpression(BinaryOperator.AND, ...)
        )
    """

    operator: UnaryOperator
    operand: Expression


@dataclass(frozen=True)
class BinaryExpression(Expression):
    """
    Represents a binary connective.

    Example:
        p && q || r

    Becomes:
        BinaryExpression(
            operator=BinaryOperator.OR,
            left=BinaryExpression(
                operator=BinaryOperator.AND,
                left=VariableReference("p"),
                right=VariableReference("q")
            ),
            right=VariableReference("r")
        )

    Properties:
        operator: BinaryOperator enum
        left: Left operand (Expression)
        right: Right operand (Expression)
    """

    operator: BinaryOperator
    left: Expression
    right: Expression
