"""
Canonical Expression Parser (Layer 2: Canonical Text -> Expression Tree).

Grammar, loosest binding first:
    equivalence := disjunction (('==' | '^') disjunction)*
    disjunction := conjunction ('||' conjunction)*
    conjunction := unary ('&&' unary)*
    unary       := '!' unary | primary
    primary     := '0' | '1' | identifier | '(' equivalence ')'

Operators of the same level associate to the left.
"""

import re
from typing import List

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


# Operator words that must never be read as variable names. Compilation
# translates every whole-word use, so only text that bypasses the
# compiler can reach this check; "andy" or "notion" are plain variables.
RESERVED_WORDS = frozenset({"and", "or", "not", "then", "xor", "true", "false"})

_TOKEN_RE = re.compile(r"\s*(?:(&&|\|\||==|!|\^|\(|\))|(\w+)|(\S))")

_LOWEST_OPERATORS = {
    "==": BinaryOperator.IFF,
    "^": BinaryOperator.XOR,
}


def _tokenize(text: str) -> List[str]:
    """Tokenize canonical expression text."""
    tokens = []
    for match in _TOKEN_RE.finditer(text):
        operator, word, stray = match.groups()
        if stray is not None:
            raise EvaluationError(f"Unexpected character '{stray}'", text)
        if operator is not None:
            tokens.append(operator)
        elif word is not None:
            tokens.append(word)
    if not tokens:
        raise EvaluationError("Empty expression", text)
    return tokens


def _parse_equivalence(tokens: List[str], pos: int) -> tuple:
    """Parse == and ^ (lowest precedence)."""
    left, pos = _parse_disjunction(tokens, pos)

    while pos < len(tokens) and tokens[pos] in _LOWEST_OPERATORS:
        operator = _LOWEST_OPERATORS[tokens[pos]]
        right, pos = _parse_disjunction(tokens, pos + 1)
        left = BinaryExpression(operator, left, right)

    return left, pos


def _parse_disjunction(tokens: List[str], pos: int) -> tuple:
    """Parse || expression."""
    left, pos = _parse_conjunction(tokens, pos)

    while pos < len(tokens) and tokens[pos] == "||":
        right, pos = _parse_conjunction(tokens, pos + 1)
        left = BinaryExpression(BinaryOperator.OR, left, right)

    return left, pos


def _parse_conjunction(tokens: List[str], pos: int) -> tuple:
    """Parse && expression."""
    left, pos = _parse_unary(tokens, pos)

    while pos < len(tokens) and tokens[pos] == "&&":
        right, pos = _parse_unary(tokens, pos + 1)
        left = BinaryExpression(BinaryOperator.AND, left, right)

    return left, pos


def _parse_unary(tokens: List[str], pos: int) -> tuple:
    """Parse ! expression."""
    if pos < len(tokens) and tokens[pos] == "!":
        operand, pos = _parse_unary(tokens, pos + 1)
        return UnaryExpression(UnaryOperator.NOT, operand), pos

    return _parse_primary(tokens, pos)


def _parse_primary(tokens: List[str], pos: int) -> tuple:
    """Parse literal, variable, or parenthesized expression."""
    if pos >= len(tokens):
        raise EvaluationError("Unexpected end of expression")

    token = tokens[pos]

    if token == "(":
        if pos + 1 < len(tokens) and tokens[pos + 1] == ")":
            raise EvaluationError("Empty parentheses")
        expr, pos = _parse_equivalence(tokens, pos + 1)
        if pos >= len(tokens) or tokens[pos] != ")":
            raise EvaluationError("Missing closing parenthesis")
        return expr, pos + 1

    if token == "1":
        return Literal(True), pos + 1
    if token == "0":
        return Literal(False), pos + 1

    if re.fullmatch(r"\w+", token):
        if re.fullmatch(r"[01]+", token):
            raise EvaluationError(f"Invalid literal '{token}'")
        if token.lower() in RESERVED_WORDS:
            raise EvaluationError(f"Reserved word '{token}' cannot be used as a variable")
        return VariableReference(token), pos + 1

    raise EvaluationError(f"Unexpected token '{token}'")


def parse_expression(text: str) -> Expression:
    """
    Parse a compiled (canonical) expression into an Expression tree.

    Args:
        text: Canonical expression, e.g. "!(p) || (q)"

    Returns:
        Expression tree

    Raises:
        EvaluationError: If the text is not valid canonical syntax.
            The error carries `text` as its offending expression.
    """
    try:
        tokens = _tokenize(text)
        expr, pos = _parse_equivalence(tokens, 0)
        if pos < len(tokens):
            raise EvaluationError(f"Unexpected token '{tokens[pos]}'")
    except EvaluationError as e:
        raise EvaluationError(e.message, text) from None

    return expr


__all__ = [
    "parse_expression",
    "RESERVED_WORDS",
]
