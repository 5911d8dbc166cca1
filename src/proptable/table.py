"""
Truth Table Calculation.

Ties the pipeline together:
    raw text -> compiled expressions -> variables -> assignments -> rows

Everything here is recomputed from scratch for each input. Nothing is
cached between calls; a caller that wants the most recent table keeps it
(see proptable.session.TableStore).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from proptable.display import GlyphStyle, format_display
from proptable.errors import EvaluationError, VariableLimitError
from proptable.evaluator import bind_assignment, evaluate, substitute_assignment
from proptable.parser import parse_expression
from proptable.translator import compile_statement, split_statements

logger = logging.getLogger(__name__)

_WORD_RE = re.compile(r"\w+")
_BINARY_DIGITS_RE = re.compile(r"[01]+")


@dataclass(frozen=True)
class TruthTable:
    """
    A complete truth table.

    Properties:
        variables: Free variables, in order of first appearance
        statements: The logic statements as entered (stripped)
        expressions: Compiled canonical expression per statement
        rows: One tuple per assignment: the assignment values followed by
            one result per statement

    Example:
        "p -> q" gives
            variables   = ("p", "q")
            statements  = ("p -> q",)
            expressions = ("!(p) || (q)",)
            rows        = ((True, True, True), (True, False, False),
                           (False, True, True), (False, False, True))
    """

    variables: Tuple[str, ...]
    statements: Tuple[str, ...]
    expressions: Tuple[str, ...]
    rows: Tuple[Tuple[bool, ...], ...]

    @property
    def headers(self) -> Tuple[str, ...]:
        """Variables followed by statements."""
        return self.variables + self.statements

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def assignments(self) -> List[Tuple[bool, ...]]:
        width = len(self.variables)
        return [row[:width] for row in self.rows]

    @property
    def results(self) -> List[Tuple[bool, ...]]:
        width = len(self.variables)
        return [row[width:] for row in self.rows]

    def column(self, key: Union[int, str]) -> List[bool]:
        """
        Return one column, by position or by header text.

        Raises:
            KeyError: If no header matches `key`
        """
        if isinstance(key, str):
            if key not in self.headers:
                raise KeyError(f"No column named {key!r}")
            key = self.headers.index(key)
        return [row[key] for row in self.rows]

    def display_headers(self, glyphs: GlyphStyle = GlyphStyle.UNICODE) -> List[str]:
        """Headers with operators rendered as display glyphs, statements read as typed."""
        return list(self.variables) + [
            format_display(statement, glyphs, statement=True)
            for statement in self.statements
        ]


def extract_variables(expressions: Sequence[str]) -> List[str]:
    """
    Find the free variables of compiled expressions.

    Any run of word characters that is not a 0/1 literal is a variable:
    operator words are already translated away by compilation. Names are
    deduplicated case-insensitively and kept in order of first appearance.

    Must only be called on compiled expressions.
    """
    seen = set()
    variables = []
    for word in _WORD_RE.findall(",".join(expressions)):
        if _BINARY_DIGITS_RE.fullmatch(word):
            continue
        key = word.casefold()
        if key not in seen:
            seen.add(key)
            variables.append(word)
    return variables


def enumerate_assignments(count: int) -> List[Tuple[bool, ...]]:
    """
    Every assignment of True/False to `count` ordered variables.

    Rows follow binary counting with the first variable most significant
    and True before False; for two variables:
        (T, T), (T, F), (F, T), (F, F)

    Zero variables give a single empty assignment.
    """
    columns = []
    for i in range(count):
        # Each value repeats for inner_freq rows, the pattern repeats outer_freq times
        inner_freq = 2 ** (count - i - 1)
        outer_freq = 2 ** i
        column = ([True] * inner_freq + [False] * inner_freq) * outer_freq
        columns.append(column)

    return [tuple(column[x] for column in columns) for x in range(2 ** count)]


def compute_truth_table(text: str, max_variables: Optional[int] = None) -> TruthTable:
    """
    Compute the truth table of comma-separated logic statements.

    Args:
        text: Statements, e.g. "p and q, p -> q"
        max_variables: Optional upper bound on the number of variables

    Returns:
        TruthTable

    Raises:
        EvaluationError: On the first statement that is not valid logic.
            `offending_expression` holds that statement's compiled text with
            the first row's values substituted in. No partial table is
            returned.
        VariableLimitError: If more than `max_variables` variables appear
    """
    statements = split_statements(text)
    expressions = [compile_statement(statement) for statement in statements]
    for statement, expression in zip(statements, expressions):
        logger.debug("Compiled %r -> %r", statement, expression)

    variables = extract_variables(expressions)
    if max_variables is not None and len(variables) > max_variables:
        raise VariableLimitError(
            f"{len(variables)} variables exceed the limit of {max_variables}",
            ", ".join(variables),
        )

    assignments = enumerate_assignments(len(variables))
    logger.debug("%d variables, %d rows", len(variables), len(assignments))

    # Syntax does not depend on the row, so a malformed expression is
    # reported against the first row.
    trees = []
    for expression in expressions:
        try:
            trees.append(parse_expression(expression))
        except EvaluationError as e:
            offending = substitute_assignment(expression, variables, assignments[0])
            raise EvaluationError(e.message, offending) from e

    rows = []
    for assignment in assignments:
        env = bind_assignment(variables, assignment)
        results = []
        for expression, tree in zip(expressions, trees):
            try:
                results.append(evaluate(tree, env))
            except EvaluationError as e:
                offending = substitute_assignment(expression, variables, assignment)
                raise EvaluationError(e.message, offending) from e
        rows.append(assignment + tuple(results))

    return TruthTable(
        variables=tuple(variables),
        statements=tuple(statements),
        expressions=tuple(expressions),
        rows=tuple(rows),
    )


__all__ = [
    "TruthTable",
    "extract_variables",
    "enumerate_assignments",
    "compute_truth_table",
]
