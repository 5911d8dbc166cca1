"""
Table Analyzer: read-only diagnostics of computed truth tables.

This module provides lightweight analysis of TruthTable objects:
    - Classification of each statement (tautology, contradiction, contingent)
    - Variables that never influence a statement's result
    - Equivalent statements and entailments between statements
    - Joint satisfiability of all statements
    - Expression complexity metrics

IMPORTANT: It does NOT modify the table. It only produces reports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Set, Tuple

from proptable.expressions import (
    Expression,
    BinaryExpression,
    VariableReference,
    Literal,
    UnaryExpression,
)
from proptable.parser import parse_expression
from proptable.table import TruthTable

# Tables above this many rows get a size warning.
LARGE_TABLE_ROWS = 4096


class Classification(Enum):
    TAUTOLOGY = "tautology"
    CONTRADICTION = "contradiction"
    CONTINGENT = "contingent"


@dataclass
class ExpressionMetrics:
    """Metrics about a single expression tree."""
    depth: int = 0
    node_count: int = 0
    variable_references: Set[str] = field(default_factory=set)


def _analyze_expression(expr: Expression) -> ExpressionMetrics:
    """Recursively analyze an expression tree."""
    metrics = ExpressionMetrics(node_count=1)

    if isinstance(expr, BinaryExpression):
        left = _analyze_expression(expr.left)
        right = _analyze_expression(expr.right)
        metrics.depth = 1 + max(left.depth, right.depth)
        metrics.node_count += left.node_count + right.node_count
        metrics.variable_references.update(left.variable_references)
        metrics.variable_references.update(right.variable_references)

    elif isinstance(expr, UnaryExpression):
        operand = _analyze_expression(expr.operand)
        metrics.depth = 1 + operand.depth
        metrics.node_count += operand.node_count
        metrics.variable_references.update(operand.variable_references)

    elif isinstance(expr, VariableReference):
        metrics.variable_references.add(expr.name.casefold())

    elif isinstance(expr, Literal):
        # Literals don't reference variables
        pass

    return metrics


def _irrelevant_variables(table: TruthTable, column: List[bool]) -> List[str]:
    """Variables whose value never changes `column`."""
    count = len(table.variables)
    irrelevant = []
    for i, name in enumerate(table.variables):
        # Rows x and x + step differ only in variable i
        step = 2 ** (count - i - 1)
        pairs = (
            (x, x + step)
            for x in range(len(column))
            if (x // step) % 2 == 0
        )
        if all(column[a] == column[b] for a, b in pairs):
            irrelevant.append(name)
    return irrelevant


@dataclass
class StatementReport:
    """Analysis of one statement's result column."""
    statement: str
    expression: str
    classification: Classification
    true_count: int = 0
    false_count: int = 0
    depth: int = 0
    node_count: int = 0
    irrelevant_variables: List[str] = field(default_factory=list)


@dataclass
class TableReport:
    """Analysis report for a whole truth table."""

    total_variables: int = 0
    total_statements: int = 0
    total_rows: int = 0

    statements: List[StatementReport] = field(default_factory=list)

    # Statement indices with identical result columns (groups of 2 or more)
    equivalent_groups: List[List[int]] = field(default_factory=list)
    # (i, j): wherever statement i is true, statement j is true
    entailments: List[Tuple[int, int]] = field(default_factory=list)
    # Some row makes every statement true
    jointly_satisfiable: bool = False
    satisfying_rows: List[int] = field(default_factory=list)

    max_expression_depth: int = 0
    total_expression_nodes: int = 0

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)

    def by_classification(self, classification: Classification) -> List[str]:
        return [s.statement for s in self.statements if s.classification == classification]


def analyze_table(table: TruthTable) -> TableReport:
    """
    Perform analysis of a TruthTable.

    Checks for:
    - Tautologies, contradictions and contingent statements
    - Variables that do not affect a statement
    - Equivalence and entailment between statements
    - Whether all statements can be true at once

    Returns a TableReport with metrics and warnings.
    """
    report = TableReport(
        total_variables=len(table.variables),
        total_statements=len(table.statements),
        total_rows=table.row_count,
    )

    width = len(table.variables)
    columns = [table.column(width + j) for j in range(len(table.statements))]

    # =========================================================================
    # 1. PER-STATEMENT ANALYSIS
    # =========================================================================

    for statement, expression, column in zip(table.statements, table.expressions, columns):
        true_count = sum(column)
        if true_count == len(column):
            classification = Classification.TAUTOLOGY
        elif true_count == 0:
            classification = Classification.CONTRADICTION
        else:
            classification = Classification.CONTINGENT

        metrics = _analyze_expression(parse_expression(expression))
        referenced = metrics.variable_references
        irrelevant = [
            name for name in _irrelevant_variables(table, column)
            if name.casefold() in referenced
        ]

        report.statements.append(StatementReport(
            statement=statement,
            expression=expression,
            classification=classification,
            true_count=true_count,
            false_count=len(column) - true_count,
            depth=metrics.depth,
            node_count=metrics.node_count,
            irrelevant_variables=irrelevant,
        ))

        report.max_expression_depth = max(report.max_expression_depth, metrics.depth)
        report.total_expression_nodes += metrics.node_count

        if classification == Classification.CONTRADICTION:
            report.add_warning(f"Statement '{statement}' is a contradiction")
        if irrelevant:
            report.add_warning(
                f"Statement '{statement}' does not depend on: {', '.join(irrelevant)}"
            )

    # =========================================================================
    # 2. RELATIONS BETWEEN STATEMENTS
    # =========================================================================

    groups: Dict[Tuple[bool, ...], List[int]] = {}
    for j, column in enumerate(columns):
        groups.setdefault(tuple(column), []).append(j)
    report.equivalent_groups = [g for g in groups.values() if len(g) > 1]

    for i, left in enumerate(columns):
        for j, right in enumerate(columns):
            if i != j and all(b for a, b in zip(left, right) if a):
                report.entailments.append((i, j))

    report.satisfying_rows = [
        x for x in range(table.row_count)
        if all(column[x] for column in columns)
    ]
    report.jointly_satisfiable = bool(report.satisfying_rows)

    if len(table.statements) > 1 and not report.jointly_satisfiable:
        report.add_warning("Statements cannot all be true at once")

    if table.row_count > LARGE_TABLE_ROWS:
        report.add_warning(
            f"Table has {table.row_count} rows ({len(table.variables)} variables)"
        )

    return report


__all__ = [
    "Classification",
    "ExpressionMetrics",
    "StatementReport",
    "TableReport",
    "analyze_table",
]
