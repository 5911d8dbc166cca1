"""
Serialization helpers for truth tables and analysis reports.

Provides lossless JSON/YAML round-trip of TruthTable via an intermediate
dict representation. Reports are exported one way only.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from proptable.analyzer import StatementReport, TableReport
from proptable.table import TruthTable


def table_to_dict(t: TruthTable) -> Dict[str, Any]:
    return {
        "variables": list(t.variables),
        "statements": list(t.statements),
        "expressions": list(t.expressions),
        "rows": [list(row) for row in t.rows],
    }


def table_from_dict(d: Dict[str, Any]) -> TruthTable:
    variables = tuple(d.get("variables", []))
    statements = tuple(d.get("statements", []))
    expressions = tuple(d.get("expressions", []))
    if len(expressions) != len(statements):
        raise ValueError(
            f"{len(statements)} statements but {len(expressions)} expressions"
        )

    width = len(variables) + len(statements)
    rows = []
    for row in d.get("rows", []):
        if len(row) != width:
            raise ValueError(f"Row {row!r} does not have {width} values")
        rows.append(tuple(bool(value) for value in row))

    return TruthTable(
        variables=variables,
        statements=statements,
        expressions=expressions,
        rows=tuple(rows),
    )


def statement_report_to_dict(s: StatementReport) -> Dict[str, Any]:
    return {
        "statement": s.statement,
        "expression": s.expression,
        "classification": s.classification.value,
        "true_count": s.true_count,
        "false_count": s.false_count,
        "depth": s.depth,
        "node_count": s.node_count,
        "irrelevant_variables": list(s.irrelevant_variables),
    }


def report_to_dict(r: TableReport) -> Dict[str, Any]:
    return {
        "total_variables": r.total_variables,
        "total_statements": r.total_statements,
        "total_rows": r.total_rows,
        "statements": [statement_report_to_dict(s) for s in r.statements],
        "equivalent_groups": [list(g) for g in r.equivalent_groups],
        "entailments": [list(e) for e in r.entailments],
        "jointly_satisfiable": r.jointly_satisfiable,
        "satisfying_rows": list(r.satisfying_rows),
        "max_expression_depth": r.max_expression_depth,
        "total_expression_nodes": r.total_expression_nodes,
        "warnings": list(r.warnings),
    }


def table_to_json(t: TruthTable) -> str:
    return json.dumps(table_to_dict(t), sort_keys=True, ensure_ascii=False)


def table_from_json(s: str) -> TruthTable:
    d = json.loads(s)
    return table_from_dict(d)


def table_to_yaml(t: TruthTable) -> str:
    return yaml.safe_dump(table_to_dict(t), allow_unicode=True)


def table_from_yaml(s: str) -> TruthTable:
    d = yaml.safe_load(s)
    return table_from_dict(d)


def report_to_yaml(r: TableReport) -> str:
    return yaml.safe_dump(report_to_dict(r), allow_unicode=True, sort_keys=False)
