"""
Tests for serialization and deserialization of truth tables.

These tests ensure lossless JSON/YAML round-trip using the explicit
serialization functions in `proptable.serialization`.
"""

import pytest
import yaml

from proptable.analyzer import analyze_table
from proptable.serialization import (
    report_to_dict,
    report_to_yaml,
    table_from_dict,
    table_from_json,
    table_from_yaml,
    table_to_dict,
    table_to_json,
    table_to_yaml,
)
from proptable.table import compute_truth_table


def build_sample_table():
    return compute_truth_table("p -> q, not p or q, T")


def test_dict_shape():
    d = table_to_dict(compute_truth_table("p and q"))
    assert d == {
        "variables": ["p", "q"],
        "statements": ["p and q"],
        "expressions": ["p && q"],
        "rows": [
            [True, True, True],
            [True, False, False],
            [False, True, False],
            [False, False, False],
        ],
    }


def test_json_roundtrip():
    table = build_sample_table()
    restored = table_from_json(table_to_json(table))
    assert restored == table


def test_yaml_roundtrip():
    table = build_sample_table()
    restored = table_from_yaml(table_to_yaml(table))
    assert restored == table


def test_unicode_statements_survive():
    table = compute_truth_table("¬p")
    assert table_from_json(table_to_json(table)).statements == ("¬p",)
    assert table_from_yaml(table_to_yaml(table)).statements == ("¬p",)


def test_row_width_checked():
    d = table_to_dict(compute_truth_table("p"))
    d["rows"][0].append(True)
    with pytest.raises(ValueError):
        table_from_dict(d)


def test_expression_count_checked():
    d = table_to_dict(compute_truth_table("p"))
    d["expressions"] = []
    with pytest.raises(ValueError):
        table_from_dict(d)


def test_report_export():
    report = analyze_table(compute_truth_table("p or not p, p"))
    d = report_to_dict(report)
    assert d["statements"][0]["classification"] == "tautology"
    assert d["statements"][1]["classification"] == "contingent"
    assert d["jointly_satisfiable"] is True
    assert yaml.safe_load(report_to_yaml(report)) == d
