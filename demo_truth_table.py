#!/usr/bin/env python3
"""
Demo: Compute, render and analyze truth tables.

Runs a handful of inputs through a TruthTableSession, including one
malformed input to show the error report.
"""

import logging

from proptable.analyzer import analyze_table
from proptable.backends import TableStyle
from proptable.config import Settings
from proptable.serialization import report_to_yaml
from proptable.session import TruthTableSession


INPUTS = [
    "p and q, p or q",
    "p -> q, not p or q",
    "(p and q) or (not p and not q), p <-> q, not (p xor q)",
    "p then (q then r), (p and q) then r",
    "T and F",
    "p then",
]


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    session = TruthTableSession(Settings(table_style=TableStyle.MARKDOWN))

    print("=" * 80)
    print("TRUTH TABLE DEMO")
    print("=" * 80)

    for text in INPUTS:
        print(f"\nINPUT: {text}")
        print("-" * 80)

        result = session.calculate(text)
        print(session.render(result))

        if result.ok:
            print(f"\n{result.timing_message()}")
            report = analyze_table(result.table)
            print("\nANALYSIS:")
            print(report_to_yaml(report))

    print("=" * 80)
    latest = session.store.latest
    if latest is not None:
        print(f"Most recent table: {', '.join(latest.statements)}")
    print("=" * 80)


if __name__ == "__main__":
    main()
