"""
Calculation session for interactive callers.

A session turns each new input into a CalculationResult: either a table or
a display-ready error, plus how long the calculation took. The most recent
successful table is kept in an explicit TableStore that the caller owns.

Lifecycle of the store:
    - Written once per successful calculation, after the table is complete
    - Left untouched when a calculation fails
    - Cleared only by the caller
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional

from proptable.backends.text_table import render_table
from proptable.config import Settings
from proptable.errors import ParseOrEvalError
from proptable.table import TruthTable, compute_truth_table

logger = logging.getLogger(__name__)

PRECEDENCE_HINT = "Try using parentheses to specify order of precedence."


class TableStore:
    """Holds the most recent successfully computed truth table."""

    def __init__(self) -> None:
        self._latest: Optional[TruthTable] = None

    @property
    def latest(self) -> Optional[TruthTable]:
        return self._latest

    def put(self, table: TruthTable) -> None:
        self._latest = table

    def clear(self) -> None:
        self._latest = None


@dataclass
class CalculationResult:
    """
    Outcome of one calculation.

    Exactly one of `table` and `error` is set.

    Properties:
        source: The input text as given
        table: The computed TruthTable, on success
        error: The failure, on error
        elapsed_ms: Wall-clock time spent, in milliseconds
    """

    source: str
    table: Optional[TruthTable] = None
    error: Optional[ParseOrEvalError] = None
    elapsed_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None

    def error_message(self) -> str:
        """
        Describe the failure for display.

        Shows the input, the expression that failed, the underlying message
        and a hint about parentheses. Empty on success.
        """
        if self.error is None:
            return ""
        return (
            "Malformed propositional logic;\n"
            f"({self.source}) => ({self.error.offending_expression})\n"
            f"{self.error.message}\n"
            f"{PRECEDENCE_HINT}"
        )

    def timing_message(self) -> str:
        return f"Truth table generated in {self.elapsed_ms:.2f} ms."


class TruthTableSession:
    """
    Runs calculations one at a time and remembers the latest good table.

    Args:
        settings: Caller options (variable limit, glyphs, labels)
        store: Where to keep the latest table; a fresh TableStore if omitted
    """

    def __init__(self, settings: Optional[Settings] = None, store: Optional[TableStore] = None):
        self.settings = settings or Settings()
        self.store = store if store is not None else TableStore()

    def calculate(self, text: str) -> CalculationResult:
        """Compute the table for `text`; never raises ParseOrEvalError."""
        start = time.perf_counter()
        result = CalculationResult(source=text)

        try:
            result.table = compute_truth_table(text, max_variables=self.settings.max_variables)
        except ParseOrEvalError as e:
            logger.warning("Calculation failed for %r: %s", text, e)
            result.error = e
        else:
            self.store.put(result.table)

        result.elapsed_ms = (time.perf_counter() - start) * 1000.0
        return result

    def render(self, result: CalculationResult) -> str:
        """Render a result as text using the session's settings."""
        if not result.ok:
            return result.error_message()
        return render_table(
            result.table,
            style=self.settings.table_style,
            glyphs=self.settings.glyphs,
            true_label=self.settings.true_label,
            false_label=self.settings.false_label,
        )


__all__ = [
    "TableStore",
    "CalculationResult",
    "TruthTableSession",
    "PRECEDENCE_HINT",
]
