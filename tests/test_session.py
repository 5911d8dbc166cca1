"""
Tests for TruthTableSession and TableStore.
"""

import logging

from proptable.backends.text_table import TableStyle
from proptable.config import Settings
from proptable.errors import EvaluationError, VariableLimitError
from proptable.session import PRECEDENCE_HINT, TableStore, TruthTableSession


class TestCalculate:
    """Test one-shot calculations."""

    def test_success(self):
        session = TruthTableSession()
        result = session.calculate("p and q")
        assert result.ok
        assert result.table.variables == ("p", "q")
        assert result.error is None
        assert result.elapsed_ms >= 0.0
        assert result.timing_message().startswith("Truth table generated in ")
        assert result.error_message() == ""

    def test_failure(self):
        session = TruthTableSession()
        result = session.calculate("p then")
        assert not result.ok
        assert result.table is None
        assert isinstance(result.error, EvaluationError)

    def test_error_message(self):
        result = TruthTableSession().calculate("p then")
        message = result.error_message()
        assert "(p then) => (!(true) || ())" in message
        assert message.endswith(PRECEDENCE_HINT)

    def test_failure_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="proptable.session"):
            TruthTableSession().calculate("p and (q")
        assert "Calculation failed" in caplog.text

    def test_variable_limit_from_settings(self):
        session = TruthTableSession(Settings(max_variables=1))
        result = session.calculate("p and q")
        assert isinstance(result.error, VariableLimitError)


class TestStore:
    """Test the most-recent-table store."""

    def test_success_is_stored(self):
        session = TruthTableSession()
        result = session.calculate("p")
        assert session.store.latest is result.table

    def test_failure_keeps_previous_table(self):
        session = TruthTableSession()
        good = session.calculate("p or q")
        session.calculate("p then")
        assert session.store.latest is good.table

    def test_injected_store_shared(self):
        store = TableStore()
        TruthTableSession(store=store).calculate("q")
        assert store.latest.statements == ("q",)

    def test_clear(self):
        store = TableStore()
        TruthTableSession(store=store).calculate("q")
        store.clear()
        assert store.latest is None


class TestRender:
    """Test rendering through the session's settings."""

    def test_render_table(self):
        session = TruthTableSession(Settings(table_style=TableStyle.MARKDOWN, true_label="1", false_label="0"))
        text = session.render(session.calculate("not p"))
        assert text.splitlines() == [
            "| p | ¬p |",
            "|---|---|",
            "| 1 | 0 |",
            "| 0 | 1 |",
        ]

    def test_render_error(self):
        session = TruthTableSession()
        text = session.render(session.calculate("p then"))
        assert PRECEDENCE_HINT in text
