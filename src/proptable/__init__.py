"""
proptable: Propositional Logic Truth Tables

Turns statements such as "p and q, p -> q" into complete truth tables.

Pipeline:
    raw text
        -> compiled canonical expressions  (translator)
        -> ordered free variables           (table.extract_variables)
        -> every truth assignment           (table.enumerate_assignments)
        -> evaluated rows                   (parser + evaluator)

ARCHITECTURAL GUARANTEE:
------------------------
The core executes no caller-supplied text as code. Statements are
compiled to a small boolean grammar, parsed into expression trees, and
evaluated by walking those trees.

Rendering, timing and caching of results belong to callers
(see proptable.session and proptable.backends).
"""

from proptable.display import GlyphStyle, format_display
from proptable.errors import ConfigError, EvaluationError, ParseOrEvalError, VariableLimitError
from proptable.table import TruthTable, compute_truth_table

__version__ = "0.1.0"

__all__ = [
    "compute_truth_table",
    "format_display",
    "GlyphStyle",
    "TruthTable",
    "ParseOrEvalError",
    "EvaluationError",
    "VariableLimitError",
    "ConfigError",
]
