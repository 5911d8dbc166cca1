"""
Display formatting for logic text.

Turns canonical tokens and operator spellings into glyphs for headers and
labels. Works on a display copy only; compiled expressions are never
passed through here before evaluation.
"""

import re
from enum import Enum
from typing import Dict, List, Pattern, Tuple


class GlyphStyle(Enum):
    """Glyph families for display output."""
    UNICODE = "unicode"   # ∧ ∨ ¬ → ⊕ ≡
    HTML = "html"         # &and; &or; &sim; ...


_GLYPHS: Dict[GlyphStyle, Dict[str, str]] = {
    GlyphStyle.UNICODE: {
        "iff": "≡",
        "implies": "→",
        "xor": "⊕",
        "and": "∧",
        "or": "∨",
        "not": "¬",
        "lpar": "(",
        "rpar": ")",
    },
    GlyphStyle.HTML: {
        "iff": "&equiv;",
        "implies": "&rarr;",
        "xor": "&oplus;",
        "and": "&and;",
        "or": "&or;",
        "not": "&sim;",
        "lpar": "&lpar;",
        "rpar": "&rpar;",
    },
}

# Words preceded by '&' are entity names from an earlier pass.
_WORD = r"(?<![\w&])(?i:{})(?!\w)"

# '^' is exclusive-or in compiled text but conjunction in raw statements.
_CARET_RE = re.compile(r"\^")

_RULES: List[Tuple[Pattern, str]] = [
    (re.compile(r"(?:<-+>|=)+"), "iff"),
    (re.compile(_WORD.format("then") + r"|-+>"), "implies"),
    (re.compile(r"\(\+\)|" + _WORD.format("xor")), "xor"),
    (re.compile(r"&&|&(?!\w+;)|/\\|" + _WORD.format("and")), "and"),
    (re.compile(r"\|\||\||\\/|" + _WORD.format("or")), "or"),
    (re.compile(_WORD.format("not") + r" ?|!|¬"), "not"),
    (re.compile(r"\("), "lpar"),
    (re.compile(r"\)"), "rpar"),
]


def format_display(
    text: str,
    glyphs: GlyphStyle = GlyphStyle.UNICODE,
    statement: bool = False,
) -> str:
    """
    Render operators in `text` as display glyphs.

    Accepts canonical expressions as well as raw statements. By default
    '^' is shown as exclusive-or, its canonical meaning; pass
    statement=True for text as the user typed it, where '^' is a
    conjunction.

    Applying it twice gives the same result as applying it once.

    Example:
        format_display("!(p) || (q)") -> "¬(p) ∨ (q)"
        format_display("p ^ q", statement=True) -> "p ∧ q"
    """
    table = _GLYPHS[glyphs]
    caret = table["and"] if statement else table["xor"]
    text = _CARET_RE.sub(lambda _: caret, text)
    for pattern, key in _RULES:
        glyph = table[key]
        text = pattern.sub(lambda _: glyph, text)
    return text


__all__ = ["GlyphStyle", "format_display"]
