"""
Plain-text grid renderer for truth tables.

Supports two layouts:
    - PLAIN: Space-aligned columns with a dashed rule under the header
    - MARKDOWN: GitHub-flavoured Markdown table
"""

from enum import Enum
from typing import List

from proptable.display import GlyphStyle
from proptable.table import TruthTable


class TableStyle(Enum):
    """Layouts for text output."""
    PLAIN = "plain"
    MARKDOWN = "markdown"


def _escape_markdown_cell(s: str) -> str:
    """Escape characters that would break a Markdown table cell."""
    s = s.replace("\\", "\\\\")
    s = s.replace("|", "\\|")
    return s


def _cell(value: bool, true_label: str, false_label: str) -> str:
    return true_label if value else false_label


def render_table(
    table: TruthTable,
    style: TableStyle = TableStyle.PLAIN,
    glyphs: GlyphStyle = GlyphStyle.UNICODE,
    true_label: str = "T",
    false_label: str = "F",
) -> str:
    """
    Render a truth table as text.

    Args:
        table: TruthTable to render
        style: Output layout (PLAIN, MARKDOWN)
        glyphs: Glyph family for operator symbols in headers
        true_label: Cell text for True
        false_label: Cell text for False

    Returns:
        The rendered table, one line per row, no trailing newline
    """
    headers = table.display_headers(glyphs)
    body = [
        [_cell(value, true_label, false_label) for value in row]
        for row in table.rows
    ]

    if style == TableStyle.MARKDOWN:
        lines = []
        lines.append("| " + " | ".join(_escape_markdown_cell(h) for h in headers) + " |")
        lines.append("|" + "|".join("---" for _ in headers) + "|")
        for cells in body:
            lines.append("| " + " | ".join(cells) + " |")
        return "\n".join(lines)

    widths = [len(h) for h in headers]
    for cells in body:
        widths = [max(w, len(c)) for w, c in zip(widths, cells)]

    def line(cells: List[str]) -> str:
        return "  ".join(c.ljust(w) for c, w in zip(cells, widths)).rstrip()

    lines = [line(headers), line(["-" * w for w in widths])]
    lines.extend(line(cells) for cells in body)
    return "\n".join(lines)


def save_table_file(
    table: TruthTable,
    filename: str,
    style: TableStyle = TableStyle.PLAIN,
    glyphs: GlyphStyle = GlyphStyle.UNICODE,
) -> None:
    """
    Render a truth table and save it to a file.

    Args:
        table: TruthTable to render
        filename: Output file path
        style: Output layout
        glyphs: Glyph family for headers
    """
    text = render_table(table, style=style, glyphs=glyphs)
    with open(filename, "w", encoding="utf-8") as f:
        f.write(text + "\n")


__all__ = ["TableStyle", "render_table", "save_table_file"]
