"""Backends for truth table output (plain text, Markdown)."""

from .text_table import TableStyle, render_table, save_table_file

__all__ = ["TableStyle", "render_table", "save_table_file"]
