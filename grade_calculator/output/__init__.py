"""Output formatting modules."""

from .formatters import format_table, format_json

__all__ = ["format_table", "format_json"]
