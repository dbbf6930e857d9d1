"""Export module for terminal and JSON output."""

from nutrivec.export.formatters import TableFormatter

__all__ = ["TableFormatter"]
