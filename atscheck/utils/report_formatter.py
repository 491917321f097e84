"""
Utility functions for formatting text-based reports and tables.

Provides consistent table formatting for ATS compliance reports.
"""

from typing import Any, List

from atscheck.utils.text_processing import truncate_display


class Column:
    """Column definition for table formatting."""

    def __init__(self, name: str, width: int, align: str = "<", truncate: bool = False):
        """
        Args:
            name: Column header name
            width: Column width in characters
            align: Alignment ('<' left, '>' right, '^' center)
            truncate: Cut values longer than width (with "...") instead of overflowing
        """
        self.name = name
        self.width = width
        self.align = align
        self.truncate = truncate

    def format_header(self) -> str:
        return f"{self.name:{self.align}{self.width}}"

    def format_value(self, value: Any) -> str:
        text = str(value)
        if self.truncate:
            text = truncate_display(text, self.width)
        return f"{text:{self.align}{self.width}}"


class TableFormatter:
    """Builder for formatted text tables with aligned columns."""

    def __init__(self, columns: List[Column], total_width: int = 100):
        """
        Args:
            columns: List of Column definitions
            total_width: Total report width for separators
        """
        self.columns = columns
        self.total_width = total_width
        self.lines: List[str] = []

    def add_section_header(self, title: str) -> "TableFormatter":
        """Add section header with top/bottom separator lines."""
        self.lines.append("=" * self.total_width)
        self.lines.append(title)
        self.lines.append("=" * self.total_width)
        return self

    def add_table_header(self) -> "TableFormatter":
        """Add table header row with column names, underlined."""
        self.lines.append(" ".join(col.format_header() for col in self.columns).rstrip())
        self.add_separator()
        return self

    def add_separator(self, char: str = "-") -> "TableFormatter":
        self.lines.append(char * self.total_width)
        return self

    def add_row(self, values: List[Any]) -> "TableFormatter":
        """
        Add data row with column values.

        Raises:
            ValueError: If number of values doesn't match columns
        """
        if len(values) != len(self.columns):
            raise ValueError(f"Expected {len(self.columns)} values, got {len(values)}")

        row_parts = [col.format_value(val) for col, val in zip(self.columns, values)]
        self.lines.append(" ".join(row_parts).rstrip())
        return self

    def add_list(self, items: List[str], marker: str = "-", indent: int = 2) -> "TableFormatter":
        """Add one indented line per item."""
        for item in items:
            self.lines.append(f"{' ' * indent}{marker} {item}")
        return self

    def add_blank_line(self) -> "TableFormatter":
        self.lines.append("")
        return self

    def add_text(self, text: str) -> "TableFormatter":
        self.lines.append(text)
        return self

    def render(self) -> str:
        """Render accumulated lines to string."""
        return "\n".join(self.lines)
