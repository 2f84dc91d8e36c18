"""Core models for lazytable."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from .exceptions import InvalidConfig

Row = list[str]


def row(*cells: Any) -> Row:
    """
    Build a row from positional values.

    Every value is converted with ``str()``.

    Example:
        ```py
        from lazytable import row

        print(" | ".join(row("da", "foobar", 42)))
        #> da | foobar | 42
        ```
    """
    return [str(cell) for cell in cells]


@dataclass(frozen=True)
class TableStyle:
    """
    Padding and border characters of a rendered table.

    Attributes:
        padding: Spaces on each side of a cell
        separator: String placed between columns (and at the edges with border)
        fill: Character repeated in the rule below the title
        junction: Character of the rule where it crosses a separator
        border: Draw the separator at the left and right edges too
    """

    padding: int = 1
    separator: str = "|"
    fill: str = "-"
    junction: str = "+"
    border: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.padding, bool) or not isinstance(self.padding, int):
            raise InvalidConfig("padding", self.padding, "must be an integer")
        if self.padding < 0:
            raise InvalidConfig("padding", self.padding, "must not be negative")
        if not isinstance(self.separator, str) or not self.separator:
            raise InvalidConfig("separator", self.separator, "must be a non-empty string")
        if "\n" in self.separator:
            raise InvalidConfig("separator", self.separator, "must not contain a newline")
        for name in ("fill", "junction"):
            value = getattr(self, name)
            if not isinstance(value, str) or len(value) != 1 or value == "\n":
                raise InvalidConfig(name, value, "must be a single character")
        if not isinstance(self.border, bool):
            raise InvalidConfig("border", self.border, "must be a boolean")

    def overhead(self, columns: int) -> int:
        """Characters taken by padding and separators for ``columns`` columns."""
        if columns <= 0:
            return 0
        edges = 2 if self.border else 0
        return columns * 2 * self.padding + (columns - 1 + edges) * len(self.separator)

    def min_width(self, columns: int) -> int:
        """Narrowest line that still gives every column one character."""
        return self.overhead(columns) + columns


DEFAULT_STYLE = TableStyle()


@dataclass
class Table:
    """
    Logical table content: an optional title row, data rows and a target width.

    Rows may have different lengths; missing cells are treated as empty
    when the table is rendered. The table itself holds no layout logic,
    see ``lazytable.layout``.

    Example:
        table = Table.with_width(23)
        table.set_title(row("who", "what", "when"))
        table.add_row(row("da", "foobar foobar", "bar"))
        print(table)
    """

    title: Row | None = None
    rows: list[Row] = field(default_factory=list)
    width: int | None = None

    def __post_init__(self) -> None:
        if self.width is not None:
            _check_width(self.width, 1, DEFAULT_STYLE)

    @classmethod
    def new(cls) -> Table:
        """Create an empty table sized to its content."""
        return cls()

    @classmethod
    def with_width(
        cls,
        width: int,
        columns: int | None = None,
        style: TableStyle = DEFAULT_STYLE,
    ) -> Table:
        """
        Create an empty table that is wrapped to fit ``width`` characters.

        Args:
            width: Total line width, padding and separators included
            columns: Expected column count; when given the width must
                leave at least one character for each of them
            style: Style the table will be rendered with

        Raises:
            InvalidConfig: If the width is not a positive integer or is too
                narrow for the requested columns
        """
        _check_width(width, columns if columns is not None else 1, style)
        table = cls()
        table.width = width
        return table

    @property
    def column_count(self) -> int:
        """Number of columns, i.e. the longest row (title included)."""
        counts = [len(r) for r in self.all_rows()]
        return max(counts, default=0)

    def set_title(self, cells: Iterable[Any]) -> None:
        """Set the title row."""
        self.title = [str(cell) for cell in cells]

    def add_row(self, cells: Iterable[Any]) -> None:
        """Add a row."""
        self.rows.append([str(cell) for cell in cells])

    def add_rows(self, rows: Iterable[Iterable[Any]]) -> None:
        """Add multiple rows at once."""
        for cells in rows:
            self.add_row(cells)

    def all_rows(self) -> list[Row]:
        """Title (if set) followed by the data rows."""
        if self.title is None:
            return list(self.rows)
        return [self.title, *self.rows]

    def __str__(self) -> str:
        from .layout import to_display_string

        return to_display_string(self)


def _check_width(width: Any, columns: int, style: TableStyle) -> None:
    if isinstance(width, bool) or not isinstance(width, int):
        raise InvalidConfig("width", width, "must be an integer")
    if width <= 0:
        raise InvalidConfig("width", width, "must be positive")
    if columns < 1:
        raise InvalidConfig("columns", columns, "must be positive")
    minimum = style.min_width(columns)
    if width < minimum:
        raise InvalidConfig(
            "width",
            width,
            f"{columns} column(s) need at least {minimum} characters",
        )
