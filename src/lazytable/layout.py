"""
Layout engine: column widths, cell wrapping and line assembly.

Rendering is a pure function of a ``Table`` and a ``TableStyle``. Given a
terminal width of 20 the default style produces::

     da | foobar  | bar
        | foobar  |
     da | foobar! | bar

Widths are computed in two steps. Columns that fit into an equal share of
the remaining budget keep their natural width (smallest first). Every
overflowing column then gets one character, and the rest of the budget is
split among them with largest-remainder allocation weighted by
``natural - 1``. For natural widths ``[10, 5, 20, 15]`` and 37 available
characters this gives ``[10, 5, 13, 9]``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .exceptions import InvalidConfig
from .models import DEFAULT_STYLE, Table, TableStyle

logger = logging.getLogger(__name__)


def cell_width(cell: str) -> int:
    """Width of a cell: the length of its longest line."""
    return max(len(line) for line in cell.split("\n"))


def natural_widths(rows: Sequence[Sequence[str]]) -> list[int]:
    """
    Width every column needs to show its content unwrapped.

    Ragged rows are fine: missing cells count as empty.

    Example:
        ```py
        from lazytable import natural_widths

        print(natural_widths([["a", "bb"], ["ccc"]]))
        #> [3, 2]
        ```
    """
    widths: list[int] = []
    for cells in rows:
        for i, cell in enumerate(cells):
            width = cell_width(cell)
            if i < len(widths):
                widths[i] = max(widths[i], width)
            else:
                widths.append(width)
    return widths


def _largest_remainder(total: int, weights: Sequence[int]) -> list[int]:
    """Split ``total`` proportionally to ``weights`` so the parts sum to ``total``."""
    if not weights:
        return []
    weight_sum = sum(weights)

    # Integer quotients and remainders keep the ordering exact.
    parts = [total * w // weight_sum for w in weights]
    remainders = [total * w % weight_sum for w in weights]
    leftover = total - sum(parts)
    order = sorted(range(len(weights)), key=lambda i: (-remainders[i], i))
    for i in order[:leftover]:
        parts[i] += 1
    return parts


def distribute(natural: Sequence[int], available: int) -> list[int]:
    """
    Distribute ``available`` characters over columns.

    Args:
        natural: Natural width of each column
        available: Characters left for content once padding and
            separators are subtracted

    Returns:
        One share per column. The shares sum to exactly ``available``
        and every column gets at least one character.

    Raises:
        InvalidConfig: If ``available`` is smaller than the column count

    Overflowing columns reserve one character each and share the rest
    in proportion to ``natural - 1``.

    Example:
        ```py
        from lazytable import distribute

        print(distribute([2, 13, 3], 12))
        #> [2, 7, 3]
        ```
    """
    columns = len(natural)
    if columns == 0:
        return []
    if available < columns:
        raise InvalidConfig(
            "width", available, f"cannot give {columns} column(s) one character each"
        )

    # Empty columns still take up one character.
    natural = [max(n, 1) for n in natural]
    shares = [0] * columns
    budget = available
    pending = sorted(range(columns), key=lambda i: (natural[i], i))

    # Fix columns that fit into an equal share of what is left.
    while pending and natural[pending[0]] * len(pending) <= budget:
        i = pending.pop(0)
        shares[i] = natural[i]
        budget -= natural[i]

    if pending:
        pending.sort()
        extra = _largest_remainder(budget - len(pending), [natural[i] - 1 for i in pending])
        for i, e in zip(pending, extra):
            shares[i] = 1 + e
    else:
        surplus = _largest_remainder(budget, natural)
        shares = [s + e for s, e in zip(shares, surplus)]

    return shares


def column_widths(table: Table, style: TableStyle = DEFAULT_STYLE) -> list[int]:
    """
    Effective width of every column of ``table``.

    Without a target width this is the natural width. Otherwise the
    distributed share, capped at the natural width.
    """
    rows = table.all_rows()
    natural = natural_widths(rows)
    if table.width is None or not natural:
        return natural

    columns = len(natural)
    available = table.width - style.overhead(columns)
    if available < columns:
        logger.warning(
            "Width %d is too narrow for %d columns, rendering %d characters wide",
            table.width,
            columns,
            style.min_width(columns),
        )
        available = columns

    shares = distribute(natural, available)
    widths = [min(n, s) for n, s in zip(natural, shares)]
    logger.debug("Column widths: natural=%s shares=%s effective=%s", natural, shares, widths)
    return widths


def _wrap_paragraph(text: str, width: int) -> list[str]:
    if len(text) <= width:
        return [text]

    lines: list[str] = []
    current = ""
    for word in text.split():
        # Words longer than a line are hard split onto lines of their own.
        while len(word) > width:
            if current:
                lines.append(current)
                current = ""
            lines.append(word[:width])
            word = word[width:]
        if not current:
            current = word
        elif len(current) + 1 + len(word) <= width:
            current = f"{current} {word}"
        else:
            lines.append(current)
            current = word
    if current or not lines:
        lines.append(current)
    return lines


def wrap_cell(text: str, width: int) -> list[str]:
    """
    Wrap cell text into lines no longer than ``width``.

    Explicit newlines always start a new line. Text that already fits is
    returned unchanged; anything longer is greedily wrapped on whitespace.

    Example:
        ```py
        from lazytable import wrap_cell

        print(" / ".join(wrap_cell("foobar foobar", 7)))
        #> foobar / foobar
        print(" / ".join(wrap_cell("abcdefgh", 3)))
        #> abc / def / gh
        ```
    """
    width = max(width, 1)
    lines: list[str] = []
    for paragraph in text.split("\n"):
        lines.extend(_wrap_paragraph(paragraph, width))
    return lines


class LayoutEngine:
    """Render tables as lists of text lines.

    Example output (default style, with title)::

         who | what     | when
        -----+----------+------
         da  | foobar   | bar
             | foobar   |
         da  | foobar!! | bar
    """

    def __init__(self, style: TableStyle = DEFAULT_STYLE) -> None:
        """Initialize the engine.

        Args:
            style: Padding and border characters to render with
        """
        self._style = style

    @property
    def style(self) -> TableStyle:
        return self._style

    def render(self, table: Table) -> list[str]:
        """Render ``table`` into physical output lines.

        Args:
            table: The table to render; it is not modified

        Returns:
            One string per output line, without trailing newlines
        """
        widths = column_widths(table, self._style)
        if not widths:
            return []

        lines: list[str] = []
        if table.title is not None:
            lines.extend(self._render_row(table.title, widths))
            lines.append(self._render_rule(widths))
        for cells in table.rows:
            lines.extend(self._render_row(cells, widths))
        return lines

    def to_display_string(self, table: Table) -> str:
        """Render ``table`` and join the lines with newlines."""
        return "\n".join(self.render(table))

    def _render_row(self, cells: Sequence[str], widths: list[int]) -> list[str]:
        padded = list(cells) + [""] * (len(widths) - len(cells))
        wrapped = [wrap_cell(cell, w) for cell, w in zip(padded, widths)]
        height = max(len(cell_lines) for cell_lines in wrapped)

        pad = " " * self._style.padding
        sep = self._style.separator
        lines: list[str] = []
        for i in range(height):
            parts = []
            for cell_lines, w in zip(wrapped, widths):
                text = cell_lines[i] if i < len(cell_lines) else ""
                parts.append(f"{pad}{text:<{w}}{pad}")
            line = sep.join(parts)
            if self._style.border:
                line = f"{sep}{line}{sep}"
            lines.append(line)
        return lines

    def _render_rule(self, widths: list[int]) -> str:
        style = self._style
        joint = style.junction * len(style.separator)
        rule = joint.join(style.fill * (w + 2 * style.padding) for w in widths)
        if style.border:
            rule = f"{joint}{rule}{joint}"
        return rule


def render(table: Table, style: TableStyle = DEFAULT_STYLE) -> list[str]:
    """Render ``table`` into a list of lines. See ``LayoutEngine.render``."""
    return LayoutEngine(style).render(table)


def to_display_string(table: Table, style: TableStyle = DEFAULT_STYLE) -> str:
    """Render ``table`` as a single newline-joined string for printing."""
    return LayoutEngine(style).to_display_string(table)
