"""
lazytable: lazy tables with stupid wrapping.

Renders rows of text as a fixed-width grid for the terminal. When a total
width is given, overflowing columns are word wrapped onto extra lines
instead of breaking the terminal's own line wrapping.

Example:
    from lazytable import Table, row

    table = Table.with_width(23)
    table.set_title(row("who", "what", "when"))
    table.add_row(row("da", "foobar foobar", "bar"))
    table.add_row(row("da", "foobar!!", "bar"))
    print(table)

Output::

     who | what     | when
    -----+----------+------
     da  | foobar   | bar
         | foobar   |
     da  | foobar!! | bar
"""

from importlib.metadata import PackageNotFoundError, version

from .config import load_style, style_from_environment, style_from_mapping
from .exceptions import ConfigError, InvalidConfig, LazyTableError
from .layout import (
    LayoutEngine,
    column_widths,
    distribute,
    natural_widths,
    render,
    to_display_string,
    wrap_cell,
)
from .models import DEFAULT_STYLE, Row, Table, TableStyle, row

try:
    __version__ = version("lazytable")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Models
    "Table",
    "TableStyle",
    "DEFAULT_STYLE",
    "Row",
    "row",
    # Layout
    "LayoutEngine",
    "render",
    "to_display_string",
    "column_widths",
    "distribute",
    "natural_widths",
    "wrap_cell",
    # Configuration
    "load_style",
    "style_from_environment",
    "style_from_mapping",
    # Exceptions
    "LazyTableError",
    "ConfigError",
    "InvalidConfig",
]
