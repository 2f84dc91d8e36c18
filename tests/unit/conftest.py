"""Pytest fixtures for lazytable tests."""

import pytest

from lazytable import Table, row


@pytest.fixture
def titled_table() -> Table:
    """Table with a title and no target width."""
    table = Table.new()
    table.set_title(row("who", "what", "when"))
    table.add_row(row("da", "foobar foobar", "bar"))
    table.add_row(row("da", "foobar!!", "bar"))
    return table


@pytest.fixture
def wrapped_table() -> Table:
    """Table without title that needs wrapping at width 20."""
    table = Table.with_width(20)
    table.add_row(row("da", "foobar foobar", "bar"))
    table.add_row(row("da", "foobar!", "bar"))
    return table
