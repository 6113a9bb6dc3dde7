import pytest

from mlbt.help import (
    DESCRIPTION_WIDTH,
    DOCS,
    HEADER,
    KEY_WIDTH,
    format_row,
    help_min_height,
    help_rows,
)


def test_row_is_padded_to_columns():
    row = format_row("Quit", "q")
    assert row.text.startswith("Quit")
    assert row.text[DESCRIPTION_WIDTH] == "q"
    assert len(row.text) == DESCRIPTION_WIDTH + KEY_WIDTH
    assert not row.is_header


def test_header_row_not_styled_as_section():
    row = format_row(*HEADER)
    assert row.text.split() == ["Description", "Key"]
    assert not row.is_header


@pytest.mark.parametrize("key, expected", [("1", True), ("255", True), ("256", False), ("j/↓", False), ("", False)])
def test_number_keys_are_headers(key, expected):
    assert format_row("x", key).is_header is expected


def test_help_rows_match_docs():
    rows = help_rows()
    assert len(rows) == len(DOCS)
    assert all(row.text.startswith(description) for row, (description, _) in zip(rows, DOCS))


def test_section_headers_are_the_tabs():
    headers = [row.text.split()[0] for row in help_rows() if row.is_header]
    assert headers == ["Scoreboard", "Gameday", "Stats", "Standings"]


def test_min_height_covers_rows_and_borders():
    assert help_min_height() == len(help_rows()) + 3