"""Rows of the key binding help screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

HEADER: Tuple[str, str] = ("Description", "Key")
DOCS: Tuple[Tuple[str, str], ...] = (
    ("Exit help", "Esc"),
    ("Quit", "q"),
    ("Full screen", "f"),
    ("Scoreboard", "1"),
    ("Move down", "j/↓"),
    ("Move up", "k/↑"),
    ("Select date", ":"),
    ("Switch boxscore team", "h/a"),
    ("Scroll boxscore down", "Shift + j/↓"),
    ("Scroll boxscore up", "Shift + k/↑"),
    ("Toggle win probability", "w"),
    ("Gameday", "2"),
    ("Toggle game info", "i"),
    ("Toggle pitches", "p"),
    ("Toggle boxscore", "b"),
    ("Switch boxscore team", "h/a"),
    ("Scroll boxscore down", "Shift + j/↓"),
    ("Scroll boxscore up", "Shift + k/↑"),
    ("Toggle win probability", "w"),
    ("Move down at bat", "j/↓"),
    ("Move up at bat", "k/↑"),
    ("Go to live at bat", "l"),
    ("Go to first at bat", "s"),
    ("Stats", "3"),
    ("Switch hitting/pitching", "h/p"),
    ("Switch team/player", "t/l"),
    ("Move down", "j/↓"),
    ("Move up", "k/↑"),
    ("Toggle stat", "Enter"),
    ("Sort by stat", "s"),
    ("Select date", ":"),
    ("Toggle stat selection", "o"),
    ("Standings", "4"),
    ("Move down", "j/↓"),
    ("Move up", "k/↑"),
    ("Select date", ":"),
    ("View team info", "Enter"),
)

DESCRIPTION_WIDTH = 30
KEY_WIDTH = 15
MIN_WIDTH = 35


@dataclass(frozen=True)
class HelpRow:
    """A row of the help table and whether it is styled as a section header."""

    is_header: bool
    text: str


def _is_byte_number(key: str) -> bool:
    digits = key[1:] if key.startswith("+") else key
    return digits.isascii() and digits.isdigit() and int(digits) <= 255


def format_row(description: str, key: str) -> HelpRow:
    """One padded row; rows whose key is a tab number are section headers."""
    return HelpRow(
        is_header=_is_byte_number(key),
        text=f"{description:<{DESCRIPTION_WIDTH}}{key:<{KEY_WIDTH}}",
    )


def help_rows() -> List[HelpRow]:
    """The rows for every documented key binding, in order."""
    return [format_row(description, key) for description, key in DOCS]


def help_min_height() -> int:
    """Rows needed to show the whole table: the docs, the header and two borders."""
    return len(DOCS) + 3