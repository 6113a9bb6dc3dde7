"""Plays of the selected inning as styled lines of text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple, Union

Color = Union[str, Tuple[int, int, int]]

# These match the colours of pitch data from the stats API: green for balls,
# red for strikes and blue for contact.
GREEN: Color = (39, 161, 39)
BLUE: Color = (26, 86, 190)
RED: Color = (170, 21, 11)
WHITE: Color = "white"
SCORING_SYMBOL = "!"
SELECTION_SYMBOL = ">"
IN_PROGRESS = "in progress..."


@dataclass(frozen=True)
class PlayCount:
    balls: int = 0
    strikes: int = 0
    outs: int = 0


@dataclass(frozen=True)
class PlayResult:
    """Outcome of one at bat."""

    at_bat_index: int = 0
    description: str = ""
    is_scoring_play: bool = False
    is_out: bool = False
    rbi: int = 0
    away_score: int = 0
    home_score: int = 0
    count: PlayCount = PlayCount()
    event_codes: Sequence[Optional[str]] = ()


@dataclass(frozen=True)
class InningPlay:
    """An at bat and the half inning it belongs to."""

    inning: int
    is_top_inning: bool
    play_result: PlayResult


@dataclass(frozen=True)
class Span:
    """A piece of text with one style."""

    text: str
    color: Optional[Color] = None
    bold: bool = False


Line = Tuple[Span, ...]


def format_runs(play: PlayResult, selected_at_bat: Optional[int]) -> Span:
    """Blue ``!`` per run on scoring plays, otherwise ``-``; ``>`` marks the selection."""
    selected = selected_at_bat is not None and play.at_bat_index == selected_at_bat
    if play.is_scoring_play:
        # plays such as a wild pitch score without an rbi but still get a mark
        runs = play.rbi or 1
        marks = SCORING_SYMBOL * runs
        text = f"{SELECTION_SYMBOL} {marks}" if selected else marks
        return Span(text, BLUE)

    color = RED if play.is_out else WHITE
    code = play.event_codes[-1] if play.event_codes else None
    if code == "D":
        color = BLUE
    elif code == "H":
        color = GREEN
    if play.count.balls == 4:
        color = GREEN
    elif play.count.strikes == 3:
        color = RED

    if selected:
        return Span(SELECTION_SYMBOL, color, bold=True)
    return Span("-", color)


def format_score(play: PlayResult, home_abbreviation: str, away_abbreviation: str) -> Span:
    """The new score after a scoring play, otherwise nothing."""
    if not play.is_scoring_play:
        return Span("")
    return Span(
        f" [{away_abbreviation} {play.away_score}, {home_abbreviation} {play.home_score}]",
        bold=True,
    )


def format_outs(play: PlayResult) -> Span:
    """The number of outs after a play that made one, otherwise nothing."""
    if not play.is_out:
        return Span("")
    word = "out" if play.count.outs == 1 else "outs"
    return Span(f" {play.count.outs} {word}", bold=True)


def build_line(
    play: PlayResult,
    selected_at_bat: Optional[int],
    home_abbreviation: str,
    away_abbreviation: str,
) -> Line:
    """One line describing a play."""
    return (
        format_runs(play, selected_at_bat),
        Span(" "),
        Span(play.description or IN_PROGRESS),
        format_outs(play),
        format_score(play, home_abbreviation, away_abbreviation),
    )


def format_plays(
    at_bats: Iterable[InningPlay],
    inning: int,
    selected_at_bat: Optional[int],
    home_abbreviation: str,
    away_abbreviation: str,
) -> List[Line]:
    """Lines for the plays of ``inning``, newest first, under half inning headers.

    ``at_bats`` is in game order. Inning 0 means the game has not started.
    """
    if inning == 0:
        return []

    lines: List[Line] = []
    last_half: Optional[Tuple[bool, int]] = None
    for play in reversed(list(at_bats)):
        if play.inning != inning:
            continue
        half = (play.is_top_inning, play.inning)
        if half != last_half:
            if lines:
                lines.append(())
            name = "top" if play.is_top_inning else "bottom"
            lines.append((Span(f"## {name} {play.inning}", bold=True),))
            last_half = half
        lines.append(
            build_line(play.play_result, selected_at_bat, home_abbreviation, away_abbreviation)
        )
    return lines