"""Rectangles, layout constraints and the layouts used by the views."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union

from mlbt.gameday import GamedayPanels

TOP_BAR_HEIGHT = 3
MAIN_HEIGHT = 100  # percent
DATE_PICKER_HEIGHT = 4
DATE_PICKER_PERCENT_WIDTH = 42
STRIKE_ZONE_WIDTH = 35
STRIKE_ZONE_HEIGHT = 19


@dataclass(frozen=True)
class Rect:
    """A rectangle of terminal cells."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def inner(self, horizontal: int, vertical: int) -> Rect:
        """Shrink by the margins on every side; an empty rect if they do not fit."""
        if self.width < 2 * horizontal or self.height < 2 * vertical:
            return Rect()
        return Rect(
            self.x + horizontal,
            self.y + vertical,
            self.width - 2 * horizontal,
            self.height - 2 * vertical,
        )


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


@dataclass(frozen=True)
class Length:
    """A fixed number of cells."""

    value: int

    def __post_init__(self) -> None:
        _non_negative("length", self.value)


@dataclass(frozen=True)
class Percentage:
    """A percentage of the space being split."""

    value: int

    def __post_init__(self) -> None:
        _non_negative("percentage", self.value)


@dataclass(frozen=True)
class Ratio:
    """A fraction of the space being split."""

    numerator: int
    denominator: int

    def __post_init__(self) -> None:
        _non_negative("numerator", self.numerator)
        _non_negative("denominator", self.denominator)


@dataclass(frozen=True)
class Fill:
    """A share of whatever space is left, in proportion to its weight."""

    weight: int = 1

    def __post_init__(self) -> None:
        _non_negative("weight", self.weight)


Constraint = Union[Length, Percentage, Ratio, Fill]


def _desired(constraint: Constraint, total: int) -> int:
    if isinstance(constraint, Percentage):
        return total * constraint.value // 100
    if isinstance(constraint, Ratio):
        if constraint.denominator == 0:
            return 0
        return total * constraint.numerator // constraint.denominator
    return 0


def _solve(constraints: Sequence[Constraint], total: int, spacing: int) -> List[int]:
    """Share ``total`` cells out between the constraints.

    Lengths are served first, then percentages and ratios (scaled down together
    when they do not fit), then fills by weight. Space left over with no fill
    to take it goes to the last constraint.
    """
    available = max(0, total - spacing * (len(constraints) - 1))
    sizes = [0] * len(constraints)
    remaining = available

    for index, constraint in enumerate(constraints):
        if isinstance(constraint, Length):
            sizes[index] = min(constraint.value, remaining)
            remaining -= sizes[index]

    proportional = {
        index: _desired(constraint, total)
        for index, constraint in enumerate(constraints)
        if isinstance(constraint, (Percentage, Ratio))
    }
    wanted = sum(proportional.values())
    if wanted > remaining:
        proportional = {index: size * remaining // wanted for index, size in proportional.items()}
    for index, size in proportional.items():
        sizes[index] = size
        remaining -= size

    fills = {
        index: constraint.weight
        for index, constraint in enumerate(constraints)
        if isinstance(constraint, Fill)
    }
    if fills:
        weight_sum = sum(fills.values())
        if weight_sum:
            for index, weight in fills.items():
                share = remaining * weight // weight_sum
                sizes[index] = share
            remaining -= sum(sizes[index] for index in fills)
        sizes[max(fills)] += remaining
    elif sizes:
        sizes[-1] += remaining
    return sizes


def split(
    area: Rect,
    constraints: Iterable[Constraint],
    vertical: bool = True,
    spacing: int = 0,
    horizontal_margin: int = 0,
    vertical_margin: int = 0,
) -> List[Rect]:
    """Split ``area`` into consecutive rects, one per constraint."""
    constraints = list(constraints)
    if not constraints:
        return []
    inner = area.inner(horizontal_margin, vertical_margin)
    start, total = (inner.y, inner.height) if vertical else (inner.x, inner.width)
    end = start + total

    rects = []
    offset = start
    for size in _solve(constraints, total, spacing):
        position = min(offset, end)
        size = min(size, end - position)
        if vertical:
            rects.append(Rect(inner.x, position, inner.width, size))
        else:
            rects.append(Rect(position, inner.y, size, inner.height))
        offset = position + size + spacing
    return rects


def create_top_bar(area: Rect) -> Tuple[Rect, Rect]:
    """Split the top bar into the tabs and the help hint."""
    tabs, help_hint = split(area, [Percentage(90), Percentage(10)], vertical=False)
    return tabs, help_hint


def main_areas(width: int, height: int) -> Tuple[Tuple[Rect, Rect], Rect]:
    """Return the top bar and the main area for a terminal of the given size."""
    top, main = split(
        Rect(0, 0, width, height),
        [Length(TOP_BAR_HEIGHT), Percentage(MAIN_HEIGHT)],
        horizontal_margin=1,
        vertical_margin=1,
    )
    return create_top_bar(top), main


def update_areas(area: Rect, full_screen: bool) -> Tuple[Tuple[Rect, Rect], Rect]:
    """Return the top bar and main area; in full screen the top bar is empty."""
    if full_screen:
        constraints: List[Constraint] = [Percentage(0), Percentage(100)]
    else:
        constraints = [Length(TOP_BAR_HEIGHT), Percentage(MAIN_HEIGHT)]
    top, main = split(area, constraints)
    return create_top_bar(top), main


def for_boxscore(rect: Rect) -> Tuple[Rect, Rect]:
    """Line score on top and box score below."""
    linescore, boxscore = split(
        rect, [Length(4), Fill(1)], horizontal_margin=2, vertical_margin=1
    )
    return linescore, boxscore


def for_at_bat(rect: Rect) -> Tuple[Rect, Rect]:
    """Current matchup on top and the pitches of the at bat below."""
    matchup, pitches = split(rect, [Length(7), Fill(1)])
    return matchup, pitches


def for_info(rect: Rect, show_win_probability: bool) -> List[Rect]:
    """Game info for the inning, with the recent win probability below if shown."""
    constraints: List[Constraint] = [Fill(1), Length(6)] if show_win_probability else [Fill(1)]
    return split(rect, constraints, horizontal_margin=2, vertical_margin=1)


def generate_gameday_panels(panels: GamedayPanels, area: Rect) -> List[Rect]:
    """Side by side areas for however many Gameday panels are active."""
    count = panels.count()
    if count in (0, 1):
        constraints: List[Constraint] = [Percentage(100)]
    elif count == 2:
        constraints = [Ratio(1, 2), Ratio(1, 2)]
    elif count == 3:
        constraints = [Ratio(1, 3), Ratio(1, 3), Ratio(1, 3)]
    else:
        constraints = []
    return split(area, constraints, vertical=False)


def create_date_picker(area: Rect) -> Rect:
    """A centred rect four rows high and 42% of the width."""
    _, popup, _ = split(area, [Ratio(1, 2), Length(DATE_PICKER_HEIGHT), Ratio(1, 2)])
    side = (100 - DATE_PICKER_PERCENT_WIDTH) // 2
    return split(
        popup,
        [Percentage(side), Percentage(DATE_PICKER_PERCENT_WIDTH), Percentage(side)],
        vertical=False,
    )[1]


def strike_zone_area(area: Rect) -> Rect:
    """The largest centred rect in ``area`` with the strike zone's aspect ratio."""
    aspect = STRIKE_ZONE_WIDTH / STRIKE_ZONE_HEIGHT
    width_constrained_height = int(area.width / aspect)
    height_constrained_width = int(area.height * aspect)

    if width_constrained_height <= area.height:
        width, height = area.width, width_constrained_height
    else:
        width, height = height_constrained_width, area.height

    return Rect(
        area.x + (area.width - width) // 2,
        area.y + (area.height - height) // 2,
        width,
        height,
    )