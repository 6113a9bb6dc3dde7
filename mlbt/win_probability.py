"""Win probability table, bar chart and line chart data for a game."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator, List, Mapping, Optional, Sequence, Tuple

from mlbt.plays import BLUE, GREEN, Color

ChartPoint = Tuple[float, float]
InningLine = Tuple[ChartPoint, ChartPoint]

INTERPOLATION_TARGET_COUNT = 50
MINIMUM_TABLE_HEIGHT = 10

FULL_INNING_LINE_HALF_HEIGHT = 25.0
HALF_INNING_LINE_HALF_HEIGHT = 15.0


def min_table_height() -> int:
    """Rows the win probability table needs before it is worth showing."""
    return MINIMUM_TABLE_HEIGHT


@dataclass(frozen=True)
class WinProbabilityAtBat:
    """Win probability of the home team after one at bat."""

    at_bat_index: int
    inning: int
    is_top_inning: bool
    home_team_wp: float = 50.0
    home_team_wp_added: float = 0.0
    leverage_index: float = 0.0


@dataclass(frozen=True)
class TableRow:
    """The formatted cells of one row of the win probability table."""

    inning: str
    leverage: str
    leverage_color: Color
    wpa: str
    win: str
    win_color: Color


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def split_points(points: Sequence[ChartPoint]) -> Tuple[List[ChartPoint], List[ChartPoint]]:
    """Split chart points into the away team's (above zero) and the home team's."""
    away = [point for point in points if point[1] > 0.0]
    home = [point for point in points if not point[1] > 0.0]
    return away, home


def interpolated_points(start: ChartPoint, end: ChartPoint, count: int) -> Iterator[ChartPoint]:
    """Yield ``count`` evenly spaced points strictly between ``start`` and ``end``."""
    for step in range(1, count + 1):
        ratio = step / (count + 1)
        yield (
            start[0] + ratio * (end[0] - start[0]),
            start[1] + ratio * (end[1] - start[1]),
        )


def interpolate_points(points: Sequence[ChartPoint], target_count: int) -> List[ChartPoint]:
    """Fill in points between the given ones so there are about ``target_count``.

    The extra points are shared out evenly between the segments, the earlier
    segments taking one more when they do not divide evenly.
    """
    points = list(points)
    if len(points) <= 1:
        return points

    to_add = max(0, target_count - len(points))
    segments = len(points) - 1
    per_segment, extra = divmod(to_add, segments)

    result: List[ChartPoint] = []
    for segment, (start, end) in enumerate(zip(points, points[1:])):
        result.append(start)
        insert = per_segment + (1 if segment < extra else 0)
        if insert:
            result.extend(interpolated_points(start, end, insert))
    result.append(points[-1])
    return result


@dataclass
class WinProbabilityData:
    """The at bats of a game and the view onto them.

    ``at_bats`` maps at bat index to its win probability, in game order.
    """

    at_bats: Mapping[int, WinProbabilityAtBat] = field(default_factory=dict)
    home_abbreviation: str = ""
    away_abbreviation: str = ""
    selected_at_bat_index: Optional[int] = None
    table_height: int = 0

    def table_row(self, at_bat: WinProbabilityAtBat) -> TableRow:
        """Format one at bat as a row of the table."""
        half = "top" if at_bat.is_top_inning else "bot"
        label = f"{half} {at_bat.inning}"

        home_wp = min(max(at_bat.home_team_wp, 0.0), 100.0)
        if home_wp in (0.0, 100.0):
            wp = f"{home_wp:.0f}%"
        else:
            wp = f"{home_wp:.1f}%"

        if 99.0 <= home_wp <= 100.0:
            wp_color: Color = "blue"
        elif 45.0 <= home_wp <= 55.0:
            wp_color = GREEN
        elif 0.0 <= home_wp <= 0.99:
            wp_color = "red"
        else:
            wp_color = "white"

        leverage = at_bat.leverage_index
        li = "0" if leverage == 0.0 else f"{leverage:.2f}"
        leverage_color: Color = "red" if leverage > 2.0 else "white"

        # -10.0 and below need all four characters plus the sign; others get a
        # leading space to line up with the minus sign
        added = at_bat.home_team_wp_added
        wpa = f"{added:4.1f}" if added <= -10.0 else f" {added:4.1f}"

        return TableRow(
            inning=f"{label:<8}",
            leverage=f" {li:<4}",
            leverage_color=leverage_color,
            wpa=wpa,
            win=f"{wp:<6}",
            win_color=wp_color,
        )

    def selected_position(self) -> Optional[int]:
        """Position of the selected at bat in game order, if it is known."""
        if self.selected_at_bat_index is None:
            return None
        for position, key in enumerate(self.at_bats):
            if key == self.selected_at_bat_index:
                return position
        return None

    def visible_range(self) -> Tuple[int, int, Optional[int]]:
        """Rows to show, newest first: start, end and the selected row within them."""
        total = len(self.at_bats)
        visible = max(0, self.table_height - 1)  # -1 for the header

        selected = self.selected_position()
        if selected is None:
            return 0, min(visible, total), None

        last = max(0, total - 1)
        reversed_pos = max(0, last - selected)
        if reversed_pos == last:
            # the oldest at bat sits at the bottom of the view
            offset = max(0, reversed_pos - max(0, visible - 1))
        elif reversed_pos >= visible:
            offset = max(0, reversed_pos - visible // 2)
        else:
            offset = 0

        offset = min(offset, max(0, total - visible))
        end = min(offset + visible, total)
        return offset, end, max(0, reversed_pos - offset)

    def chart_bar_value(self, at_bat: WinProbabilityAtBat) -> int:
        """The home team's win probability as a whole percentage for the bar chart."""
        value = at_bat.home_team_wp
        if math.isnan(value):
            return 0
        return int(min(max(_round_half_away(value), 0.0), 100.0))

    def prepare_chart_data(self) -> Tuple[List[ChartPoint], float]:
        """Line chart points and the upper bound of the x axis.

        50% sits at zero, a certain home win at -50 and a certain away win at 50.
        Games with few at bats get interpolated points to fill the chart.
        """
        at_bats = list(self.at_bats.values())
        points: List[ChartPoint] = [
            (float(at_bat.at_bat_index), 50.0 - at_bat.home_team_wp) for at_bat in at_bats
        ]
        bound = float(at_bats[-1].at_bat_index) + 1.0 if at_bats else 0.0

        if 1 < len(points) < INTERPOLATION_TARGET_COUNT:
            points = interpolate_points(points, INTERPOLATION_TARGET_COUNT)
        return points, bound

    def generate_inning_lines(self) -> List[InningLine]:
        """Vertical lines where the half inning changes; full innings are taller."""
        lines: List[InningLine] = []
        previous: Optional[Tuple[int, bool]] = None
        for at_bat in self.at_bats.values():
            current = (at_bat.inning, at_bat.is_top_inning)
            if previous is not None and previous != current:
                x = float(at_bat.at_bat_index)
                half_height = (
                    FULL_INNING_LINE_HALF_HEIGHT
                    if at_bat.is_top_inning
                    else HALF_INNING_LINE_HALF_HEIGHT
                )
                lines.append(((x, -half_height), (x, half_height)))
            previous = current
        return lines