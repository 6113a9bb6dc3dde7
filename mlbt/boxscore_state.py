"""Scroll state and cached content heights of the box score view."""

from __future__ import annotations

import textwrap
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence, Tuple

from mlbt.app_state import HomeOrAway

LAYOUT_SPACING = 3


def wrapped_line_count(lines: Iterable[str], width: int) -> int:
    """Number of rows the lines take when word wrapped to ``width`` columns."""
    if width < 1:
        return 0
    return sum(
        max(1, len(textwrap.wrap(line, width, break_on_hyphens=False))) for line in lines
    )


@dataclass(frozen=True)
class TeamContent:
    """The box score content of one team."""

    batting_rows: Sequence[Sequence[str]] = ()
    pitching_rows: Sequence[Sequence[str]] = ()
    batting_notes: Sequence[str] = ()


def _notes_paragraph(notes: Iterable[str]) -> Optional[Tuple[str, ...]]:
    lines = tuple(notes)
    return lines or None


@dataclass
class TeamCache:
    """Heights of one team's tables and notes."""

    batting_notes: Optional[Tuple[str, ...]] = None
    batting_notes_height: int = 0
    batting_stats_height: int = 0
    pitching_stats_height: int = 0
    total_content_height: int = 0

    @classmethod
    def _for_team(cls, content: TeamContent) -> TeamCache:
        return cls(
            batting_notes=_notes_paragraph(content.batting_notes),
            batting_stats_height=len(content.batting_rows) + 1,  # +1 for header
            pitching_stats_height=len(content.pitching_rows) + 1,  # +1 for header
        )

    def _calculate_for_width(self, width: int) -> None:
        self.batting_notes_height = (
            wrapped_line_count(self.batting_notes, width) if self.batting_notes else 0
        )
        self.total_content_height = (
            self.batting_stats_height
            + self.batting_notes_height
            + self.pitching_stats_height
            + LAYOUT_SPACING
        )


@dataclass
class BoxscoreState:
    """Which team is shown, the content, and how far it is scrolled."""

    active_team: HomeOrAway = HomeOrAway.HOME
    home: TeamContent = field(default_factory=TeamContent)
    away: TeamContent = field(default_factory=TeamContent)
    game_notes: Tuple[str, ...] = ()
    scroll: int = 0
    scroll_content_length: int = 0
    scroll_position: int = 0
    max_scroll: int = 0
    home_cache: TeamCache = field(default_factory=TeamCache)
    away_cache: TeamCache = field(default_factory=TeamCache)
    game_notes_paragraph: Optional[Tuple[str, ...]] = None
    game_notes_height: int = 0
    last_viewport_width: int = 0

    def set_home_active(self) -> None:
        self.active_team = HomeOrAway.HOME

    def set_away_active(self) -> None:
        self.active_team = HomeOrAway.AWAY

    def update(
        self, home: TeamContent, away: TeamContent, game_notes: Iterable[str] = ()
    ) -> None:
        """Replace the content and rebuild the cached heights."""
        self.home = home
        self.away = away
        self.game_notes = tuple(game_notes)
        self.home_cache = TeamCache._for_team(home)
        self.away_cache = TeamCache._for_team(away)
        self.game_notes_paragraph = _notes_paragraph(self.game_notes)
        # force recalculation of wrapped heights on the next sync
        self.last_viewport_width = 0

    def _cache_for(self, team: HomeOrAway) -> TeamCache:
        return self.home_cache if team is HomeOrAway.HOME else self.away_cache

    def _calculate_heights_for_width(self, width: int) -> int:
        if self.last_viewport_width == width:
            return self.total_content_height()
        self.home_cache._calculate_for_width(width)
        self.away_cache._calculate_for_width(width)
        self.game_notes_height = (
            wrapped_line_count(self.game_notes_paragraph, width)
            if self.game_notes_paragraph
            else 0
        )
        self.last_viewport_width = width
        return self.total_content_height()

    def sync_scrollbar(self, viewport_height: int, viewport_width: int) -> None:
        """Fit the scroll position to the content height at this viewport size."""
        total = self._calculate_heights_for_width(viewport_width)
        if total > viewport_height:
            self.max_scroll = total - viewport_height
            self.scroll = min(self.scroll, self.max_scroll)
            self.scroll_content_length = total
            self.scroll_position = self.scroll
        else:
            self.max_scroll = 0
            self.scroll = 0

    def total_content_height(self) -> int:
        """Height of the active team's content plus the game notes."""
        return self._cache_for(self.active_team).total_content_height + self.game_notes_height

    def content_heights(self, team: HomeOrAway) -> Tuple[int, int, int, int, int]:
        """Batting, notes, pitching, game notes and total heights for the layout."""
        cache = self._cache_for(team)
        return (
            cache.batting_stats_height,
            cache.batting_notes_height,
            cache.pitching_stats_height,
            self.game_notes_height,
            self.total_content_height(),
        )

    def reset_scroll(self) -> None:
        self.scroll = 0
        self.scroll_content_length = 0
        self.scroll_position = 0

    def scroll_down(self) -> None:
        if self.scroll < self.max_scroll:
            self.scroll += 1
            self.scroll_position = self.scroll

    def scroll_up(self) -> None:
        if self.scroll > 0:
            self.scroll -= 1
            self.scroll_position = self.scroll