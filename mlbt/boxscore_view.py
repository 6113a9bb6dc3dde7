"""Placement of the box score sections, with scrolling and clipping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from mlbt.boxscore_state import BoxscoreState
from mlbt.geometry import Length, Rect, split

BATTING = "batting"
BATTING_NOTES = "batting_notes"
PITCHING = "pitching"
GAME_NOTES = "game_notes"

BATTING_HEADER = ("player", "ab", "r", "h", "rbi", "bb", "k", "lob", "avg")
BATTER_WIDTHS = (25, 4, 4, 4, 4, 4, 4, 4, 5)
PITCHING_HEADER = ("pitcher", "ip", "h", "r", "er", "bb", "k", "hr", "era")
PITCHER_WIDTHS = (25, 5, 4, 4, 4, 4, 4, 4, 5)


@dataclass(frozen=True)
class ScrollParams:
    """How far the content is scrolled and which rows are on screen."""

    scroll_offset: int
    visible_top: int
    visible_bottom: int


@dataclass(frozen=True)
class VisibleSection:
    """A section of the box score, where it is drawn and how many rows it skips."""

    name: str
    area: Rect
    skip_rows: int = 0


def adjust_area_for_scroll(area: Rect, params: ScrollParams) -> Optional[Rect]:
    """Move ``area`` by the scroll offset and clip it to the visible rows.

    Returns None when nothing of the area is visible.
    """
    area_top = area.y - params.scroll_offset + params.visible_top
    area_bottom = area_top + area.height

    if area_bottom <= params.visible_top or area_top >= params.visible_bottom:
        return None

    clipped_top = max(area_top, params.visible_top)
    clipped_bottom = min(area_bottom, params.visible_bottom)
    clipped_height = clipped_bottom - clipped_top
    if clipped_height <= 0:
        return None
    return Rect(area.x, clipped_top, area.width, clipped_height)


def section_areas(state: BoxscoreState, area: Rect) -> Tuple[Rect, Rect, Rect, Rect]:
    """Batting, batting notes, pitching and game notes areas, one row apart."""
    batting, notes, pitching, game_notes, _ = state.content_heights(state.active_team)
    first, second, third, fourth = split(
        area,
        [Length(batting), Length(notes), Length(pitching), Length(game_notes)],
        spacing=1,
    )
    return first, second, third, fourth


def _has_batting_notes(state: BoxscoreState) -> bool:
    cache = state.home_cache if state.active_team.value == 0 else state.away_cache
    return cache.batting_notes is not None


def _static_sections(state: BoxscoreState, area: Rect) -> List[VisibleSection]:
    batting, notes, pitching, game_notes = section_areas(state, area)
    sections = [VisibleSection(BATTING, batting)]
    if _has_batting_notes(state):
        sections.append(VisibleSection(BATTING_NOTES, notes))
    sections.append(VisibleSection(PITCHING, pitching))
    if state.game_notes_paragraph is not None:
        sections.append(VisibleSection(GAME_NOTES, game_notes))
    return sections


def _scrollable_sections(state: BoxscoreState, area: Rect) -> List[VisibleSection]:
    batting_h, notes_h, pitching_h, _, total = state.content_heights(state.active_team)
    # a larger area than is visible, laid out from row zero
    virtual = Rect(area.x, 0, area.width, total)
    batting, notes, pitching, game_notes = section_areas(state, virtual)

    scroll = state.scroll
    params = ScrollParams(scroll, area.y, area.bottom)
    notes_skip = max(0, scroll - (batting_h + 1))
    pitching_skip = max(0, notes_skip - (notes_h + 1))
    game_notes_skip = max(0, pitching_skip - (pitching_h + 1))

    candidates = (
        (BATTING, batting, scroll, True),
        (BATTING_NOTES, notes, notes_skip, _has_batting_notes(state)),
        (PITCHING, pitching, pitching_skip, True),
        (GAME_NOTES, game_notes, game_notes_skip, state.game_notes_paragraph is not None),
    )
    sections = []
    for name, section_area, skip, present in candidates:
        visible = adjust_area_for_scroll(section_area, params)
        if visible is not None and present:
            sections.append(VisibleSection(name, visible, skip))
    return sections


def visible_sections(state: BoxscoreState, area: Rect) -> List[VisibleSection]:
    """Sync the scroll state to ``area`` and return the sections to draw in it."""
    state.sync_scrollbar(area.height, area.width)
    if state.total_content_height() > area.height:
        return _scrollable_sections(state, area)
    return _static_sections(state, area)


def scrollbar_area(area: Rect) -> Rect:
    """The one column wide scrollbar, drawn over the right border."""
    return Rect(area.x + area.width + 1, area.y, 1, area.height)