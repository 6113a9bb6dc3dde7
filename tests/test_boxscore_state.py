import pytest

from mlbt.app_state import HomeOrAway
from mlbt.boxscore_state import (
    LAYOUT_SPACING,
    BoxscoreState,
    TeamContent,
    wrapped_line_count,
)


def make_team(batters, pitchers, notes=()):
    return TeamContent(
        batting_rows=[[f"batter {n}", "4", "1"] for n in range(batters)],
        pitching_rows=[[f"pitcher {n}", "6.0"] for n in range(pitchers)],
        batting_notes=notes,
    )


@pytest.fixture
def state():
    s = BoxscoreState()
    s.update(
        make_team(9, 4, ["a. Singled for Smith in the 7th inning."]),
        make_team(11, 6),
        ["Weather: sunny and warm", "Attendance: plenty"],
    )
    return s


def test_wrapped_line_count_wraps_words():
    assert wrapped_line_count(["aaa bbb"], 3) == 2


def test_wrapped_line_count_wide_viewport_one_row_per_line():
    lines = ["short", "also short", ""]
    assert wrapped_line_count(lines, 80) == len(lines)


def test_wrapped_line_count_zero_width():
    assert wrapped_line_count(["anything"], 0) == 0


def test_wrapped_line_count_narrower_is_taller():
    lines = ["the quick brown fox jumps over the lazy dog"]
    assert wrapped_line_count(lines, 10) >= wrapped_line_count(lines, 20)
    assert wrapped_line_count(lines, 20) >= wrapped_line_count(lines, 80)


def test_update_builds_table_heights(state):
    assert state.home_cache.batting_stats_height == len(state.home.batting_rows) + 1
    assert state.away_cache.pitching_stats_height == len(state.away.pitching_rows) + 1
    assert state.away_cache.batting_notes is None
    assert state.last_viewport_width == 0


def test_total_height_is_sum_of_parts(state):
    state.sync_scrollbar(100, 80)
    batting, notes, pitching, game_notes, total = state.content_heights(HomeOrAway.HOME)
    assert total == batting + notes + pitching + LAYOUT_SPACING + game_notes
    assert total == state.total_content_height()
    assert notes == len(state.home.batting_notes)
    assert game_notes == len(state.game_notes)


def test_active_team_changes_total(state):
    state.sync_scrollbar(100, 80)
    home_total = state.total_content_height()
    state.set_away_active()
    assert state.active_team is HomeOrAway.AWAY
    away_total = state.total_content_height()
    assert away_total != home_total
    assert away_total == state.content_heights(HomeOrAway.AWAY)[4]
    state.set_home_active()
    assert state.total_content_height() == home_total


def test_sync_small_viewport_sets_max_scroll(state):
    state.sync_scrollbar(10, 80)
    total = state.total_content_height()
    assert state.max_scroll == total - 10
    assert state.scroll_content_length == total


def test_sync_large_viewport_resets_scroll(state):
    state.sync_scrollbar(10, 80)
    state.scroll_down()
    state.sync_scrollbar(500, 80)
    assert state.max_scroll == 0
    assert state.scroll == 0


def test_scroll_down_clamps(state):
    state.sync_scrollbar(10, 80)
    for _ in range(state.max_scroll + 5):
        state.scroll_down()
    assert state.scroll == state.max_scroll
    assert state.scroll_position == state.scroll


def test_scroll_up_clamps_at_zero(state):
    state.sync_scrollbar(10, 80)
    state.scroll_down()
    state.scroll_up()
    state.scroll_up()
    assert state.scroll == 0
    assert state.scroll_position == 0


def test_sync_shrinks_scroll_to_new_max(state):
    state.sync_scrollbar(5, 80)
    for _ in range(state.max_scroll):
        state.scroll_down()
    state.sync_scrollbar(state.total_content_height() - 2, 80)
    assert state.scroll == state.max_scroll


def test_reset_scroll(state):
    state.sync_scrollbar(10, 80)
    state.scroll_down()
    state.reset_scroll()
    assert (state.scroll, state.scroll_position, state.scroll_content_length) == (0, 0, 0)


def test_narrow_viewport_recalculates_notes(state):
    state.sync_scrollbar(100, 80)
    wide_notes = state.content_heights(HomeOrAway.HOME)[1]
    state.sync_scrollbar(100, 8)
    narrow_notes = state.content_heights(HomeOrAway.HOME)[1]
    assert narrow_notes > wide_notes
    assert state.last_viewport_width == 8


def test_update_resets_viewport_width(state):
    state.sync_scrollbar(100, 80)
    state.update(make_team(1, 1), make_team(1, 1))
    assert state.last_viewport_width == 0
    assert state.game_notes_paragraph is None
    state.sync_scrollbar(100, 80)
    assert state.game_notes_height == 0