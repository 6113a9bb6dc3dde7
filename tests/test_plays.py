import pytest

from mlbt.plays import (
    BLUE,
    GREEN,
    IN_PROGRESS,
    RED,
    SCORING_SYMBOL,
    SELECTION_SYMBOL,
    WHITE,
    InningPlay,
    PlayCount,
    PlayResult,
    Span,
    build_line,
    format_outs,
    format_plays,
    format_runs,
    format_score,
)


def _text(line):
    return "".join(span.text for span in line)


def test_scoring_play_without_rbi_gets_one_mark():
    span = format_runs(PlayResult(is_scoring_play=True, rbi=0), None)
    assert span == Span(SCORING_SYMBOL, BLUE)


def test_scoring_play_marks_each_rbi():
    span = format_runs(PlayResult(is_scoring_play=True, rbi=3), None)
    assert span.text == SCORING_SYMBOL * 3


def test_selected_scoring_play():
    play = PlayResult(at_bat_index=5, is_scoring_play=True, rbi=2)
    assert format_runs(play, 5).text == f"{SELECTION_SYMBOL} {SCORING_SYMBOL * 2}"


@pytest.mark.parametrize(
    "play, color",
    [
        (PlayResult(), WHITE),
        (PlayResult(is_out=True), RED),
        (PlayResult(event_codes=("X", "D")), BLUE),
        (PlayResult(event_codes=("H",)), GREEN),
        (PlayResult(is_out=True, count=PlayCount(balls=4)), GREEN),
        (PlayResult(count=PlayCount(strikes=3)), RED),
        (PlayResult(event_codes=("D",), count=PlayCount(balls=4)), GREEN),
    ],
)
def test_non_scoring_colors(play, color):
    span = format_runs(play, None)
    assert span == Span("-", color)


def test_selected_non_scoring_play_is_bold_marker():
    span = format_runs(PlayResult(at_bat_index=2, is_out=True), 2)
    assert span == Span(SELECTION_SYMBOL, RED, bold=True)


def test_other_selection_not_marked():
    assert format_runs(PlayResult(at_bat_index=2), 3).text == "-"


def test_score_only_on_scoring_play():
    play = PlayResult(is_scoring_play=True, away_score=3, home_score=2)
    assert format_score(play, "BOS", "NYY") == Span(" [NYY 3, BOS 2]", bold=True)
    assert format_score(PlayResult(away_score=3), "BOS", "NYY").text == ""


def test_outs_wording():
    assert format_outs(PlayResult(is_out=True, count=PlayCount(outs=1))).text == " 1 out"
    assert format_outs(PlayResult(is_out=True, count=PlayCount(outs=2))).text == " 2 outs"
    assert format_outs(PlayResult(count=PlayCount(outs=2))).text == ""


def test_build_line_in_progress():
    line = build_line(PlayResult(), None, "BOS", "NYY")
    assert _text(line) == f"- {IN_PROGRESS}"


def test_build_line_with_description_and_outs():
    play = PlayResult(description="Judge grounds out.", is_out=True, count=PlayCount(outs=1))
    assert _text(build_line(play, None, "BOS", "NYY")) == "- Judge grounds out. 1 out"


def test_format_plays_before_game():
    plays = [InningPlay(1, True, PlayResult(description="single"))]
    assert format_plays(plays, 0, None, "BOS", "NYY") == []


def test_format_plays_groups_half_innings_newest_first():
    plays = [
        InningPlay(1, True, PlayResult(at_bat_index=0, description="first")),
        InningPlay(2, True, PlayResult(at_bat_index=1, description="a")),
        InningPlay(2, True, PlayResult(at_bat_index=2, description="b")),
        InningPlay(2, False, PlayResult(at_bat_index=3, description="c")),
    ]
    lines = format_plays(plays, 2, None, "BOS", "NYY")
    texts = [_text(line) for line in lines]
    assert texts == ["## bottom 2", "- c", "", "## top 2", "- b", "- a"]
    assert lines[0][0].bold
    assert lines[2] == ()