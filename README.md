# mlbt

The state, layout and formatting core of a terminal baseball scoreboard. It
covers scores, gameday at-bat browsing, box scores, play-by-play and win
probability charts.

The package is plain Python with no dependencies outside the standard
library.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Modules

- `mlbt.app_state`: the `AppState` dataclass, which holds the active and
  previous tab, the debug state, `show_logs`, a `DateInput` and a
  `GamedayState`. Also the `MenuItem`, `DebugState` and `HomeOrAway` enums.
- `mlbt.date_input`: `DateInput`. `validate_input(tz)` consumes the typed
  text and returns a `datetime.date`. The text can be `YYYY-MM-DD`, or `t` /
  `today` for the current date in `tz`. Any other text raises
  `DateParseError`, a `ValueError`. Each call sets `is_valid`.
- `mlbt.gameday`: `GamedayState` and `GamedayPanels`. At-bat selection uses
  `next_at_bat`, `previous_at_bat`, `live` and `start`, and wraps around
  `event_count`. `reset(game_id)` switches games. There are toggles for the
  info, at bat, boxscore and win probability panels.
- `mlbt.messages`: frozen dataclasses for the network requests
  (`ScheduleRequest`, `GameDataRequest`, `StandingsRequest`, `StatsRequest`),
  the responses (`LoadingStateChanged`, `ScheduleLoaded`, `GameDataLoaded`,
  `StandingsLoaded`, `StatsLoaded`, `NetworkError`) and the UI events
  (`KeyPressed`, `Resize`, `AppStarted`). Also `LoadingState`, `StatType`,
  `StatGroup` and `TeamOrPlayer`.
- `mlbt.network`: `NetworkWorker(client, requests, responses)`. Its `run()`
  method reads requests from an `asyncio.Queue` and calls the client object
  you supply, which must provide the methods of the `StatsClient` protocol.
  Results go onto the response queue. While a request runs it also posts
  `LoadingStateChanged` spinner frames. It ends with `"!"` after a failure and
  a blank after success. A failure also produces a `NetworkError`. Putting
  `None` on the request queue stops the worker.
- `mlbt.refresher`: `PeriodicRefresher`. `live_requests`,
  `schedule_requests` and `standings_requests` return the requests due for a
  `RefreshSnapshot`. `run(snapshot_provider)` queues them on timers of 10 s,
  60 s and 1800 s by default. The provider may be a plain function or an
  async one.
- `mlbt.geometry`: `Rect`, the constraints (`Length`, `Percentage`, `Ratio`,
  `Fill`) and `split`. It also has the screen layouts `main_areas`,
  `update_areas`, `create_top_bar`, `for_boxscore`, `for_at_bat`, `for_info`,
  `generate_gameday_panels`, `create_date_picker` and `strike_zone_area`.
- `mlbt.boxscore_state`: `BoxscoreState`, `TeamContent`, `TeamCache` and
  `wrapped_line_count`. Together they track content heights after word
  wrapping, and the scroll position (`sync_scrollbar`, `scroll_down`,
  `scroll_up`, `reset_scroll`).
- `mlbt.boxscore_view`: `visible_sections(state, area)` works out which box
  score sections are visible, where they go, and how many rows each one
  skips. Also `adjust_area_for_scroll`, `section_areas` and `scrollbar_area`.
- `mlbt.plays`: `format_plays` builds the play-by-play lines of one inning,
  newest first, as tuples of styled `Span`s. It relies on `build_line`,
  `format_runs`, `format_outs` and `format_score`.
- `mlbt.help`: the key binding table (`DOCS`, `format_row`, `help_rows`,
  `help_min_height`).
- `mlbt.win_probability`: `WinProbabilityData`. It provides the formatted
  table rows (`table_row`), the visible row range (`visible_range`), the bar
  values (`chart_bar_value`), the line chart points (`prepare_chart_data`)
  and the coordinates of the inning divider lines (`generate_inning_lines`).
  Also `interpolate_points` and `split_points`.

## Example

```python
from mlbt.gameday import GamedayState

state = GamedayState()
state.reset(746000)
state.start()
print(state.selected_at_bat())  # 0
```

## What it does not do

- There is no command and no running terminal interface. The package draws
  nothing to the screen and reads no key presses. It gives you the state,
  the rectangles, and the text and colours that a front end would draw.
- It has no HTTP client for the stats API. `NetworkWorker` calls whatever
  client object you pass it.
- It has no config file handling, and no schedule, standings or stats tables
  of its own.