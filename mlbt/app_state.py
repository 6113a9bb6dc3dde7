"""Top level application state shared by the views."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from mlbt.date_input import DateInput
from mlbt.gameday import GamedayState


class HomeOrAway(Enum):
    """A team must be either Home or Away."""

    HOME = 0
    AWAY = 1

    @classmethod
    def default(cls) -> HomeOrAway:
        return cls.HOME


class MenuItem(Enum):
    """The tabs and overlays of the interface; the first four are the visible tabs in order."""

    SCOREBOARD = 0
    GAMEDAY = 1
    STATS = 2
    STANDINGS = 3
    DATE_PICKER = 4
    HELP = 5

    @classmethod
    def default(cls) -> MenuItem:
        return cls.SCOREBOARD


class DebugState(Enum):
    """Whether the debug overlay is shown."""

    OFF = 0
    ON = 1

    @classmethod
    def default(cls) -> DebugState:
        return cls.OFF


@dataclass
class AppState:
    """Mutable state of the running application."""

    active_tab: MenuItem = MenuItem.SCOREBOARD
    previous_tab: MenuItem = MenuItem.SCOREBOARD
    debug_state: DebugState = DebugState.OFF
    show_logs: bool = False
    date_input: DateInput = field(default_factory=DateInput)
    gameday: GamedayState = field(default_factory=GamedayState)