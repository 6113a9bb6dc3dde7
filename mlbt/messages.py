"""Messages passed between the interface, the network worker and the refresher."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Union

ERROR_CHAR = "!"


class StatGroup(Enum):
    HITTING = "hitting"
    PITCHING = "pitching"


class TeamOrPlayer(Enum):
    TEAM = "team"
    PLAYER = "player"


@dataclass(frozen=True)
class StatType:
    """Which stats table to load."""

    team_player: TeamOrPlayer
    group: StatGroup


@dataclass(frozen=True)
class ScheduleRequest:
    date: date


@dataclass(frozen=True)
class GameDataRequest:
    game_id: int


@dataclass(frozen=True)
class StandingsRequest:
    date: date


@dataclass(frozen=True)
class StatsRequest:
    date: date
    stat_type: StatType


NetworkRequest = Union[ScheduleRequest, GameDataRequest, StandingsRequest, StatsRequest]


@dataclass(frozen=True)
class LoadingState:
    """Whether a request is in flight and which spinner character to show."""

    is_loading: bool = False
    spinner_char: str = " "

    @property
    def is_error(self) -> bool:
        return self.spinner_char == ERROR_CHAR


@dataclass(frozen=True)
class LoadingStateChanged:
    loading_state: LoadingState


@dataclass(frozen=True)
class ScheduleLoaded:
    schedule: Any


@dataclass(frozen=True)
class GameDataLoaded:
    game: Any
    win_probability: Any


@dataclass(frozen=True)
class StandingsLoaded:
    standings: Any


@dataclass(frozen=True)
class StatsLoaded:
    stats: Any


@dataclass(frozen=True)
class NetworkError:
    message: str


NetworkResponse = Union[
    LoadingStateChanged,
    ScheduleLoaded,
    GameDataLoaded,
    StandingsLoaded,
    StatsLoaded,
    NetworkError,
]


@dataclass(frozen=True)
class KeyPressed:
    key: Any


@dataclass(frozen=True)
class Resize:
    pass


@dataclass(frozen=True)
class AppStarted:
    pass


UiEvent = Union[KeyPressed, Resize, AppStarted]