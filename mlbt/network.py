"""Worker that serves network requests and reports loading progress."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from datetime import date
from typing import Any, Optional, Protocol

from mlbt.messages import (
    ERROR_CHAR,
    GameDataLoaded,
    GameDataRequest,
    LoadingState,
    LoadingStateChanged,
    NetworkError,
    NetworkRequest,
    NetworkResponse,
    ScheduleLoaded,
    ScheduleRequest,
    StandingsLoaded,
    StandingsRequest,
    StatGroup,
    StatsLoaded,
    StatsRequest,
    TeamOrPlayer,
)

logger = logging.getLogger(__name__)

SPINNER_CHARS = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")
SPINNER_INTERVAL = 0.033  # about 30 frames per second
STOP_DELAY = 0.015


class StatsClient(Protocol):
    """The calls the worker makes on the stats API client."""

    async def get_schedule_date(self, day: date) -> Any: ...

    async def get_live_data(self, game_id: int) -> Any: ...

    async def get_win_probability(self, game_id: int) -> Any: ...

    async def get_standings(self, day: date) -> Any: ...

    async def get_team_stats_on_date(self, group: StatGroup, day: date) -> Any: ...

    async def get_player_stats_on_date(self, group: StatGroup, day: date) -> Any: ...


class NetworkWorker:
    """Serve requests from one queue, putting responses on another.

    Putting ``None`` on the request queue stops the worker.
    """

    def __init__(
        self,
        client: StatsClient,
        requests: "asyncio.Queue[Optional[NetworkRequest]]",
        responses: "asyncio.Queue[NetworkResponse]",
    ) -> None:
        self._client = client
        self._requests = requests
        self._responses = responses
        self._loading = asyncio.Event()

    async def run(self) -> None:
        while (request := await self._requests.get()) is not None:
            spinner = await self._start_loading_animation()
            try:
                response = await self._handle(request)
                ok = True
            except Exception as err:  # any failure is reported to the interface
                logger.error("request %r failed: %s", request, err)
                response = NetworkError(str(err))
                ok = False
            logger.debug("request complete")
            await self._stop_loading_animation(spinner, ok)
            await self._responses.put(response)

    async def _handle(self, request: NetworkRequest) -> NetworkResponse:
        client = self._client
        match request:
            case ScheduleRequest(date=day):
                logger.debug("loading schedule for %s", day)
                return ScheduleLoaded(await client.get_schedule_date(day))
            case GameDataRequest(game_id=game_id):
                logger.debug("loading game data for %s", game_id)
                game, win_probability = await asyncio.gather(
                    client.get_live_data(game_id),
                    client.get_win_probability(game_id),
                    return_exceptions=True,
                )
                for result in (game, win_probability):
                    if isinstance(result, BaseException):
                        raise result
                return GameDataLoaded(game, win_probability)
            case StandingsRequest(date=day):
                logger.debug("loading standings for %s", day)
                return StandingsLoaded(await client.get_standings(day))
            case StatsRequest(date=day, stat_type=stat_type):
                logger.debug("loading %s stats for %s", stat_type, day)
                if stat_type.team_player is TeamOrPlayer.TEAM:
                    stats = await client.get_team_stats_on_date(stat_type.group, day)
                else:
                    stats = await client.get_player_stats_on_date(stat_type.group, day)
                return StatsLoaded(stats)
        raise TypeError(f"unknown request {request!r}")

    async def _start_loading_animation(self) -> "asyncio.Task[None]":
        self._loading.set()
        await self._responses.put(LoadingStateChanged(LoadingState(True, SPINNER_CHARS[0])))
        return asyncio.create_task(self._animate())

    async def _animate(self) -> None:
        index = 1
        while self._loading.is_set():
            state = LoadingState(True, SPINNER_CHARS[index])
            index = (index + 1) % len(SPINNER_CHARS)
            await self._responses.put(LoadingStateChanged(state))
            await asyncio.sleep(SPINNER_INTERVAL)

    async def _stop_loading_animation(self, spinner: "asyncio.Task[None]", ok: bool) -> None:
        self._loading.clear()
        await asyncio.sleep(STOP_DELAY)
        spinner.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await spinner
        final = LoadingState(False, " " if ok else ERROR_CHAR)
        await self._responses.put(LoadingStateChanged(final))