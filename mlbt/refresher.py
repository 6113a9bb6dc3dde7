"""Periodic refresh of live data, the schedule and the standings."""

from __future__ import annotations

import asyncio
import inspect
from dataclasses import dataclass, field
from datetime import date
from typing import Awaitable, Callable, List, Optional, Union

from mlbt.app_state import MenuItem
from mlbt.messages import (
    GameDataRequest,
    NetworkRequest,
    ScheduleRequest,
    StandingsRequest,
)

LIVE_INTERVAL = 10.0
SCHEDULE_INTERVAL = 60.0
STANDINGS_INTERVAL = 1800.0


@dataclass(frozen=True)
class RefreshSnapshot:
    """The parts of the application state the refresher looks at."""

    active_tab: MenuItem = MenuItem.SCOREBOARD
    current_game_id: int = 0
    selected_game_id: Optional[int] = None
    schedule_date: date = field(default_factory=date.today)
    standings_date: date = field(default_factory=date.today)


SnapshotProvider = Callable[[], Union[RefreshSnapshot, Awaitable[RefreshSnapshot]]]


class PeriodicRefresher:
    """Queue refresh requests at fixed intervals for the active tab."""

    def __init__(
        self,
        network_requests: "asyncio.Queue[NetworkRequest]",
        live_interval: float = LIVE_INTERVAL,
        schedule_interval: float = SCHEDULE_INTERVAL,
        standings_interval: float = STANDINGS_INTERVAL,
    ) -> None:
        self._network_requests = network_requests
        self._live_interval = live_interval
        self._schedule_interval = schedule_interval
        self._standings_interval = standings_interval

    def live_requests(self, snapshot: RefreshSnapshot) -> List[NetworkRequest]:
        if snapshot.active_tab is MenuItem.GAMEDAY and snapshot.current_game_id > 0:
            return [GameDataRequest(snapshot.current_game_id)]
        return []

    def schedule_requests(self, snapshot: RefreshSnapshot) -> List[NetworkRequest]:
        if snapshot.active_tab is not MenuItem.SCOREBOARD:
            return []
        requests: List[NetworkRequest] = [ScheduleRequest(snapshot.schedule_date)]
        game_id = snapshot.selected_game_id or 0
        if game_id > 0:
            requests.append(GameDataRequest(game_id))
        return requests

    def standings_requests(self, snapshot: RefreshSnapshot) -> List[NetworkRequest]:
        if snapshot.active_tab is MenuItem.STANDINGS:
            return [StandingsRequest(snapshot.standings_date)]
        return []

    async def run(self, snapshot_provider: SnapshotProvider) -> None:
        """Run forever; each timer fires once immediately, then at its interval."""
        await asyncio.gather(
            self._every(self._live_interval, self.live_requests, snapshot_provider),
            self._every(self._schedule_interval, self.schedule_requests, snapshot_provider),
            self._every(self._standings_interval, self.standings_requests, snapshot_provider),
        )

    async def _every(
        self,
        interval: float,
        build: Callable[[RefreshSnapshot], List[NetworkRequest]],
        snapshot_provider: SnapshotProvider,
    ) -> None:
        loop = asyncio.get_running_loop()
        next_tick = loop.time()
        while True:
            snapshot = snapshot_provider()
            if inspect.isawaitable(snapshot):
                snapshot = await snapshot
            for request in build(snapshot):
                await self._network_requests.put(request)
            next_tick += interval
            await asyncio.sleep(max(0.0, next_tick - loop.time()))