"""State of the Gameday tab: panels shown and the selected at bat."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class GamedayPanels:
    """Which panels are rendered in the Gameday tab."""

    info: bool = True
    at_bat: bool = True
    boxscore: bool = False
    win_probability: bool = True

    def count(self) -> int:
        """Return the number of active side-by-side panels."""
        return int(self.info) + int(self.at_bat) + int(self.boxscore)


@dataclass
class GamedayState:
    """The game being followed and the at bat the user is looking at.

    ``event_count`` is the number of at bats known for the current game.
    """

    panels: GamedayPanels = field(default_factory=GamedayPanels)
    game_id: int = 0
    event_count: int = 0
    _selected_at_bat: Optional[int] = field(default=None, init=False, repr=False)

    def selected_at_bat(self) -> Optional[int]:
        """Return the selected at bat index, or None when following live."""
        if self._selected_at_bat is None:
            return None
        return self._selected_at_bat & 0xFF

    def current_game_id(self) -> int:
        return self.game_id

    def reset(self, game_id: Optional[int]) -> None:
        """Switch to another game, clearing the selection if the game changes."""
        new_id = game_id or 0
        if self.game_id != new_id:
            self._selected_at_bat = None
            self.event_count = 0
            self.game_id = new_id

    def next_at_bat(self) -> None:
        count = self.event_count
        if count == 0:
            return
        current = self._selected_at_bat
        if current is None or current >= count - 1:
            self._selected_at_bat = 0
        else:
            self._selected_at_bat = current + 1

    def previous_at_bat(self) -> None:
        count = self.event_count
        if count == 0:
            return
        current = self._selected_at_bat
        if not current:
            self._selected_at_bat = count - 1
        else:
            self._selected_at_bat = current - 1

    def live(self) -> None:
        """Go to the live at bat by deselecting the current one."""
        self._selected_at_bat = None

    def start(self) -> None:
        """Go to the start of the game."""
        self._selected_at_bat = 0

    def toggle_info(self) -> None:
        self.panels.info = not self.panels.info

    def toggle_at_bat(self) -> None:
        self.panels.at_bat = not self.panels.at_bat

    def toggle_boxscore(self) -> None:
        self.panels.boxscore = not self.panels.boxscore

    def toggle_win_probability(self) -> None:
        self.panels.win_probability = not self.panels.win_probability