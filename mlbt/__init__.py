"""State, layout and formatting logic for a terminal baseball scoreboard."""

__version__ = "0.0.17"