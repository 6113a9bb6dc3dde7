"""Date entry typed by the user."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, tzinfo

DATE_FORMAT = "%Y-%m-%d"
TODAY_WORDS = frozenset({"t", "today"})


class DateParseError(ValueError):
    """Raised when the entered text is not a date."""


@dataclass
class DateInput:
    """User input for the date and whether it was valid."""

    is_valid: bool = True
    text: str = ""

    def validate_input(self, tz: tzinfo) -> date:
        """Consume the entered text and return the date it names.

        "t" or "today" gives the current date in ``tz``. Raises DateParseError
        when the text is not of the form YYYY-MM-DD.
        """
        entered, self.text = self.text, ""
        if entered in TODAY_WORDS:
            self.is_valid = True
            return datetime.now(tz).date()
        try:
            parsed = datetime.strptime(entered, DATE_FORMAT).date()
        except ValueError as err:
            self.is_valid = False
            raise DateParseError(f"invalid date {entered!r}: {err}") from err
        self.is_valid = True
        return parsed