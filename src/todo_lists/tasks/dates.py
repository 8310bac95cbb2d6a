# src/todo_lists/tasks/dates.py

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date

from ..core.errors import InvalidDate

# M/D, M-D, M/D/Y, M-D-Y (separators may be mixed); Y is 2 or 4 digits.
_DATE_RE = re.compile(r"^(\d{1,2})[/-](\d{1,2})(?:[/-](\d{4}|\d{2}))?$")

ACCEPTED_FORMATS = "Accepted formats: MM/DD, MM/DD/YY, MM/DD/YYYY ('-' also works as separator)."


@dataclass(frozen=True, order=True, slots=True)
class DueDate:
    """Calendar date of a task. Field order gives (year, month, day) ordering."""

    year: int
    month: int
    day: int

    def __str__(self) -> str:
        return f"{self.month:02d}/{self.day:02d}/{self.year}"

    def to_iso(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    @classmethod
    def from_iso(cls, raw: str) -> DueDate:
        """Raises ValueError on anything but a real YYYY-MM-DD date."""
        d = date.fromisoformat(raw)
        return cls(year=d.year, month=d.month, day=d.day)


def parse_date(text: str, today: date | None = None) -> DueDate:
    """
    Parse user input into a DueDate.

    A missing year resolves to `today.year` right here, so a task's effective
    date is fixed when it is added.
    """
    s = (text or "").strip()
    m = _DATE_RE.match(s)
    if not m:
        raise InvalidDate(text, f"Invalid date format. {ACCEPTED_FORMATS}")

    month = int(m.group(1))
    day = int(m.group(2))
    raw_year = m.group(3)

    if raw_year is None:
        year = (today or date.today()).year
    else:
        year = int(raw_year)
        if len(raw_year) == 2:
            year += 2000  # 2-digit years are 20xx

    if not 1 <= month <= 12:
        raise InvalidDate(text, "Month must be between 1 and 12.")
    if year < 1:
        raise InvalidDate(text, "Year must be positive.")

    days_in_month = calendar.monthrange(year, month)[1]
    if not 1 <= day <= days_in_month:
        raise InvalidDate(
            text,
            f"Day must be between 1 and {days_in_month} for {calendar.month_name[month]} {year}.",
        )

    return DueDate(year=year, month=month, day=day)
