"""Temporal facts about the reference date's year."""

import calendar
import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from ..errors import InvalidDateInput

logger = logging.getLogger(__name__)

ReferenceDate = datetime | date | str

_ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class YearWindow:
    """First and last instant of a calendar year."""
    start: datetime
    end: datetime
    total_days: int


@dataclass(frozen=True)
class TemporalModel:
    """Year boundaries, elapsed days and weekday offset for a reference date."""
    reference: datetime
    year_window: YearWindow
    elapsed_days: int
    weekday_offset: int

    @property
    def total_days(self) -> int:
        return self.year_window.total_days

    @property
    def year(self) -> int:
        return self.year_window.start.year


def parse_reference_date(value: ReferenceDate) -> datetime:
    """
    Normalize a reference date to a naive wall-clock ``datetime``.

    Accepts a ``datetime``, a ``date`` (taken as midnight) or an ISO 8601 string.
    Timezone-aware values keep their own wall-clock time.

    Raises:
        InvalidDateInput: If the value cannot be read as a calendar date
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time())
    elif isinstance(value, str):
        parsed = _parse_iso(value)
    else:
        raise InvalidDateInput(f"Unsupported date value: {value!r}")
    return parsed.replace(tzinfo=None)


def _parse_iso(text: str) -> datetime:
    candidate = text.strip()
    if not candidate:
        raise InvalidDateInput("Date string is empty")
    if candidate.endswith(("Z", "z")):
        candidate = candidate[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(candidate)
    except ValueError as exc:
        raise InvalidDateInput(f"Invalid date '{text}': {exc}") from exc


def year_window(year: int) -> YearWindow:
    """Build the window spanning every instant of ``year``."""
    total_days = 366 if calendar.isleap(year) else 365
    start = datetime(year, 1, 1)
    end = datetime(year, 12, 31, 23, 59, 59, 999999)
    return YearWindow(start=start, end=end, total_days=total_days)


def monday_first_weekday(sunday_first_day: int) -> int:
    """Remap Sunday=0..Saturday=6 numbering to Monday=0..Sunday=6."""
    return 6 if sunday_first_day == 0 else sunday_first_day - 1


def compute_temporal(now: ReferenceDate) -> TemporalModel:
    """
    Derive the temporal facts for the year containing ``now``.

    Today is not counted as elapsed: any instant on January 1st yields zero.
    """
    reference = parse_reference_date(now)
    window = year_window(reference.year)

    elapsed_days = (reference - window.start) // _ONE_DAY
    # isoweekday: Monday=1..Sunday=7, so modulo 7 gives Sunday=0
    weekday_offset = monday_first_weekday(window.start.isoweekday() % 7)

    logger.debug(
        "Temporal model for %s: total=%d elapsed=%d offset=%d",
        reference.isoformat(),
        window.total_days,
        elapsed_days,
        weekday_offset,
    )
    return TemporalModel(
        reference=reference,
        year_window=window,
        elapsed_days=elapsed_days,
        weekday_offset=weekday_offset,
    )
