"""Past/today/future classification of day cells."""

from enum import Enum


class DotKind(Enum):
    PAST = "past"
    TODAY = "today"
    FUTURE = "future"


def classify(day_index: int, elapsed_days: int) -> DotKind:
    """Classify a day relative to the number of fully elapsed days."""
    if day_index < elapsed_days:
        return DotKind.PAST
    if day_index == elapsed_days:
        return DotKind.TODAY
    return DotKind.FUTURE
