"""Exceptions raised by the layout engine."""


class YearDotsError(Exception):
    """Base exception for year-dots errors."""
    pass


class InvalidDateInput(YearDotsError, ValueError):
    """The reference date could not be parsed into a calendar date."""
    pass


class InvalidCanvasSize(YearDotsError, ValueError):
    """The canvas width or height cannot produce a valid geometry."""
    pass
