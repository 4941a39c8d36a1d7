"""Add a gigasecond to a moment in time."""

from datetime import datetime, timedelta

GIGASECOND = timedelta(seconds=1_000_000_000)


def after(start: datetime) -> datetime:
    """Return the moment one billion seconds after ``start``."""
    return start + GIGASECOND