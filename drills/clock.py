"""A clock that ignores dates."""

from dataclasses import dataclass

_MINUTES_PER_DAY = 24 * 60


@dataclass(frozen=True)
class Clock:
    """A time of day; any hours and minutes are wrapped into one day."""

    hours: int
    minutes: int

    def __post_init__(self) -> None:
        total = (self.hours * 60 + self.minutes) % _MINUTES_PER_DAY
        hours, minutes = divmod(total, 60)
        object.__setattr__(self, "hours", hours)
        object.__setattr__(self, "minutes", minutes)

    def add_minutes(self, minutes: int) -> "Clock":
        """Return a new clock ``minutes`` later (earlier when negative)."""
        return Clock(self.hours, self.minutes + minutes)

    def __str__(self) -> str:
        return f"{self.hours:02}:{self.minutes:02}"