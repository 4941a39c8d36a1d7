"""A player's list of game scores."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class HighScores:
    """Scores in the order they were achieved."""

    scores: tuple[int, ...]

    def __init__(self, scores: Iterable[int]) -> None:
        object.__setattr__(self, "scores", tuple(scores))

    def latest(self) -> Optional[int]:
        """Return the most recent score, or None if there are none."""
        return self.scores[-1] if self.scores else None

    def personal_best(self) -> Optional[int]:
        """Return the highest score, or None if there are none."""
        return max(self.scores, default=None)

    def personal_top_three(self) -> list[int]:
        """Return up to three highest scores, highest first."""
        return sorted(self.scores, reverse=True)[:3]