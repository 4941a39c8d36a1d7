"""Convert legacy letter scores to a per-letter table."""

from collections.abc import Iterable, Mapping


def transform(legacy: Mapping[int, Iterable[str]]) -> dict[str, int]:
    """Map each lowercased letter to its score, ordered by letter.

    Scores are applied in ascending order, so a letter listed under several
    scores gets the highest one.
    """
    scores = {
        letter.lower() if letter.isascii() else letter: score
        for score in sorted(legacy)
        for letter in legacy[score]
    }
    return dict(sorted(scores.items()))