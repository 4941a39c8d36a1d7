"""Find anagrams of a word among candidates."""

from collections import Counter
from collections.abc import Iterable


def anagrams_for(word: str, candidates: Iterable[str]) -> set[str]:
    """Return the candidates that are anagrams of ``word``, ignoring case.

    A word is never an anagram of itself.
    """
    lowered = word.lower()
    letters = Counter(lowered)
    return {
        candidate
        for candidate in candidates
        if candidate.lower() != lowered and Counter(candidate.lower()) == letters
    }