"""Fuzzy name suggestions based on edit distance."""

from __future__ import annotations

from typing import Iterable


def levenshtein_distance(s1: str, s2: str, limit: int) -> int:
    """Edit distance between ``s1`` and the first ``limit`` characters of ``s2``."""
    target = s2[: min(limit, len(s2))]
    previous = list(range(len(target) + 1))
    for i, char1 in enumerate(s1):
        current = [i + 1]
        for j, char2 in enumerate(target):
            current.append(
                min(previous[j + 1] + 1, current[j] + 1, previous[j] + (char1 != char2))
            )
        previous = current
    return previous[-1]


class SpellCorrector:
    """Suggests dictionary words close to a misspelt word."""

    def __init__(self, dictionary: Iterable[str] = (), threshold: int = 3) -> None:
        self.dictionary = list(dictionary)
        self.threshold = threshold

    def fuzzy_match(self, s1: str, s2: str) -> int:
        """Score of ``s2`` against ``s1``; 0 means no match, higher is closer."""
        score = levenshtein_distance(s1, s2, len(s1) + 1)
        if score > self.threshold:
            return 0
        return self.threshold - score

    def suggest(self, word: str) -> list[str]:
        """Dictionary words matching ``word``, best first."""
        lowered = word.lower()
        scored = [
            (entry, score)
            for entry in self.dictionary
            if (score := self.fuzzy_match(lowered, entry.lower()))
        ]
        scored.sort(key=lambda pair: pair[1], reverse=True)
        return [entry for entry, _ in scored]