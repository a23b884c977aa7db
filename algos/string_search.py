"""Single-pattern string algorithms: edit distance, naive search and KMP."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "KmpResult",
    "levenshtein_distance",
    "naive_pattern_search",
    "kmp",
    "kmp_table",
]

NOT_FOUND = -1


@dataclass(frozen=True)
class KmpResult:
    """Where a KMP search found the word and how many comparisons it took.

    ``position`` is -1 when the word does not occur in the text.
    """

    position: int
    comparisons: int

    @property
    def found(self) -> bool:
        return self.position != NOT_FOUND


def levenshtein_distance(str1: str, str2: str, icost: int, scost: int, dcost: int) -> int:
    """Weighted edit distance turning ``str1`` into ``str2``.

    ``icost``, ``scost`` and ``dcost`` are the costs of an insertion, a
    substitution and a deletion.
    """
    previous = [j * icost for j in range(len(str2) + 1)]
    for i, char1 in enumerate(str1, 1):
        current = [i * dcost]
        for j, char2 in enumerate(str2, 1):
            if char1 == char2:
                current.append(previous[j - 1])
            else:
                current.append(
                    min(
                        current[j - 1] + icost,
                        previous[j] + dcost,
                        previous[j - 1] + scost,
                    )
                )
        previous = current
    return previous[-1]


def naive_pattern_search(text: str, pattern: str) -> list[int]:
    """Return every index at which ``pattern`` occurs in ``text``, overlaps included."""
    width = len(pattern)
    return [
        start
        for start in range(len(text) - width + 1)
        if text[start:start + width] == pattern
    ]


def kmp_table(word: str) -> list[int]:
    """Build the partial-match table used by :func:`kmp`.

    The word must be at least two characters long.
    """
    if len(word) < 2:
        raise ValueError("word must be at least two characters long")
    table = [0] * len(word)
    table[0], table[1] = -1, 0
    pos, candidate = 2, 0
    while pos < len(word):
        if word[pos - 1] == word[candidate]:
            candidate += 1
            table[pos] = candidate
            pos += 1
        elif candidate > 0:
            candidate = table[candidate]
        else:
            table[pos] = 0
            pos += 1
    return table


def kmp(text: str, word: str) -> KmpResult:
    """Find the first occurrence of ``word`` in ``text`` with Knuth-Morris-Pratt."""
    table = kmp_table(word)
    start = offset = comparisons = 0
    while start + offset < len(text):
        comparisons += 1
        if word[offset] == text[start + offset]:
            if offset == len(word) - 1:
                return KmpResult(start, comparisons)
            offset += 1
        else:
            start = start + offset - table[offset]
            offset = table[offset] if table[offset] > -1 else 0
    return KmpResult(NOT_FOUND, comparisons)