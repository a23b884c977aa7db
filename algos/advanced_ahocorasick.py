"""Multiple-pattern search with a fully completed Aho-Corasick automaton.

Unlike the basic automaton, every state gets a transition for every
character that occurs in the patterns, so the search never has to walk
the supply function at run time.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from algos.ahocorasick import Automaton, build_ac

__all__ = [
    "compute_alphabet",
    "get_word",
    "array_union",
    "build_extended_ac",
    "aho_corasick",
]


def compute_alphabet(patterns: Sequence[str]) -> str:
    """Return the concatenation of all patterns: every character they use."""
    if not patterns:
        raise ValueError("at least one pattern is required")
    return "".join(patterns)


def get_word(begin: int, end: int, text: str) -> str:
    """Return ``text[begin:end + 1]``, or "" when ``end`` lies past the text."""
    if end >= len(text):
        return ""
    if begin < 0:
        raise IndexError(f"begin {begin} lies before the start of the text")
    return text[begin:end + 1]


def array_union(to: Sequence[int], source: Iterable[int]) -> list[int]:
    """Return ``to`` followed by the values of ``source`` it does not already hold."""
    merged = list(to)
    for value in source:
        if value not in merged:
            merged.append(value)
    return merged


def build_extended_ac(patterns: Sequence[str]) -> tuple[Automaton, dict[int, list[int]]]:
    """Build the completed automaton for ``patterns``.

    Returns the automaton and, for each output state, the indices of the
    patterns that end there.
    """
    alphabet = list(dict.fromkeys(compute_alphabet(patterns)))
    automaton, outputs, supply = build_ac(patterns)

    for char in alphabet:
        if automaton.transition(0, char) is None:
            automaton.add_transition(0, char, 0)

    for current in range(1, len(supply)):
        for char in alphabet:
            if automaton.transition(current, char) is not None:
                continue
            target = automaton.transition(supply[current], char)
            if target is not None:
                automaton.add_transition(current, char, target)

    return automaton, outputs


def aho_corasick(text: str, patterns: Sequence[str]) -> dict[str, list[int]]:
    """Map each pattern found in ``text`` to the start positions of its occurrences."""
    automaton, outputs = build_extended_ac(patterns)
    occurrences: dict[int, list[int]] = {}
    current = 0
    for pos, char in enumerate(text):
        target = automaton.transition(current, char)
        current = target if target is not None else 0
        for index in outputs.get(current, ()):
            word = patterns[index]
            start = pos - len(word) + 1
            if start >= 0 and word == get_word(start, pos, text):
                occurrences.setdefault(index, []).append(start)
    return {patterns[index]: positions for index, positions in occurrences.items()}