"""Multiple-pattern search with the Aho-Corasick automaton."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

__all__ = [
    "Automaton",
    "construct_trie",
    "build_ac",
    "aho_corasick",
]


class Automaton:
    """A deterministic automaton over characters with integer states."""

    def __init__(self) -> None:
        self._states: dict[int, dict[str, int]] = {}
        self._parents: dict[int, tuple[str, int]] = {}

    def __len__(self) -> int:
        return len(self._states)

    def add_state(self, state: int) -> None:
        """Create ``state`` with no outgoing transitions."""
        self._states[state] = {}

    def add_transition(self, from_state: int, char: str, to_state: int) -> None:
        """Set the transition from ``from_state`` over ``char`` to ``to_state``."""
        self._states[from_state][char] = to_state
        self._parents.setdefault(to_state, (char, from_state))

    def transition(self, from_state: int, char: str) -> int | None:
        """Return the target of the transition, or None if there is none."""
        if not self.has_state(from_state):
            return None
        return self._states[from_state].get(char)

    def has_state(self, state: int) -> bool:
        """Whether ``state`` exists; -1 never does."""
        return state != -1 and state in self._states

    def parent(self, state: int) -> tuple[str, int]:
        """Return ``(char, state)`` of the first transition added into ``state``.

        In a trie this is the unique parent. Raises KeyError if nothing
        leads into ``state``.
        """
        try:
            return self._parents[state]
        except KeyError:
            raise KeyError(f"state {state} has no parent") from None


def construct_trie(patterns: Sequence[str]) -> tuple[Automaton, list[bool], dict[int, list[int]]]:
    """Build the trie of ``patterns``.

    Returns the trie, a flag per state telling whether it ends a pattern, and
    for each terminal state the indices of the patterns ending there.
    """
    trie = Automaton()
    trie.add_state(0)
    terminal = [False]
    outputs: dict[int, list[int]] = {}
    next_state = 1
    for index, pattern in enumerate(patterns):
        current = 0
        consumed = 0
        for char in pattern:
            target = trie.transition(current, char)
            if target is None:
                break
            current = target
            consumed += 1
        for char in pattern[consumed:]:
            terminal.append(False)
            trie.add_state(next_state)
            trie.add_transition(current, char, next_state)
            current = next_state
            next_state += 1
        if terminal[current]:
            outputs[current].append(index)
        else:
            terminal[current] = True
            outputs[current] = [index]
    return trie, terminal, outputs


def _array_union(to: list[int], source: Iterable[int]) -> list[int]:
    """Append to ``to`` every value of ``source`` it does not already hold."""
    merged = list(to)
    for value in source:
        if value not in merged:
            merged.append(value)
    return merged


def build_ac(patterns: Sequence[str]) -> tuple[Automaton, dict[int, list[int]], list[int]]:
    """Build the automaton for ``patterns``.

    Returns the trie, the pattern indices output at each state and the
    supply (failure) function, in which the root maps to -1.
    """
    trie, terminal, outputs = construct_trie(patterns)
    supply = [0] * len(terminal)
    supply[0] = -1
    for current in range(1, len(terminal)):
        char, parent = trie.parent(current)
        down = supply[parent]
        while trie.has_state(down) and trie.transition(down, char) is None:
            down = supply[down]
        if trie.has_state(down):
            fallback = trie.transition(down, char)
            supply[current] = fallback
            if terminal[fallback]:
                terminal[current] = True
                outputs[current] = _array_union(outputs.get(current, []), outputs[fallback])
        else:
            supply[current] = 0
    return trie, outputs, supply


def _get_word(begin: int, end: int, text: str) -> str:
    """Return ``text[begin:end + 1]``, or "" when the range leaves the text."""
    if end >= len(text) or begin < 0:
        return ""
    return text[begin:end + 1]


def aho_corasick(text: str, patterns: Sequence[str]) -> dict[str, list[int]]:
    """Map each pattern found in ``text`` to the start positions of its occurrences."""
    trie, outputs, supply = build_ac(patterns)
    occurrences: dict[int, list[int]] = {}
    current = 0
    for pos, char in enumerate(text):
        while trie.transition(current, char) is None and supply[current] != -1:
            current = supply[current]
        target = trie.transition(current, char)
        current = target if target is not None else 0
        for index in outputs.get(current, ()):
            word = patterns[index]
            start = pos - len(word) + 1
            if word == _get_word(start, pos, text):
                occurrences.setdefault(index, []).append(start)
    return {patterns[index]: positions for index, positions in occurrences.items()}