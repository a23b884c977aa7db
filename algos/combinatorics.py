"""Sequences, permutations and combinations."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = [
    "moser_de_bruijn_sequence",
    "generate_element_set",
    "heaps",
    "string_combinations",
    "print_combinations",
]


def _moser_de_bruijn_term(num: int) -> int:
    if num in (0, 1):
        return num
    term = 4 * _moser_de_bruijn_term(num // 2)
    return term if num % 2 == 0 else term + 1


def moser_de_bruijn_sequence(number: int) -> list[int]:
    """Return the first ``number`` sums of distinct powers of four, in order."""
    return [_moser_de_bruijn_term(i) for i in range(number)]


def generate_element_set(n: int) -> list[str]:
    """Return the ``n`` symbols "1", "2", ... used as permutation elements."""
    return [chr(i + 49) for i in range(n)]


def heaps(n: int) -> list[str]:
    """Return every permutation of ``n`` symbols, in the order Heap's algorithm visits them."""
    elements = generate_element_set(n)
    permutations: list[str] = []

    def permute(k: int) -> None:
        if k == 1:
            permutations.append("".join(elements))
            return
        for i in range(k):
            permute(k - 1)
            swap = i if k % 2 == 1 else 0
            elements[swap], elements[k - 1] = elements[k - 1], elements[swap]

    permute(n)
    return permutations


def string_combinations(text: str) -> Iterator[str]:
    """Yield every non-empty subsequence of ``text`` in depth-first order."""
    if not text:
        raise ValueError("text must not be empty")
    chars = list(text)

    def combine(prefix: str, seed: int) -> Iterator[str]:
        for i in range(seed, len(chars) - 1):
            current = prefix + chars[i]
            yield current
            yield from combine(current, i + 1)
        yield prefix + chars[-1]

    return combine("", 0)


def print_combinations(text: str) -> None:
    """Print each combination of ``text`` on its own line."""
    for combination in string_combinations(text):
        print(combination)