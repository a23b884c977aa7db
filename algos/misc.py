"""Assorted small algorithms: distances, subarray sums, brackets, passwords."""

from __future__ import annotations

import math
import secrets
from collections.abc import Iterable
from dataclasses import dataclass

__all__ = [
    "Vector",
    "distance",
    "max_subarray_sum",
    "is_balanced",
    "generate_password",
]

_CHARSET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789!@#$%^&*()-_=+,.?/:;{}[]`~"
_PAIRS = {")": "(", "]": "[", "}": "{"}


@dataclass(frozen=True)
class Vector:
    """A point in three-dimensional space."""

    x: float
    y: float
    z: float


def distance(a: Vector, b: Vector) -> float:
    """Euclidean distance between two vectors."""
    return math.sqrt((b.x - a.x) ** 2.0 + (b.y - a.y) ** 2.0 + (b.z - a.z) ** 2.0)


def max_subarray_sum(array: Iterable[int]) -> int:
    """Largest sum of a contiguous run, with the empty run counting as 0."""
    current = best = 0
    for value in array:
        current = max(value, current + value)
        best = max(best, current)
    return best


def is_balanced(text: str) -> bool:
    """Whether ``text`` is a properly nested sequence of (), [] and {}.

    Any character other than a bracket makes the result False.
    """
    if not text:
        return True
    if len(text) % 2 != 0:
        return False
    stack: list[str] = []
    for char in text:
        if char in "([{":
            stack.append(char)
        elif not stack or _PAIRS.get(char) != stack.pop():
            return False
    return not stack


def generate_password(min_length: int, max_length: int) -> str:
    """Return a random password whose length lies in ``[min_length, max_length)``."""
    if min_length < 0:
        raise ValueError("min_length must not be negative")
    if max_length <= min_length:
        raise ValueError("max_length must be greater than min_length")
    length = secrets.randbelow(max_length - min_length) + min_length
    return "".join(secrets.choice(_CHARSET) for _ in range(length))