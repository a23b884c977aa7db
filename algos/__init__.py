"""Classic algorithms: sorting, searching, number theory, combinatorics and string matching."""

__version__ = "0.1.0"

__all__ = [
    "sorts",
    "searches",
    "arithmetic",
    "primes",
    "combinatorics",
    "misc",
    "string_search",
    "ahocorasick",
    "advanced_ahocorasick",
]