# algos

A collection of classic algorithms written as plain Python functions on
built-in types. It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Contents

### `algos.sorts`

`bubble_sort`, `heap_sort`, `insertion_sort`, `quick_sort`,
`selection_sort` and `shell_sort` sort the given list in place and return
that same list. `merge_sort` returns a new sorted list and leaves its input
alone. `radix_sort` takes any iterable of integers, negatives included, and
returns a new sorted list.

### `algos.searches`

`binary_search(array, target, low_index, high_index)` (recursive),
`iter_binary_search(array, target, low_index, high_index)`,
`interpolation_search(sorted_data, guess)` and `linear_search(array, query)`.
Each returns the index of the value, or `-1` when it is absent.
`interpolation_search` returns the first index when values repeat.

### `algos.arithmetic`

- `gcd_recursive`, `gcd_iterative`, `lcm`. Remainders follow truncated
  division, as with fixed-width machine integers.
- `modular_exponentiation(base, exponent, mod)` raises
  `NegativeExponentError` for a negative exponent and
  `IntegerOverflowError` when `(mod - 1) ** 2` does not fit in a signed
  64-bit integer. A modulus of 1 gives 0.
- `multiply_int64(left, right)` returns the product or raises
  `IntegerOverflowError`.
- `iterative_power`, `recursive_power` and `recursive_power_linear`
  compute `n ** power` wrapped modulo `2**64`; negative arguments raise
  `ValueError`.

### `algos.primes`

- `naive_approach(n)` and `pair_approach(n)`: trial division.
- `miller_rabin_test(num, rounds)` and a single round `miller_test(d, num)`,
  using random witnesses.
- `generate()`, `sieve(numbers, prime)` and `primes()`: endless generators;
  `primes()` chains one `sieve` per prime found.

### `algos.combinatorics`

- `moser_de_bruijn_sequence(number)`: the first `number` sums of distinct
  powers of four.
- `heaps(n)`: every permutation of the symbols from
  `generate_element_set(n)` (`"1"`, `"2"`, ...), in the order Heap's
  algorithm produces them.
- `string_combinations(text)`: a generator of every non-empty subsequence of
  `text` in depth-first order (`ValueError` for an empty string);
  `print_combinations(text)` prints them one per line.

### `algos.misc`

- `Vector(x, y, z)` and `distance(a, b)`: Euclidean distance in 3D.
- `max_subarray_sum(array)`: largest contiguous sum, never below 0.
- `is_balanced(text)`: whether `text` is properly nested `()`, `[]`, `{}`;
  any other character makes it `False`.
- `generate_password(min_length, max_length)`: a random password drawn with
  `secrets`, its length in `[min_length, max_length)`.

### `algos.string_search`

- `levenshtein_distance(str1, str2, icost, scost, dcost)`: weighted edit
  distance.
- `naive_pattern_search(text, pattern)`: every start index, overlaps
  included.
- `kmp(text, word)` returns a `KmpResult` with `position` (`-1` if absent),
  `comparisons` and `found`; `kmp_table(word)` builds its table. Words must
  be at least two characters long.

### `algos.ahocorasick` and `algos.advanced_ahocorasick`

`aho_corasick(text, patterns)` maps each pattern found in `text` to the list
of positions where it starts. `algos.ahocorasick` also exposes the
`Automaton` class, `construct_trie` and `build_ac`; the advanced module
completes every state's transitions with `build_extended_ac` so the search
never follows failure links, and exposes `compute_alphabet`, `get_word` and
`array_union`.

## Examples

```python
from itertools import islice

from algos.arithmetic import modular_exponentiation
from algos.primes import primes
from algos.searches import binary_search
from algos.sorts import merge_sort

merge_sort([5, 2, 9, 1])                 # [1, 2, 5, 9]
binary_search([1, 2, 3, 4], 3, 0, 3)     # 2
modular_exponentiation(17, 60, 23)       # 2
list(islice(primes(), 5))                # [2, 3, 5, 7, 11]
```

```python
from algos.ahocorasick import aho_corasick
from algos.string_search import kmp, levenshtein_distance

kmp("CPM_annual_conference_announce", "announce").position  # 22
levenshtein_distance("kitten", "sitting", 1, 1, 1)            # 3
aho_corasick("CPM_annual_conference_announce", ["announce", "annual"])
# {"annual": [4], "announce": [22]}
```

## What it does not do

This is a library only: it has no command-line program, and the string
searches work on strings in memory rather than reading pattern or text files.