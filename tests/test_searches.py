import pytest

from algos.searches import (
    binary_search,
    interpolation_search,
    iter_binary_search,
    linear_search,
)

SEARCH_CASES = [
    pytest.param([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], 1, 0, id="sanity-first"),
    pytest.param([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], 5, 4, id="sanity-middle"),
    pytest.param([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], 10, 9, id="sanity-last"),
    pytest.param([1, 4, 5, 6, 7, 10], -25, -1, id="absent-below"),
    pytest.param([1, 4, 5, 6, 7, 10], 25, -1, id="absent-above"),
    pytest.param([], 2, -1, id="empty"),
]


@pytest.mark.parametrize(("data", "key", "expected"), SEARCH_CASES)
def test_binary_search(data, key, expected):
    assert binary_search(data, key, 0, len(data) - 1) == expected


@pytest.mark.parametrize(("data", "key", "expected"), SEARCH_CASES)
def test_iter_binary_search(data, key, expected):
    assert iter_binary_search(data, key, 0, len(data) - 1) == expected


@pytest.mark.parametrize(("data", "key", "expected"), SEARCH_CASES)
def test_interpolation_search(data, key, expected):
    assert interpolation_search(data, key) == expected


@pytest.mark.parametrize(("data", "key", "expected"), SEARCH_CASES)
def test_linear_search(data, key, expected):
    assert linear_search(data, key) == expected


def test_iter_binary_search_rejects_negative_low_index():
    assert iter_binary_search([1, 2, 3], 2, -1, 2) == -1


def test_iter_binary_search_rejects_high_index_past_end():
    assert iter_binary_search([1, 2, 3], 2, 0, 4) == -1


def test_binary_search_missing_inside_range():
    assert binary_search([1, 4, 5, 6, 7, 10], 2, 0, 5) == -1


def test_interpolation_search_missing_inside_range():
    assert interpolation_search([1, 4, 5, 6, 7, 10], 2) == -1


def test_interpolation_search_returns_first_duplicate():
    assert interpolation_search([1, 3, 3, 3, 3, 9], 3) == 1


def test_interpolation_search_all_equal():
    assert interpolation_search([7, 7, 7], 7) == 0


def test_linear_search_returns_first_match():
    assert linear_search([5, 2, 5, 2], 2) == 1


def test_searches_agree_on_every_element():
    data = [2, 3, 5, 8, 13, 21, 34, 55]
    for index, value in enumerate(data):
        assert binary_search(data, value, 0, len(data) - 1) == index
        assert iter_binary_search(data, value, 0, len(data) - 1) == index
        assert interpolation_search(data, value) == index
        assert linear_search(data, value) == index