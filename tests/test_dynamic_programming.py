import pytest

from algobox.dynamic_programming import (
    binomial_coefficient,
    cut_rod_dp,
    cut_rod_recursive,
    knapsack,
    longest_common_subsequence,
    lps_dp,
    lps_recursive,
    matrix_chain_dp,
    matrix_chain_recursive,
    nth_fibonacci,
)


@pytest.mark.parametrize(
    "nth, expected",
    [
        (0, 0),
        (1, 1),
        (2, 1),
        (3, 2),
        (4, 3),
        (5, 5),
        (6, 8),
        (7, 13),
        (8, 21),
        (9, 34),
        (10, 55),
        (20, 6765),
        (30, 832040),
        (40, 102334155),
        (50, 12586269025),
        (60, 1548008755920),
        (70, 190392490709135),
        (80, 23416728348467685),
        (90, 2880067194370816120),
    ],
)
def test_nth_fibonacci(nth, expected):
    assert nth_fibonacci(nth) == expected


def test_nth_fibonacci_rejects_negative():
    with pytest.raises(ValueError):
        nth_fibonacci(-1)


def test_nth_fibonacci_stays_within_64_bits():
    assert nth_fibonacci(200) < 2**64


@pytest.mark.parametrize(
    "n, k, expected",
    [(50, 5, 2118760), (5, 2, 10), (0, 0, 1), (10, 0, 1), (10, 10, 1), (3, 5, 0)],
)
def test_binomial_coefficient(n, k, expected):
    assert binomial_coefficient(n, k) == expected


def test_binomial_coefficient_symmetry():
    for k in range(21):
        assert binomial_coefficient(20, k) == binomial_coefficient(20, 20 - k)


def test_binomial_coefficient_rejects_negative():
    with pytest.raises(ValueError):
        binomial_coefficient(5, -1)


def test_knapsack_example():
    assert knapsack(50, [10, 20, 30], [60, 100, 120]) == 220


def test_knapsack_nothing_fits():
    assert knapsack(5, [10, 20], [60, 100]) == 0


def test_knapsack_mismatched_lengths():
    with pytest.raises(ValueError):
        knapsack(10, [1, 2], [3])


@pytest.mark.parametrize(
    "a, b, expected",
    [("AGGTAB", "GXTXAYB", 4), ("ABCDGH", "AEDFHR", 3), ("", "abc", 0), ("abc", "abc", 3)],
)
def test_longest_common_subsequence(a, b, expected):
    assert longest_common_subsequence(a, b) == expected


@pytest.mark.parametrize(
    "word, expected",
    [("GEEKSFORGEEKS", 5), ("a", 1), ("abba", 4), ("abc", 1)],
)
def test_lps_dp(word, expected):
    assert lps_dp(word) == expected


def test_lps_dp_empty():
    assert lps_dp("") == 0


@pytest.mark.parametrize("word", ["GEEKSFORGEEKS", "aaaabbbba", "character", "xy"])
def test_lps_recursive_matches_dp(word):
    assert lps_recursive(word, 0, len(word) - 1) == lps_dp(word)


@pytest.mark.parametrize(
    "dims, expected",
    [([2, 2, 2, 2, 2], 24), ([1, 2, 3, 4], 18), ([40, 20, 30, 10, 30], 26000), ([3, 4], 0)],
)
def test_matrix_chain(dims, expected):
    assert matrix_chain_dp(dims) == expected
    assert matrix_chain_recursive(dims, 1, len(dims) - 1) == expected


def test_matrix_chain_dp_rejects_empty():
    with pytest.raises(ValueError):
        matrix_chain_dp([5])


PRICES = [0, 1, 5, 8, 9, 17, 17, 17, 20, 24, 30]


@pytest.mark.parametrize("length", range(0, 11))
def test_cut_rod_recursive_matches_dp(length):
    assert cut_rod_recursive(PRICES, length) == cut_rod_dp(PRICES, length)


def test_cut_rod_small_values():
    assert cut_rod_dp(PRICES, 0) == 0
    assert cut_rod_dp(PRICES, 1) == 1
    assert cut_rod_dp(PRICES, 2) == 5