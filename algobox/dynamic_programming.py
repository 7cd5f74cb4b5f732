"""Classic dynamic-programming problems and their naive recursive forms."""

from __future__ import annotations

from collections.abc import Sequence

_UINT64_MASK = (1 << 64) - 1


def binomial_coefficient(n: int, k: int) -> int:
    """Return C(n, k) built row by row from Pascal's triangle.

    Gives 0 when ``k`` is greater than ``n``.
    """
    if n < 0 or k < 0:
        raise ValueError("n and k must be non-negative")
    row = [1] + [0] * k
    for i in range(1, n + 1):
        for j in range(min(i, k), 0, -1):
            row[j] += row[j - 1]
    return row[k]


def nth_fibonacci(n: int) -> int:
    """Return the nth Fibonacci number, wrapping like an unsigned 64-bit integer."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n == 0:
        return 0
    previous, current = 0, 1
    for _ in range(1, n):
        previous, current = current, (previous + current) & _UINT64_MASK
    return current


def knapsack(max_weight: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Return the best total value of a 0/1 knapsack of capacity ``max_weight``."""
    if max_weight < 0:
        raise ValueError("max_weight must be non-negative")
    best = [0] * (max_weight + 1)
    for weight, value in zip(weights, values, strict=True):
        best = [
            best[capacity]
            if weight > capacity
            else max(best[capacity - weight] + value, best[capacity])
            for capacity in range(max_weight + 1)
        ]
    return best[max_weight]


def longest_common_subsequence(a: str, b: str) -> int:
    """Return the length of the longest common subsequence of ``a`` and ``b``."""
    previous = [0] * (len(b) + 1)
    for char_a in a:
        current = [0]
        for j, char_b in enumerate(b, 1):
            if char_a == char_b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def lps_recursive(word: str, i: int, j: int) -> int:
    """Return the longest palindromic subsequence length of ``word[i..j]``."""
    if i == j:
        return 1
    if i > j:
        return 0
    if word[i] == word[j]:
        return 2 + lps_recursive(word, i + 1, j - 1)
    return max(lps_recursive(word, i, j - 1), lps_recursive(word, i + 1, j))


def lps_dp(word: str) -> int:
    """Return the longest palindromic subsequence length of ``word``."""
    size = len(word)
    if size == 0:
        return 0
    table = [[0] * size for _ in range(size)]
    for i in range(size):
        table[i][i] = 1
    for length in range(2, size + 1):
        for i in range(size - length + 1):
            j = i + length - 1
            if word[i] == word[j]:
                table[i][j] = 2 if length == 2 else 2 + table[i + 1][j - 1]
            else:
                table[i][j] = max(table[i + 1][j], table[i][j - 1])
    return table[0][size - 1]


def matrix_chain_recursive(dims: Sequence[int], i: int, j: int) -> int:
    """Return the fewest scalar multiplications for matrices ``i..j``.

    Matrix ``m`` has dimensions ``dims[m-1] x dims[m]``.
    """
    if i == j:
        return 0
    best = 1 << 32
    for k in range(i, j):
        cost = (
            matrix_chain_recursive(dims, i, k)
            + matrix_chain_recursive(dims, k + 1, j)
            + dims[i - 1] * dims[k] * dims[j]
        )
        best = min(cost, best)
    return best


def matrix_chain_dp(dims: Sequence[int]) -> int:
    """Return the fewest scalar multiplications for the whole chain ``dims``."""
    size = len(dims)
    if size < 2:
        raise ValueError("dims must describe at least one matrix")
    table = [[0] * size for _ in range(size)]
    for length in range(2, size):
        for i in range(1, size - length + 1):
            j = i + length - 1
            best = 1 << 31
            for k in range(i, j):
                cost = table[i][k] + table[k + 1][j] + dims[i - 1] * dims[k] * dims[j]
                best = min(cost, best)
            table[i][j] = best
    return table[1][size - 1]


def cut_rod_recursive(prices: Sequence[int], length: int) -> int:
    """Return the best revenue for a rod of ``length``; ``prices[i]`` is a piece of size i."""
    if length == 0:
        return 0
    best = -1
    for piece in range(1, length + 1):
        best = max(best, prices[piece] + cut_rod_recursive(prices, length - piece))
    return best


def cut_rod_dp(prices: Sequence[int], length: int) -> int:
    """Return the best revenue for a rod of ``length`` using a memo table."""
    revenue = [0] * (length + 1)
    for total in range(1, length + 1):
        revenue[total] = max(
            [-1] + [prices[piece] + revenue[total - piece] for piece in range(1, total + 1)]
        )
    return revenue[length]