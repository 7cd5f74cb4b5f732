"""Textbook RSA over small integers, with the helpers needed to build a key."""

from __future__ import annotations

import math
import random
import re
from collections.abc import Iterable, Sequence

_WHEEL = (1, 7, 11, 13, 17, 19, 23, 29)
_INTEGER = re.compile(r"[+-]?[0-9]+")


def small_primes(limit: int) -> list[int]:
    """Return the primes in order up to and including the first one not below ``ceil(sqrt(limit))``.

    The list always starts with 2, 3 and 5.
    """
    sqrt_limit = math.ceil(math.sqrt(limit))
    primes = [2, 3, 5]
    candidate = 7
    while primes[-1] < sqrt_limit:
        is_prime = True
        for prime in primes:
            if prime * prime > candidate:
                break
            if candidate % prime == 0:
                is_prime = False
                break
        if is_prime:
            primes.append(candidate)
        candidate += 2
    return primes


def generate_prime(limit: int, rng: random.Random | None = None) -> int:
    """Return a random number of the form ``30k + i`` that no prime of :func:`small_primes` divides."""
    spokes = limit // 30
    if spokes <= 0:
        raise ValueError(f"limit must be at least 30, got {limit}")
    rng = rng if rng is not None else random.Random()
    primes = small_primes(limit)
    while True:
        candidate = 30 * rng.randrange(spokes) + rng.choice(_WHEEL)
        if all(candidate % prime for prime in primes):
            return candidate


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b``."""
    while b != 0:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Return the least common multiple of ``a`` and ``b``."""
    return a * b // gcd(a, b)


def modular_multiplicative_inverse(e: int, delta: int) -> int:
    """Return ``d`` with ``(d * e) % delta == 1``; raise ValueError if there is none."""
    try:
        return pow(e, -1, delta)
    except ValueError:
        raise ValueError(f"{e} has no inverse modulo {delta}") from None


def modular_exponentiation(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent % modulus``; a modulus of 1 gives 0."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    return pow(base, exponent, modulus)


def encrypt(message: Iterable[int], e: int, n: int) -> list[int]:
    """Encrypt each number of ``message`` with the public key ``(e, n)``."""
    return [modular_exponentiation(value, e, n) for value in message]


def decrypt(ciphertext: Iterable[int], d: int, n: int) -> list[int]:
    """Decrypt each number of ``ciphertext`` with the private key ``(d, n)``."""
    return [modular_exponentiation(value, d, n) for value in ciphertext]


def to_ascii(text: str) -> list[int]:
    """Return the code point of every character of ``text``."""
    return [ord(char) for char in text]


def join_numbers(values: Sequence[int]) -> str:
    """Return ``values`` written out separated by single spaces."""
    return " ".join(str(value) for value in values)


def parse_numbers(text: str) -> list[int]:
    """Split ``text`` on single spaces and read each part as an integer; unreadable parts give 0."""
    return [int(part) if _INTEGER.fullmatch(part) else 0 for part in text.split(" ")]