"""Diffie-Hellman key exchange over a small fixed prime group."""

from __future__ import annotations

GENERATOR = 3
PRIME = 6700417


def modular_exponentiation(base: int, exponent: int, modulus: int) -> int:
    """Return ``base ** exponent % modulus``; a modulus of 1 gives 0."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    return pow(base, exponent, modulus)


def generate_share_key(private_key: int) -> int:
    """Return the public value ``GENERATOR ** private_key % PRIME``."""
    return modular_exponentiation(GENERATOR, private_key, PRIME)


def generate_mutual_key(private_key: int, share_key: int) -> int:
    """Return the shared secret from one's private key and the other side's public value."""
    return modular_exponentiation(share_key, private_key, PRIME)