"""Single-byte XOR cipher."""

from __future__ import annotations


def _xor(key: int, data: bytes) -> bytes:
    if not 0 <= key <= 0xFF:
        raise ValueError(f"key must fit in one byte, got {key}")
    return bytes(key ^ byte for byte in data)


def encrypt(key: int, plaintext: bytes) -> bytes:
    """XOR every byte of ``plaintext`` with ``key``."""
    return _xor(key, plaintext)


def decrypt(key: int, ciphertext: bytes) -> bytes:
    """XOR every byte of ``ciphertext`` with ``key``, undoing :func:`encrypt`."""
    return _xor(key, ciphertext)