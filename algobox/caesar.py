"""Caesar shift cipher over the ASCII letters."""

from __future__ import annotations

import string

_ALPHABET_SIZE = 26


def _shift_table(key: int) -> dict[int, str]:
    key %= _ALPHABET_SIZE
    table: dict[int, str] = {}
    for letters in (string.ascii_uppercase, string.ascii_lowercase):
        shifted = letters[key:] + letters[:key]
        table.update(str.maketrans(letters, shifted))
    return table


def encrypt(text: str, key: int) -> str:
    """Shift every ASCII letter of ``text`` right by ``key``; other characters are kept."""
    return text.translate(_shift_table(key))


def decrypt(text: str, key: int) -> str:
    """Shift every ASCII letter of ``text`` left by ``key``."""
    return encrypt(text, _ALPHABET_SIZE - key)