"""ROT13: the Caesar cipher with a fixed shift of 13."""

from __future__ import annotations

from algobox.caesar import encrypt


def rot13(text: str) -> str:
    """Rotate every ASCII letter of ``text`` by 13 places; applying it twice restores the text."""
    return encrypt(text, 13)