"""Polybius square cipher."""

from __future__ import annotations


class PolybiusError(ValueError):
    """Raised for an invalid square or for text the square cannot handle."""


class Polybius:
    """A Polybius square of ``size`` x ``size`` letters taken from ``key``.

    Each plaintext letter becomes two characters from ``chars``: its row and column.
    """

    def __init__(self, key: str, size: int, chars: str) -> None:
        key = key.upper()
        chars = chars.upper()
        if len(chars) < size:
            raise PolybiusError(
                f"len(chars): {len(chars)} must be at least size: {size}"
            )
        chars = chars[:size]
        for position, char in enumerate(chars):
            if char in chars[position + 1 :]:
                raise PolybiusError(f'"chars" contains same character: {char}')
        if len(key) != size * size:
            raise PolybiusError(
                f"len(key): {len(key)} must be as long as size squared: {size * size}"
            )
        self.size = size
        self.characters = chars
        self.key = key

    def __repr__(self) -> str:
        return f"Polybius(key={self.key!r}, size={self.size}, chars={self.characters!r})"

    def encrypt(self, text: str) -> str:
        """Encrypt ``text``; every letter must appear in the key."""
        try:
            return "".join(self._encipher(char) for char in text.upper())
        except PolybiusError as err:
            raise PolybiusError(f"failed encipher: {err}") from err

    def decrypt(self, text: str) -> str:
        """Decrypt ``text``, read as pairs of row and column characters."""
        text = text.upper()
        try:
            return "".join(
                self._decipher(text[start : start + 2]) for start in range(0, len(text), 2)
            )
        except PolybiusError as err:
            raise PolybiusError(f"failed decipher: {err}") from err

    def _encipher(self, char: str) -> str:
        index = self.key.find(char)
        if index < 0:
            raise PolybiusError(f"{char} does not exist in keys")
        row, col = divmod(index, self.size)
        return self.characters[row] + self.characters[col]

    def _decipher(self, pair: str) -> str:
        if len(pair) != 2:
            raise PolybiusError('the size of "chars" must be even')
        row_char, col_char = pair
        row = self.characters.find(row_char)
        if row < 0:
            raise PolybiusError(f"{row_char} does not exist in characters")
        col = self.characters.find(col_char)
        if col < 0:
            raise PolybiusError(f"{col_char} does not exist in characters")
        return self.key[row * self.size + col]