"""Conversion of standard Roman numerals to integers."""

from __future__ import annotations

_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def roman_to_integer(roman: str) -> int:
    """Return the integer value of a Roman numeral written in standard form.

    A smaller numeral directly before a larger one is read as one subtractive pair.
    """
    try:
        values = iter([_VALUES[char] for char in roman])
    except KeyError as err:
        raise ValueError(f"invalid Roman numeral character: {err.args[0]!r}") from None

    total = 0
    pending = next(values, None)
    while pending is not None:
        following = next(values, None)
        if following is not None and pending < following:
            total += following - pending
            pending = next(values, None)
        else:
            total += pending
            pending = following
    return total