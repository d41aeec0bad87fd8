"""Conversion between integers and Roman numerals."""

from __future__ import annotations

_DIGIT_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}

_NUMERALS = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


def to_number(text: str) -> int:
    """Return the value of a Roman numeral, reading up to the first unknown character."""
    total = 0
    prev = 0
    for char in text:
        curr = _DIGIT_VALUES.get(char)
        if curr is None:
            break
        if prev < curr:
            total += curr - 2 * prev
        else:
            total += curr
        prev = curr
    return total


def to_numeral(num: int) -> str:
    """Return the minimal Roman numeral for ``num``; 0 gives an empty string."""
    parts = []
    for value, symbol in _NUMERALS:
        count, num = divmod(num, value)
        parts.append(symbol * count)
    return "".join(parts)