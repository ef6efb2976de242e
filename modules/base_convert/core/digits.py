from __future__ import annotations


DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
MIN_BASE = 2
MAX_BASE = len(DIGITS)


def digit_to_char(digit: object) -> str | None:
    """Return the character for a digit value in 0..35, or None."""
    if not isinstance(digit, int) or isinstance(digit, bool):
        return None
    if digit < 0 or digit >= len(DIGITS):
        return None
    return DIGITS[digit]


def char_to_digit(char: object) -> int | None:
    """Return the value of a single ASCII digit character (case-insensitive), or None."""
    if not isinstance(char, str) or len(char) != 1 or not char.isascii():
        return None
    index = DIGITS.find(char.lower())
    if index < 0:
        return None
    return index
