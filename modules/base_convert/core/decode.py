from __future__ import annotations

from typing import Tuple

from modules.base_convert.core.digits import MAX_BASE, MIN_BASE, char_to_digit
from modules.base_convert.core.errors import (
    InvalidBaseError,
    InvalidDigitError,
    MagnitudeOverflowError,
)


NATIVE_BITS = 64
PREFIXES = ("0x", "0b", "0o")


def max_magnitude(bits: int = NATIVE_BITS) -> int:
    return (1 << bits) - 1


NATIVE_MAX = max_magnitude(NATIVE_BITS)


def require_base(base: int) -> None:
    if isinstance(base, bool) or not isinstance(base, int):
        raise InvalidBaseError(f"Base must be an integer, got {base!r}.")
    if base < MIN_BASE or base > MAX_BASE:
        raise InvalidBaseError(
            f"Base must be between {MIN_BASE} and {MAX_BASE}, got {base}."
        )


def split_sign(numeral: str) -> Tuple[bool, str]:
    if numeral.startswith("-"):
        return True, numeral[1:]
    return False, numeral


def split_prefix(numeral: str) -> Tuple[str, str]:
    """Split off a leading 0x/0b/0o.

    The prefix is dropped whatever the base is; it is only kept as digits
    when nothing follows it.
    """
    if len(numeral) > 2 and numeral[:2] in PREFIXES:
        return numeral[:2], numeral[2:]
    return "", numeral


def _digit_value(char: str, base: int, position: int) -> int:
    digit = char_to_digit(char)
    if digit is None or digit >= base:
        raise InvalidDigitError(
            f"Invalid digit for base {base}: {char!r} at position {position}."
        )
    return digit


def base_to_dec(numeral: str, base: int, *, max_value: int = NATIVE_MAX) -> int:
    """Decode an unsigned numeral written in ``base``."""
    require_base(base)
    if len(numeral) == 1:
        return _digit_value(numeral, base, 0)

    prefix, body = split_prefix(numeral)
    if not body:
        raise InvalidDigitError("Value has no digits.")

    total = 0
    for offset, char in enumerate(body):
        total = total * base + _digit_value(char, base, len(prefix) + offset)
        if total > max_value:
            raise MagnitudeOverflowError(
                f"Value {numeral!r} in base {base} exceeds the maximum of {max_value}."
            )
    return total
