from __future__ import annotations

from typing import Sequence, Tuple

import structlog

from modules.base_convert.core.decode import split_prefix, split_sign
from modules.base_convert.core.digits import (
    MAX_BASE,
    MIN_BASE,
    char_to_digit,
    digit_to_char,
)
from modules.base_convert.core.errors import (
    InvalidBaseError,
    InvalidDigitError,
    UsageError,
)

USAGE = "Usage: convert <from_base> <to_base> <value>"

log = structlog.get_logger(__name__)


def parse_base(value: object, *, label: str = "Base") -> int:
    if value is None:
        raise InvalidBaseError(f"{label} is required.")
    raw = str(value).strip()
    if not raw:
        raise InvalidBaseError(f"{label} is required.")
    if not (raw.isascii() and raw.isdigit()):
        raise InvalidBaseError(
            f"{label} must be a number between {MIN_BASE} and {MAX_BASE}, got {raw!r}."
        )
    base = int(raw)
    if base < MIN_BASE or base > MAX_BASE:
        raise InvalidBaseError(
            f"{label} must be between {MIN_BASE} and {MAX_BASE}, got {base}."
        )
    return base


def validate_numeral(numeral: str, base: int) -> None:
    """Check every digit of ``numeral`` against ``base``.

    A leading ``-`` and a radix prefix are split off before the check.
    """
    _, unsigned = split_sign(numeral)
    _, body = split_prefix(unsigned)
    if not body:
        raise InvalidDigitError("Value has no digits.")

    # digit_to_char(base) is the first character that is out of range.
    limit = digit_to_char(base)
    hint = f" (digits must be below {limit!r})" if limit else ""
    offset = len(numeral) - len(body)
    for index, char in enumerate(body):
        digit = char_to_digit(char)
        if digit is None or digit >= base:
            log.warning(
                "numeral.rejected", numeral=numeral, char=char, base=base
            )
            raise InvalidDigitError(
                f"Invalid digit for base {base}: {char!r} at position "
                f"{offset + index}{hint}."
            )


def validate_arguments(args: Sequence[str]) -> Tuple[int, int, str]:
    if len(args) != 3:
        raise UsageError(USAGE)
    raw_from, raw_to, value = args
    base_from = parse_base(raw_from, label="From base")
    base_to = parse_base(raw_to, label="To base")
    validate_numeral(value, base_from)
    return base_from, base_to, value
