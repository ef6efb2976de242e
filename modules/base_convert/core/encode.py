from __future__ import annotations

from typing import List

from modules.base_convert.core.decode import NATIVE_MAX, require_base
from modules.base_convert.core.digits import digit_to_char
from modules.base_convert.core.errors import MagnitudeOverflowError


def dec_to_base(
    value: int, base: int, *, max_value: int = NATIVE_MAX, uppercase: bool = False
) -> str:
    """Encode a magnitude in ``base`` without leading zeros."""
    require_base(base)
    if value < 0:
        raise ValueError(f"Magnitude must be non-negative, got {value}.")
    if value > max_value:
        raise MagnitudeOverflowError(
            f"Value {value} exceeds the maximum of {max_value}."
        )
    if value == 0:
        return "0"

    digits: List[str] = []
    while value > 0:
        value, remainder = divmod(value, base)
        char = digit_to_char(remainder)
        if char is None:
            raise RuntimeError(f"No digit character for {remainder} in base {base}.")
        digits.append(char)

    encoded = "".join(reversed(digits))
    return encoded.upper() if uppercase else encoded
