from __future__ import annotations

from typing import Dict, Tuple

import structlog

from modules.base_convert.core.decode import (
    NATIVE_BITS,
    NATIVE_MAX,
    base_to_dec,
    max_magnitude,
    split_sign,
)
from modules.base_convert.core.encode import dec_to_base
from modules.base_convert.core.errors import ConversionError
from modules.base_convert.core.validate import parse_base, validate_numeral

log = structlog.get_logger(__name__)


def convert_value(
    source_base: int,
    dest_base: int,
    numeral: str,
    *,
    max_value: int = NATIVE_MAX,
    uppercase: bool = False,
) -> str:
    """Convert ``numeral`` from ``source_base`` to ``dest_base``.

    A leading ``-`` is carried over to the result untouched, so ``-0``
    converts to ``-0``.
    """
    negative, unsigned = split_sign(numeral)

    if source_base == 10:
        converted = dec_to_base(
            base_to_dec(unsigned, 10, max_value=max_value),
            dest_base,
            max_value=max_value,
            uppercase=uppercase,
        )
    elif dest_base == 10:
        converted = str(base_to_dec(unsigned, source_base, max_value=max_value))
    else:
        magnitude = base_to_dec(unsigned, source_base, max_value=max_value)
        converted = dec_to_base(
            magnitude, dest_base, max_value=max_value, uppercase=uppercase
        )

    result = "-" + converted if negative else converted
    log.debug(
        "conversion.done",
        source_base=source_base,
        dest_base=dest_base,
        numeral=numeral,
        result=result,
    )
    return result


def convert_base(
    value: object,
    base_from: object,
    base_to: object,
    *,
    bits: int = NATIVE_BITS,
    uppercase: bool = False,
) -> Tuple[Dict[str, object] | None, str | None]:
    if value is None:
        return None, "Value is required."
    raw = str(value).strip()
    if not raw:
        return None, "Value is required."

    max_value = max_magnitude(bits)
    try:
        from_base = parse_base(base_from, label="From base")
        to_base = parse_base(base_to, label="To base")
        validate_numeral(raw, from_base)
        converted = convert_value(
            from_base, to_base, raw, max_value=max_value, uppercase=uppercase
        )
        decimal = convert_value(from_base, 10, raw, max_value=max_value)
    except ConversionError as exc:
        return None, exc.detail

    return {
        "input": raw,
        "base_from": from_base,
        "base_to": to_base,
        "decimal": decimal,
        "converted": converted,
    }, None
