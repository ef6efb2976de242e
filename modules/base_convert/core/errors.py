from __future__ import annotations

from universe.errors import DomainError


class ConversionError(DomainError):
    """Base class for everything the converter refuses to do."""

    code = "conversion"

    def __init__(self, detail: str) -> None:
        super().__init__(detail, code=type(self).code)


class UsageError(ConversionError):
    code = "usage"


class InvalidBaseError(ConversionError):
    code = "invalid_base"


class InvalidDigitError(ConversionError):
    code = "invalid_digit"


class MagnitudeOverflowError(ConversionError, OverflowError):
    code = "overflow"


__all__ = [
    "ConversionError",
    "InvalidBaseError",
    "InvalidDigitError",
    "MagnitudeOverflowError",
    "UsageError",
]
