# exceptions.py
from typing import Optional

from constants import (
    MSG_FORMAT_NOT_RECOGNIZED,
    MSG_PLATE_REQUIRED,
    MSG_UNKNOWN_PROVINCE,
)


class PlateLookupError(ValueError):
    """Base class for lookup failures. `message` is safe to show to users."""

    default_message = MSG_FORMAT_NOT_RECOGNIZED

    def __init__(self, message: Optional[str] = None, plate: Optional[str] = None):
        self.message = message or self.default_message
        self.plate = plate
        super().__init__(self.message)


class FormatError(PlateLookupError):
    """The plate is empty or does not match the regular/new-energy grammar."""

    @classmethod
    def required(cls, plate: Optional[str] = None) -> "FormatError":
        return cls(MSG_PLATE_REQUIRED, plate=plate)


class UnknownProvinceError(FormatError):
    """The leading character is not a known province/region code."""

    default_message = MSG_UNKNOWN_PROVINCE
