"""
Shared base for the integer-backed enumerations in Cards Tour.
"""

from enum import Enum


class RawValueEnum(Enum):
    """Enum with an integer raw value and optional-returning construction from it.

    Members are not ints, so variants of different enumerations never compare
    equal to each other or to a bare integer.
    """

    @property
    def raw_value(self) -> int:
        return self.value

    @classmethod
    def from_raw_value(cls, raw_value):
        """Return the member whose raw value equals raw_value, or None."""
        # Enum lookup matches by equality, so 1.0 and True would resolve to raw value 1
        if isinstance(raw_value, bool) or not isinstance(raw_value, int):
            return None
        try:
            return cls(raw_value)
        except ValueError:
            return None
