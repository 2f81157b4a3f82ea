"""
Core enumerations for information units.

This module defines the small enumerated types that select prefix tables
and parsing behaviour throughout the infounit library.
"""

from enum import Enum, auto

###################################################################################
#                                                                                 #
#      IN ORDER TO AVOID CIRCULAR IMPORTS                                         #
#      THIS FILE SHOULD NEVER IMPORT ANYTHING FROM THE INFOUNIT LIBRARY           #
#                                                                                 #
###################################################################################


class PrefixKind(Enum):
    """Represents the family of unit prefixes used for scaling."""

    SI = auto()  # powers of 1000: kilo, mega, ...
    BINARY = auto()  # powers of 1024: kibi, mebi, ...

    @classmethod
    def from_string(cls, kind: str) -> "PrefixKind":
        """Convert a string such as 'si' or 'binary' to a PrefixKind."""
        kind_map = {
            "si": cls.SI,
            "decimal": cls.SI,
            "binary": cls.BINARY,
            "iec": cls.BINARY,
        }
        if isinstance(kind, str) and kind.lower() in kind_map:
            return kind_map[kind.lower()]
        raise ValueError(f"Unknown prefix kind: {kind}")


class ParseMode(Enum):
    """
    Represents how a human-readable quantity is scanned.

    Lenient modes allow a single space between the digits and the unit
    suffix. Strict modes read exactly one token and assume the base unit
    when the token carries no suffix. Binary modes treat SI-spelled prefixes
    as binary prefixes, so "1 kB" reads as 1024 bytes.
    """

    LENIENT = auto()
    LENIENT_BINARY = auto()
    STRICT = auto()
    STRICT_BINARY = auto()

    @property
    def strict(self) -> bool:
        return self in (ParseMode.STRICT, ParseMode.STRICT_BINARY)

    @property
    def binary(self) -> bool:
        return self in (ParseMode.LENIENT_BINARY, ParseMode.STRICT_BINARY)
