"""
Core components for information quantities.

This package contains the unit tables, the formatter and scanner, and the
value types used throughout the infounit library.
"""

# Import types and units modules to make them accessible
from infounit.core import types, units

# Import configuration for convenience
from infounit.core.config import FormatStyle, FormatStyleBuilder

# Import key value types and constants for convenience
from infounit.core.quantities import (
    # Bit counts
    BIT,
    EXABIT,
    EXBIBIT,
    GIBIBIT,
    GIGABIT,
    KIBIBIT,
    KILOBIT,
    MEBIBIT,
    MEGABIT,
    PEBIBIT,
    PETABIT,
    TEBIBIT,
    TERABIT,
    # Bit rates
    BIT_PER_SECOND,
    EXABIT_PER_SECOND,
    EXBIBIT_PER_SECOND,
    GIBIBIT_PER_SECOND,
    GIGABIT_PER_SECOND,
    KIBIBIT_PER_SECOND,
    KILOBIT_PER_SECOND,
    MEBIBIT_PER_SECOND,
    MEGABIT_PER_SECOND,
    PEBIBIT_PER_SECOND,
    PETABIT_PER_SECOND,
    TEBIBIT_PER_SECOND,
    TERABIT_PER_SECOND,
    # Byte counts
    BYTE,
    EXABYTE,
    EXBIBYTE,
    GIBIBYTE,
    GIGABYTE,
    KIBIBYTE,
    KILOBYTE,
    MEBIBYTE,
    MEGABYTE,
    PEBIBYTE,
    PETABYTE,
    TEBIBYTE,
    TERABYTE,
    # Value types
    BitCount,
    BitRate,
    ByteCount,
    InfoQuantity,
)
from infounit.core.types import ParseMode, PrefixKind
