"""
infounit: Quantities of Information Made Readable

A Python library for bit counts, byte counts and bit rates, with
human-readable formatting and tolerant parsing of SI and binary units.
"""

# Import core logging first to configure it before anything else
from infounit.core.logging import configure_logging, get_logger

# Import core types and units
from infounit.core import types, units
from infounit.core.config import FormatStyle, FormatStyleBuilder
from infounit.core.errors import (
    DivisionByZeroRateError,
    InfoUnitError,
    MalformedRepresentationError,
    OutOfRangeError,
)
from infounit.core import quantities
from infounit.core.quantities import *  # noqa: F401,F403
from infounit.core.types import ParseMode, PrefixKind

# Make key components available at the package level
__all__ = [
    # Core modules
    "types",
    "units",
    # Configuration
    "FormatStyle",
    "FormatStyleBuilder",
    "ParseMode",
    "PrefixKind",
    # Errors
    "InfoUnitError",
    "OutOfRangeError",
    "DivisionByZeroRateError",
    "MalformedRepresentationError",
]
# Value types and scale constants
__all__ += quantities.__all__

# Configure logging once at import time
configure_logging()
log = get_logger(__name__)
