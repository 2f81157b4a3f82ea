"""
Human-readable rendering of information quantities.

The formatter picks the largest prefix tier that does not exceed the value,
divides by it, renders the result in fixed-point notation and appends the
prefix and unit, abbreviated or spelled out. Field width and padding are
applied last, to the finished string.
"""

import math
from decimal import Decimal
from typing import Optional

from infounit.core.config import FormatStyle
from infounit.core.units import prefix_table

# Fractional digits shown when no precision is requested
DEFAULT_PRECISION = 6

RATE_UNIT = "bit/s"
RATE_UNIT_BPS = "bps"
RATE_UNIT_WORD = "bit"
RATE_LONG_SUFFIX = " per second"


def format_shortest(value: float) -> str:
    """
    Render a float with the fewest digits that round-trip, never in E-notation.

    Examples:
        100.0 -> "100", 987654.321 -> "987654.321", 1e-7 -> "0.0000001"
    """
    if math.isnan(value) or math.isinf(value):
        return repr(value)
    return format(Decimal(repr(value)).normalize(), "f")


def format_fixed(value: float, precision: Optional[int]) -> str:
    """
    Render a float in fixed-point notation.

    With an explicit precision exactly that many fractional digits are
    printed. Without one, up to DEFAULT_PRECISION digits are printed and
    trailing zeros are dropped along with a dangling decimal point.

    The default is a cap, not shortest round-trip: 123456789 bits in binary
    prefixes renders as "117.737569 Mibit", not "117.73756885528564 Mibit".
    Digits past the sixth are lost; pass a precision or use
    format_shortest() when the exact value matters.
    """
    if math.isnan(value) or math.isinf(value):
        return repr(value)
    if precision is not None:
        return f"{value:.{precision}f}"
    text = f"{value:.{DEFAULT_PRECISION}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text


def pad(text: str, style: FormatStyle) -> str:
    """Apply the width, justification and zero padding of a style."""
    if style.width is None or len(text) >= style.width:
        return text
    if style.left_justify:
        return text.ljust(style.width)
    if style.zero_pad:
        return text.rjust(style.width, "0")
    return text.rjust(style.width)


def format_count(value: int, style: FormatStyle, unit_abbr: str, unit_full: str) -> str:
    """
    Render an unsigned integral count (bits or bytes).

    Args:
        value: The count in base units
        style: Formatting options
        unit_abbr: Abbreviated base unit, e.g. "bit" or "B"
        unit_full: Spelled-out base unit, e.g. "bit" or "byte"

    Returns:
        The formatted string, e.g. "987.7 MB" or "941.900559 mebibytes"
    """
    sep = " " if style.space else ""
    unit = unit_full if style.full_name else unit_abbr
    plural = "s" if style.full_name and value != 1 else ""

    prefix = prefix_table(style.prefix).select(value)
    if prefix is None:
        return pad(f"{value}{sep}{unit}{plural}", style)

    if value == prefix.factor:
        plural = ""
    symbol = prefix.full_name if style.full_name else prefix.symbol
    scaled = format_fixed(float(value) / float(prefix.factor), style.precision)
    return pad(f"{scaled}{sep}{symbol}{unit}{plural}", style)


def format_rate(value: float, style: FormatStyle) -> str:
    """
    Render a bit rate.

    NaN and infinities are rendered as the float formatter spells them,
    followed by the unscaled unit.

    Args:
        value: The rate in bits per second
        style: Formatting options

    Returns:
        The formatted string, e.g. "123.45 Gbit/s" or "1.0 kilobit per second"
    """
    sep = " " if style.space else ""
    if style.full_name:
        unit, suffix = RATE_UNIT_WORD, RATE_LONG_SUFFIX
        plural = "" if value == 1.0 else "s"
    else:
        unit, suffix, plural = (RATE_UNIT_BPS if style.bps else RATE_UNIT), "", ""

    if math.isnan(value) or math.isinf(value):
        return pad(f"{value}{sep}{unit}{plural}{suffix}", style)

    prefix = prefix_table(style.prefix).select(value)
    if prefix is None:
        scaled = format_fixed(value, style.precision)
        return pad(f"{scaled}{sep}{unit}{plural}{suffix}", style)

    if value == float(prefix.factor):
        plural = ""
    symbol = prefix.full_name if style.full_name else prefix.symbol
    scaled = format_fixed(value / float(prefix.factor), style.precision)
    return pad(f"{scaled}{sep}{symbol}{unit}{plural}{suffix}", style)
