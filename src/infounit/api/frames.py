"""
Polars adapter for columns of information quantities.

Parses columns of human-readable text into raw numbers and renders raw
numbers back into text, so quantities can be analysed with the rest of a
DataFrame. Nulls pass through unchanged in both directions.
"""

from typing import Optional, Type

import polars as pl

from infounit.core.config import FormatStyle
from infounit.core.logging import get_logger
from infounit.core.quantities import BitRate, InfoQuantity
from infounit.core.types import ParseMode

log = get_logger(__name__)


def dtype_for(quantity: Type[InfoQuantity]) -> pl.DataType:
    """Get the polars dtype that holds raw values of a quantity type."""
    return pl.Float64 if issubclass(quantity, BitRate) else pl.UInt64


def parse_series(
    series: pl.Series,
    quantity: Type[InfoQuantity],
    mode: ParseMode = ParseMode.LENIENT,
) -> pl.Series:
    """
    Parse a column of human-readable quantities.

    Args:
        series: A string series such as ["1.5 GB", "200 kB", None]
        quantity: BitCount, ByteCount or BitRate
        mode: Scanning mode, lenient SI by default

    Returns:
        A UInt64 series for counts or a Float64 series for rates, with the
        same name as the input

    Raises:
        MalformedRepresentationError: If any non-null entry cannot be parsed
    """
    log.debug(f"Parsing {len(series)} entries of {series.name!r} as {quantity.__name__}")
    values = [
        None if text is None else quantity.parse(text, mode).value for text in series.to_list()
    ]
    return pl.Series(series.name, values, dtype=dtype_for(quantity))


def format_series(
    series: pl.Series,
    quantity: Type[InfoQuantity],
    style: Optional[FormatStyle] = None,
) -> pl.Series:
    """
    Render a column of raw values as human-readable text.

    Args:
        series: Raw values in the base unit
        quantity: BitCount, ByteCount or BitRate
        style: Formatting options, the compact style by default

    Returns:
        A Utf8 series with the same name as the input
    """
    style = style or FormatStyle.compact()
    texts = [None if raw is None else quantity(raw).format(style) for raw in series.to_list()]
    return pl.Series(series.name, texts, dtype=pl.Utf8)
