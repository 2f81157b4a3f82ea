#!/usr/bin/env python3
"""
Example demonstrating the use of the infounit library.

This example shows how to create quantities, render them in different
styles, parse human-readable text, and estimate transfer times.
"""

import sys
from datetime import timedelta
from pathlib import Path

# Add the src directory to sys.path to import infounit without installing it
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.append(str(src_path))

from infounit import (  # noqa: E402
    GIGABIT_PER_SECOND,
    BitCount,
    BitRate,
    ByteCount,
    FormatStyleBuilder,
    MalformedRepresentationError,
)
from infounit.core.logging import get_logger, update_log_level  # noqa: E402

# The package configures logging on import; raise the level for the example
update_log_level("info")
log = get_logger(__name__)


def main():
    """Walk through formatting, parsing and transfer calculations."""
    log.info("infounit Example")
    log.info("================\n")

    # 1. Rendering quantities
    log.info("1. Rendering quantities")
    log.info("-----------------------")
    size = ByteCount(987654321)
    log.info(f"str():              {size}")
    log.info(f"default format():   {size.format()}")
    log.info(f"binary, 2 digits:   {size:.2S}")
    log.info(f"full names:         {size:# .1s}")
    verbose = FormatStyleBuilder().binary().precision(3).full_name().space().build()
    log.info(f"builder style:      {size.format(verbose)}\n")

    # 2. Parsing text
    log.info("2. Parsing text")
    log.info("---------------")
    for text in ["210 kilobytes", "1.5 GiB", "100 kB", "12 furlongs"]:
        try:
            log.info(f"{text!r:16} -> {ByteCount.parse(text)!r} (binary: {ByteCount.parse_binary(text)!r})")
        except MalformedRepresentationError as e:
            log.info(f"{text!r:16} -> error: {e}")
    log.info(f"{'5 Gbps':16} -> {BitRate.parse('5 Gbps')!r}")
    log.info(f"{'2.5 megabits per second':16} -> {BitRate.parse('2.5 megabits per second')!r}\n")

    # 3. Transfer calculations
    log.info("3. Transfer calculations")
    log.info("------------------------")
    image = ByteCount.parse("4.7 GB")
    link = GIGABIT_PER_SECOND
    log.info(f"{image} at {link} takes {image.time_to_transfer(link)}")
    achieved = image.rate_given(timedelta(minutes=2))
    log.info(f"{image} in 2 minutes is {achieved:.2s}")
    moved = link.byte_count_given(timedelta(seconds=30))
    log.info(f"{link} for 30 seconds moves {moved}")
    whole, rest = BitCount(1001).to_byte_boundary()
    log.info(f"1001 bits are {whole!r} and {rest!r}")


if __name__ == "__main__":
    main()
