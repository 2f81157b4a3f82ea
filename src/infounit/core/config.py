import re
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional

from infounit.core.logging import get_logger
from infounit.core.types import PrefixKind

log = get_logger(__name__)

# [flags][width][.precision][type]
_FORMAT_SPEC_RE = re.compile(
    r"(?P<flags>[-0 #]*)(?P<width>[1-9][0-9]*)?(?:\.(?P<precision>[0-9]*))?(?P<type>[sSaA]?)"
)


@dataclass(frozen=True)
class FormatStyle:
    """
    Options controlling how a quantity is rendered as text.

    Attributes:
        prefix: Prefix family used to scale the value (SI or binary)
        precision: Number of fractional digits; None renders up to six digits
            with trailing zeros removed
        full_name: Spell out the unit ("kilobytes") instead of abbreviating ("kB")
        space: Put a space between the digits and the unit
        width: Minimum width of the result, padded on the left by default
        left_justify: Pad with spaces on the right instead of the left
        zero_pad: Pad with leading zeros instead of spaces
        bps: Abbreviate rates as "bps" instead of "bit/s"
    """

    prefix: PrefixKind = PrefixKind.SI
    precision: Optional[int] = None
    full_name: bool = False
    space: bool = False
    width: Optional[int] = None
    left_justify: bool = False
    zero_pad: bool = False
    bps: bool = False

    def __post_init__(self):
        if self.precision is not None and self.precision < 0:
            raise ValueError(f"precision must be non-negative, got {self.precision}")
        if self.width is not None and self.width < 0:
            raise ValueError(f"width must be non-negative, got {self.width}")

    @classmethod
    def create_default(cls) -> "FormatStyle":
        """Create a style with default values: SI prefix, default precision, no space."""
        return cls()

    @classmethod
    def compact(cls) -> "FormatStyle":
        """Create the compact style used by str(): SI prefix, one digit, a space."""
        return cls(precision=1, space=True)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "FormatStyle":
        """
        Create a style from a dictionary.

        Unknown keys are ignored. The prefix may be given as a PrefixKind or
        as a string such as "si" or "binary".

        Args:
            config_dict: Dictionary with style values

        Returns:
            A new FormatStyle instance
        """
        known = {f.name for f in fields(cls)}
        values = {}
        for key, value in config_dict.items():
            if key not in known:
                log.debug(f"Ignoring unknown format style key: {key}")
                continue
            if key == "prefix" and isinstance(value, str):
                value = PrefixKind.from_string(value)
            values[key] = value
        return cls(**values)

    @classmethod
    def from_format_spec(cls, spec: str, allow_bps: bool = False) -> "FormatStyle":
        """
        Create a style from a format spec such as "# .2S" or "-12.1s".

        Flags: '-' left-justify, '0' zero padding, ' ' space before the unit,
        '#' full unit names. Types: 's' SI prefixes (default), 'S' binary
        prefixes, and for rates 'a'/'A' which abbreviate the unit as "bps".
        A '.' without digits means precision 0.

        Raises:
            ValueError: If the spec is not understood
        """
        match = _FORMAT_SPEC_RE.fullmatch(spec)
        if match is None:
            raise ValueError(f"Invalid format specifier: {spec!r}")
        kind = match.group("type") or "s"
        if kind in "aA" and not allow_bps:
            raise ValueError(f"Unknown format code '{kind}'")

        flags = match.group("flags")
        width = match.group("width")
        precision = match.group("precision")
        return cls(
            prefix=PrefixKind.BINARY if kind in "SA" else PrefixKind.SI,
            precision=None if precision is None else int(precision or 0),
            full_name="#" in flags,
            space=" " in flags,
            width=None if width is None else int(width),
            left_justify="-" in flags,
            zero_pad="0" in flags,
            bps=kind in "aA",
        )

    def with_options(self, **overrides) -> "FormatStyle":
        """Return a copy of this style with some fields replaced."""
        if isinstance(overrides.get("prefix"), str):
            overrides["prefix"] = PrefixKind.from_string(overrides["prefix"])
        return replace(self, **overrides)


class FormatStyleBuilder:
    """
    Builder pattern implementation for creating FormatStyle objects.

    This class provides a fluent interface for constructing FormatStyle
    objects with a chain of method calls.
    """

    def __init__(self, base: Optional[FormatStyle] = None):
        """Initialize a new FormatStyleBuilder, optionally from an existing style."""
        self._style = base or FormatStyle.create_default()

    def prefix(self, kind: PrefixKind) -> "FormatStyleBuilder":
        """Set the prefix family."""
        self._style = self._style.with_options(prefix=kind)
        return self

    def si(self) -> "FormatStyleBuilder":
        """Use SI prefixes (powers of 1000)."""
        return self.prefix(PrefixKind.SI)

    def binary(self) -> "FormatStyleBuilder":
        """Use binary prefixes (powers of 1024)."""
        return self.prefix(PrefixKind.BINARY)

    def precision(self, digits: Optional[int]) -> "FormatStyleBuilder":
        """Set the number of fractional digits."""
        self._style = self._style.with_options(precision=digits)
        return self

    def full_name(self, full: bool = True) -> "FormatStyleBuilder":
        """Set whether to spell out unit names."""
        self._style = self._style.with_options(full_name=full)
        return self

    def space(self, space: bool = True) -> "FormatStyleBuilder":
        """Set whether to put a space between digits and unit."""
        self._style = self._style.with_options(space=space)
        return self

    def width(self, width: Optional[int]) -> "FormatStyleBuilder":
        """Set the minimum field width."""
        self._style = self._style.with_options(width=width)
        return self

    def left_justify(self, left: bool = True) -> "FormatStyleBuilder":
        """Set whether to pad on the right."""
        self._style = self._style.with_options(left_justify=left)
        return self

    def zero_pad(self, zero: bool = True) -> "FormatStyleBuilder":
        """Set whether to pad with leading zeros."""
        self._style = self._style.with_options(zero_pad=zero)
        return self

    def bps(self, bps: bool = True) -> "FormatStyleBuilder":
        """Set whether rates are abbreviated as bps."""
        self._style = self._style.with_options(bps=bps)
        return self

    def build(self) -> FormatStyle:
        """Build and return a FormatStyle object."""
        return self._style
