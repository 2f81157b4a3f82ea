"""
Value types for quantities of information.

BitCount and ByteCount hold unsigned 64-bit counts, BitRate holds a float
number of bits per second. All three are immutable, compare by value,
render themselves through the formatter and parse themselves through the
scanner. Derived calculations (time = size / rate, rate = size / time,
size = rate * time) raise instead of returning unrepresentable results.
"""

import math
import numbers
import operator
from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Any, ClassVar, Optional, Tuple, Union

from infounit.core.config import FormatStyle
from infounit.core.errors import DivisionByZeroRateError, OutOfRangeError
from infounit.core.formatting import format_count, format_rate, format_shortest
from infounit.core.parsing import parse_count, parse_rate, round_half_away, scan_text
from infounit.core.types import ParseMode
from infounit.core.units import (
    BIT_GRAMMAR,
    BYTE_GRAMMAR,
    EXA,
    EXBI,
    GIBI,
    GIGA,
    KIBI,
    KILO,
    MAX_COUNT,
    MEBI,
    MEGA,
    PEBI,
    PETA,
    RATE_GRAMMAR,
    TEBI,
    TERA,
    UnitGrammar,
)

# Largest magnitude of a duration in nanoseconds (signed 64-bit)
MAX_DURATION_NS = float((1 << 63) - 1)
MIN_DURATION_NS = float(-(1 << 63))

Duration = Union[timedelta, int, float]


def _seconds(duration: Duration) -> float:
    """Convert a timedelta, or a plain number of seconds, to float seconds."""
    if isinstance(duration, timedelta):
        return duration.total_seconds()
    if isinstance(duration, numbers.Real):
        return float(duration)
    raise TypeError(f"Expected a timedelta or a number of seconds, got {type(duration).__name__}")


class InfoQuantity(ABC):
    """Base class for all information quantities."""

    __slots__ = ("_value",)

    grammar: ClassVar[UnitGrammar]

    # Format types handed to the built-in number formatter
    delegated_format_types: ClassVar[str] = ""
    allow_bps: ClassVar[bool] = False

    @property
    def value(self):
        """The raw value in base units."""
        return self._value

    @abstractmethod
    def format(self, style: Optional[FormatStyle] = None, **overrides) -> str:
        """Render the quantity as human-readable text."""
        pass

    @classmethod
    @abstractmethod
    def _parse_value(cls, text: str, mode: ParseMode):
        pass

    @staticmethod
    def _resolve_style(style: Optional[FormatStyle], overrides: dict) -> FormatStyle:
        style = style or FormatStyle.create_default()
        if overrides:
            style = style.with_options(**overrides)
        return style

    @classmethod
    def parse(cls, text: str, mode: ParseMode = ParseMode.LENIENT):
        """
        Parse a human-readable quantity such as "1.5 MB" or "10Gbit/s".

        Args:
            text: The text to parse; anything after the quantity is ignored
            mode: Scanning mode, lenient SI by default

        Returns:
            A new quantity

        Raises:
            MalformedRepresentationError: If the text is not a quantity
            OutOfRangeError: If a count does not fit in 64 bits
        """
        return cls(cls._parse_value(text, mode))

    @classmethod
    def parse_binary(cls, text: str):
        """Parse leniently, reading SI-spelled prefixes as binary ("1 kB" is 1024 bytes)."""
        return cls.parse(text, ParseMode.LENIENT_BINARY)

    @classmethod
    def parse_strict(cls, text: str):
        """Parse a single token; a bare number is taken in the base unit."""
        return cls.parse(text, ParseMode.STRICT)

    @classmethod
    def parse_strict_binary(cls, text: str):
        """Parse a single token, reading SI-spelled prefixes as binary."""
        return cls.parse(text, ParseMode.STRICT_BINARY)

    @classmethod
    def scan(cls, text: str, pos: int = 0, mode: ParseMode = ParseMode.LENIENT) -> Tuple[Any, int]:
        """
        Scan a quantity starting at pos.

        Returns:
            The quantity and the index just past the consumed text
        """
        result = scan_text(text, cls.grammar, mode, pos)
        return cls(result.value), result.end

    def convert(self, unit) -> float:
        """Express the quantity as a float multiple of unit."""
        return float(self._value) / float(unit)

    def convert_round(self, unit, precision: int) -> float:
        """
        Express the quantity as a multiple of unit, rounded to precision
        fractional digits with ties away from zero.
        """
        p = math.pow(10, precision)
        scaled = float(self._value) * p / float(unit)
        if not math.isfinite(scaled):
            return scaled
        return round_half_away(scaled) / p

    def __str__(self) -> str:
        return self.format(FormatStyle.compact())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"

    def __format__(self, spec: str) -> str:
        if not spec:
            return str(self)
        if spec[-1] in self.delegated_format_types:
            return format(self._value, spec)
        return self.format(FormatStyle.from_format_spec(spec, allow_bps=self.allow_bps))

    def _comparable(self, other):
        if isinstance(other, type(self)):
            return other._value
        if isinstance(other, numbers.Real) and not isinstance(other, InfoQuantity):
            return other
        return NotImplemented

    def _compare(self, other, op):
        other_value = self._comparable(other)
        if other_value is NotImplemented:
            return NotImplemented
        return op(self._value, other_value)

    def __eq__(self, other):
        return self._compare(other, operator.eq)

    def __ne__(self, other):
        return self._compare(other, operator.ne)

    def __lt__(self, other):
        return self._compare(other, operator.lt)

    def __le__(self, other):
        return self._compare(other, operator.le)

    def __gt__(self, other):
        return self._compare(other, operator.gt)

    def __ge__(self, other):
        return self._compare(other, operator.ge)

    def __hash__(self):
        return hash(self._value)

    def __float__(self) -> float:
        return float(self._value)

    def __bool__(self) -> bool:
        return self._value != 0


class _Count(InfoQuantity):
    """
    An unsigned 64-bit count.

    Construction checks the range; +, - and * wrap around modulo 2**64 the
    way fixed-width unsigned integers do.
    """

    __slots__ = ()

    unit_abbr: ClassVar[str]
    unit_full: ClassVar[str]
    bits_per_unit: ClassVar[int]
    delegated_format_types = "dxXobn"

    def __init__(self, value: int = 0):
        value = operator.index(value)
        if value < 0 or value > MAX_COUNT:
            raise OutOfRangeError(f"{type(self).__name__} out of range: {value}")
        self._value = value

    @classmethod
    def _parse_value(cls, text: str, mode: ParseMode) -> int:
        return parse_count(text, cls.grammar, mode)

    def format(self, style: Optional[FormatStyle] = None, **overrides) -> str:
        """
        Render the count as human-readable text.

        Args:
            style: Formatting options (defaults to FormatStyle.create_default())
            **overrides: FormatStyle fields to replace, e.g. precision=2

        Returns:
            Text such as "987.654321Mbit" or "941.9 mebibytes"
        """
        return format_count(
            self._value, self._resolve_style(style, overrides), self.unit_abbr, self.unit_full
        )

    def _operand(self, other):
        if isinstance(other, type(self)):
            return other._value
        if isinstance(other, int):
            return other
        return None

    def __add__(self, other):
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return type(self)((self._value + operand) & MAX_COUNT)

    __radd__ = __add__

    def __sub__(self, other):
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return type(self)((self._value - operand) & MAX_COUNT)

    def __rsub__(self, other):
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return type(self)((operand - self._value) & MAX_COUNT)

    def __mul__(self, other):
        if not isinstance(other, int):
            return NotImplemented
        return type(self)((self._value * other) & MAX_COUNT)

    __rmul__ = __mul__

    def __floordiv__(self, other):
        if isinstance(other, type(self)):
            return self._value // other._value
        if isinstance(other, int):
            return type(self)(self._value // other)
        return NotImplemented

    def __mod__(self, other):
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return type(self)(self._value % operand)

    def __truediv__(self, other):
        if isinstance(other, type(self)):
            return self._value / other._value
        return NotImplemented

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def time_to_transfer(self, rate) -> timedelta:
        """
        Calculate how long it takes to transfer this count at a bit rate.

        Args:
            rate: A BitRate or a plain number of bits per second

        Returns:
            The transfer time

        Raises:
            DivisionByZeroRateError: If the rate is zero
            OutOfRangeError: If the time in nanoseconds does not fit in a
                signed 64-bit integer, or the rate is NaN
        """
        rate = float(rate)
        if rate == 0:
            raise DivisionByZeroRateError()
        ns = float(self._value) * self.bits_per_unit * 1e9 / rate
        if math.isnan(ns) or ns < MIN_DURATION_NS or ns > MAX_DURATION_NS:
            raise OutOfRangeError(f"transfer time out of range: {self!r} at {rate} bit/s")
        return timedelta(microseconds=ns / 1000)

    def rate_given(self, duration: Duration) -> "BitRate":
        """
        Calculate the bit rate at which this count is transferred in duration.

        A zero duration gives a zero rate for a zero count and positive
        infinity otherwise.
        """
        seconds = _seconds(duration)
        if seconds == 0:
            if self._value == 0:
                return BitRate(0.0)
            return BitRate(math.inf)
        return BitRate(float(self._value) * self.bits_per_unit / seconds)


class BitCount(_Count):
    """A non-negative integral number of bits."""

    __slots__ = ()

    grammar = BIT_GRAMMAR
    unit_abbr = "bit"
    unit_full = "bit"
    bits_per_unit = 1

    def to_byte_boundary(self) -> Tuple["ByteCount", "BitCount"]:
        """
        Split the count into whole bytes and the remaining bits.

        Returns:
            (bytes, bits) where bits is between 0 and 7
        """
        return ByteCount(self._value >> 3), BitCount(self._value & 0x7)


class ByteCount(_Count):
    """A non-negative integral number of bytes."""

    __slots__ = ()

    grammar = BYTE_GRAMMAR
    unit_abbr = "B"
    unit_full = "byte"
    bits_per_unit = 8

    def to_bit_count(self) -> BitCount:
        """
        Convert the count to bits.

        Raises:
            OutOfRangeError: If the number of bits does not fit in 64 bits
        """
        if self._value > MAX_COUNT >> 3:
            raise OutOfRangeError(f"{self!r} has too many bits to count")
        return BitCount(self._value << 3)


class BitRate(InfoQuantity):
    """
    A number of bits per second backed by a float.

    NaN and infinities follow IEEE-754: a NaN rate is not equal to anything,
    including itself.
    """

    __slots__ = ()

    grammar = RATE_GRAMMAR
    delegated_format_types = "eEfFgG%"
    allow_bps = True

    def __init__(self, value: float = 0.0):
        if isinstance(value, (str, bytes)):
            raise TypeError("BitRate expects a number; use BitRate.parse() for text")
        self._value = float(value)

    @classmethod
    def _parse_value(cls, text: str, mode: ParseMode) -> float:
        return parse_rate(text, mode)

    def format(self, style: Optional[FormatStyle] = None, **overrides) -> str:
        """
        Render the rate as human-readable text.

        Args:
            style: Formatting options (defaults to FormatStyle.create_default())
            **overrides: FormatStyle fields to replace, e.g. bps=True

        Returns:
            Text such as "123.45Gbit/s", "987.7 Mbps" or "1.0 kilobit per second"
        """
        return format_rate(self._value, self._resolve_style(style, overrides))

    def __repr__(self) -> str:
        return f"BitRate({format_shortest(self._value)})"

    def _operand(self, other) -> Optional[float]:
        if isinstance(other, BitRate):
            return other._value
        if isinstance(other, numbers.Real) and not isinstance(other, InfoQuantity):
            return float(other)
        return None

    def __add__(self, other):
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return BitRate(self._value + operand)

    __radd__ = __add__

    def __sub__(self, other):
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return BitRate(self._value - operand)

    def __rsub__(self, other):
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return BitRate(operand - self._value)

    def __mul__(self, other):
        if isinstance(other, BitRate):
            return NotImplemented
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return BitRate(self._value * operand)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, BitRate):
            return self._value / other._value
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return BitRate(self._value / operand)

    def __neg__(self) -> "BitRate":
        return BitRate(-self._value)

    def __pos__(self) -> "BitRate":
        return self

    def __abs__(self) -> "BitRate":
        return BitRate(abs(self._value))

    def __int__(self) -> int:
        return int(self._value)

    def is_nan(self) -> bool:
        """Report whether the rate is NaN."""
        return math.isnan(self._value)

    def is_inf(self, sign: int = 0) -> bool:
        """
        Report whether the rate is infinite.

        A positive sign checks for positive infinity, a negative sign for
        negative infinity, zero for either.
        """
        if sign > 0:
            return self._value == math.inf
        if sign < 0:
            return self._value == -math.inf
        return math.isinf(self._value)

    def _bits_given(self, duration: Duration, bits_per_unit: int) -> int:
        seconds = _seconds(duration)
        if math.isnan(self._value) or math.isinf(self._value):
            raise OutOfRangeError(f"cannot count at {self!r}")
        if seconds == 0:
            return 0
        if (self._value < 0) != (seconds < 0):
            raise OutOfRangeError(f"negative count: {self!r} over {seconds} s")
        units = self._value * seconds / bits_per_unit
        if units >= float(MAX_COUNT):
            raise OutOfRangeError(f"count out of range: {self!r} over {seconds} s")
        return int(units)

    def bit_count_given(self, duration: Duration) -> BitCount:
        """
        Calculate how many whole bits are transferred at this rate in duration.

        Raises:
            OutOfRangeError: If the rate is NaN or infinite, the result would
                be negative, or it does not fit in 64 bits
        """
        return BitCount(self._bits_given(duration, 1))

    def byte_count_given(self, duration: Duration) -> ByteCount:
        """Calculate how many whole bytes are transferred at this rate in duration."""
        return ByteCount(self._bits_given(duration, 8))


BIT = BitCount(1)
KILOBIT = BitCount(KILO)
MEGABIT = BitCount(MEGA)
GIGABIT = BitCount(GIGA)
TERABIT = BitCount(TERA)
PETABIT = BitCount(PETA)
EXABIT = BitCount(EXA)
KIBIBIT = BitCount(KIBI)
MEBIBIT = BitCount(MEBI)
GIBIBIT = BitCount(GIBI)
TEBIBIT = BitCount(TEBI)
PEBIBIT = BitCount(PEBI)
EXBIBIT = BitCount(EXBI)

BYTE = ByteCount(1)
KILOBYTE = ByteCount(KILO)
MEGABYTE = ByteCount(MEGA)
GIGABYTE = ByteCount(GIGA)
TERABYTE = ByteCount(TERA)
PETABYTE = ByteCount(PETA)
EXABYTE = ByteCount(EXA)
KIBIBYTE = ByteCount(KIBI)
MEBIBYTE = ByteCount(MEBI)
GIBIBYTE = ByteCount(GIBI)
TEBIBYTE = ByteCount(TEBI)
PEBIBYTE = ByteCount(PEBI)
EXBIBYTE = ByteCount(EXBI)

BIT_PER_SECOND = BitRate(1)
KILOBIT_PER_SECOND = BitRate(KILO)
MEGABIT_PER_SECOND = BitRate(MEGA)
GIGABIT_PER_SECOND = BitRate(GIGA)
TERABIT_PER_SECOND = BitRate(TERA)
PETABIT_PER_SECOND = BitRate(PETA)
EXABIT_PER_SECOND = BitRate(EXA)
KIBIBIT_PER_SECOND = BitRate(KIBI)
MEBIBIT_PER_SECOND = BitRate(MEBI)
GIBIBIT_PER_SECOND = BitRate(GIBI)
TEBIBIT_PER_SECOND = BitRate(TEBI)
PEBIBIT_PER_SECOND = BitRate(PEBI)
EXBIBIT_PER_SECOND = BitRate(EXBI)

__all__ = [
    "InfoQuantity",
    "BitCount",
    "ByteCount",
    "BitRate",
    "BIT",
    "KILOBIT",
    "MEGABIT",
    "GIGABIT",
    "TERABIT",
    "PETABIT",
    "EXABIT",
    "KIBIBIT",
    "MEBIBIT",
    "GIBIBIT",
    "TEBIBIT",
    "PEBIBIT",
    "EXBIBIT",
    "BYTE",
    "KILOBYTE",
    "MEGABYTE",
    "GIGABYTE",
    "TERABYTE",
    "PETABYTE",
    "EXABYTE",
    "KIBIBYTE",
    "MEBIBYTE",
    "GIBIBYTE",
    "TEBIBYTE",
    "PEBIBYTE",
    "EXBIBYTE",
    "BIT_PER_SECOND",
    "KILOBIT_PER_SECOND",
    "MEGABIT_PER_SECOND",
    "GIGABIT_PER_SECOND",
    "TERABIT_PER_SECOND",
    "PETABIT_PER_SECOND",
    "EXABIT_PER_SECOND",
    "KIBIBIT_PER_SECOND",
    "MEBIBIT_PER_SECOND",
    "GIBIBIT_PER_SECOND",
    "TEBIBIT_PER_SECOND",
    "PEBIBIT_PER_SECOND",
    "EXBIBIT_PER_SECOND",
]
