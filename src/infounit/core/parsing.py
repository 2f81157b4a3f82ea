"""
Scanning of human-readable information quantities.

The scanner reads a decimal numeral with an optional unit suffix from the
front of a string. The suffix may be glued to the digits ("5kB") or, in
lenient modes, separated by exactly one space ("5 kB"). Bit rates also
accept the three-token spelling "5 kilobits per second".

Every failure raises a subclass of MalformedRepresentationError, or
OutOfRangeError when a count does not fit in 64 bits.
"""

import math
import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from infounit.core.errors import (
    EmptyInputError,
    InfoUnitError,
    InvalidExpressionError,
    InvalidUnitExpressionError,
    MissingUnitSuffixError,
    NonIntegerCountError,
    NoSpaceAfterDigitsError,
    OutOfRangeError,
    UnknownUnitError,
)
from infounit.core.logging import get_logger
from infounit.core.types import ParseMode
from infounit.core.units import MAX_COUNT, RATE_GRAMMAR, UnitGrammar

log = get_logger(__name__)

# 1:num, 2:int, 3:frac, 4:unit
_COUNT_TOKEN_RE = re.compile(r"(([0-9]*)(\.[0-9]+)?)([a-z]*)", re.IGNORECASE)
_COUNT_UNIT_RE = re.compile(r"[a-z]+", re.IGNORECASE)
_RATE_TOKEN_RE = re.compile(
    r"(nan|[+-]?inf|[+-]?([0-9]*)(\.[0-9]+)?)([a-z/]*)", re.IGNORECASE
)
_RATE_UNIT_RE = re.compile(r"[a-z/]+", re.IGNORECASE)
_PER_RE = re.compile(r"per", re.IGNORECASE)
_SECOND_RE = re.compile(r"sec(ond)?", re.IGNORECASE)
_MAX_COUNT_DIGITS = len(str(MAX_COUNT))


class TokenReader:
    """
    A cursor over a string that hands out whitespace-delimited tokens.

    Attributes:
        text: The string being scanned
        pos: Index of the next unread character
    """

    def __init__(self, text: str, pos: int = 0):
        self.text = text
        self.pos = pos

    def token(self, skip_space: bool) -> str:
        """Read a run of non-whitespace characters, optionally skipping leading whitespace."""
        if skip_space:
            while self.pos < len(self.text) and self.text[self.pos].isspace():
                self.pos += 1
        start = self.pos
        while self.pos < len(self.text) and not self.text[self.pos].isspace():
            self.pos += 1
        return self.text[start : self.pos]

    def read_char(self) -> Optional[str]:
        """Read a single character, or return None at the end of the text."""
        if self.pos >= len(self.text):
            return None
        char = self.text[self.pos]
        self.pos += 1
        return char

    @property
    def remainder(self) -> str:
        return self.text[self.pos :]


@dataclass(frozen=True)
class ScanResult:
    """A scanned value and the index just past the text it was read from."""

    value: Union[int, float]
    end: int


def round_half_away(value: float) -> int:
    """Round a finite float to the nearest integer, ties away from zero."""
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


def _read_unit_token(reader: TokenReader, unit_re) -> str:
    """Read the space and the separate unit token that follow bare digits."""
    char = reader.read_char()
    if char is None:
        raise MissingUnitSuffixError("EOF")
    if char != " ":
        raise NoSpaceAfterDigitsError(char)
    token = reader.token(skip_space=False)
    if not token:
        raise MissingUnitSuffixError()
    if unit_re.fullmatch(token) is None:
        raise InvalidUnitExpressionError(token)
    return token


def _check_count(value: int) -> int:
    if value < 0 or value > MAX_COUNT:
        raise OutOfRangeError(f"out of range: {value}")
    return value


def _count_from_digits(digits: str) -> int:
    # 2^64-1 has 20 digits; longer numerals are rejected before int() sees them
    if len(digits.lstrip("0")) > _MAX_COUNT_DIGITS:
        raise OutOfRangeError(f"out of range: {digits[:_MAX_COUNT_DIGITS]}...")
    return _check_count(int(digits))


def scan_count(reader: TokenReader, grammar: UnitGrammar, mode: ParseMode) -> int:
    """
    Scan an unsigned count of bits or bytes.

    Args:
        reader: Source positioned before the quantity
        grammar: Unit spellings of the domain (BIT_GRAMMAR or BYTE_GRAMMAR)
        mode: Lenient or strict, SI or binary

    Returns:
        The count in base units
    """
    token = reader.token(skip_space=True)
    if not token:
        raise EmptyInputError()
    match = _COUNT_TOKEN_RE.fullmatch(token)
    if match is None:
        raise InvalidExpressionError(token)

    num_expr, int_part, frac_part, unit_expr = match.groups()
    is_int = bool(int_part) and not frac_part
    if not num_expr:
        raise InvalidExpressionError(token)

    if not unit_expr:
        if mode.strict:
            unit_expr = grammar.base_unit
        else:
            unit_expr = _read_unit_token(reader, _COUNT_UNIT_RE)

    if grammar.base_tier.matches(unit_expr):
        if not is_int:
            raise NonIntegerCountError(grammar.name, num_expr)
        return _count_from_digits(num_expr)

    if is_int:
        number = _count_from_digits(num_expr)
        tier = grammar.resolve(unit_expr)
        if tier is None:
            raise UnknownUnitError(unit_expr)
        return _check_count(number * tier.factor(mode.binary))

    number = float(num_expr)
    tier = grammar.resolve(unit_expr)
    if tier is None:
        raise UnknownUnitError(unit_expr)
    product = number * float(tier.factor(mode.binary))
    if not math.isfinite(product):
        raise OutOfRangeError(f"out of range: {num_expr} {unit_expr}")
    return _check_count(round_half_away(product))


def scan_rate(reader: TokenReader, mode: ParseMode) -> float:
    """
    Scan a bit rate.

    Args:
        reader: Source positioned before the quantity
        mode: Lenient or strict, SI or binary

    Returns:
        The rate in bits per second
    """
    token = reader.token(skip_space=True)
    if not token:
        raise EmptyInputError()
    match = _RATE_TOKEN_RE.fullmatch(token)
    if match is None:
        raise InvalidExpressionError(token)

    num_expr, unit_expr = match.group(1), match.group(4)
    if not num_expr:
        raise InvalidExpressionError(token)

    if not unit_expr:
        if mode.strict:
            unit_expr = RATE_GRAMMAR.base_unit
        else:
            unit_expr = _read_unit_token(reader, _RATE_UNIT_RE)

    try:
        number = float(num_expr)
    except ValueError:
        raise InvalidExpressionError(num_expr) from None

    tier = RATE_GRAMMAR.resolve(unit_expr)
    if tier is not None:
        return number * float(tier.factor(mode.binary))

    # Long form: "<unit> per second", each word after exactly one space
    suffix = unit_expr
    for word_re in (_PER_RE, _SECOND_RE):
        char = reader.read_char()
        if char is None:
            raise UnknownUnitError(suffix)
        if char != " ":
            raise UnknownUnitError(suffix + char)
        word = reader.token(skip_space=False)
        if not word:
            raise UnknownUnitError(suffix)
        if word_re.fullmatch(word) is None:
            raise UnknownUnitError(f"{suffix} {word}")
        suffix = f"{suffix} {word}"

    tier = RATE_GRAMMAR.resolve_long(unit_expr)
    if tier is None:
        raise UnknownUnitError(suffix)
    return number * float(tier.factor(mode.binary))


def scan_text(text: str, grammar: UnitGrammar, mode: ParseMode, pos: int = 0) -> ScanResult:
    """
    Scan one quantity from text starting at pos.

    Rates are scanned when grammar is RATE_GRAMMAR, counts otherwise. The
    returned end index lets callers continue reading after the quantity.
    """
    reader = TokenReader(text, pos)
    if grammar is RATE_GRAMMAR:
        value = scan_rate(reader, mode)
    else:
        value = scan_count(reader, grammar, mode)
    return ScanResult(value, reader.pos)


def parse_count(text: str, grammar: UnitGrammar, mode: ParseMode = ParseMode.LENIENT) -> int:
    """Parse a count of bits or bytes from the front of text."""
    try:
        return scan_count(TokenReader(text), grammar, mode)
    except InfoUnitError as e:
        log.debug(f"Cannot parse {text!r} as a {grammar.name} count ({mode.name}): {e}")
        raise


def parse_rate(text: str, mode: ParseMode = ParseMode.LENIENT) -> float:
    """Parse a bit rate from the front of text."""
    try:
        return scan_rate(TokenReader(text), mode)
    except InfoUnitError as e:
        log.debug(f"Cannot parse {text!r} as a bit rate ({mode.name}): {e}")
        raise
