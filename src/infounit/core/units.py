"""
Unit tables for information quantities.

This module holds the process-wide, read-only tables the formatter and the
parser share: the SI and binary prefix tiers with their abbreviations and
full names, the scale factors of every tier, and the case-insensitive
spellings accepted for bits, bytes and bit rates. Everything here is built
once at import time and never mutated afterwards.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Pattern, Tuple

from infounit.core.types import PrefixKind

# Largest value of the unsigned 64-bit count domain
MAX_COUNT = (1 << 64) - 1


class Prefix(Enum):
    """Scaling prefixes for information units."""

    KILO = (1000, "k", "kilo")
    MEGA = (1000**2, "M", "mega")
    GIGA = (1000**3, "G", "giga")
    TERA = (1000**4, "T", "tera")
    PETA = (1000**5, "P", "peta")
    EXA = (1000**6, "E", "exa")
    KIBI = (1024, "Ki", "kibi")
    MEBI = (1024**2, "Mi", "mebi")
    GIBI = (1024**3, "Gi", "gibi")
    TEBI = (1024**4, "Ti", "tebi")
    PEBI = (1024**5, "Pi", "pebi")
    EXBI = (1024**6, "Ei", "exbi")

    def __init__(self, factor: int, symbol: str, full_name: str):
        self.factor = factor
        self.symbol = symbol
        self.full_name = full_name


@dataclass(frozen=True)
class PrefixTable:
    """An ordered, strictly increasing run of six prefix tiers."""

    kind: PrefixKind
    tiers: Tuple[Prefix, ...]

    @property
    def thresholds(self) -> Tuple[int, ...]:
        return tuple(prefix.factor for prefix in self.tiers)

    def select(self, value: float) -> Optional[Prefix]:
        """
        Select the largest tier whose threshold does not exceed the value.

        Returns None when the value is below the smallest threshold, which
        means the base unit applies.
        """
        for prefix in reversed(self.tiers):
            if prefix.factor <= value:
                return prefix
        return None


SI_PREFIXES = PrefixTable(
    PrefixKind.SI,
    (Prefix.KILO, Prefix.MEGA, Prefix.GIGA, Prefix.TERA, Prefix.PETA, Prefix.EXA),
)
BINARY_PREFIXES = PrefixTable(
    PrefixKind.BINARY,
    (Prefix.KIBI, Prefix.MEBI, Prefix.GIBI, Prefix.TEBI, Prefix.PEBI, Prefix.EXBI),
)


def prefix_table(kind: PrefixKind) -> PrefixTable:
    """Get the prefix table for a prefix kind."""
    if kind == PrefixKind.BINARY:
        return BINARY_PREFIXES
    return SI_PREFIXES


@dataclass(frozen=True)
class UnitTier:
    """
    One scale level of a unit grammar.

    Attributes:
        pattern: Case-insensitive spelling(s) of the unit at this level
        si_factor: Multiplier when SI prefixes are read as SI
        binary_factor: Multiplier when SI prefixes are read as binary
    """

    pattern: Pattern
    si_factor: int
    binary_factor: int

    def matches(self, expr: str) -> bool:
        return self.pattern.fullmatch(expr) is not None

    def factor(self, binary: bool) -> int:
        return self.binary_factor if binary else self.si_factor


@dataclass(frozen=True)
class UnitGrammar:
    """
    The recognized unit spellings of one quantity domain.

    Attributes:
        name: Domain name used in diagnostics ("bit", "byte", "bit rate")
        base_unit: Spelling assumed when strict scanning finds no suffix
        tiers: Base tier followed by the six SI and the six binary tiers
        long_tiers: Spellings that must be followed by "per sec(ond)"
    """

    name: str
    base_unit: str
    tiers: Tuple[UnitTier, ...]
    long_tiers: Tuple[UnitTier, ...] = ()

    @property
    def base_tier(self) -> UnitTier:
        return self.tiers[0]

    def resolve(self, expr: str) -> Optional[UnitTier]:
        """Find the first tier that matches the unit expression."""
        for tier in self.tiers:
            if tier.matches(expr):
                return tier
        return None

    def resolve_long(self, expr: str) -> Optional[UnitTier]:
        """Find the first long-form tier that matches the unit expression."""
        for tier in self.long_tiers:
            if tier.matches(expr):
                return tier
        return None


def _tier(spelling: str, si_factor: int, binary_factor: int) -> UnitTier:
    return UnitTier(re.compile(spelling, re.IGNORECASE), si_factor, binary_factor)


def _build_tiers(base: str, si_spellings, binary_spellings) -> Tuple[UnitTier, ...]:
    tiers = [_tier(base, 1, 1)]
    for spelling, si, binary in zip(si_spellings, SI_PREFIXES.tiers, BINARY_PREFIXES.tiers):
        tiers.append(_tier(spelling, si.factor, binary.factor))
    for spelling, binary in zip(binary_spellings, BINARY_PREFIXES.tiers):
        tiers.append(_tier(spelling, binary.factor, binary.factor))
    return tuple(tiers)


def _bit_spellings() -> Tuple[UnitTier, ...]:
    return _build_tiers(
        "bits?",
        [f"{p.symbol.lower()}({p.full_name[1:]})?bits?" for p in SI_PREFIXES.tiers],
        [f"({p.symbol.lower()}|{p.full_name})bits?" for p in BINARY_PREFIXES.tiers],
    )


BIT_GRAMMAR = UnitGrammar("bit", "bit", _bit_spellings())

BYTE_GRAMMAR = UnitGrammar(
    "byte",
    "b",
    _build_tiers(
        "b(ytes?)?",
        [f"{p.symbol.lower()}b|{p.full_name}bytes?" for p in SI_PREFIXES.tiers],
        [f"{p.symbol.lower()}b|{p.full_name}bytes?" for p in BINARY_PREFIXES.tiers],
    ),
)

_PER_SECOND = "(bps|bit/s)"

RATE_GRAMMAR = UnitGrammar(
    "bit rate",
    "bit/s",
    _build_tiers(
        _PER_SECOND,
        [p.symbol.lower() + _PER_SECOND for p in SI_PREFIXES.tiers],
        [p.symbol.lower() + _PER_SECOND for p in BINARY_PREFIXES.tiers],
    ),
    long_tiers=_bit_spellings(),
)


# Common scale factors as plain integers
KILO, MEGA, GIGA, TERA, PETA, EXA = SI_PREFIXES.thresholds
KIBI, MEBI, GIBI, TEBI, PEBI, EXBI = BINARY_PREFIXES.thresholds
