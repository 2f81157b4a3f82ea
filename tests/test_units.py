"""
Tests for the units module.

This module tests the prefix tables and the unit spellings shared by the
formatter and the parser.
"""

import pytest

from infounit.core.types import PrefixKind
from infounit.core.units import (
    BINARY_PREFIXES,
    BIT_GRAMMAR,
    BYTE_GRAMMAR,
    EXBI,
    KIBI,
    KILO,
    MAX_COUNT,
    RATE_GRAMMAR,
    SI_PREFIXES,
    Prefix,
    prefix_table,
)


class TestPrefixTables:
    """Test the SI and binary prefix tables."""

    def test_si_thresholds(self):
        """Test that SI thresholds are successive powers of 1000."""
        thresholds = SI_PREFIXES.thresholds
        assert len(thresholds) == 6
        assert thresholds[0] == 1000
        for smaller, larger in zip(thresholds, thresholds[1:]):
            assert larger == smaller * 1000

    def test_binary_thresholds(self):
        """Test that binary thresholds are successive powers of 1024."""
        thresholds = BINARY_PREFIXES.thresholds
        assert len(thresholds) == 6
        assert thresholds[0] == 1024
        for smaller, larger in zip(thresholds, thresholds[1:]):
            assert larger == smaller * 1024

    def test_prefix_names(self):
        """Test abbreviations and full names of the prefixes."""
        assert [p.symbol for p in SI_PREFIXES.tiers] == ["k", "M", "G", "T", "P", "E"]
        assert [p.symbol for p in BINARY_PREFIXES.tiers] == ["Ki", "Mi", "Gi", "Ti", "Pi", "Ei"]
        assert Prefix.MEGA.full_name == "mega"
        assert Prefix.EXBI.full_name == "exbi"

    def test_prefix_table_lookup(self):
        """Test selecting a table by prefix kind."""
        assert prefix_table(PrefixKind.SI) is SI_PREFIXES
        assert prefix_table(PrefixKind.BINARY) is BINARY_PREFIXES

    def test_constants(self):
        """Test the plain integer scale constants."""
        assert KILO == 1000
        assert KIBI == 1024
        assert EXBI == 1 << 60
        assert MAX_COUNT == 18446744073709551615


class TestPrefixSelection:
    """Test choosing the largest tier that does not exceed a value."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0, None),
            (999, None),
            (1000, Prefix.KILO),
            (999999, Prefix.KILO),
            (1000000, Prefix.MEGA),
            (MAX_COUNT, Prefix.EXA),
        ],
    )
    def test_si_selection(self, value, expected):
        """Test SI tier selection at and around the thresholds."""
        assert SI_PREFIXES.select(value) is expected

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1000, None),
            (1023, None),
            (1024, Prefix.KIBI),
            (1024 * 1024 - 1, Prefix.KIBI),
            (1024 * 1024, Prefix.MEBI),
            (MAX_COUNT, Prefix.EXBI),
        ],
    )
    def test_binary_selection(self, value, expected):
        """Test binary tier selection at and around the thresholds."""
        assert BINARY_PREFIXES.select(value) is expected

    def test_float_selection(self):
        """Test that rates select tiers the same way as counts."""
        assert SI_PREFIXES.select(999.999) is None
        assert SI_PREFIXES.select(1000.0) is Prefix.KILO
        assert SI_PREFIXES.select(-5.0) is None


class TestUnitGrammars:
    """Test resolving unit spellings to tiers."""

    @pytest.mark.parametrize(
        "spelling,factor",
        [
            ("b", 1),
            ("B", 1),
            ("byte", 1),
            ("Bytes", 1),
            ("kb", 1000),
            ("KB", 1000),
            ("kilobyte", 1000),
            ("KiloBytes", 1000),
            ("mb", 1000**2),
            ("gigabytes", 1000**3),
            ("EB", 1000**6),
            ("KiB", 1024),
            ("kibibytes", 1024),
            ("MiB", 1024**2),
            ("exbibyte", 1024**6),
        ],
    )
    def test_byte_spellings(self, spelling, factor):
        """Test the accepted byte spellings and their SI factors."""
        tier = BYTE_GRAMMAR.resolve(spelling)
        assert tier is not None
        assert tier.factor(binary=False) == factor

    @pytest.mark.parametrize(
        "spelling,factor",
        [
            ("bit", 1),
            ("bits", 1),
            ("kbit", 1000),
            ("Kilobits", 1000),
            ("Mbit", 1000**2),
            ("megabit", 1000**2),
            ("kibit", 1024),
            ("KiBits", 1024),
            ("kibibit", 1024),
            ("exbibits", 1024**6),
        ],
    )
    def test_bit_spellings(self, spelling, factor):
        """Test the accepted bit spellings and their SI factors."""
        tier = BIT_GRAMMAR.resolve(spelling)
        assert tier is not None
        assert tier.factor(binary=False) == factor

    @pytest.mark.parametrize(
        "spelling,factor",
        [
            ("bps", 1),
            ("bit/s", 1),
            ("kbps", 1000),
            ("Kbit/s", 1000),
            ("Gbps", 1000**3),
            ("kibps", 1024),
            ("Mibit/s", 1024**2),
        ],
    )
    def test_rate_spellings(self, spelling, factor):
        """Test the compact bit rate spellings and their SI factors."""
        tier = RATE_GRAMMAR.resolve(spelling)
        assert tier is not None
        assert tier.factor(binary=False) == factor

    def test_rate_long_spellings(self):
        """Test that the long rate form reuses the bit spellings."""
        assert RATE_GRAMMAR.resolve("kilobits") is None
        assert RATE_GRAMMAR.resolve_long("kilobits").factor(binary=False) == 1000
        assert RATE_GRAMMAR.resolve_long("bit").factor(binary=False) == 1
        assert RATE_GRAMMAR.resolve_long("mebibits").factor(binary=False) == 1024**2

    @pytest.mark.parametrize(
        "grammar,spelling",
        [
            (BYTE_GRAMMAR, "kbytes"),
            (BYTE_GRAMMAR, "tibibyte"),
            (BYTE_GRAMMAR, "bit"),
            (BIT_GRAMMAR, "kb"),
            (BIT_GRAMMAR, "byte"),
            (RATE_GRAMMAR, "kbit"),
            (RATE_GRAMMAR, "kilobits/s"),
        ],
    )
    def test_unknown_spellings(self, grammar, spelling):
        """Test that partial or foreign spellings are not accepted."""
        assert grammar.resolve(spelling) is None

    def test_binary_factor(self):
        """Test that SI-spelled tiers carry the binary factor of the same rank."""
        assert BYTE_GRAMMAR.resolve("kB").factor(binary=True) == 1024
        assert BYTE_GRAMMAR.resolve("GB").factor(binary=True) == 1024**3
        assert BYTE_GRAMMAR.resolve("KiB").factor(binary=True) == 1024
        assert BYTE_GRAMMAR.resolve("B").factor(binary=True) == 1

    def test_base_units(self):
        """Test the base unit assumed by strict parsing."""
        assert BIT_GRAMMAR.base_tier.matches(BIT_GRAMMAR.base_unit)
        assert BYTE_GRAMMAR.base_tier.matches(BYTE_GRAMMAR.base_unit)
        assert RATE_GRAMMAR.base_tier.matches(RATE_GRAMMAR.base_unit)
