"""
Tests for the exception hierarchy.
"""

import pytest

from infounit.core.errors import (
    DivisionByZeroRateError,
    EmptyInputError,
    InfoUnitError,
    InvalidExpressionError,
    InvalidLengthError,
    InvalidUnitExpressionError,
    MalformedRepresentationError,
    MissingUnitSuffixError,
    NonIntegerCountError,
    NoSpaceAfterDigitsError,
    OutOfRangeError,
    UnexpectedTypeError,
    UnknownUnitError,
)


class TestErrorHierarchy:
    """Test that every error can be caught by category."""

    @pytest.mark.parametrize(
        "error",
        [
            EmptyInputError(),
            InvalidExpressionError("x"),
            MissingUnitSuffixError(),
            NoSpaceAfterDigitsError("\t"),
            InvalidUnitExpressionError("1"),
            UnknownUnitError("furlong"),
            NonIntegerCountError("bit", "0.5"),
            InvalidLengthError(3),
            UnexpectedTypeError("list"),
        ],
    )
    def test_malformed(self, error):
        """Test that parser and decoder errors are malformed representations."""
        assert isinstance(error, MalformedRepresentationError)
        assert isinstance(error, InfoUnitError)

    def test_arithmetic_errors(self):
        """Test the arithmetic error categories."""
        assert isinstance(OutOfRangeError(), InfoUnitError)
        assert isinstance(DivisionByZeroRateError(), InfoUnitError)
        assert not isinstance(OutOfRangeError(), MalformedRepresentationError)


class TestErrorMessages:
    """Test the messages and attributes of errors."""

    def test_messages(self):
        """Test the message built by each error."""
        assert str(OutOfRangeError()) == "out of range"
        assert str(DivisionByZeroRateError()) == "division by zero bit rate"
        assert str(MissingUnitSuffixError("EOF")) == "no unit suffix: EOF"
        assert str(UnknownUnitError("furlong")) == "unknown unit: furlong"
        assert str(InvalidLengthError(3)) == "invalid len: 3"

    def test_attributes(self):
        """Test that the offending input is kept on the error."""
        error = NonIntegerCountError("byte", "1.21")
        assert error.domain == "byte"
        assert error.numeral == "1.21"
        assert UnknownUnitError("furlong").unit == "furlong"
        assert InvalidLengthError(3).length == 3
