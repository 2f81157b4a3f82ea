"""Exceptions for information unit errors.

This module defines the exceptions raised when a quantity cannot be
represented, a derived calculation is undefined, or a textual or binary
representation cannot be decoded. Every parser diagnosis has its own
subclass of MalformedRepresentationError so callers can tell them apart.
"""

###################################################################################
#                                                                                 #
#      IN ORDER TO AVOID CIRCULAR IMPORTS                                         #
#      THIS FILE SHOULD NEVER IMPORT ANYTHING FROM THE INFOUNIT LIBRARY           #
#                                                                                 #
###################################################################################


class InfoUnitError(Exception):
    """Base exception for information unit errors."""

    pass


class OutOfRangeError(InfoUnitError):
    """Raised when a result cannot be represented in the target domain."""

    def __init__(self, message: str = "out of range"):
        super().__init__(message)


class DivisionByZeroRateError(InfoUnitError):
    """Raised when a transfer time is calculated with a zero bit rate."""

    def __init__(self):
        super().__init__("division by zero bit rate")


class MalformedRepresentationError(InfoUnitError):
    """Raised when an input does not match any recognized representation."""

    pass


class EmptyInputError(MalformedRepresentationError):
    """Raised when there is nothing to scan."""

    def __init__(self):
        super().__init__("no input")


class InvalidExpressionError(MalformedRepresentationError):
    """Raised when the first token does not look like a quantity."""

    def __init__(self, expr: str):
        self.expr = expr
        super().__init__(f"invalid expr: {expr}")


class MissingUnitSuffixError(MalformedRepresentationError):
    """Raised when a unit suffix is required but absent."""

    def __init__(self, detail: str = ""):
        message = "no unit suffix"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class NoSpaceAfterDigitsError(MalformedRepresentationError):
    """Raised when the digits are followed by something other than one space."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"no space after digits: [{char}]")


class InvalidUnitExpressionError(MalformedRepresentationError):
    """Raised when the separate unit token contains invalid characters."""

    def __init__(self, expr: str):
        self.expr = expr
        super().__init__(f"invalid unit expr: {expr}")


class UnknownUnitError(MalformedRepresentationError):
    """Raised when a unit suffix matches no known spelling."""

    def __init__(self, unit: str):
        self.unit = unit
        super().__init__(f"unknown unit: {unit}")


class NonIntegerCountError(MalformedRepresentationError):
    """Raised when a fractional number is given in bits or bytes."""

    def __init__(self, domain: str, numeral: str):
        self.domain = domain
        self.numeral = numeral
        super().__init__(f"non-integer {domain} count: {numeral}")


class InvalidLengthError(MalformedRepresentationError):
    """Raised when a binary payload is not exactly eight bytes."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"invalid len: {length}")


class UnexpectedTypeError(MalformedRepresentationError):
    """Raised when a structured field holds neither a number nor a string."""

    def __init__(self, value_type: str):
        self.value_type = value_type
        super().__init__(f"unexpected type: {value_type}")
