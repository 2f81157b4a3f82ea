"""
Fixed-width binary and plain-text encodings of information quantities.

Counts encode as 8 big-endian bytes of an unsigned 64-bit integer, rates as
8 big-endian bytes of an IEEE-754 double. The text form is the raw value in
the base unit followed by the unit ("1111 bit", "5000000 B", "0.5 bit/s"),
which the lenient parser reads back exactly.
"""

import struct
from typing import Type, TypeVar, Union

from infounit.core.errors import InvalidLengthError
from infounit.core.formatting import RATE_UNIT, format_shortest
from infounit.core.logging import get_logger
from infounit.core.quantities import BitRate, InfoQuantity

log = get_logger(__name__)

Q = TypeVar("Q", bound=InfoQuantity)

_COUNT_FORMAT = struct.Struct(">Q")
_RATE_FORMAT = struct.Struct(">d")


def _struct_for(cls: Type[InfoQuantity]) -> struct.Struct:
    return _RATE_FORMAT if issubclass(cls, BitRate) else _COUNT_FORMAT


def encode_binary(value: InfoQuantity) -> bytes:
    """Encode a quantity as 8 big-endian bytes."""
    return _struct_for(type(value)).pack(value.value)


def decode_binary(cls: Type[Q], data: bytes) -> Q:
    """
    Decode a quantity from 8 big-endian bytes.

    Args:
        cls: BitCount, ByteCount or BitRate
        data: The encoded bytes

    Returns:
        The decoded quantity

    Raises:
        InvalidLengthError: If data is not exactly 8 bytes long
    """
    if len(data) != 8:
        log.debug(f"Rejecting {len(data)}-byte payload for {cls.__name__}")
        raise InvalidLengthError(len(data))
    (raw,) = _struct_for(cls).unpack(data)
    return cls(raw)


def marshal_text(value: InfoQuantity) -> str:
    """Encode a quantity as its raw value followed by the base unit."""
    if isinstance(value, BitRate):
        return f"{format_shortest(value.value)} {RATE_UNIT}"
    return f"{value.value} {value.unit_abbr}"


def unmarshal_text(cls: Type[Q], text: Union[str, bytes]) -> Q:
    """Decode a quantity from text, accepting anything the lenient parser reads."""
    if isinstance(text, bytes):
        text = text.decode("utf-8")
    return cls.parse(text)
