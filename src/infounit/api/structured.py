"""
JSON and YAML adapters for information quantities.

On output a quantity is always the raw number in its base unit. On input
either a raw number or a human-readable string such as "1.5 GB" is
accepted; a null field leaves the current value untouched.
"""

import json
from typing import Any, Optional, Type, TypeVar, Union

import yaml

from infounit.core.errors import (
    MalformedRepresentationError,
    NonIntegerCountError,
    OutOfRangeError,
    UnexpectedTypeError,
)
from infounit.core.logging import get_logger
from infounit.core.quantities import BitCount, BitRate, ByteCount, InfoQuantity

log = get_logger(__name__)

Q = TypeVar("Q", bound=InfoQuantity)


def to_json_value(value: InfoQuantity) -> Union[int, float]:
    """Get the raw number a quantity is serialized as."""
    return value.value


class InfoUnitJSONEncoder(json.JSONEncoder):
    """JSON encoder that writes quantities as raw numbers."""

    def default(self, o):
        if isinstance(o, InfoQuantity):
            return to_json_value(o)
        return super().default(o)


def dumps(obj: Any, **kwargs) -> str:
    """Serialize obj to JSON, writing any quantities inside it as raw numbers."""
    return json.dumps(obj, cls=InfoUnitJSONEncoder, **kwargs)


def from_json_value(cls: Type[Q], raw: Any, current: Optional[Q] = None) -> Optional[Q]:
    """
    Decode a quantity from a parsed JSON value.

    Args:
        cls: BitCount, ByteCount or BitRate
        raw: A number in the base unit, a human-readable string, or None
        current: Value returned unchanged when raw is None

    Returns:
        The decoded quantity, or current for a null field

    Raises:
        MalformedRepresentationError: If raw cannot be decoded
    """
    if raw is None:
        return current
    if isinstance(raw, bool):
        raise UnexpectedTypeError("bool")

    if isinstance(raw, str):
        try:
            return cls.parse(raw)
        except OutOfRangeError as err:
            raise MalformedRepresentationError(f"{raw!r}: {err}") from err

    if isinstance(raw, int):
        if issubclass(cls, BitRate):
            return cls(float(raw))
        try:
            return cls(raw)
        except OutOfRangeError as err:
            raise MalformedRepresentationError(str(err)) from err

    if isinstance(raw, float):
        if issubclass(cls, BitRate):
            return cls(raw)
        raise NonIntegerCountError(cls.grammar.name, repr(raw))

    raise UnexpectedTypeError(type(raw).__name__)


def unmarshal_json(
    cls: Type[Q], document: Union[str, bytes], current: Optional[Q] = None
) -> Optional[Q]:
    """Decode a quantity from a JSON document holding a single value."""
    try:
        raw = json.loads(document)
    except json.JSONDecodeError as err:
        log.debug(f"Invalid JSON for {cls.__name__}: {err}")
        raise MalformedRepresentationError(f"invalid JSON: {err}") from err
    return from_json_value(cls, raw, current)


class InfoUnitDumper(yaml.SafeDumper):
    """YAML dumper that writes quantities as plain numbers."""

    def ignore_aliases(self, data):
        # Scalars never get anchors, even when the same object repeats
        if isinstance(data, InfoQuantity):
            return True
        return super().ignore_aliases(data)


def _represent_count(dumper: yaml.SafeDumper, count) -> yaml.Node:
    return dumper.represent_int(count.value)


def _represent_rate(dumper: yaml.SafeDumper, rate: BitRate) -> yaml.Node:
    return dumper.represent_float(rate.value)


InfoUnitDumper.add_representer(BitCount, _represent_count)
InfoUnitDumper.add_representer(ByteCount, _represent_count)
InfoUnitDumper.add_representer(BitRate, _represent_rate)


def dump_yaml(data: Any, stream=None, **kwargs):
    """
    Serialize data to YAML, writing any quantities inside it as numbers.

    Returns the YAML text when stream is None, like yaml.dump().
    """
    return yaml.dump(data, stream, Dumper=InfoUnitDumper, **kwargs)


def from_yaml_value(cls: Type[Q], raw: Any, current: Optional[Q] = None) -> Optional[Q]:
    """Decode a quantity from a value produced by a YAML loader."""
    return from_json_value(cls, raw, current)


def load_yaml(cls: Type[Q], document: Union[str, bytes], current: Optional[Q] = None) -> Optional[Q]:
    """Decode a quantity from a YAML document holding a single scalar."""
    try:
        raw = yaml.safe_load(document)
    except yaml.YAMLError as err:
        log.debug(f"Invalid YAML for {cls.__name__}: {err}")
        raise MalformedRepresentationError(f"invalid YAML: {err}") from err
    return from_yaml_value(cls, raw, current)
