"""
Field tables and the default-value policy of the record format.

Every model class lists its wire fields in a ``FIELDS`` table. Each entry names
the JSON key, the attribute it maps to, the codec for its value and, where the
field may be left out, the documented default. The same table drives both
directions:

* decode supplies the default when the key is absent (and accepts an explicit
  value equal to the default);
* encode omits the key when the value equals the default, so output is
  canonical.

Fields without a default are required: decode fails when they are missing and
encode always writes them.
"""

import copy
import uuid
from enum import Enum
from typing import Any, Callable, ClassVar, Dict, Iterable, Tuple, Type

from cverecord.core.errors import StructuralMismatch, json_type
from cverecord.core.timestamp import decode_timestamp, encode_timestamp


class _Required:
    def __repr__(self) -> str:
        return "REQUIRED"


REQUIRED = _Required()


class Codec:
    """Converts one JSON value to its model value and back."""

    def __init__(self, name: str, decode: Callable[[Any, str], Any], encode: Callable[[Any], Any]):
        self.name = name
        self.decode = decode
        self.encode = encode

    def __repr__(self) -> str:
        return f"Codec({self.name})"


def _mismatch(path: str, expected: str, value: Any) -> StructuralMismatch:
    return StructuralMismatch(path, f"expected {expected}, found {json_type(value)}")


def _identity(value: Any) -> Any:
    return value


def _decode_string(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise _mismatch(path, "string", value)
    return value


def _decode_boolean(value: Any, path: str) -> bool:
    if not isinstance(value, bool):
        raise _mismatch(path, "boolean", value)
    return value


def _decode_serial(value: Any, path: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise _mismatch(path, "integer", value)
    if value < 1:
        raise StructuralMismatch(path, f"expected a non-zero positive integer, found {value}")
    return value


def _decode_uuid(value: Any, path: str) -> uuid.UUID:
    if not isinstance(value, str):
        raise _mismatch(path, "UUID string", value)
    try:
        return uuid.UUID(value)
    except ValueError:
        raise StructuralMismatch(path, f"invalid UUID '{value}'")


STRING = Codec("string", _decode_string, _identity)
BOOLEAN = Codec("boolean", _decode_boolean, _identity)
SERIAL = Codec("serial", _decode_serial, _identity)
UUID = Codec("uuid", _decode_uuid, str)
# Free-form payloads (CVSS blocks, source, ...) are carried through as a private copy.
JSON = Codec("json", lambda value, path: copy.deepcopy(value), copy.deepcopy)
TIMESTAMP = Codec("timestamp", decode_timestamp, encode_timestamp)


def enum_codec(enum_type: Type[Enum]) -> Codec:
    """Codec for an Enum whose member values are the wire strings."""
    allowed = ", ".join(f"'{member.value}'" for member in enum_type)

    def decode(value: Any, path: str) -> Enum:
        if not isinstance(value, str):
            raise _mismatch(path, "string", value)
        try:
            return enum_type(value)
        except ValueError:
            raise StructuralMismatch(path, f"unknown variant '{value}', expected one of {allowed}")

    return Codec(enum_type.__name__, decode, lambda member: member.value)


def model(model_type: Type["WireModel"]) -> Codec:
    """Codec for a nested object described by its own field table."""
    return Codec(model_type.__name__, model_type.from_dict, lambda obj: obj.to_dict())


def sequence(item: Codec) -> Codec:
    """Codec for a JSON array; decoded arrays become tuples."""

    def decode(value: Any, path: str) -> Tuple[Any, ...]:
        if not isinstance(value, list):
            raise _mismatch(path, "array", value)
        return tuple(item.decode(element, f"{path}[{index}]") for index, element in enumerate(value))

    def encode(values: Iterable[Any]) -> list:
        return [item.encode(element) for element in values]

    return Codec(f"sequence({item.name})", decode, encode)


class Field:
    """One JSON key of an object, its attribute, codec and default."""

    def __init__(self, key: str, attr: str, codec: Codec, default: Any = REQUIRED):
        self.key = key
        self.attr = attr
        self.codec = codec
        self.default = default

    @property
    def required(self) -> bool:
        return self.default is REQUIRED

    def is_default(self, value: Any) -> bool:
        if self.required:
            return False
        if isinstance(self.default, tuple) and not self.default:
            return len(value) == 0
        return value == self.default

    def decode_into(self, data: Dict[str, Any], path: str, values: Dict[str, Any]) -> None:
        if self.key not in data:
            if self.required:
                raise StructuralMismatch(path, f"missing field '{self.key}'")
            values[self.attr] = self.default
            return

        raw = data[self.key]
        if raw is None and self.default is None:
            values[self.attr] = None
        else:
            values[self.attr] = self.codec.decode(raw, f"{path}.{self.key}")

    def encode_into(self, obj: Any, out: Dict[str, Any]) -> None:
        value = getattr(obj, self.attr)
        if self.is_default(value):
            return
        out[self.key] = self.codec.encode(value)

    def __repr__(self) -> str:
        return f"Field({self.key!r} -> {self.attr}, {self.codec!r}, default={self.default!r})"


class Flatten:
    """Embeds the fields of another model at the same nesting level."""

    key = None

    def __init__(self, attr: str, model_type: Type["WireModel"]):
        self.attr = attr
        self.model_type = model_type

    def decode_into(self, data: Dict[str, Any], path: str, values: Dict[str, Any]) -> None:
        values[self.attr] = self.model_type.from_dict(data, path)

    def encode_into(self, obj: Any, out: Dict[str, Any]) -> None:
        out.update(getattr(obj, self.attr).to_dict())

    def __repr__(self) -> str:
        return f"Flatten({self.attr} -> {self.model_type.__name__})"


def decode_fields(fields: Iterable[Any], data: Any, path: str = "$") -> Dict[str, Any]:
    """Decode a JSON object into constructor arguments, entry by entry."""
    if not isinstance(data, dict):
        raise _mismatch(path, "object", data)

    values: Dict[str, Any] = {}
    for entry in fields:
        entry.decode_into(data, path, values)
    return values


def encode_fields(fields: Iterable[Any], obj: Any) -> Dict[str, Any]:
    """Encode a model into a JSON object, leaving out default values."""
    out: Dict[str, Any] = {}
    for entry in fields:
        entry.encode_into(obj, out)
    return out


class WireModel:
    """Mixin giving a dataclass from_dict/to_dict driven by its FIELDS table."""

    FIELDS: ClassVar[Tuple[Any, ...]] = ()

    @classmethod
    def from_dict(cls, data: Any, path: str = "$"):
        """
        Create an instance from a decoded JSON object.

        Args:
            data: The JSON object
            path: Location of the object, used in error messages

        Returns:
            Instance of the model
        """
        return cls(**decode_fields(cls.FIELDS, data, path))

    def to_dict(self) -> Dict[str, Any]:
        """Convert the instance to a JSON object in canonical form."""
        return encode_fields(self.FIELDS, self)
