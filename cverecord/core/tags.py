"""
Constant-valued discriminator fields.

A constant tag is a key whose value must be one exact string. It carries no
data once validated; the record variant it belongs to is what it expresses.
"""

from typing import Any, Dict

from cverecord.core.errors import StructuralMismatch, UnexpectedTagValue


def decode_tag(value: Any, expected: str, path: str = "$") -> None:
    """Accept ``value`` only if it is exactly ``expected``."""
    if value != expected:
        raise UnexpectedTagValue(expected, value, path)


def encode_tag(expected: str) -> str:
    return expected


class ConstantTag:
    """
    Field-table entry for a constant tag.

    It sits in a model's field table like any other field, so the tag is checked
    as part of decoding its owning object and written back verbatim on encode.
    """

    attr = None

    def __init__(self, key: str, expected: str):
        self.key = key
        self.expected = expected

    def decode_into(self, data: Dict[str, Any], path: str, values: Dict[str, Any]) -> None:
        if self.key not in data:
            raise StructuralMismatch(path, f"missing field '{self.key}'")
        decode_tag(data[self.key], self.expected, f"{path}.{self.key}")

    def encode_into(self, obj: Any, out: Dict[str, Any]) -> None:
        out[self.key] = encode_tag(self.expected)

    def __repr__(self) -> str:
        return f"ConstantTag({self.key!r}, {self.expected!r})"
