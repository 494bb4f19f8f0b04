"""
Codec for the entries of an affected product's ``versions`` list.

The two shapes are told apart by which keys are present: an upper bound key
(``lessThan`` or ``lessThanOrEqual``) makes the entry a range, otherwise it is a
single version. On the wire the bound is a sibling of ``version`` and
``status``, never a nested object.
"""

from typing import Any, Dict

from cverecord.core.errors import EncodeError, StructuralMismatch, json_type
from cverecord.core.fields import STRING, Codec, Field, decode_fields, encode_fields, model, sequence
from cverecord.models.version import STATUS, UPPER_BOUNDS, Change, Range, Single, VersionEntry

SINGLE_FIELDS = (
    Field("version", "version", STRING),
    Field("status", "status", STATUS),
    Field("versionType", "version_type", STRING, default=None),
)

RANGE_FIELDS = (
    Field("version", "version", STRING),
    Field("status", "status", STATUS),
    Field("versionType", "version_type", STRING),
    Field("changes", "changes", sequence(model(Change)), default=()),
)

_SINGLE_KEYS = frozenset(entry.key for entry in SINGLE_FIELDS)


def decode_version(data: Any, path: str = "$") -> VersionEntry:
    """
    Decode one version entry.

    Args:
        data: JSON object of the entry
        path: Location of the entry, used in error messages

    Returns:
        Single or Range

    Raises:
        StructuralMismatch: On missing/mistyped fields, both upper bounds
            present, or unknown keys in a single-version entry
    """
    if not isinstance(data, dict):
        raise StructuralMismatch(path, f"expected object, found {json_type(data)}")

    bounds = [bound for bound in UPPER_BOUNDS if bound.KEY in data]
    if len(bounds) > 1:
        raise StructuralMismatch(path, "only one of 'lessThan' and 'lessThanOrEqual' may be specified")

    if bounds:
        bound_type = bounds[0]
        bound = bound_type(STRING.decode(data[bound_type.KEY], f"{path}.{bound_type.KEY}"))
        return Range(bound=bound, **decode_fields(RANGE_FIELDS, data, path))

    unknown = sorted(set(data) - _SINGLE_KEYS)
    if unknown:
        raise StructuralMismatch(path, f"unknown field(s) {', '.join(unknown)} in single version entry")
    return Single(**decode_fields(SINGLE_FIELDS, data, path))


def encode_version(entry: VersionEntry) -> Dict[str, Any]:
    """Encode a version entry, flattening a range's upper bound."""
    if isinstance(entry, Range):
        out = {"version": entry.version, entry.bound.KEY: entry.bound.value}
        out.update(encode_fields(RANGE_FIELDS[1:], entry))
        return out

    if isinstance(entry, Single):
        return encode_fields(SINGLE_FIELDS, entry)

    raise EncodeError(f"expected a version entry, found {type(entry).__name__}")


VERSION = Codec("version", decode_version, encode_version)
