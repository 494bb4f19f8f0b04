"""
Entry points of the codec: CVE Record text to typed records and back.

Documents carry no explicit type tag telling a published record from a rejected
one. Decoding tries each known shape in a fixed order, each attempt a complete
structural decode of the whole document. The state tag inside ``cveMetadata``
only rules a shape in or out as part of that full attempt.
"""

import json
from typing import Any, Dict, List, Optional, Tuple, Type

from cverecord.core.errors import AmbiguousOrInvalidRecord, DecodeError, EncodeError, StructuralMismatch
from cverecord.models import Published, Record, Rejected
from cverecord.utils.logger import Logger

# Tried in this order; the first complete match wins.
RECORD_VARIANTS: Tuple[Type, ...] = (Published, Rejected)


def decode_document(document: Any) -> Record:
    """
    Decode an already-parsed JSON document into a record.

    Args:
        document: The top-level JSON value

    Returns:
        Published or Rejected record

    Raises:
        AmbiguousOrInvalidRecord: If the document matches neither shape
    """
    errors: Dict[str, DecodeError] = {}
    for variant in RECORD_VARIANTS:
        try:
            return variant.from_dict(document)
        except DecodeError as e:
            error = e
        except RecursionError:
            error = StructuralMismatch("$", "document nested too deeply")
        Logger.debug(f"Not a {variant.__name__} record: {error}")
        errors[variant.__name__] = error

    raise AmbiguousOrInvalidRecord(errors["Published"], errors["Rejected"])


def decode(text: Any) -> Record:
    """
    Decode CVE Record JSON text (str or UTF-8 bytes).

    Raises:
        StructuralMismatch: If the text is not JSON, repeats a key within an
            object or nests too deeply
        AmbiguousOrInvalidRecord: If the document matches neither shape
    """
    try:
        document = json.loads(text, object_pairs_hook=_unique_keys)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise StructuralMismatch("$", f"invalid JSON: {e}")
    except RecursionError:
        raise StructuralMismatch("$", "document nested too deeply")
    return decode_document(document)


def _unique_keys(pairs: List[Tuple[str, Any]]) -> Dict[str, Any]:
    obj: Dict[str, Any] = {}
    for key, value in pairs:
        if key in obj:
            raise StructuralMismatch("$", f"duplicate field '{key}'")
        obj[key] = value
    return obj


def encode_document(record: Record) -> Dict[str, Any]:
    """Encode a record into its canonical JSON object."""
    if not isinstance(record, RECORD_VARIANTS):
        raise EncodeError(f"expected a Published or Rejected record, found {type(record).__name__}")
    return record.to_dict()


def encode(record: Record, indent: Optional[int] = None) -> str:
    """
    Encode a record as JSON text.

    Args:
        record: Published or Rejected record
        indent: Pretty-print with this indentation, compact if None

    Returns:
        The JSON text
    """
    return json.dumps(encode_document(record), indent=indent, ensure_ascii=False)
