"""
CVE Record codec.

A strict codec between CVE Record JSON (format 5.x) and an immutable, typed
record model, with a command-line tool to check whole corpora.
"""

__version__ = "1.0.0"

from cverecord.core.errors import (
    AmbiguousOrInvalidRecord,
    CodecError,
    DecodeError,
    EncodeError,
    MalformedTimestamp,
    StructuralMismatch,
    UnexpectedTagValue,
    UnrepresentableTimestamp,
)
from cverecord.core.resolver import decode, decode_document, encode, encode_document
from cverecord.core.timestamp import LocalTimestamp, OffsetTimestamp, Timestamp, timestamp_from_datetime
from cverecord.models import Published, Record, Rejected

__all__ = [
    'decode', 'decode_document', 'encode', 'encode_document',
    'Record', 'Published', 'Rejected',
    'Timestamp', 'OffsetTimestamp', 'LocalTimestamp', 'timestamp_from_datetime',
    'CodecError', 'DecodeError', 'EncodeError', 'StructuralMismatch', 'MalformedTimestamp',
    'UnexpectedTagValue', 'AmbiguousOrInvalidRecord', 'UnrepresentableTimestamp',
]
