"""
Exception types raised by the CVE Record codec.

Every decode or encode failure surfaces as a subclass of CodecError, so a
caller walking a corpus can catch one type and still inspect the structured
attributes of the concrete failure.
"""

from typing import Any, Dict


def json_type(value: Any) -> str:
    """Name of the JSON type a decoded value came from."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


class CodecError(Exception):
    """Base exception for codec errors."""

    pass


class DecodeError(CodecError):
    """Base exception for failures turning a document into a record."""

    pass


class EncodeError(CodecError):
    """Base exception for failures turning a record into a document."""

    pass


class StructuralMismatch(DecodeError):
    """
    Raised when a document does not fit the expected structure.

    Covers missing required keys, values of the wrong JSON type, mutually
    exclusive keys present together and text that is not JSON at all.
    """

    def __init__(self, path: str, reason: str):
        """
        Initialize StructuralMismatch.

        Args:
            path: Location of the offending value (e.g. '$.cveMetadata.cveId')
            reason: What is wrong with it
        """
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class MalformedTimestamp(DecodeError):
    """Raised when a string is not an ISO 8601 date-time, with or without offset."""

    def __init__(self, text: str, path: str = "$"):
        self.text = text
        self.path = path
        super().__init__(f"{path}: unable to parse '{text}' as ISO 8601 timestamp")


class UnexpectedTagValue(DecodeError):
    """Raised when a constant-valued field holds anything but its literal."""

    def __init__(self, expected: str, actual: Any, path: str = "$"):
        self.expected = expected
        self.actual = actual
        self.path = path
        super().__init__(f"{path}: value must be: {expected} (was: {actual})")


class AmbiguousOrInvalidRecord(DecodeError):
    """
    Raised when a document matches neither the Published nor the Rejected shape.

    Both underlying errors are kept verbatim: neither attempt alone tells which
    shape the author intended.
    """

    def __init__(self, published_error: DecodeError, rejected_error: DecodeError):
        """
        Initialize AmbiguousOrInvalidRecord.

        Args:
            published_error: Why the document is not a Published record
            rejected_error: Why the document is not a Rejected record
        """
        self.published_error = published_error
        self.rejected_error = rejected_error
        super().__init__(
            "unable to parse document as either published or rejected record "
            f"(published: {published_error}; rejected: {rejected_error})"
        )

    @property
    def errors(self) -> Dict[str, DecodeError]:
        """Underlying errors keyed by the variant they were raised for."""
        return {"published": self.published_error, "rejected": self.rejected_error}


class UnrepresentableTimestamp(EncodeError):
    """Raised when a timestamp value cannot be written in the wire format."""

    def __init__(self, value: Any, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Failed to encode timestamp {value!r}: {reason}")
