"""
Version statements of an affected product.

A version entry is either a single version with its status, or a range from a
start version up to an exclusive or inclusive upper bound, optionally refined
by status changes inside the range.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Tuple, Union

from cverecord.core.fields import STRING, Field, WireModel, enum_codec


class Status(Enum):
    AFFECTED = "affected"
    UNAFFECTED = "unaffected"
    UNKNOWN = "unknown"


STATUS = enum_codec(Status)


@dataclass(frozen=True)
class Change(WireModel):
    """A status change taking place at a version inside a range."""

    at: str
    status: Status

    FIELDS = (
        Field("at", "at", STRING),
        Field("status", "status", STATUS),
    )


@dataclass(frozen=True)
class LessThan:
    """Exclusive upper bound: the least version NOT in the range. May end in '*'."""

    value: str

    KEY = "lessThan"


@dataclass(frozen=True)
class LessThanOrEqual:
    """Inclusive upper bound: the greatest version in the range."""

    value: str

    KEY = "lessThanOrEqual"


UpperBound = Union[LessThan, LessThanOrEqual]

UPPER_BOUNDS = (LessThan, LessThanOrEqual)


@dataclass(frozen=True)
class Single:
    """One version and its status."""

    version: str
    status: Status
    version_type: Optional[str] = None


@dataclass(frozen=True)
class Range:
    """
    A range of versions.

    ``changes`` is kept in document order. It should be sorted by ``at``
    according to ``version_type`` but nothing guarantees it; use
    ``sorted_changes`` before relying on the order.
    """

    version: str
    bound: UpperBound
    status: Status
    version_type: str
    changes: Tuple[Change, ...] = ()

    def sorted_changes(self, key: Callable[[str], Any]) -> Tuple[Change, ...]:
        """
        Return the changes ordered by position.

        Args:
            key: Sort key for a version string under this range's version_type

        Returns:
            Changes in increasing version order
        """
        return tuple(sorted(self.changes, key=lambda change: key(change.at)))


VersionEntry = Union[Single, Range]
