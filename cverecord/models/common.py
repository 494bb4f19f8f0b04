"""
Data models shared by Published and Rejected CVE Records.

This module provides the record metadata, provider metadata and the leaf
vocabulary (products, descriptions, problem types, references) both record
shapes are built from.
"""

import uuid
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple

from cverecord.core.fields import (
    BOOLEAN,
    SERIAL,
    STRING,
    TIMESTAMP,
    UUID,
    Field,
    WireModel,
    model,
    sequence,
)
from cverecord.core.timestamp import Timestamp
from cverecord.core.versions import VERSION
from cverecord.models.version import STATUS, Status, VersionEntry

DEFAULT_SERIAL = 1


class DataType(Enum):
    RECORD = "CVE_RECORD"


class DataVersion(Enum):
    V5_0 = "5.0"
    V5_1 = "5.1"
    V5_2 = "5.2"


@dataclass(frozen=True)
class Metadata(WireModel):
    """Metadata every CVE Record carries, whatever its state."""

    id: str
    assigner_org_id: uuid.UUID
    serial: int = DEFAULT_SERIAL
    assigner_short_name: Optional[str] = None
    date_reserved: Optional[Timestamp] = None
    date_published: Optional[Timestamp] = None
    date_updated: Optional[Timestamp] = None

    FIELDS = (
        Field("cveId", "id", STRING),
        Field("assignerOrgId", "assigner_org_id", UUID),
        Field("serial", "serial", SERIAL, default=DEFAULT_SERIAL),
        Field("assignerShortName", "assigner_short_name", STRING, default=None),
        Field("dateReserved", "date_reserved", TIMESTAMP, default=None),
        Field("datePublished", "date_published", TIMESTAMP, default=None),
        Field("dateUpdated", "date_updated", TIMESTAMP, default=None),
    )


@dataclass(frozen=True)
class ProviderMetadata(WireModel):
    """Details related to the information container provider (CNA or ADP)."""

    org_id: uuid.UUID
    short_name: Optional[str] = None
    date_updated: Optional[Timestamp] = None

    FIELDS = (
        Field("orgId", "org_id", UUID),
        Field("shortName", "short_name", STRING, default=None),
        Field("dateUpdated", "date_updated", TIMESTAMP, default=None),
    )


@dataclass(frozen=True)
class SupportingMedia(WireModel):
    """Supporting media for a description (markdown, diagrams, ...)."""

    type: str
    value: str
    base64: bool = False

    FIELDS = (
        Field("type", "type", STRING),
        Field("value", "value", STRING),
        Field("base64", "base64", BOOLEAN, default=False),
    )


@dataclass(frozen=True)
class Description(WireModel):
    lang: str
    value: str
    supporting_media: Tuple[SupportingMedia, ...] = ()

    FIELDS = (
        Field("lang", "lang", STRING),
        Field("value", "value", STRING),
        Field("supportingMedia", "supporting_media", sequence(model(SupportingMedia)), default=()),
    )


@dataclass(frozen=True)
class Reference(WireModel):
    url: str
    name: Optional[str] = None
    tags: Tuple[str, ...] = ()

    FIELDS = (
        Field("url", "url", STRING),
        Field("name", "name", STRING, default=None),
        Field("tags", "tags", sequence(STRING), default=()),
    )


@dataclass(frozen=True)
class ProblemTypeDescription(WireModel):
    lang: str
    description: str
    cwe_id: Optional[str] = None
    type: Optional[str] = None
    references: Tuple[Reference, ...] = ()

    FIELDS = (
        Field("lang", "lang", STRING),
        Field("description", "description", STRING),
        Field("cweId", "cwe_id", STRING, default=None),
        Field("type", "type", STRING, default=None),
        Field("references", "references", sequence(model(Reference)), default=()),
    )


@dataclass(frozen=True)
class ProblemType(WireModel):
    descriptions: Tuple[ProblemTypeDescription, ...]

    FIELDS = (Field("descriptions", "descriptions", sequence(model(ProblemTypeDescription))),)


@dataclass(frozen=True)
class ProgramRoutine(WireModel):
    name: str

    FIELDS = (Field("name", "name", STRING),)


@dataclass(frozen=True)
class Product(WireModel):
    """
    An affected product.

    ``default_status`` applies to versions not listed in ``versions``; either
    may be omitted, but a well-formed record does not omit both.
    """

    vendor: Optional[str] = None
    product: Optional[str] = None
    collection_url: Optional[str] = None
    package_name: Optional[str] = None
    cpes: Tuple[str, ...] = ()
    modules: Tuple[str, ...] = ()
    program_files: Tuple[str, ...] = ()
    program_routines: Tuple[ProgramRoutine, ...] = ()
    platforms: Tuple[str, ...] = ()
    repository: Optional[str] = None
    default_status: Optional[Status] = None
    versions: Tuple[VersionEntry, ...] = ()

    FIELDS = (
        Field("vendor", "vendor", STRING, default=None),
        Field("product", "product", STRING, default=None),
        Field("collectionURL", "collection_url", STRING, default=None),
        Field("packageName", "package_name", STRING, default=None),
        Field("cpes", "cpes", sequence(STRING), default=()),
        Field("modules", "modules", sequence(STRING), default=()),
        Field("programFiles", "program_files", sequence(STRING), default=()),
        Field("programRoutines", "program_routines", sequence(model(ProgramRoutine)), default=()),
        Field("platforms", "platforms", sequence(STRING), default=()),
        Field("repo", "repository", STRING, default=None),
        Field("defaultStatus", "default_status", STATUS, default=None),
        Field("versions", "versions", sequence(VERSION), default=()),
    )


class RecordBase(WireModel):
    """Accessors shared by both record shapes."""

    STATE: ClassVar[str] = ""

    @property
    def common_metadata(self) -> Metadata:
        return self.metadata.common

    @property
    def id(self) -> str:
        return self.metadata.common.id

    @property
    def state(self) -> str:
        return self.STATE
