"""
Data model for Published CVE Records.

A published record carries the state tag 'PUBLISHED', the common metadata, a
CNA container with the vulnerability description and any number of ADP
containers with supplementary information.
"""

import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from cverecord.core.fields import (
    JSON,
    STRING,
    TIMESTAMP,
    UUID,
    Field,
    Flatten,
    WireModel,
    enum_codec,
    model,
    sequence,
)
from cverecord.core.tags import ConstantTag
from cverecord.core.timestamp import Timestamp
from cverecord.models.common import (
    DataType,
    DataVersion,
    Description,
    Metadata,
    ProblemType,
    Product,
    ProviderMetadata,
    RecordBase,
    Reference,
)

STATE_VALUE = "PUBLISHED"
DEFAULT_SCENARIO = "GENERAL"


@dataclass(frozen=True)
class PublishedMetadata(WireModel):
    common: Metadata

    FIELDS = (
        ConstantTag("state", STATE_VALUE),
        Flatten("common", Metadata),
    )


@dataclass(frozen=True)
class Impact(WireModel):
    """An impact of the vulnerability, optionally tied to a CAPEC entry."""

    capec_id: Optional[str] = None
    descriptions: Tuple[Description, ...] = ()

    FIELDS = (
        Field("capecId", "capec_id", STRING, default=None),
        Field("descriptions", "descriptions", sequence(model(Description)), default=()),
    )


@dataclass(frozen=True)
class OtherMetric(WireModel):
    """A non-standard impact description, prose or JSON block."""

    type: str
    content: Any

    FIELDS = (
        Field("type", "type", STRING),
        Field("content", "content", JSON),
    )


@dataclass(frozen=True)
class Scenario(WireModel):
    """
    The scenario a metric applies to.

    When none is given the metric applies generally, hence the 'GENERAL'
    default.
    """

    lang: str
    value: str = DEFAULT_SCENARIO

    FIELDS = (
        Field("lang", "lang", STRING),
        Field("value", "value", STRING, default=DEFAULT_SCENARIO),
    )


@dataclass(frozen=True)
class Metric(WireModel):
    """
    An impact score with attribution.

    Scoring payloads are not interpreted; they are carried as plain JSON.
    """

    format: Optional[str] = None
    scenarios: Tuple[Scenario, ...] = ()
    cvss_v4_0: Optional[Any] = None
    cvss_v3_1: Optional[Any] = None
    cvss_v3_0: Optional[Any] = None
    cvss_v2_0: Optional[Any] = None
    other: Optional[OtherMetric] = None

    FIELDS = (
        Field("format", "format", STRING, default=None),
        Field("scenarios", "scenarios", sequence(model(Scenario)), default=()),
        Field("cvssV4_0", "cvss_v4_0", JSON, default=None),
        Field("cvssV3_1", "cvss_v3_1", JSON, default=None),
        Field("cvssV3_0", "cvss_v3_0", JSON, default=None),
        Field("cvssV2_0", "cvss_v2_0", JSON, default=None),
        Field("other", "other", model(OtherMetric), default=None),
    )


@dataclass(frozen=True)
class Timeline(WireModel):
    """A significant event about the vulnerability or the record."""

    time: Timestamp
    lang: str
    value: str

    FIELDS = (
        Field("time", "time", TIMESTAMP),
        Field("lang", "lang", STRING),
        Field("value", "value", STRING),
    )


class CreditType(Enum):
    """Type or role of the entity being credited."""

    FINDER = "finder"
    REPORTER = "reporter"
    ANALYST = "analyst"
    COORDINATOR = "coordinator"
    REMEDIATION_DEVELOPER = "remediation developer"
    REMEDIATION_REVIEWER = "remediation reviewer"
    REMEDIATION_VERIFIER = "remediation verifier"
    TOOL = "tool"
    SPONSOR = "sponsor"
    OTHER = "other"


@dataclass(frozen=True)
class Credit(WireModel):
    lang: str
    value: str
    user: Optional[uuid.UUID] = None
    type: CreditType = CreditType.FINDER

    FIELDS = (
        Field("lang", "lang", STRING),
        Field("value", "value", STRING),
        Field("user", "user", UUID, default=None),
        Field("type", "type", enum_codec(CreditType), default=CreditType.FINDER),
    )


@dataclass(frozen=True)
class TaxonomyRelation(WireModel):
    id: str
    name: str
    value: str

    FIELDS = (
        Field("taxonomyId", "id", STRING),
        Field("relationshipName", "name", STRING),
        Field("relationshipValue", "value", STRING),
    )


@dataclass(frozen=True)
class TaxonomyMapping(WireModel):
    name: str
    relations: Tuple[TaxonomyRelation, ...]
    version: Optional[str] = None

    FIELDS = (
        Field("taxonomyName", "name", STRING),
        Field("taxonomyVersion", "version", STRING, default=None),
        Field("taxonomyRelations", "relations", sequence(model(TaxonomyRelation))),
    )


def _content_fields(required: bool) -> Tuple[Field, ...]:
    """
    Fields following the provider block in CNA and ADP containers.

    A CNA container must state descriptions and affected products; an ADP
    container may leave them out.
    """
    content_default = {} if required else {"default": ()}
    return (
        Field("title", "title", STRING, default=None),
        Field("descriptions", "descriptions", sequence(model(Description)), **content_default),
        Field("affected", "affected", sequence(model(Product)), **content_default),
        Field("problemTypes", "problem_types", sequence(model(ProblemType)), default=()),
        Field("references", "references", sequence(model(Reference)), default=()),
        Field("impacts", "impacts", sequence(model(Impact)), default=()),
        Field("metrics", "metrics", sequence(model(Metric)), default=()),
        Field("configurations", "configurations", sequence(model(Description)), default=()),
        Field("workarounds", "workarounds", sequence(model(Description)), default=()),
        Field("solutions", "solutions", sequence(model(Description)), default=()),
        Field("exploits", "exploits", sequence(model(Description)), default=()),
        Field("timeline", "timeline", sequence(model(Timeline)), default=()),
        Field("credits", "credits", sequence(model(Credit)), default=()),
        Field("source", "source", JSON, default=None),
        Field("tags", "tags", sequence(STRING), default=()),
        Field("taxonomyMappings", "taxonomy_mappings", sequence(model(TaxonomyMapping)), default=()),
    )


@dataclass(frozen=True)
class CnaContainer(WireModel):
    """The vulnerability information provided by the CNA."""

    provider_metadata: ProviderMetadata
    descriptions: Tuple[Description, ...]
    affected: Tuple[Product, ...]
    date_assigned: Optional[Timestamp] = None
    date_public: Optional[Timestamp] = None
    title: Optional[str] = None
    problem_types: Tuple[ProblemType, ...] = ()
    references: Tuple[Reference, ...] = ()
    impacts: Tuple[Impact, ...] = ()
    metrics: Tuple[Metric, ...] = ()
    configurations: Tuple[Description, ...] = ()
    workarounds: Tuple[Description, ...] = ()
    solutions: Tuple[Description, ...] = ()
    exploits: Tuple[Description, ...] = ()
    timeline: Tuple[Timeline, ...] = ()
    credits: Tuple[Credit, ...] = ()
    source: Optional[Any] = None
    tags: Tuple[str, ...] = ()
    taxonomy_mappings: Tuple[TaxonomyMapping, ...] = ()

    FIELDS = (
        Field("providerMetadata", "provider_metadata", model(ProviderMetadata)),
        Field("dateAssigned", "date_assigned", TIMESTAMP, default=None),
        Field("datePublic", "date_public", TIMESTAMP, default=None),
    ) + _content_fields(required=True)


@dataclass(frozen=True)
class AdpContainer(WireModel):
    """Supplementary information provided by an ADP."""

    provider_metadata: ProviderMetadata
    date_public: Optional[Timestamp] = None
    title: Optional[str] = None
    descriptions: Tuple[Description, ...] = ()
    affected: Tuple[Product, ...] = ()
    problem_types: Tuple[ProblemType, ...] = ()
    references: Tuple[Reference, ...] = ()
    impacts: Tuple[Impact, ...] = ()
    metrics: Tuple[Metric, ...] = ()
    configurations: Tuple[Description, ...] = ()
    workarounds: Tuple[Description, ...] = ()
    solutions: Tuple[Description, ...] = ()
    exploits: Tuple[Description, ...] = ()
    timeline: Tuple[Timeline, ...] = ()
    credits: Tuple[Credit, ...] = ()
    source: Optional[Any] = None
    tags: Tuple[str, ...] = ()
    taxonomy_mappings: Tuple[TaxonomyMapping, ...] = ()

    FIELDS = (
        Field("providerMetadata", "provider_metadata", model(ProviderMetadata)),
        Field("datePublic", "date_public", TIMESTAMP, default=None),
    ) + _content_fields(required=False)


@dataclass(frozen=True)
class Containers(WireModel):
    cna: CnaContainer
    adp: Tuple[AdpContainer, ...] = ()

    FIELDS = (
        Field("cna", "cna", model(CnaContainer)),
        Field("adp", "adp", sequence(model(AdpContainer)), default=()),
    )


@dataclass(frozen=True)
class Published(RecordBase):
    """A published CVE Record."""

    data_type: DataType
    data_version: DataVersion
    metadata: PublishedMetadata
    containers: Containers

    STATE = STATE_VALUE

    FIELDS = (
        Field("dataType", "data_type", enum_codec(DataType)),
        Field("dataVersion", "data_version", enum_codec(DataVersion)),
        Field("cveMetadata", "metadata", model(PublishedMetadata)),
        Field("containers", "containers", model(Containers)),
    )
