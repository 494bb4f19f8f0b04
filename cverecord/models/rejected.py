"""
Data model for Rejected CVE Records.

A rejected record carries the state tag 'REJECTED', the common metadata and a
CNA container holding the reasons for rejection and, where applicable, the
CVE IDs that replaced it.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from cverecord.core.fields import STRING, TIMESTAMP, Field, Flatten, WireModel, enum_codec, model, sequence
from cverecord.core.tags import ConstantTag
from cverecord.core.timestamp import Timestamp
from cverecord.models.common import DataType, DataVersion, Description, Metadata, ProviderMetadata, RecordBase

STATE_VALUE = "REJECTED"


@dataclass(frozen=True)
class RejectedMetadata(WireModel):
    common: Metadata
    date_rejected: Optional[Timestamp] = None

    FIELDS = (
        ConstantTag("state", STATE_VALUE),
        Flatten("common", Metadata),
        Field("dateRejected", "date_rejected", TIMESTAMP, default=None),
    )


@dataclass(frozen=True)
class RejectedCnaContainer(WireModel):
    provider_metadata: ProviderMetadata
    rejected_reasons: Tuple[Description, ...] = ()
    replaced_by: Tuple[str, ...] = ()

    FIELDS = (
        Field("providerMetadata", "provider_metadata", model(ProviderMetadata)),
        Field("rejectedReasons", "rejected_reasons", sequence(model(Description)), default=()),
        Field("replacedBy", "replaced_by", sequence(STRING), default=()),
    )


@dataclass(frozen=True)
class RejectedContainers(WireModel):
    cna: RejectedCnaContainer

    FIELDS = (Field("cna", "cna", model(RejectedCnaContainer)),)


@dataclass(frozen=True)
class Rejected(RecordBase):
    """A rejected CVE Record."""

    data_type: DataType
    data_version: DataVersion
    metadata: RejectedMetadata
    containers: RejectedContainers

    STATE = STATE_VALUE

    FIELDS = (
        Field("dataType", "data_type", enum_codec(DataType)),
        Field("dataVersion", "data_version", enum_codec(DataVersion)),
        Field("cveMetadata", "metadata", model(RejectedMetadata)),
        Field("containers", "containers", model(RejectedContainers)),
    )
