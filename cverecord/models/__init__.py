"""
Data models for CVE Records.

This package provides the typed, immutable model of both record shapes and
the vocabulary they share.
"""

from typing import Union

from cverecord.models.common import (
    DataType,
    DataVersion,
    Description,
    Metadata,
    ProblemType,
    ProblemTypeDescription,
    Product,
    ProgramRoutine,
    ProviderMetadata,
    Reference,
    SupportingMedia,
)
from cverecord.models.version import Change, LessThan, LessThanOrEqual, Range, Single, Status, VersionEntry
from cverecord.models.published import (
    AdpContainer,
    CnaContainer,
    Containers,
    Credit,
    CreditType,
    Impact,
    Metric,
    OtherMetric,
    Published,
    PublishedMetadata,
    Scenario,
    TaxonomyMapping,
    TaxonomyRelation,
    Timeline,
)
from cverecord.models.rejected import Rejected, RejectedCnaContainer, RejectedContainers, RejectedMetadata

Record = Union[Published, Rejected]

__all__ = [
    'Record', 'Published', 'Rejected',
    'DataType', 'DataVersion', 'Metadata', 'PublishedMetadata', 'RejectedMetadata',
    'ProviderMetadata', 'Containers', 'CnaContainer', 'AdpContainer',
    'RejectedContainers', 'RejectedCnaContainer',
    'Description', 'SupportingMedia', 'ProblemType', 'ProblemTypeDescription',
    'Reference', 'Product', 'ProgramRoutine',
    'Status', 'Single', 'Range', 'Change', 'LessThan', 'LessThanOrEqual', 'VersionEntry',
    'Impact', 'Metric', 'OtherMetric', 'Scenario', 'Timeline', 'Credit', 'CreditType',
    'TaxonomyMapping', 'TaxonomyRelation',
]
