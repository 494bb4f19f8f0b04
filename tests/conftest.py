"""
Shared fixtures: realistic published and rejected CVE Record documents.
"""

import copy
import json
import pytest

ASSIGNER = "8254265b-2729-46b6-b9e3-3dfca2d5bfca"
ADP_ORG = "af854a3a-2127-422b-91ae-364da2661108"

PUBLISHED_DOCUMENT = {
    "dataType": "CVE_RECORD",
    "dataVersion": "5.1",
    "cveMetadata": {
        "cveId": "CVE-2023-12345",
        "assignerOrgId": ASSIGNER,
        "state": "PUBLISHED",
        "assignerShortName": "mitre",
        "dateReserved": "2023-01-10T00:00:00",
        "datePublished": "2023-02-01T12:30:00.000Z",
        "dateUpdated": "2024-08-02T10:15:20.123Z",
    },
    "containers": {
        "cna": {
            "providerMetadata": {
                "orgId": ASSIGNER,
                "shortName": "mitre",
                "dateUpdated": "2023-02-01T12:30:00.000Z",
            },
            "title": "Cross-site scripting in Example Widget",
            "descriptions": [
                {
                    "lang": "en",
                    "value": "Example Widget before 5.7 allows XSS via the name parameter.",
                    "supportingMedia": [
                        {"type": "text/html", "value": "<p>Example Widget before 5.7 allows XSS.</p>", "base64": False}
                    ],
                }
            ],
            "affected": [
                {
                    "vendor": "Example",
                    "product": "Widget",
                    "defaultStatus": "unaffected",
                    "platforms": ["Linux"],
                    "versions": [
                        {"version": "unspecified", "lessThan": "5.7", "status": "affected", "versionType": "custom"},
                        {"version": "6.0", "status": "affected"},
                        {
                            "version": "7.0",
                            "lessThanOrEqual": "7.*",
                            "status": "affected",
                            "versionType": "semver",
                            "changes": [
                                {"at": "7.2", "status": "unaffected"},
                                {"at": "7.1", "status": "affected"},
                            ],
                        },
                    ],
                }
            ],
            "problemTypes": [
                {
                    "descriptions": [
                        {"lang": "en", "description": "CWE-79 Cross-site Scripting", "cweId": "CWE-79", "type": "CWE"}
                    ]
                }
            ],
            "references": [
                {"url": "https://example.com/advisory/2023-01", "name": "Advisory", "tags": ["vendor-advisory"]}
            ],
            "metrics": [
                {
                    "format": "CVSS",
                    "scenarios": [{"lang": "en", "value": "GENERAL"}],
                    "cvssV3_1": {
                        "version": "3.1",
                        "baseScore": 6.1,
                        "baseSeverity": "MEDIUM",
                        "vectorString": "CVSS:3.1/AV:N/AC:L/PR:N/UI:R/S:C/C:L/I:L/A:N",
                    },
                }
            ],
            "credits": [
                {"lang": "en", "value": "Jane Doe", "type": "finder"},
                {"lang": "en", "value": "Example CERT", "type": "coordinator"},
            ],
            "timeline": [
                {"time": "2023-01-15T00:00:00.000Z", "lang": "en", "value": "Reported to vendor"}
            ],
            "source": {"discovery": "EXTERNAL"},
            "x_generator": {"engine": "Vulnogram 0.1.0-dev"},
        },
        "adp": [
            {
                "providerMetadata": {
                    "orgId": ADP_ORG,
                    "shortName": "CVE",
                    "dateUpdated": "2024-08-02T10:15:20.123Z",
                },
                "title": "CVE Program Container",
                "references": [
                    {"url": "https://example.com/advisory/2023-01", "tags": ["vendor-advisory", "x_transferred"]}
                ],
            }
        ],
    },
}

REJECTED_DOCUMENT = {
    "dataType": "CVE_RECORD",
    "dataVersion": "5.0",
    "cveMetadata": {
        "cveId": "CVE-2021-0001",
        "assignerOrgId": ASSIGNER,
        "state": "REJECTED",
        "serial": 1,
        "assignerShortName": "mitre",
        "dateReserved": "2020-11-01T00:00:00",
        "dateRejected": "2021-03-01T00:00:00",
        "dateUpdated": "2021-03-01T00:00:00",
    },
    "containers": {
        "cna": {
            "providerMetadata": {"orgId": ASSIGNER, "shortName": "mitre", "dateUpdated": "2021-03-01T00:00:00"},
            "rejectedReasons": [
                {"lang": "en", "value": "** REJECT ** DO NOT USE THIS CANDIDATE NUMBER."}
            ],
            "replacedBy": ["CVE-2021-0002"],
        }
    },
}


@pytest.fixture
def published_document():
    """A published record document, safe to modify."""
    return copy.deepcopy(PUBLISHED_DOCUMENT)


@pytest.fixture
def rejected_document():
    """A rejected record document, safe to modify."""
    return copy.deepcopy(REJECTED_DOCUMENT)


@pytest.fixture
def corpus(tmp_path):
    """
    A small corpus laid out like cvelistV5: one published, one rejected and
    one broken record, plus a file that is not a record.
    """
    base = tmp_path / "cves"
    files = {
        base / "2023" / "12xxx" / "CVE-2023-12345.json": json.dumps(PUBLISHED_DOCUMENT),
        base / "2021" / "0xxx" / "CVE-2021-0001.json": json.dumps(REJECTED_DOCUMENT),
        base / "2021" / "0xxx" / "CVE-2021-0003.json": json.dumps({"dataType": "CVE_RECORD"}),
        base / "delta.json": json.dumps({"new": []}),
    }
    for path, content in files.items():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    return base
