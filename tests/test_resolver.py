"""
Tests for decoding and encoding whole CVE Records.
"""

import dataclasses
import json
import pytest
from cverecord import decode, decode_document, encode, encode_document
from cverecord.core.errors import (
    AmbiguousOrInvalidRecord,
    EncodeError,
    MalformedTimestamp,
    StructuralMismatch,
    UnexpectedTagValue,
)
from cverecord.core.timestamp import LocalTimestamp, OffsetTimestamp
from cverecord.models import CreditType, DataVersion, LessThan, LessThanOrEqual, Published, Range, Rejected, Single


def test_decode_published(published_document):
    """A published document decodes into a typed Published record."""
    record = decode(json.dumps(published_document))

    assert isinstance(record, Published)
    assert record.id == "CVE-2023-12345"
    assert record.state == "PUBLISHED"
    assert record.data_version is DataVersion.V5_1
    assert record.common_metadata.serial == 1
    assert isinstance(record.common_metadata.date_reserved, LocalTimestamp)
    assert isinstance(record.common_metadata.date_published, OffsetTimestamp)

    cna = record.containers.cna
    assert cna.title == "Cross-site scripting in Example Widget"
    versions = cna.affected[0].versions
    assert isinstance(versions[0], Range) and versions[0].bound == LessThan("5.7")
    assert isinstance(versions[1], Single)
    assert isinstance(versions[2].bound, LessThanOrEqual)
    assert [credit.type for credit in cna.credits] == [CreditType.FINDER, CreditType.COORDINATOR]
    assert cna.metrics[0].cvss_v3_1["baseScore"] == 6.1
    assert len(record.containers.adp) == 1
    assert record.containers.adp[0].descriptions == ()


def test_decode_rejected(rejected_document):
    """A rejected document decodes into a typed Rejected record."""
    record = decode(json.dumps(rejected_document))

    assert isinstance(record, Rejected)
    assert record.id == "CVE-2021-0001"
    assert record.state == "REJECTED"
    assert isinstance(record.metadata.date_rejected, LocalTimestamp)
    assert record.containers.cna.replaced_by == ("CVE-2021-0002",)
    assert record.containers.cna.rejected_reasons[0].value.startswith("** REJECT **")


def test_decode_accepts_bytes(published_document):
    """UTF-8 bytes decode like text."""
    assert decode(json.dumps(published_document).encode("utf-8")) == decode(json.dumps(published_document))


@pytest.mark.parametrize("fixture", ["published_document", "rejected_document"])
def test_roundtrip(fixture, request):
    """Re-encoding a record and decoding it again gives an equal record."""
    record = decode_document(request.getfixturevalue(fixture))
    assert decode(encode(record)) == record
    assert decode(encode(record, indent=2)) == record


def test_encode_is_canonical(published_document):
    """Defaults and extension keys are left out, keys follow the record format."""
    document = encode_document(decode_document(published_document))

    assert list(document) == ["dataType", "dataVersion", "cveMetadata", "containers"]
    assert list(document["cveMetadata"])[:2] == ["state", "cveId"]
    assert "serial" not in document["cveMetadata"]
    assert document["cveMetadata"]["datePublished"] == "2023-02-01T12:30:00.000Z"
    assert document["cveMetadata"]["dateReserved"] == "2023-01-10T00:00:00.000"

    cna = document["containers"]["cna"]
    assert "x_generator" not in cna
    assert cna["credits"][0] == {"lang": "en", "value": "Jane Doe"}
    assert cna["credits"][1]["type"] == "coordinator"
    assert cna["metrics"][0]["scenarios"] == [{"lang": "en"}]
    assert "base64" not in cna["descriptions"][0]["supportingMedia"][0]
    assert cna["affected"][0]["versions"][0] == {
        "version": "unspecified",
        "lessThan": "5.7",
        "status": "affected",
        "versionType": "custom",
    }


def test_encode_is_idempotent(published_document):
    """Encoding a decoded canonical document reproduces it exactly."""
    first = encode(decode_document(published_document))
    assert encode(decode(first)) == first


def test_encode_keeps_non_ascii(published_document):
    """Non-ASCII text is written as-is."""
    published_document["containers"]["cna"]["credits"][0]["value"] = "Jürgen Müller"
    assert "Jürgen Müller" in encode(decode_document(published_document))


def test_state_tag_selects_rejected(published_document):
    """A published layout tagged REJECTED is read as a rejected record."""
    published_document["cveMetadata"]["state"] = "REJECTED"

    record = decode_document(published_document)

    assert isinstance(record, Rejected)
    assert record.containers.cna.rejected_reasons == ()


def test_neither_shape_reports_both_causes(published_document):
    """When both shapes fail, the error keeps both underlying errors."""
    published_document["cveMetadata"]["state"] = "REJECTED"
    del published_document["containers"]["cna"]["providerMetadata"]

    with pytest.raises(AmbiguousOrInvalidRecord) as exc_info:
        decode_document(published_document)

    error = exc_info.value
    assert isinstance(error.published_error, UnexpectedTagValue)
    assert isinstance(error.rejected_error, StructuralMismatch)
    assert "providerMetadata" in str(error.rejected_error)
    assert set(error.errors) == {"published", "rejected"}
    assert "unable to parse document as either published or rejected record" in str(error)


def test_malformed_timestamp_in_published(published_document):
    """A bad timestamp is reported for the published attempt."""
    published_document["cveMetadata"]["dateUpdated"] = "invalid-timestamp-foo"

    with pytest.raises(AmbiguousOrInvalidRecord) as exc_info:
        decode_document(published_document)

    published_error = exc_info.value.published_error
    assert isinstance(published_error, MalformedTimestamp)
    assert published_error.path == "$.cveMetadata.dateUpdated"
    assert isinstance(exc_info.value.rejected_error, UnexpectedTagValue)


@pytest.mark.parametrize("document", [{}, [], "CVE-2023-12345", None])
def test_not_a_record(document):
    """Documents that are not records at all fail both shapes."""
    with pytest.raises(AmbiguousOrInvalidRecord):
        decode_document(document)


def test_unknown_data_version(published_document):
    """Only the 5.x data versions are accepted."""
    published_document["dataVersion"] = "4.0"

    with pytest.raises(AmbiguousOrInvalidRecord) as exc_info:
        decode_document(published_document)
    assert "unknown variant '4.0'" in str(exc_info.value.published_error)


def test_invalid_json():
    """Text that is not JSON is a structural error."""
    with pytest.raises(StructuralMismatch) as exc_info:
        decode('{"dataType": "CVE_RECORD",')
    assert "invalid JSON" in str(exc_info.value)

    with pytest.raises(StructuralMismatch):
        decode(b"\xc3\x28")


def test_encode_non_record():
    """Only Published and Rejected records can be encoded."""
    with pytest.raises(EncodeError):
        encode({"dataType": "CVE_RECORD"})


def test_records_are_immutable(rejected_document):
    """Decoded records cannot be modified in place."""
    record = decode_document(rejected_document)
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.data_version = DataVersion.V5_1


def test_offset_with_seconds_fails_decode(published_document):
    """A record whose timestamps could not be re-encoded is refused up front."""
    published_document["cveMetadata"]["dateUpdated"] = "2024-08-02T10:15:20.123+01:00:30"

    with pytest.raises(AmbiguousOrInvalidRecord) as exc_info:
        decode_document(published_document)
    assert isinstance(exc_info.value.published_error, MalformedTimestamp)


def test_passthrough_values_are_detached(published_document):
    """Changing the input document after decoding leaves the record untouched."""
    record = decode_document(published_document)

    published_document["containers"]["cna"]["metrics"][0]["cvssV3_1"]["baseScore"] = 9.9
    published_document["containers"]["cna"]["source"]["discovery"] = "INTERNAL"

    cna = record.containers.cna
    assert cna.metrics[0].cvss_v3_1["baseScore"] == 6.1
    assert cna.source == {"discovery": "EXTERNAL"}

    document = encode_document(record)
    document["containers"]["cna"]["source"]["discovery"] = "UNKNOWN"
    assert record.containers.cna.source == {"discovery": "EXTERNAL"}


def test_adp_order_is_preserved(published_document):
    """ADP containers keep their document order through decode and encode."""
    org_ids = [
        "af854a3a-2127-422b-91ae-364da2661108",
        "134c704f-9b21-4f2e-91b3-4a467353bcc0",
        "0d8e4c1a-7f6b-4e2d-9a3c-5b1f2e8d7c60",
    ]
    template = published_document["containers"]["adp"][0]
    published_document["containers"]["adp"] = [
        dict(template, providerMetadata={"orgId": org_id, "shortName": f"ADP-{index}"})
        for index, org_id in enumerate(org_ids)
    ]

    record = decode_document(published_document)
    assert [str(adp.provider_metadata.org_id) for adp in record.containers.adp] == org_ids

    document = json.loads(encode(record))
    assert [adp["providerMetadata"]["orgId"] for adp in document["containers"]["adp"]] == org_ids
    assert decode(encode(record)) == record


def test_duplicate_keys_are_rejected(published_document):
    """A key given twice in one object is a structural error, not a silent last-wins."""
    text = json.dumps(published_document).replace(
        '"state": "PUBLISHED"', '"state": "PUBLISHED", "state": "REJECTED"'
    )

    with pytest.raises(StructuralMismatch) as exc_info:
        decode(text)
    assert "duplicate field 'state'" in str(exc_info.value)


def test_deeply_nested_document():
    """Nesting beyond the interpreter's recursion limit is a structural error."""
    depth = 100000
    text = '{"dataType": ' + '[' * depth + ']' * depth + '}'

    with pytest.raises(StructuralMismatch) as exc_info:
        decode(text)
    assert "nested too deeply" in str(exc_info.value)
