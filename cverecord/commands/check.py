"""
Check command module for the CVE Record codec.

This module decodes a single record file and prints a short summary of it.
"""

from pathlib import Path

import typer

from cverecord.core.errors import CodecError
from cverecord.core.resolver import decode
from cverecord.core.timestamp import encode_timestamp
from cverecord.models import Published
from cverecord.utils.error_handler import ErrorHandler
from cverecord.utils.file_utils import read_document
from cverecord.utils.logger import Logger
from cverecord.utils.ui import print_table


def check(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="📄 CVE record JSON file"),
):
    """
    Decode one CVE record and print a summary of it.
    """
    try:
        record = decode(read_document(file))
    except CodecError as e:
        Logger.error(f"Failed to parse {file} as either published or rejected")
        for line in ErrorHandler.explain(e):
            Logger.error(line)
        raise typer.Exit(code=1)

    metadata = record.common_metadata
    rows = [
        ("CVE ID", metadata.id),
        ("State", record.state),
        ("Data version", record.data_version.value),
        ("Assigner", metadata.assigner_short_name or metadata.assigner_org_id),
        ("Serial", metadata.serial),
    ]
    if metadata.date_published is not None:
        rows.append(("Published", encode_timestamp(metadata.date_published)))
    if metadata.date_updated is not None:
        rows.append(("Updated", encode_timestamp(metadata.date_updated)))

    if isinstance(record, Published):
        cna = record.containers.cna
        rows.append(("Affected products", len(cna.affected)))
        rows.append(("Versions", sum(len(product.versions) for product in cna.affected)))
        rows.append(("References", len(cna.references)))
        rows.append(("ADP containers", len(record.containers.adp)))
    else:
        cna = record.containers.cna
        rows.append(("Rejected reasons", len(cna.rejected_reasons)))
        if cna.replaced_by:
            rows.append(("Replaced by", ", ".join(cna.replaced_by)))

    print_table(str(file.name), rows)
