"""
Roundtrip command module for the CVE Record codec.

This module decodes a record file and writes it back in canonical form:
default values omitted, keys in the order of the record format.
"""

from pathlib import Path
from typing import Optional

import typer

from cverecord.core.errors import CodecError
from cverecord.core.resolver import decode, encode
from cverecord.utils.error_handler import ErrorHandler
from cverecord.utils.file_utils import read_document
from cverecord.utils.logger import Logger


def roundtrip(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="📄 CVE record JSON file"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="💾 Write the canonical JSON here instead of stdout"),
    indent: int = typer.Option(2, help="Indentation of the output, 0 for compact"),
):
    """
    Re-encode one CVE record canonically and verify it decodes to the same record.
    """
    try:
        record = decode(read_document(file))
        text = encode(record, indent=indent or None)
        if decode(text) != record:
            Logger.error(f"{file}: re-encoded record does not decode to the same record")
            raise typer.Exit(code=1)
    except CodecError as e:
        for line in ErrorHandler.explain(e):
            Logger.error(line)
        raise typer.Exit(code=1)

    if output:
        with open(output, 'w', encoding='utf-8') as f:
            f.write(text + "\n")
        Logger.success(f"Canonical record saved to: {output}")
    else:
        typer.echo(text)
