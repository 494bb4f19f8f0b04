"""
Walk command module for the CVE Record codec.

This module decodes every record of a CVE corpus (e.g. a cvelistV5 checkout)
and reports the documents that fail to parse.
"""

import json
from pathlib import Path
from typing import Optional

import typer

from cverecord.config import config
from cverecord.core.processor import CorpusProcessor
from cverecord.utils.logger import Logger


def walk(
    base_dir: Optional[Path] = typer.Argument(None, help="📂 CVE corpus directory (defaults to $CVE_BASE_DIR)"),
    jobs: int = typer.Option(config.jobs, "--jobs", "-j", help="⚙️ Number of worker processes"),
    chunksize: int = typer.Option(config.chunksize, help="📦 Files handed to a worker at a time"),
    roundtrip: bool = typer.Option(False, help="🔄 Also check every record survives a re-encode"),
    report: Optional[Path] = typer.Option(None, help="📊 Write a JSON report of the run to this file"),
    progress: bool = typer.Option(True, help="Show the progress display"),
    log_dir: Optional[Path] = typer.Option(config.log_dir, help="📝 Directory for the log file"),
    verbose: bool = typer.Option(False, help="Verbose output."),
):
    """
    Decode every CVE-*.json record below a directory.

    Exits with status 1 if any document fails to parse as either a published or
    a rejected record.
    """
    Logger.set_verbose(verbose)
    if log_file := Logger.set_log_file(log_dir):
        Logger.info(f"Logging to {log_file}")

    base_dir = base_dir or config.base_dir
    if base_dir is None:
        Logger.error("Pass in path to the CVE repository data (argument or CVE_BASE_DIR)")
        raise typer.Exit(code=1)
    if not base_dir.is_dir():
        Logger.error(f"CVE directory not found: {base_dir}")
        raise typer.Exit(code=1)

    processor = CorpusProcessor(
        jobs=jobs,
        chunksize=chunksize,
        roundtrip=roundtrip,
        sample_every=config.sample_every,
        show_progress=progress,
    )
    summary = processor.process(base_dir)

    if report:
        with open(report, 'w', encoding='utf-8') as f:
            json.dump(summary.to_dict(), f, indent=2)
        Logger.info(f"Report saved to: {report}")

    if summary.failed:
        raise typer.Exit(code=1)

    Logger.success(f"All {summary.total} documents parsed")
