"""
Corpus processor for the CVE Record codec.

This module walks a directory of CVE Record files, decodes each document
(optionally checking that it survives a re-encode), and reports which files
failed and why. Documents are independent, so they are decoded in a process
pool when more than one job is requested.
"""

import time
from collections import Counter
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from itertools import repeat
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from cverecord.core.errors import CodecError
from cverecord.core.resolver import decode, encode
from cverecord.utils.error_handler import ErrorHandler
from cverecord.utils.file_utils import find_cve_files, format_file_size, read_document
from cverecord.utils.logger import Logger
from cverecord.utils.ui import ProgressUI


@dataclass
class FileResult:
    """Outcome of decoding one record file."""

    path: str
    size: int = 0
    cve_id: Optional[str] = None
    state: Optional[str] = None
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


@dataclass
class WalkSummary:
    """Totals of a corpus walk."""

    total: int = 0
    total_bytes: int = 0
    states: Counter = field(default_factory=Counter)
    failures: List[FileResult] = field(default_factory=list)
    elapsed: float = 0.0

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def succeeded(self) -> int:
        return self.total - self.failed

    def to_dict(self) -> Dict[str, object]:
        return {
            "total": self.total,
            "succeeded": self.succeeded,
            "failed": self.failed,
            "states": dict(self.states),
            "failures": {result.path: result.errors for result in self.failures},
        }


def process_file(path: Path, roundtrip: bool = False) -> FileResult:
    """
    Decode one record file.

    Args:
        path: Record file
        roundtrip: Also re-encode the record and require an equal decode

    Returns:
        FileResult with the record's id and state, or the reasons it failed
    """
    result = FileResult(path=str(path))
    try:
        content = read_document(path)
    except OSError as e:
        result.errors.append(f"Failed to read file: {e}")
        return result

    result.size = len(content)
    try:
        record = decode(content)
        if roundtrip and decode(encode(record)) != record:
            result.errors.append("re-encoded record does not decode to the same record")
    except CodecError as e:
        result.errors.extend(ErrorHandler.explain(e))
        return result
    except RecursionError:
        result.errors.append("document nested too deeply")
        return result

    result.cve_id = record.id
    result.state = record.state
    return result


class CorpusProcessor:
    """Decodes every record file of a corpus and collects the results."""

    def __init__(self,
                 jobs: int = 1,
                 chunksize: int = 200,
                 roundtrip: bool = False,
                 sample_every: int = 100,
                 show_progress: bool = True):
        """
        Initialize the processor.

        Args:
            jobs: Number of worker processes, 1 decodes in-process
            chunksize: Files handed to a worker at a time
            roundtrip: Check every record survives a re-encode
            sample_every: Log every Nth decoded record (0 disables)
            show_progress: Show the live progress display
        """
        self.jobs = max(1, jobs)
        self.chunksize = max(1, chunksize)
        self.roundtrip = roundtrip
        self.sample_every = sample_every
        self.show_progress = show_progress

    def process(self, base_dir: Path) -> WalkSummary:
        """
        Decode all 'CVE-*.json' files below ``base_dir``.

        Args:
            base_dir: Root of the corpus

        Returns:
            WalkSummary of the run
        """
        start_time = time.time()
        Logger.info(f"Searching for CVE JSON files in {base_dir}")
        files = find_cve_files(Path(base_dir))
        if not files:
            Logger.warning(f"No CVE JSON files found in {base_dir}")
            return WalkSummary()

        Logger.info(f"Found {len(files)} CVE JSON files to process")

        if self.jobs > 1:
            with ProcessPoolExecutor(max_workers=self.jobs) as executor:
                results = executor.map(process_file, files, repeat(self.roundtrip), chunksize=self.chunksize)
                summary = self._collect(results, len(files))
        else:
            summary = self._collect((process_file(path, self.roundtrip) for path in files), len(files))

        summary.elapsed = time.time() - start_time
        Logger.info(f"Successfully parsed {summary.succeeded} documents "
                    f"({format_file_size(summary.total_bytes)} in {summary.elapsed:.2f} seconds)")
        if summary.failed:
            Logger.error(f"{summary.failed} documents failed to parse")
        return summary

    def _collect(self, results: Iterable[FileResult], total: int) -> WalkSummary:
        summary = WalkSummary()

        with ProgressUI(total, "Decoding CVE records", enabled=self.show_progress) as ui:
            for result in results:
                summary.total += 1
                summary.total_bytes += result.size
                ui.record(Path(result.path).name, result.state)

                if not result.ok:
                    summary.failures.append(result)
                    for line in result.errors:
                        ui.log_failure(f"{line} @ {result.path}")
                    continue

                summary.states[result.state] += 1
                if self.sample_every and (summary.succeeded - 1) % self.sample_every == 0:
                    Logger.debug(f"{result.cve_id}: {result.state} ({result.path})")

        return summary
