"""
File utilities for the CVE Record codec tools.

This module provides corpus discovery and file reading helpers. The codec
itself does no I/O; everything touching the file system lives here.
"""

import os
from pathlib import Path
from typing import Iterator, List


def iter_cve_files(base_dir: Path) -> Iterator[Path]:
    """
    Walk a CVE corpus and yield every record file.

    Record files are regular files named 'CVE-*.json'. Symbolic links to
    directories are followed.

    Args:
        base_dir: Root of the corpus (e.g. a cvelistV5 checkout)

    Yields:
        Paths of record files, in a stable order
    """
    for root, dirs, files in os.walk(base_dir, followlinks=True):
        dirs.sort()
        for name in sorted(files):
            if not (name.startswith("CVE-") and name.endswith(".json")):
                continue
            path = Path(root) / name
            if path.is_file():
                yield path


def find_cve_files(base_dir: Path) -> List[Path]:
    """List every record file below ``base_dir``."""
    return list(iter_cve_files(base_dir))


def read_document(file_path: Path) -> bytes:
    """
    Read a record file as raw bytes.

    The codec accepts UTF-8 bytes directly, so no decoding happens here.
    """
    with open(file_path, 'rb') as f:
        return f.read()


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted file size string
    """
    for unit in ['B', 'KB', 'MB', 'GB']:
        if size_bytes < 1024 or unit == 'GB':
            return f"{size_bytes:.2f} {unit}"
        size_bytes /= 1024
