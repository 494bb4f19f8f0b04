"""
Utility functions for the CVE Record codec tools.

This package provides logging, error reporting, file discovery and user
interface components.
"""

from cverecord.utils.logger import Logger
from cverecord.utils.file_utils import find_cve_files, iter_cve_files, read_document
from cverecord.utils.error_handler import ErrorHandler
from cverecord.utils.ui import ProgressUI, print_table

__all__ = [
    'Logger',
    'find_cve_files',
    'iter_cve_files',
    'read_document',
    'ErrorHandler',
    'ProgressUI',
    'print_table'
]
