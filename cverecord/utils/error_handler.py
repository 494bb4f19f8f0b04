"""
Error handling utilities for the CVE Record codec tools.

This module provides standardized error reporting for the commands and the
corpus processor. The codec itself raises typed errors and never recovers
from them; these helpers only format them.
"""

from typing import List

from cverecord.core.errors import AmbiguousOrInvalidRecord


class ErrorHandler:
    """Error handling utilities for the application."""

    @staticmethod
    def explain(error: Exception) -> List[str]:
        """
        Break a decode error into one line per cause.

        A document matching neither record shape yields one line per shape, so
        both causes can be reported.

        Args:
            error: Error raised by the codec

        Returns:
            Lines describing the error
        """
        if isinstance(error, AmbiguousOrInvalidRecord):
            return [f"{name.capitalize()}: {cause}" for name, cause in error.errors.items()]
        return [str(error)]
