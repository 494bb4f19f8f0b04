"""
Logging utilities for the CVE Record codec.

This module provides a static Logger that writes to the 'cverecord' logging
logger and prints user-facing messages through a rich console. File logging is
switched on with ``Logger.set_log_file``.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.markup import escape

# Create logger
logger = logging.getLogger("cverecord")
logger.setLevel(logging.DEBUG)

formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')

# Rich console for pretty output, on stderr so encoded records can go to stdout
console = Console(stderr=True)


class Logger:
    """Static logger class for application-wide logging."""

    _verbose = False

    @staticmethod
    def debug(message: str):
        """
        Log a debug message (file only, console too in verbose mode).

        Args:
            message: Debug message
        """
        logger.debug(message)
        if Logger._verbose:
            console.print(f"[cyan]DEBUG:[/cyan] {escape(message)}", highlight=False)

    @staticmethod
    def info(message: str):
        logger.info(message)
        console.print(f"[blue]INFO:[/blue] {escape(message)}", highlight=False)

    @staticmethod
    def warning(message: str):
        logger.warning(message)
        console.print(f"[yellow]WARNING:[/yellow] {escape(message)}", highlight=False)

    @staticmethod
    def error(message: str):
        logger.error(message)
        console.print(f"[red]ERROR:[/red] {escape(message)}", highlight=False)

    @staticmethod
    def success(message: str):
        logger.info(f"SUCCESS: {message}")
        console.print(f"[green]SUCCESS:[/green] {escape(message)}", highlight=False)

    @staticmethod
    def set_verbose(verbose: bool):
        """
        Set verbose logging mode.

        Args:
            verbose: Whether debug messages are shown on the console
        """
        Logger._verbose = verbose
        if verbose:
            console.print("[yellow]Verbose logging enabled[/yellow]")

    @staticmethod
    def set_log_file(log_dir: Optional[Path]) -> Optional[Path]:
        """
        Also write all log records to a timestamped file.

        Args:
            log_dir: Directory for the log file, nothing happens if None

        Returns:
            Path of the log file, or None
        """
        if log_dir is None:
            return None

        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / f"cverecord_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        return log_file
