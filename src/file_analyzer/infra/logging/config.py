from __future__ import annotations

"""
Logging Configuration Models.

Declares the settings used to initialize the logging subsystem and the
mapping of level names to logging constants.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable settings for the logging subsystem.

    Attributes:
        level: Minimum severity level to capture.
        console: Emit records on stderr.
        log_file: Optional path of a rotating log file.
        max_bytes: Size of a log segment before rotation.
        backup_count: Number of rotated segments kept.
        console_fmt: Format of stderr lines.
        file_fmt: Format of log file lines.
        datefmt: Timestamp format of log file lines.
    """
    level: str = "WARNING"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 2 * 1024 * 1024
    backup_count: int = 3

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(threadName)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def for_cli(cls, debug: bool = False, verbose: bool = False,
                log_file: Optional[str] = None) -> "LoggingConfig":
        """
        Build the CLI profile: stderr only, quiet unless asked otherwise.

        Traversal warnings are part of the result, so the console stays at
        WARNING by default to keep stdout output clean for piping.
        """
        if debug:
            level = "DEBUG"
        elif verbose:
            level = "INFO"
        else:
            level = "WARNING"
        return cls(level=level, console=True, log_file=log_file)
