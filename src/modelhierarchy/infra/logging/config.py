from __future__ import annotations

"""
Logging Configuration Model.

Describes how the logging subsystem should be initialized: severity,
destinations, rotation policy and record formats.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

LEVELS: Dict[str, int] = {
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
    Immutable logging setup.

    Attributes:
        level: Minimum severity captured by every handler.
        console: Emit records to stderr.
        log_file: Optional path of a rotating log file.
        max_bytes: Size threshold triggering a rollover.
        backup_count: Number of rotated files to keep.
        console_fmt: Record format for stderr.
        file_fmt: Record format for the log file.
        datefmt: Timestamp format for the log file.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 3

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"

    def level_number(self) -> int:
        """Numeric level; unknown names fall back to INFO."""
        if not self.level:
            return logging.INFO
        return LEVELS.get(str(self.level).strip().upper(), logging.INFO)
