from __future__ import annotations

"""
Logging Handler Factories.

Builds the concrete handlers fed by the queue listener and tags them so the
package can later tell its own handlers apart from ones installed by host
applications or test runners.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from modelhierarchy.infra.fs import ensure_parent_dir

HANDLER_TAG_ATTR: str = "_modelhierarchy_handler"


def tag_handler(handler: logging.Handler) -> logging.Handler:
    """Mark a handler as owned by this package and return it."""
    setattr(handler, HANDLER_TAG_ATTR, True)
    return handler


def is_own_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, HANDLER_TAG_ATTR, False))


def create_console_handler(level: int, formatter: logging.Formatter) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return tag_handler(handler)


def create_rotating_file_handler(
        log_file: str,
        level: int,
        formatter: logging.Formatter,
        max_bytes: int,
        backup_count: int,
) -> Optional[RotatingFileHandler]:
    """
    Open a size-rotated log file.

    Returns:
        Optional[RotatingFileHandler]: The handler, or None when the file
        cannot be opened (the failure is reported on stderr).
    """
    try:
        ensure_parent_dir(log_file)
        handler = RotatingFileHandler(
            log_file,
            maxBytes=int(max_bytes),
            backupCount=int(backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{log_file}': {e}\n")
        return None

    handler.setLevel(level)
    handler.setFormatter(formatter)
    tag_handler(handler)
    return handler
