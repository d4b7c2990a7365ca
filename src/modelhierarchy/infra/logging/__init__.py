from __future__ import annotations

from .config import LoggingConfig
from .core import (
    CONFIGURED_FLAG_ATTR,
    QUEUE_LISTENER_ATTR,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from .handlers import HANDLER_TAG_ATTR

__all__ = [
    "LoggingConfig",
    "configure_logging",
    "get_logger",
    "get_default_log_path",
    "CONFIGURED_FLAG_ATTR",
    "QUEUE_LISTENER_ATTR",
    "HANDLER_TAG_ATTR",
]
