from __future__ import annotations

"""
Logging Core Orchestrator.

Configures the root logger once per process. Records are pushed onto a
queue by a single tagged QueueHandler and written by a QueueListener, so
slow destinations (log files) never block provider calls.
"""

import atexit
import logging
import os
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import List

from modelhierarchy.infra.fs import get_user_data_dir
from modelhierarchy.infra.logging.config import LoggingConfig
from modelhierarchy.infra.logging.handlers import (
    create_console_handler,
    create_rotating_file_handler,
    is_own_handler,
    tag_handler,
)

CONFIGURED_FLAG_ATTR: str = "_modelhierarchy_configured"
QUEUE_LISTENER_ATTR: str = "_modelhierarchy_queue_listener"

LOG_FILE_NAME = "modelhierarchy.log"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def get_default_log_path(file_name: str = LOG_FILE_NAME) -> str:
    """Resolve the diagnostic log path inside the user data directory."""
    return os.path.join(get_user_data_dir(), "logs", file_name)


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger from a LoggingConfig.

    Repeated calls are no-ops unless `force` is True, in which case the
    previously installed handlers and listener are torn down first.

    Args:
        cfg: Logging setup to apply.
        force: Re-initialize even if already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    level = cfg.level_number()
    root.setLevel(level)
    _teardown(root)

    handlers: List[logging.Handler] = []
    if cfg.console:
        handlers.append(create_console_handler(level, logging.Formatter(cfg.console_fmt)))
    if cfg.log_file:
        fh = create_rotating_file_handler(
            cfg.log_file,
            level,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh is not None:
            handlers.append(fh)

    if not handlers:
        return root

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    listener = QueueListener(log_queue, *handlers, respect_handler_level=True)
    listener.start()

    root.addHandler(tag_handler(QueueHandler(log_queue)))
    setattr(root, QUEUE_LISTENER_ATTR, listener)
    setattr(root, CONFIGURED_FLAG_ATTR, True)

    # Flush pending records on interpreter shutdown
    atexit.register(_stop_listener, listener)
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _teardown(root: logging.Logger) -> None:
    """Detach our handlers and stop the running listener, if any."""
    for h in list(root.handlers):
        if is_own_handler(h):
            root.removeHandler(h)
            h.close()

    listener = getattr(root, QUEUE_LISTENER_ATTR, None)
    if listener is not None:
        _stop_listener(listener)
        setattr(root, QUEUE_LISTENER_ATTR, None)
    setattr(root, CONFIGURED_FLAG_ATTR, False)


def _stop_listener(listener: QueueListener) -> None:
    """Stop a listener, tolerating listeners that were already stopped."""
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
