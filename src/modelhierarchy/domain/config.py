from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of connection settings and aggregation policies
as JSON in the user data directory. Unknown or missing keys fall back to the
defaults so older files keep loading after new settings are introduced.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from modelhierarchy.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DATA_API_URL,
    DEFAULT_INDENT_WIDTH,
    DEFAULT_MAX_PAGES,
    DEFAULT_PAGINATION_TIMEOUT,
    DEFAULT_REQUEST_TIMEOUT,
    MFG_API_URL,
    TOKEN_ENV_VAR,
)
from modelhierarchy.infra.fs import ensure_parent_dir, get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE = os.path.join(get_user_data_dir(), "config.json")

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Remote provider
        "data_api_url": DATA_API_URL,
        "mfg_api_url": MFG_API_URL,
        "request_timeout": DEFAULT_REQUEST_TIMEOUT,
        "token_env_var": TOKEN_ENV_VAR,

        # Pagination guards
        "max_pages": DEFAULT_MAX_PAGES,
        "pagination_timeout": DEFAULT_PAGINATION_TIMEOUT,

        # Tree building and rendering
        "indent_width": DEFAULT_INDENT_WIDTH,
        "drop_orphans": True,
        "first_match_wins": True,
    }


def get_default_app_state() -> Dict[str, Any]:
    """Default content of config.json: schema version plus the last saved session."""
    return {
        "version": CURRENT_CONFIG_VERSION,
        "last_session": get_default_config(),
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_app_state() -> Dict[str, Any]:
    """
    Load application state from disk.

    A missing, unreadable or malformed file yields the default state; a
    partial `last_session` is layered over the defaults.

    Returns:
        Dict[str, Any]: The loaded state.
    """
    state = get_default_app_state()
    data = _read_state_file(CONFIG_FILE)
    if data is None:
        return state

    session = data.get("last_session")
    if isinstance(session, dict):
        state["last_session"].update(session)
    return state


def save_app_state(state: Dict[str, Any]) -> bool:
    """
    Write application state to disk, stamped with the current schema version.

    Returns:
        bool: True when the file was written.
    """
    payload = dict(state, version=CURRENT_CONFIG_VERSION)
    try:
        ensure_parent_dir(CONFIG_FILE)
        with open(CONFIG_FILE, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)
    except OSError as e:
        logger.error(f"Cannot write configuration to {CONFIG_FILE}: {e}")
        return False

    logger.info(f"Configuration saved to {CONFIG_FILE}.")
    return True


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_config() -> Dict[str, Any]:
    """Return the persisted session layered over the defaults."""
    return dict(load_app_state()["last_session"])


def save_config(config: Dict[str, Any]) -> bool:
    """
    Persist a configuration as the new session defaults.

    Only known settings are stored; unrelated keys are discarded.
    """
    known = get_default_config()
    session = {k: config[k] for k in known if k in config}
    return save_app_state({"last_session": session})


def _read_state_file(path: str) -> Optional[Dict[str, Any]]:
    if not os.path.exists(path):
        logger.debug(f"No configuration file at {path}; using defaults.")
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Ignoring unreadable configuration {path}: {e}")
        return None

    if not isinstance(data, dict):
        logger.warning(f"Ignoring configuration {path}: top level is not an object.")
        return None
    return data
