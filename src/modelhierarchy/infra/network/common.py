from __future__ import annotations

from typing import Dict

from modelhierarchy.domain.constants import APP_VERSION

USER_AGENT = f"ModelHierarchy-Client/{APP_VERSION}"
DEFAULT_TIMEOUT = 30
JSON_CONTENT_TYPE = "application/json"


def build_headers(token: str) -> Dict[str, str]:
    """Build a fresh header set carrying the bearer token for a single request."""
    return {
        "User-Agent": USER_AGENT,
        "Content-Type": JSON_CONTENT_TYPE,
        "Authorization": f"Bearer {token}",
    }
