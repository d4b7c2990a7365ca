from __future__ import annotations

"""
Domain Constants.

Centralizes remote endpoints, identifier format tokens, rendering defaults
and application and configuration schema versions.
"""

APP_VERSION = "1.0.0"
CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# REMOTE ENDPOINTS
# -----------------------------------------------------------------------------

# Data endpoint: hubs, folders and folder contents.
DATA_API_URL = "https://developer.api.autodesk.com/graphql"
# Manufacturing endpoint: projects, name resolution and occurrences.
MFG_API_URL = "https://developer.api.autodesk.com/mfg/graphql"

TOKEN_ENV_VAR = "MODELHIERARCHY_TOKEN"

# -----------------------------------------------------------------------------
# PAGINATION AND RENDERING
# -----------------------------------------------------------------------------

DEFAULT_MAX_PAGES = 1000
DEFAULT_REQUEST_TIMEOUT = 30
DEFAULT_PAGINATION_TIMEOUT = 0
DEFAULT_INDENT_WIDTH = 5

ROOT_LINE_TEMPLATE = "Root ({name})"
UNNAMED_HUB_LABEL = "Unnamed Hub"

# -----------------------------------------------------------------------------
# IDENTIFIER FORMAT
# -----------------------------------------------------------------------------

ID_SEPARATOR = "_"
ID_ESCAPE = "%"
