from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema (global options and the tree, hierarchy
and inventory subcommands) and translates parsed namespaces into
configuration overrides.
"""

import argparse
from typing import Any, Dict

from modelhierarchy.domain.models import ROOT_NODE_ID

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the modelhierarchy CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="modelhierarchy",
        description="Browse hubs, projects, folders and component hierarchies of remote designs.",
    )

    # --- Authentication ---
    p.add_argument(
        "--token",
        default=None,
        help="Bearer token. Defaults to the environment variable named in the configuration.",
    )

    # --- Provider and Pagination Limits ---
    p.add_argument(
        "--max-pages",
        dest="max_pages",
        type=int,
        default=None,
        help="Maximum number of pages accepted per paginated collection.",
    )
    p.add_argument(
        "--timeout",
        dest="pagination_timeout",
        type=int,
        default=None,
        help="Overall time budget in seconds for one paginated fetch (0 disables it).",
    )
    p.add_argument(
        "--request-timeout",
        dest="request_timeout",
        type=int,
        default=None,
        help="Per-request HTTP timeout in seconds.",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="Fail on orphaned occurrences and ambiguous name matches.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the persisted configuration.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the effective configuration as the new defaults.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        action="store_true",
        help="Also write a rotating diagnostic log in the user data directory.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit machine-readable JSON.",
    )

    sub = p.add_subparsers(dest="command")

    tree = sub.add_parser("tree", help="List the children of one tree node.")
    tree.add_argument(
        "node_id",
        nargs="?",
        default=ROOT_NODE_ID,
        help="Node id to expand ('#' lists the hubs).",
    )

    hierarchy = sub.add_parser("hierarchy", help="Print the full hierarchy of a component.")
    hierarchy.add_argument("--hub", dest="hub_name", required=True, help="Hub name.")
    hierarchy.add_argument("--project", dest="project_name", required=True, help="Project name.")
    hierarchy.add_argument("--component", dest="component_name", required=True, help="Component name.")
    hierarchy.add_argument(
        "--outline",
        action="store_true",
        help="Print the hierarchy as nested {text, children} JSON parsed from its text form.",
    )

    inventory = sub.add_parser("inventory", help="List every project folder across all hubs.")
    inventory.add_argument(
        "--items",
        action="store_true",
        help="List the entries of every folder instead of the folders themselves.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset (None means "not set").
    """
    overrides: Dict[str, Any] = {
        "max_pages": args.max_pages,
        "pagination_timeout": args.pagination_timeout,
        "request_timeout": args.request_timeout,
    }

    if args.strict:
        overrides["drop_orphans"] = False
        overrides["first_match_wins"] = False

    return overrides
