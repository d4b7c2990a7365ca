from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration
resolution (defaults, persisted state and CLI overrides), token lookup,
command dispatch and result rendering. Maps the error taxonomy to exit
codes: 0 success, 1 provider or protocol failure, 2 client error,
130 interrupted.
"""

import argparse
import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from modelhierarchy.core.browser.expander import LazyTreeExpander
from modelhierarchy.core.browser.inventory import list_all_folder_items, list_all_folders
from modelhierarchy.core.hierarchy.paginator import Deadline
from modelhierarchy.core.hierarchy.renderer import parse_hierarchy_text, to_nested_nodes
from modelhierarchy.core.hierarchy.service import HierarchyService
from modelhierarchy.core.provider import HierarchyProvider
from modelhierarchy.core.validator import validate_config
from modelhierarchy.domain.config import get_default_config, load_config, save_config
from modelhierarchy.domain.errors import (
    HierarchyError,
    MalformedIdentifier,
    NotFound,
    UnsupportedExpansion,
)
from modelhierarchy.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from modelhierarchy.infra.network import GraphQLClient, GraphQLHierarchyProvider
from modelhierarchy.interface.cli import args as cli_args

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CLIENT_ERROR = 2
EXIT_INTERRUPTED = 130

_CLIENT_ERRORS = (MalformedIdentifier, UnsupportedExpansion, NotFound)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None, provider: Optional[HierarchyProvider] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.
        provider: Provider to use instead of the GraphQL one built from the configuration.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "INFO"
    log_path = get_default_log_path() if args.log_file else None
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=log_path))

    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    if args.save_config:
        if not save_config(conf):
            print("ERROR: Configuration could not be saved.", file=sys.stderr)
            return EXIT_FAILURE
        if not args.command:
            return EXIT_OK

    if not args.command:
        parser.print_help(sys.stderr)
        return EXIT_CLIENT_ERROR

    token = args.token or os.environ.get(conf["token_env_var"], "")
    if not token:
        msg = f"No token supplied. Use --token or set {conf['token_env_var']}."
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_CLIENT_ERROR

    if provider is None:
        provider = GraphQLHierarchyProvider(
            GraphQLClient(timeout=conf["request_timeout"]),
            data_url=conf["data_api_url"],
            mfg_url=conf["mfg_api_url"],
        )

    try:
        if args.command == "tree":
            return _run_tree(args, conf, provider, token)
        if args.command == "hierarchy":
            return _run_hierarchy(args, conf, provider, token)
        return _run_inventory(args, conf, provider, token)
    except _CLIENT_ERRORS as e:
        logger.error(str(e))
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_CLIENT_ERROR
    except HierarchyError as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.critical(f"Unexpected failure: {e}", exc_info=True)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_FAILURE

# -----------------------------------------------------------------------------
# COMMANDS
# -----------------------------------------------------------------------------

def _run_tree(args: argparse.Namespace, conf: Dict[str, Any], provider: HierarchyProvider, token: str) -> int:
    expander = LazyTreeExpander(
        provider,
        token,
        max_pages=conf["max_pages"],
        pagination_timeout=conf["pagination_timeout"],
    )
    nodes = expander.expand_node(args.node_id)

    if args.json_output:
        print(json.dumps([n.to_dict() for n in nodes], ensure_ascii=False, indent=2))
    else:
        for n in nodes:
            marker = "+" if n.children else " "
            print(f"{marker} {n.id}\t{n.text}")
    return EXIT_OK


def _run_hierarchy(args: argparse.Namespace, conf: Dict[str, Any], provider: HierarchyProvider, token: str) -> int:
    service = HierarchyService(
        provider,
        token,
        max_pages=conf["max_pages"],
        pagination_timeout=conf["pagination_timeout"],
        indent_width=conf["indent_width"],
        drop_orphans=conf["drop_orphans"],
        first_match_wins=conf["first_match_wins"],
    )
    result = service.get_component_hierarchy(args.hub_name, args.project_name, args.component_name)

    if args.outline:
        outline = parse_hierarchy_text(result.hierarchy_text, conf["indent_width"])
        print(json.dumps([n.to_dict() for n in outline], ensure_ascii=False, indent=2))
    elif args.json_output:
        payload = result.to_dict()
        payload["nodes"] = to_nested_nodes(result.root) if result.root is not None else None
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        sys.stdout.write(result.hierarchy_text)
    return EXIT_OK


def _run_inventory(args: argparse.Namespace, conf: Dict[str, Any], provider: HierarchyProvider, token: str) -> int:
    collect = list_all_folder_items if args.items else list_all_folders
    entries = collect(
        provider,
        token,
        max_pages=conf["max_pages"],
        deadline=Deadline(conf["pagination_timeout"]),
    )

    if args.json_output:
        print(json.dumps([asdict(e) for e in entries], ensure_ascii=False, indent=2))
    else:
        for e in entries:
            print(f"{e.hub_id}\t{e.project_id}\t{e.folder_id}\t{e.type_name}\t{e.name}")
    return EXIT_OK

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge the overrides that were actually set into the base configuration."""
    out = dict(base)
    for k, v in overrides.items():
        if k in base and v is not None:
            out[k] = v
    return out


if __name__ == "__main__":
    sys.exit(main())
