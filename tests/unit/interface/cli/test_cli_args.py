from __future__ import annotations

"""Unit tests for CLI argument parsing and override mapping."""

import pytest

from modelhierarchy.interface.cli.args import args_to_overrides, build_parser


def test_tree_defaults_to_root():
    args = build_parser().parse_args(["tree"])
    assert args.command == "tree"
    assert args.node_id == "#"


def test_hierarchy_requires_names():
    parser = build_parser()
    with pytest.raises(SystemExit):
        parser.parse_args(["hierarchy", "--hub", "H"])


def test_hierarchy_arguments():
    args = build_parser().parse_args(
        ["--json", "hierarchy", "--hub", "H", "--project", "P", "--component", "C", "--outline"]
    )
    assert (args.hub_name, args.project_name, args.component_name) == ("H", "P", "C")
    assert args.outline is True
    assert args.json_output is True


def test_unset_limits_map_to_none():
    overrides = args_to_overrides(build_parser().parse_args(["inventory"]))
    assert overrides == {"max_pages": None, "pagination_timeout": None, "request_timeout": None}


def test_limits_and_strict_mode_map_to_overrides():
    args = build_parser().parse_args(
        ["--max-pages", "3", "--timeout", "20", "--request-timeout", "5", "--strict", "tree"]
    )

    overrides = args_to_overrides(args)

    assert overrides["max_pages"] == 3
    assert overrides["pagination_timeout"] == 20
    assert overrides["request_timeout"] == 5
    assert overrides["drop_orphans"] is False
    assert overrides["first_match_wins"] is False
