from __future__ import annotations

"""
Unit tests for Hierarchy Domain Data Models.

Verifies serialization helpers and derived properties.
"""

from modelhierarchy.domain.models import (
    EntryRecord,
    HierarchyResult,
    NodeKind,
    NodeRef,
    OutlineNode,
    TreeNode,
)


def test_node_ref_root_detection() -> None:
    assert NodeRef().is_root
    assert not NodeRef(NodeKind.ITEM, own_id="I1").is_root


def test_tree_node_dict_shape() -> None:
    node = TreeNode(id="hub_H1", parent="#", text="Hub", type="hub", children=True)
    assert node.to_dict() == {"id": "hub_H1", "parent": "#", "text": "Hub", "type": "hub", "children": True}


def test_entry_folder_discriminator() -> None:
    assert EntryRecord(type_name="Folder", id="F", name="x").is_folder
    assert not EntryRecord(type_name="DesignItem", id="I", name="x").is_folder


def test_outline_omits_empty_children() -> None:
    tree = OutlineNode(text="a", children=[OutlineNode(text="b")])
    assert tree.to_dict() == {"text": "a", "children": [{"text": "b"}]}


def test_hierarchy_result_dict() -> None:
    result = HierarchyResult(component_version_id=None, hierarchy_text="Root (X)\n")
    assert result.to_dict() == {"componentVersionId": None, "hierarchy": "Root (X)\n"}
