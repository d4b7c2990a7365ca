from __future__ import annotations

"""
Unit tests for the Lazy Tree Expander.

Walks the hub -> project -> folder -> item levels of the in-memory provider
and checks ids, parents, labels, ordering and error handling.
"""

import pytest

from modelhierarchy.core.browser.expander import LazyTreeExpander
from modelhierarchy.domain.errors import MalformedIdentifier, UnsupportedExpansion
from modelhierarchy.domain.models import FolderRecord, HubRecord, Page, ProjectRecord


@pytest.fixture
def expander(browse_provider):
    return LazyTreeExpander(browse_provider, "tok")


def _ids(nodes):
    return [n.id for n in nodes]


def test_root_lists_hubs(expander):
    nodes = expander.expand_node("#")

    assert [n.to_dict() for n in nodes] == [
        {"id": "hub_H1", "parent": "#", "text": "Hub One", "type": "hub", "children": True}
    ]


@pytest.mark.parametrize("sentinel", ["", None])
def test_empty_id_also_lists_hubs(expander, sentinel):
    assert _ids(expander.expand_node(sentinel)) == ["hub_H1"]
    assert expander.expand_node(sentinel)[0].parent == "#"


def test_unnamed_hub_gets_placeholder(make_provider):
    provider = make_provider(hubs=[HubRecord(id="H2", name=None)])

    nodes = LazyTreeExpander(provider, "tok").expand_node("#")

    assert nodes[0].text == "Unnamed Hub"


def test_hub_lists_projects_with_embedded_hub(expander):
    nodes = expander.expand_node("hub_H1")

    assert len(nodes) == 1
    assert nodes[0].id == "project_H1_P1"
    assert nodes[0].parent == "hub_H1"
    assert nodes[0].text == "Project One"
    assert nodes[0].type == "project"
    assert nodes[0].children is True


def test_project_lists_items_before_folders(expander):
    nodes = expander.expand_node("project_H1_P1")

    assert _ids(nodes) == ["item_I1", "folder_H1_F1"]
    assert [n.text for n in nodes] == ["DesignItem: Bracket", "Designs"]
    assert [n.children for n in nodes] == [False, True]
    assert all(n.parent == "project_H1_P1" for n in nodes)


def test_project_folders_follow_every_page(make_provider):
    provider = make_provider(
        projects={"H1": [ProjectRecord(id="P1", name="P")]},
        folder_pages={
            "P1": [
                Page(records=[FolderRecord(id="F1", name="One")], next_cursor="next"),
                Page(records=[FolderRecord(id="F2", name="Two")]),
            ]
        },
    )

    nodes = LazyTreeExpander(provider, "tok").expand_node("project_H1_P1")

    assert _ids(nodes) == ["folder_H1_F1", "folder_H1_F2"]
    assert provider.count("list_folders_in_project") == 2


def test_folder_lists_items_and_subfolders(expander, browse_provider):
    nodes = expander.expand_node("folder_H1_F1")

    assert _ids(nodes) == ["item_I2", "folder_H1_F2"]
    assert [n.text for n in nodes] == ["DesignItem: Gearbox", "Folder: Archive"]
    assert [n.type for n in nodes] == ["item", "folder"]
    assert ("list_folder_contents", "tok", "H1", "F1") in browse_provider.calls


def test_empty_folder_yields_no_children(expander):
    assert expander.expand_node("folder_H1_F2") == []


def test_item_cannot_be_expanded(expander, browse_provider):
    with pytest.raises(UnsupportedExpansion) as exc_info:
        expander.expand_node("item_I1")
    assert exc_info.value.kind == "item"
    assert browse_provider.calls == []


@pytest.mark.parametrize("node_id", ["bogus", "project_H1", "folder_%Q_F1"])
def test_malformed_ids_fail_before_provider_calls(expander, browse_provider, node_id):
    with pytest.raises(MalformedIdentifier):
        expander.expand_node(node_id)
    assert browse_provider.calls == []


def test_reserved_characters_survive_expansion(make_provider):
    provider = make_provider(
        hubs=[HubRecord(id="hub_a", name="A")],
        projects={"hub_a": [ProjectRecord(id="p_1", name="P")]},
    )
    expander = LazyTreeExpander(provider, "tok")

    hub = expander.expand_node("#")[0]
    project = expander.expand_node(hub.id)[0]
    expander.expand_node(project.id)

    assert ("list_projects", "tok", "hub_a") in provider.calls
    assert ("list_items_in_project", "tok", "p_1") in provider.calls
