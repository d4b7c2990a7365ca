from __future__ import annotations

"""
Unit tests for the Component Hierarchy Renderer.

Verifies the indentation text format, the nested node form, the reverse
outline parser and cycle detection during traversal.
"""

import pytest

from modelhierarchy.core.hierarchy.renderer import (
    parse_hierarchy_text,
    render_hierarchy_lines,
    render_hierarchy_text,
    to_nested_nodes,
)
from modelhierarchy.domain.errors import HierarchyCycleError
from modelhierarchy.domain.models import ComponentNode


@pytest.fixture
def sample_tree() -> ComponentNode:
    """R -> (A -> B), C"""
    b = ComponentNode(id="b", name="B")
    a = ComponentNode(id="a", name="A", children=[b])
    c = ComponentNode(id="c", name="C")
    return ComponentNode(id="r", name="R", children=[a, c])


def test_text_uses_root_line_and_five_space_indent(sample_tree):
    text = render_hierarchy_text(sample_tree)
    assert text == "Root (R)\n     A\n          B\n     C\n"


def test_custom_indent_width(sample_tree):
    lines = render_hierarchy_lines(sample_tree, indent=2)
    assert lines == ["Root (R)", "  A", "    B", "  C"]


def test_bare_root_renders_single_line():
    assert render_hierarchy_text(ComponentNode(id="r", name="Lonely")) == "Root (Lonely)\n"


def test_nested_nodes_shape(sample_tree):
    nested = to_nested_nodes(sample_tree)

    assert nested == {
        "id": "r",
        "text": "R",
        "children": [
            {"id": "a", "text": "A", "children": [{"id": "b", "text": "B", "children": []}]},
            {"id": "c", "text": "C", "children": []},
        ],
    }


def test_cycle_is_detected_by_both_renderers():
    a = ComponentNode(id="a", name="A")
    b = ComponentNode(id="b", name="B", children=[a])
    a.children.append(b)
    root = ComponentNode(id="r", name="R", children=[a])

    with pytest.raises(HierarchyCycleError):
        render_hierarchy_text(root)
    with pytest.raises(HierarchyCycleError):
        to_nested_nodes(root)


def test_parse_rebuilds_rendered_tree(sample_tree):
    outline = parse_hierarchy_text(render_hierarchy_text(sample_tree))

    assert len(outline) == 1
    assert [n.to_dict() for n in outline] == [
        {
            "text": "Root (R)",
            "children": [
                {"text": "A", "children": [{"text": "B"}]},
                {"text": "C"},
            ],
        }
    ]


def test_parse_keeps_nodes_with_empty_names():
    pad = ComponentNode(id="b", name="Pad")
    unnamed = ComponentNode(id="a", name="", children=[pad])
    root = ComponentNode(id="r", name="Vise", children=[unnamed, ComponentNode(id="c", name="Screw")])

    text = render_hierarchy_text(root)
    outline = parse_hierarchy_text(text)

    assert text == "Root (Vise)\n     \n          Pad\n     Screw\n"
    assert [n.to_dict() for n in outline] == [
        {
            "text": "Root (Vise)",
            "children": [
                {"text": "", "children": [{"text": "Pad"}]},
                {"text": "Screw"},
            ],
        }
    ]


def test_parse_skips_blank_lines_and_carriage_returns():
    text = "Top\r\n\r\n     Child\r\n   \nOther\n"

    outline = parse_hierarchy_text(text)

    assert [n.text for n in outline] == ["Top", "Other"]
    assert [c.text for c in outline[0].children] == ["Child"]


def test_parse_attaches_to_nearest_shallower_line():
    text = "A\n          deep\n     mid\n"

    outline = parse_hierarchy_text(text)

    assert [c.text for c in outline[0].children] == ["deep", "mid"]


def test_parse_empty_text():
    assert parse_hierarchy_text("") == []
