from __future__ import annotations

"""
Component Hierarchy Renderer.

Serializes a materialized component tree into two forms:

- Indentation text: 'Root (<name>)' followed by one line per descendant,
  indented by a fixed number of spaces per depth level (pre-order).
- Nested nodes: plain dictionaries ready for JSON serialization by a UI
  tree widget.

Also provides the reverse conversion from indentation text to nested
outline nodes, grouping lines by depth with a stack.
"""

import logging
from typing import Any, Dict, List, Set, Tuple

from modelhierarchy.domain.constants import DEFAULT_INDENT_WIDTH, ROOT_LINE_TEMPLATE
from modelhierarchy.domain.errors import HierarchyCycleError
from modelhierarchy.domain.models import ComponentNode, OutlineNode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# TEXT RENDERING
# -----------------------------------------------------------------------------

def render_hierarchy_lines(root: ComponentNode, indent: int = DEFAULT_INDENT_WIDTH) -> List[str]:
    """
    Produce the indentation lines of a tree, root line first.

    Args:
        root: Root of the component tree.
        indent: Number of spaces per depth level.

    Returns:
        List[str]: Lines without trailing newlines.

    Raises:
        HierarchyCycleError: If a node is reached twice during traversal.
    """
    lines = [ROOT_LINE_TEMPLATE.format(name=root.name)]
    visited: Set[str] = {root.id}

    stack: List[Tuple[ComponentNode, int]] = [(c, 1) for c in reversed(root.children)]
    while stack:
        node, depth = stack.pop()
        if node.id in visited:
            raise HierarchyCycleError(node.id)
        visited.add(node.id)

        if node.name != node.name.lstrip() or "\n" in node.name:
            logger.warning(
                f"Component name {node.name!r} contains whitespace that will shift its parsed depth."
            )

        lines.append(" " * (indent * depth) + node.name)
        stack.extend((c, depth + 1) for c in reversed(node.children))

    return lines


def render_hierarchy_text(root: ComponentNode, indent: int = DEFAULT_INDENT_WIDTH) -> str:
    """Render the tree as newline-terminated indentation text."""
    return "".join(line + "\n" for line in render_hierarchy_lines(root, indent))

# -----------------------------------------------------------------------------
# STRUCTURED RENDERING
# -----------------------------------------------------------------------------

def to_nested_nodes(root: ComponentNode) -> Dict[str, Any]:
    """
    Convert the tree into nested dictionaries: {"id", "text", "children"}.

    Raises:
        HierarchyCycleError: If a node is reached twice during traversal.
    """
    visited: Set[str] = set()

    def convert(node: ComponentNode) -> Dict[str, Any]:
        if node.id in visited:
            raise HierarchyCycleError(node.id)
        visited.add(node.id)
        return {"id": node.id, "text": node.name, "children": []}

    result = convert(root)
    stack: List[Tuple[ComponentNode, Dict[str, Any]]] = [(root, result)]
    while stack:
        node, data = stack.pop()
        for child in node.children:
            child_data = convert(child)
            data["children"].append(child_data)
            stack.append((child, child_data))

    return result

# -----------------------------------------------------------------------------
# TEXT PARSING
# -----------------------------------------------------------------------------

def parse_hierarchy_text(text: str, indent: int = DEFAULT_INDENT_WIDTH) -> List[OutlineNode]:
    """
    Rebuild a forest of outline nodes from indentation text.

    A line's level is its leading whitespace count divided by `indent`.
    Each line attaches to the nearest preceding line with a strictly lower
    level, or becomes a new root when there is none. Blank lines are skipped;
    a line of indentation only, at least one level deep, is a node whose
    name is empty.

    Args:
        text: Indentation text, as produced by render_hierarchy_text.
        indent: Number of whitespace characters per level.

    Returns:
        List[OutlineNode]: Root nodes in text order.
    """
    roots: List[OutlineNode] = []
    stack: List[Tuple[int, OutlineNode]] = []

    for raw in text.split("\n"):
        line = raw.rstrip("\r")
        name = line.lstrip()
        level = (len(line) - len(name)) // indent
        # Indentation-only lines below the root level carry an empty name
        if not name and level == 0:
            continue
        node = OutlineNode(text=name)

        while stack and stack[-1][0] >= level:
            stack.pop()

        if stack:
            stack[-1][1].children.append(node)
        else:
            roots.append(node)

        stack.append((level, node))

    return roots
