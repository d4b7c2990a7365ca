from __future__ import annotations

"""
Component Hierarchy Tree Builder.

Reconstructs a rooted tree from the flat, paginated list of occurrence
records. Occurrences arrive in no particular topological order across
pages, so the build runs in two passes over the fully accumulated list:
first every child id gets its node, then every edge is linked.
"""

import logging
from typing import Dict, List, Optional, Sequence, Set

from modelhierarchy.domain.errors import HierarchyCycleError, OrphanedOccurrence
from modelhierarchy.domain.models import ComponentNode, OccurrenceRecord

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_hierarchy_tree(
        root_id: str,
        root_name: str,
        occurrences: Sequence[OccurrenceRecord],
        *,
        drop_orphans: bool = True,
) -> ComponentNode:
    """
    Convert occurrence records into a tree rooted at the queried component.

    Policies:
    - Occurrences without a parent, or whose parent is the root, attach to root.
    - A child id is attached once; later occurrences of the same id are
      repeated instances and are not linked a second time.
    - Occurrences whose parent never appears (neither as a child nor as the
      root) are orphans. They are dropped, together with everything below
      them, unless `drop_orphans` is False.
    - Children keep encounter order.

    Args:
        root_id: Component version id of the root.
        root_name: Display name of the root.
        occurrences: Accumulated occurrence records, in page order.
        drop_orphans: Drop orphaned occurrences instead of failing.

    Returns:
        ComponentNode: The root node of the assembled tree.

    Raises:
        OrphanedOccurrence: On an orphan when `drop_orphans` is False.
        HierarchyCycleError: If the occurrences describe a cycle.
    """
    lookup = _index_nodes(occurrences)

    root = ComponentNode(id=root_id, name=root_name)
    lookup[root_id] = root

    parent_of: Dict[str, str] = {}
    orphan_ids: Set[str] = set()

    for occ in occurrences:
        child_id = occ.child_id
        parent_id = occ.parent_id

        if child_id == root_id or child_id == parent_id:
            raise HierarchyCycleError(child_id)

        if parent_id is None or parent_id == root_id:
            parent = root
        elif parent_id in lookup:
            parent = lookup[parent_id]
        else:
            if not drop_orphans:
                raise OrphanedOccurrence(child_id, parent_id)
            logger.debug(f"Dropping occurrence '{child_id}': unknown parent '{parent_id}'.")
            orphan_ids.add(child_id)
            continue

        if child_id in parent_of:
            continue

        if _is_ancestor(child_id, parent.id, parent_of):
            raise HierarchyCycleError(child_id)

        parent.children.append(lookup[child_id])
        parent_of[child_id] = parent.id

    lost = _unreachable(root, lookup)
    if lost:
        for node_id in lost:
            if node_id not in orphan_ids:
                logger.debug(f"Dropping occurrence '{node_id}': an ancestor was orphaned.")
        logger.warning(
            f"Dropped {len(lost)} orphaned occurrence(s) while building '{root_name}'."
        )

    return root

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _index_nodes(occurrences: Sequence[OccurrenceRecord]) -> Dict[str, ComponentNode]:
    """Create one node per distinct child id; the first name seen wins."""
    lookup: Dict[str, ComponentNode] = {}
    for occ in occurrences:
        if occ.child_id not in lookup:
            lookup[occ.child_id] = ComponentNode(id=occ.child_id, name=occ.child_name)
    return lookup


def _is_ancestor(candidate: str, node_id: str, parent_of: Dict[str, str]) -> bool:
    """Walk the linked parent chain from `node_id` looking for `candidate`."""
    current: Optional[str] = node_id
    while current is not None:
        if current == candidate:
            return True
        current = parent_of.get(current)
    return False


def _unreachable(root: ComponentNode, lookup: Dict[str, ComponentNode]) -> List[str]:
    """Ids of indexed nodes that are not linked below the root, in index order."""
    reached: Set[str] = set()
    stack = [root]
    while stack:
        node = stack.pop()
        reached.add(node.id)
        stack.extend(node.children)
    return [node_id for node_id in lookup if node_id not in reached]
